"""Episode numbers pulled out of free-text episode titles."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

# Largest value a captured number may take; anything above is not a valid number.
MAX_EPISODE_NUMBER = 2**63 - 1

UNKNOWN_EPISODE = 0


def parse_int(text: str) -> Optional[int]:
    try:
        value = int(text)
    except ValueError:
        return None
    if value > MAX_EPISODE_NUMBER:
        return None
    return value


@dataclass(frozen=True)
class NumberRule:
    name: str
    pattern: re.Pattern[str]
    parse: Callable[[str], Optional[int]] = parse_int

    def apply(self, title: str) -> Optional[int]:
        match = self.pattern.search(title)
        if not match:
            return None
        return self.parse(match.group(1))


# Order matters: the first rule that yields a number wins.
DEFAULT_RULES: tuple[NumberRule, ...] = (
    NumberRule("japanese", re.compile(r"第([0-9]+)話")),
    NumberRule("english", re.compile(r"Episode\s+([0-9]+)")),
    NumberRule("hash", re.compile(r"#([0-9]+)")),
)


def extract_episode_number(title: str, rules: Sequence[NumberRule] = DEFAULT_RULES) -> int:
    """Return the episode number found in ``title``, or 0 when none is recognised.

    A rule whose pattern matches but whose capture does not parse falls
    through to the next rule.
    """
    for rule in rules:
        number = rule.apply(title)
        if number is not None:
            return number
    return UNKNOWN_EPISODE
