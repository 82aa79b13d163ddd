import re

import pytest

from tverseries.numbering import NumberRule, extract_episode_number


@pytest.mark.parametrize(
    "title, expected",
    [
        ("第1話", 1),
        ("ドラマ 第12話「始まり」", 12),
        ("Episode 3", 3),
        ("Special Episode   45 part", 45),
        ("#7 the one with the hash", 7),
        ("第5話 Episode 9 #11", 5),
        ("#7 Episode 3", 3),
    ],
)
def test_extracts_number_by_priority(title, expected):
    assert extract_episode_number(title) == expected


@pytest.mark.parametrize(
    "title",
    ["", "総集編", "episode 4", "Episode", "第話", "No. 8"],
)
def test_unrecognised_titles_yield_zero(title):
    assert extract_episode_number(title) == 0


def test_unparseable_capture_falls_through_to_next_rule():
    assert extract_episode_number("Episode 99999999999999999999 #4") == 4
    assert extract_episode_number("第99999999999999999999話") == 0


def test_full_width_digits_are_not_numbers():
    assert extract_episode_number("第１話") == 0


def test_custom_rules_are_tried_in_order():
    rules = (
        NumberRule("ep", re.compile(r"Ep\.([0-9]+)")),
        NumberRule("hash", re.compile(r"#([0-9]+)")),
    )
    assert extract_episode_number("#2 Ep.6", rules) == 6
    assert extract_episode_number("#2", rules) == 2
