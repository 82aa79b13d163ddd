from tverseries.models import ParsedEpisode, VideoInfo
from tverseries.ui import ConsoleUI


def test_plain_log_labels(capsys):
    ui = ConsoleUI()
    ui.log_event("Token acquired", level="success")
    ui.log_event("GET something", level="muted")
    ui.finalize()

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["[DONE] Token acquired", "  GET something"]


def test_episode_listing(capsys):
    ui = ConsoleUI()
    ui.show_episodes(
        [
            ParsedEpisode(1, "第1話", "https://tver.jp/episodes/ep1", "ep1", "第1話"),
            ParsedEpisode(0, "特別編", "https://tver.jp/episodes/ep9", "ep9", "特別編"),
        ]
    )

    out = capsys.readouterr().out
    assert " 1. Episode 1: 第1話" in out
    assert " 2. [number unknown]: 特別編" in out
    assert "Total: 2 episodes" in out


def test_video_info_skips_empty_fields(capsys):
    ConsoleUI().show_video_info(VideoInfo(id="ep1", title="第1話"))

    out = capsys.readouterr().out
    assert "Title: 第1話" in out
    assert "Duration" not in out
    assert "Episode number" not in out


def test_clearing_status_blanks_the_line(capsys):
    ui = ConsoleUI()
    ui.update_status("Resolving series...")
    ui.update_status(None)

    out = capsys.readouterr().out
    status = "[INFO] Resolving series..."
    assert out == "\r" + status + "\r" + " " * len(status) + "\r"
