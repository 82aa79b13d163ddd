import json

from tverseries.models import ParsedEpisode, VideoInfo
from tverseries.storage import load_series_file, save_series_file, save_video_info


def sample_episodes():
    return [
        ParsedEpisode(1, "第1話 出会い", "https://tver.jp/episodes/ep1", "ep1", "第1話 出会い"),
        ParsedEpisode(3, "第3話", "https://tver.jp/episodes/ep3", "ep3", "第3話"),
        ParsedEpisode(0, "総集編", "https://tver.jp/episodes/ep9", "ep9", "総集編"),
    ]


def test_series_file_layout(tmp_path):
    path = save_series_file(sample_episodes(), tmp_path / "series_info.json")

    document = json.loads(path.read_text(encoding="utf-8"))
    assert document["count"] == 3
    assert document["episodes"][0] == {
        "EpisodeNumber": 1,
        "Title": "第1話 出会い",
        "URL": "https://tver.jp/episodes/ep1",
        "ID": "ep1",
        "OriginalTitle": "第1話 出会い",
    }
    assert "第1話" in path.read_text(encoding="utf-8")


def test_series_file_reload_preserves_order(tmp_path):
    episodes = sample_episodes()
    path = save_series_file(episodes, tmp_path / "nested" / "series_info.json")

    reloaded = load_series_file(path)

    assert len(reloaded) == len(episodes)
    assert reloaded == episodes


def test_empty_series_file(tmp_path):
    path = save_series_file([], tmp_path / "series_info.json")
    assert json.loads(path.read_text(encoding="utf-8")) == {"episodes": [], "count": 0}
    assert load_series_file(path) == []


def test_video_info_file(tmp_path):
    info = VideoInfo(id="epuk32qiqy", title="第1話", series="ドラマ", duration=1420.5)

    path = save_video_info(info, tmp_path)

    assert path.name == "epuk32qiqy_info.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["series"] == "ドラマ"
    assert data["duration"] == 1420.5
    assert data["episode_number"] == 0
