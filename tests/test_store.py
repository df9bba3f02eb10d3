import logging

from webtris_store import HighScoreStore


def test_missing_file_reads_zero(tmp_path):
    assert HighScoreStore(tmp_path / "nope.json").load() == 0


def test_save_and_load(tmp_path):
    store = HighScoreStore(tmp_path / "sub" / "hs.json")
    assert store.save(120)
    assert HighScoreStore(store.path).load() == 120


def test_corrupt_file_reads_zero(tmp_path, caplog):
    path = tmp_path / "hs.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        assert HighScoreStore(path).load() == 0
    assert "could not read high score" in caplog.text


def test_invalid_values_read_zero(tmp_path):
    path = tmp_path / "hs.json"
    for raw in ('{"high_score": "12"}', '{"high_score": -3}', '[1, 2]', '{"high_score": true}', "{}"):
        path.write_text(raw, encoding="utf-8")
        assert HighScoreStore(path).load() == 0


def test_failed_write_is_reported_not_raised(tmp_path, caplog):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    store = HighScoreStore(blocker / "hs.json")
    with caplog.at_level(logging.WARNING):
        assert store.save(10) is False
    assert "could not save high score" in caplog.text
