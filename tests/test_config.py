# tests/test_config.py
import json

from persian_word_guesser.utils.config_manager import DEFAULTS, Config


def test_defaults_written_on_first_use(tmp_path):
    path = tmp_path / "config.json"
    cfg = Config(str(path))
    assert path.exists()
    assert cfg["max_total_guesses"] == 90
    assert cfg["max_returned_guesses"] == 30
    assert json.loads(path.read_text(encoding="utf8"))["state_key"] == "selected-words"


def test_set_coerces_types(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    assert cfg.set("max_returned_guesses", "12")
    assert cfg["max_returned_guesses"] == 12
    assert cfg.set("select_suggestion", "false")
    assert cfg["select_suggestion"] is False
    assert Config(str(tmp_path / "config.json"))["max_returned_guesses"] == 12


def test_unknown_key_rejected(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    assert not cfg.set("theme", "dark")
    assert "theme" not in cfg.data


def test_corrupt_file_keeps_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf8")
    cfg = Config(str(path))
    assert cfg.data == DEFAULTS


def test_bad_value_rejected(tmp_path):
    cfg = Config(str(tmp_path / "config.json"))
    assert not cfg.set("max_returned_guesses", "lots")
    assert cfg["max_returned_guesses"] == 30
    assert Config(str(tmp_path / "config.json"))["max_returned_guesses"] == 30
