# tests/test_cli.py - CLI smoke checks
import json

import pytest

from persian_word_guesser.cli.cli import CLI, main
from persian_word_guesser.core.loader import load_dictionary
from persian_word_guesser.core.wordlist import read_word_list, write_word_list
from persian_word_guesser.utils.config_manager import Config
from persian_word_guesser.utils.model_store import PreferenceStore


@pytest.fixture
def config_path(tmp_path, words):
    wl = tmp_path / "words.txt"
    write_word_list(words, str(wl))
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "word_list": str(wl),
                "state_path": str(tmp_path / "state.json"),
                "log_path": "",
            }
        ),
        encoding="utf8",
    )
    return path


def test_guess_command(config_path, capsys):
    assert main(["--config", str(config_path), "guess", "کتا"]) == 0
    out = capsys.readouterr().out.split()
    assert out[:3] == ["کتاب", "کتابها", "کتابخانه"]


def test_guess_command_no_results(config_path, capsys):
    assert main(["--config", str(config_path), "guess", "xyz"]) == 1
    assert "no guesses" in capsys.readouterr().out


def test_build_command(tmp_path, config_path):
    raw = tmp_path / "raw.txt"
    raw.write_text("کتاب\nbook\n\nکار\n", encoding="utf-8")
    dst = tmp_path / "dict.bin"
    assert main(["--config", str(config_path), "build", str(raw), str(dst)]) == 0
    assert read_word_list(str(dst)) == ["کتاب", "کار"]


def test_interactive_pick_and_save(tmp_path, words):
    cfg = Config(str(tmp_path / "config.json"))
    store = PreferenceStore(str(tmp_path / "state.json"))
    guesser = load_dictionary(words, store=store).guesser
    cli = CLI(cfg, guesser)

    cli.handle("کتا")
    assert cli.session.strip.candidates[1:] == ["کتاب", "کتابها", "کتابخانه"]
    cli.handle("3")
    assert guesser.history == ["کتابخانه"]

    cli.handle("/add کتابدار")
    cli.handle("/quit")
    assert not cli.running
    assert store.get("selected-words") == "کتابخانه\nکتابدار\n"


def test_unknown_command_keeps_running(tmp_path, guesser):
    cli = CLI(Config(str(tmp_path / "config.json")), guesser)
    cli.handle("/frobnicate")
    cli.handle("/stats")
    cli.handle("/history")
    assert cli.running


def test_bad_config_value_keeps_running(tmp_path, guesser):
    cfg = Config(str(tmp_path / "config.json"))
    cli = CLI(cfg, guesser)
    cli.handle("/config max_total_guesses abc")
    assert cli.running
    assert cfg["max_total_guesses"] == 90
