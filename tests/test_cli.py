# tests/test_cli.py - end-to-end runs of the command line entry point
import io
import json

import pytest
from rich.console import Console

from adaptive_speller.cli.cli import main
from adaptive_speller.utils.config_manager import Config


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=400, soft_wrap=True,
                   color_system=None, highlight=False)


@pytest.fixture
def cfg(tmp_path):
    return Config(str(tmp_path / "speller.json"))


def write(tmp_path, name, text):
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return str(p)


def output(console):
    return console.file.getvalue()


def test_cat_dog_bird(tmp_path, console, cfg):
    d = write(tmp_path, "dict.txt", "cat dog bird")
    t = write(tmp_path, "text.txt", "cat DOG birdd")
    assert main([d, t], console=console, cfg=cfg) == 0
    out = output(console)
    assert "Incorrect word detected at 3. word in the file: birdd" in out
    assert "word in the file: cat" not in out
    assert "word in the file: DOG" not in out
    assert "File check is completed." in out
    assert "3 words checked, 1 incorrect." in out


def test_dictionary_dumps_show_reordering(tmp_path, console, cfg):
    d = write(tmp_path, "dict.txt", "cherry\ncorn\ncabbage\n")
    t = write(tmp_path, "text.txt", "cherry cherry cherry cabbage")
    main([d, t], console=console, cfg=cfg)
    out = output(console)
    before, rest = out.split("DICTIONARY AFTER SORTING:")
    after, final = rest.split("UPDATED VERSION OF DICTIONARY")
    assert "cherry - corn - cabbage" in before
    assert "cabbage - cherry - corn" in after
    assert "cherry - cabbage - corn" in final


def test_show_dictionary_off(tmp_path, console):
    p = tmp_path / "speller.json"
    p.write_text(json.dumps({"show_dictionary": False}))
    d = write(tmp_path, "dict.txt", "cat")
    t = write(tmp_path, "text.txt", "cat")
    main([d, t], console=console, cfg=Config(str(p)))
    out = output(console)
    assert "DICTIONARY" not in out
    assert "File check is completed." in out


def test_trace_hits(tmp_path, console):
    p = tmp_path / "speller.json"
    p.write_text(json.dumps({"trace_hits": True}))
    d = write(tmp_path, "dict.txt", "cat cow")
    t = write(tmp_path, "text.txt", "cow cow cat")
    main([d, t], console=console, cfg=Config(str(p)))
    out = output(console)
    assert "Most accessed words beginning with letter 'c'" in out
    assert "cow(2) - cat(1)" in out


def test_usage_returns_zero(console, cfg):
    assert main(["only-dictionary.txt"], console=console, cfg=cfg) == 0
    out = output(console)
    assert "Not enough argument." in out
    assert "Usage:" in out
    assert main([], console=console, cfg=cfg) == 0


def test_extra_arguments_ignored(tmp_path, console, cfg):
    d = write(tmp_path, "dict.txt", "cat")
    t = write(tmp_path, "text.txt", "cat")
    assert main([d, t, "ignored"], console=console, cfg=cfg) == 0
    assert "0 incorrect" in output(console)


def test_unreadable_file_returns_zero(tmp_path, console):
    log_path = tmp_path / "logs" / "run.log"
    cfg = Config(str(tmp_path / "none.json"))
    cfg.data["log_path"] = str(log_path)
    d = write(tmp_path, "dict.txt", "cat")
    missing = str(tmp_path / "missing.txt")
    assert main([d, missing], console=console, cfg=cfg) == 0
    assert f"Error reading file: {missing}" in output(console)
    assert "TEST RESULTS" not in output(console)
    assert "Error reading file" in log_path.read_text(encoding="utf-8")


def test_log_file_records_phases(tmp_path, console):
    log_path = tmp_path / "run.log"
    cfg = Config(str(tmp_path / "none.json"))
    cfg.data["log_path"] = str(log_path)
    d = write(tmp_path, "dict.txt", "b a")
    t = write(tmp_path, "text.txt", "a x")
    main([d, t], console=console, cfg=cfg)
    logged = log_path.read_text(encoding="utf-8")
    for phase in ("load done", "sort done", "check done"):
        assert phase in logged
    assert "checked 2 words" in logged


@pytest.mark.parametrize("bad", [{"initial_capacity": 0}, {"initial_capacity": "4"},
                                 {"growth_factor": 2.5}])
def test_bad_config_values_still_run(tmp_path, console, bad):
    p = tmp_path / "speller.json"
    p.write_text(json.dumps(bad))
    d = write(tmp_path, "dict.txt", "cat cow crow")
    t = write(tmp_path, "text.txt", "cow caat")
    assert main([d, t], console=console, cfg=Config(str(p))) == 0
    out = output(console)
    assert "Incorrect word detected at 2. word in the file: caat" in out
    assert "File check is completed." in out


def test_paths_starting_with_dash(tmp_path, console, cfg, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write(tmp_path, "-dict.txt", "cat dog")
    write(tmp_path, "-text.txt", "dog dgo")
    assert main(["-dict.txt", "-text.txt"], console=console, cfg=cfg) == 0
    out = output(console)
    assert "Not enough argument." not in out
    assert "word in the file: dgo" in out
    assert "File check is completed." in out


def test_core_warnings_go_to_log_file_only(tmp_path, console, capsys):
    log_path = tmp_path / "run.log"
    cfg = Config(str(tmp_path / "none.json"))
    cfg.data["log_path"] = str(log_path)
    d = write(tmp_path, "dict.txt", "cat 42 dog")
    t = write(tmp_path, "text.txt", "cat")
    assert main([d, t], console=console, cfg=cfg) == 0
    logged = log_path.read_text(encoding="utf-8")
    assert "WARNING" in logged and "skipping dictionary word '42'" in logged
    assert capsys.readouterr().err == ""
