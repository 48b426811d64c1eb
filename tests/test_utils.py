# tests/test_utils.py
"""End-to-end tests for utils (load_config, log) with env and cache isolation."""

from __future__ import annotations

import json
from importlib import import_module
from pathlib import Path

import pytest

# `text_scanner.utils.load_config` is shadowed by the function of the same name
LC = import_module("text_scanner.utils.load_config")
LOG = import_module("text_scanner.utils.log")

ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
DataDirNotFound = LC.DataDirNotFound
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point loader via TEXT_SCANNER_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("TEXT_SCANNER_DATA_DIR", str(data))
    clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics and config cache between tests."""
    monkeypatch.delenv("TEXT_SCANNER_DEBUG_TOPICS", raising=False)
    monkeypatch.delenv("TEXT_SCANNER_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    clear_config_cache()
    LOG.reload_topics()
    yield
    LOG.reload_topics()


# ---------- load_config tests ----------
def test_load_config_dict_and_cache_hit(tmp_data_dir):
    p = tmp_data_dir / "samples.json"
    p.write_text(json.dumps({"add": "1 + 2"}), encoding="utf-8")

    out1 = load_config("samples")
    assert out1 == {"add": "1 + 2"}
    assert load_config("samples.json") is out1  # cached

    clear_config_cache()
    p.write_text(json.dumps({"mul": "3 * 4"}), encoding="utf-8")
    assert load_config("samples") == {"mul": "3 * 4"}


def test_load_config_errors(tmp_data_dir):
    (tmp_data_dir / "list.json").write_text(json.dumps(["+", "-"]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("list")

    (tmp_data_dir / "bad.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("bad")

    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist")


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret")


def test_load_config_explicit_base_dir(tmp_path):
    (tmp_path / "samples.json").write_text(json.dumps({"k": "1 + 1"}), encoding="utf-8")
    assert load_config("samples", base_dir=tmp_path) == {"k": "1 + 1"}


def test_missing_env_data_dir_raises(tmp_path, monkeypatch):
    monkeypatch.setenv("TEXT_SCANNER_DATA_DIR", str(tmp_path / "nowhere"))
    with pytest.raises(DataDirNotFound):
        load_config("samples")


def test_packaged_samples_are_found_without_env():
    data_dir = LC.resolve_data_dir()
    assert data_dir == Path(LC.__file__).resolve().parents[1] / "data"
    assert load_config("samples")["add"] == "8 + 9"


# ---------- log.debug tests ----------
def test_log_debug_silent_by_default(capsys):
    LOG.debug("nothing to see", topic="scanner")
    assert capsys.readouterr().err == ""


def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv("TEXT_SCANNER_DEBUG_TOPICS", "scanner")
    LOG.reload_topics()

    LOG.debug("hello on scanner", topic="scanner")
    LOG.debug("should be silent", topic="other")

    captured = capsys.readouterr()
    assert "hello on scanner" in captured.err
    assert "[scanner][DEBUG]" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv("TEXT_SCANNER_DEBUG_TOPICS", "all")
    LOG.reload_topics()

    LOG.debug("m1", topic="foo")
    LOG.debug("m2", topic="bar", level="info")

    captured = capsys.readouterr()
    assert "m1" in captured.err and "[bar][INFO] m2" in captured.err


def test_enable_topics_at_runtime(capsys):
    LOG.enable_topics("demo")
    assert LOG.topic_enabled("DEMO")
    LOG.debug("on", topic="demo")
    assert "on" in capsys.readouterr().err
