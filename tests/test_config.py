"""Tests for config loading and validation."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from expectkit.config import ExpectConfig, load_config


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "expectkit.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_defaults():
    cfg = ExpectConfig()
    assert cfg.pp_max_depth == 8
    assert cfg.escape_usage_errors is True
    assert cfg.log_file is None
    assert cfg.verbose is False


def test_load_full_config(tmp_yaml):
    path = tmp_yaml("""\
        pp_max_depth: 3
        escape_usage_errors: false
        log_file: /var/log/expectkit.log
        verbose: true
    """)
    cfg = load_config(path)
    assert cfg.pp_max_depth == 3
    assert cfg.escape_usage_errors is False
    assert cfg.log_file == "/var/log/expectkit.log"
    assert cfg.verbose is True


def test_empty_file_gives_defaults(tmp_yaml):
    cfg = load_config(tmp_yaml(""))
    assert cfg == ExpectConfig()


def test_relative_log_file_resolved_against_config_dir(tmp_yaml, tmp_path):
    cfg = load_config(tmp_yaml("log_file: logs/debug.log\n"))
    assert cfg.log_file == str((tmp_path / "logs" / "debug.log").resolve())


def test_log_file_expands_env_vars(tmp_yaml, monkeypatch, tmp_path):
    monkeypatch.setenv("EXPECTKIT_LOGS", str(tmp_path / "out"))
    cfg = load_config(tmp_yaml("log_file: ${EXPECTKIT_LOGS}/debug.log\n"))
    assert cfg.log_file == str(tmp_path / "out" / "debug.log")


def test_log_file_env_default_used(tmp_yaml, monkeypatch):
    monkeypatch.delenv("EXPECTKIT_MISSING", raising=False)
    cfg = load_config(tmp_yaml("log_file: ${EXPECTKIT_MISSING:-/tmp/fallback.log}\n"))
    assert cfg.log_file == "/tmp/fallback.log"


def test_log_file_missing_env_var_rejected(monkeypatch):
    monkeypatch.delenv("EXPECTKIT_MISSING", raising=False)
    with pytest.raises(ValidationError, match="missing environment variables"):
        ExpectConfig(log_file="${EXPECTKIT_MISSING}/debug.log")


def test_unknown_key_rejected(tmp_yaml):
    with pytest.raises(ValidationError):
        load_config(tmp_yaml("colour: red\n"))


def test_pp_max_depth_must_be_positive():
    with pytest.raises(ValidationError):
        ExpectConfig(pp_max_depth=0)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")
