"""Test logger isolation so two specs never mix debug output."""

from __future__ import annotations

from pathlib import Path

from expectkit.verbose import setup_logger


def test_unique_logger_names_create_separate_instances(tmp_path: Path):
    """Different logger names create independent logger instances."""
    log1 = tmp_path / "spec1.log"
    log2 = tmp_path / "spec2.log"

    logger1 = setup_logger(log1, verbose=False, logger_name="expectkit_spec1")
    logger2 = setup_logger(log2, verbose=False, logger_name="expectkit_spec2")

    assert logger1 is not logger2
    assert logger1.name != logger2.name

    logger1.debug("Message from spec1")
    logger2.debug("Message from spec2")

    log1_content = log1.read_text()
    log2_content = log2.read_text()

    assert "Message from spec1" in log1_content
    assert "Message from spec2" not in log1_content

    assert "Message from spec2" in log2_content
    assert "Message from spec1" not in log2_content


def test_isolated_logger_does_not_propagate(tmp_path: Path, caplog):
    logger = setup_logger(tmp_path / "spec.log", logger_name="expectkit_quiet")

    with caplog.at_level("DEBUG"):
        logger.debug("file only")

    assert "file only" not in caplog.text
    assert "file only" in (tmp_path / "spec.log").read_text()
