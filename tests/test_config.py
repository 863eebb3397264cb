import logging

import pytest

from riichi_hand_notation import Config, setup_logging


def test_defaults():
    assert Config.HAND_SIZE == 14
    assert Config.MAX_COPIES == 4
    assert set(Config.WHITESPACE) == {" ", "\t", "\n"}


def test_package_logger_is_silent_by_default():
    handlers = logging.getLogger("riichi_hand_notation").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_setup_logging_with_file(monkeypatch, tmp_path):
    seen = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
    log_file = tmp_path / "hand.log"
    logger = setup_logging("debug", log_file=str(log_file))
    try:
        assert seen["level"] == logging.DEBUG
        assert seen["format"] == Config.LOG_FORMAT
        kinds = [type(h) for h in seen["handlers"]]
        assert kinds == [logging.StreamHandler, logging.FileHandler]
        assert seen["handlers"][1].baseFilename == str(log_file)
        assert logger.name == "riichi_hand_notation"
    finally:
        for h in seen.get("handlers", []):
            h.close()


def test_setup_logging_defaults_to_config_level(monkeypatch):
    seen = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    setup_logging()
    assert seen["level"] == logging.INFO
    assert len(seen["handlers"]) == 1


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("LOUD")
