import logging

import pytest

from thedev.logging_config import logging_config, setup_logging


@pytest.fixture
def root_logger(monkeypatch):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    monkeypatch.setattr(logging_config, "_configured", False)
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def test_console_only_without_log_dir(root_logger):
    before = len(root_logger.handlers)
    setup_logging()
    assert len(root_logger.handlers) == before + 1


def test_log_dir_adds_rotating_files(root_logger, tmp_path):
    log_dir = tmp_path / "logs"
    setup_logging(app_name="api", log_dir=str(log_dir))
    logging.getLogger("thedev.test").error("sheet unreachable")
    for handler in root_logger.handlers:
        handler.flush()
    assert "sheet unreachable" in (log_dir / "api.log").read_text(encoding="utf-8")
    assert "sheet unreachable" in (log_dir / "api-error.log").read_text(encoding="utf-8")


def test_second_call_adds_no_handlers(root_logger):
    setup_logging()
    count = len(root_logger.handlers)
    setup_logging()
    assert len(root_logger.handlers) == count


def test_root_logger_is_left_without_extra_attributes(root_logger):
    setup_logging()
    assert not [name for name in vars(root_logger) if name.startswith("_thedev")]
