import logging
from pathlib import Path

from morse_converter.config import AppConfig
from morse_converter.logging_config import FILE_ONLY_LOGGERS, setup_logging


def _build_config(tmp_path: Path) -> AppConfig:
    log_dir = tmp_path / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return AppConfig(
        log_level="INFO",
        file_log_level="DEBUG",
        log_dir=str(log_dir),
        log_file=str(log_dir / "app.log"),
    )


def test_setup_logging_replaces_handlers(tmp_path):
    config = _build_config(tmp_path)
    logger = setup_logging(config)
    logger_again = setup_logging(config)

    assert logger is logger_again
    assert logger.name == "morse_app"
    assert logger.propagate is False
    assert len(logger.handlers) == 2
    assert Path(config.log_file).exists()


def test_setup_logging_levels_and_file_output(tmp_path):
    config = _build_config(tmp_path)
    logger = setup_logging(config)

    console_handler, file_handler = logger.handlers
    assert console_handler.level == logging.INFO
    assert file_handler.level == logging.DEBUG

    logger.debug("encoded %s", "sos")
    file_handler.flush()
    content = Path(config.log_file).read_text(encoding="utf-8")
    assert "DEBUG | morse_app" in content
    assert "encoded sos" in content


def test_setup_logging_routes_library_loggers_to_file_only(tmp_path):
    config = _build_config(tmp_path)
    logger = setup_logging(config)
    file_handler = logger.handlers[1]

    for name in FILE_ONLY_LOGGERS:
        routed = logging.getLogger(name)
        assert routed.propagate is False
        assert routed.handlers == [file_handler]


def test_setup_logging_without_console_writes_only_to_file(tmp_path):
    config = _build_config(tmp_path)
    logger = setup_logging(config, console=False)

    assert len(logger.handlers) == 1
    (file_handler,) = logger.handlers
    assert isinstance(file_handler, logging.FileHandler)

    try:
        raise RuntimeError("clipboard locked")
    except RuntimeError:
        logger.exception("Clipboard write failed")
    file_handler.flush()
    content = Path(config.log_file).read_text(encoding="utf-8")
    assert "Clipboard write failed" in content
    assert "RuntimeError: clipboard locked" in content
