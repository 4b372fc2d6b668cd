import logging

from terragen.logging_config import setup_logging


def test_setup_is_idempotent():
    root = logging.getLogger()
    before = len(root.handlers)
    setup_logging(logging.INFO)
    setup_logging(logging.DEBUG)
    assert len(root.handlers) == before + 1
    assert root.level == logging.DEBUG


def test_file_handler(tmp_path):
    log_file = tmp_path / "logs" / "terragen.log"
    setup_logging(logging.INFO, str(log_file))
    logging.getLogger("terragen.test").info("hello from the test")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "INFO | terragen.test | hello from the test" in log_file.read_text(encoding="utf-8")
