from loguru import logger

import strkit
from strkit import setup_logger, try_decode_hex
from strkit.logger import _handler_ids


def _reset():
    while _handler_ids:
        logger.remove(_handler_ids.pop())
    logger.disable("strkit")


def test_package_imports_with_logging_disabled():
    assert callable(strkit.setup_logger)
    assert strkit.__version__ == "0.1.0"
    messages = []
    sink_id = logger.add(messages.append, level="DEBUG")
    try:
        assert try_decode_hex("zz") == (False, None)
    finally:
        logger.remove(sink_id)
    assert messages == []


def test_setup_logger_writes_debug_records(tmp_path):
    log_file = tmp_path / "logs" / "strkit.log"
    setup_logger(level="DEBUG", log_file=log_file)
    try:
        assert try_decode_hex("zz") == (False, None)
    finally:
        _reset()
    content = log_file.read_text(encoding="utf-8")
    assert "try_decode_hex rejected input" in content


def test_setup_logger_keeps_host_sinks():
    messages = []
    host_id = logger.add(messages.append, level="DEBUG")
    try:
        setup_logger(level="DEBUG")
        setup_logger(level="DEBUG")
        assert len(_handler_ids) == 1
        try_decode_hex("zz")
    finally:
        _reset()
        logger.remove(host_id)
    assert any("try_decode_hex rejected input" in message for message in messages)
