import io
import logging
import sys
from logscale.utils.logging_config import get_logger, setup_logging

def test_setup_logging_writes_to_stdout_by_default(monkeypatch):
    stream = io.StringIO()
    monkeypatch.setattr(sys, "stdout", stream)
    setup_logging(level=logging.INFO)
    get_logger("logscale.test").info("scale ready")
    assert "[INFO] - scale ready" in stream.getvalue()

def test_setup_logging_accepts_explicit_stream():
    stream = io.StringIO()
    setup_logging(level=logging.WARNING, stream=stream)
    get_logger("logscale.test").warning("base ignored")
    get_logger("logscale.test").info("not shown")
    output = stream.getvalue()
    assert "logscale.test - [WARNING] - base ignored" in output
    assert "not shown" not in output
