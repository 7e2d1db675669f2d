import io
import json
import logging

from app.core.logging import build_handler, request_id_var


def make_logger(stream):
    log = logging.getLogger("tests.json")
    log.handlers = [build_handler(stream)]
    log.propagate = False
    log.setLevel(logging.INFO)
    return log


def test_records_are_json_lines():
    stream = io.StringIO()
    make_logger(stream).info("hello", extra={"path": "/companies"})

    line = json.loads(stream.getvalue())
    assert line["message"] == "hello"
    assert line["level"] == "INFO"
    assert line["name"] == "tests.json"
    assert line["path"] == "/companies"
    assert "timestamp" in line
    assert "request_id" not in line


def test_request_id_is_attached():
    stream = io.StringIO()
    token = request_id_var.set("req-42")
    try:
        make_logger(stream).warning("inside a request")
    finally:
        request_id_var.reset(token)

    line = json.loads(stream.getvalue())
    assert line["request_id"] == "req-42"
    assert line["level"] == "WARNING"
