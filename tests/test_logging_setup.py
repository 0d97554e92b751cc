import json
import logging
import sys

from route_csv.logging_setup import JsonFormatter, resolve_level, setup_logging


def test_json_formatter_includes_run_attributes():
    record = logging.LogRecord("route_csv.cli", logging.INFO, __file__, 1, "Compilation finished", None, None)
    record.input_path = "routes.txt"
    record.rows = 3
    record.failures = 0

    payload = json.loads(JsonFormatter().format(record))

    assert payload == {
        "level": "INFO",
        "logger": "route_csv.cli",
        "message": "Compilation finished",
        "input_path": "routes.txt",
        "rows": 3,
        "failures": 0,
    }


def test_json_formatter_records_exceptions():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord("route_csv", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "ERROR"
    assert "ValueError: boom" in payload["exception"]


def test_setup_logging_reads_level_from_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    root = logging.getLogger()
    previous = root.level
    try:
        setup_logging()
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)


def test_setup_logging_unknown_level_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    root = logging.getLogger()
    previous = root.level
    try:
        setup_logging()
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)


def test_resolve_level_handles_blank_and_known_names():
    assert resolve_level(None, logging.INFO) == logging.INFO
    assert resolve_level("   ", logging.INFO) == logging.INFO
    assert resolve_level(" error ", logging.INFO) == "ERROR"
