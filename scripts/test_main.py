import logging

import pytest

from pollers.main import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.pollers is None
    assert args.metrics_port is None


def test_main_logs_effective_config(caplog, monkeypatch):
    monkeypatch.delenv("POLLERS_METRICS_PORT", raising=False)
    caplog.set_level(logging.INFO, logger="pollers")
    main(["--pollers", "30000, abc", "--metrics-port", "0"])

    messages = [r.getMessage() for r in caplog.records]
    assert any("num=1 intervals_ms=60000" in m for m in messages), messages
    assert any(r.levelno == logging.ERROR and "'abc'" in r.getMessage() for r in caplog.records)


def test_main_two_pollers(caplog):
    caplog.set_level(logging.INFO, logger="pollers")
    main(["--pollers", "60000, 10000", "--metrics-port", "0"])
    assert any("num=2 intervals_ms=60000,10000" in r.getMessage() for r in caplog.records)


def test_log_level_is_restricted():
    assert build_parser().parse_args(["--log-level", "debug"]).log_level == "DEBUG"
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--log-level", "bogus"])
