import io
import logging

from uncopt.report import ConsoleReporter, timer


def test_console_reporter_line_format():
    buf = io.StringIO()
    rep = ConsoleReporter(stream=buf, precision=4)
    rep(10, 0.123456789, 2.5e-3)
    assert buf.getvalue() == "Iter 10: f(x) = 0.1235, ||grad|| = 0.0025\n"


def test_timer_reports_to_sink():
    messages = []
    with timer("optimize", sink=messages.append) as t:
        sum(range(1000))
    assert t.elapsed is not None and t.elapsed >= 0.0
    assert len(messages) == 1
    assert messages[0].startswith("optimize cost ")
    assert messages[0].endswith("s")


def test_timer_logs_when_no_sink(caplog):
    with caplog.at_level(logging.INFO):
        with timer("solve"):
            pass
    assert any(r.getMessage().startswith("solve cost ") for r in caplog.records)


def test_timer_reports_even_on_error():
    messages = []
    try:
        with timer("boom", sink=messages.append):
            raise RuntimeError("x")
    except RuntimeError:
        pass
    assert messages and messages[0].startswith("boom cost ")
