# tests/test_logging.py
# How to run:
#   pytest -q
#
# Verifies:
#   - configure_logging renders JSON lines to the given stream
#   - queue notifications are logged when QueueConfig(log_events=True)
#   - the demo session in main.py ends in the expected state

import io
import json

import structlog

from main import main
from notifier_queue.app.config import QueueConfig
from notifier_queue.app.logging_config import configure_logging
from notifier_queue.core.fifo import NotifierQueue


def test_configure_logging_json_lines():
    buf = io.StringIO()
    configure_logging(debug=False, stream=buf)
    log = structlog.get_logger()
    log.debug("hidden")
    log.info("queue.test", answer=42)

    lines = buf.getvalue().splitlines()
    assert len(lines) == 1
    rec = json.loads(lines[0])
    assert rec["event"] == "queue.test"
    assert rec["answer"] == 42
    assert rec["level"] == "info"
    assert "timestamp" in rec


def test_configure_logging_console():
    buf = io.StringIO()
    configure_logging(debug=True, json=False, stream=buf)
    structlog.get_logger().info("queue.console", item="x")
    assert "queue.console" in buf.getvalue()


def test_log_events_emits_queue_event_records():
    q = NotifierQueue.make(config=QueueConfig(log_events=True))
    with structlog.testing.capture_logs() as logs:
        q.enqueue("x")
        q.dequeue()
        q.dequeue()

    events = [e for e in logs if e["event"] == "queue.event"]
    assert [(e["kind"], e["item"], e["length"]) for e in events] == [
        ("item_queued", "'x'", 1),
        ("item_dequeued", "'x'", 0),
    ]
    assert all(e["log_level"] == "debug" for e in events)


def test_no_event_logs_by_default():
    q = NotifierQueue.make()
    with structlog.testing.capture_logs() as logs:
        q.enqueue("x")
    assert logs == []


def test_demo_session(capsys):
    q = main()
    assert q.items == ("blurb",)
    out = capsys.readouterr().out
    assert "demo.seek" in out
    assert "HELLO" in out
    assert '"result": "bla"' in out
