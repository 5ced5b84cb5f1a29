# main.py
from __future__ import annotations
import structlog
from notifier_queue.app.config import QueueConfig
from notifier_queue.app.logging_config import configure_logging
from notifier_queue.core.events import EventKind
from notifier_queue.core.fifo import NotifierQueue
from notifier_queue.core.option import Some, unwrap_or

def main() -> NotifierQueue[str]:
    configure_logging(debug=True)
    log = structlog.get_logger()

    log.info("demo.start", msg="Running a scripted NotifierQueue session")
    q = NotifierQueue.make(["bla", "hello"], config=QueueConfig(log_events=True))
    q.on(EventKind.ITEM_QUEUED, lambda item: log.info("demo.queued", item=item, length=q.length))
    q.on(EventKind.ITEM_DEQUEUED, lambda item: log.info("demo.dequeued", item=item, length=q.length))

    q.enqueue("blurb")
    hit = q.seek(lambda s: Some(s.upper()) if s == "hello" else None)
    log.info("demo.seek", result=unwrap_or(hit, None))
    head = q.dequeue()
    log.info("demo.dequeue", result=unwrap_or(head, None), is_empty=q.is_empty)
    log.info("demo.stop", remaining=list(q.items))
    return q

if __name__ == "__main__":
    main()
