import asyncio, logging, sys
from typing import Optional, TextIO

LOG_FORMAT = "[%(asctime)s] %(levelname)s> %(message)s"
LOGGER_NAME = "unitsum"


class AsyncQueueHandler(logging.Handler):
    """Non-blocking handler that enqueues formatted records for log_worker."""

    def __init__(self, queue: asyncio.Queue):
        super().__init__()
        self.queue = queue

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            self.queue.put_nowait((record.levelno, msg))
        except Exception:
            self.handleError(record)


async def log_worker(
    queue: asyncio.Queue,
    stop_event: asyncio.Event,
    level=logging.INFO,
    stream: Optional[TextIO] = None,
) -> None:
    """Drain ``queue`` into a stream handler until ``stop_event`` is set."""
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, "%H:%M:%S"))
    handler.setLevel(level)

    while not stop_event.is_set() or not queue.empty():
        try:
            lvl, msg = await asyncio.wait_for(queue.get(), timeout=0.5)
        except asyncio.TimeoutError:
            continue
        try:
            if lvl >= handler.level:
                record = logging.LogRecord(LOGGER_NAME, lvl, "", 0, msg, None, None)
                handler.emit(record)
        except Exception as e:
            sys.stderr.write(f"[log_worker error] {e}\n")
        finally:
            queue.task_done()

    handler.flush()


def get_logger(queue: asyncio.Queue, name: str = LOGGER_NAME) -> logging.Logger:
    logger = logging.getLogger(name)
    for handler in logger.handlers:
        if isinstance(handler, AsyncQueueHandler):
            # A new event loop brings a new queue; point the handler at it.
            handler.queue = queue
            return logger
    handler = AsyncQueueHandler(queue)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger
