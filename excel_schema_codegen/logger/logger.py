import atexit
import json
import logging
import logging.config
import logging.handlers
from pathlib import Path

# Configure logging
logger = logging.getLogger("ExcelSchemaCodegen")

_CONFIG_FILE = Path(__file__).parent / "logging_config.json"
_listener: logging.handlers.QueueListener | None = None


def setup_logger(level: str | None = None) -> None:
    """Configure the generator logger from logging_config.json.

    Safe to call more than once: the queue listener of an earlier call is
    stopped before the configuration is applied again.

    Args:
        level: Overrides the stderr handler level, e.g. "DEBUG"
    """
    global _listener

    with open(_CONFIG_FILE) as f:
        config = json.load(f)
    if level is not None:
        config["handlers"]["stderr"]["level"] = level.upper()

    if _listener is not None:
        _listener.stop()
        atexit.unregister(_listener.stop)
        _listener = None

    logging.config.dictConfig(config)
    queue_handler = logging.getHandlerByName("queue_handler")
    listener = getattr(queue_handler, "listener", None)
    if listener is not None:
        listener.start()
        atexit.register(listener.stop)
        _listener = listener
