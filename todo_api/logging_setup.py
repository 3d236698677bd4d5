import logging
import sys

_HANDLER_NAME = "todo_api.stderr"


def setup_logging(level="INFO") -> None:
    """Configure the root logger with a single stderr handler.

    Safe to call more than once (each app instance calls it): a handler
    installed by an earlier call is replaced rather than stacked.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        if h.get_name() == _HANDLER_NAME:
            root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)

    # passlib logs every scheme lookup at debug level
    logging.getLogger("passlib").setLevel(logging.WARNING)
