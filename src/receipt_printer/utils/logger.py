import logging


def _configure_root_logger() -> None:
    """
    Configure root logger one time.
    If already configured, skip.
    """
    root = logging.getLogger()

    if root.handlers:
        # Already configured → do nothing
        return

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)

    root.setLevel(logging.INFO)


def setup_logger(name: str = "receipt_printer") -> logging.Logger:
    """Create/get logger with standard formatting."""
    _configure_root_logger()

    logger = logging.getLogger(name)
    logger.propagate = True  # send to root handler
    return logger
