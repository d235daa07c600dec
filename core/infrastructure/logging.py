"""
Logging infrastructure.

Configures root logging for command-line entry points such as the demo.
"""
import logging


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(debug: bool = False) -> None:
    """
    Configure root logging once per process.
    
    Args:
        debug: Lower the root level to DEBUG (build `debug` setting)
    """
    root = logging.getLogger()
    level = logging.DEBUG if debug else logging.INFO
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)
