"""Logging for the py_quantify library.

Quantity construction, conversion and arithmetic never log. Records come from the
configuration layer: discovery of `.pyquantify.toml` files at DEBUG level, and
preferred-unit entries that could not be applied at WARNING level.

Global Variables:
    - logger: The 'py_quantify' logger, INFO level, with a console handler.
    - file_handler: The active file handler, or None.

Examples:
    ```python
    from py_quantify.logger import enable_file_logging, disable_file_logging

    enable_file_logging("quantify_debug.log")
    # ... basicConfig(), PreferredUnits.set(...) ...
    disable_file_logging()
    ```
"""
import logging
from typing import Optional

__all__ = ('logger',
           'enable_file_logging',
           'disable_file_logging',
)

LOGGER_NAME = 'py_quantify'
CONSOLE_FORMAT = "%(levelname)s:%(name)s:%(message)s"
FILE_FORMAT = "%(asctime)s:%(levelname)s:%(module)s:%(message)s"


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handler.setLevel(logging.DEBUG)
    return handler


logger: logging.Logger = logging.getLogger(LOGGER_NAME)
if not logger.handlers:  # one console handler, even if the module is reloaded
    logger.addHandler(_console_handler())
logger.setLevel(logging.INFO)

file_handler: Optional[logging.FileHandler] = None


def enable_file_logging(filename: str = "debug.log", level: int = logging.DEBUG) -> None:
    """Also write records at `level` and above to `filename`.

    The file is opened in append mode with UTF-8 encoding (unit symbols such as
    '°C' or 'µm' appear in messages). An active file handler is closed and replaced.
    """
    global file_handler
    disable_file_logging()
    file_handler = logging.FileHandler(filename, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(file_handler)


def disable_file_logging() -> None:
    """Detach and close the file handler, if any."""
    global file_handler
    if file_handler is None:
        return
    logger.removeHandler(file_handler)
    file_handler.close()
    file_handler = None
