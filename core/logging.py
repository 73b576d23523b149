"""
Logging for the cart core.

Modules log through ``get_logger(__name__)``. Anything a cashier typed
(quantity text, search terms) goes through ``safe_text`` first.

Environment:
- LOG_LEVEL: root level when the core owns logging (default INFO)
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# C0 controls and DEL become visible escapes; \n, \r, \t keep their short form
_CONTROL_ESCAPES = {code: f"\\x{code:02x}" for code in [*range(0x20), 0x7F]}
_CONTROL_ESCAPES.update({ord("\n"): "\\n", ord("\r"): "\\r", ord("\t"): "\\t"})


def _setup() -> None:
    # Leave logging alone when the hosting UI already configured it
    root = logging.getLogger()
    if root.handlers:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    level = os.environ.get("LOG_LEVEL", "INFO").upper()
    root.setLevel(getattr(logging, level, logging.INFO))


_setup()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def safe_text(value: object, max_length: int = 50) -> str:
    """
    Make user-typed text safe to put in a log line.

    Control characters (newlines, escape sequences, NUL...) are shown as
    escapes so they cannot forge entries or recolour a terminal, and long
    payloads are cut to ``max_length`` characters.
    """
    if value is None or value == "":
        return "N/A"
    text = str(value)
    if len(text) > max_length:
        return text[:max_length].translate(_CONTROL_ESCAPES) + "..."
    return text.translate(_CONTROL_ESCAPES)
