from .greeting import (
    HELLO_PREFIX,
    TEST_MESSAGE,
    format_timestamp,
    hello_message,
    diagnostic_message,
)

__all__ = [
    "HELLO_PREFIX",
    "TEST_MESSAGE",
    "format_timestamp",
    "hello_message",
    "diagnostic_message",
]
