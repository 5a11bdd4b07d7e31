"""
Greeting messages served by the public API.

The two literals below are part of the observable HTTP contract and are
compared byte-for-byte by clients, so they must not be reworded or
re-encoded.
"""

from datetime import datetime

HELLO_PREFIX = "Hello from Spring Boot! 当前时间: "
TEST_MESSAGE = "这是一个测试接口 - Spring Boot热更新功能正常工作！"


def format_timestamp(moment: datetime) -> str:
    """Render a local date-time as ISO-8601.

    Seconds are always present; microseconds only when non-zero, e.g.
    ``2024-01-01T00:00:00`` or ``2024-01-01T08:30:15.250000``.
    """
    return moment.isoformat()


def hello_message(moment: datetime) -> str:
    """Build the hello greeting for the given moment."""
    return HELLO_PREFIX + format_timestamp(moment)


def diagnostic_message() -> str:
    return TEST_MESSAGE
