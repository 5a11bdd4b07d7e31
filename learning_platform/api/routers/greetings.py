"""
Greeting API router.

Routes (mounted under the ``/api`` prefix by the main app):
- GET /hello - greeting with the current local time
- GET /test - fixed diagnostic message confirming the service is live

Both endpoints return plain text, take no parameters, and keep no state
between requests.
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from learning_platform.api.dependencies import get_current_time
from learning_platform.domain import diagnostic_message, hello_message

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/hello", response_class=PlainTextResponse)
async def hello(
    now: datetime = Depends(get_current_time),
) -> str:
    """Greet the caller with the time the request was handled."""
    logger.debug("Hello requested", extra={"timestamp": now.isoformat()})
    return hello_message(now)


@router.get("/test", response_class=PlainTextResponse)
async def test() -> str:
    """Return the fixed diagnostic message."""
    logger.debug("Test message requested")
    return diagnostic_message()
