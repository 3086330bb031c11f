"""
Event logger utility for authentication events.
"""
from datetime import datetime, timezone
from typing import Optional
import sys
import logging
import os

from ..config import settings

# Configure file and stdout logging
log_dir = settings.LOG_DIR

# Create handlers list
handlers = [logging.StreamHandler(sys.stdout)]

# Try to add file handler, but continue without it if directory creation fails
try:
    os.makedirs(log_dir, exist_ok=True)
    handlers.append(logging.FileHandler(os.path.join(log_dir, "auth_events.log")))
except (OSError, PermissionError) as e:
    print(f"WARNING: Could not set up file logging: {e}", file=sys.stderr)

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s:%(name)s:%(message)s",
    handlers=handlers
)

logger = logging.getLogger(__name__)


ALLOWED_EVENT_TYPES = {
    "register_success",
    "register_failure",
    "login_success",
    "login_failure",
    "password_reset",
    "password_reset_failure",
}

FAILURE_EVENT_TYPES = {"register_failure", "login_failure", "password_reset_failure"}


def log_auth_event(
    event_type: str,
    username: str,
    user_id: Optional[int] = None,
    **context
) -> None:
    """
    Log an authentication event to the auth event log.

    Args:
        event_type: One of: register_success, register_failure, login_success,
                    login_failure, password_reset, password_reset_failure
        username: Username the event refers to
        user_id: Id of the user, when one exists
        **context: Additional key/value pairs, e.g. reason="not_found".
                   Callers never pass credentials here.

    Raises:
        ValueError: If event_type is invalid
    """
    if event_type not in ALLOWED_EVENT_TYPES:
        raise ValueError(
            f"Invalid event_type '{event_type}'. Must be one of: {', '.join(sorted(ALLOWED_EVENT_TYPES))}"
        )

    extra = "".join(f" {key}={value}" for key, value in sorted(context.items()))
    level = logging.WARNING if event_type in FAILURE_EVENT_TYPES else logging.INFO
    logger.log(
        level,
        "AUTH %s user_id=%s username=%s timestamp=%s%s",
        event_type, user_id, username, datetime.now(timezone.utc).isoformat(), extra
    )
