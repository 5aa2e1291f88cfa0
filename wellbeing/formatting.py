from __future__ import annotations

import logging
from datetime import datetime

from wellbeing.constants import GRATITUDE_PREVIEW_LENGTH

logger = logging.getLogger(__name__)


def format_timestamp(created_at, tz=None) -> str:
    """Render a backend timestamp as "Monday 3 March, 14:05" in local time.

    Strings are parsed as ISO 8601; anything that cannot be parsed is returned
    unchanged.
    """
    value = created_at
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            logger.debug("Unparsable timestamp: %r", created_at)
            return created_at
    if not isinstance(value, datetime):
        return str(created_at)
    if value.tzinfo is not None:
        value = value.astimezone(tz)
    return f"{value.strftime('%A')} {value.day} {value.strftime('%B')}, {value.strftime('%H:%M')}"


def truncate_content(content, max_length=GRATITUDE_PREVIEW_LENGTH) -> str:
    text = str(content or "")
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def humanize_tag(tag) -> str:
    return str(tag).replace("_", " ")
