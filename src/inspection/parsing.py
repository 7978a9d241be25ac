"""Lenient parsers for untyped PATCH values.

None of these raise. A ``None`` result means "no usable value"; the caller
decides whether that clears the field or leaves it alone.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Any

from src.inspection.models import InspectionStatus

logger = logging.getLogger(__name__)

# Extended ISO-8601 instant: seconds required, up to nanosecond fraction,
# then Z or a numeric offset.
_INSTANT_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{1,9})?(Z|[+-]\d{2}:\d{2}(:\d{2})?)",
    re.ASCII,
)


def to_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def is_blank(value: Any) -> bool:
    text = to_text(value)
    return text is None or not text.strip()


def parse_instant(value: Any) -> datetime | None:
    """Parse an ISO-8601 instant, e.g. ``2024-05-01T10:00:00Z``.

    Only the extended form with seconds and a UTC designator or offset is
    accepted. Date-only, local, basic-format and week-date text is rejected.
    """
    raw = to_text(value)
    if raw is None or not raw.strip():
        return None

    text = raw.strip().upper()
    if not _INSTANT_PATTERN.fullmatch(text):
        logger.debug("Rejecting non-ISO instant: %r", text)
        return None

    try:
        parsed = datetime.fromisoformat(text)
    except (TypeError, ValueError):
        logger.debug("Rejecting malformed instant: %r", text)
        return None

    if parsed.tzinfo is None or parsed.utcoffset() is None:
        logger.debug("Rejecting instant without offset: %r", text)
        return None

    return parsed.astimezone(timezone.utc)


def parse_status(value: Any) -> InspectionStatus | None:
    raw = to_text(value)
    if raw is None:
        return None

    name = raw.strip().upper()
    try:
        return InspectionStatus[name]
    except KeyError:
        logger.debug("Ignoring unknown inspection status: %r", value)
        return None


def parse_bool(value: Any) -> bool:
    """``True`` only for the literal ``true`` (any case); anything else is ``False``."""
    text = to_text(value)
    return text is not None and text.lower() == "true"
