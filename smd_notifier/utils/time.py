"""
Time conversion utilities for signal meta-data documents.

Signal timestamps are written as xs:dateTime values. Conversion is lenient:
a value that cannot be represented yields None so the document is still
written, only without a timestamp.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from ..logging import get_logger

logger = get_logger(__name__)


def ensure_utc_aware(ts: datetime) -> datetime:
    """
    Attach UTC to a naive datetime; aware datetimes are returned unchanged.

    Args:
        ts: Timestamp to normalize

    Returns:
        Timezone aware datetime
    """
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def to_xml_datetime(ts: Any) -> Optional[str]:
    """
    Format a timestamp as an xs:dateTime lexical value.

    Args:
        ts: Signal timestamp, expected to be a datetime

    Returns:
        ISO8601 string with milliseconds and offset, None if not representable
    """
    if ts is None:
        return None

    try:
        return ensure_utc_aware(ts).isoformat(timespec="milliseconds")
    except (AttributeError, TypeError, ValueError, OverflowError) as e:
        logger.warning("Timestamp not representable, omitting", value=repr(ts), error=str(e))
        return None

