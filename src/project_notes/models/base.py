from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current UTC time without tzinfo.

    ``created_at`` columns are TIMESTAMP WITHOUT TIME ZONE holding UTC.
    """
    return datetime.now(UTC).replace(tzinfo=None)
