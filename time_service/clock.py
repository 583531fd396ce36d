"""Wall-clock formatting for the ``currentTime`` field."""
from datetime import datetime, tzinfo
from typing import Optional

# yyyy-MM-dd'T'HH:mm:ss, no fractional seconds, no offset
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def current_time(tz: Optional[tzinfo] = None) -> str:
    """Return the current time, server-local unless ``tz`` is given."""
    return format_timestamp(datetime.now(tz))
