import calendar
import re
from datetime import datetime

import pytz

from onfido.exceptions import ArgumentError

YYYY_MM_DD = '%Y-%m-%d'
ISO_8601_FORMAT = '%Y-%m-%dT%H:%M:%SZ'

# Wall clock used to render timestamps and to read back the API strings
# that carry no explicit offset. Both directions must use the same zone.
DISPLAY_TIMEZONE = pytz.timezone('America/Chicago')

EPOCH_PATTERN = re.compile(r'^-?\d+$')


def is_epoch_timestamp(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and EPOCH_PATTERN.match(value) is not None


def timestamp_to_datetime(timestamp) -> datetime:
    return datetime.fromtimestamp(int(timestamp), tz=DISPLAY_TIMEZONE)


def format_timestamp(timestamp, date_format=ISO_8601_FORMAT):
    if timestamp is None:
        return None
    return timestamp_to_datetime(timestamp).strftime(date_format)


def localize(naive_date: datetime) -> datetime:
    try:
        return DISPLAY_TIMEZONE.localize(naive_date, is_dst=None)
    except pytz.AmbiguousTimeError:
        # Repeated hour, either offset formats back to the same wall time
        return DISPLAY_TIMEZONE.localize(naive_date, is_dst=False)
    except pytz.NonExistentTimeError as e:
        raise ArgumentError(
            f'{naive_date.isoformat()} falls in a clock change gap of '
            f'{DISPLAY_TIMEZONE.zone}.'
        ) from e


def str_date_to_timestamp(str_date):
    """Parse an API date or datetime string into epoch seconds.

    `YYYY-MM-DD` and `YYYY-MM-DDTHH:MM:SSZ` are the inverse of
    `format_timestamp`, strings with an explicit offset are honored.
    None and epoch values pass through.

    Raises ArgumentError for strings that are not ISO 8601 dates and for
    wall times skipped by the display clock, which no timestamp can
    render back.
    """
    if str_date is None or is_epoch_timestamp(str_date):
        return str_date
    iso_date = str(str_date)
    if iso_date.endswith('Z'):
        iso_date = iso_date[:-1]
    try:
        parsed = datetime.fromisoformat(iso_date)
    except ValueError as e:
        raise ArgumentError(f'Invalid date: {str_date!r}.') from e
    if parsed.tzinfo is None:
        parsed = localize(parsed)
    return calendar.timegm(parsed.utctimetuple())
