"""Due date parsing and the YYMMDD field codec"""

import re
from datetime import date, datetime
from typing import Optional, Union

from virtual_barcode.config import settings
from virtual_barcode.domain.exceptions import EncodingError, InvalidDate

DateInput = Union[date, datetime, str, None]

NO_DUE_DATE = "000000"
FINNISH_DATE_PATTERN = re.compile(r"^(\d{1,2})\.(\d{1,2})\.(\d{4})$")


def parse_due_date(value: DateInput) -> Optional[date]:
    """
    Accept a date, a datetime (date part kept), an ISO "2024-03-15" string or a
    Finnish "15.3.2024" string. None and empty strings mean no due date.

    Raises:
        InvalidDate: if the value is not a real calendar date
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDate(f"Unsupported due date type: {type(value).__name__}", reason="type")

    text = value.strip()
    if not text:
        return None

    try:
        match = FINNISH_DATE_PATTERN.match(text)
        if match:
            day, month, year = (int(part) for part in match.groups())
            return date(year, month, day)
        return date.fromisoformat(text)
    except ValueError as e:
        raise InvalidDate(f"Not a valid calendar date: {value!r}", reason="format") from e


def encode_yymmdd(due_date: Optional[date], century: int | None = None) -> str:
    """
    Encode a due date as YYMMDD, or 000000 when there is none.

    Raises:
        EncodingError: if the year falls outside the configured century window
    """
    if due_date is None:
        return NO_DUE_DATE

    century = settings.due_date_century if century is None else century
    if not century <= due_date.year <= century + 99:
        raise EncodingError(
            f"Due date year {due_date.year} is outside {century}-{century + 99}",
            reason="overflow",
            field="due_date",
        )
    return f"{due_date.year - century:02d}{due_date.month:02d}{due_date.day:02d}"


def decode_yymmdd(field: str, century: int | None = None) -> Optional[date]:
    """
    Inverse of encode_yymmdd.

    Raises:
        InvalidDate: if the six digits do not name a calendar date
    """
    if field == NO_DUE_DATE:
        return None
    if len(field) != 6 or not field.isdigit():
        raise InvalidDate(f"Due date field must be six digits: {field!r}", reason="format")

    century = settings.due_date_century if century is None else century
    try:
        return date(century + int(field[:2]), int(field[2:4]), int(field[4:]))
    except ValueError as e:
        raise InvalidDate(f"Not a valid calendar date: {field}", reason="format") from e
