"""Utility helpers for pdfmetax."""
from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterator, Mapping

_PDF_DATE_RE = re.compile(
    r"^D:(?P<year>\d{4})(?P<month>\d{2})?(?P<day>\d{2})?"
    r"(?P<hour>\d{2})?(?P<minute>\d{2})?(?P<second>\d{2})?"
    r"(?:(?P<utc>Z)(?:00'?(?:00'?)?)?|(?P<sign>[+-])(?P<tz_hours>\d{2})'?(?:(?P<tz_minutes>\d{2})'?)?)?$"
)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure package-wide logging."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@contextmanager
def time_block(logger: logging.Logger, message: str) -> Iterator[None]:
    """Context manager that logs the execution time of a code block."""
    start = datetime.now(tz=timezone.utc)
    logger.debug("Starting %s", message)
    try:
        yield
    finally:
        end = datetime.now(tz=timezone.utc)
        elapsed = (end - start).total_seconds()
        logger.info("%s completed in %.2fs", message, elapsed)


def parse_pdf_date(raw: str) -> datetime:
    """
    Parse a PDF date string (``D:YYYYMMDDHHmmSSOHH'mm'``) into an aware datetime.

    Every component after the year is optional. A missing offset means UTC.

    Raises:
        ValueError: If ``raw`` is not a PDF date.
    """
    match = _PDF_DATE_RE.match(raw.strip())
    if not match:
        raise ValueError(f"Not a PDF date: {raw!r}")

    parts = match.groupdict()
    tz = timezone.utc
    if parts["sign"]:
        delta = timedelta(hours=int(parts["tz_hours"]), minutes=int(parts["tz_minutes"] or 0))
        tz = timezone(-delta if parts["sign"] == "-" else delta)

    return datetime(
        int(parts["year"]),
        int(parts["month"] or 1),
        int(parts["day"] or 1),
        int(parts["hour"] or 0),
        int(parts["minute"] or 0),
        int(parts["second"] or 0),
        tzinfo=tz,
    )


def parse_date_value(value: Any) -> datetime:
    """
    Coerce a metadata date value into an aware :class:`datetime`.

    Accepts datetimes, PDF date strings and ISO-8601 strings. Naive values are
    taken as UTC.

    Raises:
        ValueError: If ``value`` cannot be interpreted as a date.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            parsed = parse_pdf_date(text)
        except ValueError:
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            parsed = datetime.fromisoformat(text)
    else:
        raise ValueError(f"Not a date: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_pdf_date(value: datetime) -> str:
    """Format ``value`` as a PDF date string with an explicit UTC offset."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    offset = value.utcoffset() or timedelta(0)
    minutes = int(offset.total_seconds() // 60)
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"D:{value.year:04d}{value:%m%d%H%M%S}{sign}{hours:02d}'{minutes:02d}'"


def humanize_key(key: str) -> str:
    """Turn ``CreationDate`` into ``Creation Date`` for display."""
    spaced = re.sub(r"(?<!^)(?=[A-Z])", " ", key).strip()
    return spaced[:1].upper() + spaced[1:]


def format_value(value: Any) -> str:
    """Render a metadata value for display; dates are shown in local time."""
    if isinstance(value, datetime):
        return value.astimezone().strftime("%Y-%m-%d %H:%M:%S %Z").strip()
    return str(value)


def to_jsonable(metadata: Mapping[str, Any]) -> Dict[str, str]:
    """Return a copy of ``metadata`` with dates rendered as ISO-8601 strings."""
    return {
        key: value.isoformat() if isinstance(value, datetime) else str(value)
        for key, value in metadata.items()
    }


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500 KB")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"
