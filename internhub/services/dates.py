"""
Turn the date strings scraped from hackathon/internship pages into YYYY-MM-DD.

Scraped pages write dates every way imaginable ("29th Jan 2026",
"Jan 29, 2026", "29/01/2026", "2026-01-29T18:30:00Z", "Not mentioned").
normalize_date() tries a fixed list of strategies in order and returns ""
when none of them fits. "" means "unknown, ask a human"; a wrong deadline
is worse than a missing one, so nothing here ever guesses today's date.
"""

import re
from datetime import date, datetime
from email.utils import parsedate_to_datetime
from typing import Optional

# Values the extraction services use for "the page didn't say"
SENTINELS = {"not mentioned", "not disclosed"}

# Generic parsing is only trusted for dates from this year on
MIN_GENERIC_YEAR = 2020

MONTHS = {
    "january": 1, "february": 2, "march": 3, "april": 4, "may": 5, "june": 6,
    "july": 7, "august": 8, "september": 9, "october": 10, "november": 11, "december": 12,
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "jun": 6, "jul": 7, "aug": 8,
    "sep": 9, "sept": 9, "oct": 10, "nov": 11, "dec": 12,
}

ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DAY_MONTH_YEAR = re.compile(r"^(\d{1,2})(?:st|nd|rd|th)?\s+([a-z]+)\.?\s+(\d{4})$")
MONTH_DAY_YEAR = re.compile(r"^([a-z]+)\.?\s+(\d{1,2})(?:st|nd|rd|th)?\s+(\d{4})$")
NUMERIC_DMY = re.compile(r"^(\d{1,2})[/-](\d{1,2})[/-](\d{4})$")

# Last-resort formats, tried after datetime.fromisoformat()
GENERIC_FORMATS = (
    "%Y/%m/%d",
    "%Y.%m.%d",
    "%d.%m.%Y",
    "%Y-%m-%d %H:%M",
    "%d %B %Y %H:%M",
    "%B %d %Y %I:%M %p",
    "%a %b %d %Y",
)


def is_sentinel(value: Optional[str]) -> bool:
    """True for None, blank, or one of the "not on the page" markers."""
    return value is None or not value.strip() or value.strip().lower() in SENTINELS


def normalize_date(raw: Optional[str]) -> str:
    """Return raw as YYYY-MM-DD, or "" if it can't be read with confidence."""
    if is_sentinel(raw):
        return ""
    raw = raw.strip()

    if ISO_DATE.match(raw):
        return raw

    cleaned = re.sub(r"\s+", " ", raw.lower().replace(",", " ")).strip()

    for strategy in (_day_month_year, _month_day_year, _numeric_day_first):
        result = strategy(cleaned)
        if result is not None:
            return result.isoformat()

    result = _generic(raw)
    if result is not None and result.year >= MIN_GENERIC_YEAR:
        return result.isoformat()

    return ""


# ─── Strategies ──────────────────────────────────────────────────────
# Each returns a date or None. A pattern that matches but names an
# impossible date (31 Feb) also returns None so the next one gets a go.

def _day_month_year(text: str) -> Optional[date]:
    match = DAY_MONTH_YEAR.match(text)
    if not match:
        return None
    day, month_name, year = match.groups()
    return _build(int(year), MONTHS.get(month_name), int(day))


def _month_day_year(text: str) -> Optional[date]:
    match = MONTH_DAY_YEAR.match(text)
    if not match:
        return None
    month_name, day, year = match.groups()
    return _build(int(year), MONTHS.get(month_name), int(day))


def _numeric_day_first(text: str) -> Optional[date]:
    match = NUMERIC_DMY.match(text)
    if not match:
        return None
    day, month, year = (int(g) for g in match.groups())
    return _build(year, month, day)


def _generic(text: str) -> Optional[date]:
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass

    for fmt in GENERIC_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    # RFC 2822, e.g. "Thu, 29 Jan 2026 10:00:00 GMT"
    try:
        return parsedate_to_datetime(text).date()
    except (TypeError, ValueError, IndexError):
        return None


def _build(year: int, month: Optional[int], day: int) -> Optional[date]:
    if month is None:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None
