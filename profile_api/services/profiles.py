# profile_api/services/profiles.py
"""
Profile derivation: birth date parsing, age and phone list splitting.

Age is a linear approximation, whole days elapsed divided by 365. Leap days
and month/day boundaries are not taken into account, so a birthday can be
reported a few days early or late.
"""

import re
from datetime import date, datetime
from typing import List

from profile_api.core.errors import AgeOutOfRangeError, ParseError
from profile_api.core.logging import get_logger
from profile_api.models.profiles import MAX_AGE, Profile

logger = get_logger(__name__)

DATE_FORMAT = "%Y-%m-%d"
DAYS_PER_YEAR = 365

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_birth_date(text: str) -> date:
    # strptime alone accepts unpadded fields such as "2024-1-1"
    if not _DATE_PATTERN.fullmatch(text):
        raise ParseError(f"birth_date must be in YYYY-MM-DD format, got {text!r}")
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        raise ParseError(f"birth_date is not a valid calendar date: {text!r}")


def compute_age(birth_date: date, today: date) -> int:
    """
    Whole years between birth_date and today as floor(days / 365).
    """
    days = (today - birth_date).days
    if days < 0:
        raise AgeOutOfRangeError(f"birth_date {birth_date.isoformat()} is in the future")

    age = days // DAYS_PER_YEAR
    if age > MAX_AGE:
        raise AgeOutOfRangeError(f"age {age} exceeds the supported maximum of {MAX_AGE}")
    return age


def split_phones(phone_numbers: str) -> List[str]:
    # Empty segments are kept: "a," -> ["a", ""]
    return phone_numbers.split(",")


def build_profile(name: str, birth_date: str, phone_numbers: str, today: date) -> Profile:
    age = compute_age(parse_birth_date(birth_date), today)
    phones = split_phones(phone_numbers)

    logger.debug("profile_name", name=name)
    logger.info("profile_built", age=age, phone_count=len(phones))
    return Profile(name=name, age=age, phones=phones)
