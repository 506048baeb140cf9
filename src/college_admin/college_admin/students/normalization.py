"""Normalization of free-text student fields coming from registration forms."""

from __future__ import annotations

import logging
import re
from dataclasses import replace

from .catalog import ALL_CLASSES, years_for_class
from .model import Student

logger = logging.getLogger(__name__)

_CLASS_ALIASES = {
    "BCOM": "B.com",
    "B.COM": "B.com",
    "BCOM.": "B.com",
    "B COM": "B.com",
    "BACHELOR OF COMMERCE": "B.com",
    "COMMERCE": "B.com",
    "BBA": "BBA",
    "BACHELOR OF BUSINESS ADMINISTRATION": "BBA",
    "BUSINESS ADMINISTRATION": "BBA",
    "BCA": "BCA",
    "BACHELOR OF COMPUTER APPLICATIONS": "BCA",
    "COMPUTER APPLICATIONS": "BCA",
    "PCMB": "PCMB",
    "PC MB": "PCMB",
    "PCM B": "PCMB",
    "PHYSICS CHEMISTRY MATHS BIOLOGY": "PCMB",
    "PCMC": "PCMC",
    "PC MC": "PCMC",
    "PCM C": "PCMC",
    "PHYSICS CHEMISTRY MATHS COMPUTER": "PCMC",
    "EBAC": "EBAC",
    "EBA C": "EBAC",
    "EB AC": "EBAC",
    "ECONOMICS BUSINESS ACCOUNTANCY COMPUTER": "EBAC",
    "EBAS": "EBAS",
    "EBA S": "EBAS",
    "EB AS": "EBAS",
    "ECONOMICS BUSINESS ACCOUNTANCY STATISTICS": "EBAS",
}

_YEAR_ALIASES: dict[str, str] = {}
for _label, _forms in {
    "1st Year": ("1", "first", "1st", "1st year", "first year", "year 1", "i", "i year"),
    "2nd Year": ("2", "second", "2nd", "2nd year", "second year", "year 2", "ii", "ii year"),
    "3rd Year": ("3", "third", "3rd", "3rd year", "third year", "year 3", "iii", "iii year"),
}.items():
    for _form in _forms:
        _YEAR_ALIASES[_form] = _label

_ROLL_NUMBER = re.compile(r"^[A-Z0-9]{3,10}$")
_PHONE_DISALLOWED = re.compile(r"[^\d+\s\-()]")


def normalize_class_name(class_name: str) -> str:
    if not class_name:
        return ""
    key = class_name.strip().upper()
    if key in ALL_CLASSES:
        return key
    return _CLASS_ALIASES.get(key, class_name.strip())


def normalize_year(year) -> str:
    if not year:
        return ""
    text = str(year).strip()
    return _YEAR_ALIASES.get(text.lower(), text)


def normalize_roll_number(value: str) -> str:
    return value.upper().strip()


def is_valid_roll_number(roll_number: str) -> bool:
    return bool(_ROLL_NUMBER.match(roll_number))


def normalize_email(email: str) -> str:
    return email.lower().strip()


def normalize_phone_number(phone: str) -> str:
    return _PHONE_DISALLOWED.sub("", phone).strip()


def normalize_student(student: Student) -> Student:
    return replace(
        student,
        class_name=normalize_class_name(student.class_name),
        year=normalize_year(student.year),
    )


def is_valid_student_data(student: Student) -> bool:
    if student.class_name not in ALL_CLASSES:
        logger.warning("Invalid class %r for student %s", student.class_name, student.name)
        return False
    valid_years = years_for_class(student.class_name)
    if valid_years and student.year not in valid_years:
        logger.warning("Invalid year %r for class %s (student %s)", student.year, student.class_name, student.name)
        return False
    return True

