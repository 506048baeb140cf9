"""Student identification number (USN / roll number) standardization.

A valid id is 6-15 characters of ``A-Z0-9`` after trimming and upper-casing,
and is either all digits or mixes letters and digits.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

MIN_ID_LENGTH = 6
MAX_ID_LENGTH = 15

NUMERIC_ONLY = "Numeric-only"
ALPHANUMERIC = "Alphanumeric"
INVALID = "Invalid"

_DISALLOWED = re.compile(r"[^A-Z0-9]")
_DIGITS = re.compile(r"^\d+$")


@dataclass(frozen=True)
class StudentIdResult:
    original_input: str
    format_type: str
    standardized: Optional[str]
    notes: str

    @property
    def is_valid(self) -> bool:
        return self.standardized is not None


def _invalid(original: str, notes: str) -> StudentIdResult:
    return StudentIdResult(original_input=original, format_type=INVALID, standardized=None, notes=notes)


def process_student_id(raw: Optional[str]) -> StudentIdResult:
    if raw is None:
        return _invalid(str(raw), "Input is null")

    original = str(raw)
    notes: list[str] = []

    processed = original.strip()
    if processed != original:
        notes.append("Removed whitespace")

    upper = processed.upper()
    if upper != processed:
        notes.append("converted to uppercase")
    processed = upper

    if not processed:
        msg = "ID is empty or contains only whitespace"
        return _invalid(original, f"{', '.join(notes)}; {msg}" if notes else msg)

    if _DISALLOWED.search(processed):
        return _invalid(original, "Contains special characters or internal spaces")

    if not MIN_ID_LENGTH <= len(processed) <= MAX_ID_LENGTH:
        return _invalid(
            original,
            f"Length out of bounds (min {MIN_ID_LENGTH}, max {MAX_ID_LENGTH}, current: {len(processed)})",
        )

    has_letters = any(c.isalpha() for c in processed)
    has_digits = any(c.isdigit() for c in processed)
    if _DIGITS.match(processed):
        format_type = NUMERIC_ONLY
    elif has_letters and has_digits:
        format_type = ALPHANUMERIC
    else:
        return _invalid(original, "Must be either numeric-only or contain both letters and digits")

    return StudentIdResult(
        original_input=original,
        format_type=format_type,
        standardized=processed,
        notes=", ".join(notes) if notes else "None",
    )


def standardize_student_id(raw: Optional[str]) -> Optional[str]:
    return process_student_id(raw).standardized


def is_valid_student_id(raw: Optional[str]) -> bool:
    return process_student_id(raw).is_valid


def generate_search_terms(raw: Optional[str]) -> list[str]:
    """Candidate ids to try, most specific first."""
    standardized = standardize_student_id(raw)
    if not standardized:
        return []

    terms = [standardized]
    if _DIGITS.match(standardized):
        stripped = standardized.lstrip("0")
        if stripped and stripped != standardized:
            terms.append(stripped)

    raw_upper = str(raw).strip().upper()
    if raw_upper != standardized and len(raw_upper) >= MIN_ID_LENGTH:
        terms.append(raw_upper)

    return list(dict.fromkeys(terms))


def format_student_id_for_display(raw: str) -> str:
    return standardize_student_id(raw) or raw
