import pytest

from src.college_admin.college_admin.students.identifiers import (
    ALPHANUMERIC,
    INVALID,
    NUMERIC_ONLY,
    format_student_id_for_display,
    generate_search_terms,
    is_valid_student_id,
    process_student_id,
    standardize_student_id,
)


def test_trims_and_uppercases_with_notes():
    result = process_student_id("  bca2023001 ")

    assert result.is_valid
    assert result.standardized == "BCA2023001"
    assert result.format_type == ALPHANUMERIC
    assert result.notes == "Removed whitespace, converted to uppercase"


def test_numeric_only_id():
    result = process_student_id("00123456")

    assert result.format_type == NUMERIC_ONLY
    assert result.notes == "None"


@pytest.mark.parametrize(
    "raw, note",
    [
        ("   ", "Removed whitespace; ID is empty or contains only whitespace"),
        ("BCA 2023", "Contains special characters or internal spaces"),
        ("BCA-2023", "Contains special characters or internal spaces"),
        ("AB12", "Length out of bounds (min 6, max 15, current: 4)"),
        ("ABCDEFGH", "Must be either numeric-only or contain both letters and digits"),
    ],
)
def test_invalid_ids(raw, note):
    result = process_student_id(raw)

    assert not result.is_valid
    assert result.format_type == INVALID
    assert result.notes == note


def test_none_is_invalid():
    assert not is_valid_student_id(None)
    assert standardize_student_id(None) is None


def test_search_terms_for_numeric_id_drop_leading_zeros():
    assert generate_search_terms(" 000123456") == ["000123456", "123456"]


def test_search_terms_for_invalid_id_are_empty():
    assert generate_search_terms("ab") == []


def test_display_falls_back_to_raw_input():
    assert format_student_id_for_display("bca2023001") == "BCA2023001"
    assert format_student_id_for_display("x-1") == "x-1"
