from datetime import date

import pytest

from src.college_admin.college_admin.common.validators import require_date, require_int_range, require_non_empty
from src.college_admin.college_admin.core.exceptions import ValidationError


def test_require_non_empty_trims():
    assert require_non_empty("  BCA ", "Class") == "BCA"


@pytest.mark.parametrize("value", [None, "", "   "])
def test_require_non_empty_rejects_blank(value):
    with pytest.raises(ValidationError, match="Class is required"):
        require_non_empty(value, "Class")


@pytest.mark.parametrize("value", [20260301, 4.5, ["x"], {"a": 1}])
def test_non_text_values_are_validation_errors(value):
    with pytest.raises(ValidationError, match="must be text"):
        require_non_empty(value, "Start date")
    with pytest.raises(ValidationError):
        require_date(value, "Start date")


def test_require_date():
    assert require_date("2026-03-01", "Start date") == date(2026, 3, 1)
    with pytest.raises(ValidationError, match="YYYY-MM-DD"):
        require_date("01/03/2026", "Start date")


def test_require_int_range():
    assert require_int_range(9999, "year", minimum=1, maximum=9999) == 9999
    with pytest.raises(ValidationError, match="1..9999"):
        require_int_range(10000, "year", minimum=1, maximum=9999)
