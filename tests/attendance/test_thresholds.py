import pytest

from src.college_admin.college_admin.attendance.thresholds import AttendanceThresholds, attendance_status_label
from src.college_admin.college_admin.core.exceptions import ValidationError


def test_default_labels_at_boundaries():
    assert attendance_status_label(100) == "Excellent"
    assert attendance_status_label(85) == "Excellent"
    assert attendance_status_label(84) == "Good"
    assert attendance_status_label(75) == "Good"
    assert attendance_status_label(74) == "Needs Improvement"
    assert attendance_status_label(0) == "Needs Improvement"


def test_custom_thresholds():
    thresholds = AttendanceThresholds(excellent=90, good=80)

    assert attendance_status_label(85, thresholds) == "Good"
    assert attendance_status_label(79, thresholds) == "Needs Improvement"


def test_good_above_excellent_is_invalid():
    with pytest.raises(ValidationError):
        AttendanceThresholds(excellent=70, good=80)


def test_threshold_out_of_range_is_invalid():
    with pytest.raises(ValidationError):
        AttendanceThresholds(excellent=120)
