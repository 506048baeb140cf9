"""Settings shared by every environment; environment modules import and override these."""

import os


def _flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


DB_CONFIG = {
    "host": os.environ.get("DB_HOST", "localhost"),
    "port": int(os.environ.get("DB_PORT", "3306")),
    "user": os.environ.get("DB_USER", "root"),
    "password": os.environ.get("DB_PASSWORD", ""),
    "database": os.environ.get("DB_NAME", "college_admin"),
}

AUTO_INIT_DB = _flag("AUTO_INIT_DB")

# Leave accrual policy (days).
LEAVE_POLICY = {
    "annual_quota": int(os.environ.get("LEAVE_ANNUAL_QUOTA", "12")),
    "monthly_cap": int(os.environ.get("LEAVE_MONTHLY_CAP", "2")),
    "split_across_months": _flag("LEAVE_SPLIT_ACROSS_MONTHS"),
}

# Attendance percentage cut-offs for "Excellent" / "Good".
ATTENDANCE_THRESHOLDS = {
    "excellent": int(os.environ.get("ATTENDANCE_EXCELLENT_THRESHOLD", "85")),
    "good": int(os.environ.get("ATTENDANCE_GOOD_THRESHOLD", "75")),
}

EMAILJS = {
    "service_id": os.environ.get("EMAILJS_SERVICE_ID", ""),
    "template_id": os.environ.get("EMAILJS_TEMPLATE_ID", ""),
    "public_key": os.environ.get("EMAILJS_PUBLIC_KEY", ""),
    "private_key": os.environ.get("EMAILJS_PRIVATE_KEY", ""),
    "from_email": os.environ.get("EMAILJS_FROM_EMAIL", ""),
    "from_name": os.environ.get("EMAILJS_FROM_NAME", "College Admin"),
}
