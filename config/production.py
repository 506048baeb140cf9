import os

from .config import ATTENDANCE_THRESHOLDS, AUTO_INIT_DB, DB_CONFIG, EMAILJS, LEAVE_POLICY  # noqa: F401

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
