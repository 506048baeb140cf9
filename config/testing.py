from .config import ATTENDANCE_THRESHOLDS, DB_CONFIG, LEAVE_POLICY  # noqa: F401

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False

# Never send real email from tests.
EMAILJS = {}
