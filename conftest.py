from __future__ import annotations

import os

os.environ.setdefault("APP_ENV", "testing")
