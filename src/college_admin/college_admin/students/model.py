from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    student_id: int
    name: str
    email: str
    roll_number: str
    class_name: str
    year: str
    parent_email: Optional[str] = None
    parent_phone: Optional[str] = None
    is_approved: bool = False
