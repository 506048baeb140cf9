from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def get_by_ids(self, student_ids: Iterable[int]) -> Sequence[Student]:
        raise NotImplementedError

    def find_approved_by_roll_number(self, roll_number: str) -> Optional[Student]:
        raise NotImplementedError
