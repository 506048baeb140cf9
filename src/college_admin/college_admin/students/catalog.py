from __future__ import annotations

ALL_CLASSES = ("B.com", "BBA", "BCA", "PCMB", "PCMC", "EBAC", "EBAS")

_UNDERGRAD_CLASSES = {"B.com", "BBA", "BCA"}
_PLUS_TWO_CLASSES = {"PCMB", "PCMC", "PCMCS", "COMMERCE", "ARTS", "EBAC", "EBAS"}

# (start, end, label)
TIME_SLOTS = (
    ("09:30", "10:25", "09:30 - 10:25"),
    ("10:25", "11:20", "10:25 - 11:20"),
    ("11:35", "12:30", "11:35 - 12:30"),
    ("12:30", "13:15", "12:30 - 1:15"),
    ("13:15", "14:10", "1:15 - 2:10"),
    ("14:10", "15:05", "2:10 - 3:05"),
    ("15:05", "16:00", "3:05 - 4:00"),
)


def years_for_class(class_name: str) -> list[str]:
    if class_name in _UNDERGRAD_CLASSES:
        return ["1st Year", "2nd Year", "3rd Year"]
    if class_name in _PLUS_TWO_CLASSES:
        return ["1st Year", "2nd Year"]
    return []


def time_slot_labels() -> list[str]:
    return [label for _, _, label in TIME_SLOTS]
