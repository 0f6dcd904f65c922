from __future__ import annotations

from enum import Enum


class CaseCategory(str, Enum):
    THEFT = "theft"
    THREAT = "threat"
    DEFAMATION = "defamation"
    INJURY = "injury"
    GENERAL = "general"

    @classmethod
    def parse(cls, value: str) -> "CaseCategory":
        """Look up a category by its value, case-insensitively. Raises ValueError."""
        return cls((value or "").strip().lower())


class Role(str, Enum):
    COMPLAINANT = "complainant"
    RESPONDENT = "respondent"

