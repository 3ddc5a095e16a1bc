"""
Target qualifier entity: which installed version of an application to use.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from heyps.exceptions import InvalidTargetError

_YEAR_RE = re.compile(r"^\d{4}$")


class TargetKind(Enum):
    LATEST = "latest"
    BETA = "beta"
    YEAR = "year"


@dataclass(frozen=True)
class TargetQualifier:
    kind: TargetKind
    year: Optional[int] = None

    @classmethod
    def latest(cls) -> "TargetQualifier":
        return cls(TargetKind.LATEST)

    @classmethod
    def beta(cls) -> "TargetQualifier":
        return cls(TargetKind.BETA)

    @classmethod
    def for_year(cls, year: int) -> "TargetQualifier":
        return cls(TargetKind.YEAR, year)

    @classmethod
    def parse(cls, raw: Optional[str]) -> "TargetQualifier":
        """
        Parse user input into a qualifier.

        Args:
            raw: "latest", "beta" (any case) or a 4-digit year; None means latest

        Returns:
            The parsed TargetQualifier

        Raises:
            InvalidTargetError: If the value is none of the accepted forms
        """
        value = (raw or "").strip().lower()
        if not value or value == TargetKind.LATEST.value:
            return cls.latest()
        if value == TargetKind.BETA.value:
            return cls.beta()
        if _YEAR_RE.match(value):
            return cls.for_year(int(value))
        raise InvalidTargetError(
            f"Unsupported target '{raw}': expected 'latest', 'beta' or a 4-digit year"
        )

    def __str__(self) -> str:
        if self.kind is TargetKind.YEAR:
            return str(self.year)
        return self.kind.value
