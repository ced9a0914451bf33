"""Bank lifecycle status."""

from __future__ import annotations

import re
from enum import IntEnum
from typing import Any, Optional

_ORDINAL = re.compile(r"[+-]?\d+")


class Status(IntEnum):
    """Lifecycle status of a bank.

    The integer value is what the store persists and compares. The label
    ("Created", "Active") is what crosses the external boundary.
    """

    CREATED = 0
    ACTIVE = 1

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.label

    def __format__(self, format_spec: str) -> str:
        # IntEnum formats as the bare integer otherwise
        return format(self.label, format_spec)

    @classmethod
    def parse(cls, raw: Any) -> Optional[Status]:
        """Best-effort conversion of a stored status value.

        Accepts a member, its label, or its ordinal (as int or numeric string).
        Returns None for anything else so callers can surface data drift
        without failing the read.
        """
        if raw is None or isinstance(raw, bool):
            return None
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, int):
            return cls._from_ordinal(raw)

        text = str(raw).strip()
        if _ORDINAL.fullmatch(text):
            return cls._from_ordinal(int(text))
        for member in cls:
            if member.label == text:
                return member
        return None

    @classmethod
    def _from_ordinal(cls, value: int) -> Optional[Status]:
        try:
            return cls(value)
        except ValueError:
            return None
