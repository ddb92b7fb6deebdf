"""Document types issued in the Dominican Republic.

Keeping the enumeration in the domain layer lets the validator, the batch
pipeline and the CLI share a single closed set of tags.
"""

from __future__ import annotations

from enum import Enum


class DocumentType(str, Enum):
    """Supported identification documents."""

    DNI = "dni"
    PASSPORT = "passport"
    RNC = "rnc"

    @property
    def code(self) -> int:
        """Numeric code used by upstream systems (DNI=1, Passport=2, RNC=3)."""

        return _CODES[self]

    @property
    def expected_length(self) -> int:
        return _LENGTHS[self]

    @classmethod
    def parse(cls, value: object) -> "DocumentType | None":
        """Resolve a member from a member, value, name or numeric code.

        Returns `None` for anything unrecognised so callers can fail closed.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            for member, code in _CODES.items():
                if code == value:
                    return member
            return None
        if not isinstance(value, str):
            return None

        key = value.strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower(), str(_CODES[member])):
                return member
        return None

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return _LABELS[self]


_CODES = {
    DocumentType.DNI: 1,
    DocumentType.PASSPORT: 2,
    DocumentType.RNC: 3,
}

_LENGTHS = {
    DocumentType.DNI: 11,
    DocumentType.PASSPORT: 9,
    DocumentType.RNC: 9,
}

_LABELS = {
    DocumentType.DNI: "Cédula (DNI)",
    DocumentType.PASSPORT: "Pasaporte",
    DocumentType.RNC: "RNC",
}
