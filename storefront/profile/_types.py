"""
Profile types — shipping addresses and masked payment instruments.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Address:
    street: str
    city: str = ""
    region: str = ""
    postal_code: str = ""

    @classmethod
    def from_text(cls, text: str) -> Address:
        """
        Parse free-form "street, city, region, postal code".

        Missing trailing parts stay empty; extra parts fold into postal_code.
        """
        parts = [p.strip() for p in text.split(",")]
        street, city, region, *rest = [*parts, "", "", ""][: max(len(parts), 3)]
        return cls(
            street=street,
            city=city,
            region=region,
            postal_code=", ".join(p for p in rest if p),
        )

    @property
    def is_blank(self) -> bool:
        return not self.street.strip()

    @property
    def label(self) -> str:
        return ", ".join(
            p for p in (self.street, self.city, self.region, self.postal_code) if p
        )

    def __str__(self) -> str:
        return self.label


_MASK_CHARS = frozenset("*•xX")


@dataclass(frozen=True, slots=True)
class PaymentMethod:
    """
    Masked payment instrument.

    Only the last four digits are ever kept.
    """

    kind: str
    last_four: str = ""

    @classmethod
    def from_text(cls, text: str) -> PaymentMethod:
        """
        Parse e.g. "Visa **** 1234" → kind "Visa", last_four "1234".

        Mask tokens are dropped. Every token carrying a digit, spaced or
        dashed groups alike, joins one digit run cut to its last four; kind
        is built from the remaining words. A bare card number gets kind "Card".
        """
        tokens = text.split()
        digits = "".join(c for t in tokens for c in t if c.isdigit())
        kind_tokens = [
            t
            for t in tokens
            if not set(t) <= _MASK_CHARS and not any(c.isdigit() for c in t)
        ]
        kind = " ".join(kind_tokens)
        if not kind and digits:
            kind = "Card"
        return cls(kind=kind, last_four=digits[-4:])

    @property
    def is_blank(self) -> bool:
        return not self.kind.strip()

    @property
    def label(self) -> str:
        if self.last_four:
            return f"{self.kind} **** {self.last_four}"
        return self.kind

    def __str__(self) -> str:
        return self.label


__all__ = ("Address", "PaymentMethod")
