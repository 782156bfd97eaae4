"""Packages with a weight, a sender and a recipient country."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Package:
    """A package sent from one country to another."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        """Whether sender and recipient countries differ."""
        return self.sender_country != self.recipient_country

    def fees(self, cents_per_gram: int) -> int:
        """Shipping fees in cents for the given rate."""
        return self.weight_in_grams * cents_per_gram