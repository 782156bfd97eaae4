"""Pricing of apple orders."""


def calculate_price_of_apples(apples: int) -> int:
    """Two per apple, or one per apple when more than 40 are bought."""
    if apples > 40:
        return apples
    return apples * 2