"""Dual-price parsing ("1,20 EUR - 2,00 EUR" -> (1.2, 2.0))."""

from akafo.contexts.parsing.exceptions import CouldNotParsePrice
from akafo.contexts.parsing.tag_patterns import PricePatterns


def parse_price(price_text: str) -> tuple[float, float]:
    """
    Parse a student/general price pair.

    Removes the currency and all spaces, turns the decimal comma into a point
    and reads the first two hyphen-separated segments. The two prices are
    returned as found; no ordering between them is assumed.

    Args:
        price_text: e.g. "1,20 EUR - 2,00 EUR"

    Returns:
        (student price, general price)

    Raises:
        CouldNotParsePrice: If there are fewer than two segments or either
            segment is not a number
    """
    cleaned = (
        price_text.replace(PricePatterns.CURRENCY, "")
        .replace(PricePatterns.DECIMAL_COMMA, ".")
        .replace(" ", "")
    )
    segments = cleaned.split(PricePatterns.PRICE_SEPARATOR)

    if len(segments) < 2:
        raise CouldNotParsePrice("Expected two prices separated by '-'", snippet=price_text)

    for segment in segments[:2]:
        if not PricePatterns.PRICE_VALUE.fullmatch(segment):
            raise CouldNotParsePrice(
                f"Price segment '{segment}' is not a number", snippet=price_text
            )

    return float(segments[0]), float(segments[1])
