"""Display formatting for listing fields (price, numbers, phone, names, address)."""

from __future__ import annotations

import enum
import re

EM_DASH = "—"

_NON_NUMERIC = re.compile(r"[^0-9.]")
_DIGITS_ONLY = re.compile(r"^\d+$")


class AddressStyle(str, enum.Enum):
    PLAIN = "plain"
    LETTER_SPACED = "letter_spaced"
    TOKEN_SPACED = "token_spaced"


def _to_number(value: str | float | int | None) -> float | None:
    if value is None or value == "":
        return None
    if isinstance(value, (int, float)):
        return float(value)
    cleaned = _NON_NUMERIC.sub("", value)
    try:
        return float(cleaned)
    except ValueError:
        return None


def format_price(value: str | float | int | None) -> str:
    """``"450000"`` → ``"$450,000"``. Non-numeric text is returned unchanged."""
    n = _to_number(value)
    if n is None:
        return str(value or "").strip()
    return f"${round(n):,}"


def format_number(value: str | float | int | None) -> str:
    """Thousands separators for numeric input; anything else passes through."""
    n = _to_number(value)
    if n is None:
        return str(value or "").strip()
    return f"{round(n):,}"


def stat_value(value: str | None, *, thousands: bool = False) -> str:
    """A stat for display, or an em dash when missing."""
    value = (value or "").strip()
    if not value:
        return EM_DASH
    return format_number(value) if thousands else value


def format_phone(phone: str | None) -> str:
    """Format to ``(XXX) XXX-XXXX``; partial numbers format as far as they go."""
    digits = re.sub(r"\D", "", phone or "")
    if digits.startswith("1") and len(digits) >= 11:
        digits = digits[1:]
    digits = digits[:10]
    if not digits:
        return ""
    if len(digits) <= 3:
        return f"({digits}"
    if len(digits) <= 6:
        return f"({digits[:3]}) {digits[3:]}"
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"


def title_case_name(name: str | None) -> str:
    """``"JANE o'neil-smith"`` → ``"Jane O'Neil-Smith"``."""
    words = []
    for word in (name or "").split():
        words.append(re.sub(r"[A-Za-z]+", lambda m: m.group(0).capitalize(), word))
    return " ".join(words)


def format_street(street: str, style: AddressStyle | str = AddressStyle.PLAIN) -> str:
    """Cosmetic transform of the street line.

    LETTER_SPACED spaces every character. TOKEN_SPACED keeps digit runs intact
    and spaces letters. Words are separated by three spaces in both spaced styles.
    """
    style = AddressStyle(style)
    street = street.strip().upper()
    if style is AddressStyle.PLAIN:
        return street

    words = [w for w in street.split(" ") if w]
    if style is AddressStyle.LETTER_SPACED:
        return "   ".join(" ".join(w) for w in words)
    return "   ".join(_token_space(w) for w in words)


def _token_space(word: str) -> str:
    if _DIGITS_ONLY.match(word):
        return word
    tokens = re.findall(r"\d+|\D", word)
    return " ".join(tokens)
