import re
from typing import Optional

from compliance.gluten.constants import ARABIC, AUTO, ENGLISH

ARABIC_CHARS = re.compile(r"[\u0600-\u06FF]")


def contains_arabic(text: str) -> bool:
    """True if the text has at least one Arabic-script code point."""
    if not text:
        return False
    return ARABIC_CHARS.search(text) is not None


def is_ascii(text: str) -> bool:
    return all(ord(ch) < 128 for ch in text)


def language_from_header(accept_language: Optional[str]) -> str:
    """Arabic if the Accept-Language header starts with "ar", else English."""
    if accept_language and accept_language.strip().lower().startswith(ARABIC):
        return ARABIC
    return ENGLISH


def resolve_language(
    language: Optional[str],
    ingredients_text: str,
    accept_language: Optional[str] = None,
) -> str:
    """
    Pick the response language for a request.

    Order:
    1. Explicit "ar" / "en" (case-insensitive) wins.
    2. "auto": Arabic script in the ingredients -> "ar", else the header.
    3. Anything else: the Accept-Language header, defaulting to "en".

    Args:
        language: The request's language hint, may be None or any value
        ingredients_text: Raw ingredients list
        accept_language: Value of the Accept-Language header

    Returns:
        "ar" or "en"
    """
    hint = language.lower() if isinstance(language, str) else ""

    if hint in (ARABIC, ENGLISH):
        return hint

    if hint == AUTO and contains_arabic(ingredients_text):
        return ARABIC

    return language_from_header(accept_language)
