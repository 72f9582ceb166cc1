# norwedfilm/utils/slug.py
import re
import unicodedata

# Letters NFKD leaves intact; without these "Bjørn & Åse" would lose its "o".
_TRANSLITERATIONS = str.maketrans({
    "æ": "ae",
    "Æ": "ae",
    "ø": "o",
    "Ø": "o",
    "ß": "ss",
})


def generate_slug(name: str, fallback: str = "item") -> str:
    """
    Generate a URL-friendly slug from a title.

    Args:
        name: The text to slugify, e.g. "Emma & Lars".
        fallback: Returned when nothing usable remains.

    Returns:
        A lowercase, hyphen-separated ASCII slug.
    """
    # Transliterate unicode to ASCII (e.g., "Ålesund" -> "Alesund")
    normalized = unicodedata.normalize("NFKD", name.translate(_TRANSLITERATIONS))
    ascii_text = normalized.encode("ascii", "ignore").decode("ascii")

    # Lowercase and replace spaces and special chars with hyphens
    slug = re.sub(r"[^a-z0-9]+", "-", ascii_text.lower())

    # Remove leading/trailing hyphens
    slug = slug.strip("-")

    return slug or fallback
