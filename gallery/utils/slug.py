"""URL slug derivation."""

import re
import secrets

from slugify import slugify as _slugify

# Removed outright instead of becoming a separator: "it's" -> "its"
_REMOVED_CHARS = re.compile(r"[*+~.()'\"!:@]")

# Symbols spelled out as words rather than dropped
_SYMBOL_WORDS = [
    ["&", " and "],
    ["%", " percent "],
    ["$", " dollar "],
    ["<", " less "],
    [">", " greater "],
    ["|", " or "],
]


def slugify(text: str) -> str:
    """Derive a lowercase, hyphen-separated slug from free text.

    Letters are transliterated to ASCII ("Straße" -> "strasse",
    "Łódź" -> "lodz") and every run of whitespace or punctuation collapses
    into one hyphen. The result only contains ``[a-z0-9-]`` and never starts
    or ends with a hyphen. Text with no usable characters yields ``""``.
    """
    value = _REMOVED_CHARS.sub("", str(text))
    return _slugify(value, replacements=_SYMBOL_WORDS, lowercase=True)


def fallback_slug(prefix: str) -> str:
    """Generated identifier for titles that slugify to nothing."""
    return f"{prefix}-{secrets.token_hex(4)}"
