"""
Company codes: slug derived from the display name.
"Acme Widgets, Inc." -> "acme-widgets-inc"; accents are folded to ASCII first.
"""
import re
import unicodedata


def slugify(name: str) -> str:
    """Lowercase, URL-safe code for a company name. Empty when nothing survives."""
    value = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    value = value.lower().strip()
    value = re.sub(r"[^a-z0-9\s_-]", "", value)
    value = re.sub(r"[\s_-]+", "-", value)
    return value.strip("-")
