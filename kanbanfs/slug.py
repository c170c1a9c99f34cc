"""URL-safe slugs for folder names."""

import re

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")
_MULTIPLE_HYPHENS = re.compile(r"-+")

MAX_LENGTH = 50
DEFAULT_SLUG = "untitled"


def generate(text: str) -> str:
    """Return a lower-case, hyphen-separated slug of at most 50 characters."""
    slug = text.lower().replace(" ", "-")
    slug = _NON_ALPHANUMERIC.sub("-", slug)
    slug = _MULTIPLE_HYPHENS.sub("-", slug).strip("-")
    if not slug:
        return DEFAULT_SLUG
    if len(slug) > MAX_LENGTH:
        slug = slug[:MAX_LENGTH].rstrip("-")
    return slug