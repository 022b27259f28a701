"""Slug handling and country lookup - pure functions for testability."""
from typing import TYPE_CHECKING, Optional, Sequence
from urllib.parse import quote, unquote

if TYPE_CHECKING:
    from country_data import CountryRecord

SLUG_SEPARATOR = "-"


def _fold(text: str) -> str:
    return text.replace(SLUG_SEPARATOR, " ").lower()


def normalize(slug: str) -> str:
    """
    Turn a URL slug back into a comparable name.

    "united-states" -> "united states", "c%C3%B4te-d'ivoire" -> "côte d'ivoire".
    Percent-decoding is repeated until nothing is left to decode, so
    normalize(normalize(s)) == normalize(s).
    """
    text = slug.replace(SLUG_SEPARATOR, " ")
    while True:
        decoded = unquote(text)
        if decoded == text:
            break
        text = decoded
    return _fold(text)


def slugify(name: str) -> str:
    """Build the URL slug for a country name ("United States" -> "united-states")."""
    return quote(name.lower().replace(" ", SLUG_SEPARATOR), safe="-'(),")


def resolve(slug: str, directory: Sequence["CountryRecord"]) -> Optional["CountryRecord"]:
    """
    Find the record a slug points at.

    A record matches when its common or official name equals the normalized
    slug. When several records match, the first one in directory order wins.

    Returns:
        The matching record, or None when nothing matches (including when the
        directory has not been loaded yet)
    """
    target = normalize(slug)
    if not target:
        return None
    for record in directory:
        if _fold(record.common_name) == target or _fold(record.official_name) == target:
            return record
    return None
