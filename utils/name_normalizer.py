"""
Driver name normalization used to build predictable image urls.
Turns display names such as "Sergio Pérez" or "Nico Hülkenberg" into ASCII slugs.
"""
import re
import unicodedata

from constants.ergast_api_endpoints import HEADSHOT_URL_TEMPLATE

# Latin letters and ligatures mapped to ASCII. Only the ones without an NFD decomposition are reached in practice
CHAR_MAP = {
    'À': 'A', 'Á': 'A', 'Â': 'A', 'Ã': 'A', 'Ä': 'A', 'Å': 'A', 'Æ': 'AE', 'Ç': 'C',
    'È': 'E', 'É': 'E', 'Ê': 'E', 'Ë': 'E', 'Ì': 'I', 'Í': 'I', 'Î': 'I', 'Ï': 'I',
    'Ð': 'D', 'Ñ': 'N', 'Ò': 'O', 'Ó': 'O', 'Ô': 'O', 'Õ': 'O', 'Ö': 'O', '×': 'x',
    'Ø': 'O', 'Ù': 'U', 'Ú': 'U', 'Û': 'U', 'Ü': 'U', 'Ý': 'Y', 'ß': 'ss', 'à': 'a',
    'á': 'a', 'â': 'a', 'ã': 'a', 'ä': 'a', 'å': 'a', 'æ': 'ae', 'ç': 'c', 'è': 'e',
    'é': 'e', 'ê': 'e', 'ë': 'e', 'ì': 'i', 'í': 'i', 'î': 'i', 'ï': 'i', 'ð': 'd',
    'ñ': 'n', 'ò': 'o', 'ó': 'o', 'ô': 'o', 'õ': 'o', 'ö': 'o', 'ø': 'o', 'ù': 'u',
    'ú': 'u', 'û': 'u', 'ü': 'u', 'ý': 'y', 'ÿ': 'y', 'Ł': 'L', 'ł': 'l', 'Ń': 'N',
    'ń': 'n', 'Œ': 'OE', 'œ': 'oe', 'Ś': 'S', 'ś': 's', 'Š': 'S', 'š': 's', 'Ÿ': 'Y',
    'Ž': 'Z', 'ž': 'z', 'ƒ': 'f', 'Ș': 'S', 'ș': 's', 'Ț': 'T', 'ț': 't',
}

COMBINING_MARKS = re.compile("[\u0300-\u036f]")
# \w spelled out as ASCII so any other letter goes through CHAR_MAP; \s keeps all Unicode whitespace
NON_WORD = re.compile(r"[^A-Za-z0-9_\s]")


def normalize(name: str) -> str:
    """
    Convert a display name to ASCII without changing its case.

    Accented letters are decomposed and their combining marks removed,
    ligatures and letters without a decomposition go through CHAR_MAP, and
    anything else that is not a word character or whitespace is dropped.

    Args:
        name: Display name, e.g. a driver's given or family name

    Returns:
        ASCII-only string, possibly empty
    """
    decomposed = unicodedata.normalize("NFD", name)
    stripped = COMBINING_MARKS.sub("", decomposed)
    return NON_WORD.sub(lambda match: CHAR_MAP.get(match.group(0), ""), stripped)


def driver_slug(given_name: str, family_name: str) -> str:
    """Hyphen-join the normalized names and lowercase, e.g. "max-verstappen"."""
    return f"{normalize(given_name)}-{normalize(family_name)}".lower()


def headshot_url(slug: str, template: str = HEADSHOT_URL_TEMPLATE) -> str:
    return template.format(slug=slug)
