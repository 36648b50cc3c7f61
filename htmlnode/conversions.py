"""
String conversions behind the HTMLNode content accessors.

None of these functions raise on bad input: an empty or unparsable string
gives ``0``, ``0.0`` or ``None``. Locale-aware numbers are parsed with Babel;
date patterns use the Unicode LDML syntax (``yyyy-MM-dd 'at' HH:mm``) and are
tokenized with Babel before being handed to ``datetime.strptime``.
"""

import logging
import math
import re
from datetime import datetime, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from babel.core import Locale, UnknownLocaleError, default_locale
from babel.dates import tokenize_pattern
from babel.numbers import NumberFormatError, parse_decimal

from htmlnode.utils.config import get_config

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r'[+-]?\d+')
_DOUBLE = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')

FALLBACK_LOCALE = "en_US_POSIX"

# LDML field (character, width) -> strptime directive. A width of None
# applies to any width not listed explicitly for that character.
_DATE_FIELDS = {
    ('y', 2): '%y',
    ('y', None): '%Y',
    ('u', None): '%Y',
    ('M', 3): '%b',
    ('M', 4): '%B',
    ('M', None): '%m',
    ('L', 3): '%b',
    ('L', 4): '%B',
    ('L', None): '%m',
    ('d', None): '%d',
    ('D', None): '%j',
    ('H', None): '%H',
    ('h', None): '%I',
    ('m', None): '%M',
    ('s', None): '%S',
    ('S', None): '%f',
    ('a', None): '%p',
    ('E', 4): '%A',
    ('E', None): '%a',
    ('Z', None): '%z',
    ('x', None): '%z',
    ('X', None): '%z',
}


def trim(text: Optional[str]) -> str:
    """Strip leading and trailing whitespace and newlines."""
    if not text:
        return ""
    return text.strip()


def collapse_whitespace(text: Optional[str]) -> str:
    """
    Trim ``text`` and replace every inner run of whitespace with one space.

    Args:
        text: The string to collapse

    Returns:
        The collapsed string; empty for empty or whitespace-only input
    """
    if not text:
        return ""
    return " ".join(text.split())


def integer_value(text: Optional[str]) -> int:
    """Parse a plain decimal integer, or return 0."""
    text = trim(text)
    if not _INTEGER.fullmatch(text):
        return 0
    return int(text)


def double_value(text: Optional[str]) -> float:
    """Parse a plain decimal number such as ``-1.5e3``, or return 0.0."""
    text = trim(text)
    if not _DOUBLE.fullmatch(text):
        return 0.0
    return float(text)


def resolve_locale(identifier: Optional[str] = None) -> Optional[Locale]:
    """
    Resolve a locale identifier such as ``en_US`` or ``de-CH``.

    Without an identifier, the ``conversion.default_locale`` setting is used,
    then the process's numeric locale, then ``en_US_POSIX``.

    Args:
        identifier: The locale identifier

    Returns:
        The Babel locale, or None when the identifier is not a known locale
    """
    if identifier is None:
        identifier = (get_config().get("conversion.default_locale")
                      or default_locale("LC_NUMERIC")
                      or FALLBACK_LOCALE)

    if not isinstance(identifier, str):
        logger.debug(f"Ignoring non-string locale identifier {identifier!r}")
        return None

    try:
        return Locale.parse(identifier.replace('-', '_'))
    except (UnknownLocaleError, ValueError) as e:
        logger.debug(f"Unknown locale {identifier!r}: {e}")
        return None


def double_value_for_locale(text: Optional[str], identifier: Optional[str] = None,
                            considering_plus_sign: bool = False) -> float:
    """
    Parse a number written with a locale's grouping and decimal symbols.

    Args:
        text: The string to parse, e.g. ``"1.234,5"`` for ``de_DE``
        identifier: Locale identifier; see ``resolve_locale``
        considering_plus_sign: Accept a leading ``+``; when False a string
            starting with ``+`` does not parse

    Returns:
        float: The parsed value, 0.0 when the string or locale is unusable
    """
    text = trim(text)
    if not text:
        return 0.0

    if text.startswith('+'):
        if not considering_plus_sign:
            return 0.0
        text = text[1:]

    locale = resolve_locale(identifier)
    if locale is None:
        return 0.0

    try:
        value = float(parse_decimal(text, locale=locale))
    except NumberFormatError as e:
        logger.debug(f"Could not parse {text!r} for locale {locale}: {e}")
        return 0.0

    if not math.isfinite(value):
        return 0.0
    return value


def ldml_to_strptime(pattern: str) -> Optional[str]:
    """
    Translate an LDML date pattern into a ``strptime`` format string.

    Args:
        pattern: LDML pattern such as ``"yyyy-MM-dd 'at' HH:mm"``

    Returns:
        The ``strptime`` format, or None if the pattern uses a field that
        ``strptime`` cannot read
    """
    parts = []
    for kind, value in tokenize_pattern(pattern):
        if kind == 'chars':
            parts.append(value.replace('%', '%%'))
            continue

        char, width = value
        directive = _DATE_FIELDS.get((char, width)) or _DATE_FIELDS.get((char, None))
        if directive is None:
            logger.debug(f"Unsupported date field {char * width!r} in pattern {pattern!r}")
            return None
        parts.append(directive)

    return "".join(parts)


def resolve_time_zone(time_zone: Union[str, tzinfo, None] = None) -> Optional[tzinfo]:
    """
    Resolve a time zone given as an IANA name or a ``tzinfo``.

    Without one, the ``conversion.default_time_zone`` setting is used, then
    the system's local zone.

    Returns:
        The time zone, or None when the name is unknown
    """
    if time_zone is None:
        time_zone = get_config().get("conversion.default_time_zone")
        if time_zone is None:
            return datetime.now().astimezone().tzinfo

    if isinstance(time_zone, tzinfo):
        return time_zone

    if not isinstance(time_zone, str):
        logger.debug(f"Ignoring time zone of type {type(time_zone).__name__}")
        return None

    try:
        return ZoneInfo(time_zone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.debug(f"Unknown time zone {time_zone!r}: {e}")
        return None


def date_value_for_format(text: Optional[str], pattern: str,
                          time_zone: Union[str, tzinfo, None] = None) -> Optional[datetime]:
    """
    Parse a date string according to an LDML pattern.

    Args:
        text: The string to parse, e.g. ``"2001-01-02 at 13:00"``
        pattern: LDML pattern, e.g. ``"yyyy-MM-dd 'at' HH:mm"``
        time_zone: Zone the string is written in, unless the pattern itself
            carries an offset; the system zone when omitted

    Returns:
        datetime: An aware datetime, or None when anything is unparsable
    """
    if not text or not pattern:
        return None

    zone = resolve_time_zone(time_zone)
    if zone is None:
        return None

    directives = ldml_to_strptime(pattern)
    if directives is None:
        return None

    try:
        parsed = datetime.strptime(text, directives)
    except ValueError as e:
        logger.debug(f"Could not parse {text!r} with pattern {pattern!r}: {e}")
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=zone)
    return parsed
