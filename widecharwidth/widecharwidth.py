"""
This is a python implementation of widecharwidth's codepoint classifier.

https://github.com/ridiculousfish/widecharwidth/

In fixed-width output devices, Latin characters all occupy a single
"cell" position of equal width, whereas ideographic CJK characters
occupy two such cells. Rather than answering with a width straight away,
every codepoint is first sorted into one of a small, closed set of
categories (:class:`WcWidth`): single-width, double-width, non-printing,
zero-width combining, East Asian ambiguous, private use, unassigned,
noncharacter, or "widened in Unicode 9".

The category is then mapped to a number of cells by a width policy. Two
policies exist, and they only disagree about characters that were
narrow in Unicode 8 and became wide in Unicode 9 (chiefly emoji with a
default emoji presentation). Terminals and libraries that still measure
text with Unicode 8 tables draw these in one cell; newer ones use two.
Callers select the policy matching their rendering target with a
version string, such as ``'8.0.0'`` or ``'9.0.0'``.

Categories for ambiguous, private-use and unassigned characters are
reported as such, so that a caller may choose a different width for
them than the policy default.

http://www.unicode.org/unicode/reports/tr11/
"""
import enum
import os
import warnings
from functools import lru_cache

from .table_special import (
    ASCII_TABLE, NONCHAR_TABLE, PRIVATE_TABLE, UNASSIGNED_TABLE, UNICODE_VERSION)
from .table_wide import AMBIGUOUS_TABLE, DOUBLEWIDE_TABLE, WIDENED_TABLE
from .table_zero import COMBINING_TABLE, COMBININGLETTERS_TABLE, NONPRINT_TABLE

#: Width policy of applications using Unicode 8 or earlier.
UNICODE_8 = '8.0.0'

#: Width policy of applications using Unicode 9 or later.
UNICODE_9 = '9.0.0'


class WcWidth(enum.Enum):
    """Classification of a single codepoint."""

    #: The character is single-width.
    ONE = 'one'
    #: The character is double-width.
    TWO = 'two'
    #: The character is not printable.
    NON_PRINT = 'nonprint'
    #: The character is a zero-width combiner.
    COMBINING = 'combining'
    #: The character is East Asian ambiguous width.
    AMBIGUOUS = 'ambiguous'
    #: The character is for private use.
    PRIVATE_USE = 'private'
    #: The character is unassigned.
    UNASSIGNED = 'unassigned'
    #: Width is 1 in Unicode 8, 2 in Unicode 9 and later.
    WIDENED_IN_9 = 'widenedin9'
    #: The character is a noncharacter.
    NON_CHARACTER = 'noncharacter'

    @classmethod
    def from_char(cls, wc):
        """Return the category of ``wc``, see :func:`classify`."""
        return classify(wc)

    def width_unicode_8_or_earlier(self):
        """Return width for applications that are using Unicode 8 or earlier."""
        return _WIDTH_UNICODE_8[self]

    def width_unicode_9_or_later(self):
        """Return width for applications that are using Unicode 9 or later."""
        if self is WcWidth.WIDENED_IN_9:
            return 2
        return self.width_unicode_8_or_earlier()


_WIDTH_UNICODE_8 = {
    WcWidth.ONE: 1,
    WcWidth.TWO: 2,
    WcWidth.NON_PRINT: 0,
    WcWidth.COMBINING: 0,
    WcWidth.UNASSIGNED: 0,
    WcWidth.NON_CHARACTER: 0,
    WcWidth.AMBIGUOUS: 1,
    WcWidth.PRIVATE_USE: 1,
    WcWidth.WIDENED_IN_9: 1,
}

#: Range tables and their category, in the order they are probed. The
#: first table containing a codepoint decides its category, so the order
#: settles any codepoint listed by more than one table.
PROBE_ORDER = (
    (ASCII_TABLE, WcWidth.ONE),
    (PRIVATE_TABLE, WcWidth.PRIVATE_USE),
    (NONPRINT_TABLE, WcWidth.NON_PRINT),
    (NONCHAR_TABLE, WcWidth.NON_CHARACTER),
    (COMBINING_TABLE, WcWidth.COMBINING),
    (COMBININGLETTERS_TABLE, WcWidth.COMBINING),
    (DOUBLEWIDE_TABLE, WcWidth.TWO),
    (AMBIGUOUS_TABLE, WcWidth.AMBIGUOUS),
    (UNASSIGNED_TABLE, WcWidth.UNASSIGNED),
    (WIDENED_TABLE, WcWidth.WIDENED_IN_9),
)


def _bisearch(ucs, table):
    """
    Auxiliary function for binary search in interval table.

    :arg int ucs: Ordinal value of unicode character.
    :arg list table: List of starting and ending ranges of ordinal values,
        in form of ``[(start, end), ...]``.
    :rtype: int
    :returns: 1 if ordinal value ucs is found within lookup table, else 0.
    """
    if not table:
        return 0

    min = 0
    max = len(table) - 1
    if ucs < table[0][0] or ucs > table[max][1]:
        return 0

    while max >= min:
        mid = (min + max) // 2
        if ucs > table[mid][1]:
            min = mid + 1
        elif ucs < table[mid][0]:
            max = mid - 1
        else:
            return 1

    return 0


def _ordinal(wc):
    """
    Return the codepoint of ``wc``.

    :param wc: A single Unicode character, or an integer codepoint.
    :rtype: int
    """
    if isinstance(wc, int):
        return wc
    return ord(wc) if len(wc) else 0


def _classify(ucs, probes):
    """
    Return the category of the first table in ``probes`` containing ``ucs``.

    :arg int ucs: Ordinal value of unicode character.
    :arg probes: Sequence of ``(table, category)`` pairs, in probe order.
    :rtype: WcWidth
    """
    for table, category in probes:
        if _bisearch(ucs, table):
            return category
    return WcWidth.ONE


def classify(wc):
    """
    Given one Unicode character, return its width category.

    :param wc: A single Unicode character, or an integer codepoint. An
        empty string is classified as NUL.
    :return: The :class:`WcWidth` category of ``wc``. Any integer is
        accepted: values outside of the Unicode codepoint space, and
        codepoints missing from every range table, are :attr:`WcWidth.ONE`.
    :rtype: WcWidth
    """
    return _classify(_ordinal(wc), PROBE_ORDER)


def width_for_version(category, unicode_version='auto'):
    """
    Return the number of cells a character of given category occupies.

    :param WcWidth category: Width category, as returned by :func:`classify`.
    :param str unicode_version: A Unicode version number, such as
        ``'8.0.0'``. Versions before ``9.0.0`` use the Unicode 8 width
        policy, all others the Unicode 9 policy. May also be ``latest``,
        or ``auto`` (default), which uses the Environment Variable,
        ``UNICODE_VERSION`` if defined, or the latest available unicode
        version, otherwise.
    :rtype: int
    :returns: 0, 1 or 2.
    """
    version = _wcmatch_version(unicode_version)
    if _wcversion_value(version) < _wcversion_value(UNICODE_9):
        return category.width_unicode_8_or_earlier()
    return category.width_unicode_9_or_later()


def wcwidth(wc, unicode_version='auto'):
    """
    Given one Unicode character, return its printable length on a terminal.

    :param wc: A single Unicode character, or an integer codepoint.
    :param str unicode_version: Width policy, see :func:`width_for_version`.
    :rtype: int
    :returns: The width, in cells, necessary to display ``wc``: 0 for
        nonprinting, combining, unassigned and noncharacter codepoints,
        otherwise 1 or 2.
    """
    return _wcwidth(wc, _wcmatch_version(unicode_version))


@lru_cache(maxsize=1000)
def _wcwidth(wc, version):
    return width_for_version(classify(wc), version)


@lru_cache(maxsize=128)
def _wcversion_value(ver_string):
    """
    Integer-mapped value of given dotted version string.

    :param str ver_string: Unicode version string, of form ``n.n.n``.
    :rtype: tuple(int)
    :returns: tuple of digit tuples, ``tuple(int, [...])``.
    :raises ValueError: when a part of ``ver_string`` is not an integer.
    """
    return tuple(map(int, ver_string.split('.')))


def _wcmatch_version(given_version):
    """
    Return the normalized Unicode version level for ``given_version``.

    >>> _wcmatch_version('8.0')
    '8.0.0'
    >>> _wcmatch_version('latest')
    '15.1.0'

    :param str given_version: given version for compare, may be ``auto``
        (default), to select Unicode Version from Environment Variable,
        ``UNICODE_VERSION``. If the environment variable is not set, then the
        latest is used.
    :rtype: str
    :returns: Version string of form ``n.n.n``.
    """
    if given_version == 'auto':
        given_version = os.environ.get('UNICODE_VERSION', 'latest')
    return _match_version(given_version)


@lru_cache(maxsize=8)
def _match_version(given_version):
    if given_version == 'latest':
        return UNICODE_VERSION

    try:
        given_value = _wcversion_value(given_version)
    except (AttributeError, ValueError):
        warnings.warn(f'Invalid Unicode version "{given_version}", using latest "{UNICODE_VERSION}"')
        return UNICODE_VERSION

    # If version is higher than latest, use latest
    if given_value > _wcversion_value(UNICODE_VERSION):
        warnings.warn(f'Unicode version "{given_version}" not found, using latest "{UNICODE_VERSION}"')
        return UNICODE_VERSION

    # Ensure a three-part version string (n.n.n)
    parts = list(map(str, given_value))
    while len(parts) < 3:
        parts.append('0')
    return '.'.join(parts)
