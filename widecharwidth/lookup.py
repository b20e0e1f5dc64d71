"""
Constant time classification of the Basic Multilingual Plane.

:func:`~.classify` probes up to ten range tables with a binary search
each. This module precomputes the category of the first 64k codepoints
into a table, so that lookups there are a single index operation,
falling back to the range tables for codepoints outside that range.

The table is a cache of :func:`~.classify` and never disagrees with it.
"""
import threading

from .widecharwidth import PROBE_ORDER, WcWidth, _classify, _ordinal

#: Number of codepoints held by a :class:`WcLookupTable`.
TABLE_SIZE = 0x10000


class WcLookupTable:
    """
    Categories of codepoints ``0`` through ``0xffff``.

    :param probes: Sequence of ``(table, category)`` pairs, in probe order.
        Defaults to the range tables used by :func:`~.classify`.
    """

    def __init__(self, probes=PROBE_ORDER):
        self._probes = tuple(probes)
        table = [WcWidth.ONE] * TABLE_SIZE
        # Populate the table in the reverse order to that used by
        # _classify(), so that the table probed first is written last
        # and wins wherever the range tables overlap.
        for ranges, category in reversed(self._probes):
            for start, end in ranges:
                if start >= TABLE_SIZE:
                    break
                end = min(end, TABLE_SIZE - 1)
                table[start:end + 1] = [category] * (end - start + 1)
        self.table = tuple(table)

    def __len__(self):
        return len(self.table)

    def __getitem__(self, ucs):
        return self.table[ucs]

    def classify(self, wc):
        """
        Classify a character as a :class:`~.WcWidth`.

        :param wc: A single Unicode character, or an integer codepoint.
        :rtype: WcWidth
        """
        ucs = _ordinal(wc)
        if 0 <= ucs < TABLE_SIZE:
            return self.table[ucs]
        return _classify(ucs, self._probes)


def build_dense_table(probes=PROBE_ORDER):
    """Return a new :class:`WcLookupTable` for given ``probes``."""
    return WcLookupTable(probes)


def classify_dense(table, wc):
    """
    Given one Unicode character, return its width category using ``table``.

    :param WcLookupTable table: Table from :func:`build_dense_table`.
    :param wc: A single Unicode character, or an integer codepoint.
    :rtype: WcWidth
    """
    return table.classify(wc)


_default_table = None
_default_table_lock = threading.Lock()


def default_table():
    """
    Return the shared :class:`WcLookupTable` of the default range tables.

    The table is built on first use, once, and is read-only afterwards.
    """
    global _default_table
    if _default_table is None:
        with _default_table_lock:
            if _default_table is None:
                _default_table = WcLookupTable()
    return _default_table
