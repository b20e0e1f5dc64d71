"""Integrity of the range tables: every table is sorted and disjoint."""
import pytest

import widecharwidth
from widecharwidth import table_special, table_wide, table_zero

TABLES = [
    (module, name)
    for module in (table_special, table_wide, table_zero)
    for name in dir(module)
    if name.endswith("_TABLE")
]


def test_all_tables_found():
    assert sorted(name for _, name in TABLES) == [
        "AMBIGUOUS_TABLE",
        "ASCII_TABLE",
        "COMBININGLETTERS_TABLE",
        "COMBINING_TABLE",
        "DOUBLEWIDE_TABLE",
        "NONCHAR_TABLE",
        "NONPRINT_TABLE",
        "PRIVATE_TABLE",
        "UNASSIGNED_TABLE",
        "WIDENED_TABLE",
    ]


@pytest.mark.parametrize("module, name", TABLES, ids=[name for _, name in TABLES])
class TestTable:
    def test_immutable(self, module, name):
        table = getattr(module, name)
        assert isinstance(table, tuple)
        assert all(isinstance(entry, tuple) for entry in table)

    def test_ranges(self, module, name):
        for start, end in getattr(module, name):
            assert 0 <= start <= end <= 0x10ffff, (hex(start), hex(end))

    def test_sorted_and_disjoint(self, module, name):
        table = getattr(module, name)
        for (_, prev_end), (start, _) in zip(table, table[1:]):
            # Adjacent ranges are merged, so a gap remains between them.
            assert prev_end + 1 < start, (hex(prev_end), hex(start))


def test_unicode_version_beside_tables():
    assert table_special.UNICODE_VERSION == "15.1.0"
    assert widecharwidth.UNICODE_VERSION is table_special.UNICODE_VERSION


def test_unassigned_covers_supplementary_gaps():
    ranges = table_special.UNASSIGNED_TABLE
    smp = [(start, end) for start, end in ranges if 0x10000 <= start < 0x20000]
    assert sum(end - start + 1 for start, end in smp) > 40000
    for gap in ((0x1049e, 0x1049f), (0x105bd, 0x105ff),
                (0x10940, 0x1097f), (0x1e8d7, 0x1e8ff)):
        assert gap in ranges, gap


def test_widened_not_double_wide():
    for start, end in table_wide.WIDENED_TABLE:
        for table in (table_wide.DOUBLEWIDE_TABLE, table_wide.AMBIGUOUS_TABLE):
            assert not any(s <= end and start <= e for s, e in table), hex(start)
