import threading

import pytest

from widecharwidth import (
    WcLookupTable,
    WcWidth,
    _classify,
    build_dense_table,
    classify,
    classify_dense,
    default_table,
)
from widecharwidth import lookup


@pytest.fixture(scope="module")
def table():
    return build_dense_table()


class TestBuild:
    def test_size(self, table):
        assert len(table) == 0x10000
        assert len(table.table) == 0x10000

    def test_immutable(self, table):
        assert isinstance(table.table, tuple)

    def test_agrees_with_classify(self, table):
        for ucs in range(0x10000):
            assert table[ucs] is classify(ucs), hex(ucs)

    def test_ascii_is_one(self, table):
        assert all(table[ucs] is WcWidth.ONE for ucs in range(0x20, 0x7f))


class TestClassifyDense:
    @pytest.mark.parametrize("wc, expected", [
        ('w', WcWidth.ONE),
        ('\x1f', WcWidth.NON_PRINT),
        ('\ue001', WcWidth.PRIVATE_USE),
        ('\u2716', WcWidth.ONE),
        ('\u270a', WcWidth.WIDENED_IN_9),
        ('\U0003fffd', WcWidth.TWO),
    ])
    def test_basics(self, table, wc, expected):
        assert classify_dense(table, wc) is expected
        assert table.classify(ord(wc)) is expected

    @pytest.mark.parametrize("ucs", [
        0x10000, 0x1f600, 0x1fffe, 0x20000, 0xe0001, 0x10fffd, 0x10ffff,
        0x110000, 2**32 - 1, -1,
    ])
    def test_falls_back_outside_bmp(self, table, ucs):
        assert classify_dense(table, ucs) is classify(ucs)


class TestSyntheticTables:
    PROBES = (
        (((0x20, 0x7e),), WcWidth.ONE),
        (((0x10, 0x2f), (0xfff0, 0x10005)), WcWidth.NON_PRINT),
        (((0x28, 0x40), (0x1000, 0x1fff)), WcWidth.COMBINING),
        (((0x00, 0x30), (0x1800, 0x2000), (0x20000, 0x20010)), WcWidth.TWO),
        ((), WcWidth.AMBIGUOUS),
    )

    def test_overlaps_resolve_like_classify(self):
        table = WcLookupTable(self.PROBES)
        for ucs in range(0x10000):
            assert table[ucs] is _classify(ucs, self.PROBES), hex(ucs)

    def test_overlapping_first_table(self):
        table = WcLookupTable(self.PROBES)
        assert table[0x0f] is WcWidth.TWO
        assert table[0x10] is WcWidth.NON_PRINT
        assert table[0x20] is WcWidth.ONE
        assert table[0x7e] is WcWidth.ONE
        assert table[0x7f] is WcWidth.ONE

    def test_range_clipped_to_bmp(self):
        table = build_dense_table(self.PROBES)
        assert table[0xffff] is WcWidth.NON_PRINT
        assert table.classify(0x10003) is WcWidth.NON_PRINT
        assert table.classify(0x10006) is WcWidth.ONE

    def test_fallback_uses_same_tables(self):
        table = build_dense_table(self.PROBES)
        assert table.classify(0x20008) is WcWidth.TWO
        assert classify(0x20008) is WcWidth.TWO
        assert table.classify(0x20011) is WcWidth.ONE

    def test_no_tables(self):
        table = WcLookupTable(())
        assert set(table.table) == {WcWidth.ONE}
        assert table.classify(0x1f600) is WcWidth.ONE


class TestDefaultTable:
    def test_shared(self):
        assert default_table() is default_table()

    def test_built_once_across_threads(self, monkeypatch):
        monkeypatch.setattr(lookup, "_default_table", None)
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(default_table())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(result is results[0] for result in results)
        assert results[0].classify('\u270a') is WcWidth.WIDENED_IN_9
