import pytest

from widecharwidth import (
    PROBE_ORDER,
    WcWidth,
    _bisearch,
    _classify,
    classify,
)


# ── Binary search over ranges ──────────────────────────────────────


class TestBisearch:
    TABLE = ((0x10, 0x1f), (0x30, 0x30), (0x40, 0x4f))

    def test_empty_table(self):
        assert _bisearch(0x10, ()) == 0

    def test_inside(self):
        assert _bisearch(0x10, self.TABLE) == 1
        assert _bisearch(0x17, self.TABLE) == 1
        assert _bisearch(0x1f, self.TABLE) == 1
        assert _bisearch(0x30, self.TABLE) == 1
        assert _bisearch(0x4f, self.TABLE) == 1

    def test_between_ranges(self):
        assert _bisearch(0x20, self.TABLE) == 0
        assert _bisearch(0x2f, self.TABLE) == 0
        assert _bisearch(0x31, self.TABLE) == 0

    def test_outside_span(self):
        assert _bisearch(0x0f, self.TABLE) == 0
        assert _bisearch(0x50, self.TABLE) == 0
        assert _bisearch(-1, self.TABLE) == 0


# ── Classification ─────────────────────────────────────────────────


class TestClassify:
    @pytest.mark.parametrize("wc, expected", [
        ('w', WcWidth.ONE),
        ('\x1f', WcWidth.NON_PRINT),
        ('\ue001', WcWidth.PRIVATE_USE),
        ('\u2716', WcWidth.ONE),
        ('\u270a', WcWidth.WIDENED_IN_9),
        ('\U0003fffd', WcWidth.TWO),
    ])
    def test_basics(self, wc, expected):
        assert classify(wc) is expected
        assert classify(ord(wc)) is expected
        assert WcWidth.from_char(wc) is expected

    @pytest.mark.parametrize("ucs, expected", [
        (0x0000, WcWidth.NON_PRINT),
        (0x0300, WcWidth.COMBINING),
        (0x00a1, WcWidth.AMBIGUOUS),
        (0x1160, WcWidth.COMBINING),
        (0x4e00, WcWidth.TWO),
        (0xac00, WcWidth.TWO),
        (0xd800, WcWidth.NON_PRINT),
        (0xfdd0, WcWidth.NON_CHARACTER),
        (0xffff, WcWidth.NON_CHARACTER),
        (0x0378, WcWidth.UNASSIGNED),
        (0x1f600, WcWidth.WIDENED_IN_9),
        (0x10fffd, WcWidth.PRIVATE_USE),
        (0x10ffff, WcWidth.NON_CHARACTER),
        (0x1f1e6, WcWidth.WIDENED_IN_9),
        (0x1f1ff, WcWidth.WIDENED_IN_9),
    ])
    def test_categories(self, ucs, expected):
        assert classify(ucs) is expected

    @pytest.mark.parametrize("ucs", [
        0x1049e, 0x1049f, 0x105bd, 0x105ff, 0x10940, 0x1097f, 0x1e8d7, 0x1efff,
    ])
    def test_unassigned_inside_assigned_scripts(self, ucs):
        assert classify(ucs) is WcWidth.UNASSIGNED

    def test_assigned_next_to_unassigned(self):
        # OSMANYA LETTER OO and MENDE KIKAKUI COMBINING NUMBER MILLIONS
        assert classify(0x1049d) is WcWidth.ONE
        assert classify(0x1e8d6) is WcWidth.COMBINING

    def test_empty_string_is_nul(self):
        assert classify('') is WcWidth.NON_PRINT

    @pytest.mark.parametrize("ucs", [-1, 0x110000, 0x7fffffff, 2**32 - 1])
    def test_out_of_range_is_one(self, ucs):
        assert classify(ucs) is WcWidth.ONE

    def test_more_than_one_character(self):
        with pytest.raises(TypeError):
            classify('ab')


# ── Probe order ────────────────────────────────────────────────────


class TestProbeOrder:
    def test_order(self):
        assert [category for _, category in PROBE_ORDER] == [
            WcWidth.ONE,
            WcWidth.PRIVATE_USE,
            WcWidth.NON_PRINT,
            WcWidth.NON_CHARACTER,
            WcWidth.COMBINING,
            WcWidth.COMBINING,
            WcWidth.TWO,
            WcWidth.AMBIGUOUS,
            WcWidth.UNASSIGNED,
            WcWidth.WIDENED_IN_9,
        ]

    def test_first_table_wins(self):
        probes = (
            (((0x10, 0x20),), WcWidth.NON_PRINT),
            (((0x18, 0x30),), WcWidth.TWO),
            (((0x00, 0x40),), WcWidth.AMBIGUOUS),
        )
        assert _classify(0x10, probes) is WcWidth.NON_PRINT
        assert _classify(0x20, probes) is WcWidth.NON_PRINT
        assert _classify(0x21, probes) is WcWidth.TWO
        assert _classify(0x30, probes) is WcWidth.TWO
        assert _classify(0x31, probes) is WcWidth.AMBIGUOUS
        assert _classify(0x0f, probes) is WcWidth.AMBIGUOUS
        assert _classify(0x41, probes) is WcWidth.ONE

    def test_reordering_changes_result(self):
        first = (((0x10, 0x20),), WcWidth.COMBINING)
        second = (((0x10, 0x20),), WcWidth.TWO)
        assert _classify(0x15, (first, second)) is WcWidth.COMBINING
        assert _classify(0x15, (second, first)) is WcWidth.TWO

    def test_combining_marks_in_wide_blocks(self):
        # HIRAGANA-KATAKANA VOICED SOUND MARKS are listed as wide too.
        assert classify(0x3099) is WcWidth.COMBINING
        assert classify(0x309b) is WcWidth.TWO

    def test_private_use_before_ambiguous(self):
        assert classify(0xe000) is WcWidth.PRIVATE_USE
        assert classify(0xf0000) is WcWidth.PRIVATE_USE

    def test_noncharacter_before_unassigned(self):
        assert classify(0x1fffe) is WcWidth.NON_CHARACTER
        assert classify(0x1fffd) is WcWidth.UNASSIGNED


# ── Range boundaries ───────────────────────────────────────────────


def _shadowed(ucs, index):
    """Whether a table probed before ``PROBE_ORDER[index]`` holds ``ucs``."""
    return any(_bisearch(ucs, table) for table, _ in PROBE_ORDER[:index])


@pytest.mark.parametrize("index", range(len(PROBE_ORDER)))
def test_range_boundaries(index):
    table, category = PROBE_ORDER[index]
    for start, end in table:
        for ucs in (start, end):
            if not _shadowed(ucs, index):
                assert classify(ucs) is category, hex(ucs)
        assert not _bisearch(start - 1, table), hex(start - 1)
        assert not _bisearch(end + 1, table), hex(end + 1)
