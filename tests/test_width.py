import warnings

import pytest

from widecharwidth import (
    UNICODE_8,
    UNICODE_9,
    WcWidth,
    _wcmatch_version,
    _wcversion_value,
    classify,
    wcwidth,
    width_for_version,
)
from widecharwidth import widecharwidth as _module


@pytest.fixture(autouse=True)
def fresh_caches(monkeypatch):
    monkeypatch.delenv("UNICODE_VERSION", raising=False)
    _module._match_version.cache_clear()
    _module._wcwidth.cache_clear()
    yield
    _module._match_version.cache_clear()
    _module._wcwidth.cache_clear()


# ── Width mapping ──────────────────────────────────────────────────


class TestWidthForVersion:
    @pytest.mark.parametrize("category, narrow, wide", [
        (WcWidth.ONE, 1, 1),
        (WcWidth.TWO, 2, 2),
        (WcWidth.NON_PRINT, 0, 0),
        (WcWidth.COMBINING, 0, 0),
        (WcWidth.UNASSIGNED, 0, 0),
        (WcWidth.NON_CHARACTER, 0, 0),
        (WcWidth.AMBIGUOUS, 1, 1),
        (WcWidth.PRIVATE_USE, 1, 1),
        (WcWidth.WIDENED_IN_9, 1, 2),
    ])
    def test_table(self, category, narrow, wide):
        assert width_for_version(category, UNICODE_8) == narrow
        assert width_for_version(category, UNICODE_9) == wide
        assert category.width_unicode_8_or_earlier() == narrow
        assert category.width_unicode_9_or_later() == wide

    def test_every_category_mapped(self):
        for category in WcWidth:
            assert width_for_version(category, UNICODE_8) in (0, 1, 2)
            assert width_for_version(category, UNICODE_9) in (0, 1, 2)

    def test_policies_differ_only_when_widened(self):
        for category in WcWidth:
            narrow = width_for_version(category, UNICODE_8)
            wide = width_for_version(category, UNICODE_9)
            if category is WcWidth.WIDENED_IN_9:
                assert (narrow, wide) == (1, 2)
            else:
                assert narrow == wide

    @pytest.mark.parametrize("version, expected", [
        ("4.1.0", 1),
        ("8", 1),
        ("8.0", 1),
        ("8.0.0", 1),
        ("9", 2),
        ("9.0.0", 2),
        ("12.1.0", 2),
        ("15.1.0", 2),
        ("latest", 2),
    ])
    def test_version_selects_policy(self, version, expected):
        assert width_for_version(WcWidth.WIDENED_IN_9, version) == expected

    def test_auto_defaults_to_latest(self):
        assert width_for_version(WcWidth.WIDENED_IN_9) == 2

    def test_auto_reads_environment(self, monkeypatch):
        monkeypatch.setenv("UNICODE_VERSION", "8.0.0")
        assert width_for_version(WcWidth.WIDENED_IN_9) == 1
        monkeypatch.setenv("UNICODE_VERSION", "9.0.0")
        assert width_for_version(WcWidth.WIDENED_IN_9) == 2


# ── Character widths ───────────────────────────────────────────────


class TestWcwidth:
    @pytest.mark.parametrize("wc, narrow, wide", [
        ('w', 1, 1),
        ('\x1f', 0, 0),
        ('\ue001', 1, 1),
        ('\u2716', 1, 1),
        ('\u270a', 1, 2),
        ('\U0003fffd', 2, 2),
        ('\u0301', 0, 0),
        ('\u4e00', 2, 2),
    ])
    def test_basics(self, wc, narrow, wide):
        assert wcwidth(wc, UNICODE_8) == narrow
        assert wcwidth(wc, UNICODE_9) == wide
        assert wcwidth(ord(wc), UNICODE_9) == wide

    @pytest.mark.parametrize("ucs", [0, 0x10ffff, 0x110000, 2**32 - 1])
    def test_total(self, ucs):
        assert wcwidth(ucs, UNICODE_8) in (0, 1, 2)
        assert wcwidth(ucs, UNICODE_9) in (0, 1, 2)

    @pytest.mark.parametrize("ucs", [0x1049e, 0x105bd, 0x10940, 0x1e8d7])
    def test_unassigned_supplementary(self, ucs):
        assert wcwidth(ucs, UNICODE_8) == 0
        assert wcwidth(ucs, UNICODE_9) == 0

    def test_regional_indicators(self):
        for ucs in (0x1f1e6, 0x1f1ff):
            assert wcwidth(ucs, UNICODE_8) == 1
            assert wcwidth(ucs, UNICODE_9) == 2

    def test_widened_characters(self):
        for ucs in (0x231a, 0x2614, 0x270a, 0x2b50, 0x1f300, 0x1f600, 0x1f9ff):
            assert classify(ucs) is WcWidth.WIDENED_IN_9, hex(ucs)
            assert wcwidth(ucs, UNICODE_8) == 1
            assert wcwidth(ucs, UNICODE_9) == 2

    def test_environment_not_cached(self, monkeypatch):
        monkeypatch.setenv("UNICODE_VERSION", "8.0.0")
        assert wcwidth('\u270a') == 1
        monkeypatch.setenv("UNICODE_VERSION", "9.0.0")
        assert wcwidth('\u270a') == 2


# ── Version matching ───────────────────────────────────────────────


class TestWcmatchVersion:
    def test_latest(self):
        assert _wcmatch_version("latest") == "15.1.0"

    def test_normalized(self):
        assert _wcmatch_version("8") == "8.0.0"
        assert _wcmatch_version("8.0") == "8.0.0"
        assert _wcmatch_version("9.0.0") == "9.0.0"

    def test_auto(self, monkeypatch):
        assert _wcmatch_version("auto") == "15.1.0"
        monkeypatch.setenv("UNICODE_VERSION", "6.0")
        assert _wcmatch_version("auto") == "6.0.0"

    def test_exact_match_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert _wcmatch_version("12.1.0") == "12.1.0"

    @pytest.mark.parametrize("version", ["x.y", "", "9.", "nine", 9])
    def test_invalid_falls_back_to_latest(self, version):
        with pytest.warns(UserWarning, match="Invalid Unicode version"):
            assert _wcmatch_version(version) == "15.1.0"

    def test_invalid_uses_widest_policy(self):
        with pytest.warns(UserWarning):
            assert width_for_version(WcWidth.WIDENED_IN_9, "bogus") == 2

    def test_future_falls_back_to_latest(self):
        with pytest.warns(UserWarning, match="not found"):
            assert _wcmatch_version("99.0.0") == "15.1.0"

    def test_version_value(self):
        assert _wcversion_value("8.0.0") == (8, 0, 0)
        assert _wcversion_value("15.1") == (15, 1)
        assert _wcversion_value("8.0.0") < _wcversion_value("9.0.0")
        assert _wcversion_value("10.0.0") > _wcversion_value("9.0.0")
