"""Tests for corerpc.version."""

from __future__ import annotations

import pytest

from corerpc.version import DaemonVersion, VersionRange, major_from_node_version


class TestDaemonVersion:
    def test_bounds(self) -> None:
        assert DaemonVersion.oldest() is DaemonVersion.V17
        assert DaemonVersion.latest() is DaemonVersion.V29
        assert DaemonVersion.V26.label == "v26"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (26, DaemonVersion.V26),
            ("v26", DaemonVersion.V26),
            ("26", DaemonVersion.V26),
            ("0.17", DaemonVersion.V17),
            ("0.18.1", DaemonVersion.V18),
            ("25.1", DaemonVersion.V25),
            (260100, DaemonVersion.V26),
            (170100, DaemonVersion.V17),
            (DaemonVersion.V20, DaemonVersion.V20),
        ],
    )
    def test_parse(self, raw, expected) -> None:
        assert DaemonVersion.parse(raw) is expected

    @pytest.mark.parametrize("raw", [16, 30, "v30", "latest", "", True, 160000])
    def test_parse_rejects(self, raw) -> None:
        with pytest.raises(ValueError):
            DaemonVersion.parse(raw)

    def test_major_from_node_version(self) -> None:
        assert major_from_node_version(170100) == 17
        assert major_from_node_version(290000) == 29
        with pytest.raises(ValueError):
            major_from_node_version(-1)


class TestVersionRange:
    def test_closed_range_membership(self) -> None:
        r = VersionRange(DaemonVersion.V19, DaemonVersion.V22)
        assert DaemonVersion.V19 in r
        assert DaemonVersion.V22 in r
        assert DaemonVersion.V18 not in r
        assert DaemonVersion.V23 not in r
        assert 20 not in r
        assert str(r) == "v19-v22"

    def test_open_range(self) -> None:
        r = VersionRange(DaemonVersion.V25)
        assert DaemonVersion.V29 in r
        assert r.upper is DaemonVersion.V29
        assert str(r) == "v25+"
        assert r.versions() == [DaemonVersion.V25, DaemonVersion.V26, DaemonVersion.V27,
                                DaemonVersion.V28, DaemonVersion.V29]

    def test_single_version_label(self) -> None:
        assert str(VersionRange(DaemonVersion.V17, DaemonVersion.V17)) == "v17"

    def test_empty_range_rejected(self) -> None:
        with pytest.raises(ValueError, match="empty version range"):
            VersionRange(DaemonVersion.V20, DaemonVersion.V19)

    def test_overlaps(self) -> None:
        a = VersionRange(DaemonVersion.V17, DaemonVersion.V18)
        b = VersionRange(DaemonVersion.V19)
        c = VersionRange(DaemonVersion.V18, DaemonVersion.V20)
        assert not a.overlaps(b)
        assert a.overlaps(c)
        assert b.overlaps(c)
        assert c.overlaps(a)
