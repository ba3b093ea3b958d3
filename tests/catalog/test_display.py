"""Tests for catalog display helpers."""

from kubehub.catalog.display import numbered_prerequisites, summarize_description
from tests.fakes.catalog_store import make_entry


class TestNumberedPrerequisites:
    """Tests for numbered_prerequisites()."""

    def test_numbers_in_stored_order(self) -> None:
        """Prerequisites are numbered from 1 without reordering."""
        entry = make_entry("x", prerequisites=("A", "B", "C"))
        assert numbered_prerequisites(entry) == ["1. A", "2. B", "3. C"]

    def test_keeps_unsorted_order(self) -> None:
        """Order is the stored order, not alphabetical."""
        entry = make_entry("x", prerequisites=("Zeta", "Alpha"))
        assert numbered_prerequisites(entry) == ["1. Zeta", "2. Alpha"]

    def test_duplicates_kept(self) -> None:
        """Repeated prerequisites each get their own number."""
        entry = make_entry("x", prerequisites=("Docker", "Docker"))
        assert numbered_prerequisites(entry) == ["1. Docker", "2. Docker"]

    def test_empty(self) -> None:
        """No prerequisites gives no lines."""
        entry = make_entry("x", prerequisites=())
        assert numbered_prerequisites(entry) == []


class TestSummarizeDescription:
    """Tests for summarize_description()."""

    def test_short_text_unchanged(self) -> None:
        """Text within width is returned as is."""
        assert summarize_description("Small and fast.", 40) == "Small and fast."

    def test_flows_multiline_text(self) -> None:
        """Newlines and runs of spaces collapse to single spaces."""
        text = "Minikube is lightweight. It is used for: \n Learning and experimenting."
        assert summarize_description(text, 200) == (
            "Minikube is lightweight. It is used for: Learning and experimenting."
        )

    def test_truncates_with_ellipsis(self) -> None:
        """Long text is cut to width including the ellipsis."""
        result = summarize_description("abcdefghij", 8)
        assert result == "abcde..."
        assert len(result) == 8

    def test_exact_width_not_truncated(self) -> None:
        """Text exactly at width is kept whole."""
        assert summarize_description("abcdefgh", 8) == "abcdefgh"
