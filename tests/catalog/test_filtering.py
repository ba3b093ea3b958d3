"""Tests for filter_entries logic."""

from kubehub.catalog.filtering import filter_entries
from tests.fakes.catalog_store import make_entry

ENTRIES = (
    make_entry("minikube", "Minikube", description="Single-node cluster for development."),
    make_entry("kind", "KIND", description="Kubernetes IN Docker."),
    make_entry("k3d", "k3d", description="Run k3s in Docker."),
)


def test_empty_query_returns_all() -> None:
    """Empty query returns every entry."""
    assert filter_entries(ENTRIES, "") == ENTRIES


def test_filter_by_id() -> None:
    """Filters entries by id substring."""
    result = filter_entries(ENTRIES, "mini")
    assert [entry.id for entry in result] == ["minikube"]


def test_filter_by_name_case_insensitive() -> None:
    """Name matching ignores case."""
    result = filter_entries(ENTRIES, "kind")
    assert [entry.id for entry in result] == ["kind"]


def test_filter_by_description_keeps_order() -> None:
    """Description matches come back in catalog order."""
    result = filter_entries(ENTRIES, "docker")
    assert [entry.id for entry in result] == ["kind", "k3d"]


def test_no_match() -> None:
    """Query matching nothing returns an empty tuple."""
    assert filter_entries(ENTRIES, "openshift") == ()
