"""Tests for the built-in distribution table."""

from kubehub.catalog.data import INSTALLATION_STEPS, KUBERNETES_DISTRIBUTIONS


def test_ids_are_unique() -> None:
    """No two built-in distributions share an id."""
    ids = [entry.id for entry in KUBERNETES_DISTRIBUTIONS]
    assert len(ids) == len(set(ids)), "Distribution ids must be unique"


def test_table_order() -> None:
    """Distributions appear in the order they are defined."""
    ids = [entry.id for entry in KUBERNETES_DISTRIBUTIONS]
    assert ids == ["minikube", "k3s", "microk8s", "kind", "k0s", "rke2", "kubeadm", "k3d"]


def test_all_entries_have_required_fields() -> None:
    """Every entry has a non-empty id, name, description and script."""
    for entry in KUBERNETES_DISTRIBUTIONS:
        assert entry.id, f"Entry missing id: {entry}"
        assert entry.name, f"Entry {entry.id} missing name"
        assert entry.description, f"Entry {entry.id} missing description"
        assert entry.script, f"Entry {entry.id} missing script"
        assert isinstance(entry.prerequisites, tuple), f"Entry {entry.id} prerequisites not a tuple"


def test_k3s_script_is_stored_verbatim() -> None:
    """The k3s script is the exact upstream one-liner."""
    k3s = next(entry for entry in KUBERNETES_DISTRIBUTIONS if entry.id == "k3s")
    assert k3s.script == "curl -sfL https://get.k3s.io | sh -"


def test_kubeadm_has_six_prerequisites() -> None:
    """kubeadm keeps its container runtime requirement last."""
    kubeadm = next(entry for entry in KUBERNETES_DISTRIBUTIONS if entry.id == "kubeadm")
    assert len(kubeadm.prerequisites) == 6
    assert kubeadm.prerequisites[-1] == "Container runtime (Docker, containerd, or CRI-O)"


def test_installation_steps() -> None:
    """Five generic steps, starting with the prerequisites check."""
    assert len(INSTALLATION_STEPS) == 5
    assert INSTALLATION_STEPS[0] == "Ensure all prerequisites are met"
