"""Data types for the distribution catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DistributionEntry:
    """One Kubernetes distribution and how to install it.

    Immutable so the catalog table can be shared process-wide.

    Attributes:
        id: Stable identifier, unique within the catalog (e.g., "k3s")
        name: Display name, not required to be unique (e.g., "K3s")
        description: Free text, may span several lines
        prerequisites: Requirements in display order; may repeat or be empty
        script: Shell command shown for manual copy, never parsed or executed
    """

    id: str
    name: str
    description: str
    prerequisites: tuple[str, ...]
    script: str
