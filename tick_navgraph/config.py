"""Graph configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GraphConfig:
    """Immutable adjacency rules for a Graph.

    Attributes:
        diagonal: Generate edges to the four diagonal neighbours as well as
            the four cardinal ones.
        corner_clipping: Allow diagonal moves that pass between two blocked
            orthogonal cells. Off by default.
    """

    diagonal: bool = True
    corner_clipping: bool = False
