# src/subdir_order/core/session.py
# --------------------------------
# One resolution session: owns the reference and closure caches so they are
# dropped together once the caller is done with the tree.

from __future__ import annotations

import logging
from typing import List

from ..model import BuildUnit, Closure, Solution
from .closure import ClosureBuilder
from .references import ReferenceCache
from .resolver import OrderResolver


logger = logging.getLogger(__name__)


class ResolutionSession:
    """
    Entry point for ordering queries against a read-only unit tree.

    Caches are filled lazily and never invalidated; open a new session if
    the tree changes. A session is not thread-safe.
    """

    def __init__(self) -> None:
        self.references = ReferenceCache()
        self.closures = ClosureBuilder(self.references)
        self.resolver = OrderResolver(self.closures)

    def resolve_order(self, root: Solution, configuration_name: str) -> List[BuildUnit]:
        return self.resolver.order_children(root, configuration_name)

    def closure_of(self, unit: BuildUnit, configuration_name: str) -> Closure:
        return self.closures.closure_of(unit, configuration_name)

    def stats(self) -> dict[str, int]:
        return {"projects": len(self.references), "closures": len(self.closures)}


def resolve_order(root: Solution, configuration_name: str) -> List[BuildUnit]:
    """Order ``root``'s children for ``configuration_name`` in a fresh session."""
    return ResolutionSession().resolve_order(root, configuration_name)


def closure_of(unit: BuildUnit, configuration_name: str) -> Closure:
    """Compute ``unit``'s closure for ``configuration_name`` in a fresh session."""
    return ResolutionSession().closure_of(unit, configuration_name)
