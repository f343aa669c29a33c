# src/subdir_order/core/resolver.py
# ---------------------------------
# Orders the direct children of a solution so that every child comes after
# the children providing the projects it requires.
#
# Greedy fixed point: full passes over the entries in declaration order,
# placing every entry whose requirements are already satisfied, until a pass
# places nothing. Units without a relative dependency therefore keep their
# declaration order.

from __future__ import annotations

import logging
from typing import List, Optional, Set

from ..errors import MultipleColocatedUnits, UnsatisfiableOrder
from ..lib.paths import is_colocated
from ..model import BuildUnit, Configuration, Solution
from .closure import ClosureBuilder
from .filter import participates


logger = logging.getLogger(__name__)


def _absent(unit: BuildUnit, configuration_name: str) -> bool:
    """A child solution without the configuration takes no part in it."""
    return isinstance(unit, Solution) and unit.configuration(configuration_name) is None


def check_colocated(parent: Solution, config: Configuration) -> Optional[BuildUnit]:
    """Return the single participating entry sharing ``parent``'s directory.

    Raises MultipleColocatedUnits as soon as a second one is seen.
    """
    found: Optional[BuildUnit] = None
    for entry in config:
        if not participates(entry, config.name):
            continue
        if _absent(entry.unit, config.name):
            continue
        if not is_colocated(parent, entry.unit):
            continue
        if found is not None and found is not entry.unit:
            raise MultipleColocatedUnits(parent.name, found.name, entry.name)
        found = entry.unit
    return found


class OrderResolver:
    def __init__(self, closures: ClosureBuilder | None = None):
        self.closures = closures if closures is not None else ClosureBuilder()

    def order_children(self, parent: Solution, configuration_name: str) -> List[BuildUnit]:
        """
        Return the participating children of ``parent`` in build order.

        Child solutions lacking ``configuration_name`` are left out and never
        block their siblings.

        Raises:
          - MultipleColocatedUnits if two participating children share the
            parent's directory.
          - UnsatisfiableOrder if a pass makes no progress while entries are
            still pending; the last pending entry of that pass is reported.
        """
        config = parent.configuration(configuration_name)
        if config is None:
            logger.debug("%s has no configuration %s", parent.name, configuration_name)
            return []

        check_colocated(parent, config)

        ordered: List[BuildUnit] = []
        placed: Set[BuildUnit] = set()
        satisfied: frozenset[str] = frozenset()

        passes = 0
        while True:
            passes += 1
            progress = False
            witness: Optional[str] = None

            for entry in config:
                if not participates(entry, configuration_name):
                    continue
                unit = entry.unit
                if unit in placed:
                    continue
                if _absent(unit, configuration_name):
                    continue

                closure = self.closures.closure_of(unit, configuration_name)
                if closure.requires <= satisfied:
                    ordered.append(unit)
                    placed.add(unit)
                    satisfied = satisfied | closure.provides
                    progress = True
                else:
                    witness = entry.name

            if not progress:
                break

        if witness is not None:
            logger.debug(
                "Ordering %s [%s] stalled after %d pass(es)",
                parent.name, configuration_name, passes,
            )
            raise UnsatisfiableOrder(witness)

        logger.debug(
            "Ordered %s [%s] in %d pass(es): %s",
            parent.name, configuration_name, passes,
            ", ".join(u.name for u in ordered),
        )
        return ordered
