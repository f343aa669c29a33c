# src/subdir_order/core/closure.py
# --------------------------------
# (provides, requires) summaries of units, cached per
# (solution, configuration name) for one session.

from __future__ import annotations

import logging
from typing import Dict, Tuple

from ..model import EMPTY_CLOSURE, BuildUnit, Closure, Project, Solution
from .filter import participates
from .references import ReferenceCache


logger = logging.getLogger(__name__)


class ClosureBuilder:
    """
    Computes the external dependency surface of a unit.

    For a project this is its own name and its direct references. For a
    solution it is the union over the participating entries of the matching
    configuration, with internally provided names removed from the
    requirements. A solution without the configuration contributes nothing.
    """

    def __init__(self, references: ReferenceCache | None = None):
        self.references = references if references is not None else ReferenceCache()
        self._closures: Dict[Tuple[Solution, str], Closure] = {}

    def closure_of(self, unit: BuildUnit, configuration_name: str) -> Closure:
        match unit:
            case Project():
                return Closure(
                    frozenset((unit.name,)),
                    self.references.requirements_of(unit),
                )
            case Solution():
                return self._solution_closure(unit, configuration_name)
            case _:
                raise TypeError(f"Not a build unit: {unit!r}")

    def _solution_closure(self, solution: Solution, configuration_name: str) -> Closure:
        key = (solution, configuration_name)
        cached = self._closures.get(key)
        if cached is not None:
            logger.debug("Closure cache hit: %s [%s]", solution.name, configuration_name)
            return cached

        config = solution.configuration(configuration_name)
        if config is None:
            closure = EMPTY_CLOSURE
        else:
            provides: set[str] = set()
            requires: set[str] = set()
            for entry in config:
                if not participates(entry, configuration_name):
                    continue
                sub = self.closure_of(entry.unit, configuration_name)
                provides |= sub.provides
                requires |= sub.requires
            closure = Closure(frozenset(provides), frozenset(requires - provides))

        self._closures[key] = closure
        return closure

    def __len__(self) -> int:
        return len(self._closures)
