# src/subdir_order/subdirs.py
# ---------------------------
# Turns resolved orders into per-configuration subdirectory plans.
#
# For each configuration the build context supports, a solution lists its
# participating children's directories (relative to its own) in build order.
# A child living in the solution's own directory is not listed; it becomes
# the solution's single "included" unit instead. Child solutions are planned
# recursively with the same session so their closures are computed once.

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .core import ConfigurationPolicy, ResolutionSession
from .errors import MultipleColocatedUnits
from .lib.paths import is_colocated, relative_subdir
from .model import BuildUnit, Solution


logger = logging.getLogger(__name__)


@dataclass
class ConfigurationPlan:
    name: str
    order: List[BuildUnit]
    subdirs: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "order": [u.name for u in self.order],
            "subdirs": list(self.subdirs),
        }


@dataclass
class SolutionPlan:
    """
    Plan for one solution:
      - configurations: supported configurations, in declaration order
      - skipped:        configuration names the build context rejected
      - included:       the co-located child, if any
      - children:       unique children across configurations, first-seen order
      - subplans:       plans of the child solutions (when planned recursively)
    """

    solution: Solution
    configurations: List[ConfigurationPlan] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    included: Optional[BuildUnit] = None
    children: List[BuildUnit] = field(default_factory=list)
    subplans: List["SolutionPlan"] = field(default_factory=list)

    def configuration(self, name: str) -> Optional[ConfigurationPlan]:
        for cp in self.configurations:
            if cp.name == name:
                return cp
        return None

    def walk(self):
        """Yield this plan and every nested plan, parents first."""
        yield self
        for sub in self.subplans:
            yield from sub.walk()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "solution": self.solution.name,
            "directory": str(self.solution.base_directory),
            "configurations": [cp.to_dict() for cp in self.configurations],
            "skipped": list(self.skipped),
            "included": self.included.name if self.included is not None else None,
            "children": [u.name for u in self.children],
            "subplans": [sp.to_dict() for sp in self.subplans],
        }


def plan_solution(
    solution: Solution,
    policy: ConfigurationPolicy | None = None,
    session: ResolutionSession | None = None,
    recursive: bool = True,
) -> SolutionPlan:
    """Plan ``solution`` (and, if ``recursive``, its child solutions).

    Raises the OrderError subclasses of the resolver, plus
    ChildOutsideParent for a child directory outside the solution's.
    """
    policy = policy if policy is not None else ConfigurationPolicy()
    session = session if session is not None else ResolutionSession()
    plan = SolutionPlan(solution)
    seen: set[BuildUnit] = set()

    for config_name in solution.configurations:
        if not policy.is_supported(config_name):
            logger.warning(
                "Skipping configuration %s of %s: not enabled in this build context",
                config_name, solution.name,
            )
            plan.skipped.append(config_name)
            continue

        order = session.resolve_order(solution, config_name)
        subdirs: List[str] = []
        for unit in order:
            if is_colocated(solution, unit):
                if plan.included is not None and plan.included is not unit:
                    raise MultipleColocatedUnits(solution.name, plan.included.name, unit.name)
                plan.included = unit
            else:
                subdirs.append(relative_subdir(solution, unit))

            if unit not in seen:
                seen.add(unit)
                plan.children.append(unit)

        plan.configurations.append(ConfigurationPlan(config_name, order, subdirs))
        logger.info(
            "Planned %s [%s]: %s", solution.name, config_name, " ".join(subdirs) or "(none)"
        )

    if recursive:
        # projects have no plan of their own
        for child in plan.children:
            if isinstance(child, Solution):
                plan.subplans.append(plan_solution(child, policy, session, recursive))

    return plan
