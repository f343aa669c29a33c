"""
src/subdir_order/print_plan.py

Render a solution plan as summary lines: per configuration the build order and the
subdirectory list, the included (co-located) unit, and optionally each
child's closure.
"""
from __future__ import annotations

from typing import List

from .core import ResolutionSession
from .subdirs import SolutionPlan


def _fmt_names(names) -> str:
    return ", ".join(sorted(names)) or "-"


def render_plan(
    plan: SolutionPlan,
    session: ResolutionSession | None = None,
    show_closures: bool = False,
) -> List[str]:
    """
    Return the summary lines for ``plan`` and its nested plans.

    ``show_closures`` needs the session the plan was built with so the
    closures come from its caches.
    """
    if show_closures and session is None:
        session = ResolutionSession()

    lines: List[str] = []
    for sp in plan.walk():
        sol = sp.solution
        lines.append(f"Solution     : {sol.name}")
        lines.append(f"Directory    : {sol.base_directory}")
        if sp.included is not None:
            lines.append(f"Included     : {sp.included.name}")
        if sp.skipped:
            lines.append(f"Skipped      : {', '.join(sp.skipped)}")
        for cp in sp.configurations:
            lines.append(f"▶ {cp.name}")
            lines.append(f"    order    = {' '.join(u.name for u in cp.order) or '(none)'}")
            lines.append(f"    subdirs  = {' '.join(cp.subdirs) or '(none)'}")
            if show_closures:
                for unit in cp.order:
                    closure = session.closure_of(unit, cp.name)
                    lines.append(
                        f"      • {unit.name:15} provides {_fmt_names(closure.provides)}"
                        f"; requires {_fmt_names(closure.requires)}"
                    )
        lines.append("-" * 60)
    return lines
