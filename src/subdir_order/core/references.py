# src/subdir_order/core/references.py
# -----------------------------------
# Direct project references, memoized per project for one session.

from __future__ import annotations

import logging
from typing import Dict

from ..model import Project


logger = logging.getLogger(__name__)


class ReferenceCache:
    """Maps each project to the frozenset of names it references directly."""

    def __init__(self) -> None:
        self._refs: Dict[Project, frozenset[str]] = {}

    def requirements_of(self, project: Project) -> frozenset[str]:
        refs = self._refs.get(project)
        if refs is not None:
            return refs
        refs = frozenset(project.references)
        self._refs[project] = refs
        logger.debug("References of %s: %s", project.name, sorted(refs))
        return refs

    def __len__(self) -> int:
        return len(self._refs)
