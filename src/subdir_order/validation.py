from __future__ import annotations

import logging
from collections import Counter

from .model import Solution, iter_projects


logger = logging.getLogger(__name__)


def validate_tree(root: Solution) -> list[str]:
    """Check a loaded tree before it is handed to a resolution session.

    Rules:
      - Project names must be unique across the whole tree; they are the keys
        matched between provided and required names.

    References to projects that do not exist anywhere in the tree are only
    reported (logged and returned); the resolver fails on them later if they
    matter for a configuration.
    """
    projects = list(iter_projects(root))
    counts = Counter(p.name for p in projects)
    dups = [n for n, c in counts.items() if c > 1]
    if dups:
        raise ValueError(
            "Duplicate projects detected in solution tree: "
            + ", ".join(sorted(dups))
            + ". Project names must be unique."
        )

    known = set(counts)
    dangling: list[str] = []
    for p in projects:
        for ref in p.references:
            if ref not in known:
                logger.warning("Project %s references unknown project %s", p.name, ref)
                dangling.append(ref)
    return sorted(set(dangling))
