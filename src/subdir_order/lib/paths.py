# src/subdir_order/lib/paths.py
# -----------------------------
# Directory helpers shared by the resolver, the planner and the loader.
# Unit directories are PurePosixPath values so plans render the same on
# every host.

from __future__ import annotations

import os
import posixpath
from pathlib import Path, PurePosixPath

from ..errors import ChildOutsideParent


def normalize_dir(p: str | os.PathLike) -> PurePosixPath:
    """Collapse ``.``/``..`` segments and a leading ``./``.

    ``normalize_dir("./src/../lib/")`` -> ``PurePosixPath("lib")``
    """
    text = str(p).replace("\\", "/") or "."
    return PurePosixPath(posixpath.normpath(text))


def is_colocated(parent, unit) -> bool:
    """True when ``unit`` lives in ``parent``'s own directory."""
    return normalize_dir(unit.base_directory) == normalize_dir(parent.base_directory)


def relative_subdir(parent, unit) -> str:
    """
    Directory of ``unit`` relative to ``parent``, as listed in a subdirectory
    plan.

    Returns "." for a co-located unit. Raises ChildOutsideParent when the
    unit is not below the parent directory.
    """
    rel = posixpath.relpath(
        str(normalize_dir(unit.base_directory)),
        str(normalize_dir(parent.base_directory)),
    )
    if rel == ".." or rel.startswith("../"):
        raise ChildOutsideParent(parent.name, unit.name)
    if rel.startswith("./"):
        rel = rel[2:]
    return rel


def format_path(p: Path, root: Path | None = None) -> str:
    """Return a user-friendly string for ``p``.

    Paths inside ``root`` are rendered relative to it; otherwise ``os.path.relpath``
    is used. The current user's home directory is collapsed to ``~``.
    """
    p = Path(p).expanduser()
    if root is not None:
        try:
            p = p.resolve().relative_to(Path(root).resolve())
        except ValueError:
            p = Path(os.path.relpath(p, root))
    home = Path.home()
    try:
        p = Path("~") / p.relative_to(home)
    except ValueError:
        pass
    return str(p)
