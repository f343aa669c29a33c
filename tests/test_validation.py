from pathlib import Path, PurePosixPath
import logging
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from subdir_order.model import Project, Solution, iter_projects
from subdir_order.validation import validate_tree


def _tree():
    root = Solution("Main", PurePosixPath("."))
    root.add_child(Project("App", ("Core", "Ghost"), PurePosixPath("app")))
    sub = root.add_child(Solution("Sub", PurePosixPath("sub")))
    sub.add_child(Project("Core", (), PurePosixPath("sub/core")))
    return root


def test_iter_projects_is_depth_first():
    assert [p.name for p in iter_projects(_tree())] == ["App", "Core"]


def test_dangling_references_are_reported(caplog):
    with caplog.at_level(logging.WARNING):
        dangling = validate_tree(_tree())
    assert dangling == ["Ghost"]
    assert "unknown project Ghost" in caplog.text


def test_duplicate_project_names():
    root = _tree()
    root.add_child(Project("Core", (), PurePosixPath("core2")))
    with pytest.raises(ValueError, match="Core"):
        validate_tree(root)


def test_add_child_extends_configurations():
    root = Solution("Main", PurePosixPath("."))
    root.add_child(Project("A", (), PurePosixPath("a")))
    root.add_configuration("Debug", ["A"])
    root.add_child(Project("B", (), PurePosixPath("b")))
    assert [(e.name, e.build) for e in root.configuration("Debug")] == [
        ("A", False), ("B", True)
    ]
