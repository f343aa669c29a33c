from pathlib import Path, PurePosixPath
import sys

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from subdir_order.core import ClosureBuilder, closure_of
from subdir_order.model import EMPTY_CLOSURE, Project, Solution


def _proj(name, *refs, directory=None):
    return Project(name, refs, PurePosixPath(directory or name.lower()))


def _solution(name, directory, children, configs=("Debug",), exclude=None):
    sol = Solution(name, PurePosixPath(directory))
    sol.children.extend(children)
    for c in configs:
        sol.add_configuration(c, (exclude or {}).get(c, ()))
    return sol


def test_project_closure():
    util = _proj("Util", "Core")
    c = closure_of(util, "Debug")
    assert c.provides == {"Util"}
    assert c.requires == {"Core"}


def test_solution_subtracts_internal_requirements():
    sol = _solution("Lib", "lib", [
        _proj("Core"),
        _proj("Util", "Core"),
        _proj("App", "Core", "Util", "Ext"),
    ])
    c = closure_of(sol, "Debug")
    assert c.provides == {"Core", "Util", "App"}
    assert c.requires == {"Ext"}
    # the solution's own name is never provided
    assert "Lib" not in c.provides


def test_excluded_entries_do_not_contribute():
    sol = _solution(
        "Lib", "lib",
        [_proj("Core"), _proj("Util", "Core")],
        configs=("Debug", "Release"),
        exclude={"Release": ["Core"]},
    )
    builder = ClosureBuilder()
    assert builder.closure_of(sol, "Debug").requires == frozenset()
    rel = builder.closure_of(sol, "Release")
    assert rel.provides == {"Util"}
    assert rel.requires == {"Core"}


def test_nested_solutions_are_flattened():
    inner = _solution("Inner", "outer/inner", [_proj("Core"), _proj("Log", "Fmt")])
    outer = _solution("Outer", "outer", [inner, _proj("App", "Core", "Log")])
    c = closure_of(outer, "Debug")
    assert c.provides == {"Core", "Log", "App"}
    assert c.requires == {"Fmt"}


def test_missing_configuration_contributes_nothing():
    sol = _solution("Lib", "lib", [_proj("Core", "X")], configs=("Debug",))
    assert closure_of(sol, "Release") == EMPTY_CLOSURE

    outer = _solution("Outer", "outer", [sol, _proj("App", "Core")], configs=("Release",))
    c = closure_of(outer, "Release")
    # Lib has no Release configuration, so Core is not provided
    assert c.provides == {"App"}
    assert c.requires == {"Core"}


def test_provides_and_requires_are_disjoint():
    inner = _solution("Inner", "a/inner", [_proj("B", "A", "C"), _proj("C", "B")])
    sol = _solution("Top", "a", [_proj("A", "B"), inner, _proj("D", "A", "Z")])
    builder = ClosureBuilder()
    for unit in (sol, inner):
        c = builder.closure_of(unit, "Debug")
        assert not (c.provides & c.requires)


def test_solution_closures_are_cached_per_configuration():
    sol = _solution("Lib", "lib", [_proj("Core"), _proj("Util", "Core")],
                    configs=("Debug", "Release"))
    builder = ClosureBuilder()
    first = builder.closure_of(sol, "Debug")
    assert builder.closure_of(sol, "Debug") is first
    assert len(builder) == 1
    builder.closure_of(sol, "Release")
    assert len(builder) == 2
    assert isinstance(first.provides, frozenset)
