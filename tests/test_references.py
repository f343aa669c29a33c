from pathlib import Path, PurePosixPath
import sys

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from subdir_order.core.references import ReferenceCache
from subdir_order.model import Project


def test_requirements_are_direct_references():
    app = Project("App", ("Core", "Util", "Core"), PurePosixPath("app"))
    refs = ReferenceCache().requirements_of(app)
    assert refs == frozenset({"Core", "Util"})


def test_no_references_gives_empty_set():
    core = Project("Core", (), PurePosixPath("core"))
    assert ReferenceCache().requirements_of(core) == frozenset()


def test_requirements_are_cached_per_project():
    cache = ReferenceCache()
    app = Project("App", ("Core",), PurePosixPath("app"))
    first = cache.requirements_of(app)
    # the tree must not change mid-session; the cache keeps the first answer
    app.references = ("Other",)
    assert cache.requirements_of(app) is first
    assert len(cache) == 1

    # a fresh session sees the new references
    assert ReferenceCache().requirements_of(app) == frozenset({"Other"})
