import logging
import tomllib
from pathlib import Path, PurePosixPath
from typing import Any, Dict, NamedTuple

from .config_schema import DescriptionConfig, ProjectConfig, SolutionConfig
from .core import ConfigurationPolicy
from .lib.paths import normalize_dir
from .model import BuildUnit, Project, Solution
from .validation import validate_tree


logger = logging.getLogger(__name__)


class Description(NamedTuple):
    solution: Solution
    policy: ConfigurationPolicy


def _build_unit(cfg: ProjectConfig | SolutionConfig, parent_dir: PurePosixPath) -> BuildUnit:
    """Turn a validated child block into a unit rooted under ``parent_dir``."""
    base = normalize_dir(parent_dir / cfg.directory)
    if isinstance(cfg, ProjectConfig):
        return Project(cfg.name, tuple(cfg.references), base)
    return _build_solution(cfg, base)


def _build_solution(cfg: SolutionConfig, base: PurePosixPath) -> Solution:
    solution = Solution(cfg.name, base)
    for child in cfg.children:
        solution.children.append(_build_unit(child, base))
    for config_name in cfg.configurations:
        solution.add_configuration(config_name, cfg.exclude.get(config_name, []))
    return solution


def load_description_data(data: Dict[str, Any], base_dir: str | Path = ".") -> Description:
    """Validate an already-parsed description and build the unit tree.

    The root solution's ``directory`` is taken relative to ``base_dir``.
    """
    cfg = DescriptionConfig.model_validate(data)
    root_dir = normalize_dir(normalize_dir(base_dir) / cfg.solution.directory)
    solution = _build_solution(cfg.solution, root_dir)
    validate_tree(solution)
    return Description(solution, ConfigurationPolicy(cfg.context.enabled_configurations))


def load_description(path: str | Path) -> Description:
    """Load a TOML solution description; directories resolve against its folder."""
    path = Path(path)
    with open(path, "rb") as fh:
        data = tomllib.load(fh)
    logger.debug("Loaded description %s", path)
    return load_description_data(data, base_dir=path.resolve().parent)
