# src/subdir_order/model.py
# -------------------------
# Read-only tree of build units handed to a resolution session.
#
# A unit is either a Project (leaf) or a Solution (composite). Units hash by
# identity so they can key the session caches even when two solutions share
# a display name.

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple, Union


class Closure(NamedTuple):
    """External dependency surface of a unit under one configuration."""

    provides: frozenset[str]
    requires: frozenset[str]


EMPTY_CLOSURE = Closure(frozenset(), frozenset())


@dataclass(eq=False)
class Project:
    """A single buildable project.

    ``references`` lists the names of other projects this one depends on,
    in declaration order.
    """

    name: str
    references: Tuple[str, ...] = ()
    base_directory: PurePosixPath = PurePosixPath(".")

    def __repr__(self) -> str:
        return f"Project({self.name!r})"


@dataclass(eq=False)
class ConfigurationEntry:
    unit: "BuildUnit"
    build: bool = True

    @property
    def name(self) -> str:
        return self.unit.name


@dataclass(eq=False)
class Configuration:
    name: str
    entries: List[ConfigurationEntry] = field(default_factory=list)

    def __iter__(self) -> Iterator[ConfigurationEntry]:
        return iter(self.entries)


@dataclass(eq=False)
class Solution:
    """A nested grouping of projects and sub-solutions.

    Every configuration lists the same children in the same order as
    ``children``; only the ``build`` flag differs between configurations.
    """

    name: str
    base_directory: PurePosixPath = PurePosixPath(".")
    children: List["BuildUnit"] = field(default_factory=list)
    configurations: Dict[str, Configuration] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"Solution({self.name!r})"

    def configuration(self, name: str) -> Optional[Configuration]:
        return self.configurations.get(name)

    def add_child(self, unit: "BuildUnit") -> "BuildUnit":
        """Append ``unit`` to the solution and to every configuration (built)."""
        self.children.append(unit)
        for config in self.configurations.values():
            config.entries.append(ConfigurationEntry(unit))
        return unit

    def add_configuration(
        self, name: str, excluded: tuple[str, ...] | list[str] = ()
    ) -> Configuration:
        """Create configuration ``name`` over the current children.

        Children whose names appear in ``excluded`` get ``build = False``.
        """
        unknown = set(excluded) - {c.name for c in self.children}
        if unknown:
            raise ValueError(
                f"Configuration '{name}' of solution '{self.name}' excludes "
                f"unknown children: {', '.join(sorted(unknown))}"
            )
        config = Configuration(
            name,
            [ConfigurationEntry(c, c.name not in excluded) for c in self.children],
        )
        self.configurations[name] = config
        return config


BuildUnit = Union[Project, Solution]


def iter_projects(unit: BuildUnit) -> Iterator[Project]:
    """Yield every project nested in ``unit`` (depth-first, declaration order)."""
    match unit:
        case Project():
            yield unit
        case Solution():
            for child in unit.children:
                yield from iter_projects(child)
