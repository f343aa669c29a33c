# src/subdir_order/core/filter.py
# -------------------------------
# Which entries take part in a configuration, and which configuration names
# the build context accepts at all.

from __future__ import annotations

from typing import Iterable

from ..model import ConfigurationEntry


def participates(entry: ConfigurationEntry, configuration_name: str) -> bool:
    """Return the entry's build flag.

    ``configuration_name`` is accepted for symmetry with the other queries;
    an entry already belongs to exactly one configuration.
    """
    return entry.build


class ConfigurationPolicy:
    """Build-context predicate for configuration names.

    With no enabled names every configuration is supported.
    """

    def __init__(self, enabled: Iterable[str] | None = None):
        self.enabled = frozenset(enabled or ())

    def is_supported(self, configuration_name: str) -> bool:
        return not self.enabled or configuration_name in self.enabled

    def __repr__(self) -> str:
        names = ", ".join(sorted(self.enabled)) or "*"
        return f"ConfigurationPolicy({names})"
