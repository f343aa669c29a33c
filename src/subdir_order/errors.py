# src/subdir_order/errors.py
# --------------------------
# Failures raised while ordering or planning a solution. All of them abort
# the resolution for the solution/configuration at hand.

from __future__ import annotations


class OrderError(ValueError):
    """Base class for ordering and planning failures."""


class UnsatisfiableOrder(OrderError):
    """No order satisfies the project references.

    ``witness`` is the last entry left unsatisfied by the stalled pass; it is
    a hint, not necessarily the root of the cycle.
    """

    def __init__(self, witness: str):
        self.witness = witness
        super().__init__(
            "Impossible to find a solution order that satisfies project "
            f"references for '{witness}'"
        )


class MultipleColocatedUnits(OrderError):
    def __init__(self, parent: str, first: str, second: str):
        self.parent = parent
        self.first = first
        self.second = second
        super().__init__(
            f"More than 1 project in the same directory as solution '{parent}' "
            f"is not supported ('{first}' and '{second}')"
        )


class ChildOutsideParent(OrderError):
    def __init__(self, parent: str, child: str):
        self.parent = parent
        self.child = child
        super().__init__(
            f"Child projects / solutions must be in sub-directories of their "
            f"parent: '{child}' is outside '{parent}'"
        )
