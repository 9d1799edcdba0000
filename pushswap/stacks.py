"""The two push_swap stacks and the operations allowed on them."""

from __future__ import annotations

from typing import Iterable, List


class Stacks:
    """Stacks ``a`` and ``b``; index 0 is the top of each stack.

    Every operation that changes the stacks is appended, by name, to
    ``operations``. An operation that cannot be applied leaves the stacks
    as they are, records nothing and returns False.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: List[int] = list(values)
        self.b: List[int] = []
        self.operations: List[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def _record(self, name: str) -> bool:
        self.operations.append(name)
        return True

    def is_sorted(self) -> bool:
        """True if stack ``a`` is in non-decreasing order from the top."""
        return all(low <= high for low, high in zip(self.a, self.a[1:]))

    def sa(self) -> bool:
        """Swap the two top elements of ``a``."""
        if len(self.a) < 2:
            return False
        self.a[0], self.a[1] = self.a[1], self.a[0]
        return self._record("sa")

    def ra(self) -> bool:
        """Rotate ``a`` upwards: the top element becomes the bottom one."""
        if len(self.a) < 2:
            return False
        self.a.append(self.a.pop(0))
        return self._record("ra")

    def rra(self) -> bool:
        """Rotate ``a`` downwards: the bottom element becomes the top one."""
        if len(self.a) < 2:
            return False
        self.a.insert(0, self.a.pop())
        return self._record("rra")

    def pa(self) -> bool:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return False
        self.a.insert(0, self.b.pop(0))
        return self._record("pa")

    def rb(self) -> bool:
        """Rotate ``b`` upwards: the top element becomes the bottom one."""
        if len(self.b) < 2:
            return False
        self.b.append(self.b.pop(0))
        return self._record("rb")

    def pb(self) -> bool:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return False
        self.b.insert(0, self.a.pop(0))
        return self._record("pb")