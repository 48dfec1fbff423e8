"""Collector for non-fatal construction warnings."""

from typing import Iterator, List, Optional

from nfadfa.diagnostics.duplicate_state import DuplicateStateWarning


class Diagnostics:
    """Accumulates warnings produced while building an automaton.

    An instance can be shared between several automata, or passed in by the
    caller to inspect what was ignored during construction.
    """

    def __init__(self) -> None:
        self._warnings: List[DuplicateStateWarning] = []

    def warn(self, warning: DuplicateStateWarning) -> None:
        """Record a warning."""
        self._warnings.append(warning)

    @property
    def warnings(self) -> List[DuplicateStateWarning]:
        """Recorded warnings in the order they were reported."""
        return list(self._warnings)

    @property
    def has_warnings(self) -> bool:
        """Whether any warning was recorded."""
        return bool(self._warnings)

    def last(self) -> Optional[DuplicateStateWarning]:
        """Return the most recent warning, or None."""
        return self._warnings[-1] if self._warnings else None

    def clear(self) -> None:
        """Forget all recorded warnings."""
        self._warnings.clear()

    def __iter__(self) -> Iterator[DuplicateStateWarning]:
        return iter(list(self._warnings))

    def __len__(self) -> int:
        return len(self._warnings)

    def __repr__(self) -> str:
        return f"Diagnostics(warnings={self._warnings!r})"
