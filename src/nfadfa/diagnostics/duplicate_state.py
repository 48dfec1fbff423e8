"""Warning raised when a state name is added twice."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DuplicateStateWarning:
    """A rejected attempt to add a state whose name is already taken.

    The first state with that name is kept unchanged; the attributes of the
    rejected call are recorded here for the caller to inspect.

    Attributes:
        name: The duplicated state name.
        requested_final: Whether the rejected call asked for a final state.
        requested_start: Whether the rejected call asked for a start state.
    """

    name: str
    requested_final: bool = False
    requested_start: bool = False

    @property
    def message(self) -> str:
        return f"A state with name {self.name!r} already exists in the NFA"

    def __str__(self) -> str:
        return self.message
