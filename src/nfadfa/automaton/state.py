"""NFA states and their transition tables."""

from typing import Dict, FrozenSet, Set


class NFAState:
    """A named NFA state that owns its outgoing transitions.

    Name and finality are fixed at creation. States hash and compare by
    identity; names are unique within one automaton, so within an automaton
    this is the same as comparing by name.

    Attributes:
        name: The state name.
        is_final: Whether the state is accepting.
    """

    __slots__ = ("_name", "_is_final", "_delta")

    def __init__(self, name: str, is_final: bool = False):
        self._name = name
        self._is_final = is_final
        self._delta: Dict[str, Set["NFAState"]] = {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_final(self) -> bool:
        return self._is_final

    def add_transition(self, symbol: str, to_state: "NFAState") -> None:
        """Add a transition on ``symbol`` to ``to_state``.

        Adding the same pair twice has no effect.
        """
        if symbol not in self._delta:
            self._delta[symbol] = set()
        self._delta[symbol].add(to_state)

    def transitions_on(self, symbol: str) -> FrozenSet["NFAState"]:
        """Return the states reached on ``symbol``, or an empty set."""
        return frozenset(self._delta.get(symbol, ()))

    def symbols(self) -> FrozenSet[str]:
        """Return every symbol with at least one outgoing transition."""
        return frozenset(self._delta)

    def __repr__(self) -> str:
        if self._is_final:
            return f"NFAState({self._name!r}, final)"
        return f"NFAState({self._name!r})"

    def __str__(self) -> str:
        return self._name
