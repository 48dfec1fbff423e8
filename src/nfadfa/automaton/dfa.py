"""DFA construction protocol and a simple DFA container."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple


class DFABuilder(ABC):
    """Sink that receives the DFA emitted by subset construction.

    State ids are opaque strings, stable for the duration of one conversion.
    """

    @abstractmethod
    def add_start_state(self, state_id: str) -> None:
        ...

    @abstractmethod
    def add_state(self, state_id: str) -> None:
        ...

    @abstractmethod
    def add_final_state(self, state_id: str) -> None:
        ...

    @abstractmethod
    def add_transition(self, from_id: str, symbol: str, to_id: str) -> None:
        ...


@dataclass
class DFA(DFABuilder):
    """Deterministic Finite Automaton over string state ids.

    Attributes:
        alphabet: Symbols with at least one transition, in insertion order.
        state_set: All state ids, in insertion order.
        init: The start state id, if one was added.
        accept_set: Accepting state ids.
        delta: (state id, symbol) -> next state id.
    """

    alphabet: List[str] = field(default_factory=list)
    state_set: List[str] = field(default_factory=list)
    init: Optional[str] = None
    accept_set: Set[str] = field(default_factory=set)
    delta: Dict[Tuple[str, str], str] = field(default_factory=dict)

    def _ensure_state(self, state_id: str) -> None:
        if state_id not in self.state_set:
            self.state_set.append(state_id)

    def add_start_state(self, state_id: str) -> None:
        self._ensure_state(state_id)
        self.init = state_id

    def add_state(self, state_id: str) -> None:
        self._ensure_state(state_id)

    def add_final_state(self, state_id: str) -> None:
        """Add an accepting state, or mark an existing state as accepting."""
        self._ensure_state(state_id)
        self.accept_set.add(state_id)

    def add_transition(self, from_id: str, symbol: str, to_id: str) -> None:
        """Set the transition from ``from_id`` on ``symbol``.

        Raises:
            ValueError: If a different target is already set for the pair,
                which would make the automaton nondeterministic.
        """
        key = (from_id, symbol)
        existing = self.delta.get(key)
        if existing is not None and existing != to_id:
            raise ValueError(
                f"Nondeterministic transition from {from_id} on {symbol!r}: "
                f"{existing} and {to_id}"
            )
        self._ensure_state(from_id)
        self._ensure_state(to_id)
        if symbol not in self.alphabet:
            self.alphabet.append(symbol)
        self.delta[key] = to_id

    def next_state(self, state_id: str, symbol: str) -> Optional[str]:
        """Return the state reached from ``state_id`` on ``symbol``, if any."""
        return self.delta.get((state_id, symbol))

    def accepts(self, word: str) -> bool:
        """Run the DFA on ``word``. A missing transition rejects."""
        current = self.init
        if current is None:
            return False
        for symbol in word:
            current = self.delta.get((current, symbol))
            if current is None:
                return False
        return current in self.accept_set

    def is_total(self) -> bool:
        """Check that every state has a transition on every symbol."""
        return all(
            (state_id, symbol) in self.delta
            for state_id in self.state_set
            for symbol in self.alphabet
        )

    def size(self) -> int:
        """Return number of states."""
        return len(self.state_set)

    def transition_count(self) -> int:
        """Return total number of transitions."""
        return len(self.delta)
