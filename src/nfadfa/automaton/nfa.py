"""NFA with epsilon transitions, built from named states."""

import logging
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Union

from nfadfa.automaton.closure import epsilon_closure, epsilon_closure_of
from nfadfa.automaton.dfa import DFA, DFABuilder
from nfadfa.automaton.state import NFAState
from nfadfa.automaton.subset import Subset, determinize
from nfadfa.config import Config
from nfadfa.diagnostics import Diagnostics, DuplicateStateWarning
from nfadfa.exceptions import InvalidSymbolError, UnknownStateError

logger = logging.getLogger(__name__)


class NFA:
    """Non-deterministic Finite Automaton with epsilon transitions.

    States are added by name and kept in insertion order. Re-adding a name
    keeps the first state and records a ``DuplicateStateWarning``; a
    transition between unknown names raises ``UnknownStateError``.

    Example:
        >>> nfa = NFA()
        >>> nfa.add_start_state("q0")
        >>> nfa.add_final_state("q1")
        >>> nfa.add_transition("q0", "a", "q1")
        >>> nfa.get_dfa().accepts("a")
        True
    """

    def __init__(
        self, config: Optional[Config] = None, diagnostics: Optional[Diagnostics] = None
    ):
        self.config = config or Config.default()
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self._states: Dict[str, NFAState] = {}
        self._start: Optional[NFAState] = None
        # Ordered set of non-epsilon symbols
        self._alphabet: Dict[str, None] = {}

    @property
    def epsilon(self) -> str:
        return self.config.epsilon

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_start_state(self, name: str) -> None:
        """Add a non-final state and make it the start state.

        If the name already exists, that existing state becomes the start
        state instead.
        """
        self._start = self._add(name, is_final=False, is_start=True)

    def add_state(self, name: str) -> None:
        """Add a non-start, non-final state."""
        self._add(name, is_final=False, is_start=False)

    def add_final_state(self, name: str) -> None:
        """Add a final state.

        An existing state with the same name is kept as is, so a non-final
        state never becomes final through this call.
        """
        self._add(name, is_final=True, is_start=False)

    def add_transition(self, from_name: str, symbol: str, to_name: str) -> None:
        """Add a transition on ``symbol`` between two existing states.

        Use the configured epsilon character for an epsilon transition.
        Nothing is modified when the call is rejected.

        Raises:
            UnknownStateError: If either state name was never added.
            InvalidSymbolError: If ``symbol`` is not a single character.
        """
        from_state = self._states.get(from_name)
        if from_state is None:
            raise UnknownStateError(from_name)
        to_state = self._states.get(to_name)
        if to_state is None:
            raise UnknownStateError(to_name)
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise InvalidSymbolError(symbol)

        from_state.add_transition(symbol, to_state)
        if symbol != self.epsilon:
            self._alphabet.setdefault(symbol, None)

    def _add(self, name: str, is_final: bool, is_start: bool) -> NFAState:
        existing = self._states.get(name)
        if existing is not None:
            warning = DuplicateStateWarning(
                name=name, requested_final=is_final, requested_start=is_start
            )
            self.diagnostics.warn(warning)
            if self.config.log_duplicates:
                logger.warning("%s", warning.message)
            return existing

        state = NFAState(name, is_final)
        self._states[name] = state
        return state

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def states(self) -> List[NFAState]:
        """Return all states in insertion order."""
        return list(self._states.values())

    def final_states(self) -> List[NFAState]:
        """Return the final states in insertion order."""
        return [state for state in self._states.values() if state.is_final]

    def start_state(self) -> Optional[NFAState]:
        return self._start

    def alphabet(self) -> List[str]:
        """Return the symbols used by transitions, excluding epsilon."""
        return list(self._alphabet)

    def get_state(self, name: str) -> Optional[NFAState]:
        return self._states.get(name)

    def transitions_on(self, state: NFAState, symbol: str) -> FrozenSet[NFAState]:
        """Get states transitioned to from ``state`` on ``symbol``."""
        return state.transitions_on(symbol)

    def move(self, states: Iterable[NFAState], symbol: str) -> FrozenSet[NFAState]:
        """Return the states reached from any of ``states`` on ``symbol``."""
        result: Set[NFAState] = set()
        for state in states:
            result.update(state.transitions_on(symbol))
        return frozenset(result)

    def eps_closure(
        self, states: Union[NFAState, Iterable[NFAState]]
    ) -> FrozenSet[NFAState]:
        """Return the epsilon-closure of a state or of a set of states."""
        if isinstance(states, NFAState):
            return epsilon_closure(states, self.epsilon)
        return epsilon_closure_of(states, self.epsilon)

    def size(self) -> int:
        """Return number of states."""
        return len(self._states)

    # ------------------------------------------------------------------
    # Simulation and conversion
    # ------------------------------------------------------------------

    def accepts(self, word: str) -> bool:
        """Simulate the NFA on ``word`` by stepping through closed state sets.

        Symbols outside the alphabet, including epsilon, reject the word.
        """
        if self._start is None:
            return False
        current = self.eps_closure(self._start)
        for symbol in word:
            if symbol not in self._alphabet:
                return False
            current = self.eps_closure(self.move(current, symbol))
            if not current:
                return False
        return any(state.is_final for state in current)

    def to_dfa(self, builder: DFABuilder) -> Dict[str, Subset]:
        """Emit an equivalent DFA into ``builder`` using subset construction.

        Returns:
            Dict mapping each emitted DFA state id to its NFA subset.

        Raises:
            MissingStartStateError: If no start state was added.
        """
        return determinize(self, builder)

    def get_dfa(self) -> DFA:
        """Convert the NFA into a new ``DFA`` object."""
        dfa = DFA()
        self.to_dfa(dfa)
        return dfa

    def __repr__(self) -> str:
        start = self._start.name if self._start is not None else None
        return (
            f"NFA(states={list(self._states)!r}, start={start!r}, "
            f"alphabet={self.alphabet()!r})"
        )
