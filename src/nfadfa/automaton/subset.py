"""Subset construction: NFA with epsilon moves to an equivalent DFA.

DFA states are epsilon-closed subsets of NFA states. Subsets are
deduplicated by membership (``frozenset``), and named for the DFA builder by
a canonical id built from the sorted member names, so two subsets with the
same members always get the same id.
"""

import logging
from collections import deque
from typing import TYPE_CHECKING, Deque, Dict, FrozenSet, Iterable

from nfadfa.automaton.closure import epsilon_closure, epsilon_closure_of
from nfadfa.automaton.dfa import DFABuilder
from nfadfa.automaton.state import NFAState
from nfadfa.exceptions import MissingStartStateError

if TYPE_CHECKING:
    from nfadfa.automaton.nfa import NFA

logger = logging.getLogger(__name__)

Subset = FrozenSet[NFAState]


_ID_ESCAPES = str.maketrans({"\\": "\\\\", ",": "\\,", "{": "\\{", "}": "\\}"})


def subset_id(subset: Iterable[NFAState]) -> str:
    """Return the canonical id of a subset, e.g. ``{q0, q1}``.

    Backslashes, commas and braces inside state names are escaped with a
    backslash, so different subsets never share an id. The empty subset is
    ``{}``.
    """
    names = sorted(state.name for state in subset)
    return "{" + ", ".join(name.translate(_ID_ESCAPES) for name in names) + "}"


def is_accepting(subset: Iterable[NFAState]) -> bool:
    """Check if any state in the subset is final."""
    return any(state.is_final for state in subset)


class SubsetConstruction:
    """One run of the subset construction over an NFA.

    The NFA is only read. Every DFA state and transition is emitted to the
    builder as it is discovered; each subset is expanded exactly once.
    """

    def __init__(self, nfa: "NFA", builder: DFABuilder):
        self.nfa = nfa
        self.builder = builder
        self._visited: Dict[Subset, str] = {}
        self._worklist: Deque[Subset] = deque()

    def run(self) -> Dict[str, Subset]:
        """Emit the DFA into the builder.

        Returns:
            Dict mapping each emitted DFA state id to its NFA subset.

        Raises:
            MissingStartStateError: If the NFA has no start state.
        """
        start = self.nfa.start_state()
        if start is None:
            raise MissingStartStateError("NFA has no start state")

        epsilon = self.nfa.epsilon
        alphabet = self.nfa.alphabet()

        initial = epsilon_closure(start, epsilon)
        initial_id = self._register(initial)
        self.builder.add_start_state(initial_id)
        if is_accepting(initial):
            self.builder.add_final_state(initial_id)

        while self._worklist:
            subset = self._worklist.popleft()
            source_id = self._visited[subset]

            for symbol in alphabet:
                target = epsilon_closure_of(self.nfa.move(subset, symbol), epsilon)
                target_id = self._visited.get(target)
                if target_id is None:
                    target_id = self._register(target)
                    if is_accepting(target):
                        self.builder.add_final_state(target_id)
                    else:
                        self.builder.add_state(target_id)

                self.builder.add_transition(source_id, symbol, target_id)

        logger.debug(
            "Subset construction produced %d DFA states from %d NFA states",
            len(self._visited),
            len(self.nfa.states()),
        )
        return {state_id: subset for subset, state_id in self._visited.items()}

    def _register(self, subset: Subset) -> str:
        state_id = subset_id(subset)
        self._visited[subset] = state_id
        self._worklist.append(subset)
        return state_id


def determinize(nfa: "NFA", builder: DFABuilder) -> Dict[str, Subset]:
    """Convert ``nfa`` into a DFA emitted through ``builder``.

    Args:
        nfa: The source automaton. It is not modified.
        builder: Receives the DFA construction calls.

    Returns:
        Dict mapping each emitted DFA state id to its NFA subset.
    """
    return SubsetConstruction(nfa, builder).run()
