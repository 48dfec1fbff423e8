"""Automaton module: NFA model, epsilon-closure and subset construction."""

from nfadfa.automaton.state import NFAState
from nfadfa.automaton.closure import epsilon_closure, epsilon_closure_of
from nfadfa.automaton.dfa import DFA, DFABuilder
from nfadfa.automaton.subset import (
    SubsetConstruction,
    determinize,
    is_accepting,
    subset_id,
)
from nfadfa.automaton.nfa import NFA

__all__ = [
    "NFAState",
    "epsilon_closure",
    "epsilon_closure_of",
    "DFA",
    "DFABuilder",
    "SubsetConstruction",
    "determinize",
    "is_accepting",
    "subset_id",
    "NFA",
]
