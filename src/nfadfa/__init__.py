"""
nfadfa - Convert NFAs with epsilon transitions into equivalent DFAs.

The conversion uses the subset construction: each DFA state is an
epsilon-closed set of NFA states, named by a canonical id such as
``{q0, q1}``.

Example usage:
    >>> from nfadfa import NFA
    >>> nfa = NFA()
    >>> nfa.add_start_state("q0")
    >>> nfa.add_final_state("q1")
    >>> nfa.add_transition("q0", "e", "q1")
    >>> dfa = nfa.get_dfa()
    >>> dfa.init, sorted(dfa.accept_set)
    ('{q0, q1}', ['{q0, q1}'])

To stream the DFA into your own container, implement ``DFABuilder`` and
pass it to ``convert``.
"""

import logging
from typing import Dict, FrozenSet

from nfadfa.automaton.dfa import DFA, DFABuilder
from nfadfa.automaton.nfa import NFA
from nfadfa.automaton.state import NFAState
from nfadfa.automaton.subset import determinize
from nfadfa.config import Config
from nfadfa.diagnostics import Diagnostics, DuplicateStateWarning
from nfadfa.exceptions import (
    ConfigurationError,
    InvalidSymbolError,
    MissingStartStateError,
    NfaDfaError,
    UnknownStateError,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def convert(nfa: NFA, builder: DFABuilder) -> Dict[str, FrozenSet[NFAState]]:
    """Convenience function to run the subset construction.

    Args:
        nfa: The NFA to convert.
        builder: Receives the DFA construction calls.

    Returns:
        Dict mapping each emitted DFA state id to its NFA subset.
    """
    return determinize(nfa, builder)


__all__ = [
    # Main API
    "NFA",
    "NFAState",
    "DFA",
    "DFABuilder",
    "convert",
    # Configuration
    "Config",
    # Diagnostics
    "Diagnostics",
    "DuplicateStateWarning",
    # Exceptions
    "NfaDfaError",
    "ConfigurationError",
    "UnknownStateError",
    "InvalidSymbolError",
    "MissingStartStateError",
    # Version
    "__version__",
]
