"""Diagnostics module for automaton construction."""

from nfadfa.diagnostics.duplicate_state import DuplicateStateWarning
from nfadfa.diagnostics.diagnostics import Diagnostics

__all__ = [
    "DuplicateStateWarning",
    "Diagnostics",
]
