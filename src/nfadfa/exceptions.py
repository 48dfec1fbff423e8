"""Custom exceptions for nfadfa."""


class NfaDfaError(Exception):
    """Base exception for all nfadfa errors."""

    pass


class ConfigurationError(NfaDfaError):
    """Raised when an automaton is built from an invalid construction call.

    An automaton that raised this during construction should be discarded.
    """

    pass


class UnknownStateError(ConfigurationError):
    """Raised when a transition references a state that was never added."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No NFA state exists with name {name!r}")


class InvalidSymbolError(ConfigurationError):
    """Raised when a transition symbol is not a single character."""

    def __init__(self, symbol: object) -> None:
        self.symbol = symbol
        super().__init__(f"Transition symbol must be a single character, got {symbol!r}")


class MissingStartStateError(ConfigurationError):
    """Raised when converting an NFA that has no start state."""

    pass
