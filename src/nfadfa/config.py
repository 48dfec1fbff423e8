"""Configuration for automaton construction."""

from dataclasses import dataclass

from nfadfa.exceptions import ConfigurationError


@dataclass(frozen=True)
class Config:
    """Settings shared by an NFA and its conversion.

    Attributes:
        epsilon: The reserved character that labels epsilon transitions.
            It is never part of an automaton's alphabet.
        log_duplicates: Whether duplicate state names are logged in
            addition to being collected in the diagnostics.
    """

    epsilon: str = "e"
    log_duplicates: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.epsilon, str) or len(self.epsilon) != 1:
            raise ConfigurationError(
                f"epsilon must be a single character, got {self.epsilon!r}"
            )

    @classmethod
    def default(cls) -> "Config":
        """Return the default configuration."""
        return cls()
