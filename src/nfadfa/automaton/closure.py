"""Epsilon-closure over the epsilon-transition subgraph of an NFA."""

from typing import FrozenSet, Iterable, List, Set

from nfadfa.automaton.state import NFAState


def epsilon_closure(state: NFAState, epsilon: str) -> FrozenSet[NFAState]:
    """Return every state reachable from ``state`` by zero or more epsilon moves.

    Args:
        state: The state to start from. It is always part of the result.
        epsilon: The character labelling epsilon transitions.

    Returns:
        The epsilon-closure of ``state``.
    """
    return epsilon_closure_of((state,), epsilon)


def epsilon_closure_of(
    states: Iterable[NFAState], epsilon: str
) -> FrozenSet[NFAState]:
    """Return the union of the epsilon-closures of ``states``.

    The search uses an explicit stack and a visited set, so epsilon cycles
    and self-loops terminate and long epsilon chains do not grow the call
    stack. An empty input gives an empty closure.
    """
    visited: Set[NFAState] = set(states)
    stack: List[NFAState] = list(visited)

    while stack:
        current = stack.pop()
        for target in current.transitions_on(epsilon):
            if target not in visited:
                visited.add(target)
                stack.append(target)

    return frozenset(visited)
