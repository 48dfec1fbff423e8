"""Tests for epsilon-closure computation."""

import random

import pytest

from nfadfa import NFA
from nfadfa.automaton.closure import epsilon_closure, epsilon_closure_of
from nfadfa.automaton.state import NFAState


def build_nfa(state_names, transitions, start="q0", finals=()):
    """Build an NFA from state names and (from, symbol, to) triples."""
    nfa = NFA()
    for name in state_names:
        if name == start:
            nfa.add_start_state(name)
        elif name in finals:
            nfa.add_final_state(name)
        else:
            nfa.add_state(name)
    for from_name, symbol, to_name in transitions:
        nfa.add_transition(from_name, symbol, to_name)
    return nfa


def closure_names(nfa, *names):
    states = [nfa.get_state(name) for name in names]
    return sorted(state.name for state in nfa.eps_closure(states))


def random_nfa(seed, max_states=6):
    rng = random.Random(seed)
    count = rng.randint(1, max_states)
    state_names = [f"q{i}" for i in range(count)]
    transitions = []
    for _ in range(rng.randint(0, count * 3)):
        transitions.append(
            (rng.choice(state_names), rng.choice("eab"), rng.choice(state_names))
        )
    return build_nfa(state_names, transitions)


class TestSingleStateClosure:
    """Closure of one state over epsilon edges."""

    def test_no_epsilon_edges(self):
        """A state without epsilon edges is its own closure."""
        nfa = build_nfa(["q0", "q1"], [("q0", "a", "q1")])
        assert closure_names(nfa, "q0") == ["q0"]

    def test_chain(self):
        """Epsilon chains are followed transitively."""
        nfa = build_nfa(
            ["q0", "q1", "q2", "q3"],
            [("q0", "e", "q1"), ("q1", "e", "q2"), ("q2", "a", "q3")],
        )
        assert closure_names(nfa, "q0") == ["q0", "q1", "q2"]
        assert closure_names(nfa, "q1") == ["q1", "q2"]
        assert closure_names(nfa, "q3") == ["q3"]

    def test_self_loop(self):
        """An epsilon self-loop terminates."""
        nfa = build_nfa(["q0"], [("q0", "e", "q0")])
        assert closure_names(nfa, "q0") == ["q0"]

    def test_cycle(self):
        """Every state on an epsilon cycle reaches the whole cycle."""
        nfa = build_nfa(
            ["q0", "q1", "q2"],
            [("q0", "e", "q1"), ("q1", "e", "q2"), ("q2", "e", "q0")],
        )
        for name in ("q0", "q1", "q2"):
            assert closure_names(nfa, name) == ["q0", "q1", "q2"]

    def test_epsilon_only_followed_from_reached_states(self):
        """Epsilon edges behind a real symbol are not followed."""
        nfa = build_nfa(
            ["q0", "q1", "q2"],
            [("q0", "a", "q1"), ("q1", "e", "q2")],
        )
        assert closure_names(nfa, "q0") == ["q0"]

    def test_long_chain_does_not_recurse(self):
        """A very long epsilon chain does not hit the recursion limit."""
        states = [NFAState(f"s{i}") for i in range(5000)]
        for current, following in zip(states, states[1:]):
            current.add_transition("e", following)
        assert len(epsilon_closure(states[0], "e")) == 5000

    def test_module_functions_match_nfa(self):
        """Module functions agree with NFA.eps_closure."""
        nfa = build_nfa(["q0", "q1"], [("q0", "e", "q1")])
        q0 = nfa.get_state("q0")
        assert epsilon_closure(q0, "e") == nfa.eps_closure(q0)
        assert epsilon_closure_of([q0], "e") == nfa.eps_closure([q0])


class TestSetClosure:
    """Closure of a set of states."""

    def test_empty_set(self):
        """The closure of no states is empty."""
        assert epsilon_closure_of([], "e") == frozenset()

    def test_union_of_closures(self):
        """A set closure unions the closures of its members."""
        nfa = build_nfa(
            ["q0", "q1", "q2", "q3"],
            [("q0", "e", "q1"), ("q2", "e", "q3")],
        )
        assert closure_names(nfa, "q0", "q2") == ["q0", "q1", "q2", "q3"]


class TestClosureProperties:
    """Algebraic properties that must hold on any NFA."""

    @pytest.mark.parametrize("seed", range(30))
    def test_contains_seed(self, seed):
        """Every state belongs to its own closure."""
        nfa = random_nfa(seed)
        for state in nfa.states():
            assert state in nfa.eps_closure(state), f"seed {seed}: {state}"

    @pytest.mark.parametrize("seed", range(30))
    def test_idempotent(self, seed):
        """Closing a closure changes nothing."""
        nfa = random_nfa(seed)
        for state in nfa.states():
            once = nfa.eps_closure(state)
            assert nfa.eps_closure(once) == once, f"seed {seed}: {state}"

    @pytest.mark.parametrize("seed", range(30))
    def test_set_closure_is_union(self, seed):
        """Set closure equals the union regardless of order."""
        nfa = random_nfa(seed)
        states = nfa.states()
        expected = set()
        for state in states:
            expected |= nfa.eps_closure(state)
        assert nfa.eps_closure(states) == expected
        assert nfa.eps_closure(list(reversed(states))) == expected
