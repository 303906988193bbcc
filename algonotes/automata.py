"""Deterministic finite automata over the binary alphabet."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Transition:
    """One move of an automaton: from ``state`` on ``symbol`` to ``next_state``."""

    state: str
    symbol: str
    next_state: str

    def __str__(self):
        return f"{self.state} -> {self.symbol} -> {self.next_state}"


class DFA:
    """A DFA whose table gives, for each state, the next state on 0 and on 1.

    A symbol ``'0'`` takes the first column; any other symbol takes the second.
    """

    def __init__(self, states, initial, finals, table):
        self.states = tuple(states)
        self.initial = initial
        self.finals = frozenset(finals)
        self.table = {state: tuple(targets) for state, targets in table.items()}
        known = set(self.states)
        if initial not in known:
            raise ValueError(f"initial state {initial!r} is not a state")
        if not self.finals <= known:
            raise ValueError("every final state must be a state")
        for state in self.states:
            targets = self.table.get(state)
            if targets is None or len(targets) != 2:
                raise ValueError(f"state {state!r} needs exactly two next states")
            if not set(targets) <= known:
                raise ValueError(f"state {state!r} leads to an unknown state")

    def run(self, word):
        """Return the transitions taken while reading ``word`` from the initial state."""
        current = self.initial
        steps = []
        for symbol in word:
            following = self.table[current][0 if symbol == "0" else 1]
            steps.append(Transition(current, symbol, following))
            current = following
        return steps

    def accepts(self, word):
        """Tell whether reading ``word`` ends in a final state."""
        steps = self.run(word)
        last = steps[-1].next_state if steps else self.initial
        return last in self.finals