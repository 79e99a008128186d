"""Stochastic L-system string generation."""

from __future__ import annotations

import random
from dataclasses import dataclass, field


@dataclass
class Production:
    """A rewriting rule: ``predecessor`` becomes ``successor`` with a relative weight."""

    predecessor: str
    successor: str
    probability: float = 1.0


@dataclass
class LSystem:
    """An axiom, its production rules and the number of rewriting passes."""

    axiom: str = ""
    productions: list[Production] = field(default_factory=list)
    iterations: int = 0


class LSystemGenerator:
    """Expands an L-system, choosing among competing rules at random by weight."""

    def __init__(self, seed: int | None = None) -> None:
        self.system = LSystem()
        self.generated = ""
        self._rng = random.Random(seed)

    @property
    def axiom(self) -> str:
        return self.system.axiom

    @axiom.setter
    def axiom(self, value: str) -> None:
        self.system.axiom = value

    @property
    def iterations(self) -> int:
        return self.system.iterations

    @iterations.setter
    def iterations(self, value: int) -> None:
        self.system.iterations = value

    @property
    def productions(self) -> list[Production]:
        return self.system.productions

    def add_rule(self, production: Production) -> None:
        """Append a production rule."""
        self.system.productions.append(production)

    def generate(self) -> str:
        """Rewrite the axiom ``iterations`` times; store and return the result."""
        current = self.system.axiom
        for _ in range(self.system.iterations):
            pieces = []
            for char in current:
                match = next(
                    (p for p in self.system.productions if p.predecessor[:1] == char),
                    None,
                )
                if match is None:
                    pieces.append(char)
                else:
                    pieces.append(self.select_rule(match.predecessor))
            current = "".join(pieces)
        self.generated = current
        return current

    def select_rule(self, predecessor: str) -> str:
        """Pick the successor of one rule for ``predecessor``, weighted by probability.

        Raises KeyError if no rule has this predecessor.
        """
        candidates = [p for p in self.system.productions if p.predecessor == predecessor]
        if not candidates:
            raise KeyError(predecessor)
        total = sum(p.probability for p in candidates)
        value = self._rng.uniform(0.0, total)
        for production in candidates:
            if value <= production.probability:
                return production.successor
            value -= production.probability
        return candidates[-1].successor