"""Weighted implication rules over literals."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol


class _LiteralLike(Protocol):
    """What a rule needs from the literals in its body and head."""

    def __eq__(self, other: object) -> bool: ...

    def __str__(self) -> str: ...

    def to_prudensjs(self) -> str: ...


class Rule:
    """A rule ``body => head`` with a non-negative weight.

    The body is a non-empty sequence of literals that must all hold for the
    rule to be applicable; the head is the literal the rule concludes.
    Literals must support equality, ``str()`` and ``to_prudensjs()``.
    """

    def __init__(
        self,
        body: Iterable[_LiteralLike],
        head: _LiteralLike,
        weight: float = 0.0,
    ) -> None:
        if body is None:
            raise ValueError("a rule needs a body")
        literals = list(body)
        if not literals:
            raise ValueError("a rule's body must hold at least one literal")
        if head is None:
            raise ValueError("a rule needs a head")
        self.body: list[_LiteralLike] = literals
        self.head: _LiteralLike = head
        self.weight: float = float(weight)

    def copy(self) -> Rule:
        """Return a new rule with its own body list and the same head and weight."""
        return Rule(self.body, self.head, self.weight)

    def promote(self, amount: float) -> None:
        """Add ``amount`` to the weight; the weight never drops below zero."""
        self.weight = max(self.weight + amount, 0.0)

    def demote(self, amount: float) -> None:
        """Subtract ``amount`` from the weight; the weight never drops below zero."""
        self.weight = max(self.weight - amount, 0.0)

    def is_applicable(self, context: Iterable[_LiteralLike]) -> bool:
        """Return True if every literal of the body holds in ``context``."""
        matches = sum(
            1 for observed in context for required in self.body if observed == required
        )
        return matches >= len(self.body)

    def concurs(self, context: Iterable[_LiteralLike]) -> bool:
        """Return True if the head holds in ``context``."""
        return any(self.head == observed for observed in context)

    def __eq__(self, other: Any) -> bool:
        """Rules are equal when heads match and bodies hold the same literals,
        in any order. The weight is not compared."""
        if not isinstance(other, Rule):
            return NotImplemented
        if len(self.body) != len(other.body):
            return False
        if not self.head == other.head:
            return False
        return all(
            any(mine == theirs for theirs in other.body) for mine in self.body
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        body = ", ".join(str(literal) for literal in self.body)
        return f"({body}) => {self.head} ({self.weight:.4f})"

    def __repr__(self) -> str:
        return f"Rule({self.body!r}, {self.head!r}, {self.weight!r})"

    def to_prudensjs(self, rule_number: int) -> str:
        """Render the rule as a Prudens JS rule object named ``Rule<number>``."""
        body = ", ".join(literal.to_prudensjs() for literal in self.body)
        return (
            f'{{"name": "Rule{int(rule_number)}", "body": [{body}], '
            f'"head": {self.head.to_prudensjs()}}}'
        )