"""Sparse integer polynomials held as ordered lists of terms."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Term:
    """One term ``coefficient * x**exponent``."""

    coefficient: int
    exponent: int


class Polynomial:
    """A polynomial as a sequence of terms, expected in descending exponent order."""

    def __init__(self, terms: Iterable[Union[Term, tuple[int, int]]] = ()) -> None:
        self._terms: tuple[Term, ...] = tuple(
            term if isinstance(term, Term) else Term(*term) for term in terms
        )

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, int]]) -> "Polynomial":
        """Build a polynomial from ``(coefficient, exponent)`` pairs, keeping their order."""
        return cls(Term(coefficient, exponent) for coefficient, exponent in pairs)

    def __add__(self, other: "Polynomial") -> "Polynomial":
        """Merge two polynomials by exponent; equal exponents summing to zero vanish."""
        if not isinstance(other, Polynomial):
            return NotImplemented
        left, right = self._terms, other._terms
        i = j = 0
        result: list[Term] = []
        while i < len(left) and j < len(right):
            a, b = left[i], right[j]
            if a.exponent == b.exponent:
                coefficient = a.coefficient + b.coefficient
                if coefficient != 0:
                    result.append(Term(coefficient, a.exponent))
                i += 1
                j += 1
            elif a.exponent > b.exponent:
                result.append(a)
                i += 1
            else:
                result.append(b)
                j += 1
        result.extend(left[i:])
        result.extend(right[j:])
        return Polynomial(result)

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        """Multiply term by term; the result is in descending exponent order without zero terms."""
        if not isinstance(other, Polynomial):
            return NotImplemented
        if not self._terms or not other._terms:
            return Polynomial()
        totals: defaultdict[int, int] = defaultdict(int)
        for a in self._terms:
            for b in other._terms:
                totals[a.exponent + b.exponent] += a.coefficient * b.coefficient
        return Polynomial(
            Term(totals[exponent], exponent)
            for exponent in sorted(totals, reverse=True)
            if totals[exponent] != 0
        )

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __hash__(self) -> int:
        return hash(self._terms)

    def __repr__(self) -> str:
        return f"Polynomial({self.pairs()!r})"

    def pairs(self) -> list[tuple[int, int]]:
        """Return the terms as ``(coefficient, exponent)`` pairs."""
        return [(term.coefficient, term.exponent) for term in self._terms]

    def format(self, label: str) -> str:
        """Render as ``label: cx^e + cx^e ...``."""
        body = " + ".join(f"{t.coefficient}x^{t.exponent}" for t in self._terms)
        return f"{label}: {body}"


def format_together(
    p1: Polynomial, p2: Polynomial, total: Polynomial, product: Polynomial
) -> str:
    """Render both operands with their sum and product, one per line."""
    return "\n".join(
        [
            p1.format("P1"),
            p2.format("P2"),
            total.format("P1 + P2"),
            product.format("P1 * P2"),
        ]
    )