"""Factoring: merge two unifiable literals of the same sign."""

from itertools import combinations
from typing import List, Optional, Sequence

from folentail.core.logic import Clause, EpochCounter, literal_order_key, standardize_apart
from folentail.core.unification import unify_terms
from .base import Rule, RuleApplication


def factor(clause: Clause, epochs: EpochCounter) -> List[Clause]:
    """Factors of ``clause``, one per unifiable same-sign literal pair."""
    factors = {}
    for (_, kept), (j, dropped) in combinations(enumerate(clause.literals), 2):
        if kept.polarity != dropped.polarity:
            continue
        mgu = unify_terms(kept.predicate, dropped.predicate)
        if mgu is None:
            continue
        literals = sorted((lit.substitute(mgu) for k, lit in enumerate(clause.literals) if k != j),
                          key=literal_order_key)
        result = standardize_apart(Clause(*literals), next(epochs))
        factors.setdefault(result, result)
    return list(factors)


class FactoringRule(Rule):
    """Single-premise rule producing the factors of a clause."""

    @property
    def name(self) -> str:
        return "factoring"

    def apply(self, clauses: Sequence[Clause], epochs: EpochCounter) -> Optional[RuleApplication]:
        if len(clauses) != 1:
            return None
        factors = factor(clauses[0], epochs)
        if factors:
            return RuleApplication(self.name, [clauses[0]], factors)
        return None
