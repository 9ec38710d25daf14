"""Binary resolution inference rule."""

from itertools import chain, product
from typing import Iterator, List, Optional, Sequence, Tuple

from folentail.core.logic import Clause, Literal, EpochCounter, literal_order_key, standardize_apart
from folentail.core.unification import Substitution, unify
from .base import Rule, RuleApplication


def may_resolve(clause1: Clause, clause2: Clause) -> bool:
    """Cheap pre-filter: do the clauses share a predicate name with opposite signs?

    Unification needs equal functor names, so a pair rejected here can never
    produce a resolvent.
    """
    positive1 = clause1.predicate_names(True)
    negative1 = clause1.predicate_names(False)
    return bool(positive1 & clause2.predicate_names(False)) or \
        bool(negative1 & clause2.predicate_names(True))


def complementary_pairs(clause1: Clause, clause2: Clause) -> Iterator[Tuple[Literal, Literal]]:
    """Positive of ``clause1`` with negative of ``clause2``, then the reverse."""
    return chain(product(clause1.positive, clause2.negative),
                 product(clause1.negative, clause2.positive))


def resolve(clause1: Clause, clause2: Clause, epochs: EpochCounter) -> List[Clause]:
    """All binary resolvents of two clauses.

    Each complementary literal pair is unified under its own substitution.
    The resolvent keeps every other literal of both parents with the unifier
    applied, ordered canonically and standardized apart with a fresh epoch.
    Alpha-equivalent resolvents are returned once, in discovery order.
    """
    resolvents = {}
    for lit1, lit2 in complementary_pairs(clause1, clause2):
        subst = unify(lit1.predicate, lit2.predicate, Substitution())
        if subst is None:
            continue

        survivors = [lit.substitute(subst) for lit in clause1.literals if lit != lit1]
        survivors += [lit.substitute(subst) for lit in clause2.literals if lit != lit2]
        survivors.sort(key=literal_order_key)

        resolvent = standardize_apart(Clause(*survivors), next(epochs))
        resolvents.setdefault(resolvent, resolvent)

    return list(resolvents)


class ResolutionRule(Rule):
    """Binary resolution inference rule."""

    @property
    def name(self) -> str:
        return "resolution"

    def apply(self, clauses: Sequence[Clause], epochs: EpochCounter) -> Optional[RuleApplication]:
        """
        Apply binary resolution between two clauses.

        Args:
            clauses: The two parent clauses
            epochs: Epoch source for standardizing the resolvents apart

        Returns:
            RuleApplication if successful, None otherwise
        """
        if len(clauses) != 2:
            return None

        clause1, clause2 = clauses
        resolvents = resolve(clause1, clause2, epochs)

        if not resolvents:
            return None

        return RuleApplication(
            rule_name=self.name,
            parents=[clause1, clause2],
            generated_clauses=resolvents
        )

    def is_applicable(self, clauses: Sequence[Clause]) -> bool:
        return len(clauses) == 2 and may_resolve(*clauses)
