"""Unification algorithm for first-order logic terms."""

from typing import Dict, Iterator, Optional

from .logic import Term, Variable, Constant, Tuple


class Substitution:
    """Mutable mapping from variables to the terms they are bound to.

    Bindings are kept propagated: after every :meth:`bind` the new binding is
    applied to all existing values, so no value mentions a bound variable.
    A substitution belongs to a single unification attempt.
    """

    def __init__(self, mapping: Optional[Dict[Variable, Term]] = None):
        self.mapping: Dict[Variable, Term] = {}
        for var, term in (mapping or {}).items():
            self.bind(var, term)

    def bind(self, variable: Variable, term: Term) -> 'Substitution':
        value = term.substitute(self)
        if value == variable:
            return self
        if occurs_check(variable, value):
            raise ValueError(f"Binding {variable} -> {term} would create a cyclic term")
        self.mapping[variable] = value
        for var in list(self.mapping):
            self.mapping[var] = self.mapping[var].substitute(self)
        return self

    def is_bound(self, variable: Variable) -> bool:
        return variable in self.mapping

    def resolve(self, variable: Variable) -> Term:
        """Current binding of ``variable``; use :meth:`apply` for full dereferencing."""
        return self.mapping[variable]

    def is_empty(self) -> bool:
        return not self.mapping

    def apply(self, term: Term) -> Term:
        """Apply substitution to a term."""
        return term.substitute(self)

    def copy(self) -> 'Substitution':
        subst = Substitution()
        subst.mapping = dict(self.mapping)
        return subst

    def items(self):
        return self.mapping.items()

    def __contains__(self, variable) -> bool:
        return variable in self.mapping

    def __iter__(self) -> Iterator[Variable]:
        return iter(self.mapping)

    def __len__(self):
        return len(self.mapping)

    def __eq__(self, other):
        if not isinstance(other, Substitution):
            return False
        return self.mapping == other.mapping

    def __str__(self):
        if not self.mapping:
            return "{}"
        items = [f"{var} -> {term}" for var, term in self.mapping.items()]
        return "{" + ", ".join(items) + "}"

    __repr__ = __str__


def occurs_check(var: Variable, term: Term) -> bool:
    """Check if variable occurs in term (prevents infinite structures)."""
    return any(occurrence == var for occurrence in term.variables())


def unify_terms(term1: Term, term2: Term) -> Optional[Substitution]:
    """Unify two terms, returning the most general unifier if it exists."""
    return unify(term1, term2, Substitution())


def unify(term1: Term, term2: Term, subst: Optional[Substitution] = None) -> Optional[Substitution]:
    """Unify two terms, extending ``subst`` in place.

    Returns the (same) substitution on success and ``None`` when the terms
    cannot be made identical. On failure ``subst`` may hold partial bindings
    and must be discarded.
    """
    if subst is None:
        subst = Substitution()

    if isinstance(term1, Variable):
        return _unify_variable(term1, term2, subst)
    if isinstance(term2, Variable):
        return _unify_variable(term2, term1, subst)

    if isinstance(term1, Constant):
        return subst if term1 == term2 else None

    if isinstance(term1, Tuple) and isinstance(term2, Tuple):
        if term1.name != term2.name or term1.arity != term2.arity:
            return None
        for arg1, arg2 in zip(term1.params, term2.params):
            if unify(arg1, arg2, subst) is None:
                return None
        return subst

    return None


def _unify_variable(var: Variable, term: Term, subst: Substitution) -> Optional[Substitution]:
    if var == term:
        return subst
    if subst.is_bound(var):
        return unify(subst.resolve(var), term, subst)
    value = term.substitute(subst)
    if value == var:
        return subst
    if occurs_check(var, value):
        return None
    return subst.bind(var, value)
