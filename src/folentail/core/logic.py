"""First-order logic terms, literals, clauses and knowledge bases.

Terms come in three variants: constants, variables and tuples. A tuple is a
functor applied to an ordered sequence of terms and stands for predicates and
function applications alike. All of them are immutable once constructed;
substitution and renaming always build new objects.

Clauses compare (and hash) up to variable renaming. The canonical
representative of a clause is computed by :func:`standardize`, which walks the
literals in the order given by :func:`literal_order_key` and renames
variables to ``x0, x1, ...`` in order of first occurrence. Literals with
equal keys are arranged so that the renamed sequence is the smallest one.
"""

import re
from itertools import groupby
from typing import Dict, Iterable, Iterator, List, Optional


_EPOCH_SUFFIX = re.compile(r"_(\d+)$")


class Term:
    """Base class of the term variants."""

    __slots__ = ()

    def variables(self) -> Iterator['Variable']:
        """Yield variable occurrences left to right (with repetitions)."""
        return iter(())

    def substitute(self, subst) -> 'Term':
        """Replace every bound variable by its ultimate binding in ``subst``."""
        raise NotImplementedError

    def rename(self, mapping: Dict['Variable', 'Term']) -> 'Term':
        """Replace variables one level deep according to ``mapping``."""
        raise NotImplementedError

    def copy(self) -> 'Term':
        raise NotImplementedError


class Constant(Term):
    __slots__ = ('name',)

    def __init__(self, name: str):
        self.name = name.strip()

    def __eq__(self, other):
        if not isinstance(other, Constant):
            return False
        return self.name == other.name

    def __hash__(self):
        return hash(('Constant', self.name))

    def __repr__(self):
        return self.name

    def substitute(self, subst) -> Term:
        return self

    def rename(self, mapping) -> Term:
        return self

    def copy(self) -> 'Constant':
        return Constant(self.name)


class Variable(Term):
    __slots__ = ('name',)

    def __init__(self, name: str):
        self.name = name.strip()

    def __eq__(self, other):
        if not isinstance(other, Variable):
            return False
        return self.name == other.name

    def __hash__(self):
        return hash(('Variable', self.name))

    def __repr__(self):
        return self.name

    def variables(self) -> Iterator['Variable']:
        yield self

    def substitute(self, subst) -> Term:
        if subst.is_bound(self):
            return subst.resolve(self).substitute(subst)
        return self

    def rename(self, mapping) -> Term:
        return mapping.get(self, self)

    def copy(self) -> 'Variable':
        return Variable(self.name)


class Tuple(Term):
    """A functor applied to parameters: ``Likes(x, Bill)`` or ``f(A)``."""

    __slots__ = ('functor', 'params', '_hash')

    def __init__(self, functor, *params: Term):
        if isinstance(functor, str):
            functor = Constant(functor)
        if not isinstance(functor, Constant):
            raise TypeError(f"Expected Constant functor, got {functor!r}")
        for param in params:
            if not isinstance(param, Term):
                raise TypeError(f"Expected Term, got {param!r}")
        self.functor = functor
        self.params = tuple(params)
        self._hash = None

    @property
    def name(self) -> str:
        return self.functor.name

    @property
    def arity(self) -> int:
        return len(self.params)

    def __eq__(self, other):
        if not isinstance(other, Tuple):
            return False
        return self.functor == other.functor and self.params == other.params

    def __hash__(self):
        if self._hash is None:
            self._hash = hash(('Tuple', self.functor.name, self.params))
        return self._hash

    def __repr__(self):
        return f"{self.name}({','.join(map(repr, self.params))})"

    def variables(self) -> Iterator[Variable]:
        for param in self.params:
            yield from param.variables()

    def substitute(self, subst) -> Term:
        return Tuple(self.functor, *[param.substitute(subst) for param in self.params])

    def rename(self, mapping) -> Term:
        return Tuple(self.functor, *[param.rename(mapping) for param in self.params])

    def copy(self) -> 'Tuple':
        # Parameters are immutable and can be shared.
        return Tuple(self.functor.copy(), *self.params)


class Literal:
    """A signed tuple term. ``polarity`` is False for negated literals."""

    __slots__ = ('predicate', 'polarity', '_hash')

    @staticmethod
    def check(predicate, polarity):
        if not isinstance(predicate, Tuple):
            raise TypeError(f"Expected Tuple, got {predicate!r}")
        if not isinstance(polarity, bool):
            raise TypeError(f"Expected bool, got {polarity!r}")

    def __init__(self, predicate: Tuple, polarity: bool = True):
        Literal.check(predicate, polarity)
        self.predicate = predicate
        self.polarity = polarity
        self._hash = None

    @property
    def name(self) -> str:
        return self.predicate.name

    @property
    def arity(self) -> int:
        return self.predicate.arity

    @property
    def args(self):
        return self.predicate.params

    def __repr__(self):
        return f"{'' if self.polarity else '~'}{self.predicate!r}"

    def __eq__(self, other):
        if not isinstance(other, Literal):
            return False
        return self.polarity == other.polarity and self.predicate == other.predicate

    def __hash__(self):
        if self._hash is None:
            self._hash = hash((self.polarity, self.predicate))
        return self._hash

    def negate(self) -> 'Literal':
        return Literal(self.predicate, not self.polarity)

    def is_complementary(self, other: 'Literal') -> bool:
        return self.polarity != other.polarity and self.predicate == other.predicate

    def variables(self) -> Iterator[Variable]:
        return self.predicate.variables()

    def substitute(self, subst) -> 'Literal':
        return Literal(self.predicate.substitute(subst), self.polarity)

    def rename(self, mapping: Dict[Variable, Term]) -> 'Literal':
        return Literal(self.predicate.rename(mapping), self.polarity)

    def copy(self) -> 'Literal':
        return Literal(self.predicate.copy(), self.polarity)


def _term_key(term: Term, seen: Dict[Variable, int]):
    # Variables are keyed by first-occurrence index so the key survives renaming.
    if isinstance(term, Variable):
        return (0, seen.setdefault(term, len(seen)))
    if isinstance(term, Constant):
        return (1, term.name)
    return (2, term.name, term.arity, tuple(_term_key(param, seen) for param in term.params))


def literal_order_key(literal: Literal, seen: Optional[Dict[Variable, int]] = None):
    """Sort key giving the deterministic literal order used for canonical forms.

    Negative literals come before positive ones, then literals are ordered by
    functor name, by arity and finally by their parameters, where variables
    sort before constants and compare by the position at which they first
    occur inside the literal.
    """
    if seen is None:
        seen = {}
    return (
        1 if literal.polarity else 0,
        literal.name,
        literal.arity,
        tuple(_term_key(param, seen) for param in literal.args),
    )


def _isolated(literal: Literal, index: Dict[Variable, int], others: Iterable[Literal]) -> bool:
    variables = set(literal.variables())
    if index.keys() & variables:
        return False
    return not any(variables.intersection(other.variables()) for other in others)


def _canonicalize(literals: Iterable[Literal]):
    """Smallest ordering of ``literals`` under the shared variable index.

    Tie groups of the local order key are filled one position at a time.
    Only the candidates with the smallest key at a position can start a
    smallest ordering, and a partial ordering is dropped as soon as its
    prefix exceeds the best complete key. Candidates sharing no variable
    with the rest of the clause are interchangeable, so one of them is
    enough.
    """
    ordered = sorted(literals, key=literal_order_key)
    groups = [list(group) for _, group in groupby(ordered, key=literal_order_key)]
    best = []

    def search(keys, ordering, index, group, rest):
        if best and keys > best[0][:len(keys)]:
            return
        if not group:
            if not rest:
                if not best or keys < best[0]:
                    best[:] = [keys, ordering, index]
                return
            group, rest = rest[0], rest[1:]

        candidates = []
        for position, literal in enumerate(group):
            extended = dict(index)
            candidates.append((literal_order_key(literal, extended), position, extended))
        smallest = min(key for key, _, _ in candidates)

        isolated_seen = False
        for key, position, extended in candidates:
            if key != smallest:
                continue
            literal = group[position]
            remaining = group[:position] + group[position + 1:]
            if _isolated(literal, index, remaining + [lit for other in rest for lit in other]):
                if isolated_seen:
                    continue
                isolated_seen = True
            search(keys + (key,), ordering + [literal], extended, remaining, rest)

    if groups:
        search((), [], {}, groups[0], groups[1:])
    else:
        best[:] = [(), [], {}]

    best_key, best_ordering, index = best
    mapping = {var: Variable(f"x{i}") for var, i in index.items()}
    return best_key, [literal.rename(mapping) for literal in best_ordering]


class Clause:
    """A disjunction of literals; the empty clause is falsity.

    Duplicate literals are dropped on construction. Equality and hashing are
    defined on the canonical form, so two clauses are equal iff they are
    alpha-equivalent.
    """

    @staticmethod
    def check(literals):
        for literal in literals:
            if not isinstance(literal, Literal):
                raise TypeError(f"Expected Literal, got {literal!r}")

    def __init__(self, *literals: Literal):
        Clause.check(literals)
        self.literals = tuple(dict.fromkeys(literals))
        self.positive = tuple(lit for lit in self.literals if lit.polarity)
        self.negative = tuple(lit for lit in self.literals if not lit.polarity)
        self._canonical = None

    @property
    def size(self) -> int:
        return len(self.literals)

    def is_empty(self) -> bool:
        return not self.literals

    def __iter__(self):
        return iter(self.literals)

    def __repr__(self):
        if not self.literals:
            return "$false"
        return ' | '.join(map(repr, self.literals))

    @property
    def canonical_key(self):
        if self._canonical is None:
            self._canonical = _canonicalize(self.literals)
        return self._canonical[0]

    def __eq__(self, other):
        if not isinstance(other, Clause):
            return False
        if self is other:
            return True
        if self.size != other.size:
            return False
        return self.canonical_key == other.canonical_key

    def __hash__(self):
        return hash(self.canonical_key)

    def standardize(self) -> 'Clause':
        return standardize(self)

    def predicate_names(self, polarity: Optional[bool] = None) -> set:
        return {lit.name for lit in self.literals
                if polarity is None or lit.polarity == polarity}

    def variables(self) -> List[Variable]:
        """Distinct variables in order of first occurrence."""
        return list(dict.fromkeys(var for lit in self.literals for var in lit.variables()))

    def substitute(self, subst) -> 'Clause':
        return Clause(*[lit.substitute(subst) for lit in self.literals])

    def rename(self, mapping: Dict[Variable, Term]) -> 'Clause':
        return Clause(*[lit.rename(mapping) for lit in self.literals])

    def copy(self) -> 'Clause':
        return Clause(*[lit.copy() for lit in self.literals])


def standardize(clause: Clause) -> Clause:
    """Return the canonical representative of ``clause`` under renaming."""
    if clause._canonical is None:
        clause._canonical = _canonicalize(clause.literals)
    return Clause(*clause._canonical[1])


def standardize_apart(clause: Clause, epoch: int) -> Clause:
    """Rename the variables of ``clause`` to names unique to ``epoch``.

    Variables are numbered in order of first occurrence and suffixed with the
    epoch (``x0_7``, ``x1_7``, ...). Parsed variable names never contain an
    underscore, so the generated names cannot clash with them.
    """
    mapping = {var: Variable(f"x{i}_{epoch}") for i, var in enumerate(clause.variables())}
    if not mapping:
        return clause
    return clause.rename(mapping)


class EpochCounter:
    """Hands out increasing standardization epochs.

    One counter is owned by each proof search so that independent searches
    never share renaming state.
    """

    def __init__(self, start: int = 1):
        self._next = start

    @classmethod
    def following(cls, clauses: Iterable[Clause]) -> 'EpochCounter':
        """A counter starting past every epoch already used in ``clauses``."""
        last = 0
        for clause in clauses:
            for var in clause.variables():
                match = _EPOCH_SUFFIX.search(var.name)
                if match:
                    last = max(last, int(match.group(1)))
        return cls(last + 1)

    def __iter__(self):
        return self

    def __next__(self) -> int:
        epoch = self._next
        self._next += 1
        return epoch

    @property
    def peek(self) -> int:
        return self._next


class KnowledgeBase:
    """Insertion-ordered set of clauses, deduplicated up to renaming."""

    def __init__(self, clauses: Iterable[Clause] = ()):
        self._clauses: Dict[Clause, Clause] = {}
        self.update(clauses)

    def add(self, clause: Clause) -> bool:
        """Add ``clause``; return False if an alpha-equivalent one is present."""
        if clause in self._clauses:
            return False
        self._clauses[clause] = clause
        return True

    def update(self, clauses: Iterable[Clause]) -> int:
        return sum(1 for clause in clauses if self.add(clause))

    def issuperset(self, clauses: Iterable[Clause]) -> bool:
        return all(clause in self._clauses for clause in clauses)

    def snapshot(self) -> List[Clause]:
        """The clauses ordered by size, smallest first (ties keep insertion order)."""
        return sorted(self._clauses, key=lambda clause: clause.size)

    def copy(self) -> 'KnowledgeBase':
        return KnowledgeBase(self._clauses)

    def has_empty_clause(self) -> bool:
        return any(clause.is_empty() for clause in self._clauses)

    def __contains__(self, clause) -> bool:
        return clause in self._clauses

    def __len__(self):
        return len(self._clauses)

    def __iter__(self):
        return iter(self._clauses)

    def __repr__(self):
        return '\n'.join(map(repr, self._clauses))


class Problem:
    """Knowledge-base clauses together with the query literals to ask."""

    @staticmethod
    def check(clauses, queries):
        for clause in clauses:
            if not isinstance(clause, Clause):
                raise TypeError(f"Expected Clause, got {clause!r}")
        for query in queries:
            if not isinstance(query, Literal):
                raise TypeError(f"Expected Literal, got {query!r}")

    def __init__(self, *clauses: Clause, queries: Iterable[Literal] = ()):
        queries = tuple(queries)
        Problem.check(clauses, queries)
        self.clauses = clauses
        self.queries = queries

    def __repr__(self):
        lines = [f"? {query!r}" for query in self.queries]
        lines += [repr(clause) for clause in self.clauses]
        return '\n'.join(lines)

    def __eq__(self, other):
        if not isinstance(other, Problem):
            return False
        return self.queries == other.queries and self.clauses == other.clauses

    def predicate_names(self) -> set:
        names = set()
        for clause in self.clauses:
            names |= clause.predicate_names()
        return names | {query.name for query in self.queries}
