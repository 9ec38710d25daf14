"""Core theorem proving data structures."""

from .logic import (
    Term, Constant, Variable, Tuple,
    Literal, Clause, KnowledgeBase, Problem, EpochCounter,
    literal_order_key, standardize, standardize_apart
)
from .serialization import (
    problem_to_json, problem_from_json,
    save_problem, load_problem
)
from .unification import (
    Substitution, unify, unify_terms, occurs_check
)

__all__ = [
    # Logic
    'Term', 'Constant', 'Variable', 'Tuple',
    'Literal', 'Clause', 'KnowledgeBase', 'Problem', 'EpochCounter',
    'literal_order_key', 'standardize', 'standardize_apart',
    # Serialization
    'problem_to_json', 'problem_from_json',
    'save_problem', 'load_problem',
    # Unification
    'Substitution', 'unify', 'unify_terms', 'occurs_check'
]
