"""
folentail: first-order entailment by resolution refutation.

Given a knowledge base of clauses and a list of query literals, folentail
decides for every query whether the knowledge base entails it. Each query is
negated, added to a freshly renamed copy of the knowledge base, and binary
resolution is applied level by level until the empty clause appears, nothing
new can be derived, or the time budget runs out.

It includes:

- Terms, literals and clauses with renaming-aware equality
- Unification with occurs-check
- Binary resolution (and optional factoring)
- A saturation loop with a wall-clock budget
- Proof records with refutation extraction
- A line-oriented problem format and JSON serialization

Basic usage:
    >>> from folentail import *
    >>> x, A = Variable("x"), Constant("A")
    >>> kb = [
    ...     Clause(Literal(Tuple("P", x), False), Literal(Tuple("Q", x), True)),
    ...     Clause(Literal(Tuple("P", A), True)),
    ... ]
    >>> ask(kb, [Literal(Tuple("Q", A)), Literal(Tuple("R", A))])
    [True, False]
"""

__version__ = "0.1.0"

# Core logic structures
from folentail.core import (
    Term, Constant, Variable, Tuple,
    Literal, Clause, KnowledgeBase, Problem, EpochCounter,
    literal_order_key, standardize, standardize_apart,
    save_problem, load_problem
)

# Unification
from folentail.core.unification import (
    Substitution, unify, unify_terms, occurs_check
)

# Proof structures
from folentail.proofs import (
    ProofState, SearchStatus, Proof, ProofStep
)

# Inference rules
from folentail.rules import (
    Rule, RuleApplication,
    ResolutionRule, FactoringRule, resolve, may_resolve
)

# Saturation loops
from folentail.loops import (
    Loop, SaturationLoop, saturate, get_loop
)

# Queries
from folentail.engine import (
    negate, prepare_knowledge_base, prove, entails, ask
)

# File formats
from folentail.fileformats import (
    get_format_handler
)

from folentail.exceptions import ProblemFormatError

# Configuration
from folentail.utils.config import get_config


__all__ = [
    # Version
    "__version__",

    # Core logic
    "Term", "Constant", "Variable", "Tuple",
    "Literal", "Clause", "KnowledgeBase", "Problem", "EpochCounter",
    "literal_order_key", "standardize", "standardize_apart",
    "save_problem", "load_problem",

    # Unification
    "Substitution", "unify", "unify_terms", "occurs_check",

    # Proofs
    "ProofState", "SearchStatus", "Proof", "ProofStep",

    # Rules
    "Rule", "RuleApplication",
    "ResolutionRule", "FactoringRule", "resolve", "may_resolve",

    # Loops
    "Loop", "SaturationLoop", "saturate", "get_loop",

    # Queries
    "negate", "prepare_knowledge_base", "prove", "entails", "ask",

    # File formats
    "get_format_handler",
    "ProblemFormatError",

    # Configuration
    "get_config",
]
