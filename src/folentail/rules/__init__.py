"""Inference rules for theorem proving."""

from .base import Rule, RuleApplication
from .resolution import ResolutionRule, resolve, may_resolve, complementary_pairs
from .factoring import FactoringRule, factor

__all__ = [
    'Rule', 'RuleApplication',
    'ResolutionRule', 'resolve', 'may_resolve', 'complementary_pairs',
    'FactoringRule', 'factor'
]
