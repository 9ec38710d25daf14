"""Inference rule interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from folentail.core.logic import Clause, EpochCounter


@dataclass
class RuleApplication:
    """Conclusions drawn by one rule from one tuple of premises."""
    rule_name: str
    parents: List[Clause]
    generated_clauses: List[Clause] = field(default_factory=list)

    @property
    def derives_contradiction(self) -> bool:
        return any(clause.is_empty() for clause in self.generated_clauses)


class Rule(ABC):

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def apply(self, clauses: Sequence[Clause], epochs: EpochCounter) -> Optional[RuleApplication]:
        """
        Draw every conclusion of the rule from ``clauses``.

        Args:
            clauses: The premises; how many depends on the rule
            epochs: Where conclusions get their standardization epochs

        Returns:
            RuleApplication holding at least one conclusion, or None
        """
        pass

    def is_applicable(self, clauses: Sequence[Clause]) -> bool:
        """True if :meth:`apply` would conclude anything; override with a cheaper test."""
        return self.apply(clauses, EpochCounter()) is not None
