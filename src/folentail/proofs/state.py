"""Proof state representation."""

from dataclasses import dataclass
from typing import Optional
from enum import Enum

from folentail.core.logic import KnowledgeBase, EpochCounter


class SearchStatus(Enum):
    """States of a refutation search. Every state but SEARCHING is terminal."""
    SEARCHING = "searching"
    REFUTED = "refuted"
    SATURATED = "saturated"
    TIMED_OUT = "timed_out"

    @property
    def is_terminal(self) -> bool:
        return self is not SearchStatus.SEARCHING

    @property
    def verdict(self) -> bool:
        """True iff the query is entailed, i.e. the empty clause was derived."""
        if not self.is_terminal:
            raise ValueError("Search has not finished yet")
        return self is SearchStatus.REFUTED


@dataclass
class ProofState:
    """The working knowledge base of one query together with search progress."""
    knowledge_base: KnowledgeBase
    epochs: Optional[EpochCounter] = None
    status: SearchStatus = SearchStatus.SEARCHING
    rounds: int = 0
    pairs_checked: int = 0
    elapsed: float = 0.0

    def __post_init__(self):
        if not isinstance(self.knowledge_base, KnowledgeBase):
            self.knowledge_base = KnowledgeBase(self.knowledge_base)
        if self.epochs is None:
            self.epochs = EpochCounter.following(self.knowledge_base)

    @property
    def is_finished(self) -> bool:
        return self.status.is_terminal

    def finish(self, status: SearchStatus) -> None:
        """Move from SEARCHING to a terminal status."""
        if self.status.is_terminal:
            raise ValueError(f"Search already finished as {self.status.value}")
        if not status.is_terminal:
            raise ValueError("Cannot finish a search as SEARCHING")
        self.status = status
