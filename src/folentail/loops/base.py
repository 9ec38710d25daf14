"""Base class for saturation loops."""

from abc import ABC, abstractmethod

from folentail.proofs import Proof
from folentail.proofs.state import ProofState
from folentail.core.logic import Clause, KnowledgeBase


class Loop(ABC):
    """Abstract base class for refutation loops."""

    @abstractmethod
    def run(self, proof: Proof) -> Proof:
        """
        Search until the proof state reaches a terminal status.

        Args:
            proof: Proof whose state holds the working knowledge base

        Returns:
            The same proof, finished
        """
        pass

    def saturate(self, knowledge_base: KnowledgeBase) -> bool:
        """Run the loop on ``knowledge_base``; True iff a refutation was found."""
        proof = self.run(Proof(ProofState(knowledge_base)))
        return proof.verdict

    def is_contradiction(self, clause: Clause) -> bool:
        """Check if a clause is a contradiction (empty clause)."""
        return clause.is_empty()

