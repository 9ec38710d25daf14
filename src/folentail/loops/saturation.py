"""Resolution saturation loop.

Each round takes a snapshot of the knowledge base ordered by clause size,
resolves every pair of clauses that share a predicate with opposite signs,
and merges the resolvents back in. The search ends when

- a resolvent is the empty clause (REFUTED, the query is entailed),
- a round produces nothing new (SATURATED), or
- the wall-clock budget runs out (TIMED_OUT).

The budget is checked after every clause pair and every factored clause, so
a search overruns it by at most the cost of one of those steps.
"""

import logging
import time
from itertools import combinations
from typing import Callable, Optional

from folentail.core.logic import KnowledgeBase
from folentail.proofs import Proof, ProofStep
from folentail.proofs.state import SearchStatus
from folentail.rules import ResolutionRule, FactoringRule, may_resolve
from .base import Loop

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 20.0


class SaturationLoop(Loop):
    """Level-saturation refutation loop over all clause pairs."""

    def __init__(self,
                 timeout: Optional[float] = DEFAULT_TIMEOUT,
                 factoring: bool = False,
                 clock: Callable[[], float] = time.monotonic):
        """
        Initialize the loop.

        Args:
            timeout: Wall-clock budget in seconds, None for no limit
            factoring: Also add the factors of every clause each round
            clock: Time source, seconds as float
        """
        if timeout is not None and timeout < 0:
            raise ValueError(f"timeout must be non-negative, got {timeout}")
        self.timeout = timeout
        self.factoring = factoring
        self.clock = clock
        self.resolution = ResolutionRule()
        self.factoring_rule = FactoringRule()

    def run(self, proof: Proof) -> Proof:
        state = proof.state
        kb = state.knowledge_base
        started = self.clock()

        if kb.has_empty_clause():
            proof.empty_clause = next(clause for clause in kb if clause.is_empty())
            return self._finish(proof, SearchStatus.REFUTED, started)

        while True:
            state.rounds += 1
            snapshot = kb.snapshot()
            pending = KnowledgeBase()
            generated = 0

            for clause1, clause2 in combinations(snapshot, 2):
                state.pairs_checked += 1
                if may_resolve(clause1, clause2):
                    application = self.resolution.apply([clause1, clause2], state.epochs)
                    if application is not None:
                        proof.record(application)
                        generated += len(application.generated_clauses)
                        for resolvent in application.generated_clauses:
                            if resolvent.is_empty():
                                proof.empty_clause = resolvent
                                return self._finish(proof, SearchStatus.REFUTED, started)
                        pending.update(application.generated_clauses)

                if self._expired(started):
                    return self._finish(proof, SearchStatus.TIMED_OUT, started)

            if self.factoring:
                for clause in snapshot:
                    application = self.factoring_rule.apply([clause], state.epochs)
                    if application is not None:
                        proof.record(application)
                        generated += len(application.generated_clauses)
                        pending.update(application.generated_clauses)

                    if self._expired(started):
                        return self._finish(proof, SearchStatus.TIMED_OUT, started)

            new_clauses = [clause for clause in pending if clause not in kb]
            proof.add_step(ProofStep(
                round=state.rounds,
                knowledge_base_size=len(kb),
                generated=generated,
                pending=len(pending),
                new_clauses=len(new_clauses),
            ))
            logger.debug("round %d: %d clauses, %d resolvents, %d new",
                         state.rounds, len(kb), generated, len(new_clauses))

            if not new_clauses:
                return self._finish(proof, SearchStatus.SATURATED, started)

            kb.update(new_clauses)

    def _expired(self, started: float) -> bool:
        return self.timeout is not None and self.clock() - started > self.timeout

    def _finish(self, proof: Proof, status: SearchStatus, started: float) -> Proof:
        state = proof.state
        state.elapsed = self.clock() - started
        state.finish(status)
        if status is SearchStatus.TIMED_OUT:
            logger.info("search timed out after %.2fs (%d rounds, %d clauses)",
                        state.elapsed, state.rounds, len(state.knowledge_base))
        else:
            logger.info("search %s after %d rounds, %d pairs, %d clauses",
                        status.value, state.rounds, state.pairs_checked,
                        len(state.knowledge_base))
        return proof


def saturate(knowledge_base: KnowledgeBase, timeout: Optional[float] = DEFAULT_TIMEOUT) -> bool:
    """True iff resolution derives the empty clause from ``knowledge_base``."""
    return SaturationLoop(timeout=timeout).saturate(knowledge_base)
