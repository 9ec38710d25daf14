"""Entailment queries against a knowledge base.

For every query the engine builds a private working knowledge base holding
the negated query and a standardized-apart copy of each base clause, then
lets a refutation loop search for the empty clause. Queries share nothing
but the read-only base clauses.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from folentail.core.logic import Clause, Literal, KnowledgeBase, EpochCounter, standardize_apart
from folentail.loops import Loop, SaturationLoop, get_loop, DEFAULT_TIMEOUT
from folentail.proofs import Proof, ProofState

logger = logging.getLogger(__name__)


def negate(query: Literal) -> Literal:
    """The literal with the opposite sign and the same term."""
    return query.negate()


def prepare_knowledge_base(clauses: Iterable[Clause], query: Literal,
                           epochs: EpochCounter) -> KnowledgeBase:
    """Working knowledge base for one query: ``{~query} + renamed base clauses``."""
    knowledge_base = KnowledgeBase()
    knowledge_base.add(standardize_apart(Clause(negate(query)), next(epochs)))
    for clause in clauses:
        knowledge_base.add(standardize_apart(clause, next(epochs)))
    return knowledge_base


def loop_from_config(config=None) -> Loop:
    """Build the loop described by a :class:`~folentail.utils.config.Config`."""
    if config is None:
        return SaturationLoop()
    timeout = config.get('saturation.timeout', DEFAULT_TIMEOUT)
    return get_loop(
        config.get('saturation.loop', 'saturation'),
        timeout=None if timeout in (None, '') else float(timeout),
        factoring=_as_bool(config.get('saturation.factoring', False)),
    )


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(value)


def prove(clauses: Sequence[Clause], query: Literal, loop: Optional[Loop] = None) -> Proof:
    """
    Attempt to refute ``clauses + {~query}``.

    Args:
        clauses: Knowledge-base clauses (left untouched)
        query: Literal whose entailment is asked
        loop: Refutation loop, a default SaturationLoop if omitted

    Returns:
        Finished Proof; ``proof.verdict`` is True iff the query is entailed
    """
    if loop is None:
        loop = SaturationLoop()
    epochs = EpochCounter()
    knowledge_base = prepare_knowledge_base(clauses, query, epochs)
    proof = Proof(ProofState(knowledge_base, epochs=epochs))
    loop.run(proof)
    logger.debug("query %r: %s", query, proof.status.value)
    return proof


def entails(clauses: Sequence[Clause], query: Literal, loop: Optional[Loop] = None) -> bool:
    """True iff the clauses entail ``query`` within the loop's budget."""
    return prove(clauses, query, loop).verdict


def ask(clauses: Sequence[Clause], queries: Iterable[Literal],
        loop: Optional[Loop] = None) -> List[bool]:
    """One verdict per query, in query order."""
    clauses = list(clauses)
    return [entails(clauses, query, loop) for query in queries]
