"""Proof representation with round history and clause derivations."""

from dataclasses import dataclass
from typing import Dict, List, Optional

import networkx as nx

from folentail.core.logic import Clause
from folentail.rules.base import RuleApplication
from .state import ProofState, SearchStatus


@dataclass
class ProofStep:
    """Summary of one saturation round.

    ``generated`` counts every conclusion produced in the round, ``pending``
    the distinct ones and ``new_clauses`` those not already in the knowledge
    base.
    """
    round: int
    knowledge_base_size: int
    generated: int = 0
    pending: int = 0
    new_clauses: int = 0


@dataclass
class Derivation:
    """How a clause was first obtained."""
    rule_name: str
    parents: List[Clause]


class Proof:
    """A refutation attempt: the proof state, its round history and derivations.

    Only the first derivation of every clause is kept, and only for clauses
    that were not yet known, so the derivation graph is acyclic.
    """

    def __init__(self, initial_state: ProofState, record_derivations: bool = True):
        self.state = initial_state
        self.record_derivations = record_derivations
        self.steps: List[ProofStep] = []
        self.derivations: Dict[Clause, Derivation] = {}
        self.empty_clause: Optional[Clause] = None

    @property
    def status(self) -> SearchStatus:
        return self.state.status

    @property
    def verdict(self) -> bool:
        return self.state.status.verdict

    @property
    def is_complete(self) -> bool:
        """Check if proof is complete (found empty clause)."""
        return self.state.status is SearchStatus.REFUTED

    @property
    def is_saturated(self) -> bool:
        return self.state.status is SearchStatus.SATURATED

    @property
    def length(self) -> int:
        """Number of saturation rounds performed."""
        return len(self.steps)

    def add_step(self, step: ProofStep) -> 'Proof':
        self.steps.append(step)
        return self

    def record(self, application: RuleApplication) -> 'Proof':
        """Remember the parents of every clause the application produced."""
        if not self.record_derivations:
            return self
        kb = self.state.knowledge_base
        for clause in application.generated_clauses:
            if clause in kb or clause in self.derivations:
                continue
            self.derivations[clause] = Derivation(application.rule_name, list(application.parents))
        return self

    def to_graph(self) -> nx.DiGraph:
        """Derivation graph with an edge from every parent to its conclusion."""
        graph = nx.DiGraph()
        for clause in self.state.knowledge_base:
            graph.add_node(clause, rule=None)
        for clause, derivation in self.derivations.items():
            graph.add_node(clause, rule=derivation.rule_name)
            for parent in derivation.parents:
                graph.add_edge(parent, clause)
        return graph

    def refutation(self) -> List[Clause]:
        """Clauses the empty clause depends on, in derivation order."""
        if not self.is_complete or self.empty_clause is None:
            return []
        graph = self.to_graph()
        if self.empty_clause not in graph:
            return [self.empty_clause]
        needed = nx.ancestors(graph, self.empty_clause) | {self.empty_clause}
        return [clause for clause in nx.topological_sort(graph) if clause in needed]

    def format_refutation(self) -> str:
        lines = []
        numbers: Dict[Clause, int] = {}
        for i, clause in enumerate(self.refutation(), start=1):
            numbers[clause] = i
            derivation = self.derivations.get(clause)
            if derivation is None:
                origin = "input"
            else:
                parents = ", ".join(str(numbers.get(parent, "?")) for parent in derivation.parents)
                origin = f"{derivation.rule_name} {parents}"
            lines.append(f"{i:>4}. {clause!r}  [{origin}]")
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"Proof(rounds={self.length}, status={self.status.value})"
