"""
Proof representation and management.
"""

from .proof import Proof, ProofStep, Derivation
from .state import ProofState, SearchStatus

__all__ = [
    'Proof', 'ProofStep', 'Derivation',
    'ProofState', 'SearchStatus'
]
