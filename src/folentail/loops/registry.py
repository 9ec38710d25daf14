"""Lookup of refutation loops by name."""

from typing import Dict, Type, List, Any

from .base import Loop
from .saturation import SaturationLoop


class LoopRegistry:
    """Loop classes by case-insensitive name."""

    def __init__(self):
        self._loops: Dict[str, Type[Loop]] = {'saturation': SaturationLoop}

    def register(self, name: str, loop_class: Type[Loop]):
        self._loops[name.lower()] = loop_class

    def create_loop(self, name: str, **kwargs: Any) -> Loop:
        """Instantiate the loop called ``name`` with ``kwargs``."""
        loop_class = self._loops.get(name.lower())
        if loop_class is None:
            raise ValueError(f"Unknown loop: {name} (available: {', '.join(self.list_loops())})")
        return loop_class(**kwargs)

    def list_loops(self) -> List[str]:
        return sorted(self._loops)


_registry = LoopRegistry()


def get_loop(name: str, **kwargs: Any) -> Loop:
    return _registry.create_loop(name, **kwargs)


def register_loop(name: str, loop_class: Type[Loop]) -> None:
    """Make a custom loop available through :func:`get_loop`."""
    _registry.register(name, loop_class)
