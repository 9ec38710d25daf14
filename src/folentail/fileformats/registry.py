"""Lookup of file format handlers by name or file extension."""

from pathlib import Path
from typing import Dict, List, Optional, Type

from .base import FileFormat
from .kbq import KBQFormat
from .json import JSONFormat


class FileFormatRegistry:
    """Handler classes indexed by format name and by file suffix."""

    def __init__(self):
        self._formats: Dict[str, Type[FileFormat]] = {}
        self._suffixes: Dict[str, str] = {}
        for format_class in (KBQFormat, JSONFormat):
            self.register(format_class)

    def register(self, format_class: Type[FileFormat], name: Optional[str] = None):
        """Add a handler class; suffixes already claimed keep their handler."""
        handler = format_class()
        name = (name or handler.name).lower()
        self._formats[name] = format_class
        for suffix in handler.extensions:
            self._suffixes.setdefault(suffix.lower(), name)

    def get_handler(self, format_name: str) -> FileFormat:
        format_class = self._formats.get(format_name.lower())
        if format_class is None:
            raise ValueError(f"Unknown file format: {format_name}")
        return format_class()

    def get_handler_for_file(self, file_path: Path) -> FileFormat:
        suffix = Path(file_path).suffix
        name = self._suffixes.get(suffix.lower())
        if name is None:
            raise ValueError(f"No handler found for file extension: {suffix}")
        return self.get_handler(name)

    def list_formats(self) -> List[str]:
        return list(self._formats)


_registry = FileFormatRegistry()


def get_format_handler(format_name: Optional[str] = None, file_path: Optional[Path] = None) -> FileFormat:
    """Handler named ``format_name``, else the one matching ``file_path``."""
    if format_name:
        return _registry.get_handler(format_name)
    if file_path:
        return _registry.get_handler_for_file(file_path)
    raise ValueError("Either format_name or file_path must be provided")
