"""Base class for problem file formats."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from folentail.core.logic import Problem


class FileFormat(ABC):
    """A textual encoding of a :class:`Problem`.

    Subclasses implement the string conversions; reading and writing files is
    shared. Malformed content raises
    :class:`~folentail.exceptions.ProblemFormatError`.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry name of the format."""

    @property
    @abstractmethod
    def extensions(self) -> List[str]:
        """File suffixes, with the leading dot."""

    @abstractmethod
    def parse_string(self, content: str, **kwargs) -> Problem:
        pass

    @abstractmethod
    def format_problem(self, problem: Problem, **kwargs) -> str:
        pass

    def parse_file(self, file_path: Path, **kwargs) -> Problem:
        return self.parse_string(Path(file_path).read_text(), **kwargs)

    def write_file(self, problem: Problem, file_path: Path, **kwargs) -> None:
        Path(file_path).write_text(self.format_problem(problem, **kwargs))
