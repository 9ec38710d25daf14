"""JSON problem format, backed by :mod:`folentail.core.serialization`."""

import json
from typing import List

from folentail.core.logic import Problem
from folentail.core.serialization import problem_from_json, problem_to_json
from folentail.exceptions import ProblemFormatError
from .base import FileFormat


class JSONFormat(FileFormat):
    """Handler for problems saved with :func:`folentail.core.save_problem`."""

    @property
    def name(self) -> str:
        return "json"

    @property
    def extensions(self) -> List[str]:
        return ['.json']

    def parse_string(self, content: str, **kwargs) -> Problem:
        try:
            return problem_from_json(content)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise ProblemFormatError(f"Invalid JSON problem: {e}") from e

    def format_problem(self, problem: Problem, indent: int = 2, **kwargs) -> str:
        return problem_to_json(problem, indent=indent)
