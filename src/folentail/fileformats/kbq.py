"""Line-oriented knowledge-base/query format.

    <Q>              number of queries
    <literal>        Q lines, e.g. ``Likes(Jane,Bill)`` or ``~Likes(Jane,Bill)``
    <S>              number of knowledge-base sentences
    <sentence>       S lines, literals joined by ``|``

Argument tokens starting with an uppercase letter are constants, all others
are variables. Whitespace is insignificant. Results are written one
``TRUE``/``FALSE`` line per query.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple as Pair

from lark import Lark, Transformer
from lark.exceptions import LarkError

from folentail.core.logic import Constant, Variable, Tuple, Literal, Clause, Problem
from folentail.exceptions import ProblemFormatError, QueryCountError
from .base import FileFormat

logger = logging.getLogger(__name__)

ENTAILED = "TRUE"
NOT_ENTAILED = "FALSE"

kbq_parser = Lark(r"""
    sentence : literal ("|" literal)*
    literal  : NEGATION? atom
    atom     : NAME "(" argument ("," argument)* ")"
    argument : NAME

    NEGATION : "~"
    NAME     : /[A-Za-z][A-Za-z0-9]*/

    %import common.WS
    %ignore WS
""", start=["sentence", "literal"], parser="lalr")

_WHITESPACE = re.compile(r"\s+")


class KBQConverter(Transformer):
    def argument(self, children):
        name = str(children[0])
        if name[0].isupper():
            return Constant(name)
        return Variable(name)

    def atom(self, children):
        name, *arguments = children
        return Tuple(Constant(str(name)), *arguments)

    def literal(self, children):
        if len(children) == 2:
            return Literal(children[1], False)
        return Literal(children[0], True)

    def sentence(self, children):
        return Clause(*children)


class _Lines:
    """Non-blank lines with their 1-based line numbers."""

    def __init__(self, content: str):
        self._lines: Iterator[Pair[int, str]] = (
            (number, line.strip())
            for number, line in enumerate(content.splitlines(), start=1)
            if line.strip()
        )
        self.last = 0

    def take(self, count: int) -> List[Pair[int, str]]:
        taken = []
        for _ in range(count):
            entry = next(self._lines, None)
            if entry is None:
                raise QueryCountError(count, len(taken), line=self.last + 1)
            self.last = entry[0]
            taken.append(entry)
        return taken

    def rest(self) -> List[Pair[int, str]]:
        return list(self._lines)


class KBQFormat(FileFormat):
    """Handler for the knowledge-base/query text format."""

    @property
    def name(self) -> str:
        return "kbq"

    @property
    def extensions(self) -> List[str]:
        return ['.txt', '.kbq']

    def parse_string(self, content: str, **kwargs) -> Problem:
        lines = _Lines(content)
        queries = [self.parse_literal(text, line) for line, text in
                   lines.take(self._read_count(lines, "query count"))]
        clauses = [self.parse_clause(text, line) for line, text in
                   lines.take(self._read_count(lines, "sentence count"))]

        trailing = lines.rest()
        if trailing:
            logger.warning("ignoring %d trailing line(s) after line %d", len(trailing), lines.last)

        return Problem(*clauses, queries=queries)

    def parse_literal(self, text: str, line=None) -> Literal:
        return self._parse(text, "literal", line)

    def parse_clause(self, text: str, line=None) -> Clause:
        return self._parse(text, "sentence", line)

    def _parse(self, text: str, start: str, line):
        compact = _WHITESPACE.sub("", text)
        if not compact:
            raise ProblemFormatError(f"Empty {start}", line=line)
        try:
            tree = kbq_parser.parse(compact, start=start)
            return KBQConverter().transform(tree)
        except LarkError as e:
            raise ProblemFormatError(f"Invalid {start}", line=line, text=text) from e

    def _read_count(self, lines: _Lines, what: str) -> int:
        (line, text), = lines.take(1)
        try:
            count = int(text)
        except ValueError:
            raise ProblemFormatError(f"Expected {what}", line=line, text=text) from None
        if count < 0:
            raise ProblemFormatError(f"Negative {what}", line=line, text=text)
        return count

    def format_problem(self, problem: Problem, **kwargs) -> str:
        lines = [str(len(problem.queries))]
        lines += [repr(query) for query in problem.queries]
        lines.append(str(len(problem.clauses)))
        lines += [repr(clause) for clause in problem.clauses]
        return '\n'.join(lines) + '\n'

    def format_results(self, verdicts: Iterable[bool]) -> str:
        return ''.join(f"{ENTAILED if verdict else NOT_ENTAILED}\n" for verdict in verdicts)

    def write_results(self, verdicts: Iterable[bool], file_path: Path) -> None:
        with open(file_path, 'w') as f:
            f.write(self.format_results(verdicts))
