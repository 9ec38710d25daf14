"""JSON serialization for problems.

Objects are written as ``_type``-tagged dictionaries. Variable and constant
names are stored verbatim, so a problem survives a round trip exactly and not
only up to renaming.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from .logic import Variable, Constant, Tuple, Literal, Clause, Problem


class CoreJSONEncoder(json.JSONEncoder):
    """Encoder for terms, literals, clauses and problems."""

    def default(self, obj):
        if isinstance(obj, (Variable, Constant)):
            return {"_type": type(obj).__name__, "name": obj.name}
        if isinstance(obj, Tuple):
            return {"_type": "Tuple", "functor": obj.name, "params": list(obj.params)}
        if isinstance(obj, Literal):
            return {"_type": "Literal", "predicate": obj.predicate, "polarity": obj.polarity}
        if isinstance(obj, Clause):
            return {"_type": "Clause", "literals": list(obj.literals)}
        if isinstance(obj, Problem):
            return {
                "_type": "Problem",
                "queries": list(obj.queries),
                "clauses": list(obj.clauses),
            }
        return super().default(obj)


_DECODERS = {
    "Variable": lambda dct: Variable(dct["name"]),
    "Constant": lambda dct: Constant(dct["name"]),
    "Tuple": lambda dct: Tuple(dct["functor"], *dct["params"]),
    "Literal": lambda dct: Literal(dct["predicate"], dct["polarity"]),
    "Clause": lambda dct: Clause(*dct["literals"]),
    "Problem": lambda dct: Problem(*dct["clauses"], queries=dct.get("queries", ())),
}


def decode_core_object(dct: Dict[str, Any]) -> Any:
    """``object_hook`` turning tagged dictionaries back into core objects."""
    decoder = _DECODERS.get(dct.get("_type"))
    if decoder is None:
        return dct
    return decoder(dct)


def problem_to_json(problem: Problem, indent: int = 2) -> str:
    return json.dumps(problem, cls=CoreJSONEncoder, indent=indent)


def problem_from_json(text: str) -> Problem:
    problem = json.loads(text, object_hook=decode_core_object)
    if not isinstance(problem, Problem):
        raise ValueError("JSON document does not describe a Problem")
    return problem


def save_problem(problem: Problem, file_path: Union[str, Path]) -> None:
    Path(file_path).write_text(problem_to_json(problem))


def load_problem(file_path: Union[str, Path]) -> Problem:
    return problem_from_json(Path(file_path).read_text())
