"""Build the program text handed to the interpreter."""

from __future__ import annotations

import pydantic_core

from .errors import ParamsSerializationError

PARAMS_VAR = "$params"
"""Name of the variable that holds the parameters inside a script body."""

# Legal in JSON strings but not in JavaScript string literals before ES2019.
_LINE_TERMINATORS = {"\u2028": "\\u2028", "\u2029": "\\u2029"}

_PREAMBLE = "JSON.stringify((function(rv) { return rv === undefined ? null : rv; })((function() {\n"
_POSTAMBLE = "\n;return null;\n})()));\n"


def serialize_params(params: object) -> str:
    """Serialize *params* to a JSON literal that is also valid JavaScript source."""

    if params is None:
        return "{}"
    try:
        text = pydantic_core.to_json(params, by_alias=True).decode("utf-8")
    except (ValueError, TypeError) as exc:
        raise ParamsSerializationError(str(exc)) from exc
    for char, escape in _LINE_TERMINATORS.items():
        text = text.replace(char, escape)
    return text


def wrap_code(code: str, params: object = None) -> str:
    """Wrap *code* with the parameter binding and result capture.

    The body runs as a function so ``return`` works at its top level. Its
    return value is JSON encoded as the completion value of the program,
    which ``osascript`` prints to standard output. A body that returns
    nothing yields ``null``.
    """

    binding = f"var {PARAMS_VAR} = {serialize_params(params)};\n"
    return f"{binding}{_PREAMBLE}{code}{_POSTAMBLE}"
