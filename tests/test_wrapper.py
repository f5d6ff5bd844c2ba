from __future__ import annotations

import json
from dataclasses import dataclass

import pytest
from pydantic import BaseModel, Field

from osajs.errors import FailureKind, ParamsSerializationError
from osajs.wrapper import PARAMS_VAR, serialize_params, wrap_code


def _bound_literal(program: str) -> str:
    first_line = program.splitlines()[0]
    prefix = f"var {PARAMS_VAR} = "
    assert first_line.startswith(prefix)
    assert first_line.endswith(";")
    return first_line[len(prefix) : -1]


def test_params_bound_as_json_literal() -> None:
    program = wrap_code("return $params.title;", {"title": "T", "buttons": ["A", "B"]})
    literal = _bound_literal(program)
    assert literal == '{"title":"T","buttons":["A","B"]}'
    assert json.loads(literal) == {"title": "T", "buttons": ["A", "B"]}


def test_body_embedded_verbatim_between_preamble_and_postamble() -> None:
    code = "  var x = 'a\\nb';\n  return x; // trailing comment"
    program = wrap_code(code, {})
    head, _, tail = program.partition(code)
    assert head.startswith("var $params = {};\n")
    assert "(function() {" in head
    assert tail.startswith("\n;return null;")
    assert "JSON.stringify" in head


def test_missing_params_bind_empty_object() -> None:
    assert _bound_literal(wrap_code("return 1;")) == "{}"


def test_model_params_use_aliases() -> None:
    class AlertParams(BaseModel):
        alert_type: str = Field(alias="as")
        buttons: list[str]

    literal = serialize_params(AlertParams(**{"as": "critical", "buttons": ["OK"]}))
    assert json.loads(literal) == {"as": "critical", "buttons": ["OK"]}


def test_dataclass_params() -> None:
    @dataclass
    class Point:
        x: int
        y: float

    assert json.loads(serialize_params(Point(1, 2.5))) == {"x": 1, "y": 2.5}


def test_line_separators_escaped() -> None:
    value = {"text": "a\u2028b\u2029c", "name": "café"}
    literal = serialize_params(value)
    assert "\u2028" not in literal
    assert "\u2029" not in literal
    assert json.loads(literal) == value


def test_cyclic_params_raise_serialization_error() -> None:
    cyclic: dict[str, object] = {}
    cyclic["self"] = cyclic
    with pytest.raises(ParamsSerializationError) as excinfo:
        wrap_code("return 1;", cyclic)
    assert excinfo.value.kind is FailureKind.SERIALIZATION


def test_unsupported_params_raise_serialization_error() -> None:
    class Opaque:
        pass

    with pytest.raises(ParamsSerializationError) as excinfo:
        wrap_code("return 1;", {"handle": Opaque()})
    assert str(excinfo.value).startswith("script json error: ")
