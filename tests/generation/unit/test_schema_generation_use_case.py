"""Schema generation use-case tests."""

from __future__ import annotations

import datetime
import enum
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated, Generic, TypedDict, TypeVar

import pytest
from function_schema_generator.configuration import GenerationSettings, RenderingSettings
from function_schema_generator.document_rendering import JsonDocumentRenderer, RenderStatus
from function_schema_generator.generation import (
    GenerationError,
    generate,
    generate_batch,
    generate_document,
    resolve_target,
)
from function_schema_generator.metadata_resolution import SchemaInfo, schema_info
from function_schema_generator.schema_building import CyclicTypeError


class EmptyClass:
    pass


@dataclass
class PrimitiveClass:
    an_int: Annotated[int, SchemaInfo(required=True, description="An integer field")]
    a_boolean: bool
    a_double: Annotated[float, SchemaInfo(required=True)]


class Status(enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass
class Address:
    street: Annotated[str, SchemaInfo(required=True)]
    city: str


@schema_info(name="complexFunction", additional_properties=True)
@dataclass
class ComplexClass:
    strings: list[str]
    matrix: list[list[str]]
    created: datetime.datetime
    status: Status
    address: Annotated[Address, SchemaInfo(description="Home address.")]
    labels: dict[str, str] = field(default_factory=dict)
    email: Annotated[
        str, SchemaInfo(name="customName", required=True, format="email")
    ] = ""


@dataclass
class Node:
    value: int
    children: list[Node] = field(default_factory=list)


T = TypeVar("T")


@dataclass
class Box(Generic[T]):
    label: str
    content: T


class Point(TypedDict):
    x: int
    y: int


@dataclass
class Holder:
    box: Box[int]
    words: Box[list[str]]
    point: Point


class _UnserializableRenderer(JsonDocumentRenderer):
    def render(self, document):  # type: ignore[no-untyped-def]
        return super().render({**document, "broken": object()})


def test_empty_class_document() -> None:
    assert generate_document(EmptyClass) == {
        "type": "function",
        "function": {
            "name": "EmptyClass",
            "description": "No description provided.",
            "strict": False,
            "parameters": {"type": "object", "properties": {}},
        },
    }


def test_primitive_class_document() -> None:
    parameters = generate_document(PrimitiveClass)["function"]["parameters"]

    assert parameters["properties"] == {
        "an_int": {"type": "integer", "description": "An integer field"},
        "a_boolean": {"type": "boolean"},
        "a_double": {"type": "number"},
    }
    assert parameters["required"] == ["an_int", "a_double"]
    assert "additionalProperties" not in parameters


def test_complex_class_document() -> None:
    document = generate_document(ComplexClass)
    function = document["function"]
    properties = function["parameters"]["properties"]

    assert function["name"] == "complexFunction"
    assert function["parameters"]["additionalProperties"] is True
    assert properties["strings"] == {"type": "array", "items": {"type": "string"}}
    assert properties["matrix"]["items"]["items"]["type"] == "string"
    assert properties["created"] == {"type": "datetime"}
    assert properties["status"] == {"type": "string", "enum": ["ACTIVE", "INACTIVE"]}
    assert properties["labels"] == {"type": "object"}
    assert properties["address"] == {
        "type": "object",
        "properties": {"street": {"type": "string"}, "city": {"type": "string"}},
        "required": ["street"],
        "description": "Home address.",
    }
    assert properties["customName"] == {"type": "string", "format": "email"}
    assert "email" not in properties
    assert function["parameters"]["required"] == ["customName"]


def test_parametrized_generic_field_emits_declared_fields() -> None:
    properties = generate_document(Holder)["function"]["parameters"]["properties"]

    assert properties["box"] == {
        "type": "object",
        "properties": {"label": {"type": "string"}, "content": {"type": "integer"}},
    }
    assert properties["words"]["properties"]["content"] == {
        "type": "array",
        "items": {"type": "string"},
    }


def test_typed_dict_field_matches_typed_dict_root() -> None:
    properties = generate_document(Holder)["function"]["parameters"]["properties"]

    assert properties["point"] == {
        "type": "object",
        "properties": {"x": {"type": "integer"}, "y": {"type": "integer"}},
    }
    assert properties["point"] == generate_document(Point)["function"]["parameters"]


def test_generate_returns_rendered_text() -> None:
    outcome = generate(PrimitiveClass)

    assert outcome.is_ok
    assert json.loads(outcome.text) == generate_document(PrimitiveClass)


def test_generate_reports_serialization_failure_as_distinct_outcome() -> None:
    outcome = generate(EmptyClass, renderer=_UnserializableRenderer())

    assert outcome.status is RenderStatus.SERIALIZATION_FAILED
    assert outcome.text == "{}"
    assert not outcome.is_ok


def test_cyclic_type_raises() -> None:
    with pytest.raises(CyclicTypeError, match="Node -> Node"):
        generate_document(Node)


def test_resolve_target_imports_module_attribute() -> None:
    assert resolve_target("datetime:datetime") is datetime.datetime


@pytest.mark.parametrize(
    ("reference", "message"),
    [
        ("datetime", "package.module:ClassName"),
        (":Thing", "package.module:ClassName"),
        ("no_such_module_anywhere:Thing", "Cannot import module"),
        ("datetime:NoSuchThing", "does not exist"),
    ],
)
def test_resolve_target_errors(reference: str, message: str) -> None:
    with pytest.raises(GenerationError, match=message):
        resolve_target(reference)


def _write_targets_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, name: str) -> None:
    (tmp_path / f"{name}.py").write_text(
        "from dataclasses import dataclass\n"
        "from typing import Annotated\n"
        "from function_schema_generator import SchemaInfo, schema_info\n"
        "\n"
        "@schema_info(name='lookupUser', strict=True)\n"
        "@dataclass\n"
        "class LookupUser:\n"
        "    email: Annotated[str, SchemaInfo(required=True)]\n"
        "\n"
        "@dataclass\n"
        "class Lookup:\n"
        "    query: str\n"
        "\n"
        "@schema_info(name='Lookup')\n"
        "class Renamed:\n"
        "    pass\n"
        "\n"
        "@dataclass\n"
        "class Loop:\n"
        "    again: 'Loop | None' = None\n",
        encoding="utf-8",
    )
    monkeypatch.syspath_prepend(str(tmp_path))


def _settings(tmp_path: Path, *targets: str) -> GenerationSettings:
    return GenerationSettings(
        path=tmp_path / "schema-generator.yaml",
        targets=targets,
        output_dir=tmp_path / "schemas",
        rendering=RenderingSettings(indent=None, ensure_ascii=False),
    )


def test_generate_batch_writes_one_file_per_target(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _write_targets_module(tmp_path, monkeypatch, "batch_targets_ok")

    outcome = generate_batch(
        _settings(tmp_path, "batch_targets_ok:LookupUser", "batch_targets_ok:Lookup")
    )

    assert [schema.function_name for schema in outcome.schemas] == ["lookupUser", "Lookup"]
    written = outcome.written_paths[0].read_text(encoding="utf-8")
    assert written.endswith("\n")
    assert json.loads(written)["function"]["strict"] is True
    assert "\n" not in written.rstrip("\n")


def test_generate_batch_rejects_duplicate_function_names(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _write_targets_module(tmp_path, monkeypatch, "batch_targets_dup")

    with pytest.raises(GenerationError, match="both produce function 'Lookup'"):
        generate_batch(
            _settings(tmp_path, "batch_targets_dup:Lookup", "batch_targets_dup:Renamed")
        )
    assert not (tmp_path / "schemas").exists()


def test_generate_batch_wraps_cyclic_targets(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _write_targets_module(tmp_path, monkeypatch, "batch_targets_cycle")

    with pytest.raises(GenerationError, match="batch_targets_cycle:Loop") as excinfo:
        generate_batch(_settings(tmp_path, "batch_targets_cycle:Loop"))
    assert isinstance(excinfo.value.__cause__, CyclicTypeError)
