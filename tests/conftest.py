"""Shared test fixtures for docprint."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from helpers import class_node, function_node, loc

from docprint.models import (
    Accessibility,
    ClassConstructorDef,
    ClassDoc,
    ClassIndexSignatureDef,
    ClassMethodDef,
    ClassPropertyDef,
    DecoratorDef,
    DocNode,
    EnumDef,
    EnumDoc,
    EnumMemberDef,
    FunctionDef,
    InterfaceDef,
    InterfaceDoc,
    InterfaceMethodDef,
    InterfacePropertyDef,
    NamespaceDef,
    NamespaceDoc,
    ParamDef,
    TypeAliasDef,
    TypeAliasDoc,
    VarDeclKind,
    VariableDef,
    VariableDoc,
)


@pytest.fixture()
def widget_class() -> ClassDoc:
    """A class exercising every member list, with public and private members."""
    return class_node(
        "Widget",
        location=loc(1, 1, "widget.ts"),
        description="A widget.",
        extends="Base",
        implements=("Drawable",),
        decorators=(DecoratorDef(name="component", args=('"x"',)),),
        constructors=(
            ClassConstructorDef(
                params=(ParamDef(name="name", ts_type="string"),),
                description="Create a widget.",
            ),
        ),
        properties=(
            ClassPropertyDef(
                name="size",
                ts_type="number",
                decorators=(DecoratorDef(name="observable"),),
                description="Current size.",
            ),
            ClassPropertyDef(
                name="secret",
                ts_type="string",
                accessibility=Accessibility.PRIVATE,
                decorators=(DecoratorDef(name="hidden"),),
            ),
        ),
        index_signatures=(
            ClassIndexSignatureDef(
                params=(ParamDef(name="key", ts_type="string"),),
                ts_type="unknown",
            ),
        ),
        methods=(
            ClassMethodDef(
                name="foo",
                function_def=FunctionDef(return_type="void"),
                description="Public method.",
            ),
            ClassMethodDef(
                name="bar",
                function_def=FunctionDef(
                    return_type="void",
                    decorators=(DecoratorDef(name="log"),),
                ),
                accessibility=Accessibility.PRIVATE,
            ),
        ),
    )


@pytest.fixture()
def mixed_nodes(widget_class: ClassDoc) -> list[DocNode]:
    """One node of every renderable kind, in deliberately unsorted order."""
    return [
        NamespaceDoc(
            name="util",
            location=loc(40),
            namespace_def=NamespaceDef(
                elements=(
                    function_node("helper", location=loc(41)),
                    VariableDoc(
                        name="VERSION",
                        location=loc(42),
                        description="Library version.",
                        variable_def=VariableDef(
                            kind=VarDeclKind.CONST, ts_type="string"
                        ),
                    ),
                ),
            ),
        ),
        TypeAliasDoc(
            name="Id",
            location=loc(30),
            type_alias_def=TypeAliasDef(ts_type="string | number"),
        ),
        InterfaceDoc(
            name="Drawable",
            location=loc(20),
            interface_def=InterfaceDef(
                properties=(
                    InterfacePropertyDef(
                        name="visible", ts_type="boolean", description="Shown."
                    ),
                ),
                methods=(InterfaceMethodDef(name="draw", return_type="void"),),
            ),
        ),
        EnumDoc(
            name="Color",
            location=loc(10),
            enum_def=EnumDef(
                members=(
                    EnumMemberDef(name="Red", description="Warm."),
                    EnumMemberDef(name="Blue"),
                )
            ),
        ),
        widget_class,
        function_node(
            "add",
            location=loc(3),
            description="Adds two numbers.",
            params=(
                ParamDef(name="a", ts_type="number"),
                ParamDef(name="b", ts_type="number"),
            ),
            return_type="number",
        ),
    ]


@pytest.fixture()
def sample_json(tmp_path: Path) -> Path:
    """A JSON document in the loader's camelCase node format."""
    doc = [
        {
            "kind": "class",
            "name": "Greeter",
            "location": {"filename": "greeter.ts", "line": 5, "col": 1},
            "jsDoc": {"doc": "Says hello."},
            "classDef": {
                "typeParams": ["T"],
                "properties": [
                    {"name": "greeting", "tsType": "string"},
                    {
                        "name": "token",
                        "tsType": "string",
                        "accessibility": "private",
                    },
                ],
                "methods": [
                    {
                        "name": "greet",
                        "functionDef": {
                            "params": [{"name": "who", "tsType": "T"}],
                            "returnType": "string",
                        },
                    },
                ],
            },
        },
        {
            "kind": "function",
            "name": "main",
            "location": {"filename": "greeter.ts", "line": 1, "col": 1},
            "description": "Entry point.",
            "functionDef": {"isAsync": True, "returnType": "Promise<void>"},
        },
    ]
    path = tmp_path / "doc.json"
    path.write_text(json.dumps(doc), encoding="utf-8")
    return path
