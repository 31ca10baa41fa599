"""Build documentation node trees from JSON documents."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from docprint.models import (
    Accessibility,
    ClassConstructorDef,
    ClassDef,
    ClassDoc,
    ClassIndexSignatureDef,
    ClassMethodDef,
    ClassPropertyDef,
    DecoratorDef,
    DocNode,
    DocNodeKind,
    EnumDef,
    EnumDoc,
    EnumMemberDef,
    FunctionDef,
    FunctionDoc,
    ImportDoc,
    InterfaceDef,
    InterfaceDoc,
    InterfaceIndexSignatureDef,
    InterfaceMethodDef,
    InterfacePropertyDef,
    Location,
    MethodKind,
    ModuleDoc,
    NamespaceDef,
    NamespaceDoc,
    ParamDef,
    TypeAliasDef,
    TypeAliasDoc,
    VarDeclKind,
    VariableDef,
    VariableDoc,
)


class DocLoadError(ValueError):
    """A JSON document does not describe a documentation node tree."""


def load_doc_nodes(path: Path) -> list[DocNode]:
    """Read a JSON file holding an array of documentation nodes.

    Args:
        path: Path to the JSON document.

    Returns:
        The root nodes in document order.

    Raises:
        OSError: If the file cannot be read.
        DocLoadError: If the document is not a valid node array.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DocLoadError(f"{path}: not valid UTF-8: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocLoadError(f"{path}: invalid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise DocLoadError(f"{path}: expected a JSON array of nodes")
    return parse_doc_nodes(data)


def parse_doc_nodes(data: Iterable[dict[str, Any]]) -> list[DocNode]:
    """Convert decoded JSON objects into DocNodes, keeping their order."""
    return [_parse_node(item) for item in data]


def _parse_node(item: dict[str, Any]) -> DocNode:
    if not isinstance(item, dict):
        raise DocLoadError(f"expected a node object, got {type(item).__name__}")
    name = item.get("name", "<unnamed>")
    try:
        kind = DocNodeKind(item["kind"])
    except (KeyError, ValueError) as exc:
        raise DocLoadError(f"{name}: unknown node kind {item.get('kind')!r}") from exc

    try:
        loc = item["location"]
        common: dict[str, Any] = {
            "name": item["name"],
            "location": Location(
                filename=loc["filename"], line=loc["line"], col=loc["col"]
            ),
            "description": _description(item),
        }
        builder = _NODE_BUILDERS[kind]
        return builder(item, common)
    except DocLoadError:
        raise
    except KeyError as exc:
        raise DocLoadError(f"{name}: missing required key {exc}") from exc
    except ValueError as exc:
        raise DocLoadError(f"{name}: {exc}") from exc
    except (TypeError, AttributeError) as exc:
        raise DocLoadError(f"{name}: malformed node: {exc}") from exc


def _description(item: dict[str, Any]) -> str | None:
    """Read a description, accepting ``description`` or ``jsDoc.doc``."""
    if "description" in item:
        return item["description"]
    js_doc = item.get("jsDoc") or {}
    return js_doc.get("doc")


def _strings(item: dict[str, Any], key: str) -> tuple[str, ...]:
    return tuple(item.get(key, ()))


def _accessibility(item: dict[str, Any]) -> Accessibility:
    value = item.get("accessibility")
    return Accessibility(value) if value else Accessibility.PUBLIC


def _params(item: dict[str, Any], key: str = "params") -> tuple[ParamDef, ...]:
    return tuple(
        ParamDef(
            name=p["name"],
            ts_type=p.get("tsType"),
            optional=p.get("optional", False),
            rest=p.get("rest", False),
            default=p.get("default"),
        )
        for p in item.get(key, ())
    )


def _decorators(item: dict[str, Any]) -> tuple[DecoratorDef, ...]:
    return tuple(
        DecoratorDef(name=d["name"], args=_strings(d, "args"))
        for d in item.get("decorators", ())
    )


def _function_def(item: dict[str, Any]) -> FunctionDef:
    return FunctionDef(
        params=_params(item),
        return_type=item.get("returnType"),
        is_async=item.get("isAsync", False),
        is_generator=item.get("isGenerator", False),
        type_params=_strings(item, "typeParams"),
        decorators=_decorators(item),
    )


def _class_def(item: dict[str, Any]) -> ClassDef:
    return ClassDef(
        is_abstract=item.get("isAbstract", False),
        type_params=_strings(item, "typeParams"),
        extends=item.get("extends"),
        super_type_params=_strings(item, "superTypeParams"),
        implements=_strings(item, "implements"),
        decorators=_decorators(item),
        constructors=tuple(
            ClassConstructorDef(
                params=_params(c),
                accessibility=_accessibility(c),
                description=_description(c),
                name=c.get("name", "constructor"),
            )
            for c in item.get("constructors", ())
        ),
        properties=tuple(
            ClassPropertyDef(
                name=p["name"],
                ts_type=p.get("tsType"),
                readonly=p.get("readonly", False),
                is_static=p.get("isStatic", False),
                is_abstract=p.get("isAbstract", False),
                optional=p.get("optional", False),
                accessibility=_accessibility(p),
                decorators=_decorators(p),
                description=_description(p),
            )
            for p in item.get("properties", ())
        ),
        index_signatures=tuple(
            ClassIndexSignatureDef(
                params=_params(s),
                ts_type=s.get("tsType"),
                readonly=s.get("readonly", False),
            )
            for s in item.get("indexSignatures", ())
        ),
        methods=tuple(
            ClassMethodDef(
                name=m["name"],
                function_def=_function_def(m["functionDef"]),
                kind=MethodKind(m.get("kind", "method")),
                is_static=m.get("isStatic", False),
                is_abstract=m.get("isAbstract", False),
                optional=m.get("optional", False),
                accessibility=_accessibility(m),
                description=_description(m),
            )
            for m in item.get("methods", ())
        ),
    )


def _interface_def(item: dict[str, Any]) -> InterfaceDef:
    return InterfaceDef(
        type_params=_strings(item, "typeParams"),
        extends=_strings(item, "extends"),
        properties=tuple(
            InterfacePropertyDef(
                name=p["name"],
                ts_type=p.get("tsType"),
                readonly=p.get("readonly", False),
                optional=p.get("optional", False),
                description=_description(p),
            )
            for p in item.get("properties", ())
        ),
        methods=tuple(
            InterfaceMethodDef(
                name=m["name"],
                params=_params(m),
                return_type=m.get("returnType"),
                type_params=_strings(m, "typeParams"),
                optional=m.get("optional", False),
                description=_description(m),
            )
            for m in item.get("methods", ())
        ),
        index_signatures=tuple(
            InterfaceIndexSignatureDef(
                params=_params(s),
                ts_type=s.get("tsType"),
                readonly=s.get("readonly", False),
            )
            for s in item.get("indexSignatures", ())
        ),
    )


def _build_function(item: dict[str, Any], common: dict[str, Any]) -> DocNode:
    return FunctionDoc(function_def=_function_def(item["functionDef"]), **common)


def _build_variable(item: dict[str, Any], common: dict[str, Any]) -> DocNode:
    var = item["variableDef"]
    return VariableDoc(
        variable_def=VariableDef(
            kind=VarDeclKind(var["kind"]), ts_type=var.get("tsType")
        ),
        **common,
    )


def _build_class(item: dict[str, Any], common: dict[str, Any]) -> DocNode:
    return ClassDoc(class_def=_class_def(item["classDef"]), **common)


def _build_enum(item: dict[str, Any], common: dict[str, Any]) -> DocNode:
    members = tuple(
        EnumMemberDef(name=m["name"], description=_description(m))
        for m in item["enumDef"].get("members", ())
    )
    return EnumDoc(enum_def=EnumDef(members=members), **common)


def _build_interface(item: dict[str, Any], common: dict[str, Any]) -> DocNode:
    return InterfaceDoc(interface_def=_interface_def(item["interfaceDef"]), **common)


def _build_type_alias(item: dict[str, Any], common: dict[str, Any]) -> DocNode:
    alias = item["typeAliasDef"]
    return TypeAliasDoc(
        type_alias_def=TypeAliasDef(
            ts_type=alias["tsType"], type_params=_strings(alias, "typeParams")
        ),
        **common,
    )


def _build_namespace(item: dict[str, Any], common: dict[str, Any]) -> DocNode:
    elements = tuple(parse_doc_nodes(item["namespaceDef"].get("elements", ())))
    return NamespaceDoc(namespace_def=NamespaceDef(elements=elements), **common)


_NODE_BUILDERS: dict[
    DocNodeKind, Callable[[dict[str, Any], dict[str, Any]], DocNode]
] = {
    DocNodeKind.MODULE_DOC: lambda _item, common: ModuleDoc(**common),
    DocNodeKind.FUNCTION: _build_function,
    DocNodeKind.VARIABLE: _build_variable,
    DocNodeKind.CLASS: _build_class,
    DocNodeKind.ENUM: _build_enum,
    DocNodeKind.INTERFACE: _build_interface,
    DocNodeKind.TYPE_ALIAS: _build_type_alias,
    DocNodeKind.NAMESPACE: _build_namespace,
    DocNodeKind.IMPORT: lambda _item, common: ImportDoc(**common),
}
