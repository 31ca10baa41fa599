"""One-line formatting of class, interface and enum members."""

from __future__ import annotations

from collections.abc import Iterable

from docprint.colors import Styler
from docprint.models import (
    Accessibility,
    ClassConstructorDef,
    ClassIndexSignatureDef,
    ClassMethodDef,
    ClassPropertyDef,
    DecoratorDef,
    EnumMemberDef,
    InterfaceIndexSignatureDef,
    InterfaceMethodDef,
    InterfacePropertyDef,
    MethodKind,
    ParamDef,
)

_ACCESSOR_KEYWORDS: dict[MethodKind, str] = {
    MethodKind.GETTER: "get",
    MethodKind.SETTER: "set",
}


def join(items: Iterable[object], sep: str = ", ") -> str:
    """Join the string forms of items with a separator."""
    return sep.join(str(item) for item in items)


def type_params(params: Iterable[str]) -> str:
    """Format type parameters as ``<A, B>``, or nothing when there are none."""
    joined = join(params)
    return f"<{joined}>" if joined else ""


def params(items: Iterable[ParamDef]) -> str:
    """Format a parameter list including its parentheses."""
    return f"({join(items)})"


def optional_type(ts_type: str | None) -> str:
    """Format a ``: Type`` annotation suffix, or nothing when absent."""
    return f": {ts_type}" if ts_type else ""


def _modifiers(styler: Styler, *words: str | None) -> str:
    """Render present modifier keywords, each followed by a space."""
    return "".join(f"{styler.keyword(word)} " for word in words if word)


def _accessibility(accessibility: Accessibility) -> str | None:
    if accessibility == Accessibility.PUBLIC:
        return None
    return accessibility.value


def format_decorator(decorator: DecoratorDef) -> str:
    return str(decorator)


def format_constructor(ctor: ClassConstructorDef, styler: Styler) -> str:
    prefix = _modifiers(styler, _accessibility(ctor.accessibility))
    return f"{prefix}{styler.keyword(ctor.name)}{params(ctor.params)}"


def format_class_property(prop: ClassPropertyDef, styler: Styler) -> str:
    """Format e.g. ``private static readonly count?: number``."""
    prefix = _modifiers(
        styler,
        _accessibility(prop.accessibility),
        "static" if prop.is_static else None,
        "abstract" if prop.is_abstract else None,
        "readonly" if prop.readonly else None,
    )
    optional = "?" if prop.optional else ""
    return f"{prefix}{styler.name(prop.name)}{optional}{optional_type(prop.ts_type)}"


def format_class_method(method: ClassMethodDef, styler: Styler) -> str:
    """Format e.g. ``protected static async get *items<T>(x: T): T``."""
    fn = method.function_def
    prefix = _modifiers(
        styler,
        _accessibility(method.accessibility),
        "static" if method.is_static else None,
        "abstract" if method.is_abstract else None,
        "async" if fn.is_async else None,
        _ACCESSOR_KEYWORDS.get(method.kind),
    )
    generator = "*" if fn.is_generator else ""
    optional = "?" if method.optional else ""
    return (
        f"{prefix}{generator}{styler.name(method.name)}{optional}"
        f"{type_params(fn.type_params)}{params(fn.params)}"
        f"{optional_type(fn.return_type)}"
    )


def format_index_signature(
    sig: ClassIndexSignatureDef | InterfaceIndexSignatureDef, styler: Styler
) -> str:
    """Format e.g. ``readonly [key: string]: number``."""
    prefix = _modifiers(styler, "readonly" if sig.readonly else None)
    return f"{prefix}[{join(sig.params)}]{optional_type(sig.ts_type)}"


def format_interface_property(prop: InterfacePropertyDef, styler: Styler) -> str:
    prefix = _modifiers(styler, "readonly" if prop.readonly else None)
    optional = "?" if prop.optional else ""
    return f"{prefix}{styler.name(prop.name)}{optional}{optional_type(prop.ts_type)}"


def format_interface_method(method: InterfaceMethodDef, styler: Styler) -> str:
    optional = "?" if method.optional else ""
    return (
        f"{styler.name(method.name)}{optional}{type_params(method.type_params)}"
        f"{params(method.params)}{optional_type(method.return_type)}"
    )


def format_enum_member(member: EnumMemberDef, styler: Styler) -> str:
    return styler.name(member.name)
