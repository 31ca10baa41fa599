"""Node builders shared by the docprint tests."""

from __future__ import annotations

from docprint.models import ClassDef, ClassDoc, FunctionDef, FunctionDoc, Location


def loc(line: int = 1, col: int = 1, filename: str = "mod.ts") -> Location:
    """Build a Location with short defaults."""
    return Location(filename=filename, line=line, col=col)


def function_node(name: str, **kwargs: object) -> FunctionDoc:
    """Build a FunctionDoc with an empty signature unless overridden."""
    return FunctionDoc(
        name=name,
        location=kwargs.pop("location", loc()),  # type: ignore[arg-type]
        description=kwargs.pop("description", None),  # type: ignore[arg-type]
        function_def=FunctionDef(**kwargs),  # type: ignore[arg-type]
    )


def class_node(name: str, **kwargs: object) -> ClassDoc:
    """Build a ClassDoc with no members unless overridden."""
    return ClassDoc(
        name=name,
        location=kwargs.pop("location", loc()),  # type: ignore[arg-type]
        description=kwargs.pop("description", None),  # type: ignore[arg-type]
        class_def=ClassDef(**kwargs),  # type: ignore[arg-type]
    )
