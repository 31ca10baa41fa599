"""Sibling ordering and member visibility rules."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

from docprint.models import Accessibility, DocNode, DocNodeKind

KIND_ORDER: dict[DocNodeKind, int] = {
    DocNodeKind.MODULE_DOC: 0,
    DocNodeKind.FUNCTION: 1,
    DocNodeKind.VARIABLE: 2,
    DocNodeKind.CLASS: 3,
    DocNodeKind.ENUM: 4,
    DocNodeKind.INTERFACE: 5,
    DocNodeKind.TYPE_ALIAS: 6,
    DocNodeKind.NAMESPACE: 7,
    DocNodeKind.IMPORT: 8,
}


class _HasAccessibility(Protocol):
    @property
    def accessibility(self) -> Accessibility: ...


_M = TypeVar("_M", bound=_HasAccessibility)


def kind_order(kind: DocNodeKind) -> int:
    """Return the fixed presentation rank of a node kind."""
    return KIND_ORDER[kind]


def sort_nodes(nodes: Iterable[DocNode]) -> list[DocNode]:
    """Order sibling nodes by kind rank, then by name.

    The sort is stable: nodes sharing both rank and name (overloads, for
    example) keep the order in which they were supplied.

    Args:
        nodes: Sibling nodes from one group (the root list or one namespace).

    Returns:
        A new list in presentation order. The input is left untouched.
    """
    return sorted(nodes, key=lambda node: (kind_order(node.kind), node.name))


def is_visible(member: _HasAccessibility, include_private: bool) -> bool:
    """Check whether a class member should be rendered."""
    return include_private or member.accessibility != Accessibility.PRIVATE


def visible_members(members: Sequence[_M], include_private: bool) -> list[_M]:
    """Filter class properties or methods down to the ones to render.

    Args:
        members: Class properties or methods in declaration order.
        include_private: Keep members whose accessibility is private.

    Returns:
        The visible members, declaration order preserved.
    """
    return [m for m in members if is_visible(m, include_private)]
