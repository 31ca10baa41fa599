"""Text report rendering for documentation node trees."""

from __future__ import annotations

import io
from collections.abc import Sequence
from typing import TextIO

from docprint import display
from docprint.colors import Styler, indent
from docprint.models import (
    ClassDoc,
    DocNode,
    EnumDoc,
    FunctionDoc,
    InterfaceDoc,
    NamespaceDoc,
    TypeAliasDoc,
    VariableDoc,
)
from docprint.ordering import sort_nodes, visible_members


class WriteFailure(Exception):
    """The output sink rejected a write; the rendering pass was aborted."""


class _Output:
    """A sink bound to the styler of one rendering pass."""

    def __init__(self, sink: TextIO, styler: Styler) -> None:
        self.sink = sink
        self.styler = styler

    def write(self, text: str) -> None:
        try:
            self.sink.write(text)
        except (OSError, ValueError) as exc:
            raise WriteFailure(f"failed to write output: {exc}") from exc

    def line(self, depth: int = 0, text: str = "") -> None:
        """Write one line, indented to depth; an empty text gives a blank line."""
        if text:
            self.write(f"{indent(depth)}{text}\n")
        else:
            self.write("\n")

    def description(self, description: str | None, depth: int) -> None:
        """Write description lines; only ``\\n`` and ``\\r\\n`` break lines."""
        if not description:
            return
        lines = description.split("\n")
        if lines[-1] == "":
            lines.pop()
        for text in lines:
            text = text.removesuffix("\r")
            self.line(depth, self.styler.description(text))


class DocPrinter:
    """Renders documentation nodes as a human-readable text report.

    Args:
        doc_nodes: Root nodes in producer order.
        use_color: Wrap keywords, names, locations and descriptions in ANSI
            styles for the whole pass.
        include_private: Also render class members marked private.
    """

    def __init__(
        self,
        doc_nodes: Sequence[DocNode],
        *,
        use_color: bool = False,
        include_private: bool = False,
    ) -> None:
        self.doc_nodes = doc_nodes
        self.use_color = use_color
        self.include_private = include_private

    def format(self, sink: TextIO) -> None:
        """Write the full report to sink.

        Raises:
            WriteFailure: If the sink rejects a write. Output written before
                the failure is left in the sink.
        """
        out = _Output(sink, Styler(use_color=self.use_color))
        for node in sort_nodes(self.doc_nodes):
            loc = node.location
            out.write(
                out.styler.location(
                    f"Defined in {loc.filename}:{loc.line}:{loc.col}"
                )
            )
            out.write("\n\n")

            self._format_signature(out, node, 0)
            out.description(node.description, 1)
            out.line()

            if isinstance(node, ClassDoc):
                self._format_class(out, node)
            elif isinstance(node, EnumDoc):
                self._format_enum(out, node)
            elif isinstance(node, InterfaceDoc):
                self._format_interface(out, node)
            elif isinstance(node, NamespaceDoc):
                self._format_namespace(out, node)

    def render(self) -> str:
        """Render the report into a string."""
        buf = io.StringIO()
        self.format(buf)
        return buf.getvalue()

    def __str__(self) -> str:
        return self.render()

    # Signatures

    def _format_signature(self, out: _Output, node: DocNode, depth: int) -> None:
        # ModuleDoc and ImportDoc have no signature line.
        if isinstance(node, FunctionDoc):
            self._format_function_signature(out, node, depth)
        elif isinstance(node, VariableDoc):
            self._format_variable_signature(out, node, depth)
        elif isinstance(node, ClassDoc):
            self._format_class_signature(out, node, depth)
        elif isinstance(node, EnumDoc):
            out.line(depth, self._keyword_and_name(out, "enum", node.name))
        elif isinstance(node, InterfaceDoc):
            self._format_interface_signature(out, node, depth)
        elif isinstance(node, TypeAliasDoc):
            self._format_type_alias_signature(out, node, depth)
        elif isinstance(node, NamespaceDoc):
            out.line(depth, self._keyword_and_name(out, "namespace", node.name))

    @staticmethod
    def _keyword_and_name(out: _Output, keyword: str, name: str) -> str:
        return f"{out.styler.keyword(keyword)} {out.styler.name(name)}"

    def _format_function_signature(
        self, out: _Output, node: FunctionDoc, depth: int
    ) -> None:
        fn = node.function_def
        styler = out.styler
        prefix = f"{styler.keyword('async')} " if fn.is_async else ""
        generator = "*" if fn.is_generator else ""
        out.line(
            depth,
            f"{prefix}{styler.keyword('function')}{generator} "
            f"{styler.name(node.name)}{display.type_params(fn.type_params)}"
            f"{display.params(fn.params)}{display.optional_type(fn.return_type)}",
        )

    def _format_variable_signature(
        self, out: _Output, node: VariableDoc, depth: int
    ) -> None:
        var = node.variable_def
        header = self._keyword_and_name(out, var.kind.value, node.name)
        out.line(depth, f"{header}{display.optional_type(var.ts_type)}")

    def _format_class_signature(
        self, out: _Output, node: ClassDoc, depth: int
    ) -> None:
        class_def = node.class_def
        styler = out.styler
        for decorator in class_def.decorators:
            out.line(depth, display.format_decorator(decorator))

        text = self._keyword_and_name(out, "class", node.name)
        if class_def.is_abstract:
            text = f"{styler.keyword('abstract')} {text}"
        text += display.type_params(class_def.type_params)
        if class_def.extends:
            text += f" {styler.keyword('extends')} {class_def.extends}"
        text += display.type_params(class_def.super_type_params)
        if class_def.implements:
            text += (
                f" {styler.keyword('implements')} "
                f"{display.join(class_def.implements)}"
            )
        out.line(depth, text)

    def _format_interface_signature(
        self, out: _Output, node: InterfaceDoc, depth: int
    ) -> None:
        interface_def = node.interface_def
        text = self._keyword_and_name(out, "interface", node.name)
        text += display.type_params(interface_def.type_params)
        if interface_def.extends:
            text += (
                f" {out.styler.keyword('extends')} "
                f"{display.join(interface_def.extends)}"
            )
        out.line(depth, text)

    def _format_type_alias_signature(
        self, out: _Output, node: TypeAliasDoc, depth: int
    ) -> None:
        alias = node.type_alias_def
        text = self._keyword_and_name(out, "type", node.name)
        text += display.type_params(alias.type_params)
        out.line(depth, f"{text} = {alias.ts_type}")

    # Bodies

    def _format_class(self, out: _Output, node: ClassDoc) -> None:
        class_def = node.class_def
        styler = out.styler
        for ctor in class_def.constructors:
            out.line(1, display.format_constructor(ctor, styler))
            out.description(ctor.description, 2)
        for prop in visible_members(class_def.properties, self.include_private):
            for decorator in prop.decorators:
                out.line(1, display.format_decorator(decorator))
            out.line(1, display.format_class_property(prop, styler))
            out.description(prop.description, 2)
        for sig in class_def.index_signatures:
            out.line(1, display.format_index_signature(sig, styler))
        for method in visible_members(class_def.methods, self.include_private):
            for decorator in method.function_def.decorators:
                out.line(1, display.format_decorator(decorator))
            out.line(1, display.format_class_method(method, styler))
            out.description(method.description, 2)
        out.line()

    def _format_enum(self, out: _Output, node: EnumDoc) -> None:
        for member in node.enum_def.members:
            out.line(1, display.format_enum_member(member, out.styler))
            out.description(member.description, 2)
        out.line()

    def _format_interface(self, out: _Output, node: InterfaceDoc) -> None:
        interface_def = node.interface_def
        styler = out.styler
        for prop in interface_def.properties:
            out.line(1, display.format_interface_property(prop, styler))
            out.description(prop.description, 2)
        for method in interface_def.methods:
            out.line(1, display.format_interface_method(method, styler))
            out.description(method.description, 2)
        for sig in interface_def.index_signatures:
            out.line(1, display.format_index_signature(sig, styler))
        out.line()

    def _format_namespace(self, out: _Output, node: NamespaceDoc) -> None:
        # Nested composites get their signature only; members are not expanded.
        for element in sort_nodes(node.namespace_def.elements):
            self._format_signature(out, element, 1)
            out.description(element.description, 2)
        out.line()


def render(
    doc_nodes: Sequence[DocNode],
    *,
    use_color: bool = False,
    include_private: bool = False,
) -> str:
    """Render documentation nodes to a string.

    Args:
        doc_nodes: Root nodes in producer order.
        use_color: Enable ANSI styling.
        include_private: Include private class members.

    Returns:
        The complete text report.
    """
    printer = DocPrinter(
        doc_nodes, use_color=use_color, include_private=include_private
    )
    return printer.render()
