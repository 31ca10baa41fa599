"""Core data structures for docprint."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar


class DocNodeKind(enum.Enum):
    """The kind of declaration a documentation node describes."""

    MODULE_DOC = "moduleDoc"
    FUNCTION = "function"
    VARIABLE = "variable"
    CLASS = "class"
    ENUM = "enum"
    INTERFACE = "interface"
    TYPE_ALIAS = "typeAlias"
    NAMESPACE = "namespace"
    IMPORT = "import"


class Accessibility(enum.Enum):
    """Visibility modifier of a class member."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


class VarDeclKind(enum.Enum):
    """The keyword a variable was declared with."""

    CONST = "const"
    LET = "let"
    VAR = "var"


class MethodKind(enum.Enum):
    """Whether a class method is a plain method or an accessor."""

    METHOD = "method"
    GETTER = "getter"
    SETTER = "setter"


@dataclass(frozen=True)
class Location:
    """Position of a declaration in its source file (1-based)."""

    filename: str
    line: int
    col: int


@dataclass(frozen=True)
class ParamDef:
    """A single function or method parameter."""

    name: str
    ts_type: str | None = None
    optional: bool = False
    rest: bool = False
    default: str | None = None

    def __str__(self) -> str:
        text = f"...{self.name}" if self.rest else self.name
        if self.optional:
            text += "?"
        if self.ts_type:
            text += f": {self.ts_type}"
        if self.default is not None:
            text += f" = {self.default}"
        return text


@dataclass(frozen=True)
class DecoratorDef:
    """A decorator expression applied to a class or class member."""

    name: str
    args: tuple[str, ...] = ()

    def __str__(self) -> str:
        if not self.args:
            return f"@{self.name}"
        return f"@{self.name}({', '.join(self.args)})"


@dataclass(frozen=True)
class FunctionDef:
    """Signature details of a function or method."""

    params: tuple[ParamDef, ...] = ()
    return_type: str | None = None
    is_async: bool = False
    is_generator: bool = False
    type_params: tuple[str, ...] = ()
    decorators: tuple[DecoratorDef, ...] = ()


@dataclass(frozen=True)
class VariableDef:
    kind: VarDeclKind
    ts_type: str | None = None


@dataclass(frozen=True)
class ClassConstructorDef:
    params: tuple[ParamDef, ...] = ()
    accessibility: Accessibility = Accessibility.PUBLIC
    description: str | None = None
    name: str = "constructor"


@dataclass(frozen=True)
class ClassPropertyDef:
    name: str
    ts_type: str | None = None
    readonly: bool = False
    is_static: bool = False
    is_abstract: bool = False
    optional: bool = False
    accessibility: Accessibility = Accessibility.PUBLIC
    decorators: tuple[DecoratorDef, ...] = ()
    description: str | None = None


@dataclass(frozen=True)
class ClassIndexSignatureDef:
    params: tuple[ParamDef, ...]
    ts_type: str | None = None
    readonly: bool = False


@dataclass(frozen=True)
class ClassMethodDef:
    name: str
    function_def: FunctionDef
    kind: MethodKind = MethodKind.METHOD
    is_static: bool = False
    is_abstract: bool = False
    optional: bool = False
    accessibility: Accessibility = Accessibility.PUBLIC
    description: str | None = None


@dataclass(frozen=True)
class ClassDef:
    """Payload of a class declaration.

    Member tuples keep declaration order; they are never re-sorted.
    """

    is_abstract: bool = False
    type_params: tuple[str, ...] = ()
    extends: str | None = None
    super_type_params: tuple[str, ...] = ()
    implements: tuple[str, ...] = ()
    decorators: tuple[DecoratorDef, ...] = ()
    constructors: tuple[ClassConstructorDef, ...] = ()
    properties: tuple[ClassPropertyDef, ...] = ()
    index_signatures: tuple[ClassIndexSignatureDef, ...] = ()
    methods: tuple[ClassMethodDef, ...] = ()


@dataclass(frozen=True)
class EnumMemberDef:
    name: str
    description: str | None = None


@dataclass(frozen=True)
class EnumDef:
    members: tuple[EnumMemberDef, ...] = ()


@dataclass(frozen=True)
class InterfacePropertyDef:
    name: str
    ts_type: str | None = None
    readonly: bool = False
    optional: bool = False
    description: str | None = None


@dataclass(frozen=True)
class InterfaceMethodDef:
    name: str
    params: tuple[ParamDef, ...] = ()
    return_type: str | None = None
    type_params: tuple[str, ...] = ()
    optional: bool = False
    description: str | None = None


@dataclass(frozen=True)
class InterfaceIndexSignatureDef:
    params: tuple[ParamDef, ...]
    ts_type: str | None = None
    readonly: bool = False


@dataclass(frozen=True)
class InterfaceDef:
    type_params: tuple[str, ...] = ()
    extends: tuple[str, ...] = ()
    properties: tuple[InterfacePropertyDef, ...] = ()
    methods: tuple[InterfaceMethodDef, ...] = ()
    index_signatures: tuple[InterfaceIndexSignatureDef, ...] = ()


@dataclass(frozen=True)
class TypeAliasDef:
    ts_type: str
    type_params: tuple[str, ...] = ()


@dataclass(frozen=True)
class NamespaceDef:
    elements: tuple[DocNode, ...] = ()


@dataclass(frozen=True, kw_only=True)
class DocNode:
    """A single documented declaration.

    Each kind is a subclass carrying only that kind's payload, so a node
    can never hold a definition that disagrees with its kind.
    """

    kind: ClassVar[DocNodeKind]

    name: str
    location: Location
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class ModuleDoc(DocNode):
    kind: ClassVar[DocNodeKind] = DocNodeKind.MODULE_DOC


@dataclass(frozen=True, kw_only=True)
class FunctionDoc(DocNode):
    kind: ClassVar[DocNodeKind] = DocNodeKind.FUNCTION
    function_def: FunctionDef


@dataclass(frozen=True, kw_only=True)
class VariableDoc(DocNode):
    kind: ClassVar[DocNodeKind] = DocNodeKind.VARIABLE
    variable_def: VariableDef


@dataclass(frozen=True, kw_only=True)
class ClassDoc(DocNode):
    kind: ClassVar[DocNodeKind] = DocNodeKind.CLASS
    class_def: ClassDef


@dataclass(frozen=True, kw_only=True)
class EnumDoc(DocNode):
    kind: ClassVar[DocNodeKind] = DocNodeKind.ENUM
    enum_def: EnumDef


@dataclass(frozen=True, kw_only=True)
class InterfaceDoc(DocNode):
    kind: ClassVar[DocNodeKind] = DocNodeKind.INTERFACE
    interface_def: InterfaceDef


@dataclass(frozen=True, kw_only=True)
class TypeAliasDoc(DocNode):
    kind: ClassVar[DocNodeKind] = DocNodeKind.TYPE_ALIAS
    type_alias_def: TypeAliasDef


@dataclass(frozen=True, kw_only=True)
class NamespaceDoc(DocNode):
    kind: ClassVar[DocNodeKind] = DocNodeKind.NAMESPACE
    namespace_def: NamespaceDef


@dataclass(frozen=True, kw_only=True)
class ImportDoc(DocNode):
    kind: ClassVar[DocNodeKind] = DocNodeKind.IMPORT
