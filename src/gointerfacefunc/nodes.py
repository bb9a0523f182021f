"""Go syntax tree model.

Only the node shapes the generator inspects or produces are broken down;
everything else is carried as `RawExpr` with its printed source so it can
still be rendered. Nodes are frozen: the generator builds new nodes and
never mutates the tree it was given.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Ident:
    name: str


@dataclass(frozen=True)
class ArrayType:
    elt: "Expr"
    # None for slices, source text of the length expression for arrays.
    len: str | None = None


@dataclass(frozen=True)
class MapType:
    key: "Expr"
    value: "Expr"


@dataclass(frozen=True)
class StarExpr:
    x: "Expr"


@dataclass(frozen=True)
class SelectorExpr:
    x: "Expr"
    sel: str


@dataclass(frozen=True)
class VariadicType:
    elt: "Expr"


@dataclass(frozen=True)
class Field:
    names: list[str]
    type: "Expr"


@dataclass(frozen=True)
class FuncType:
    params: list[Field]
    # None means the signature has no result list at all.
    results: list[Field] | None = None


@dataclass(frozen=True)
class InterfaceType:
    methods: list[Field]


@dataclass(frozen=True)
class RawExpr:
    text: str


Expr = Union[Ident, ArrayType, MapType, StarExpr, SelectorExpr, VariadicType, FuncType, InterfaceType, RawExpr]


@dataclass(frozen=True)
class CallExpr:
    fun: Expr
    args: list[Expr]
    # True when the last argument is spread with `...`.
    ellipsis: bool = False


@dataclass(frozen=True)
class ReturnStmt:
    results: list[Expr]


@dataclass(frozen=True)
class ExprStmt:
    x: CallExpr


Stmt = Union[ReturnStmt, ExprStmt]


@dataclass(frozen=True)
class TypeSpec:
    name: str
    type: Expr
    type_params: list[Field] | None = None


@dataclass(frozen=True)
class GenDecl:
    """A `type` declaration."""

    specs: list[TypeSpec]


@dataclass(frozen=True)
class FuncDecl:
    recv: Field | None
    name: str
    type: FuncType
    body: list[Stmt]


Decl = Union[GenDecl, FuncDecl]


OBJECT_KINDS = ("type", "func", "var", "const")


@dataclass(frozen=True)
class Object:
    """A top-level name bound in a file scope.

    `decl` is only populated for type declarations; nothing else is inspected.
    """

    kind: str
    name: str
    decl: TypeSpec | None = None


@dataclass(frozen=True)
class File:
    name: str
    scope: dict[str, Object] = field(default_factory=dict)


@dataclass(frozen=True)
class Package:
    name: str
    files: dict[str, File] = field(default_factory=dict)


# package name -> package
Program = dict[str, Package]
