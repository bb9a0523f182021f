from __future__ import annotations

from gointerfacefunc.nodes import (
    ArrayType,
    Field,
    FuncType,
    GenDecl,
    Ident,
    InterfaceType,
    MapType,
    RawExpr,
    SelectorExpr,
    StarExpr,
    TypeSpec,
)
from gointerfacefunc.printer import render_decls, render_expr, render_signature


def test_render_type_expressions():
    assert render_expr(ArrayType(elt=Ident("byte"))) == "[]byte"
    assert render_expr(ArrayType(elt=Ident("byte"), len="16")) == "[16]byte"
    assert render_expr(MapType(key=Ident("string"), value=StarExpr(x=Ident("Widget")))) == "map[string]*Widget"
    assert render_expr(SelectorExpr(x=Ident("io"), sel="Reader")) == "io.Reader"
    assert render_expr(RawExpr("<-chan struct{}")) == "<-chan struct{}"
    assert render_expr(InterfaceType(methods=[])) == "interface{}"


def test_render_nested_func_type():
    cb = FuncType(params=[Field(names=[], type=Ident("error"))], results=None)
    assert render_expr(cb) == "func(error)"


def test_render_signature_results():
    no_results = FuncType(params=[Field(names=["a", "b"], type=Ident("int"))])
    assert render_signature(no_results) == "(a, b int)"

    single = FuncType(params=[], results=[Field(names=[], type=Ident("int"))])
    assert render_signature(single) == "() int"

    named_single = FuncType(params=[], results=[Field(names=["n"], type=Ident("int"))])
    assert render_signature(named_single) == "() (n int)"

    pair = FuncType(params=[], results=[Field(names=[], type=Ident("int")), Field(names=[], type=Ident("error"))])
    assert render_signature(pair) == "() (int, error)"


def test_render_decls_separates_with_blank_line():
    a = GenDecl(specs=[TypeSpec(name="A", type=Ident("int"))])
    b = GenDecl(specs=[TypeSpec(name="B", type=Ident("string"))])
    assert render_decls([a, b]) == "type A int\n\ntype B string\n"


def test_render_grouped_type_decl():
    decl = GenDecl(specs=[TypeSpec(name="A", type=Ident("int")), TypeSpec(name="B", type=Ident("string"))])
    assert render_decls([decl]) == "type (\n\tA int\n\tB string\n)\n"
