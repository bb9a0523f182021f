from __future__ import annotations

import pytest

from gointerfacefunc.naming import deduplicate_names, infer_param_name, unexported
from gointerfacefunc.nodes import (
    ArrayType,
    FuncType,
    Ident,
    MapType,
    RawExpr,
    SelectorExpr,
    StarExpr,
    VariadicType,
)


@pytest.mark.parametrize(
    "typ,expected",
    [
        (ArrayType(elt=Ident("byte")), "bytes"),
        (ArrayType(elt=Ident("byte"), len="4"), "bytes"),
        (MapType(key=Ident("string"), value=Ident("Widget")), "widgets"),
        (StarExpr(x=Ident("Request")), "request"),
        (Ident("HTTPBody"), "httpBody"),
        (SelectorExpr(x=Ident("context"), sel="Context"), "ctx"),
        (SelectorExpr(x=Ident("http"), sel="Request"), "request"),
        (StarExpr(x=SelectorExpr(x=Ident("http"), sel="Request")), "request"),
        (ArrayType(elt=StarExpr(x=Ident("Widget"))), "widgets"),
        (MapType(key=Ident("Key"), value=ArrayType(elt=Ident("int"))), "intss"),
        (RawExpr("chan int"), "v"),
        (FuncType(params=[]), "v"),
        (VariadicType(elt=Ident("string")), "v"),
    ],
)
def test_infer_param_name(typ, expected):
    assert infer_param_name(typ) == expected


def test_context_rule_needs_both_package_and_type():
    assert infer_param_name(SelectorExpr(x=Ident("context"), sel="CancelFunc")) == "cancelFunc"
    assert infer_param_name(SelectorExpr(x=Ident("ctxpkg"), sel="Context")) == "context"


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Widget", "widget"),
        ("HTTPBody", "httpBody"),
        ("ID", "id"),
        ("URL", "url"),
        ("int", "int"),
        ("aB", "aB"),
        ("ABc", "aBc"),
        ("X", "x"),
        ("", ""),
    ],
)
def test_unexported(name, expected):
    assert unexported(name) == expected


def test_deduplicate_three_identical_names():
    assert deduplicate_names([["v"], ["v"], ["v"]]) == [["v1"], ["v2"], ["v3"]]


def test_deduplicate_keeps_unique_names():
    groups = [["a", "b"], ["ctx"]]
    assert deduplicate_names(groups) == [["a", "b"], ["ctx"]]


def test_deduplicate_does_not_mutate_input():
    groups = [["v"], ["v"]]
    deduplicate_names(groups)
    assert groups == [["v"], ["v"]]


def test_deduplicate_counts_names_within_one_field():
    assert deduplicate_names([["a", "a"], ["a"]]) == [["a1", "a2"], ["a3"]]


def test_deduplicate_resolves_collision_with_existing_suffix():
    out = deduplicate_names([["v"], ["v1"], ["v"]])
    flat = [n for names in out for n in names]
    assert len(set(flat)) == len(flat)
    assert out == [["v11"], ["v12"], ["v2"]]


def test_deduplicate_chain_of_suffixed_literals():
    out = deduplicate_names([["v"], ["v"], ["v1"], ["v11"]])
    flat = [n for names in out for n in names]
    assert len(set(flat)) == len(flat)


@pytest.mark.parametrize("n", [2, 5, 12, 40])
def test_deduplicate_many_identical_names_terminates_quickly(n):
    # One renaming pass plus one confirming pass.
    out = deduplicate_names([["v"]] * n, max_passes=2)
    assert [names[0] for names in out] == [f"v{i}" for i in range(1, n + 1)]


def test_deduplicate_raises_when_pass_cap_is_too_small():
    with pytest.raises(RuntimeError, match="did not converge"):
        deduplicate_names([["v"], ["v"]], max_passes=1)


def test_deduplicate_empty():
    assert deduplicate_names([]) == []
