"""Plain-object (dict/list/str) encoding of the program tree.

This is the shape the Go scanner prints as JSON and the shape snapshots
store as MessagePack. Expressions are tagged with a "node" key.
"""

from __future__ import annotations

from typing import Any

from .nodes import (
    OBJECT_KINDS,
    ArrayType,
    Expr,
    Field,
    File,
    FuncType,
    Ident,
    InterfaceType,
    MapType,
    Object,
    Package,
    Program,
    RawExpr,
    SelectorExpr,
    StarExpr,
    TypeSpec,
    VariadicType,
)


class CodecError(ValueError):
    """Raised when an encoded program does not have the expected shape."""


def expr_to_obj(e: Expr) -> dict[str, Any]:
    if isinstance(e, Ident):
        return {"node": "Ident", "name": e.name}
    if isinstance(e, ArrayType):
        return {"node": "ArrayType", "elt": expr_to_obj(e.elt), "len": e.len}
    if isinstance(e, MapType):
        return {"node": "MapType", "key": expr_to_obj(e.key), "value": expr_to_obj(e.value)}
    if isinstance(e, StarExpr):
        return {"node": "StarExpr", "x": expr_to_obj(e.x)}
    if isinstance(e, SelectorExpr):
        return {"node": "SelectorExpr", "x": expr_to_obj(e.x), "sel": e.sel}
    if isinstance(e, VariadicType):
        return {"node": "Ellipsis", "elt": expr_to_obj(e.elt)}
    if isinstance(e, FuncType):
        return {
            "node": "FuncType",
            "params": fields_to_obj(e.params),
            "results": None if e.results is None else fields_to_obj(e.results),
        }
    if isinstance(e, InterfaceType):
        return {"node": "InterfaceType", "methods": fields_to_obj(e.methods)}
    if isinstance(e, RawExpr):
        return {"node": "Raw", "text": e.text}
    raise CodecError(f"cannot encode expression {e!r}")


def fields_to_obj(fields: list[Field]) -> list[dict[str, Any]]:
    return [{"names": list(f.names), "type": expr_to_obj(f.type)} for f in fields]


def program_to_obj(program: Program) -> dict[str, Any]:
    packages: dict[str, Any] = {}
    for pkg_name, pkg in program.items():
        files: dict[str, Any] = {}
        for file_name, file in pkg.files.items():
            objects: dict[str, Any] = {}
            for name, obj in file.scope.items():
                item: dict[str, Any] = {"kind": obj.kind}
                if obj.decl is not None:
                    item["decl"] = {
                        "name": obj.decl.name,
                        "type": expr_to_obj(obj.decl.type),
                        "type_params": (
                            None if obj.decl.type_params is None else fields_to_obj(obj.decl.type_params)
                        ),
                    }
                objects[name] = item
            files[file_name] = {"objects": objects}
        packages[pkg_name] = {"files": files}
    return {"packages": packages}


def _require(obj: Any, key: str, typ: type) -> Any:
    if not isinstance(obj, dict):
        raise CodecError(f"expected object with {key!r}, got {type(obj).__name__}")
    v = obj.get(key)
    if not isinstance(v, typ):
        raise CodecError(f"{key!r} must be {typ.__name__}, got {type(v).__name__}")
    return v


def expr_from_obj(obj: Any) -> Expr:
    node = _require(obj, "node", str)
    if node == "Ident":
        return Ident(_require(obj, "name", str))
    if node == "ArrayType":
        length = obj.get("len")
        if length is not None and not isinstance(length, str):
            raise CodecError("'len' must be str or null")
        return ArrayType(elt=expr_from_obj(obj.get("elt")), len=length)
    if node == "MapType":
        return MapType(key=expr_from_obj(obj.get("key")), value=expr_from_obj(obj.get("value")))
    if node == "StarExpr":
        return StarExpr(x=expr_from_obj(obj.get("x")))
    if node == "SelectorExpr":
        return SelectorExpr(x=expr_from_obj(obj.get("x")), sel=_require(obj, "sel", str))
    if node == "Ellipsis":
        return VariadicType(elt=expr_from_obj(obj.get("elt")))
    if node == "FuncType":
        results = obj.get("results")
        return FuncType(
            params=fields_from_obj(obj.get("params")),
            results=None if results is None else fields_from_obj(results),
        )
    if node == "InterfaceType":
        return InterfaceType(methods=fields_from_obj(obj.get("methods")))
    if node == "Raw":
        return RawExpr(_require(obj, "text", str))
    raise CodecError(f"unknown node {node!r}")


def fields_from_obj(items: Any) -> list[Field]:
    if items is None:
        return []
    if not isinstance(items, list):
        raise CodecError(f"field list must be a list, got {type(items).__name__}")
    out: list[Field] = []
    for item in items:
        if not isinstance(item, dict):
            raise CodecError(f"field must be an object, got {type(item).__name__}")
        names = _require(item, "names", list) if item.get("names") is not None else []
        if not all(isinstance(n, str) for n in names):
            raise CodecError("field names must be strings")
        out.append(Field(names=list(names), type=expr_from_obj(item.get("type"))))
    return out


def program_from_obj(obj: Any) -> Program:
    packages = _require(obj, "packages", dict)
    program: Program = {}
    for pkg_name, pkg_obj in packages.items():
        files: dict[str, File] = {}
        for file_name, file_obj in _require(pkg_obj, "files", dict).items():
            scope: dict[str, Object] = {}
            for name, item in _require(file_obj, "objects", dict).items():
                kind = _require(item, "kind", str)
                if kind not in OBJECT_KINDS:
                    raise CodecError(f"unknown object kind {kind!r} for {name}")
                decl = None
                raw_decl = item.get("decl")
                if raw_decl is not None:
                    if not isinstance(raw_decl, dict):
                        raise CodecError(f"decl of {name} must be an object")
                    tp = raw_decl.get("type_params")
                    decl = TypeSpec(
                        name=_require(raw_decl, "name", str),
                        type=expr_from_obj(raw_decl.get("type")),
                        type_params=None if tp is None else fields_from_obj(tp),
                    )
                scope[name] = Object(kind=kind, name=name, decl=decl)
            files[file_name] = File(name=file_name, scope=scope)
        program[pkg_name] = Package(name=pkg_name, files=files)
    return program
