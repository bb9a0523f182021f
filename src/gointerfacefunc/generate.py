from __future__ import annotations

import copy
import logging

from .lookup import ValidatedInterface, validate_interface
from .naming import deduplicate_names, infer_param_name
from .nodes import (
    CallExpr,
    Decl,
    ExprStmt,
    Field,
    FuncDecl,
    FuncType,
    GenDecl,
    Ident,
    Program,
    ReturnStmt,
    Stmt,
    TypeSpec,
    VariadicType,
)

logger = logging.getLogger(__name__)

RECEIVER_NAME = "fn"
FUNC_SUFFIX = "Func"

_BLANK = "_"


def generate(location: str, interface_name: str, program: Program) -> list[Decl]:
    """Generate a function type that implements the named interface.

    Returns `[GenDecl, FuncDecl]`: the `<Interface>Func` type declaration and
    the adapter method on it. Raises a `GoInterfaceFuncError` subclass when
    the name does not resolve to a supported interface; `location` is only
    used to qualify error messages.
    """
    iface = validate_interface(location, interface_name, program)
    decls: list[Decl] = [generate_func_type(iface), generate_adapter(iface)]
    logger.debug("generated %s for %s.%s", func_type_name(iface), location, interface_name)
    return decls


def func_type_name(iface: ValidatedInterface) -> str:
    return iface.spec.name + FUNC_SUFFIX


def generate_func_type(iface: ValidatedInterface) -> GenDecl:
    sig = iface.signature
    return GenDecl(
        specs=[
            TypeSpec(
                name=func_type_name(iface),
                type=FuncType(
                    params=copy.deepcopy(sig.params),
                    results=copy.deepcopy(sig.results),
                ),
            )
        ]
    )


def generate_adapter(iface: ValidatedInterface) -> FuncDecl:
    params = adapter_params(iface.signature)
    return FuncDecl(
        recv=Field(names=[RECEIVER_NAME], type=Ident(func_type_name(iface))),
        name=iface.method_name,
        type=FuncType(params=params, results=copy.deepcopy(iface.signature.results)),
        body=[adapter_body(params, has_results=bool(iface.signature.results))],
    )


def adapter_params(sig: FuncType) -> list[Field]:
    """Name every parameter, inferring names for unnamed or blank ones."""
    groups: list[list[str]] = []
    for f in sig.params:
        if not f.names:
            groups.append([infer_param_name(f.type)])
            continue
        groups.append([infer_param_name(f.type) if n == _BLANK else n for n in f.names])

    named = deduplicate_names(groups)
    return [
        Field(names=names, type=copy.deepcopy(f.type))
        for f, names in zip(sig.params, named, strict=True)
    ]


def adapter_body(params: list[Field], *, has_results: bool) -> Stmt:
    args = [Ident(name) for f in params for name in f.names]
    variadic = bool(params) and isinstance(params[-1].type, VariadicType)
    call = CallExpr(fun=Ident(RECEIVER_NAME), args=args, ellipsis=variadic)
    if has_results:
        return ReturnStmt(results=[call])
    return ExprStmt(x=call)
