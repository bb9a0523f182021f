"""Render generated declarations as Go source, formatted like `go/printer`."""

from __future__ import annotations

from .nodes import (
    ArrayType,
    CallExpr,
    Decl,
    Expr,
    ExprStmt,
    Field,
    FuncDecl,
    FuncType,
    GenDecl,
    Ident,
    InterfaceType,
    MapType,
    RawExpr,
    ReturnStmt,
    SelectorExpr,
    StarExpr,
    Stmt,
    TypeSpec,
    VariadicType,
)

INDENT = "\t"


def render_expr(e: Expr | CallExpr) -> str:
    if isinstance(e, Ident):
        return e.name
    if isinstance(e, ArrayType):
        return f"[{e.len or ''}]{render_expr(e.elt)}"
    if isinstance(e, MapType):
        return f"map[{render_expr(e.key)}]{render_expr(e.value)}"
    if isinstance(e, StarExpr):
        return "*" + render_expr(e.x)
    if isinstance(e, SelectorExpr):
        return f"{render_expr(e.x)}.{e.sel}"
    if isinstance(e, VariadicType):
        return "..." + render_expr(e.elt)
    if isinstance(e, FuncType):
        return "func" + render_signature(e)
    if isinstance(e, InterfaceType):
        if not e.methods:
            return "interface{}"
        return "interface{ " + "; ".join(_render_method(m) for m in e.methods) + " }"
    if isinstance(e, RawExpr):
        return e.text
    if isinstance(e, CallExpr):
        args = ", ".join(render_expr(a) for a in e.args)
        if e.ellipsis:
            args += "..."
        return f"{render_expr(e.fun)}({args})"
    raise TypeError(f"cannot render {e!r}")


def _render_method(m: Field) -> str:
    if not m.names:
        # Embedded interface or type constraint element.
        return render_expr(m.type)
    if isinstance(m.type, FuncType):
        return m.names[0] + render_signature(m.type)
    return f"{', '.join(m.names)} {render_expr(m.type)}"


def render_fields(fields: list[Field]) -> str:
    parts: list[str] = []
    for f in fields:
        t = render_expr(f.type)
        parts.append(f"{', '.join(f.names)} {t}" if f.names else t)
    return ", ".join(parts)


def render_signature(ft: FuncType) -> str:
    out = f"({render_fields(ft.params)})"
    results = ft.results or []
    if not results:
        return out
    if len(results) == 1 and not results[0].names:
        return f"{out} {render_expr(results[0].type)}"
    return f"{out} ({render_fields(results)})"


def render_stmt(s: Stmt) -> str:
    if isinstance(s, ReturnStmt):
        if not s.results:
            return "return"
        return "return " + ", ".join(render_expr(r) for r in s.results)
    if isinstance(s, ExprStmt):
        return render_expr(s.x)
    raise TypeError(f"cannot render {s!r}")


def _render_type_spec(spec: TypeSpec) -> str:
    return f"{spec.name} {render_expr(spec.type)}"


def render_decl(decl: Decl) -> str:
    if isinstance(decl, GenDecl):
        if len(decl.specs) == 1:
            return "type " + _render_type_spec(decl.specs[0])
        lines = ["type ("]
        lines.extend(INDENT + _render_type_spec(s) for s in decl.specs)
        lines.append(")")
        return "\n".join(lines)
    if isinstance(decl, FuncDecl):
        head = "func "
        if decl.recv is not None:
            head += f"({render_fields([decl.recv])}) "
        head += decl.name + render_signature(decl.type)
        lines = [head + " {"]
        lines.extend(INDENT + render_stmt(s) for s in decl.body)
        lines.append("}")
        return "\n".join(lines)
    raise TypeError(f"cannot render {decl!r}")


def render_decls(decls: list[Decl]) -> str:
    """Render declarations separated by a blank line, ending in a newline."""
    return "\n\n".join(render_decl(d) for d in decls) + "\n"
