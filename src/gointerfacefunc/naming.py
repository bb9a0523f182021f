"""Parameter naming for generated adapters.

Interface methods often leave parameters unnamed (`Read([]byte) (int, error)`),
but the adapter has to forward them, so each one needs a local name. Names
are inferred from the parameter type and then renumbered until unique.
"""

from __future__ import annotations

from .nodes import ArrayType, Expr, Ident, MapType, SelectorExpr, StarExpr

# Used when the type shape gives no useful hint; the user is expected to
# rename these by hand if they care.
FALLBACK_NAME = "v"

_CONTEXT_PACKAGE = "context"
_CONTEXT_TYPE = "Context"
_CONTEXT_NAME = "ctx"


def infer_param_name(typ: Expr) -> str:
    if isinstance(typ, ArrayType):
        return infer_param_name(typ.elt) + "s"
    if isinstance(typ, MapType):
        return infer_param_name(typ.value) + "s"
    if isinstance(typ, StarExpr):
        return infer_param_name(typ.x)
    if isinstance(typ, Ident):
        return unexported(typ.name)
    if isinstance(typ, SelectorExpr):
        qualifier = typ.x.name if isinstance(typ.x, Ident) else None
        if qualifier == _CONTEXT_PACKAGE and typ.sel == _CONTEXT_TYPE:
            return _CONTEXT_NAME
        return unexported(typ.sel)
    return FALLBACK_NAME


def unexported(name: str) -> str:
    """Lower-case the leading capital run of a type name.

    `Widget` -> `widget`, `HTTPBody` -> `httpBody`, `ID` -> `id`. The last
    capital of a run followed by a lower-case letter starts the next word
    and is kept.
    """
    prev = 0
    for pos, char in enumerate(name):
        if char.islower():
            if prev == 0:
                return name[:pos].lower() + name[pos:]
            return name[:prev].lower() + name[prev:]
        prev = pos
    return name.lower()


def deduplicate_names(groups: list[list[str]], *, max_passes: int | None = None) -> list[list[str]]:
    """Renumber duplicate names until every name is unique.

    `groups` holds the names bound by each field, in declaration order. On
    a name's second occurrence the first one is suffixed with "1" and the
    current one with "2"; later occurrences get their occurrence count.
    Renumbering can collide with names already present (`v`, `v`, `v1`), so
    passes repeat until one makes no change.

    Returns new lists; the input is left untouched.
    """
    out = [list(names) for names in groups]
    total = sum(len(names) for names in out)
    if max_passes is None:
        max_passes = 4 * (total + 1)

    for _ in range(max_passes):
        uniques: dict[str, tuple[int, int]] = {}
        occurrences: dict[str, int] = {}
        for i, names in enumerate(out):
            for j, name in enumerate(names):
                o = occurrences.get(name, 0) + 1
                occurrences[name] = o
                if o == 1:
                    uniques[name] = (i, j)
                elif o == 2:
                    fi, fj = uniques.pop(name)
                    out[fi][fj] += "1"
                    names[j] = name + str(o)
                else:
                    names[j] = name + str(o)
        if len(uniques) == total:
            return out

    raise RuntimeError(f"parameter names did not converge after {max_passes} passes: {out}")
