from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import NotAnInterfaceError, NotATypeError, NotFoundError, UnsupportedShapeError
from .nodes import Field, FuncType, InterfaceType, Object, Program, TypeSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidatedInterface:
    spec: TypeSpec
    method: Field
    signature: FuncType

    @property
    def method_name(self) -> str:
        return self.method.names[0]


def find_object(name: str, program: Program) -> tuple[str, str, Object] | None:
    """Return `(package, file, object)` for the first file scope binding `name`.

    Packages and files are visited in mapping order. Go allows one top-level
    declaration per name per package, so the first hit is the declaration.
    """
    for pkg_name, pkg in program.items():
        for file_name, file in pkg.files.items():
            obj = file.scope.get(name)
            if obj is not None:
                return pkg_name, file_name, obj
    return None


def validate_interface(location: str, name: str, program: Program) -> ValidatedInterface:
    if not name:
        raise ValueError("interface name must be a non-empty identifier")

    qualified = f"{location}.{name}"
    hit = find_object(name, program)
    if hit is None:
        raise NotFoundError(f"did not find {qualified}")
    pkg_name, file_name, obj = hit
    logger.debug("found %s in package %s (%s)", name, pkg_name, file_name)

    spec = obj.decl
    if obj.kind != "type" or not isinstance(spec, TypeSpec):
        raise NotATypeError(f"{qualified} is not a type")
    iface = spec.type
    if not isinstance(iface, InterfaceType):
        raise NotAnInterfaceError(f"{qualified} is not an interface")
    if spec.type_params:
        raise UnsupportedShapeError(f"{qualified} is generic; generic interfaces are not supported")
    if len(iface.methods) != 1:
        raise UnsupportedShapeError(
            f"{qualified} has more or less than 1 method (found {len(iface.methods)})"
        )
    method = iface.methods[0]
    if len(method.names) != 1:
        if not method.names:
            raise UnsupportedShapeError(f"{qualified} embeds an interface instead of declaring a method")
        raise UnsupportedShapeError(
            f"{qualified} declares {len(method.names)} method names sharing one signature"
        )
    if not isinstance(method.type, FuncType):
        raise UnsupportedShapeError(f"{qualified} method {method.names[0]} has no function signature")

    logger.debug("%s is a single-method interface (%s)", qualified, method.names[0])
    return ValidatedInterface(spec=spec, method=method, signature=method.type)
