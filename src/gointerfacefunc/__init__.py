"""gointerfacefunc: generate function adapters for single-method Go interfaces."""

from __future__ import annotations

from . import errors
from .generate import generate
from .goscan import scan_program
from .printer import render_decls
from .snapshot import dump_program, load_program

__all__ = [
    "dump_program",
    "errors",
    "generate",
    "load_program",
    "render_decls",
    "scan_program",
]
