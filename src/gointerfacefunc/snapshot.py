"""MessagePack program snapshots.

A snapshot stores a scanned program so generation can run later, or on a
machine without a Go toolchain.
"""

from __future__ import annotations

from pathlib import Path

import msgpack

from .codec import CodecError, program_from_obj, program_to_obj
from .errors import SnapshotDecodeError
from .nodes import Program

SNAPSHOT_FORMAT = 0


def dump_program(program: Program) -> bytes:
    payload = {
        "format": SNAPSHOT_FORMAT,
        "program": program_to_obj(program),
    }
    return msgpack.packb(payload, use_bin_type=True)


def load_program(payload: bytes) -> Program:
    try:
        obj = msgpack.unpackb(payload, raw=False)
    except Exception as e:  # noqa: BLE001 - boundary decoding error
        raise SnapshotDecodeError(str(e)) from e

    if not isinstance(obj, dict) or "program" not in obj:
        raise SnapshotDecodeError("invalid snapshot envelope")
    fmt = obj.get("format")
    if fmt != SNAPSHOT_FORMAT:
        raise SnapshotDecodeError(f"unsupported snapshot format {fmt!r} (expected {SNAPSHOT_FORMAT})")

    try:
        return program_from_obj(obj["program"])
    except CodecError as e:
        raise SnapshotDecodeError(f"invalid snapshot program: {e}") from e


def write_snapshot(program: Program, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(dump_program(program))


def read_snapshot(path: Path) -> Program:
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SnapshotDecodeError(f"cannot read snapshot {path}: {e}") from e
    return load_program(data)
