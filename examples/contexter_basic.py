from __future__ import annotations

from pathlib import Path

import gointerfacefunc


def main() -> None:
    # Requires a Go toolchain on PATH (or GOINTERFACEFUNC_GO) to parse the package.
    src = Path(__file__).resolve().parents[1] / "tests" / "testdata" / "onepackage"
    program = gointerfacefunc.scan_program(source_dir=src)

    # Snapshots let the same program be reused without re-parsing.
    snapshot = gointerfacefunc.dump_program(program)
    program = gointerfacefunc.load_program(snapshot)

    for name in ["Contexter", "Handler", "Lookuper"]:
        decls = gointerfacefunc.generate(str(src), name, program)
        print(gointerfacefunc.render_decls(decls))


if __name__ == "__main__":
    main()
