from __future__ import annotations

import json
import logging
import subprocess
import tempfile
from pathlib import Path

from .codec import CodecError, program_from_obj
from .errors import ScanError
from .nodes import Program
from .toolchain import go_executable, scan_scratch_root

logger = logging.getLogger(__name__)


def scan_program(*, source_dir: Path) -> Program:
    """Parse every Go file in `source_dir` into a program tree.

    Parsing is done by `go/parser` in a small helper run with `go run`, which
    prints the top-level scope of each file as JSON.
    """
    source_dir = Path(source_dir).resolve()
    if not source_dir.is_dir():
        raise ScanError(f"source directory not found: {source_dir}")

    root = scan_scratch_root()
    root.mkdir(parents=True, exist_ok=True)
    with tempfile.TemporaryDirectory(prefix="gointerfacefunc-goscan-", dir=str(root)) as td:
        scan_dir = Path(td)
        (scan_dir / "go.mod").write_text(
            "\n".join(
                [
                    "module gointerfacefunc.goscan",
                    "",
                    "go 1.22",
                    "",
                ]
            ),
            encoding="utf-8",
        )
        (scan_dir / "main.go").write_text(_scanner_go_source(), encoding="utf-8")

        go = go_executable()
        cmd = [go, "run", ".", "--dir", str(source_dir)]
        logger.debug("running %s in %s", " ".join(cmd), scan_dir)
        try:
            proc = subprocess.run(
                cmd,
                cwd=str(scan_dir),
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise ScanError(
                f"Go toolchain not found (`{go}` is missing from PATH). "
                "Install Go, or set GOINTERFACEFUNC_GO to the go executable. "
                "A program snapshot can be used instead with --snapshot."
            ) from e
        if proc.returncode != 0:
            raise ScanError(f"go scan failed for {source_dir}\n{proc.stderr}{proc.stdout}")

    try:
        obj = json.loads(proc.stdout)
    except Exception as e:  # noqa: BLE001
        raise ScanError(f"failed to parse go scan output: {e}\n{proc.stdout}") from e
    try:
        program = program_from_obj(obj)
    except CodecError as e:
        raise ScanError(f"unexpected go scan output: {e}") from e

    logger.debug(
        "scanned %d package(s), %d file(s) in %s",
        len(program),
        sum(len(pkg.files) for pkg in program.values()),
        source_dir,
    )
    return program


def _scanner_go_source() -> str:
    # Keep this file stdlib-only so `go run` doesn't need network access.
    return r'''
package main

import (
	"bytes"
	"encoding/json"
	"flag"
	"fmt"
	"go/ast"
	"go/parser"
	"go/printer"
	"go/token"
	"os"
)

func main() {
	var dir string
	flag.StringVar(&dir, "dir", "", "directory of Go source files to scan")
	flag.Parse()

	if dir == "" {
		fmt.Fprintln(os.Stderr, "missing --dir")
		os.Exit(2)
	}

	fset := token.NewFileSet()
	pkgs, err := parser.ParseDir(fset, dir, nil, 0)
	if err != nil {
		fmt.Fprintf(os.Stderr, "parse: %v\n", err)
		os.Exit(1)
	}

	packages := map[string]any{}
	for pkgName, pkg := range pkgs {
		files := map[string]any{}
		for fileName, file := range pkg.Files {
			objects := map[string]any{}
			for name, obj := range file.Scope.Objects {
				kind := objKind(obj.Kind)
				if kind == "" {
					continue
				}
				item := map[string]any{"kind": kind}
				if ts, ok := obj.Decl.(*ast.TypeSpec); ok && kind == "type" {
					decl := map[string]any{
						"name":        ts.Name.Name,
						"type":        encodeExpr(fset, ts.Type),
						"type_params": nil,
					}
					if ts.TypeParams != nil {
						decl["type_params"] = encodeFields(fset, ts.TypeParams)
					}
					item["decl"] = decl
				}
				objects[name] = item
			}
			files[fileName] = map[string]any{"objects": objects}
		}
		packages[pkgName] = map[string]any{"files": files}
	}

	enc := json.NewEncoder(os.Stdout)
	enc.SetEscapeHTML(false)
	if err := enc.Encode(map[string]any{"packages": packages}); err != nil {
		fmt.Fprintf(os.Stderr, "encode: %v\n", err)
		os.Exit(1)
	}
}

func objKind(k ast.ObjKind) string {
	switch k {
	case ast.Typ:
		return "type"
	case ast.Fun:
		return "func"
	case ast.Var:
		return "var"
	case ast.Con:
		return "const"
	}
	return ""
}

func encodeFields(fset *token.FileSet, fl *ast.FieldList) []any {
	out := []any{}
	if fl == nil {
		return out
	}
	for _, f := range fl.List {
		names := []string{}
		for _, n := range f.Names {
			names = append(names, n.Name)
		}
		out = append(out, map[string]any{"names": names, "type": encodeExpr(fset, f.Type)})
	}
	return out
}

func encodeExpr(fset *token.FileSet, e ast.Expr) map[string]any {
	switch t := e.(type) {
	case *ast.Ident:
		return map[string]any{"node": "Ident", "name": t.Name}
	case *ast.ArrayType:
		var length any
		if t.Len != nil {
			length = render(fset, t.Len)
		}
		return map[string]any{"node": "ArrayType", "elt": encodeExpr(fset, t.Elt), "len": length}
	case *ast.MapType:
		return map[string]any{"node": "MapType", "key": encodeExpr(fset, t.Key), "value": encodeExpr(fset, t.Value)}
	case *ast.StarExpr:
		return map[string]any{"node": "StarExpr", "x": encodeExpr(fset, t.X)}
	case *ast.SelectorExpr:
		return map[string]any{"node": "SelectorExpr", "x": encodeExpr(fset, t.X), "sel": t.Sel.Name}
	case *ast.Ellipsis:
		return map[string]any{"node": "Ellipsis", "elt": encodeExpr(fset, t.Elt)}
	case *ast.FuncType:
		var results any
		if t.Results != nil {
			results = encodeFields(fset, t.Results)
		}
		return map[string]any{"node": "FuncType", "params": encodeFields(fset, t.Params), "results": results}
	case *ast.InterfaceType:
		return map[string]any{"node": "InterfaceType", "methods": encodeFields(fset, t.Methods)}
	default:
		return map[string]any{"node": "Raw", "text": render(fset, e)}
	}
}

func render(fset *token.FileSet, n ast.Node) string {
	var buf bytes.Buffer
	if err := printer.Fprint(&buf, fset, n); err != nil {
		return ""
	}
	return buf.String()
}
'''
