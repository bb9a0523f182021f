from __future__ import annotations

import json
from pathlib import Path

import pytest

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def onepackage_program():
    from gointerfacefunc.codec import program_from_obj

    obj = json.loads((TESTDATA / "onepackage" / "program.json").read_text(encoding="utf-8"))
    return program_from_obj(obj)


@pytest.fixture
def testdata_dir() -> Path:
    return TESTDATA
