from __future__ import annotations

import json
import sys
from subprocess import run as subprocess_run  # noqa: S404
from typing import TYPE_CHECKING

from formrules.schema_store import dumps_schema

if TYPE_CHECKING:
    from pathlib import Path


def test_cli_validate_flow(tmp_path: Path, agreement_schema) -> None:
    schema_path = tmp_path / "agreement.form.json"
    schema_path.write_text(dumps_schema(agreement_schema), encoding="utf-8")
    values_path = tmp_path / "values.json"
    values_path.write_text(json.dumps({"agree": True, "details": "Signed"}), encoding="utf-8")

    result = subprocess_run(  # noqa: S603
        [
            sys.executable,
            "-m",
            "formrules.cli",
            "validate",
            "--schema",
            str(schema_path),
            "--values",
            str(values_path),
        ],
        capture_output=True,
        text=True,
        check=False,
        cwd=tmp_path,
    )

    assert result.returncode == 0
    assert json.loads(result.stdout) == []
