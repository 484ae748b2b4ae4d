"""CLI entry point for formrules."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from formrules import __version__, logger
from formrules.conditions import get_visible_fields
from formrules.exceptions import FormValuesError, PackageError
from formrules.logging import configure_logging
from formrules.schema_store import SchemaStore
from formrules.settings import get_settings
from formrules.validation import validate_form

if TYPE_CHECKING:
    from formrules.settings import Settings


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="formrules")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    visible_parser = subparsers.add_parser("visible", help="List the fields visible for given form values")
    validate_parser = subparsers.add_parser("validate", help="Validate form values against a schema")
    for sub in (visible_parser, validate_parser):
        sub.add_argument(
            "--schema",
            required=True,
            type=Path,
            dest="schema_path",
            help="Schema file; relative paths not found locally are read from SCHEMA_DIR",
        )
        sub.add_argument("--values", type=Path, default=None, dest="values_path")
        sub.add_argument("--output", type=Path, default=None, dest="output_path")

    validate_parser.add_argument(
        "--all-fields",
        action="store_true",
        dest="all_fields",
        help="Validate hidden fields too",
    )

    return parser


def _load_values(path: Path | None) -> dict[str, Any]:
    """Load form values from a JSON file.

    Args:
        path (Path | None): Values file, None for an empty form.

    Raises:
        FormValuesError: If the file is unreadable or not a JSON object.

    Returns:
        dict[str, Any]: Form values.
    """
    if path is None:
        return {}
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise FormValuesError(source=str(path), reason=str(exc)) from exc
    if not isinstance(payload, dict):
        raise FormValuesError(source=str(path), reason="expected a JSON object")
    return payload


def _emit(payload: object, output_path: Path | None) -> None:
    """Write a JSON result to a file or stdout.

    Args:
        payload (object): JSON-ready result.
        output_path (Path | None): Target file, stdout when None.
    """
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if output_path is None:
        sys.stdout.write(text + "\n")
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    logger.info("Result written", extra={"output_path": str(output_path)})


def _resolve_schema_path(path: Path, schema_dir: Path) -> Path:
    """Resolve a schema argument, falling back to the schema directory.

    Args:
        path (Path): `--schema` value.
        schema_dir (Path): Configured schema directory.

    Returns:
        Path: Path to load.
    """
    if path.is_absolute() or path.exists():
        return path
    return schema_dir / path


def _run(args: argparse.Namespace, settings: Settings) -> int:
    """Execute a parsed command.

    Args:
        args (argparse.Namespace): Parsed CLI args.
        settings (Settings): Runtime settings.

    Returns:
        int: Exit code.
    """
    schema = SchemaStore.load(_resolve_schema_path(args.schema_path, settings.schema_path))
    values = _load_values(args.values_path)
    visible = get_visible_fields(schema.fields, values)

    if args.command == "visible":
        _emit([field.id for field in visible], args.output_path)
        return 0

    fields = schema.fields if args.all_fields else visible
    errors = validate_form(fields, values)
    _emit([error.model_dump(by_alias=True) for error in errors], args.output_path)
    return 1 if errors else 0


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv (list[str] | None): Arguments, `sys.argv[1:]` when None.

    Returns:
        int: Exit code (0 for success, 1 for error or invalid values).
    """
    settings = get_settings()
    configure_logging(settings=settings)

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command not in {"visible", "validate"}:
        parser.print_help()
        return 0

    try:
        return _run(args, settings)
    except PackageError:
        logger.exception("Command failed", extra={"command": args.command})
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
