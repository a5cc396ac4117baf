"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional


def main(argv: Optional[list[str]] = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(
        prog="listing-converter",
        description="Convert product spreadsheets into marketplace registration requests",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # convert
    convert_parser = subparsers.add_parser("convert", help="Convert spreadsheet rows")
    convert_parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Upload file (.csv or .xlsx, header on row 1)",
    )
    convert_parser.add_argument(
        "--sheet",
        type=str,
        default=None,
        help="Worksheet name for .xlsx input (default: first sheet)",
    )
    convert_parser.add_argument(
        "--categories",
        type=Path,
        default=None,
        help="Category path -> id map (YAML) or category tree export (JSON). Without it only numeric ids resolve.",
    )
    convert_parser.add_argument(
        "--origin-codes",
        type=Path,
        default=None,
        help="Origin name -> origin code map (YAML)",
    )
    convert_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Converter settings YAML",
    )
    convert_parser.add_argument(
        "--payload",
        action="store_true",
        help="Emit marketplace registration bodies instead of normalized requests",
    )
    convert_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write JSON result to file (default: stdout)",
    )
    convert_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Debug logging",
    )

    args = parser.parse_args(argv)

    if args.command == "convert":
        _run_convert(args)
    else:
        parser.print_help()


def _load_categories(path: Optional[Path]):
    from listing_converter.categories import CategoryIndex

    if path is None:
        return CategoryIndex({})
    if path.suffix.lower() == ".json":
        data = json.loads(path.read_text(encoding="utf-8"))
        return CategoryIndex.from_category_tree(data if isinstance(data, list) else [data])
    return CategoryIndex.from_yaml(path)


def _run_convert(args: argparse.Namespace) -> None:
    """Run convert command. Every row is converted independently; failures are collected."""
    from listing_converter.config import ConverterSettings
    from listing_converter.converter import RowConverter
    from listing_converter.errors import ValidationError
    from listing_converter.payload import build_registration_payload
    from listing_converter.readers import read_rows
    from listing_converter.synthesis import OriginCodeTable

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.input.exists():
        raise SystemExit(f"Input file not found: {args.input}")

    settings = ConverterSettings.from_yaml(args.config) if args.config else ConverterSettings()
    origin_codes = OriginCodeTable.from_yaml(args.origin_codes) if args.origin_codes else None
    converter = RowConverter(
        resolver=_load_categories(args.categories),
        settings=settings,
        origin_codes=origin_codes,
    )

    try:
        rows = read_rows(args.input, args.sheet)
    except ValueError as e:
        raise SystemExit(str(e))

    converted = []
    errors = []
    for row in rows:
        try:
            request = converter.convert(row)
        except ValidationError as e:
            errors.append(e.to_dict())
            continue
        if args.payload:
            converted.append(build_registration_payload(request, settings))
        else:
            converted.append(request.model_dump(mode="json"))

    output = json.dumps(
        {"converted": converted, "errors": errors},
        indent=2,
        ensure_ascii=False,
        default=str,
    )

    if args.output:
        args.output.write_text(output, encoding="utf-8")
        print(f"Converted {len(converted)} of {len(rows)} rows (wrote to {args.output})")
    else:
        print(output)

    if errors:
        print(f"{len(errors)} row(s) failed", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
