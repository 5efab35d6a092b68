"""
Excel Schema Code Generator

Entry point for the code generator script.
"""

import argparse
from pathlib import Path

from excel_schema_codegen import CodeGenerator


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate source files from entity sheets of a workbook."
    )
    parser.add_argument(
        "--workbook", type=Path, help="Workbook to read (default: from settings)"
    )
    parser.add_argument(
        "--output", type=Path, help="Output directory (default: from settings)"
    )
    parser.add_argument(
        "--sheet",
        action="append",
        dest="sheets",
        metavar="NAME",
        help="Sheet to generate; repeat for several (default: all parsable sheets)",
    )
    parser.add_argument(
        "--list", action="store_true", help="List the parsable sheets and exit"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """
    Entry point for the code generator script.

    Creates CodeGenerator instance and runs generation process.
    """
    args = parse_args(argv)
    generator = CodeGenerator(workbook_path=args.workbook, output_path=args.output)
    if args.list:
        for name in generator.list_sheets():
            print(name)
        return
    generator.run(args.sheets)


if __name__ == "__main__":
    main()
