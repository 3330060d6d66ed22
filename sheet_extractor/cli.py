#!/usr/bin/env python3
"""
Command-line interface for the sheet_extractor package.
Usage:
  python -m sheet_extractor <excel_file> [options]
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from .backends import ENGINES
from .reader import (
	contents_as_json_from_excel,
	contents_from_excel,
	headers_from_excel,
	rows_from_excel,
	sheet_names_from_excel,
)

logger = logging.getLogger(__name__)

MODES = {
	"rows": rows_from_excel,
	"headers": headers_from_excel,
	"contents": contents_from_excel,
	"json": contents_as_json_from_excel,
}


def export_to_json(data: Any, output_file: str) -> None:
	with open(output_file, 'w', encoding='utf-8') as f:
		json.dump(data, f, indent=2, ensure_ascii=False, default=str)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description='Extract rows, headers or records from one sheet of an Excel workbook')
	parser.add_argument('excel_file', help='Path to Excel file')
	parser.add_argument('--sheet', '-s', type=int, default=0, help='Zero-based sheet index (default: 0)')
	parser.add_argument('--mode', '-m', choices=list(MODES), default='json',
				   help='What to extract (default: json)')
	parser.add_argument('--engine', choices=ENGINES, help='Backend engine to use (default: by file extension)')
	parser.add_argument('--output', '-o', help='Output file path (optional)')
	parser.add_argument('--list-sheets', action='store_true', help='Print the sheet names and exit')
	parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	args = build_parser().parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.INFO,
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)

	try:
		if args.list_sheets:
			for idx, name in enumerate(sheet_names_from_excel(args.excel_file, engine=args.engine)):
				print(f"{idx}\t{name}")
			return 0

		result = MODES[args.mode](args.excel_file, args.sheet, engine=args.engine)
		output_file = args.output or f"{Path(args.excel_file).stem}_{args.mode}.json"
		export_to_json(result, output_file)
	except Exception as e:
		logger.debug("Extraction failed", exc_info=True)
		print(f"Error: {e}", file=sys.stderr)
		return 1

	print("\nExtraction completed successfully!")
	print(f"Output file: {output_file}")
	return 0


if __name__ == "__main__":
	sys.exit(main())
