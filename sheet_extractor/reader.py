#!/usr/bin/env python3
"""
Read rows, headers, contents and JSON-style records from one sheet of an Excel workbook.

Every call opens the workbook, reads the sheet at sheet_index and closes the
workbook again; nothing is cached between calls. Errors raised by the
spreadsheet engine (missing file, corrupt workbook, sheet index out of range)
propagate unchanged.
"""

import logging
from typing import Any, Dict, List, Optional

from .backends import PathLike, get_backend
from .records import OMIT

logger = logging.getLogger(__name__)


def rows_from_excel(file_path: PathLike, sheet_index: int = 0, engine: Optional[str] = None) -> List[List[Any]]:
	"""
	Return every row of the sheet, each row as a list of cell values.

	Args:
		file_path: path of the Excel workbook
		sheet_index: zero-based position in the workbook's sheet list, defaults to 0
		engine: openpyxl, xlrd or xlwings; picked from the file extension when None

	Returns:
		[['col1 of row1', 'col2 of row1'], ['col1 of row2', 'col2 of row2']],
		or [] when the sheet holds no data
	"""
	backend = get_backend(file_path, engine)
	workbook = backend.open_workbook(file_path)
	logger.debug("Opened %s with %s", file_path, backend.name)
	try:
		rows = backend.sheet_to_rows(workbook, sheet_index)
	finally:
		backend.close_workbook(workbook)
	return rows


def headers_from_excel(file_path: PathLike, sheet_index: int = 0, engine: Optional[str] = None) -> List[Any]:
	"""Return the first row of the sheet, or [] for an empty sheet."""
	rows = rows_from_excel(file_path, sheet_index, engine=engine)
	if not rows:
		return []
	return rows[0]


def contents_from_excel(file_path: PathLike, sheet_index: int = 0, engine: Optional[str] = None) -> List[List[Any]]:
	"""Return every row after the header row, or [] when there is at most one row."""
	rows = rows_from_excel(file_path, sheet_index, engine=engine)
	# the first row is the header
	if len(rows) <= 1:
		return []
	return rows[1:]


def contents_as_json_from_excel(
	file_path: PathLike,
	sheet_index: int = 0,
	engine: Optional[str] = None,
	default: Any = OMIT,
) -> List[Dict[str, Any]]:
	"""
	Return the sheet's data rows as dicts keyed by the header row.

	Blank header cells and columns past the header are keyed __EMPTY, __EMPTY_1, ...;
	duplicate header names get _1, _2 suffixes. Blank rows are skipped.

	Args:
		file_path: path of the Excel workbook
		sheet_index: zero-based position in the workbook's sheet list, defaults to 0
		engine: openpyxl, xlrd or xlwings; picked from the file extension when None
		default: value for empty cells; by default empty cells are left out of the record

	Returns:
		[{'header1': 'value', 'header2': 'value'}, ...], or [] when the sheet
		is empty or has only a header row
	"""
	backend = get_backend(file_path, engine)
	workbook = backend.open_workbook(file_path)
	logger.debug("Opened %s with %s", file_path, backend.name)
	try:
		records = backend.sheet_to_records(workbook, sheet_index, default=default)
	finally:
		backend.close_workbook(workbook)
	return records


def sheet_names_from_excel(file_path: PathLike, engine: Optional[str] = None) -> List[str]:
	"""Return the workbook's sheet names in sheet-index order."""
	backend = get_backend(file_path, engine)
	workbook = backend.open_workbook(file_path)
	try:
		return backend.sheet_names(workbook)
	finally:
		backend.close_workbook(workbook)
