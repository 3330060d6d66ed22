#!/usr/bin/env python3
"""
Spreadsheet engines behind a common interface.

Each backend knows how to open a workbook, list its sheets, and turn one sheet
into a row grid or a list of records. Engines:
- openpyxl: .xlsx / .xlsm / .xltx / .xltm (default, cross-platform)
- xlrd: legacy binary .xls
- xlwings: drives a local Excel instance, any format Excel can open
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import xlrd
from openpyxl import load_workbook

from .records import OMIT, rows_to_records

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

ENGINES = ("openpyxl", "xlrd", "xlwings")


def _normalize_value(value: Any) -> Any:
	# Excel stores every number as a double; whole numbers read back as ints
	if isinstance(value, float) and value.is_integer():
		return int(value)
	return value


def trim_grid(grid: Sequence[Sequence[Any]]) -> List[List[Any]]:
	"""
	Cut a raw cell grid down to the sheet's used range.

	Leading empty rows and columns are removed so the grid starts at the top-left
	used cell, trailing empty cells are dropped from every row, and trailing blank
	rows are dropped. Blank rows between data rows are kept as [].
	"""
	rows: List[List[Any]] = []
	for raw in grid:
		row = list(raw)
		while row and row[-1] is None:
			row.pop()
		rows.append(row)
	while rows and not rows[-1]:
		rows.pop()
	while rows and not rows[0]:
		rows.pop(0)
	if not rows:
		return []
	first_col = min(
		next(i for i, v in enumerate(row) if v is not None)
		for row in rows if any(v is not None for v in row)
	)
	if first_col:
		rows = [row[first_col:] for row in rows]
	return rows


class SheetBackend(ABC):
	"""Base class for spreadsheet engines."""

	name = "base"

	@abstractmethod
	def open_workbook(self, file_path: PathLike) -> Any:
		...

	def close_workbook(self, workbook: Any) -> None:
		pass

	@abstractmethod
	def sheet_names(self, workbook: Any) -> List[str]:
		...

	@abstractmethod
	def _raw_grid(self, workbook: Any, sheet_index: int) -> List[List[Any]]:
		...

	def _check_sheet_index(self, sheet_index: int) -> None:
		# negative positions would wrap around to the last sheets
		if sheet_index < 0:
			raise IndexError(f"sheet index out of range: {sheet_index}")

	def sheet_to_rows(self, workbook: Any, sheet_index: int = 0) -> List[List[Any]]:
		self._check_sheet_index(sheet_index)
		rows = trim_grid(self._raw_grid(workbook, sheet_index))
		logger.debug("%s: sheet %d has %d rows", self.name, sheet_index, len(rows))
		return rows

	def sheet_to_records(self, workbook: Any, sheet_index: int = 0, default: Any = OMIT) -> List[Dict[str, Any]]:
		return rows_to_records(self.sheet_to_rows(workbook, sheet_index), default=default)


class OpenpyxlBackend(SheetBackend):
	"""Read .xlsx family workbooks with openpyxl."""

	name = "openpyxl"

	def open_workbook(self, file_path: PathLike) -> Any:
		# data_only=True returns the cached result of formula cells
		return load_workbook(filename=str(file_path), data_only=True)

	def close_workbook(self, workbook: Any) -> None:
		workbook.close()

	def sheet_names(self, workbook: Any) -> List[str]:
		return [ws.title for ws in workbook.worksheets]

	def _raw_grid(self, workbook: Any, sheet_index: int) -> List[List[Any]]:
		ws = workbook.worksheets[sheet_index]
		return [list(row) for row in ws.iter_rows(values_only=True)]


class XlrdBackend(SheetBackend):
	"""Read legacy .xls workbooks with xlrd."""

	name = "xlrd"

	def open_workbook(self, file_path: PathLike) -> Any:
		return xlrd.open_workbook(str(file_path), on_demand=True)

	def close_workbook(self, workbook: Any) -> None:
		workbook.release_resources()

	def sheet_names(self, workbook: Any) -> List[str]:
		return list(workbook.sheet_names())

	def _cell_value(self, cell, datemode: int) -> Any:
		if cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK):
			return None
		if cell.ctype == xlrd.XL_CELL_BOOLEAN:
			return bool(cell.value)
		if cell.ctype == xlrd.XL_CELL_DATE:
			return xlrd.xldate_as_datetime(cell.value, datemode)
		if cell.ctype == xlrd.XL_CELL_ERROR:
			return xlrd.error_text_from_code.get(cell.value)
		return _normalize_value(cell.value)

	def _raw_grid(self, workbook: Any, sheet_index: int) -> List[List[Any]]:
		sheet = workbook.sheet_by_index(sheet_index)
		return [
			[self._cell_value(cell, workbook.datemode) for cell in sheet.row(r)]
			for r in range(sheet.nrows)
		]


class _XlwingsWorkbook:
	def __init__(self, app, book):
		self.app = app
		self.book = book


class XlwingsBackend(SheetBackend):
	"""Read workbooks through a hidden Excel instance with xlwings."""

	name = "xlwings"

	def open_workbook(self, file_path: PathLike) -> Any:
		import xlwings as xw

		path = Path(file_path)
		if not path.exists():
			raise FileNotFoundError(f"Excel file not found: {file_path}")
		app = xw.App(visible=False, add_book=False)
		try:
			book = app.books.open(str(path))
		except Exception:
			app.quit()
			raise
		return _XlwingsWorkbook(app, book)

	def close_workbook(self, workbook: Any) -> None:
		try:
			workbook.book.close()
		finally:
			workbook.app.quit()

	def sheet_names(self, workbook: Any) -> List[str]:
		return [sheet.name for sheet in workbook.book.sheets]

	def _raw_grid(self, workbook: Any, sheet_index: int) -> List[List[Any]]:
		sheet = workbook.book.sheets[sheet_index]
		values = sheet.used_range.options(ndim=2).value or []
		return [[_normalize_value(v) for v in row] for row in values]


_BACKENDS = {
	"openpyxl": OpenpyxlBackend,
	"xlrd": XlrdBackend,
	"xlwings": XlwingsBackend,
}


def get_backend(file_path: PathLike, engine: Optional[str] = None) -> SheetBackend:
	"""
	Pick the engine for a workbook.

	An explicit engine name wins; otherwise .xls files go to xlrd and everything
	else to openpyxl.
	"""
	if engine is None:
		engine = "xlrd" if Path(file_path).suffix.lower() == ".xls" else "openpyxl"
	try:
		backend_cls = _BACKENDS[engine]
	except KeyError:
		raise ValueError(f"Unknown engine {engine!r}, expected one of {', '.join(ENGINES)}") from None
	return backend_cls()
