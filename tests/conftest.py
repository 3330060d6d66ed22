"""
Pytest configuration and shared fixtures.
"""
from typing import Any, List, Sequence, Tuple

import pytest
from openpyxl import Workbook


def write_workbook(path, sheets: Sequence[Tuple[str, List[List[Any]]]]) -> str:
	"""Save an .xlsx with one sheet per (title, rows) pair, rows appended in order."""
	wb = Workbook()
	wb.remove(wb.active)
	for title, rows in sheets:
		ws = wb.create_sheet(title)
		for row in rows:
			ws.append(row)
	wb.save(str(path))
	return str(path)


@pytest.fixture
def people_xlsx(tmp_path):
	return write_workbook(
		tmp_path / "people.xlsx",
		[
			("People", [["Name", "Age"], ["Alice", "30"], ["Bob", "25"]]),
			("Cities", [["City"], ["Paris"], ["Oslo"], ["Lima"]]),
		],
	)


@pytest.fixture
def empty_xlsx(tmp_path):
	return write_workbook(tmp_path / "empty.xlsx", [("Empty", [])])


@pytest.fixture
def header_only_xlsx(tmp_path):
	return write_workbook(tmp_path / "header_only.xlsx", [("Header", [["A", "B"]])])
