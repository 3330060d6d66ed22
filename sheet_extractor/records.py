#!/usr/bin/env python3
"""
Turn a row grid into header-keyed records.

Row 0 supplies the keys, every following non-blank row becomes one dict.
Blank header cells, and data columns past the last header cell, are keyed
__EMPTY, __EMPTY_1, ... and repeated header names get a numeric suffix
(Name, Name_1, ...).
"""

from typing import Any, Dict, List, Sequence

EMPTY_KEY = "__EMPTY"


class _Omit:
	def __repr__(self) -> str:
		return "OMIT"


# Sentinel default: leave empty cells out of the record entirely
OMIT = _Omit()


def header_keys(header: Sequence[Any], width: int) -> List[str]:
	"""
	Keys for the first `width` columns. Header cells are keyed by str(value),
	so a True header becomes "True" (not Excel's "TRUE") and an empty-string
	header is treated as blank (__EMPTY).
	"""
	keys: List[str] = []
	taken = set()
	for idx in range(max(width, len(header))):
		value = header[idx] if idx < len(header) else None
		base = EMPTY_KEY if value is None or value == "" else str(value)
		key = base
		n = 0
		while key in taken:
			n += 1
			key = f"{base}_{n}"
		taken.add(key)
		keys.append(key)
	return keys


def rows_to_records(rows: Sequence[Sequence[Any]], default: Any = OMIT) -> List[Dict[str, Any]]:
	"""
	Build one record per data row.

	Args:
		rows: row grid, header first
		default: value for empty cells; with the OMIT sentinel empty cells are
			left out of the record

	Returns:
		List of dicts in sheet order; [] when there is no data row
	"""
	if len(rows) <= 1:
		return []
	width = max(len(row) for row in rows)
	keys = header_keys(rows[0], width)
	records: List[Dict[str, Any]] = []
	for row in rows[1:]:
		if all(v is None for v in row):
			continue
		record: Dict[str, Any] = {}
		for idx, key in enumerate(keys):
			value = row[idx] if idx < len(row) else None
			if value is None:
				if default is OMIT:
					continue
				value = default
			record[key] = value
		records.append(record)
	return records
