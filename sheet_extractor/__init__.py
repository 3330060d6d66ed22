from .reader import (
	contents_as_json_from_excel,
	contents_from_excel,
	headers_from_excel,
	rows_from_excel,
	sheet_names_from_excel,
)
from .records import OMIT, rows_to_records

__all__ = [
	"rows_from_excel",
	"headers_from_excel",
	"contents_from_excel",
	"contents_as_json_from_excel",
	"sheet_names_from_excel",
	"rows_to_records",
	"OMIT",
]

__version__ = "0.1.0"
