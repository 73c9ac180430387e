#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from pathlib import Path
import csv

#============================================


class HeaderReadError(Exception):
	"""
	Raised when a CSV file cannot be opened or its header row decoded.
	"""

	def __init__(self, path: Path, reason: str) -> None:
		super().__init__(f"Failed to read headers from {path}: {reason}")
		self.path = path
		self.reason = reason


#============================================


def read_headers(path: Path) -> set[str]:
	"""
	Read the first row of a CSV file as a lower-cased header set.

	Args:
		path: CSV file path.

	Returns:
		Set of header names; empty for an empty file.
	"""
	try:
		with path.open("r", encoding="utf-8-sig", newline="") as handle:
			reader = csv.reader(handle)
			first_row = next(reader, None)
	except (OSError, UnicodeDecodeError, csv.Error) as exc:
		raise HeaderReadError(path, str(exc)) from exc
	if first_row is None:
		return set()
	return {column.lower() for column in first_row}
