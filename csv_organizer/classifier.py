#!/usr/bin/env python3
"""
Header-based CSV classification.
"""

from __future__ import annotations

# Standard Library
from enum import Enum
from typing import Iterable

#============================================


class FileType(Enum):
	"""
	Known CSV categories. The value is the category folder name.
	"""

	PRODUCT = "Products"
	PRODUCT_COSTS = "ProductCosts"

	@property
	def folder(self) -> str:
		return self.value


# first match wins
CATEGORY_RULES: tuple[tuple[str, FileType], ...] = (
	("productname", FileType.PRODUCT),
	("cost", FileType.PRODUCT_COSTS),
)

#============================================


def classify(headers: Iterable[str]) -> FileType | None:
	"""
	Pick a category from a set of header names.

	Args:
		headers: Column names from the first row, any case.

	Returns:
		Matching FileType, or None when no signature column is present.
	"""
	lowered = {header.lower() for header in headers}
	for signature, file_type in CATEGORY_RULES:
		if signature in lowered:
			return file_type
	return None
