#!/usr/bin/env python3
"""
Depth-first directory walker.
"""

# Standard Library
from pathlib import Path
from typing import Callable

#============================================


def walk(root: Path, visit_file: Callable[[Path], None]) -> None:
	"""
	Walk a directory tree pre-order, recursing into subfolders as they are met.

	Each directory is listed once before its entries are visited, so folders
	created by visit_file during the walk are not descended into.

	Args:
		root: Directory to walk.
		visit_file: Called with each non-directory path.
	"""
	if not root.is_dir():
		return
	for path in list(root.iterdir()):
		if path.is_dir():
			walk(path, visit_file)
		else:
			visit_file(path)
