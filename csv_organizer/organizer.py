#!/usr/bin/env python3
"""
Core organizer: headers -> category -> copy or move.
"""

# Standard Library
import logging
from dataclasses import dataclass
from pathlib import Path
import sys

# local repo modules
from .classifier import FileType, classify
from .config import AppConfig
from .csv_headers import HeaderReadError, read_headers
from .relocator import copy_to_category, move_to_folder, move_to_uncategorized
from .scanner import walk

logger = logging.getLogger(__name__)

SWEEP_FOLDER = "Uncategorized"

#============================================


@dataclass(slots=True)
class RunSummary:
	"""
	Counters for one organizer run.
	"""

	files_seen: int = 0
	csv_files: int = 0
	products: int = 0
	product_costs: int = 0
	backups: int = 0
	header_errors: int = 0
	copy_errors: int = 0
	move_errors: int = 0
	swept: int = 0


#============================================


class Organizer:
	"""
	Walks the root folder and relocates CSV files by category.
	"""

	#============================================
	def __init__(self, config: AppConfig) -> None:
		self.config = config
		self.root = config.normalized_root()
		self.summary = RunSummary()
		# dry-run only: files a real run would already have moved away
		self._planned_moves: set[Path] = set()

	#============================================
	def _color(self, text: str, code: str) -> str:
		if sys.stdout.isatty():
			return f"\033[{code}m{text}\033[0m"
		return text

	#============================================
	def _tag(self, action: str) -> str:
		if self.config.dry_run:
			return self._color("[DRY RUN]", "33")
		return self._color(f"[{action}]", "32")

	#============================================
	def run(self) -> RunSummary:
		"""
		Organize the whole tree, then sweep leftover top-level files.

		Returns:
			Counters for the run.
		"""
		if not self.root.is_dir():
			raise NotADirectoryError(f"Not a directory: {self.root}")
		walk(self.root, self.organize_file)
		self.sweep_remaining()
		return self.summary

	#============================================
	def organize_file(self, path: Path) -> None:
		"""
		Classify one file and copy it to its category folder.

		Non-CSV files are ignored. Unclassified files, and files whose copy
		fails, go to UncategorizedBackups.

		Args:
			path: File found by the walker.
		"""
		self.summary.files_seen += 1
		print(f"{self._color('[INFO]', '34')} Processing file: {path}")
		if path.suffix != ".csv":
			return
		self.summary.csv_files += 1
		try:
			headers = read_headers(path)
		except HeaderReadError as exc:
			self.summary.header_errors += 1
			logger.error("%s", exc)
			return
		file_type = classify(headers)
		if file_type is None:
			print(f"{self._color('[INFO]', '34')} Unknown or unsupported CSV type: {path}")
			self._backup(path)
			return
		self._copy(path, file_type)

	#============================================
	def _copy(self, path: Path, file_type: FileType) -> None:
		try:
			dest = copy_to_category(path, file_type.folder, dry_run=self.config.dry_run)
		except OSError as exc:
			self.summary.copy_errors += 1
			logger.error("Error copying %s to %s: %s", path, file_type.folder, exc)
			self._backup(path)
			return
		if file_type is FileType.PRODUCT:
			self.summary.products += 1
		else:
			self.summary.product_costs += 1
		print(f"{self._tag('COPY')} {path} -> {dest}")

	#============================================
	def _backup(self, path: Path) -> None:
		dest = move_to_uncategorized(path, dry_run=self.config.dry_run)
		if dest is None:
			self.summary.move_errors += 1
			return
		self.summary.backups += 1
		if self.config.dry_run:
			self._planned_moves.add(path)
		print(f"{self._tag('MOVE')} {path} -> {dest}")

	#============================================
	def sweep_remaining(self) -> None:
		"""
		Move CSV files still sitting in the root folder into Uncategorized.

		Only the top level is swept. A failed move is logged and skipped.
		"""
		folder = self.root / SWEEP_FOLDER
		if not self.config.dry_run and not folder.exists():
			folder.mkdir()
		for path in list(self.root.iterdir()):
			if not path.is_file() or path.suffix != ".csv":
				continue
			if path in self._planned_moves:
				continue
			dest = move_to_folder(path, folder, dry_run=self.config.dry_run)
			if dest is None:
				self.summary.move_errors += 1
				continue
			self.summary.swept += 1
			print(f"{self._tag('SWEEP')} {path} -> {dest}")
