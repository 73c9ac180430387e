#!/usr/bin/env python3
"""
Copy and move helpers for category folders.
"""

# Standard Library
import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

BACKUP_FOLDER = "UncategorizedBackups"

#============================================


class FatalRelocationError(RuntimeError):
	"""
	Raised when the last-resort backup folder cannot be created.
	"""


#============================================


def copy_to_category(source: Path, category_dir: str, dry_run: bool = False) -> Path:
	"""
	Copy a file into a category folder next to it.

	The original stays in place and an existing copy is overwritten.

	Args:
		source: File to copy.
		category_dir: Folder name under the file's parent.
		dry_run: When True, no file changes.

	Returns:
		Destination path.
	"""
	dest = source.parent / category_dir / source.name
	if dry_run:
		return dest
	dest.parent.mkdir(parents=True, exist_ok=True)
	shutil.copy(source, dest)
	return dest


#============================================


def move_to_folder(source: Path, folder: Path, dry_run: bool = False) -> Path | None:
	"""
	Move a file into an existing folder, overwriting a same-named file.

	Args:
		source: File to move.
		folder: Destination folder.
		dry_run: When True, no file changes.

	Returns:
		Destination path, or None if the move failed.
	"""
	dest = folder / source.name
	if dry_run:
		return dest
	try:
		source.replace(dest)
	except OSError as exc:
		logger.error("Error moving %s to %s: %s", source, folder, exc)
		return None
	return dest


#============================================


def move_to_uncategorized(source: Path, dry_run: bool = False) -> Path | None:
	"""
	Move a file into the UncategorizedBackups folder beside it.

	Args:
		source: File to move.
		dry_run: When True, no file changes.

	Returns:
		Destination path, or None if the move failed.
	"""
	folder = source.parent / BACKUP_FOLDER
	# a non-folder in the way is left alone; the move below fails and is logged
	if not dry_run and not folder.exists():
		try:
			folder.mkdir()
		except OSError as exc:
			raise FatalRelocationError(f"Failed to create directory: {folder}") from exc
	return move_to_folder(source, folder, dry_run=dry_run)
