#!/usr/bin/env python3
"""
Command line interface for csv-organizer.
"""

# Standard Library
import argparse
import logging
from pathlib import Path
import sys

# local repo modules
from . import __version__
from .config import AppConfig, load_user_config
from .organizer import Organizer, RunSummary
from .relocator import FatalRelocationError

#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse CLI arguments.
	"""
	parser = argparse.ArgumentParser(
		prog="csv-organizer",
		description="Organizes CSV files into specific folders based on their headers.",
	)
	parser.add_argument(
		"-d",
		"--directory",
		dest="directory",
		metavar="DIRECTORY",
		required=True,
		help="Sets the input directory with CSV files (required).",
	)
	parser.add_argument(
		"-n",
		"--dry-run",
		dest="dry_run",
		action="store_true",
		default=None,
		help="Only print planned copies and moves.",
	)
	parser.add_argument(
		"-v",
		"--verbose",
		dest="verbose",
		action="store_true",
		default=None,
		help="Verbose logging.",
	)
	parser.add_argument(
		"-c",
		"--config",
		dest="config_path",
		help="Optional JSON or YAML config file.",
	)
	parser.add_argument(
		"--version",
		action="version",
		version=f"%(prog)s {__version__}",
	)
	return parser.parse_args(argv)


#============================================


def build_config(args: argparse.Namespace) -> AppConfig:
	"""
	Build runtime config from args and file; flags win over the file.
	"""
	config_path = Path(args.config_path).expanduser() if args.config_path else None
	user_cfg = load_user_config(config_path)
	config = AppConfig(root=Path(args.directory), config_path=config_path)
	config.dry_run = bool(user_cfg.get("dry_run", False))
	config.verbose = bool(user_cfg.get("verbose", False))
	if args.dry_run is not None:
		config.dry_run = args.dry_run
	if args.verbose is not None:
		config.verbose = args.verbose
	return config


#============================================


def print_summary(summary: RunSummary) -> None:
	print(
		f"[DONE] {summary.csv_files} CSV of {summary.files_seen} files | "
		f"Products: {summary.products} | ProductCosts: {summary.product_costs} | "
		f"Backups: {summary.backups} | Swept: {summary.swept} | "
		f"Header errors: {summary.header_errors} | "
		f"Copy errors: {summary.copy_errors} | Move errors: {summary.move_errors}"
	)


#============================================


def main(argv: list[str] | None = None) -> int:
	"""
	Entry point for the CLI.

	Returns:
		Exit code.
	"""
	args = parse_args(argv)
	config = build_config(args)
	if config.verbose:
		logging.basicConfig(level=logging.INFO)
	else:
		logging.basicConfig(level=logging.WARNING)
	logging.info("Scanning %s (dry_run=%s)", config.normalized_root(), config.dry_run)
	organizer = Organizer(config)
	try:
		summary = organizer.run()
	except FatalRelocationError as exc:
		logging.critical("%s", exc)
		return 1
	except OSError as exc:
		logging.critical("Cannot organize %s: %s", config.root, exc)
		return 1
	print_summary(summary)
	return 0


#============================================


if __name__ == "__main__":
	sys.exit(main())
