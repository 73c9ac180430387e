#!/usr/bin/env python3
"""
Repo-root runner for csv_organizer.

Examples:
	python run_csv_organizer.py --directory ~/exports
	python run_csv_organizer.py --directory ~/exports --dry-run
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
	"""
	Run the CLI entrypoint with repo-root import behavior.
	"""
	repo_root = Path(__file__).resolve().parent
	if str(repo_root) not in sys.path:
		sys.path.insert(0, str(repo_root))

	from csv_organizer.cli import main as cli_main

	sys.exit(cli_main())


if __name__ == "__main__":
	main()
