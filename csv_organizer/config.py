#!/usr/bin/env python3
"""
Runtime settings and optional YAML/JSON config files.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass
from pathlib import Path
import json

# PIP3 modules
import yaml

YAML_SUFFIXES = {".yml", ".yaml"}

#============================================


@dataclass(slots=True)
class AppConfig:
	"""
	Runtime configuration settings.

	Attributes:
		root: Directory to organize.
		dry_run: Only print planned work.
		verbose: INFO-level logging.
		config_path: Optional user config path.
	"""
	root: Path
	dry_run: bool = False
	verbose: bool = False
	config_path: Path | None = None

	#============================================
	def normalized_root(self) -> Path:
		"""
		Normalize the root path.

		Returns:
			Normalized Path.
		"""
		root: Path = self.root.expanduser().resolve()
		return root


#============================================


def load_user_config(config_path: Path | None) -> dict:
	"""
	Read dry_run/verbose defaults from a YAML or JSON file.

	A missing path gives no overrides. Anything other than a mapping at the
	top level is rejected.

	Args:
		config_path: Path to config file.

	Returns:
		Dictionary of settings.
	"""
	if config_path is None or not config_path.is_file():
		return {}
	text = config_path.read_text(encoding="utf-8")
	if config_path.suffix.lower() in YAML_SUFFIXES:
		loaded = yaml.safe_load(text)
	else:
		loaded = json.loads(text)
	if loaded is None:
		return {}
	if not isinstance(loaded, dict):
		raise ValueError(f"Config file {config_path} must hold a mapping, got {type(loaded).__name__}")
	return loaded
