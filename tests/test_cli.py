#!/usr/bin/env python3
"""
Tests for the command line entry point.
"""

import json
from pathlib import Path

import pytest

from csv_organizer.cli import build_config, main, parse_args
from csv_organizer.relocator import BACKUP_FOLDER


def test_directory_is_required(capsys):
	with pytest.raises(SystemExit) as info:
		parse_args([])
	assert info.value.code == 2
	assert "usage" in capsys.readouterr().err


def test_main_organizes_and_returns_zero(tmp_path: Path, write_csv, capsys):
	write_csv(tmp_path / "a.csv", "productName")
	assert main(["-d", str(tmp_path)]) == 0
	out = capsys.readouterr().out
	assert "Processing file" in out
	assert "[DONE]" in out
	assert (tmp_path / "Products" / "a.csv").exists()


def test_missing_directory_exits_nonzero(tmp_path: Path):
	assert main(["--directory", str(tmp_path / "missing")]) == 1


def test_fatal_backup_failure_exits_nonzero(tmp_path: Path, write_csv, deny_mkdir):
	write_csv(tmp_path / "c.csv", "notes")
	deny_mkdir(BACKUP_FOLDER)
	assert main(["-d", str(tmp_path)]) == 1


def test_blocked_backup_folder_still_exits_zero(tmp_path: Path, write_csv):
	(tmp_path / BACKUP_FOLDER).write_text("blocker", encoding="utf-8")
	source = write_csv(tmp_path / "c.csv", "notes")
	assert main(["-d", str(tmp_path)]) == 0
	assert (tmp_path / "Uncategorized" / "c.csv").exists()
	assert not source.exists()


def test_non_mapping_config_is_rejected(tmp_path: Path):
	cfg_file = tmp_path / "settings.yaml"
	cfg_file.write_text("- dry_run\n", encoding="utf-8")
	with pytest.raises(ValueError):
		build_config(parse_args(["-d", str(tmp_path), "-c", str(cfg_file)]))


def test_yaml_config_sets_defaults(tmp_path: Path):
	cfg_file = tmp_path / "settings.yaml"
	cfg_file.write_text("dry_run: true\nverbose: true\n", encoding="utf-8")
	config = build_config(parse_args(["-d", str(tmp_path), "-c", str(cfg_file)]))
	assert config.dry_run is True
	assert config.verbose is True
	assert config.config_path == cfg_file


def test_flags_override_json_config(tmp_path: Path):
	cfg_file = tmp_path / "settings.json"
	cfg_file.write_text(json.dumps({"dry_run": False}), encoding="utf-8")
	config = build_config(parse_args(["-d", str(tmp_path), "-c", str(cfg_file), "-n"]))
	assert config.dry_run is True
	assert config.verbose is False


def test_dry_run_flag_leaves_tree_alone(tmp_path: Path, write_csv):
	source = write_csv(tmp_path / "a.csv", "productName")
	assert main(["-d", str(tmp_path), "--dry-run"]) == 0
	assert source.exists()
	assert not (tmp_path / "Products").exists()
	assert not (tmp_path / "Uncategorized").exists()
