"""
Shared pytest setup: local imports without installation, CSV and mkdir helpers.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
	sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def write_csv():
	"""
	Return a helper that writes a small CSV with the given header line.
	"""

	def _write(path: Path, header: str, rows: list[str] | None = None) -> Path:
		path.parent.mkdir(parents=True, exist_ok=True)
		lines = [header] + (rows or ["1,2,3"])
		path.write_text("\n".join(lines) + "\n", encoding="utf-8")
		return path

	return _write


@pytest.fixture
def deny_mkdir(monkeypatch):
	"""
	Return a helper that makes Path.mkdir fail for folders with a given name.
	"""
	original = Path.mkdir

	def _deny(name: str) -> None:
		def fake_mkdir(self, *args, **kwargs):
			if self.name == name:
				raise PermissionError(f"denied: {self}")
			return original(self, *args, **kwargs)

		monkeypatch.setattr(Path, "mkdir", fake_mkdir)

	return _deny
