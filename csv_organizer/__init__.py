"""
csv_organizer
=============

Sort CSV files into category folders based on their header row.
"""

__version__ = "0.1.0"

__all__ = [
	"classifier",
	"config",
	"csv_headers",
	"organizer",
	"relocator",
	"scanner",
]
