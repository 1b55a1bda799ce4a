"""
playlist_extractor package.
"""

from .core import Aggregator, extract_file, scan_folder
from .parsing.fields import extract_fields
from .types import ExtractOptions, Record, RunStats, ScanResult

__all__ = [
    "Aggregator",
    "ExtractOptions",
    "Record",
    "RunStats",
    "ScanResult",
    "extract_fields",
    "extract_file",
    "scan_folder",
]
__version__ = "0.1.0"
