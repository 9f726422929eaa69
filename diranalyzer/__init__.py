from __future__ import annotations

__version__ = "1.0.0"

from .errors import AnalysisError, DirectoryOpenError, TextFileOpenError
from .models import ImageInfo, Results, WordCount
from .scanner import analyze_dir

__all__ = [
    "AnalysisError",
    "DirectoryOpenError",
    "ImageInfo",
    "Results",
    "TextFileOpenError",
    "WordCount",
    "analyze_dir",
]
