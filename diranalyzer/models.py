from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .images import ImageProber

NO_PATH = ""
DEFAULT_LARGEST_SIZE = -1
MIN_WORD_SIZE = 5

@dataclass(frozen=True)
class ImageInfo:
    path: str
    width: int
    height: int

    @property
    def pixels(self) -> int:
        return self.width * self.height

@dataclass(frozen=True)
class WordCount:
    word: str
    count: int

@dataclass
class DirStats:
    largest_file_path: str = NO_PATH
    largest_file_size: int = DEFAULT_LARGEST_SIZE
    n_files: int = 0
    n_dirs: int = 1  # counts the directory itself
    all_files_size: int = 0
    largest_images: List[ImageInfo] = field(default_factory=list)

@dataclass
class WalkContext:
    # Filled during the walk, read only after it completes.
    prober: Optional["ImageProber"] = None
    follow_symlinks: bool = True
    min_word_len: int = MIN_WORD_SIZE
    parent_of: Dict[str, str] = field(default_factory=dict)
    n_files_of: Dict[str, int] = field(default_factory=dict)  # dir -> files anywhere below it
    word_counts: Counter = field(default_factory=Counter)

@dataclass(frozen=True)
class Results:
    largest_file_path: str
    largest_file_size: int
    n_files: int
    n_dirs: int
    all_files_size: int
    most_common_words: List[WordCount]
    largest_images: List[ImageInfo]
    vacant_dirs: List[str]

    def to_dict(self) -> dict:
        return asdict(self)
