from __future__ import annotations
from pathlib import Path
from typing import Dict, Optional, Tuple

import pytest

from diranalyzer.models import ImageInfo
from diranalyzer.utils import clean_path


class FakeProber:
    """Treats a fixed set of paths (relative to the root) as images."""

    def __init__(self, sizes: Optional[Dict[str, Tuple[int, int]]] = None):
        self.sizes = dict(sizes or {})
        self.probed = []

    def probe(self, file_path: str) -> Optional[ImageInfo]:
        path = clean_path(file_path)
        self.probed.append(path)
        if path not in self.sizes:
            return None
        w, h = self.sizes[path]
        return ImageInfo(path, w, h)


def make_tree(root: Path, layout: Dict[str, object]):
    """Create files (bytes/str values) and empty dirs (None values) under root."""
    for rel, content in layout.items():
        p = root / rel
        if content is None:
            p.mkdir(parents=True, exist_ok=True)
            continue
        p.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            content = content.encode("utf-8")
        p.write_bytes(content)


@pytest.fixture
def in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def fake_prober():
    return FakeProber()
