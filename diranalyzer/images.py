"""Best-effort image detection.

Every file in the tree is probed, so a probe must never raise: anything that
is not a readable image with positive dimensions comes back as None.
"""
from __future__ import annotations
import logging
import subprocess
from typing import Optional, Protocol, List, Tuple

from PIL import Image

from .models import ImageInfo
from .utils import clean_path

log = logging.getLogger(__name__)

IDENTIFY_COMMAND = "identify"
IDENTIFY_FORMAT = "%w %h"

class ImageProber(Protocol):
    def probe(self, file_path: str) -> Optional[ImageInfo]:
        ...

def parse_dimensions(output: str) -> Optional[Tuple[int, int]]:
    lines = output.splitlines()
    if not lines:
        return None
    parts = lines[0].split()
    if len(parts) < 2:
        return None
    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if width <= 0 or height <= 0:
        return None
    return width, height

class IdentifyProber:
    """Ask ImageMagick's `identify` for the dimensions of a file."""

    def __init__(self, command: str = IDENTIFY_COMMAND, timeout: Optional[float] = None):
        self.command = command
        self.timeout = timeout

    def _cmd(self, file_path: str) -> List[str]:
        return [self.command, "-format", IDENTIFY_FORMAT, file_path]

    def probe(self, file_path: str) -> Optional[ImageInfo]:
        try:
            proc = subprocess.run(self._cmd(file_path),
                                  stdout=subprocess.PIPE,
                                  stderr=subprocess.DEVNULL,
                                  text=True,
                                  errors="replace",
                                  timeout=self.timeout)
        except (OSError, subprocess.SubprocessError) as exc:
            log.debug("identify failed on %s: %s", file_path, exc)
            return None
        if proc.returncode != 0:
            return None
        dims = parse_dimensions(proc.stdout)
        if dims is None:
            return None
        return ImageInfo(clean_path(file_path), dims[0], dims[1])

class PillowProber:
    """Read image dimensions in-process with Pillow, no external command."""

    def probe(self, file_path: str) -> Optional[ImageInfo]:
        try:
            with Image.open(file_path) as img:
                width, height = img.width, img.height
        except Exception as exc:
            log.debug("not an image %s: %s", file_path, exc)
            return None
        if width <= 0 or height <= 0:
            return None
        return ImageInfo(clean_path(file_path), width, height)

PROBERS = {
    "identify": IdentifyProber,
    "pillow": PillowProber,
}

def make_prober(name: str) -> ImageProber:
    try:
        return PROBERS[name]()
    except KeyError:
        raise ValueError(f"unknown image prober: {name!r}") from None
