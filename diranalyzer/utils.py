from __future__ import annotations
import os

CURRENT_DIR_PREFIX = "." + os.sep

def clean_path(path: str) -> str:
    """Strip a leading './' so reported paths are relative to the root."""
    if path.startswith(CURRENT_DIR_PREFIX):
        return path[len(CURRENT_DIR_PREFIX):]
    return path

def ends_with_ci(text: str, suffix: str) -> bool:
    return text.lower().endswith(suffix.lower())

def format_bytes(num: int) -> str:
    if num < 0:
        return str(num)
    units = ["B", "KB", "MB", "GB", "TB", "PB"]
    x = float(num)
    for u in units:
        if x < 1024.0 or u == units[-1]:
            return f"{x:.2f} {u}" if u != "B" else f"{int(x)} {u}"
        x /= 1024.0
    return f"{x:.2f} PB"
