from __future__ import annotations
import json
from typing import List

from .models import Results
from .utils import format_bytes

RULE = "-" * 62

def format_report(res: Results, human: bool = False) -> str:
    def size(v: int) -> str:
        return format_bytes(v) if human else str(v)

    lines: List[str] = [
        RULE,
        f'Largest file:      "{res.largest_file_path}"',
        f"Largest file size: {size(res.largest_file_size)}",
        f"Number of files:   {res.n_files}",
        f"Number of dirs:    {res.n_dirs}",
        f"Total file size:   {size(res.all_files_size)}",
        "Most common words from .txt files:",
    ]
    lines += [f' - "{w.word}" x {w.count}' for w in res.most_common_words]
    lines.append("Vacant directories:")
    lines += [f' - "{d}"' for d in res.vacant_dirs]
    lines.append("Largest images:")
    lines += [f' - "{im.path}" {im.width}x{im.height}' for im in res.largest_images]
    lines.append(RULE)
    return "\n".join(lines)

def format_json(res: Results) -> str:
    return json.dumps(res.to_dict(), indent=2, ensure_ascii=False)
