from __future__ import annotations
import logging
import os
from typing import List, Optional

from .errors import DirectoryOpenError
from .images import ImageProber, IdentifyProber
from .models import DirStats, Results, WalkContext, WordCount, NO_PATH
from .utils import clean_path, ends_with_ci
from .words import count_words_in_file

log = logging.getLogger(__name__)

ROOT_PATH = "."
TEXT_SUFFIX = ".txt"

def _add_file(entry: os.DirEntry, dir_path: str, stats: DirStats, ctx: WalkContext):
    stats.n_files += 1
    ctx.n_files_of[dir_path] += 1

    try:
        size = entry.stat(follow_symlinks=ctx.follow_symlinks).st_size
    except OSError as exc:
        log.debug("stat failed on %s: %s", entry.path, exc)
    else:
        # strict '>' keeps the first file seen; scandir order is filesystem order
        if size > stats.largest_file_size:
            stats.largest_file_path = clean_path(entry.path)
            stats.largest_file_size = size
        stats.all_files_size += size

    if ends_with_ci(entry.path, TEXT_SUFFIX):
        count_words_in_file(entry.path, ctx.word_counts, ctx.min_word_len)

    if ctx.prober is not None:
        image = ctx.prober.probe(entry.path)
        if image is not None:
            stats.largest_images.append(image)

def _merge(stats: DirStats, sub: DirStats):
    if sub.largest_file_size > stats.largest_file_size:
        stats.largest_file_path = sub.largest_file_path
        stats.largest_file_size = sub.largest_file_size
    stats.n_files += sub.n_files
    stats.n_dirs += sub.n_dirs
    stats.all_files_size += sub.all_files_size
    stats.largest_images.extend(sub.largest_images)

def get_dir_stats(dir_path: str, parent_dir_path: str, ctx: WalkContext) -> DirStats:
    """Walk `dir_path` depth-first and return the statistics of its subtree.

    Also records the directory's parent and its subtree file count in `ctx`
    for get_top_level_vacant_dirs(). Raises DirectoryOpenError if the
    directory (or any directory below it) cannot be listed.
    """
    stats = DirStats()
    ctx.parent_of[dir_path] = parent_dir_path
    ctx.n_files_of[dir_path] = 0
    log.debug("entering %s", dir_path)

    try:
        it = os.scandir(dir_path)
    except OSError as exc:
        raise DirectoryOpenError(dir_path) from exc

    with it:
        for entry in it:
            try:
                if entry.is_file(follow_symlinks=ctx.follow_symlinks):
                    is_file, is_dir = True, False
                else:
                    is_file, is_dir = False, entry.is_dir(follow_symlinks=ctx.follow_symlinks)
            except OSError:
                continue

            if is_file:
                _add_file(entry, dir_path, stats, ctx)
            elif is_dir:
                # the child counts itself in n_dirs
                sub = get_dir_stats(entry.path, dir_path, ctx)
                _merge(stats, sub)
                ctx.n_files_of[dir_path] += sub.n_files
            # sockets, fifos, devices and dangling links are skipped

    return stats

def get_top_level_vacant_dirs(ctx: WalkContext) -> List[str]:
    """Directories with no files below them whose parent does have some.

    Must run after the walk has filled ctx.parent_of and ctx.n_files_of.
    """
    # the root's parent counts as non-vacant so a vacant root is reported
    ctx.n_files_of[NO_PATH] = 1

    vacant = [clean_path(d) for d, n in ctx.n_files_of.items()
              if n == 0 and ctx.n_files_of.get(ctx.parent_of.get(d, NO_PATH), 0) > 0]
    vacant.sort()
    return vacant

def analyze_dir(n: int, *,
                prober: Optional[ImageProber] = None,
                follow_symlinks: bool = True,
                root: str = ROOT_PATH) -> Results:
    """Compute statistics for `root` (the current directory by default).

    `n` caps the number of words and images reported.
    """
    if prober is None:
        prober = IdentifyProber()
    ctx = WalkContext(prober=prober, follow_symlinks=follow_symlinks)
    stats = get_dir_stats(root, NO_PATH, ctx)
    limit = max(0, n)

    words = sorted(ctx.word_counts.items(), key=lambda kv: (-kv[1], kv[0]))[:limit]
    images = sorted(stats.largest_images, key=lambda im: (-im.pixels, im.path))[:limit]
    vacant = get_top_level_vacant_dirs(ctx)
    log.info("analyzed %d files in %d dirs", stats.n_files, stats.n_dirs)

    return Results(
        largest_file_path=stats.largest_file_path,
        largest_file_size=stats.largest_file_size,
        n_files=stats.n_files,
        n_dirs=stats.n_dirs,
        all_files_size=stats.all_files_size,
        most_common_words=[WordCount(w, c) for w, c in words],
        largest_images=images,
        vacant_dirs=vacant,
    )
