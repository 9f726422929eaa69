from __future__ import annotations
import logging
from typing import MutableMapping

from .errors import TextFileOpenError
from .models import MIN_WORD_SIZE

log = logging.getLogger(__name__)

READ_CHUNK = 64 * 1024

def _is_ascii_alpha(b: int) -> bool:
    return 0x41 <= b <= 0x5A or 0x61 <= b <= 0x7A

def _flush(word: bytearray, counts: MutableMapping[str, int], min_len: int):
    if len(word) >= min_len:
        w = word.decode("ascii")
        counts[w] = counts.get(w, 0) + 1
    word.clear()

def count_words_in_file(file_path: str,
                        counts: MutableMapping[str, int],
                        min_len: int = MIN_WORD_SIZE) -> None:
    """Add every run of ASCII letters of at least `min_len` in the file to `counts`.

    The file is read as bytes and inspected one byte at a time, so line
    structure and encoding do not matter. Words are lower-cased.
    """
    try:
        f = open(file_path, "rb")
    except OSError as exc:
        raise TextFileOpenError(file_path) from exc

    word = bytearray()
    with f:
        while True:
            chunk = f.read(READ_CHUNK)
            if not chunk:
                break
            for b in chunk:
                if _is_ascii_alpha(b):
                    word.append(b | 0x20)  # lower-case
                else:
                    _flush(word, counts, min_len)
    # last word may run up to EOF
    _flush(word, counts, min_len)
    log.debug("counted words in %s", file_path)
