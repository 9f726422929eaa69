from __future__ import annotations
import logging
import psutil

log = logging.getLogger(__name__)

DEFAULT_MAX_OPEN_FILES = 256

def limit_open_files(max_open: int = DEFAULT_MAX_OPEN_FILES) -> bool:
    """Cap this process's open file descriptors at `max_open`.

    Never raises the limit above the current hard limit. Returns False when
    the platform offers no RLIMIT_NOFILE or the limit could not be applied.
    """
    rlimit_nofile = getattr(psutil, "RLIMIT_NOFILE", None)
    if rlimit_nofile is None:
        log.warning("open file limit is not supported on this platform")
        return False
    proc = psutil.Process()
    try:
        _soft, hard = proc.rlimit(rlimit_nofile)
        if hard != psutil.RLIM_INFINITY:
            max_open = min(max_open, hard)
        proc.rlimit(rlimit_nofile, (max_open, max_open))
    except (OSError, ValueError, psutil.Error) as exc:
        log.warning("could not set open file limit to %d: %s", max_open, exc)
        return False
    log.debug("open file limit set to %d", max_open)
    return True
