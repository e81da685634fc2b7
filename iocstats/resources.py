"""File descriptor, memory and other resource usage of this process."""

from __future__ import annotations

import mmap
import os
import sys
import threading

from .procfs import parse_meminfo, parse_statm_resident
from .types import FdInfo, MemInfo, StatsUnavailable

try:
    import resource as _resource
except ImportError:  # pragma: no cover - platforms without getrlimit
    _resource = None

_DEFAULT_FD_DIR = "/proc/self/fd"
_DEFAULT_STATM = "/proc/self/statm"
_DEFAULT_MEMINFO = "/proc/meminfo"


def _open_file_limit():
    if _resource is None:
        raise StatsUnavailable("file descriptor limit is not available")
    try:
        soft, _hard = _resource.getrlimit(_resource.RLIMIT_NOFILE)
    except (OSError, ValueError) as exc:
        raise StatsUnavailable(f"cannot query file descriptor limit: {exc}") from exc
    return soft


def _not_supported(what):
    """Build the error for a statistic this platform cannot provide."""
    return StatsUnavailable(f"{what} is not supported on {sys.platform}")


def fd_usage(fd_dir=None):
    """Return descriptors in use and the per-process limit.

    Descriptors are counted as the entries of ``fd_dir`` (by default
    /proc/self/fd), less the one opened to list the directory itself.
    Raises StatsUnavailable if the directory or the limit cannot be read.
    """
    path = fd_dir if fd_dir is not None else _DEFAULT_FD_DIR
    try:
        entries = os.listdir(path)
    except OSError as exc:
        raise StatsUnavailable(f"cannot list {path}: {exc}") from exc
    return FdInfo(used=len(entries) - 1, max=_open_file_limit())


def _read_text(path):
    try:
        with open(path, encoding="ascii", errors="replace") as handle:
            return handle.read()
    except OSError:
        return None


def mem_usage(statm_path=None, meminfo_path=None):
    """Return system memory totals and this process's resident size.

    The free figure counts free memory plus buffers and page cache. A file
    that cannot be read leaves its figures at zero; if neither can be read,
    StatsUnavailable is raised.
    """
    statm = _read_text(statm_path if statm_path is not None else _DEFAULT_STATM)
    meminfo = _read_text(meminfo_path if meminfo_path is not None else _DEFAULT_MEMINFO)
    if statm is None and meminfo is None:
        raise StatsUnavailable("memory statistics are not available")

    resident = parse_statm_resident(statm) if statm is not None else 0
    total, free = parse_meminfo(meminfo) if meminfo is not None else (0, 0)
    return MemInfo(
        num_bytes_total=float(total),
        num_bytes_free=float(free),
        num_bytes_alloc=float(resident) * float(mmap.PAGESIZE),
    )


def workspace_usage():
    """RAM workspace usage; not supported on this platform."""
    raise _not_supported("workspace usage")


def cluster_info(pool):
    """Network buffer cluster table for ``pool``; not supported on this platform."""
    raise _not_supported(f"cluster info for pool {pool}")


def cluster_usage(pool):
    """Network buffer cluster usage for ``pool``; not supported on this platform."""
    raise _not_supported(f"cluster usage for pool {pool}")


def if_errors():
    """Network interface error counts; not supported on this platform."""
    raise _not_supported("network interface errors")


class SuspendedTaskCounter:
    """Counts tasks reported as faulted by a task watchdog."""

    def __init__(self):
        self._lock = threading.Lock()
        self._suspended = 0

    def task_fault(self, *args):
        """Record one faulted task; any arguments from the watchdog are ignored."""
        with self._lock:
            self._suspended += 1

    def count(self):
        """Return the number of tasks reported as faulted so far."""
        with self._lock:
            return self._suspended