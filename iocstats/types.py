"""Value types, identifiers and the error raised when a statistic is unavailable."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

#: Number of cluster sizes tracked per network buffer pool.
CLUST_SIZES = 2

#: Environment variable names consulted for boot and site information.
STARTUP = "STARTUP"
ST_CMD = "ST_CMD"
ENGINEER = "ENGINEER"
LOCATION = "LOCATION"

#: Placeholder strings reported where a value cannot be obtained.
NOT_IMPLEMENTED = "<not implemented>"
NOT_AVAILABLE = "<not available>"


class StatsUnavailable(Exception):
    """Raised when a statistic is not supported or cannot be read."""


class Pool(IntEnum):
    """Network buffer cluster pools."""

    DATA = 0
    SYS = 1


class StatType(IntEnum):
    """Groups of statistics that are refreshed at different rates."""

    MEMORY = 0
    LOAD = 1
    FD = 2
    CA = 3
    QUEUE = 4
    STATIC = 5


TOTAL_TYPES = len(StatType)


@dataclass
class MemInfo:
    """Memory usage figures, in bytes and block counts."""

    num_bytes_total: float = 0.0
    num_bytes_free: float = 0.0
    num_bytes_alloc: float = 0.0
    num_blocks_free: float = 0.0
    num_blocks_alloc: float = 0.0
    max_block_size_free: float = 0.0


@dataclass
class FdInfo:
    """File descriptor usage: descriptors in use and the per-process limit."""

    used: int = 0
    max: int = 0


@dataclass
class IfErrInfo:
    """Accumulated network interface input and output errors."""

    ierrors: int = 0
    oerrors: int = 0


@dataclass
class LoadInfo:
    """CPU count, whole-machine CPU load and this process's load, in percent."""

    no_of_cpus: int = 0
    cpu_load: float = 0.0
    ioc_load: float = 0.0