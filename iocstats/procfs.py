"""Parsers for /proc statistics files and system configuration queries."""

from __future__ import annotations

import os
from itertools import takewhile

_MEMINFO_FREE_TITLES = frozenset({"MemFree:", "Buffers:", "Cached:"})
_MEMINFO_WANTED = 4


def _leading_ints(tokens):
    """Yield integers from the start of ``tokens`` until one is not numeric."""
    return (int(token) for token in takewhile(str.isdigit, tokens))


def parse_cpu_seconds(text, ticks_per_sec):
    """Return user+nice+system CPU seconds from the ``cpu`` line of /proc/stat.

    Fields that cannot be read count as zero.
    """
    tokens = text.split()
    if not tokens or tokens[0] != "cpu":
        return 0.0
    total = sum(_leading_ints(tokens[1:4]))
    return total / float(ticks_per_sec)


def parse_process_cpu_seconds(text, ticks_per_sec):
    """Return user+system CPU seconds of a process from its /proc/<pid>/stat.

    Returns 0.0 if the text cannot be parsed.
    """
    close = text.rfind(")")
    if close < 0:
        return 0.0
    fields = text[close + 1 :].split()
    # After the command name: state, ppid, pgrp, session, tty, tpgid, flags,
    # minflt, cminflt, majflt, cmajflt, utime, stime.
    try:
        utime = int(fields[11])
        stime = int(fields[12])
    except (IndexError, ValueError):
        return 0.0
    return (utime + stime) / float(ticks_per_sec)


def parse_statm_resident(text):
    """Return the resident page count from /proc/<pid>/statm, or 0."""
    fields = text.split()
    try:
        return int(fields[1])
    except (IndexError, ValueError):
        return 0


def parse_meminfo(text):
    """Return ``(total, free)`` in bytes from /proc/meminfo.

    ``free`` is the sum of MemFree, Buffers and Cached. Reading stops once
    four of the wanted entries have been seen.
    """
    total = 0
    free = 0
    found = 0
    for line in text.splitlines():
        if found >= _MEMINFO_WANTED:
            break
        fields = line.split()
        if len(fields) < 2:
            continue
        title, raw_value = fields[0], fields[1]
        try:
            value = int(raw_value)
        except ValueError:
            continue
        if title == "MemTotal:":
            total = value * 1024
            found += 1
        elif title in _MEMINFO_FREE_TITLES:
            free += value * 1024
            found += 1
    return total, free


def _sysconf(name):
    try:
        value = os.sysconf(name)
    except (AttributeError, ValueError, OSError):
        return None
    return value if value > 0 else None


def ticks_per_second():
    """Return the clock tick rate used by /proc counters (1 if unknown)."""
    return _sysconf("SC_CLK_TCK") or 1


def number_of_cpus():
    """Return the number of online processors (at least 1)."""
    return _sysconf("SC_NPROCESSORS_ONLN") or os.cpu_count() or 1