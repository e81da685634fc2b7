"""CPU load of the whole machine and of this process."""

from __future__ import annotations

import os
import time

from .procfs import number_of_cpus, parse_cpu_seconds, ticks_per_second
from .types import StatsUnavailable

_PROC_STAT = "/proc/stat"


def rusage_cpu_seconds():
    """Return user plus system CPU seconds consumed by this process."""
    times = os.times()
    return times.user + times.system


def system_cpu_seconds():
    """Return cumulative busy CPU seconds of the machine from /proc/stat.

    Raises StatsUnavailable if the file cannot be read.
    """
    try:
        with open(_PROC_STAT, encoding="ascii", errors="replace") as stat:
            text = stat.read()
    except OSError as exc:
        raise StatsUnavailable(f"cannot read {_PROC_STAT}: {exc}") from exc
    return parse_cpu_seconds(text, ticks_per_second())


def compute_loads(sys_kernel, sys_user, sys_idle, proc_kernel, proc_user):
    """Return ``(cpu_load, ioc_load)`` in percent from time deltas.

    The system kernel time includes idle time. Returns None when no system
    time elapsed, in which case the previous values should be kept.
    """
    total_sys = sys_kernel + sys_user
    if total_sys <= 0:
        return None
    total_proc = proc_kernel + proc_user
    total_machine = total_sys - sys_idle
    return 100.0 * total_machine / total_sys, 100.0 * total_proc / total_sys


class _Sampler:
    """Turns a cumulative CPU-seconds counter into a percentage load."""

    def __init__(self, reader, clock, cpus):
        self._reader = reader
        self._clock = clock if clock is not None else time.monotonic
        self.cpus = cpus if cpus is not None else number_of_cpus()
        self._old_time = self._clock()
        try:
            self._old_usage = self._reader()
        except StatsUnavailable:
            self._old_usage = None

    def _load(self):
        cur_time = self._clock()
        cur_usage = self._reader()
        elapsed = cur_time - self._old_time
        old_usage = self._old_usage if self._old_usage is not None else cur_usage
        load = 100.0 * (cur_usage - old_usage) / (elapsed * self.cpus) if elapsed > 0 else 0.0
        self._old_time = cur_time
        self._old_usage = cur_usage
        return load


class CpuUsage(_Sampler):
    """Whole-machine CPU load, in percent of all CPUs, since the last sample."""

    def __init__(self, reader=None, clock=None, cpus=None):
        super().__init__(reader if reader is not None else system_cpu_seconds, clock, cpus)

    def sample(self):
        """Return the machine CPU load since the previous sample."""
        return self._load()


class CpuUtilization(_Sampler):
    """CPU load caused by this process, in percent of all CPUs."""

    def __init__(self, reader=None, clock=None, cpus=None):
        super().__init__(reader if reader is not None else rusage_cpu_seconds, clock, cpus)

    @property
    def no_of_cpus(self):
        """Number of CPUs the load is spread over."""
        return self.cpus

    def sample(self):
        """Return this process's CPU load since the previous sample."""
        return self._load()