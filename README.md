# iocstats

Statistics about the running process and the host it runs on: CPU load of the
whole machine and of this process, memory in use, file descriptors in use and
their limit, and host details such as name, working directory, process ids and
kernel version.

Values come from the operating system: `/proc` files where they exist,
`os.times()`, `os.uname()` and the resource limits on POSIX systems. Where a
figure cannot be obtained, the call raises `iocstats.types.StatsUnavailable`
rather than returning a made-up number.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Data records

`iocstats.types` holds the records and identifiers the other modules use:

- `MemInfo` – bytes total, free and allocated, plus block counts
- `FdInfo` – descriptors used and the maximum allowed
- `LoadInfo` – number of CPUs, machine CPU load and this process's load
- `IfErrInfo` – network interface input and output errors
- `Pool` (`DATA`, `SYS`) and `StatType` (`MEMORY`, `LOAD`, `FD`, `CA`,
  `QUEUE`, `STATIC`) – enumerations for buffer pools and update classes
- `StatsUnavailable` – the exception raised when a statistic cannot be read

## CPU load

`iocstats.cpu.CpuUsage` measures the busy time of the whole machine, read
from `/proc/stat`; `iocstats.cpu.CpuUtilization` measures the CPU time used
by this process. Both take an optional reader returning cumulative CPU
seconds, an optional clock and an optional CPU count; `sample()` returns the
load in percent of all CPUs since the previous sample (or since construction),
and 0.0 if no time has passed.

```python
import time

from iocstats.cpu import CpuUtilization, rusage_cpu_seconds
from iocstats.procfs import number_of_cpus

meter = CpuUtilization(rusage_cpu_seconds, time.monotonic, number_of_cpus())
time.sleep(1.0)
print(meter.sample(), "% over", meter.no_of_cpus, "CPUs")
```

On systems without `/proc/stat`, `CpuUsage.sample()` raises
`StatsUnavailable`.

`compute_loads(sys_kernel, sys_user, sys_idle, proc_kernel, proc_user)` turns
differences of system and process times (with idle time included in kernel
time) into `(cpu_load, ioc_load)` percentages, or `None` when no system time
elapsed.

## Memory and file descriptors

```python
from iocstats.resources import fd_usage, mem_usage

print(fd_usage("/proc/self/fd"))
print(mem_usage("/proc/self/statm", "/proc/meminfo"))
```

Both default to the `/proc/self` paths when called without arguments.
`fd_usage` counts the entries of the descriptor directory, less the one used
to list it, and reports the soft open-file limit. `mem_usage` reports total
memory, free memory (free plus buffers plus page cache) and this process's
resident size in bytes; it raises `StatsUnavailable` only if neither file can
be read.

The parsers behind these live in `iocstats.procfs` and take file contents as
text: `parse_cpu_seconds`, `parse_process_cpu_seconds`,
`parse_statm_resident` and `parse_meminfo`. `ticks_per_second()` and
`number_of_cpus()` query the system configuration.

`iocstats.resources.SuspendedTaskCounter` counts faults reported to its
`task_fault()` callback; `count()` returns the total.

## Host information

```python
from iocstats import hostinfo

print(hostinfo.hostname())
print(hostinfo.working_directory())
print(hostinfo.pid(), hostinfo.ppid())
print(hostinfo.kernel_version())   # e.g. "Linux 6.1.0 x86_64"
```

`hostinfo.boot_line()` returns `"<not implemented>"`, and
`hostinfo.bsp_version()` always raises `StatsUnavailable`.
`hostinfo.windows_version_string(major, minor, build)` names the Windows
releases 5.0 to 6.1 and returns an empty string for any other version.

## Command line

```
iocstats [SCRIPT]
```

Starts a small interactive shell reading commands from standard input. If a
script file is given, its commands are run first (blank lines and lines
starting with `#` are skipped); if the script ends with `exit`, the shell
stops there. Commands:

- `hostname`, `pwd`, `pid`, `kernel`, `bootline` – host and process details
- `mem`, `fd` – memory and file descriptor usage
- `load` – CPU count, machine load and process load since the last `load`
- `stats` – all of the above
- `exit [STATUS]` – leave with the given integer exit status (default 0);
  end of input also leaves
- `help` – list the commands

## What this package does not do

- Network buffer cluster statistics, network interface error counts and RAM
  workspace usage are not collected: `cluster_info`, `cluster_usage`,
  `if_errors` and `workspace_usage` in `iocstats.resources` always raise
  `StatsUnavailable`.
- Values are not published anywhere: there is no server, record database or
  periodic scanning; callers read the figures they need when they need them.