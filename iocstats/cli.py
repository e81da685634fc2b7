"""Interactive statistics shell, optionally running a script first."""

from __future__ import annotations

import argparse
import cmd
import sys
import time

from . import hostinfo
from .cpu import CpuUsage, CpuUtilization
from .resources import fd_usage, mem_usage
from .types import StatsUnavailable

_SCRIPT_SETTLE_SECONDS = 0.2


class _StatsShell(cmd.Cmd):
    """Command shell that reports process and host statistics."""

    prompt = "iocstats> "
    intro = None

    def __init__(self, stdin, stdout, stderr):
        super().__init__(stdin=stdin, stdout=stdout)
        self.use_rawinput = False
        self.stderr = stderr
        self.exit_status = 0
        self._cpu_usage = CpuUsage()
        self._cpu_utilization = CpuUtilization()

    def _say(self, text):
        self.stdout.write(f"{text}\n")

    def _report(self, label, getter):
        try:
            value = getter()
        except StatsUnavailable as exc:
            self._say(f"{label}: unavailable ({exc})")
        else:
            self._say(f"{label}: {value}")

    def emptyline(self):
        return False

    def default(self, line):
        self.stderr.write(f"unknown command: {line.split()[0]}\n")
        return False

    def do_hostname(self, arg):
        """Print the host name."""
        self._report("hostname", hostinfo.hostname)

    def do_pwd(self, arg):
        """Print the working directory."""
        self._report("pwd", hostinfo.working_directory)

    def do_pid(self, arg):
        """Print the process and parent process IDs."""
        self._report("pid", hostinfo.pid)
        self._report("ppid", hostinfo.ppid)

    def do_kernel(self, arg):
        """Print the kernel version."""
        self._report("kernel", hostinfo.kernel_version)
        self._report("bsp", hostinfo.bsp_version)

    def do_bootline(self, arg):
        """Print the boot line."""
        self._report("bootline", hostinfo.boot_line)

    def do_mem(self, arg):
        """Print memory usage."""
        try:
            info = mem_usage()
        except StatsUnavailable as exc:
            self._say(f"mem: unavailable ({exc})")
            return
        self._say(
            f"mem: total={info.num_bytes_total:.0f} free={info.num_bytes_free:.0f} "
            f"alloc={info.num_bytes_alloc:.0f}"
        )

    def do_fd(self, arg):
        """Print file descriptor usage."""
        try:
            info = fd_usage()
        except StatsUnavailable as exc:
            self._say(f"fd: unavailable ({exc})")
            return
        self._say(f"fd: used={info.used} max={info.max}")

    def do_load(self, arg):
        """Print machine and process CPU load since the last call."""
        self._say(f"cpus: {self._cpu_utilization.no_of_cpus}")
        self._report("cpu load", lambda: f"{self._cpu_usage.sample():.1f}%")
        self._report("ioc load", lambda: f"{self._cpu_utilization.sample():.1f}%")

    def do_stats(self, arg):
        """Print every statistic."""
        for command in (self.do_hostname, self.do_pwd, self.do_pid, self.do_kernel,
                        self.do_bootline, self.do_mem, self.do_fd, self.do_load):
            command(arg)

    def do_exit(self, arg):
        """Leave the shell, with an optional integer exit status (default 0)."""
        text = arg.strip()
        if not text:
            self.exit_status = 0
            return True
        try:
            self.exit_status = int(text)
        except ValueError:
            self.stderr.write(f"exit: not an integer status: {text}\n")
            return False
        return True

    def do_EOF(self, arg):
        """Leave the shell at end of input."""
        return self.do_exit("")


def _run_script(shell, path):
    """Run the commands in ``path``; return True if the shell should stop."""
    try:
        with open(path, encoding="utf-8") as script:
            lines = script.read().splitlines()
    except OSError as exc:
        shell.stderr.write(f"cannot open script {path}: {exc}\n")
        return False
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if shell.onecmd(line):
            return True
    return False


def main(argv=None):
    """Run an optional script, then read commands from standard input."""
    parser = argparse.ArgumentParser(prog="iocstats", description=__doc__)
    parser.add_argument("script", nargs="?", help="file of commands to run first")
    args = parser.parse_args(argv)

    shell = _StatsShell(sys.stdin, sys.stdout, sys.stderr)
    if args.script is not None:
        stopped = _run_script(shell, args.script)
        time.sleep(_SCRIPT_SETTLE_SECONDS)
        if stopped:
            return shell.exit_status
    shell.cmdloop()
    return shell.exit_status


if __name__ == "__main__":
    sys.exit(main())