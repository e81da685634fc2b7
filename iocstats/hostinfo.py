"""Host, process and system identification strings."""

from __future__ import annotations

import os
import socket
import sys

from .types import NOT_AVAILABLE, NOT_IMPLEMENTED, StatsUnavailable

_WINDOWS_NAMES = {
    (6, 0): "Windows Vista/server 2003",
    (6, 1): "Windows 7/Server 2008",
    (5, 0): "Windows 2000",
    (5, 1): "Windows XP",
    (5, 2): "Windows Server 2003",
}


def working_directory():
    """Return the current working directory.

    Raises StatsUnavailable if it cannot be determined.
    """
    try:
        return os.getcwd()
    except OSError as exc:
        raise StatsUnavailable(f"working directory is not available: {exc}") from exc


def hostname():
    """Return the name of this host.

    Raises StatsUnavailable if it cannot be determined.
    """
    try:
        return socket.gethostname()
    except OSError as exc:
        raise StatsUnavailable(f"host name is not available: {exc}") from exc


def pid():
    """Return the ID of this process."""
    return os.getpid()


def ppid():
    """Return the ID of the parent of this process."""
    return os.getppid()


def windows_version_string(major, minor, build):
    """Return a descriptive Windows version string, or "" for unknown versions."""
    name = _WINDOWS_NAMES.get((major, minor))
    if name is None:
        return ""
    return f"{name} {major}.{minor}({build})"


def kernel_version():
    """Return the operating system name, release and machine type."""
    uname = getattr(os, "uname", None)
    if uname is not None:
        info = uname()
        return f"{info.sysname} {info.release} {info.machine}"
    get_windows_version = getattr(sys, "getwindowsversion", None)
    if get_windows_version is not None:
        version = get_windows_version()
        return windows_version_string(version.major, version.minor, version.build)
    return NOT_AVAILABLE


def bsp_version():
    """Board support package version; not available on this platform."""
    raise StatsUnavailable(f"BSP version: {NOT_AVAILABLE}")


def boot_line():
    """Return the boot line, which this platform does not provide."""
    return NOT_IMPLEMENTED