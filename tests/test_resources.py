import mmap
import resource
import threading

import pytest

from iocstats.resources import (
    SuspendedTaskCounter,
    cluster_info,
    cluster_usage,
    fd_usage,
    if_errors,
    mem_usage,
    workspace_usage,
)
from iocstats.types import FdInfo, MemInfo, Pool, StatsUnavailable


@pytest.fixture
def fd_dir(tmp_path):
    directory = tmp_path / "fd"
    directory.mkdir()
    for name in ("0", "1", "2", "3", "4"):
        (directory / name).write_text("")
    return directory


def test_fd_usage_counts_entries_less_own_descriptor(fd_dir):
    info = fd_usage(fd_dir)
    assert info.used == len(list(fd_dir.iterdir())) - 1


def test_fd_usage_reports_soft_limit(fd_dir):
    info = fd_usage(fd_dir)
    assert info.max == resource.getrlimit(resource.RLIMIT_NOFILE)[0]


def test_fd_usage_returns_fdinfo(fd_dir):
    info = fd_usage(str(fd_dir))
    assert info == FdInfo(used=info.used, max=info.max)
    assert info.used == 4


def test_fd_usage_missing_directory_raises(tmp_path):
    with pytest.raises(StatsUnavailable):
        fd_usage(tmp_path / "absent")


def _write_mem_files(tmp_path, statm, meminfo):
    statm_path = tmp_path / "statm"
    meminfo_path = tmp_path / "meminfo"
    statm_path.write_text(statm)
    meminfo_path.write_text(meminfo)
    return statm_path, meminfo_path


def test_mem_usage_reads_both_files(tmp_path):
    statm_path, meminfo_path = _write_mem_files(
        tmp_path,
        "300 25 10 5 0 40 0\n",
        "MemTotal:  2048 kB\nMemFree:  512 kB\nBuffers:  128 kB\nCached:  64 kB\n",
    )
    info = mem_usage(statm_path, meminfo_path)
    assert info.num_bytes_alloc == 25 * mmap.PAGESIZE
    assert info.num_bytes_total == 2048 * 1024
    assert info.num_bytes_free == (512 + 128 + 64) * 1024


def test_mem_usage_stops_after_four_entries(tmp_path):
    statm_path, meminfo_path = _write_mem_files(
        tmp_path,
        "300 25\n",
        "MemTotal:  2048 kB\nMemFree:  512 kB\nBuffers:  128 kB\n"
        "Cached:  64 kB\nCached:  1000 kB\n",
    )
    info = mem_usage(statm_path, meminfo_path)
    assert info.num_bytes_free == (512 + 128 + 64) * 1024


def test_mem_usage_leaves_block_figures_zero(tmp_path):
    statm_path, meminfo_path = _write_mem_files(
        tmp_path, "300 25\n", "MemTotal:  2048 kB\n"
    )
    info = mem_usage(statm_path, meminfo_path)
    assert info == MemInfo(
        num_bytes_total=2048 * 1024,
        num_bytes_free=0.0,
        num_bytes_alloc=25 * mmap.PAGESIZE,
    )


def test_mem_usage_missing_meminfo_gives_zero_totals(tmp_path):
    statm_path = tmp_path / "statm"
    statm_path.write_text("300 7\n")
    info = mem_usage(statm_path, tmp_path / "absent")
    assert info.num_bytes_total == 0.0
    assert info.num_bytes_free == 0.0
    assert info.num_bytes_alloc == 7 * mmap.PAGESIZE


def test_mem_usage_missing_statm_gives_zero_alloc(tmp_path):
    meminfo_path = tmp_path / "meminfo"
    meminfo_path.write_text("MemTotal:  2048 kB\n")
    info = mem_usage(tmp_path / "absent", meminfo_path)
    assert info.num_bytes_alloc == 0.0
    assert info.num_bytes_total == 2048 * 1024


def test_mem_usage_no_files_raises(tmp_path):
    with pytest.raises(StatsUnavailable):
        mem_usage(tmp_path / "a", tmp_path / "b")


def test_workspace_usage_unavailable():
    with pytest.raises(StatsUnavailable):
        workspace_usage()


@pytest.mark.parametrize("pool", [Pool.DATA, Pool.SYS])
def test_cluster_info_unavailable(pool):
    with pytest.raises(StatsUnavailable):
        cluster_info(pool)


@pytest.mark.parametrize("pool", [Pool.DATA, Pool.SYS])
def test_cluster_usage_unavailable(pool):
    with pytest.raises(StatsUnavailable):
        cluster_usage(pool)


def test_if_errors_unavailable():
    with pytest.raises(StatsUnavailable):
        if_errors()


def test_suspended_counter_starts_at_zero():
    assert SuspendedTaskCounter().count() == 0


def test_suspended_counter_counts_faults():
    counter = SuspendedTaskCounter()
    counter.task_fault()
    counter.task_fault(None, "thread-id")
    counter.task_fault(object())
    assert counter.count() == 3


def test_suspended_counter_is_thread_safe():
    counter = SuspendedTaskCounter()
    per_thread = 500
    threads = [
        threading.Thread(target=lambda: [counter.task_fault() for _ in range(per_thread)])
        for _ in range(4)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert counter.count() == per_thread * len(threads)