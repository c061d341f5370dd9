"""Work out how many per-CPU slots an array needs to cover every possible CPU."""

from __future__ import annotations

import os
import re
import threading

SYSFS_CPU_DIR = "/sys/devices/system/cpu"
POSSIBLE_MASK_PATH = "/sys/devices/system/cpu/possible"
CPUMASK_SIZE = 4096

INT_MAX = 2**31 - 1
LONG_MAX = 2**63 - 1

_C_SPACE = "[ \t\n\v\f\r]"
_CPU_DIR_SUFFIX = re.compile(_C_SPACE + r"*([+-]?[0-9]+)")
_MASK_NUMBER = re.compile(_C_SPACE + r"*([+-]?)([0-9]+)")

_cache_lock = threading.Lock()
_cached_len = 0


def max_cpuid_from_sysfs(path: str | os.PathLike = SYSFS_CPU_DIR) -> int | None:
    """Return the highest id among ``cpuN`` subdirectories of *path*.

    Returns ``None`` when the directory cannot be read, holds no such
    subdirectory, or the highest id is out of the ``int`` range.
    """
    max_cpuid = -1
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                if not entry.name.startswith("cpu"):
                    continue
                try:
                    if not entry.is_dir(follow_symlinks=False):
                        continue
                except OSError:
                    continue
                match = _CPU_DIR_SUFFIX.fullmatch(entry.name[3:])
                if match is None:
                    continue
                cpu_id = int(match.group(1))
                if cpu_id >= LONG_MAX:
                    continue
                max_cpuid = max(max_cpuid, cpu_id)
    except OSError:
        return None

    if max_cpuid < 0 or max_cpuid > INT_MAX:
        return None
    return max_cpuid


def read_cpu_mask(path: str | os.PathLike = POSSIBLE_MASK_PATH,
                  max_bytes: int = CPUMASK_SIZE) -> str:
    """Read a CPU mask string from *path*, keeping at most ``max_bytes - 1`` bytes.

    Raises ``OSError`` if the file cannot be read.
    """
    if max_bytes < 1:
        raise ValueError("max_bytes must be at least 1")
    with open(path, "rb") as handle:
        data = handle.read(max_bytes)
    if len(data) >= max_bytes:
        data = data[: max_bytes - 1]
    return data.decode("latin-1")


def max_cpuid_from_mask(mask: str) -> int:
    """Return the last CPU id of a mask such as ``"0-7,9-11"``.

    Raises ``ValueError`` if no id can be read or it does not fit an ``int``.
    """
    if not mask:
        raise ValueError("empty CPU mask")

    start = 0
    for pos in range(len(mask) - 1, 0, -1):
        if mask[pos] in ",-":
            start = pos + 1
            break

    match = _MASK_NUMBER.match(mask, start)
    if match is None:
        raise ValueError(f"no CPU id at the end of mask {mask!r}")
    negative = match.group(1) == "-"
    cpu_index = int(match.group(2))
    if (negative and cpu_index != 0) or cpu_index >= INT_MAX:
        raise ValueError(f"CPU id out of range in mask {mask!r}")
    return cpu_index


def _configured_processors() -> int:
    try:
        return os.sysconf("SC_NPROCESSORS_CONF")
    except (AttributeError, ValueError, OSError):
        count = os.cpu_count()
        return count if count else -1


def num_possible_cpus_fallback(cpu_dir: str | os.PathLike = SYSFS_CPU_DIR) -> int:
    """Return the larger of the configured processor count and the sysfs CPU count.

    A result of 0 or less means neither source gave an answer.
    """
    max_cpuid = max_cpuid_from_sysfs(cpu_dir)
    sysfs_count = 0 if max_cpuid is None else max_cpuid + 1
    return max(_configured_processors(), sysfs_count)


def compute_possible_cpus_array_len(
    possible_path: str | os.PathLike = POSSIBLE_MASK_PATH,
    cpu_dir: str | os.PathLike = SYSFS_CPU_DIR,
) -> int:
    """Compute the per-CPU array length without touching the cache.

    The possible-CPU mask is tried first, then the fallback sources.
    Returns 0 if every method failed.
    """
    result = None
    try:
        mask = read_cpu_mask(possible_path, CPUMASK_SIZE)
    except OSError:
        mask = ""
    if mask:
        try:
            result = max_cpuid_from_mask(mask) + 1
        except ValueError:
            result = None
    if result is None:
        result = num_possible_cpus_fallback(cpu_dir)
    return result if result >= 1 else 0


def possible_cpus_array_len() -> int:
    """Return the cached per-CPU array length, computing it on first use.

    A failed computation is not cached and yields 0.
    """
    global _cached_len
    with _cache_lock:
        if not _cached_len:
            value = compute_possible_cpus_array_len()
            if value >= 1:
                _cached_len = value
        return _cached_len


def clear_cache() -> None:
    """Forget the cached array length."""
    global _cached_len
    with _cache_lock:
        _cached_len = 0