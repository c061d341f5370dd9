# possiblecpus

Find the length of an array that can hold one element for every CPU id
that the current process could possibly see during its lifetime.

The number comes from the kernel's possible-CPU mask
(`/sys/devices/system/cpu/possible`). If that mask can't be read or
parsed, the package falls back to the larger of two values: the number of
configured processors, and one more than the highest `cpuN` directory
under `/sys/devices/system/cpu`. CPU ids are assumed to be contiguous up
to the highest one.

## Installation

```
pip install possiblecpus
```

## Command line

```
possiblecpus
```

This prints the array length and exits with status 0. If no method gives
a usable value, it prints an error message to standard error and exits
with status 1.

Two options let you point the lookup at other files:

- `--mask PATH` — the file holding the possible-CPU mask
  (default `/sys/devices/system/cpu/possible`).
- `--cpu-dir PATH` — the directory holding the `cpuN` subdirectories
  (default `/sys/devices/system/cpu`).

The command always computes the value afresh; it does not use the cache
described below.

## Library use

```python
from possiblecpus.smp import possible_cpus_array_len

counters = [0] * possible_cpus_array_len()
```

`possible_cpus_array_len()` stores the first successful result in a cache.
It returns 0 if every method fails, and in that case it caches nothing, so
the next call tries again. Call `clear_cache()` to make the next call look
the value up again.

The helpers it is built from, all in `possiblecpus.smp`, are public too:

- `read_cpu_mask(path, max_bytes)` reads a CPU mask file and keeps at most
  `max_bytes - 1` bytes of it. It raises `OSError` if the file cannot be
  read and `ValueError` if `max_bytes` is less than 1.
- `max_cpuid_from_mask(mask)` returns the last CPU id in a mask such as
  `"0-7"` or `"0,2-5"`. It raises `ValueError` if the mask is empty, no id
  can be read, or the id does not fit a 32-bit signed integer.
- `max_cpuid_from_sysfs(path)` returns the highest `cpuN` directory index,
  or `None` if the directory can't be read, holds no such directory, or
  the index is out of range.
- `num_possible_cpus_fallback(cpu_dir)` computes the fallback value; a
  result of 0 or less means neither source gave an answer.
- `compute_possible_cpus_array_len(possible_path, cpu_dir)` does the whole
  lookup against the paths you give it, with no caching, and returns 0 if
  every method fails.

## Running the tests

```
pip install -e ".[test]"
pytest
```