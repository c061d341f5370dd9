import pytest

from possiblecpus import smp


def _make_cpu_dir(root, names):
    for name in names:
        (root / name).mkdir()
    return root


def test_max_cpuid_from_sysfs_picks_highest(tmp_path):
    _make_cpu_dir(tmp_path, ["cpu0", "cpu1", "cpu7", "cpufreq", "cpuidle"])
    assert smp.max_cpuid_from_sysfs(tmp_path) == 7


def test_max_cpuid_from_sysfs_ignores_files(tmp_path):
    _make_cpu_dir(tmp_path, ["cpu0", "cpu2"])
    (tmp_path / "cpu9").write_text("")
    assert smp.max_cpuid_from_sysfs(tmp_path) == 2


def test_max_cpuid_from_sysfs_ignores_trailing_garbage(tmp_path):
    _make_cpu_dir(tmp_path, ["cpu3", "cpu12x", "cpu"])
    assert smp.max_cpuid_from_sysfs(tmp_path) == 3


def test_max_cpuid_from_sysfs_none_when_empty(tmp_path):
    assert smp.max_cpuid_from_sysfs(tmp_path) is None


def test_max_cpuid_from_sysfs_none_when_missing(tmp_path):
    assert smp.max_cpuid_from_sysfs(tmp_path / "missing") is None


def test_max_cpuid_from_sysfs_rejects_out_of_int_range(tmp_path):
    _make_cpu_dir(tmp_path, ["cpu4294967296"])
    assert smp.max_cpuid_from_sysfs(tmp_path) is None


def test_read_cpu_mask_round_trip(tmp_path):
    path = tmp_path / "possible"
    path.write_text("0-7\n")
    assert smp.read_cpu_mask(path) == "0-7\n"


def test_read_cpu_mask_truncates(tmp_path):
    path = tmp_path / "possible"
    path.write_text("0-127")
    assert smp.read_cpu_mask(path, 4) == "0-1"


def test_read_cpu_mask_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        smp.read_cpu_mask(tmp_path / "missing")


@pytest.mark.parametrize(
    "mask, expected",
    [
        ("0-7\n", 7),
        ("0,2,5", 5),
        ("3", 3),
        ("0-3,8-11\n", 11),
        ("0-2147483646", 2147483646),
    ],
)
def test_max_cpuid_from_mask(mask, expected):
    assert smp.max_cpuid_from_mask(mask) == expected


@pytest.mark.parametrize("mask", ["", "0-", "abc", "0-2147483647", "-5"])
def test_max_cpuid_from_mask_errors(mask):
    with pytest.raises(ValueError):
        smp.max_cpuid_from_mask(mask)


def test_fallback_covers_sysfs_ids(tmp_path):
    _make_cpu_dir(tmp_path, ["cpu0", "cpu511"])
    assert smp.num_possible_cpus_fallback(tmp_path) >= 511 + 1


def test_compute_uses_mask(tmp_path):
    mask = tmp_path / "possible"
    mask.write_text("0-3\n")
    assert smp.compute_possible_cpus_array_len(mask, tmp_path) == 3 + 1


def test_compute_falls_back_when_mask_missing(tmp_path):
    _make_cpu_dir(tmp_path, ["cpu0", "cpu63"])
    result = smp.compute_possible_cpus_array_len(tmp_path / "missing", tmp_path)
    assert result == smp.num_possible_cpus_fallback(tmp_path)
    assert result >= 63 + 1


def test_compute_falls_back_when_mask_unparsable(tmp_path):
    mask = tmp_path / "possible"
    mask.write_text("garbage")
    cpus = tmp_path / "cpus"
    cpus.mkdir()
    _make_cpu_dir(cpus, ["cpu5"])
    result = smp.compute_possible_cpus_array_len(mask, cpus)
    assert result == smp.num_possible_cpus_fallback(cpus)


def test_possible_cpus_array_len_is_cached():
    smp.clear_cache()
    first = smp.possible_cpus_array_len()
    second = smp.possible_cpus_array_len()
    assert first == second
    assert first == smp.compute_possible_cpus_array_len()
    smp.clear_cache()