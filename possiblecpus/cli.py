"""Command line entry point printing the possible-CPU array length."""

from __future__ import annotations

import argparse
import sys

from possiblecpus.smp import (
    POSSIBLE_MASK_PATH,
    SYSFS_CPU_DIR,
    compute_possible_cpus_array_len,
)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="possiblecpus",
        description="Print the length of an array holding one slot per possible CPU.",
    )
    parser.add_argument(
        "--mask",
        default=POSSIBLE_MASK_PATH,
        help="file holding the possible-CPU mask (default: %(default)s)",
    )
    parser.add_argument(
        "--cpu-dir",
        default=SYSFS_CPU_DIR,
        help="directory holding cpuN subdirectories (default: %(default)s)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Print the array length; return 0 on success and 1 if it is unknown."""
    args = _parser().parse_args(argv)
    length = compute_possible_cpus_array_len(args.mask, args.cpu_dir)
    if length < 1:
        print("possiblecpus: unable to determine the number of possible CPUs",
              file=sys.stderr)
        return 1
    print(length)
    return 0


if __name__ == "__main__":
    sys.exit(main())