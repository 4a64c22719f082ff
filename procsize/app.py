from __future__ import annotations
import sys
from typing import List, Optional

from .config import USAGE, DEFAULT_CONFIG, AppConfig
from .collectors import get_last_log_for_period
from .analyzer import generate_process_list
from .view import display


def print_usage() -> None:
    print(USAGE)


def get_period_from_arguments(argv: List[str]) -> str:
    """argv without the program name. Returns "" after printing usage if it isn't exactly one argument."""
    if len(argv) != 1:
        print_usage()
        return ""
    return argv[0]


def run(period: str, cfg: AppConfig = DEFAULT_CONFIG) -> None:
    entries = get_last_log_for_period(period, cfg)
    process_list = generate_process_list(entries)
    if process_list:
        display(process_list, cfg=cfg)


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    period = get_period_from_arguments(argv)
    if not period:
        return 0

    run(period)
    return 0


if __name__ == "__main__":
    sys.exit(main())
