from __future__ import annotations
import sys
import unicodedata
from typing import Dict, List, Optional, TextIO

from .config import AppConfig, DEFAULT_CONFIG
from .models import ProcessAggregate


def display_length(item: str) -> int:
    """Visible character count: combining marks do not take a column of their own."""
    return sum(1 for ch in unicodedata.normalize("NFC", item) if not unicodedata.combining(ch))


def sort_key(path: str):
    # canonically equivalent (NFC vs NFD) paths compare equal first
    return (unicodedata.normalize("NFC", path), path)


def pump_spaces(item: str, min_width: int) -> str:
    """Right-pad with spaces up to min_width. Longer strings are left as is."""
    return item + " " * max(0, min_width - display_length(item))


def render_table(
    process_data: Dict[str, ProcessAggregate],
    cfg: AppConfig = DEFAULT_CONFIG,
) -> List[str]:
    c1 = cfg.pids_column_width
    c2 = cfg.image_column_width

    lines = [""]
    lines.append(
        pump_spaces(" ProcessIDs", c1)
        + " "
        + pump_spaces("ProcessImage", c2)
        + " "
        + "ProcessImageSize"
    )
    lines.append("-" * cfg.separator_width)

    # Descending by path
    for path in sorted(process_data, key=sort_key, reverse=True):
        meta = process_data[path]
        pids = "".join(f" {pid}" for pid in meta.process_ids)
        lines.append(
            pump_spaces(pids, c1)
            + " "
            + pump_spaces(path, c2)
            + " "
            + str(meta.image_size)
        )

    lines.append("")
    return lines


def display(
    process_data: Dict[str, ProcessAggregate],
    out: Optional[TextIO] = None,
    cfg: AppConfig = DEFAULT_CONFIG,
) -> None:
    if out is None:
        out = sys.stdout
    for line in render_table(process_data, cfg):
        print(line, file=out)
