from __future__ import annotations
import os
from typing import Callable, Dict, Iterable

from .models import LogEntry, ProcessAggregate


def file_size(path: str) -> int:
    try:
        return int(os.stat(path).st_size)
    except (OSError, ValueError):
        # missing, unreadable, or a path with an embedded NUL
        return 0


def generate_process_list(
    entries: Iterable[LogEntry],
    size_of: Callable[[str], int] = file_size,
) -> Dict[str, ProcessAggregate]:
    """
    Group log entries by process image path.

    - Entries without a path (None or "") are skipped.
    - The image size is read once, on the first sighting of a path, and kept
      for the rest of the run even if the file changes afterwards.
    - PIDs are kept in first-seen order without duplicates.
    """
    process_data: Dict[str, ProcessAggregate] = {}
    for entry in entries:
        path = entry.process_image_path or ""
        if not path:
            continue

        meta = process_data.get(path)
        if meta is None:
            process_data[path] = ProcessAggregate(
                image_size=size_of(path),
                process_ids=[entry.process_id],
            )
        else:
            meta.add_pid(entry.process_id)
    return process_data
