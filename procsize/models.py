from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional


class LogDecodeError(ValueError):
    """Log output does not have the expected shape."""


def _int_field(obj: dict, key: str) -> int:
    if key not in obj:
        raise LogDecodeError(f"missing field '{key}'")
    value = obj[key]
    # bool is an int subclass, JSON true/false is not a number
    if isinstance(value, bool) or not isinstance(value, int):
        raise LogDecodeError(f"field '{key}' is not an integer: {value!r}")
    return value


@dataclass(frozen=True)
class LogEntry:
    trace_id: int
    process_image_path: Optional[str]
    process_id: int

    @classmethod
    def from_json(cls, obj: Any) -> "LogEntry":
        if not isinstance(obj, dict):
            raise LogDecodeError(f"log entry is not an object: {obj!r}")
        path = obj.get("processImagePath")
        if path is not None and not isinstance(path, str):
            raise LogDecodeError(f"field 'processImagePath' is not a string: {path!r}")
        return cls(
            trace_id=_int_field(obj, "traceID"),
            process_image_path=path,
            process_id=_int_field(obj, "processID"),
        )


@dataclass
class ProcessAggregate:
    image_size: int
    process_ids: List[int] = field(default_factory=list)

    def add_pid(self, pid: int) -> None:
        if pid not in self.process_ids:
            self.process_ids.append(pid)
