from __future__ import annotations

import pytest

from procsize.models import LogDecodeError, LogEntry, ProcessAggregate


def test_from_json_reads_known_fields_and_ignores_the_rest() -> None:
    e = LogEntry.from_json({
        "traceID": 123,
        "processImagePath": "/usr/libexec/logd",
        "processID": 88,
        "eventMessage": "hello",
        "subsystem": "com.apple.x",
    })
    assert e == LogEntry(trace_id=123, process_image_path="/usr/libexec/logd", process_id=88)


@pytest.mark.parametrize("obj", [
    {"traceID": 1, "processID": 2},
    {"traceID": 1, "processID": 2, "processImagePath": None},
])
def test_from_json_path_is_optional(obj) -> None:
    assert LogEntry.from_json(obj).process_image_path is None


@pytest.mark.parametrize("obj", [
    {"processID": 2},
    {"traceID": 1},
    {"traceID": "1", "processID": 2},
    {"traceID": 1, "processID": 2.5},
    {"traceID": True, "processID": 2},
    {"traceID": 1, "processID": 2, "processImagePath": 5},
    ["traceID", 1],
    None,
])
def test_from_json_rejects_schema_mismatch(obj) -> None:
    with pytest.raises(LogDecodeError):
        LogEntry.from_json(obj)


def test_add_pid_keeps_order_and_skips_duplicates() -> None:
    agg = ProcessAggregate(image_size=5, process_ids=[4])
    agg.add_pid(2)
    agg.add_pid(4)
    agg.add_pid(9)
    assert agg.process_ids == [4, 2, 9]
    assert agg.image_size == 5
