from __future__ import annotations
import json
import subprocess
from typing import List, Optional, Sequence

from .config import AppConfig, DEFAULT_CONFIG
from .models import LogEntry, LogDecodeError


# ──────────────────────────────────────────────
# Subprocess runner
# ──────────────────────────────────────────────
def run_command(command: str, arguments: Sequence[str]) -> Optional[str]:
    """
    Run command synchronously and return its stdout on exit status 0.
    Both streams are fully captured before the status is looked at.
    Every failure is printed and returns None.
    """
    try:
        proc = subprocess.run(
            [command, *arguments],
            capture_output=True,
        )
    except OSError as e:
        print(f"ERROR: {e}")
        return None

    if proc.returncode != 0:
        try:
            message = proc.stderr.decode("utf-8")
        except UnicodeDecodeError:
            message = "unknown"
        print("ERROR: " + message)
        return None

    try:
        return proc.stdout.decode("utf-8")
    except UnicodeDecodeError:
        print("ERROR: log output is not valid UTF-8")
        return None


# ──────────────────────────────────────────────
# Log decoding
# ──────────────────────────────────────────────
def decode_log_entries(text: str) -> List[LogEntry]:
    """Parse `log show --style=json` output. One bad element rejects the batch."""
    # JSONDecodeError is a ValueError; oversized int literals raise a bare ValueError
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise LogDecodeError(f"malformed JSON: {e}") from e

    if not isinstance(data, list):
        raise LogDecodeError("log output is not a JSON array")

    return [LogEntry.from_json(item) for item in data]


def get_last_log_for_period(period: str, cfg: AppConfig = DEFAULT_CONFIG) -> List[LogEntry]:
    output = run_command(cfg.log_command, cfg.log_argv(period))
    if output is None:
        return []

    try:
        return decode_log_entries(output)
    except LogDecodeError as e:
        print(f"ERROR: {e}")
        return []
