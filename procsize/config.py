from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

LOG_COMMAND = "/usr/bin/log"

USAGE = """USAGE: RunningProcessSize <num>[s/m/h]

WARNING: entering 2h+ will take a while to parse...
"""

@dataclass(frozen=True)
class AppConfig:
    log_command: str = LOG_COMMAND
    # "{period}" is replaced with the CLI argument
    log_arguments: Tuple[str, ...] = ("show", "--last", "{period}", "--style=json")

    # Table layout
    pids_column_width: int = 25
    image_column_width: int = 50
    size_column_width: int = 25   # never padded, only counts toward the separator

    def log_argv(self, period: str) -> List[str]:
        return [a.replace("{period}", period) for a in self.log_arguments]

    @property
    def separator_width(self) -> int:
        return self.pids_column_width + self.image_column_width + self.size_column_width


DEFAULT_CONFIG = AppConfig()
