"""Configuration for opening and decoding input sources."""

from __future__ import annotations

import copy
from dataclasses import dataclass, replace
from typing import Any, Optional


@dataclass
class ScanConfig:
    encoding: str = "utf-8"
    errors: str = "strict"  # codec error policy; "strict" makes bad bytes abort the scan
    newline: Optional[str] = None  # universal newlines

    def with_overrides(self, **overrides: Any) -> "ScanConfig":
        return replace(self, **{key: value for key, value in overrides.items() if value is not None})


_SCAN_CONFIG = ScanConfig()


def get_scan_config() -> ScanConfig:
    return copy.deepcopy(_SCAN_CONFIG)


def set_scan_config(config: ScanConfig) -> None:
    global _SCAN_CONFIG
    _SCAN_CONFIG = copy.deepcopy(config)
