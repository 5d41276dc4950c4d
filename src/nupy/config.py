"""Global configuration for the nuPython front end.

A single module-level ``config`` object is shared by the scanner, the
parser and the CLI. Defaults can be changed from the environment:

- ``NUPY_DEBUG=1`` turns on debug logs for every level
- ``NUPY_LOG_LEVEL=debug|info|warning|error``
- ``NUPY_LEGACY_COMMENTS=1`` bumps the line counter when ``#`` is seen
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass, field, fields
from typing import Dict, Iterator

from .nupy_token import KEYWORDS, TokenKind

_LEVELS = {"debug": 10, "info": 20, "warning": 30, "error": 40}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class NupyConfig:
    terminator: str = "$"
    comment_marker: str = "#"
    legacy_comment_line_count: bool = False
    enable_debug_logs: bool = False
    log_level: str = "warning"
    keywords: Dict[str, TokenKind] = field(default_factory=lambda: dict(KEYWORDS))

    @classmethod
    def from_env(cls) -> "NupyConfig":
        cfg = cls()
        cfg.enable_debug_logs = _env_flag("NUPY_DEBUG")
        cfg.legacy_comment_line_count = _env_flag("NUPY_LEGACY_COMMENTS")
        level = os.environ.get("NUPY_LOG_LEVEL", "").strip().lower()
        if level in _LEVELS:
            cfg.log_level = level
        return cfg

    def should_log(self, level: str) -> bool:
        if self.enable_debug_logs:
            return True
        return _LEVELS.get(level, 0) >= _LEVELS.get(self.log_level, 30)

    @contextmanager
    def override(self, **changes) -> Iterator["NupyConfig"]:
        """Temporarily replace attributes, restoring them on exit."""
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise AttributeError(f"unknown config option(s): {', '.join(sorted(unknown))}")
        saved = {name: getattr(self, name) for name in changes}
        for name, value in changes.items():
            setattr(self, name, value)
        try:
            yield self
        finally:
            for name, value in saved.items():
                setattr(self, name, value)


config = NupyConfig.from_env()
