# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tint

import threading
from enum import IntEnum
from typing import Any, Dict, Optional, Union

from loguru import logger


class Level(IntEnum):
    """
    Severity levels, ordered DEBUG < INFO < WARN < ERROR < DPANIC < PANIC < FATAL.

    Values sit on loguru's numeric scale so thresholds compare directly against
    ``record["level"].no``.
    """

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    DPANIC = 43
    PANIC = 46
    FATAL = 50

    def __str__(self) -> str:
        return self.name.lower()

    def capital_string(self) -> str:
        return self.name

    @property
    def loguru_name(self) -> str:
        """Name of the matching level inside loguru."""
        return _LOGURU_NAMES.get(self, self.name)

    @classmethod
    def lookup(cls, name: str) -> Optional["Level"]:
        """
        Resolves a loguru level name to a Level.
        Returns None for levels outside the known set (TRACE, SUCCESS, custom ones).
        """
        if name in cls.__members__:
            return cls[name]
        return _ALIASES.get(name)

    @classmethod
    def parse(cls, text: Union[str, "Level"]) -> "Level":
        """Parses a level name such as "info" or "WARN"."""
        if isinstance(text, Level):
            return text
        level = cls.lookup(str(text).strip().upper())
        if level is None:
            raise ValueError(f"unrecognized level: {text!r}")
        return level


_LOGURU_NAMES: Dict[Level, str] = {
    Level.WARN: "WARNING",
    Level.FATAL: "CRITICAL",
}

_ALIASES: Dict[str, Level] = {name: level for level, name in _LOGURU_NAMES.items()}

# Levels loguru does not ship with.
_CUSTOM_LEVELS = (Level.DPANIC, Level.PANIC)

_register_lock = threading.Lock()


def register_levels(target: Any = logger) -> None:
    """
    Registers DPANIC and PANIC with a loguru logger, the global one by default.
    Safe to call any number of times from any thread.
    """
    with _register_lock:
        for level in _CUSTOM_LEVELS:
            try:
                target.level(level.loguru_name)
            except ValueError:
                target.level(level.loguru_name, no=int(level), color="<red><bold>")


class AtomicLevel:
    """
    Thread-safe minimum level cell.

    Every log record checks it, so the threshold can be raised or lowered at
    runtime without rebuilding the logger.
    """

    def __init__(self, level: Level = Level.DEBUG) -> None:
        self._lock = threading.Lock()
        self._level = level

    def level(self) -> Level:
        with self._lock:
            return self._level

    def set_level(self, level: Union[str, Level]) -> None:
        parsed = Level.parse(level)
        with self._lock:
            self._level = parsed

    def enabled(self, no: int) -> bool:
        """True when a record of severity ``no`` passes the threshold."""
        return no >= self.level()

    def __str__(self) -> str:
        return str(self.level())

    def __repr__(self) -> str:
        return f"AtomicLevel({self.level().name})"
