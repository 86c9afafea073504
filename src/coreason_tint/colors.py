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
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from coreason_tint.levels import Level

RESET = "\x1b[0m"


class Color(IntEnum):
    """ANSI foreground colors."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37


class ColorSpec(BaseModel):
    """A foreground color, optionally bold/bright."""

    model_config = ConfigDict(frozen=True)

    color: Color
    bright: bool = False

    def add(self, text: str) -> str:
        return render(self, text)


def render(spec: ColorSpec, text: str) -> str:
    """
    Wraps text in the ANSI escape codes for ``spec`` and resets formatting at the end.
    """
    if spec.bright:
        return f"\x1b[{int(spec.color)};1m{text}{RESET}"
    return f"\x1b[{int(spec.color)}m{text}{RESET}"


LEVEL_COLORS: Mapping[Level, ColorSpec] = MappingProxyType(
    {
        Level.DEBUG: ColorSpec(color=Color.MAGENTA),
        Level.INFO: ColorSpec(color=Color.CYAN),
        Level.WARN: ColorSpec(color=Color.YELLOW),
        Level.ERROR: ColorSpec(color=Color.RED),
        Level.DPANIC: ColorSpec(color=Color.RED, bright=True),
        Level.PANIC: ColorSpec(color=Color.RED, bright=True),
        Level.FATAL: ColorSpec(color=Color.RED, bright=True),
    }
)

UNKNOWN_LEVEL_COLOR = ColorSpec(color=Color.RED, bright=True)

_labels_lock = threading.Lock()
_labels: Optional[Mapping[Level, str]] = None


def level_labels() -> Mapping[Level, str]:
    """
    Returns the colorized capital label of every known level.
    Rendered once on first use; the same read-only mapping is returned afterwards.
    """
    global _labels
    if _labels is not None:
        return _labels
    with _labels_lock:
        if _labels is None:
            rendered: Dict[Level, str] = {
                level: spec.add(level.capital_string()) for level, spec in LEVEL_COLORS.items()
            }
            _labels = MappingProxyType(rendered)
        return _labels
