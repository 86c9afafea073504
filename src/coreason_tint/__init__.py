# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tint

"""
coreason-tint
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .colors import LEVEL_COLORS, UNKNOWN_LEVEL_COLOR, Color, ColorSpec, render
from .console import new
from .file import FileLoggerConfig, new_file_logger
from .levels import AtomicLevel, Level
from .logger import Logger, LoggerHandle, PanicError, SugaredLogger

__all__ = [
    "Color",
    "ColorSpec",
    "render",
    "LEVEL_COLORS",
    "UNKNOWN_LEVEL_COLOR",
    "Level",
    "AtomicLevel",
    "Logger",
    "SugaredLogger",
    "LoggerHandle",
    "PanicError",
    "new",
    "new_file_logger",
    "FileLoggerConfig",
]
