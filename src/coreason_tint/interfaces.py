# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tint

from datetime import datetime
from typing import Protocol, Union

from coreason_tint.levels import Level
from coreason_tint.schemas import EntryCaller


class PrimitiveArrayEncoder(Protocol):
    """
    Sink for the primitive values a field encoder produces.
    """

    def append_string(self, value: str) -> None:
        """
        Appends one rendered value.
        """
        ...


class LevelEncoder(Protocol):
    """
    Formats a severity label. Unknown loguru levels arrive as their name.
    """

    def __call__(self, level: Union[Level, str], enc: PrimitiveArrayEncoder) -> None: ...


class CallerEncoder(Protocol):
    """
    Formats a call-site descriptor.
    """

    def __call__(self, caller: EntryCaller, enc: PrimitiveArrayEncoder) -> None: ...


class TimeEncoder(Protocol):
    def __call__(self, t: datetime, enc: PrimitiveArrayEncoder) -> None: ...
