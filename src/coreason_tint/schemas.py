# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tint

from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict


class EntryCaller(BaseModel):
    """
    Call site of a log record: source file and line.
    """

    model_config = ConfigDict(frozen=True)

    defined: bool
    file: str = ""
    line: int = 0

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "EntryCaller":
        """
        Creates an EntryCaller from a loguru record.
        """
        path = record["file"].path if record.get("file") is not None else ""
        line = record.get("line")
        if not path or line is None:
            return cls(defined=False)
        return cls(defined=True, file=path, line=line)

    def full_path(self) -> str:
        return f"{self.file}:{self.line}"


class EncoderConfig(BaseModel):
    """
    Field layout of an encoded line.

    An empty key disables the field; for the json encoding the keys are also
    the object keys. The encode_* callables render the field values.
    """

    time_key: str = "ts"
    level_key: str = "level"
    caller_key: str = "caller"
    message_key: str = "msg"
    stacktrace_key: str = "stacktrace"

    encode_time: Optional[Callable[..., None]] = None
    encode_level: Optional[Callable[..., None]] = None
    encode_caller: Optional[Callable[..., None]] = None
