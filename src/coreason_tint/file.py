# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tint

import sys
from pathlib import Path
from typing import Any, List, Literal, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from coreason_tint.encoders import ConsoleEncoder, JSONEncoder, capital_level_encoder, millis_time_encoder
from coreason_tint.levels import AtomicLevel, Level
from coreason_tint.logger import Logger, build_logger
from coreason_tint.schemas import EncoderConfig
from coreason_tint.utils.logger import logger

_STANDARD_STREAMS = {
    "stdout": lambda: sys.stdout,
    "stderr": lambda: sys.stderr,
}


class FileLoggerConfig(BaseModel):
    """
    Declarative logger configuration.

    ``output_paths`` are file paths opened in append mode; "stdout" and
    "stderr" name the process streams.
    """

    level: Level
    development: bool = False
    disable_caller: bool = False
    disable_stacktrace: bool = False
    encoding: Literal["console", "json"] = "console"
    encoder_config: EncoderConfig
    output_paths: List[str] = Field(min_length=1)

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Level:
        return Level.parse(value)

    def _open_outputs(self) -> Tuple[List[Any], List[Any]]:
        outputs: List[Any] = []
        opened: List[Any] = []
        for path in self.output_paths:
            if path in _STANDARD_STREAMS:
                outputs.append(_STANDARD_STREAMS[path]())
                continue
            try:
                stream = open(path, "a", encoding="utf-8")
            except OSError as e:
                logger.error(f"Failed to open log output {path}: {e}")
                for f in opened:
                    f.close()
                raise
            opened.append(stream)
            outputs.append(stream)
        return outputs, opened

    def build(self) -> Logger:
        """
        Opens the outputs and returns a Logger writing to them.
        Raises the OSError of the first output that cannot be opened.
        """
        encoder_config = self.encoder_config.model_copy()
        if self.disable_caller:
            encoder_config.caller_key = ""
        if self.disable_stacktrace:
            encoder_config.stacktrace_key = ""

        if self.encoding == "console":
            formatter: Any = ConsoleEncoder(encoder_config)
        else:
            formatter = JSONEncoder(encoder_config)

        outputs, opened = self._open_outputs()
        try:
            return build_logger(
                outputs,
                formatter,
                AtomicLevel(self.level),
                development=self.development,
                closeables=opened,
            )
        except Exception:
            for f in opened:
                f.close()
            raise


def new_file_logger(min_level: Union[str, Level], path: Union[str, Path]) -> Logger:
    """
    Creates a logger appending plain, timestamped lines to ``path``.

    Lines read ``YYYY-MM-DD HH:MM:SS.mmm<TAB>LEVEL<TAB>message<TAB>{fields}``.
    There is no caller, no stacktrace and no color. The level is fixed.
    """
    cfg = FileLoggerConfig(
        level=min_level,
        development=False,
        disable_caller=True,
        disable_stacktrace=True,
        encoding="console",
        encoder_config=EncoderConfig(
            time_key="T",
            level_key="L",
            message_key="M",
            encode_time=millis_time_encoder,
            encode_level=capital_level_encoder,
        ),
        output_paths=[str(path)],
    )
    return cfg.build()
