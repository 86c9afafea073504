# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tint

import json
import traceback
from datetime import datetime
from typing import Any, Dict, List, Union

from coreason_tint.colors import UNKNOWN_LEVEL_COLOR, level_labels
from coreason_tint.interfaces import CallerEncoder, LevelEncoder, PrimitiveArrayEncoder, TimeEncoder
from coreason_tint.levels import Level
from coreason_tint.schemas import EncoderConfig, EntryCaller

# Keys under record["extra"] owned by this package. They never render as fields.
RESERVED_PREFIX = "_tint_"
PREFIX_KEY = RESERVED_PREFIX + "prefix"
SUFFIX_KEY = RESERVED_PREFIX + "suffix"
LINE_KEY = RESERVED_PREFIX + "line"

FIELD_SEPARATOR = "\t"


class StringArrayEncoder:
    """Collects appended values in order."""

    def __init__(self) -> None:
        self.elements: List[str] = []

    def append_string(self, value: str) -> None:
        self.elements.append(value)


def _capital_string(level: Union[Level, str]) -> str:
    if isinstance(level, Level):
        return level.capital_string()
    return str(level).upper()


def color_level_encoder(level: Union[Level, str], enc: PrimitiveArrayEncoder) -> None:
    """
    Appends the colorized capital level name.
    Known levels come from the pre-rendered labels; anything else gets the fallback color.
    """
    label = level_labels().get(level) if isinstance(level, Level) else None
    if label is None:
        label = UNKNOWN_LEVEL_COLOR.add(_capital_string(level))
    enc.append_string(label)


def capital_level_encoder(level: Union[Level, str], enc: PrimitiveArrayEncoder) -> None:
    enc.append_string(_capital_string(level))


def lowercase_level_encoder(level: Union[Level, str], enc: PrimitiveArrayEncoder) -> None:
    enc.append_string(_capital_string(level).lower())


def short_caller_encoder(caller: EntryCaller, enc: PrimitiveArrayEncoder) -> None:
    """
    Appends "[file:line]" using only the part of the path after the last "/".
    """
    if not caller.defined:
        enc.append_string("undefined")
        return
    idx = caller.file.rfind("/")
    if idx == -1:
        enc.append_string(caller.file)
        return
    enc.append_string(f"[{caller.file[idx + 1:]}:{caller.line}]")


def full_caller_encoder(caller: EntryCaller, enc: PrimitiveArrayEncoder) -> None:
    if not caller.defined:
        enc.append_string("undefined")
        return
    enc.append_string(caller.full_path())


def millis_time_encoder(t: datetime, enc: PrimitiveArrayEncoder) -> None:
    """Appends the time as YYYY-MM-DD HH:MM:SS.mmm."""
    enc.append_string(t.strftime("%Y-%m-%d %H:%M:%S.") + f"{t.microsecond // 1000:03d}")


def iso8601_time_encoder(t: datetime, enc: PrimitiveArrayEncoder) -> None:
    enc.append_string(t.isoformat(timespec="milliseconds"))


def production_encoder_config() -> EncoderConfig:
    """
    Default field layout used as the template of every logger.
    """
    return EncoderConfig(
        time_key="ts",
        level_key="level",
        caller_key="caller",
        message_key="msg",
        stacktrace_key="stacktrace",
        encode_time=iso8601_time_encoder,
        encode_level=lowercase_level_encoder,
        encode_caller=short_caller_encoder,
    )


def record_level(record: Dict[str, Any]) -> Union[Level, str]:
    """The Level of a loguru record, or its raw name when outside the known set."""
    name = record["level"].name
    level = Level.lookup(name)
    return level if level is not None else name


def record_fields(record: Dict[str, Any]) -> Dict[str, Any]:
    """Structured fields bound to a record, without the reserved keys."""
    return {k: v for k, v in record["extra"].items() if not k.startswith(RESERVED_PREFIX)}


def _encode_fields(fields: Dict[str, Any]) -> str:
    return json.dumps(fields, default=str, ensure_ascii=False, separators=(",", ":"))


def _encode_one(encode: Any, value: Any) -> str:
    enc = StringArrayEncoder()
    encode(value, enc)
    return "".join(enc.elements)


class _Encoder:
    def __init__(self, config: EncoderConfig) -> None:
        self.config = config
        self.encode_time: TimeEncoder = config.encode_time or iso8601_time_encoder
        self.encode_level: LevelEncoder = config.encode_level or capital_level_encoder
        self.encode_caller: CallerEncoder = config.encode_caller or short_caller_encoder

    def _header(self, record: Dict[str, Any]) -> Dict[str, str]:
        """Encoded time, level and caller, keyed by their configured keys."""
        header: Dict[str, str] = {}
        if self.config.time_key:
            header[self.config.time_key] = _encode_one(self.encode_time, record["time"])
        if self.config.level_key:
            header[self.config.level_key] = _encode_one(self.encode_level, record_level(record))
        if self.config.caller_key:
            header[self.config.caller_key] = _encode_one(self.encode_caller, EntryCaller.from_record(record))
        return header


class ConsoleEncoder(_Encoder):
    """
    loguru format callable producing tab separated, human-readable lines:
    time, level, caller, message, then the fields as a JSON object.
    """

    def __init__(self, config: EncoderConfig) -> None:
        super().__init__(config)
        self.template = "{extra[" + PREFIX_KEY + "]}{message}{extra[" + SUFFIX_KEY + "]}\n"
        if config.stacktrace_key:
            self.template += "{exception}"

    def __call__(self, record: Dict[str, Any]) -> str:
        fields = record_fields(record)
        header = list(self._header(record).values())
        record["extra"][PREFIX_KEY] = "".join(value + FIELD_SEPARATOR for value in header)
        record["extra"][SUFFIX_KEY] = FIELD_SEPARATOR + _encode_fields(fields) if fields else ""
        return self.template


class JSONEncoder(_Encoder):
    """
    loguru format callable producing one JSON object per line.
    """

    template = "{extra[" + LINE_KEY + "]}\n"

    def __call__(self, record: Dict[str, Any]) -> str:
        fields = record_fields(record)
        entry: Dict[str, Any] = dict(self._header(record))
        if self.config.message_key:
            entry[self.config.message_key] = record["message"]
        entry.update(fields)
        if self.config.stacktrace_key and record["exception"] is not None:
            exc_type, exc_value, exc_tb = record["exception"]
            entry[self.config.stacktrace_key] = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
        record["extra"][LINE_KEY] = _encode_fields(entry)
        return self.template
