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
from datetime import datetime
from types import SimpleNamespace
from typing import Any, Dict

import pytest

from coreason_tint.encoders import (
    LINE_KEY,
    PREFIX_KEY,
    SUFFIX_KEY,
    ConsoleEncoder,
    JSONEncoder,
    StringArrayEncoder,
    capital_level_encoder,
    color_level_encoder,
    full_caller_encoder,
    millis_time_encoder,
    production_encoder_config,
    record_fields,
    record_level,
    short_caller_encoder,
)
from coreason_tint.levels import Level
from coreason_tint.schemas import EncoderConfig, EntryCaller


def make_record(level: str = "INFO", message: str = "hello", **extra: Any) -> Dict[str, Any]:
    """Minimal stand-in for a loguru record."""
    return {
        "level": SimpleNamespace(name=level, no=20),
        "time": datetime(2025, 3, 4, 5, 6, 7, 89000),
        "file": SimpleNamespace(name="job.py", path="/srv/app/jobs/job.py"),
        "line": 12,
        "message": message,
        "extra": dict(extra),
        "exception": None,
    }


def encode(encoder: Any, value: Any) -> str:
    enc = StringArrayEncoder()
    encoder(value, enc)
    assert len(enc.elements) == 1
    return enc.elements[0]


# --- Caller ---


def test_caller_undefined() -> None:
    assert encode(short_caller_encoder, EntryCaller(defined=False)) == "undefined"


def test_caller_keeps_last_component() -> None:
    caller = EntryCaller(defined=True, file="a/b/c.go", line=42)
    assert encode(short_caller_encoder, caller) == "[c.go:42]"


def test_caller_without_separator() -> None:
    caller = EntryCaller(defined=True, file="nosep.go", line=1)
    assert encode(short_caller_encoder, caller) == "nosep.go"


def test_caller_trailing_separator() -> None:
    caller = EntryCaller(defined=True, file="dir/", line=3)
    assert encode(short_caller_encoder, caller) == "[:3]"


def test_full_caller() -> None:
    caller = EntryCaller(defined=True, file="a/b/c.py", line=7)
    assert encode(full_caller_encoder, caller) == "a/b/c.py:7"
    assert encode(full_caller_encoder, EntryCaller(defined=False)) == "undefined"


def test_entry_caller_from_record() -> None:
    caller = EntryCaller.from_record(make_record())
    assert caller == EntryCaller(defined=True, file="/srv/app/jobs/job.py", line=12)


def test_entry_caller_from_record_without_file() -> None:
    record = make_record()
    record["file"] = None
    assert not EntryCaller.from_record(record).defined


# --- Level ---


@pytest.mark.parametrize(
    "level, expected",
    [
        (Level.DEBUG, "\x1b[35mDEBUG\x1b[0m"),
        (Level.INFO, "\x1b[36mINFO\x1b[0m"),
        (Level.WARN, "\x1b[33mWARN\x1b[0m"),
        (Level.ERROR, "\x1b[31mERROR\x1b[0m"),
        (Level.DPANIC, "\x1b[31;1mDPANIC\x1b[0m"),
    ],
)
def test_color_level_encoder_known(level: Level, expected: str) -> None:
    assert encode(color_level_encoder, level) == expected


def test_color_level_encoder_unknown_uses_fallback() -> None:
    assert encode(color_level_encoder, "success") == "\x1b[31;1mSUCCESS\x1b[0m"


def test_capital_level_encoder() -> None:
    assert encode(capital_level_encoder, Level.WARN) == "WARN"
    assert encode(capital_level_encoder, "trace") == "TRACE"


def test_millis_time_encoder() -> None:
    t = datetime(2025, 1, 2, 3, 4, 5, 6789)
    assert encode(millis_time_encoder, t) == "2025-01-02 03:04:05.006"


# --- Records ---


def test_record_level_maps_loguru_names() -> None:
    assert record_level(make_record("WARNING")) is Level.WARN
    assert record_level(make_record("CRITICAL")) is Level.FATAL
    assert record_level(make_record("TRACE")) == "TRACE"


def test_record_fields_skips_reserved_keys() -> None:
    record = make_record(**{PREFIX_KEY: "INFO\t", "user": "alice"})
    assert record_fields(record) == {"user": "alice"}


# --- Line encoders ---


def test_console_encoder_layout() -> None:
    config = production_encoder_config()
    config.time_key = ""
    config.encode_level = color_level_encoder
    record = make_record(user="alice", n=2)

    template = ConsoleEncoder(config)(record)

    assert template == "{extra[" + PREFIX_KEY + "]}{message}{extra[" + SUFFIX_KEY + "]}\n{exception}"
    assert record["extra"][PREFIX_KEY] == "\x1b[36mINFO\x1b[0m\t[job.py:12]\t"
    assert record["extra"][SUFFIX_KEY] == '\t{"user":"alice","n":2}'


def test_console_encoder_without_fields_or_stacktrace() -> None:
    config = EncoderConfig(
        time_key="T",
        level_key="L",
        caller_key="",
        message_key="M",
        stacktrace_key="",
        encode_time=millis_time_encoder,
        encode_level=capital_level_encoder,
    )
    record = make_record()

    template = ConsoleEncoder(config)(record)

    assert "{exception}" not in template
    assert record["extra"][PREFIX_KEY] == "2025-03-04 05:06:07.089\tINFO\t"
    assert record["extra"][SUFFIX_KEY] == ""


def test_json_encoder() -> None:
    encoder = JSONEncoder(production_encoder_config())
    record = make_record("WARNING", "careful", attempt=2)

    encoder(record)
    entry = json.loads(record["extra"][LINE_KEY])

    assert entry["level"] == "warn"
    assert entry["caller"] == "[job.py:12]"
    assert entry["msg"] == "careful"
    assert entry["attempt"] == 2
    assert entry["ts"].startswith("2025-03-04T05:06:07.089")
    assert "stacktrace" not in entry
