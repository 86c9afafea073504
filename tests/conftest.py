# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tint

import io
from typing import Generator

import pytest

from coreason_tint.console import new
from coreason_tint.logger import LoggerHandle

# --- Fixtures ---


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(stream: io.StringIO) -> Generator[LoggerHandle, None, None]:
    """
    Console logger at DEBUG writing into an in-memory stream.
    The two startup lines are discarded.
    """
    handle = new("debug", stream=stream)
    stream.truncate(0)
    stream.seek(0)
    yield handle
    handle.close()
