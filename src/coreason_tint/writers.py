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
from typing import TextIO


class LockedWriter:
    """
    Serializes writes to a shared text stream so concurrent records never
    interleave mid-line.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self._lock = threading.Lock()

    def write(self, message: str) -> int:
        with self._lock:
            return self.stream.write(message)

    def flush(self) -> None:
        with self._lock:
            flush = getattr(self.stream, "flush", None)
            if flush is not None:
                flush()
