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
from typing import Optional, TextIO, Union

from coreason_tint.colors import level_labels
from coreason_tint.encoders import ConsoleEncoder, color_level_encoder, production_encoder_config, short_caller_encoder
from coreason_tint.levels import AtomicLevel, Level
from coreason_tint.logger import LoggerHandle, build_logger
from coreason_tint.writers import LockedWriter


def new(min_level: Union[str, Level] = Level.INFO, stream: Optional[TextIO] = None) -> LoggerHandle:
    """
    Creates a console logger writing colorized lines to standard output.

    Lines read ``LEVEL<TAB>[file:line]<TAB>message<TAB>{fields}`` with no timestamp.
    The returned handle exposes the threshold so it can be changed later.

    Args:
        min_level: Minimum level written, as a Level or a level name.
        stream: Output stream; defaults to ``sys.stdout`` at call time.
    """
    level = Level.parse(min_level)
    atom = AtomicLevel()

    # Use the production config as template, without timestamps.
    encoder_config = production_encoder_config()
    encoder_config.time_key = ""

    level_labels()
    encoder_config.encode_level = color_level_encoder
    encoder_config.encode_caller = short_caller_encoder

    writer = LockedWriter(stream if stream is not None else sys.stdout)
    logger = build_logger([writer], ConsoleEncoder(encoder_config), atom)
    sugar = logger.sugar()

    atom.set_level(level)

    sugar.debug("Initialized logging")
    sugar.debugf("Set logging level to %s", str(atom).upper())

    return LoggerHandle(logger, sugar, atom)
