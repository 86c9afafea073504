# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_tint

import copy
import sys
import threading
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Tuple, Union

from loguru import logger as _loguru

from coreason_tint.levels import AtomicLevel, Level, register_levels

LevelLike = Union[Level, str]

_template_lock = threading.Lock()
_template: Optional[Any] = None


class PanicError(RuntimeError):
    """
    Raised after a PANIC record, or a DPANIC record in development mode, is written.
    """


class _Sinks:
    """
    The private loguru logger and output streams shared by a Logger and the loggers derived from it.
    """

    def __init__(self, core: Any, outputs: Sequence[Any], closeables: Iterable[Any]) -> None:
        self.core = core
        self.outputs = list(outputs)
        self.closeables = list(closeables)
        self.closed = False
        self._lock = threading.Lock()

    def sync(self) -> None:
        if self.closed:
            return
        for output in self.outputs:
            flush = getattr(output, "flush", None)
            if flush is not None:
                flush()

    def close(self) -> None:
        with self._lock:
            if self.closed:
                return
            self.closed = True
        self.core.remove()
        for stream in self.closeables:
            stream.close()


class Logger:
    """
    Structured logger writing to its own set of loguru sinks.

    Keyword arguments of the logging methods become structured fields of the record.
    """

    def __init__(self, core: Any, sinks: _Sinks, development: bool = False) -> None:
        self._core = core
        self._sinks = sinks
        self.development = development

    def _level_name(self, name: str) -> str:
        """The loguru level called ``name``, matched exactly first, then upper-cased."""
        try:
            self._core.level(name)
        except ValueError:
            return name.upper()
        return name

    def _emit(self, level: LevelLike, message: str, fields: Dict[str, Any], depth: int, exception: bool = False) -> None:
        # depth counts frames between this method and the user's call site.
        known = level if isinstance(level, Level) else Level.lookup(level.upper())
        name = known.loguru_name if known is not None else self._level_name(level)
        core = self._core.bind(**fields) if fields else self._core
        core.opt(depth=depth, exception=exception).log(name, message)

        if known is Level.PANIC or (known is Level.DPANIC and self.development):
            raise PanicError(message)
        if known is Level.FATAL:
            self.sync()
            sys.exit(1)

    def debug(self, message: str, **fields: Any) -> None:
        self._emit(Level.DEBUG, message, fields, 2)

    def info(self, message: str, **fields: Any) -> None:
        self._emit(Level.INFO, message, fields, 2)

    def warn(self, message: str, **fields: Any) -> None:
        self._emit(Level.WARN, message, fields, 2)

    def error(self, message: str, **fields: Any) -> None:
        self._emit(Level.ERROR, message, fields, 2)

    def exception(self, message: str, **fields: Any) -> None:
        """Logs at ERROR with the exception currently being handled attached."""
        self._emit(Level.ERROR, message, fields, 2, exception=True)

    def dpanic(self, message: str, **fields: Any) -> None:
        self._emit(Level.DPANIC, message, fields, 2)

    def panic(self, message: str, **fields: Any) -> None:
        self._emit(Level.PANIC, message, fields, 2)

    def fatal(self, message: str, **fields: Any) -> None:
        self._emit(Level.FATAL, message, fields, 2)

    def log(self, level: LevelLike, message: str, **fields: Any) -> None:
        """
        Logs at any level: a Level, one of its names, or the name of another loguru level.
        """
        self._emit(level, message, fields, 2)

    def with_fields(self, **fields: Any) -> "Logger":
        """Returns a child logger that adds ``fields`` to every record."""
        return Logger(self._core.bind(**fields), self._sinks, self.development)

    def sugar(self) -> "SugaredLogger":
        return SugaredLogger(self)

    def sync(self) -> None:
        """Flushes every output stream."""
        self._sinks.sync()

    def close(self) -> None:
        """Detaches the sinks from loguru and closes the files this logger opened."""
        self._sinks.close()

    @property
    def closed(self) -> bool:
        return self._sinks.closed


def _sprint(args: Tuple[Any, ...]) -> str:
    return " ".join(str(arg) for arg in args)


def _sprintf(template: str, args: Tuple[Any, ...]) -> str:
    return template % args if args else template


def _sugared(level: Level) -> Tuple[Callable[..., None], Callable[..., None], Callable[..., None]]:
    """Builds the plain, printf-style and key-value methods of one level."""

    def plain(self: "SugaredLogger", *args: Any) -> None:
        self._base._emit(level, _sprint(args), {}, 2)

    def formatted(self: "SugaredLogger", template: str, *args: Any) -> None:
        self._base._emit(level, _sprintf(template, args), {}, 2)

    def keyvalue(self: "SugaredLogger", message: str, **fields: Any) -> None:
        self._base._emit(level, message, fields, 2)

    name = str(level)
    plain.__name__, formatted.__name__, keyvalue.__name__ = name, name + "f", name + "w"
    return plain, formatted, keyvalue


class SugaredLogger:
    """
    Convenience wrapper around Logger.

    ``info(*args)`` joins its arguments with spaces, ``infof(template, *args)``
    applies %-formatting and ``infow(message, **fields)`` attaches fields.
    The same trio exists for every level.
    """

    def __init__(self, base: Logger) -> None:
        self._base = base

    debug, debugf, debugw = _sugared(Level.DEBUG)
    info, infof, infow = _sugared(Level.INFO)
    warn, warnf, warnw = _sugared(Level.WARN)
    error, errorf, errorw = _sugared(Level.ERROR)
    dpanic, dpanicf, dpanicw = _sugared(Level.DPANIC)
    panic, panicf, panicw = _sugared(Level.PANIC)
    fatal, fatalf, fatalw = _sugared(Level.FATAL)

    def with_fields(self, **fields: Any) -> "SugaredLogger":
        return SugaredLogger(self._base.with_fields(**fields))

    def desugar(self) -> Logger:
        return self._base

    def sync(self) -> None:
        self._base.sync()


class LoggerHandle:
    """
    A console logger: the structured logger, its sugared wrapper and the
    threshold they share.
    """

    def __init__(self, logger: Logger, sugar: SugaredLogger, atom: AtomicLevel) -> None:
        self.logger = logger
        self.sugar = sugar
        self.atom = atom

    def close(self) -> None:
        self.logger.close()

    def __enter__(self) -> "LoggerHandle":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def independent_logger() -> Any:
    """
    Returns a new loguru logger with no handlers and its own core.

    Records logged through it reach only the handlers added to it, never the
    sinks configured on the global ``loguru.logger``.
    """
    global _template
    with _template_lock:
        if _template is None:
            # Global handlers hold live streams and are left out of the copy.
            memo = {id(_loguru._core.handlers): {}}
            template = copy.deepcopy(_loguru, memo)
            template.remove()
            template.configure(extra={})
            register_levels(template)
            _template = template
    return copy.deepcopy(_template)


def build_logger(
    outputs: Sequence[Any],
    formatter: Callable[[Dict[str, Any]], str],
    threshold: AtomicLevel,
    development: bool = False,
    closeables: Optional[Iterable[Any]] = None,
) -> Logger:
    """
    Attaches one loguru sink per output to a private loguru logger and returns
    the Logger that feeds them.
    """
    core = independent_logger()

    def _accept(record: Dict[str, Any]) -> bool:
        return threshold.enabled(record["level"].no)

    try:
        for output in outputs:
            core.add(
                output,
                level=0,
                format=formatter,
                filter=_accept,
                colorize=False,
                backtrace=False,
                diagnose=False,
            )
    except Exception:
        core.remove()
        raise

    return Logger(core, _Sinks(core, outputs, closeables or ()), development)
