#!/usr/bin/env python3
"""
Logging setup.

Two streams:
- the root logger, for trace information, formatted with level and colour.
- the printer, 'inkpot._printer', which replaces `print` for user facing output.
  It doesn't propagate, so it stays readable when the root is verbose.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
from collections import defaultdict
import sys
from typing import TYPE_CHECKING, ClassVar

# ##-- end stdlib imports

# ##-- 3rd party imports
from sty import ef, fg, rs

# ##-- end 3rd party imports

# ##-- 1st party imports
from inkpot import _interface as API  # noqa: N812

# ##-- end 1st party imports

if TYPE_CHECKING:
    from tomlguard import TomlGuard

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

LEVEL_MAP    = defaultdict(lambda: rs.all)
COLOUR_RESET = rs.all
LEVEL_MAP.update({
    logmod.DEBUG    : fg.grey,
    logmod.INFO     : fg.blue,
    logmod.WARNING  : fg.yellow,
    logmod.ERROR    : fg.red,
    logmod.CRITICAL : fg.red,
    "cyan"          : fg.cyan,
    "green"         : fg.green,
    "red"           : fg.red,
    "bold"          : ef.bold,
    })

class SimpleLogColour:
    """ Utility class for wrapping strings with specific colours """

    def __init__(self):
        raise TypeError("SimpleLogColour is Static, don't instance it")

    @staticmethod
    def green(s) -> str:  # noqa: ANN001
        return LEVEL_MAP['green'] + str(s) + COLOUR_RESET

    @staticmethod
    def cyan(s) -> str:  # noqa: ANN001
        return LEVEL_MAP['cyan'] + str(s) + COLOUR_RESET

    @staticmethod
    def red(s) -> str:  # noqa: ANN001
        return LEVEL_MAP['red'] + str(s) + COLOUR_RESET

class InkpotColourFormatter(logmod.Formatter):
    """
    Stream Formatter for inkpot, enables use of colour sent to console
    Do *not* use on a file handler.
    """

    _default_fmt      : ClassVar[str] = "{levelname:8} : {message}"
    _default_date_fmt : ClassVar[str] = "%H:%M:%S"
    _default_style    : ClassVar[str] = "{"

    def __init__(self, *, fmt:str|None=None):
        super().__init__(fmt or self._default_fmt,
                         datefmt=self._default_date_fmt,
                         style=self._default_style)
        self.colours = LEVEL_MAP

    def format(self, record:logmod.LogRecord) -> str:
        log_colour = self.colours[getattr(record, "colour", record.levelno)]
        return log_colour + super().format(record) + COLOUR_RESET

class LogConfig:
    """ Sets up the root stream handler, an optional file handler, and the printer """

    def __init__(self):
        self.root           = logmod.root
        self.printer        = logmod.getLogger(API.PRINTER_NAME)
        self.stream_handler = logmod.StreamHandler(sys.stdout)
        self.stream_handler.setFormatter(InkpotColourFormatter())
        self.print_handler  = logmod.StreamHandler(sys.stdout)
        self.print_handler.setFormatter(logmod.Formatter("{message}", style="{"))
        self.file_handler   : logmod.Handler|None = None

        self.root.setLevel(logmod.NOTSET)
        self.root.addHandler(self.stream_handler)
        self.stream_handler.setLevel(logmod.WARNING)
        self.printer.propagate = False
        self.printer.setLevel(logmod.INFO)
        self.printer.addHandler(self.print_handler)

    def setup(self, config:TomlGuard) -> None:
        """ a setup that uses config values """
        self.stream_handler.setLevel(config.on_fail("WARNING").logging.stream.level().upper())
        self.stream_handler.setFormatter(InkpotColourFormatter(fmt=config.on_fail(None).logging.stream.format()))

        match config.on_fail(None).logging.file.path():
            case None:
                pass
            case str() as path:
                self.file_handler = logmod.FileHandler(pl.Path(path), mode="w")
                self.file_handler.setFormatter(logmod.Formatter("{asctime} | {levelname:8} | {name:25} | {message}", style="{"))
                self.file_handler.setLevel(config.on_fail("DEBUG").logging.file.level().upper())
                self.root.addHandler(self.file_handler)

    def set_level(self, level:str|int) -> None:
        match level:
            case str():
                self.stream_handler.setLevel(level.upper())
            case int():
                self.stream_handler.setLevel(level)

    def teardown(self) -> None:
        self.root.removeHandler(self.stream_handler)
        self.printer.removeHandler(self.print_handler)
        if self.file_handler is not None:
            self.root.removeHandler(self.file_handler)
            self.file_handler.close()
