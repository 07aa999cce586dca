#!/usr/bin/env python3
"""
The inkpot cli program.

setup logging -> parse argv -> load config -> load plugins -> run task -> shutdown

Errors are reported as a single line with their code,
and mapped to an exit code. Stack traces are only shown with --show-stack-traces.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import asyncio
import logging as logmod
import pathlib as pl
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

# ##-- end stdlib imports

# ##-- 3rd party imports
import stackprinter

# ##-- end 3rd party imports

# ##-- 1st party imports
import inkpot.errors as IErr  # noqa: N812
from inkpot import _interface as API  # noqa: N812
from inkpot.control.arg_parser import ArgParser
from inkpot.control.config import ConfigLoader
from inkpot.control.overlord import InkpotOverlord
from inkpot.loaders.plugin_loader import PluginLoader
from inkpot.utils.log_config import LogConfig, SimpleLogColour

# ##-- end 1st party imports

if TYPE_CHECKING:
    from inkpot.control.arg_parser import ParsedArgs

##-- logging
logging = logmod.getLogger(__name__)
printer = logmod.getLogger(API.PRINTER_NAME)
##-- end logging

class ErrorHandlers:
    """ Maps errors to exit codes, reporting them on the way """

    def discriminate_exit(self, err:BaseException, *, show_stack:bool=False) -> int:
        match err:
            case IErr.EarlyExit():
                logging.info("Early Exit Triggered")
                return API.ExitCodes.SUCCESS
            case KeyboardInterrupt():
                printer.error("Interrupted")
                return API.ExitCodes.INTERRUPTED
            case IErr.ParseError():
                result = API.ExitCodes.BAD_CLI
            case IErr.ConfigError():
                result = API.ExitCodes.BAD_CONFIG
            case IErr.InkpotError():
                result = API.ExitCodes.TASK_FAILED
            case _:
                return self.python_exit(err)

        printer.error(SimpleLogColour.red(err.render()))
        if show_stack:
            printer.error(stackprinter.format(err))

        return result

    def python_exit(self, err:BaseException) -> int:
        printer.error(SimpleLogColour.red(f"[{type(err).__name__}] : Python Error: {err}"))
        printer.error(stackprinter.format(err))
        return API.ExitCodes.TASK_FAILED

class InkpotMain:
    """ The cli program. main(argv) returns an exit code. """

    _err = ErrorHandlers()

    def __init__(self, *, env:Mapping[str, str]|None=None, root:pl.Path|None=None):
        self.parser      = ArgParser(env)
        self.root        = root
        self.overlord    : InkpotOverlord|None = None
        self.log_config  : LogConfig|None      = None
        self.result_code : int                 = API.ExitCodes.SUCCESS
        self._show_stack : bool                = False

    def main(self, argv:list[str]) -> int:
        self.log_config = LogConfig()
        try:
            parsed = self.parser.parse(argv)
            self._show_stack = parsed.globals['show_stack_traces']
            self.set_levels(parsed)
            self.handle_cli_args(parsed)
            self.load(parsed)
            task, named, positional = self.select_task(parsed)
            asyncio.run(self.run(task, named, positional))
        except (IErr.InkpotError, IErr.EarlyExit, KeyboardInterrupt) as err:
            self.result_code = self._err.discriminate_exit(err, show_stack=self._show_stack)
        except Exception as err:  # noqa: BLE001
            self.result_code = self._err.python_exit(err)
        finally:
            self.log_config.teardown()

        return self.result_code

    def set_levels(self, parsed:ParsedArgs) -> None:
        """ cli levels win over config levels """
        match parsed.globals['log_level']:
            case None:
                pass
            case str() as level:
                self.log_config.set_level(level)

        if parsed.globals['verbose']:
            self.log_config.set_level(logmod.DEBUG)
            logging.info("Switching to Verbose Output")

    def handle_cli_args(self, parsed:ParsedArgs) -> None:
        """ Global args that exit early """
        if parsed.globals['version']:
            printer.info("%s version %s", API.PROG_NAME, API.__version__)
            raise IErr.EarlyExit()

    def load(self, parsed:ParsedArgs) -> None:
        overrides = {}
        if parsed.globals['network'] is not None:
            overrides['default_network'] = parsed.globals['network']

        loader = ConfigLoader(root=self.root, target=parsed.globals['config'], overrides=overrides)
        config = loader.config
        self.log_config.setup(config)
        self.set_levels(parsed)

        self.overlord = InkpotOverlord(config=config, args=parsed.globals)
        PluginLoader(self.overlord).load()

    def select_task(self, parsed:ParsedArgs) -> tuple[str, dict[str, Any], list[str]]:
        """ The task to run, and its split args. Help is run for --help, or when no task is given. """
        match parsed:
            case _ if parsed.globals['help'] or parsed.task is None:
                positional = [] if parsed.task is None else [parsed.task]
                return API.DEFAULT_TASK, {}, positional
            case _:
                named, positional = self.parser.parse_task(self.overlord.registry[parsed.task], parsed.task_tokens)
                return parsed.task, named, positional

    async def run(self, task:str, named:dict[str, Any], positional:list[str]) -> Any:
        try:
            return await self.overlord.run(task, named, positional)
        finally:
            await self.overlord.shutdown()
