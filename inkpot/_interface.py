#!/usr/bin/env python3
"""
Constants, protocols and default values shared across inkpot.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
import pathlib as pl
import re
from typing import (TYPE_CHECKING, Any, Awaitable, Callable, Final, Protocol,
                    TypeAlias, runtime_checkable)

# ##-- end stdlib imports

if TYPE_CHECKING:
    from inkpot._structs.environment import RuntimeEnvironment
    from inkpot._structs.run_super import RunSuperFunction

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

__version__                : Final[str]            = "0.3.0"

##-- names
PROG_NAME                  : Final[str]            = "inkpot"
PRINTER_NAME               : Final[str]            = "inkpot._printer"
TASK_SEP                   : Final[str]            = "::"
IMPORT_SEP                 : Final[str]            = ":"
PARAM_PREFIX               : Final[str]            = "--"
END_OF_PARAMS              : Final[str]            = "--"
ENV_VAR_PREFIX             : Final[str]            = "INKPOT_"
PLUGIN_GROUP               : Final[str]            = "inkpot.plugins"
PLUGIN_REGISTER_FN         : Final[str]            = "register"
DEFAULT_TASK               : Final[str]            = "help"
PARAM_NAME_RE              : Final[re.Pattern]     = re.compile(r"^[a-z][a-z0-9_]*$")
##-- end names

##-- config files
INKPOT_TOML                : Final[str]            = "inkpot.toml"
PYPROJ_TOML                : Final[str]            = "pyproject.toml"
DEFAULT_LOAD_TARGETS       : Final[list[pl.Path]]  = [pl.Path(INKPOT_TOML), pl.Path(PYPROJ_TOML)]
##-- end config files

DEFAULT_CONFIG             : Final[dict]           = {
    "default_network" : "development",
    "paths"           : {
        "root"      : ".",
        "artifacts" : "artifacts",
    },
    "contract"        : {
        "ink" : {
            "toolchain" : "nightly",
            "version"   : "0.8.0",
            "sources"   : ["contracts/**/Cargo.toml"],
        },
    },
    "networks"        : {
        "development" : {
            "endpoint"  : "ws://127.0.0.1:9944",
            "gas_limit" : "400000000000",
            "accounts"  : ["//Alice", "//Bob", "//Charlie", "//Dave", "//Eve", "//Ferdie"],
        },
    },
    "startup"         : {
        "plugins"            : [],
        "skip_plugin_search" : False,
        "sources"            : {"tasks" : []},
    },
    "logging"         : {
        "stream" : {"level": "WARNING", "format": "{levelname:8} : {message}"},
    },
}

class ExitCodes(enum.IntEnum):
    SUCCESS       = 0
    TASK_FAILED   = 1
    BAD_CLI       = 2
    BAD_CONFIG    = 3
    INTERRUPTED   = 130

##-- type aliases
TaskArguments      : TypeAlias = dict[str, Any]
ActionFn           : TypeAlias = Callable[[TaskArguments, "RuntimeEnvironment", "RunSuperFunction"], Awaitable[Any]|Any]
RunTaskFn          : TypeAlias = Callable[..., Awaitable[Any]]
EnvironmentExtender: TypeAlias = Callable[["RuntimeEnvironment"], None]
##-- end type aliases

@runtime_checkable
class ArgumentType_p(Protocol):
    """ Dynamically validates a task argument's type """
    name : str

    def validate(self, arg_name:str, value:Any) -> None:
        """ raise InvalidArgumentError if value is not of this type """
        pass

@runtime_checkable
class CLIArgumentType_p(ArgumentType_p, Protocol):
    """ An ArgumentType with a human-friendly string representation,
    so it can come from the command line.
    """

    def parse(self, arg_name:str, raw:str) -> Any:
        pass

@runtime_checkable
class Signer_p(Protocol):
    address : str

@runtime_checkable
class ChainClient_p(Protocol):
    """ The opaque chain client a network provider factory builds. """

    async def get_signers(self) -> list[Signer_p]:
        pass

    def create_signer(self, pair:Any) -> Signer_p:
        pass

    async def disconnect(self) -> None:
        pass

GLOBAL_PARAM_NAMES         : Final[tuple[str, ...]] = (
    "network", "config", "verbose", "show_stack_traces", "log_level", "help", "version",
)
