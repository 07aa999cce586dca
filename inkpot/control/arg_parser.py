#!/usr/bin/env python3
"""
Command line parsing.

inkpot [global params] [task] [task params]

Global params come before the task name, and can also be set from the
environment as INKPOT_<NAME>. `--help` is recognised anywhere.
Task params are `--name value`, `--name=value`, `--flag`, and positionals in order.
`--` ends named param parsing, everything after it is positional.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final

# ##-- end stdlib imports

# ##-- 1st party imports
import inkpot.errors as IErr  # noqa: N812
from inkpot import _interface as API  # noqa: N812
from inkpot._structs.arg_types import ArgumentTypes
from inkpot._structs.param_definition import ParamDefinition
from inkpot._structs.task_definition import TaskDefinition
from inkpot.control.runner import resolve_arguments

# ##-- end 1st party imports

if TYPE_CHECKING:
    from inkpot._interface import TaskArguments

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

HELP_FLAG     : Final[str]            = "--help"
GLOBAL_PARAMS : Final[TaskDefinition] = TaskDefinition(
    name=API.PROG_NAME,
    description="inkpot global params",
    param_definitions={x.name: x for x in [
        ParamDefinition(name="network", description="The network to connect to", is_optional=True),
        ParamDefinition(name="config", description="A config file to load, after inkpot.toml", is_optional=True),
        ParamDefinition(name="log_level", description="The stream logging level, overriding config", is_optional=True),
        ParamDefinition(name="verbose", type_=ArgumentTypes.boolean, description="Enables verbose logging", default=False, is_optional=True, is_flag=True),
        ParamDefinition(name="show_stack_traces", type_=ArgumentTypes.boolean, description="Show stack traces on errors", default=False, is_optional=True, is_flag=True),
        ParamDefinition(name="help", type_=ArgumentTypes.boolean, description="Shows help", default=False, is_optional=True, is_flag=True),
        ParamDefinition(name="version", type_=ArgumentTypes.boolean, description="Shows the version and exits", default=False, is_optional=True, is_flag=True),
    ]},
)

@dataclass
class ParsedArgs:
    """ The result of parsing argv. Task tokens are split by parse_task. """
    globals      : TaskArguments
    task         : str|None   = None
    task_tokens  : list[str]  = field(default_factory=list)

def _param_name(token:str) -> tuple[str, str|None]:
    """ --some-param=val -> (some_param, val) """
    key, sep, val = token.removeprefix(API.PARAM_PREFIX).partition("=")
    return key.replace("-", "_"), (val if sep else None)

class ArgParser:

    def __init__(self, env:Mapping[str, str]|None=None):
        self._env = os.environ if env is None else env

    def parse(self, argv:list[str]) -> ParsedArgs:
        """ Split argv into global args, task name, and raw task args.
        Task args are only split here, the task's schema is applied in parse_task.
        """
        raw_globals = self._env_globals()
        idx         = 0
        while idx < len(argv) and argv[idx].startswith(API.PARAM_PREFIX) and argv[idx] != API.END_OF_PARAMS:
            idx = self._consume(GLOBAL_PARAMS, argv, idx, raw_globals, allow_override=True)

        rest   = argv[idx:]
        task   = None
        if bool(rest) and not rest[0].startswith(API.PARAM_PREFIX):
            task, rest = rest[0], rest[1:]

        end         = self._end_index(rest)
        head, tail  = rest[:end], rest[end:]
        if HELP_FLAG in head:
            raw_globals['help'] = True
            rest = [x for x in head if x != HELP_FLAG] + tail

        return ParsedArgs(globals=resolve_arguments(GLOBAL_PARAMS, raw_globals), task=task, task_tokens=rest)

    def parse_task(self, definition:TaskDefinition, tokens:list[str]) -> tuple[dict[str, Any], list[str]]:
        """ Split task tokens into named args and positional values """
        named      = {}
        positional = []
        idx        = 0
        while idx < len(tokens):
            match tokens[idx]:
                case API.END_OF_PARAMS:
                    positional += tokens[idx + 1:]
                    break
                case str() as x if x.startswith(API.PARAM_PREFIX):
                    idx = self._consume(definition, tokens, idx, named)
                case x:
                    positional.append(x)
                    idx += 1

        return named, positional

    def _consume(self, definition:TaskDefinition, tokens:list[str], idx:int, data:dict, *, allow_override:bool=False) -> int:
        """ Consume one named param from tokens[idx], returning the next index """
        key, val = _param_name(tokens[idx])
        match definition.param_definitions.get(key, None):
            case None:
                raise IErr.UnrecognizedParamError("%s : %s", definition.name, tokens[idx])
            case _ if key in data and not allow_override:
                raise IErr.RepeatedParamError("%s : %s", definition.name, tokens[idx])
            case ParamDefinition(is_flag=True) if val is not None:
                raise IErr.ParseError("Flags don't take values: %s", tokens[idx])
            case ParamDefinition(is_flag=True):
                data[key] = True
                return idx + 1
            case ParamDefinition() if val is not None:
                data[key] = val
                return idx + 1
            case ParamDefinition() if idx + 1 < len(tokens) and not tokens[idx + 1].startswith(API.PARAM_PREFIX):
                data[key] = tokens[idx + 1]
                return idx + 2
            case ParamDefinition():
                raise IErr.MissingParamValueError("%s : %s", definition.name, tokens[idx])

    def _env_globals(self) -> dict[str, str]:
        result = {}
        for name in GLOBAL_PARAMS.param_definitions:
            env_key = f"{API.ENV_VAR_PREFIX}{name.upper()}"
            if env_key in self._env:
                logging.debug("Global param from environment: %s", env_key)
                result[name] = self._env[env_key]
        else:
            return result

    def _end_index(self, tokens:list[str]) -> int:
        if API.END_OF_PARAMS in tokens:
            return tokens.index(API.END_OF_PARAMS)
        return len(tokens)
