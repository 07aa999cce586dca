#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING, Final

# ##-- end stdlib imports

# ##-- 1st party imports
import inkpot.errors as IErr  # noqa: N812
from inkpot import _interface as API  # noqa: N812
from inkpot.control.arg_parser import GLOBAL_PARAMS
from .task_names import TASK_HELP

# ##-- end 1st party imports

if TYPE_CHECKING:
    from inkpot._interface import TaskArguments
    from inkpot._structs.environment import RuntimeEnvironment
    from inkpot._structs.run_super import RunSuperFunction
    from inkpot._structs.task_definition import TaskDefinition
    from inkpot.control.overlord import InkpotOverlord

##-- logging
logging = logmod.getLogger(__name__)
printer = logmod.getLogger(API.PRINTER_NAME)
##-- end logging

LINE_SEP     : Final[str] = "------------------------------"
GROUP_INDENT : Final[str] = "  "

def global_help(env:RuntimeEnvironment) -> list[str]:
    result = [
        f"{API.PROG_NAME} version {API.__version__}",
        "",
        f"Usage: {API.PROG_NAME} [GLOBAL PARAMS] <TASK> [TASK PARAMS]",
        "",
        "GLOBAL PARAMS:",
    ]
    result += [f"{GROUP_INDENT}{x.key_str:<22}{x.description}" for x in GLOBAL_PARAMS.param_definitions.values()]
    result += ["", "AVAILABLE TASKS:"]

    visible = [env.tasks[x] for x in env.tasks if not env.tasks[x].is_subtask]
    width   = max((len(x.name) for x in visible), default=0) + 2
    for definition in visible:
        result.append(f"{GROUP_INDENT}{definition.name:<{width}}{definition.description or ''}")
    else:
        result += ["", f"To get help for a specific task run: {API.PROG_NAME} help [task]"]
        return result

def task_help(definition:TaskDefinition) -> list[str]:
    usage = [API.PROG_NAME, "[GLOBAL PARAMS]", definition.name]
    for param in definition.param_definitions.values():
        match param:
            case _ if param.is_flag:
                usage.append(f"[{param.key_str}]")
            case _ if param.is_optional:
                usage.append(f"[{param.key_str} {param.name.upper()}]")
            case _:
                usage.append(f"{param.key_str} {param.name.upper()}")
    for param in definition.positional_param_definitions:
        suffix = "..." if param.is_variadic else ""
        usage.append(f"[{param.name}{suffix}]" if param.is_optional else f"<{param.name}{suffix}>")

    result = [
        LINE_SEP,
        f"{definition.name}: {definition.description or ''}",
        LINE_SEP,
        "Usage: " + " ".join(usage),
    ]
    if bool(definition.param_definitions):
        result += ["", "OPTIONS:"]
        result += [f"{GROUP_INDENT}{x}" for x in definition.param_definitions.values()]
    if bool(definition.positional_param_definitions):
        result += ["", "POSITIONAL ARGUMENTS:"]
        result += [f"{GROUP_INDENT}{x}" for x in definition.positional_param_definitions]

    return result

async def help(args:TaskArguments, env:RuntimeEnvironment, run_super:RunSuperFunction) -> list[str]:  # noqa: A001
    match args['task']:
        case None:
            lines = global_help(env)
        case str() as name if name in env.tasks:
            lines = task_help(env.tasks[name])
        case str() as name:
            raise IErr.UnrecognizedTaskError(name)

    for line in lines:
        printer.info(line)
    else:
        return lines

def register(dsl:InkpotOverlord) -> None:
    (dsl.task(TASK_HELP, "Prints this message, or help for a task")
     .add_optional_positional_param("task", "The task to describe")
     .set_action(help))
