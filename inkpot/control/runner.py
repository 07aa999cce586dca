#!/usr/bin/env python3
"""
The Task Runner.

Resolves arguments against a task's schema, then calls its action with
the runtime environment and a run_super delegate.
Errors from resolution abort before the action is called.
Errors from the action propagate unchanged.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import copy
import inspect
import logging as logmod
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

# ##-- end stdlib imports

# ##-- 1st party imports
import inkpot.errors as IErr  # noqa: N812
from inkpot._structs.run_super import RunSuperFunction

# ##-- end 1st party imports

if TYPE_CHECKING:
    from inkpot._interface import TaskArguments
    from inkpot._structs.environment import RuntimeEnvironment
    from inkpot._structs.param_definition import ParamDefinition
    from inkpot._structs.task_definition import TaskDefinition
    from inkpot.control.registry import TaskRegistry

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

NO_VALUE = object()

def resolve_arguments(definition:TaskDefinition, args:Mapping[str, Any]|None=None, positional:Sequence[Any]=()) -> TaskArguments:
    """ defaults -> parse -> validate -> arity.
    Positional params take a named value first, then consume the positional slice in order.
    A variadic param consumes the rest of the slice.
    An explicit None is treated as not given.
    """
    args       = {k: v for k, v in (args or {}).items() if v is not None}
    remaining  = list(positional)
    raw        = {}

    for param in definition.param_definitions.values():
        raw[param.name] = args.pop(param.name, NO_VALUE)

    for param in definition.positional_param_definitions:
        match args.pop(param.name, NO_VALUE):
            case x if x is not NO_VALUE:
                raw[param.name] = x
            case _ if not bool(remaining):
                raw[param.name] = NO_VALUE
            case _ if param.is_variadic:
                raw[param.name], remaining = remaining, []
            case _:
                raw[param.name] = remaining.pop(0)

    if bool(remaining):
        raise IErr.UnrecognizedPositionalArgumentError("%s : %s", definition.name, remaining)
    if bool(args):
        logging.debug("Ignoring undeclared arguments for %s : %s", definition.name, list(args.keys()))

    for param in definition.all_params:
        if raw[param.name] is NO_VALUE and not param.is_optional:
            raise IErr.MissingRequiredArgumentError(param.name, task=definition.name)

    resolved = {}
    for param in definition.all_params:
        resolved[param.name] = _resolve_value(param, raw[param.name])
    else:
        return resolved

def _resolve_value(param:ParamDefinition, value:Any) -> Any:
    match value:
        case x if x is NO_VALUE and param.is_variadic and param.default is None:
            return []
        case x if x is NO_VALUE:
            # each run gets its own copy of a mutable default
            return copy.deepcopy(param.default)
        case _:
            value = param.parse_value(value)
            param.validate_value(value)
            return value

class TaskRunner:
    """ Runs tasks from a registry, within one runtime environment """

    def __init__(self, registry:TaskRegistry):
        self._registry    = registry
        self._environment = None
        self._depth       = 0

    def bind(self, environment:RuntimeEnvironment) -> None:
        self._environment = environment

    @property
    def environment(self) -> RuntimeEnvironment:
        if self._environment is None:
            raise IErr.BackendError("Task Runner used before the runtime environment was composed")
        return self._environment

    async def run(self, name:str, args:Mapping[str, Any]|None=None, positional:Sequence[Any]=()) -> Any:
        """ Run the current definition of a task """
        chain = self._registry.chain(name)
        logging.info("%sRunning Task: %s", "-" * self._depth, name)
        return await self._execute(chain[-1], len(chain) - 1, args, positional)

    async def _execute(self, definition:TaskDefinition, depth:int, args:Mapping[str, Any]|None, positional:Sequence[Any]=()) -> Any:
        resolved  = resolve_arguments(definition, args, positional)
        run_super = self._build_run_super(definition, depth, resolved)
        env       = self.environment
        self._depth += 1
        try:
            result = definition.action(resolved, env, run_super)
            if inspect.isawaitable(result):
                result = await result
        finally:
            self._depth -= 1

        return result

    def _build_run_super(self, definition:TaskDefinition, depth:int, resolved:TaskArguments) -> RunSuperFunction:
        if depth <= 0:
            return RunSuperFunction(definition.name)

        predecessor = self._registry.chain(definition.name)[depth - 1]
        return RunSuperFunction(definition.name,
                                predecessor=predecessor,
                                depth=depth - 1,
                                invoke=self._execute,
                                forward=resolved)
