#!/usr/bin/env python3
"""
The Overlord: one instance per process, owning the task registry
and the environment composer.

Plugins receive it as the declaration surface (task, subtask, extend_environment).
Once loading finishes the registry is frozen, and the environment is composed
on the first run.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import copy
import logging as logmod
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import inkpot.errors as IErr  # noqa: N812
from inkpot import _interface as API  # noqa: N812
from inkpot._structs.arg_types import ArgumentTypes
from inkpot.control.arg_parser import GLOBAL_PARAMS
from inkpot.control.environment import EnvironmentComposer
from inkpot.control.registry import TaskRegistry
from inkpot.control.runner import resolve_arguments

# ##-- end 1st party imports

if TYPE_CHECKING:
    from inkpot._interface import ActionFn, EnvironmentExtender
    from inkpot._structs.environment import RuntimeEnvironment
    from inkpot._structs.task_definition import TaskDefinitionBuilder
    from inkpot.collaborators.artifacts import Artifacts
    from inkpot.collaborators.network import Network

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class InkpotOverlord:
    """ Owns the registry, and the single runtime environment of this process """

    types = ArgumentTypes

    def __init__(self, *, config:TomlGuard|None=None, args:Mapping|None=None, network:Network|None=None, artifacts:Artifacts|None=None):
        self.config     = config or TomlGuard(copy.deepcopy(API.DEFAULT_CONFIG))
        # unset globals fall back to their defaults
        self.args       = TomlGuard(resolve_arguments(GLOBAL_PARAMS, args))
        self.registry   = TaskRegistry()
        self._composer  = EnvironmentComposer(self.registry)
        self._network   = network
        self._artifacts = artifacts

    ##--| declaration surface

    def task(self, name:str, description:str|None=None, action:ActionFn|None=None) -> TaskDefinitionBuilder:
        return self.registry.task(name, description, action)

    def subtask(self, name:str, description:str|None=None, action:ActionFn|None=None) -> TaskDefinitionBuilder:
        return self.registry.subtask(name, description, action)

    def extend_environment(self, extender:EnvironmentExtender) -> EnvironmentExtender:
        return self._composer.extend(extender)

    ##--| phases

    def finish_loading(self) -> None:
        self.registry.freeze()

    @property
    def environment(self) -> RuntimeEnvironment:
        """ Composes the environment on first access. Freezes the registry. """
        if not self.registry.is_frozen:
            self.finish_loading()

        return self._composer.compose(config=self.config,
                                      args=self.args,
                                      network=self._network,
                                      artifacts=self._artifacts)

    async def run(self, name:str, args:Mapping[str, Any]|None=None, positional:Sequence[Any]=()) -> Any:
        if name not in self.registry:
            raise IErr.UnrecognizedTaskError(name)

        return await self.environment.run(name, args, positional)

    async def shutdown(self) -> None:
        match self._composer.environment:
            case None:
                pass
            case env:
                await env.network.disconnect()
