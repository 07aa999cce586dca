#!/usr/bin/env python3
"""
The Runtime Environment Composer.

Builds the runtime environment once per process,
applies environment extenders in registration order, then freezes it.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
from typing import TYPE_CHECKING

# ##-- end stdlib imports

# ##-- 1st party imports
import inkpot.errors as IErr  # noqa: N812
from inkpot._structs.environment import RuntimeEnvironment
from inkpot.collaborators.artifacts import Artifacts
from inkpot.collaborators.network import Network
from inkpot.control.runner import TaskRunner

# ##-- end 1st party imports

if TYPE_CHECKING:
    from tomlguard import TomlGuard
    from inkpot._interface import EnvironmentExtender
    from inkpot.control.registry import TaskRegistry

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class EnvironmentComposer:
    """ Collects environment extenders while plugins load,
    then composes the single runtime environment of this process.
    """

    def __init__(self, registry:TaskRegistry):
        self._registry    = registry
        self._extenders   : list[EnvironmentExtender] = []
        self._environment : RuntimeEnvironment|None   = None

    @property
    def environment(self) -> RuntimeEnvironment|None:
        return self._environment

    def extend(self, extender:EnvironmentExtender) -> EnvironmentExtender:
        """ Register an extender. Usable as a decorator. """
        if self._environment is not None:
            raise IErr.EnvironmentFrozenError("Can't add an extender after the environment was composed: %s", extender)
        if not callable(extender):
            raise TypeError("Environment Extenders must be callable", extender)

        self._extenders.append(extender)
        return extender

    def compose(self, *, config:TomlGuard, args:TomlGuard, network:Network|None=None, artifacts:Artifacts|None=None) -> RuntimeEnvironment:
        if self._environment is not None:
            return self._environment

        logging.debug("Composing Runtime Environment")
        runner      = TaskRunner(self._registry)
        environment = RuntimeEnvironment(config=config,
                                         args=args,
                                         tasks=self._registry.view(),
                                         run=runner.run,
                                         network=network or Network.build(config),
                                         artifacts=artifacts or self._artifacts(config))
        runner.bind(environment)

        for extender in self._extenders:
            logging.debug("Applying Environment Extender: %s", getattr(extender, "__qualname__", extender))
            extender(environment)
        else:
            environment.freeze()

        self._environment = environment
        return environment

    def _artifacts(self, config:TomlGuard) -> Artifacts:
        """ a relative artifacts path is relative to the project root """
        root = pl.Path(config.on_fail(".").paths.root())
        return Artifacts(root / config.on_fail("artifacts").paths.artifacts())
