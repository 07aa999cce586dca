#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING, Any, ClassVar, Final

# ##-- end stdlib imports

# ##-- 1st party imports
import inkpot.errors as IErr  # noqa: N812

# ##-- end 1st party imports

if TYPE_CHECKING:
    from collections.abc import Mapping
    from tomlguard import TomlGuard
    from inkpot._interface import RunTaskFn
    from inkpot._structs.task_definition import TaskDefinition
    from inkpot.collaborators.artifacts import Artifacts
    from inkpot.collaborators.network import Network

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

CORE_FIELDS : Final[tuple[str, ...]] = ("config", "args", "tasks", "run", "network", "artifacts")

class RuntimeEnvironment:
    """ The context every task action receives.

    Built once per process. Environment extenders can add or replace
    top level fields until `freeze` is called, after which it is read only.
    Fields can never be removed.
    """
    config     : TomlGuard
    args       : TomlGuard
    tasks      : Mapping[str, TaskDefinition]
    run        : RunTaskFn
    network    : Network
    artifacts  : Artifacts

    _internal  : ClassVar[tuple[str, ...]] = ("_frozen",)

    def __init__(self, *, config:TomlGuard, args:TomlGuard, tasks:Mapping[str, TaskDefinition], run:RunTaskFn, network:Network, artifacts:Artifacts):
        object.__setattr__(self, "_frozen", False)
        self.config     = config
        self.args       = args
        self.tasks      = tasks
        self.run        = run
        self.network    = network
        self.artifacts  = artifacts

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, name:str, value:Any) -> None:
        if self._frozen or name in self._internal:
            raise IErr.EnvironmentFrozenError("Can't set environment field: %s", name)
        if hasattr(self, name):
            logging.debug("Replacing Environment Field: %s", name)
        object.__setattr__(self, name, value)

    def __delattr__(self, name:str) -> None:
        raise IErr.EnvironmentFrozenError("Environment fields can't be removed: %s", name)

    def __repr__(self):
        extra = sorted(x for x in vars(self) if x not in CORE_FIELDS and x not in self._internal)
        return f"<RuntimeEnvironment: frozen={self._frozen} extra={extra}>"
