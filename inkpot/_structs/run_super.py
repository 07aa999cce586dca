#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING, Any, Awaitable, Callable, TypeAlias

# ##-- end stdlib imports

# ##-- 1st party imports
import inkpot.errors as IErr  # noqa: N812

# ##-- end 1st party imports

if TYPE_CHECKING:
    from inkpot._interface import TaskArguments
    from inkpot._structs.task_definition import TaskDefinition

    Invoker: TypeAlias = Callable[[TaskDefinition, int, TaskArguments], Awaitable[Any]]

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class RunSuperFunction:
    """ The delegate an overriding action uses to call the implementation it replaced.

    Bound to a fixed position in a task's override chain.
    Called without arguments, it forwards the arguments of the current call,
    which are then resolved against the previous implementation's own schema.
    """

    def __init__(self, task:str, *, predecessor:TaskDefinition|None=None, depth:int=-1, invoke:Invoker|None=None, forward:TaskArguments|None=None):
        self._task        = task
        self._predecessor = predecessor
        self._depth       = depth
        self._invoke      = invoke
        self._forward     = dict(forward or {})

    @property
    def is_defined(self) -> bool:
        return self._predecessor is not None

    async def __call__(self, args:TaskArguments|None=None) -> Any:
        if not self.is_defined:
            raise IErr.RunSuperNotDefinedError("%s doesn't override a previous definition", self._task, task=self._task)

        logging.debug("Running Super of %s at depth %s", self._task, self._depth)
        match args:
            case None:
                return await self._invoke(self._predecessor, self._depth, self._forward)
            case _:
                return await self._invoke(self._predecessor, self._depth, args)

    def __bool__(self) -> bool:
        return self.is_defined

    def __repr__(self):
        return f"<RunSuper: {self._task} : defined={self.is_defined}>"
