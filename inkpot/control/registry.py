#!/usr/bin/env python3
"""
The Task Registry.

Maps task names to an ordered override chain of task builders.
The last element of a chain is the current definition,
each earlier element is reachable from its successor through run_super.

Written to only while plugins load, then frozen.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from collections import defaultdict
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

# ##-- end stdlib imports

# ##-- 1st party imports
import inkpot.errors as IErr  # noqa: N812
from inkpot._structs.task_definition import TaskDefinition, TaskDefinitionBuilder

# ##-- end 1st party imports

if TYPE_CHECKING:
    from inkpot._interface import ActionFn

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class TasksView(Mapping):
    """ A read only view of the current definition of each task """

    def __init__(self, registry:TaskRegistry):
        self._registry = registry

    def __getitem__(self, name:str) -> TaskDefinition:
        return self._registry[name]

    def __contains__(self, name:object) -> bool:
        return name in self._registry

    def get(self, name:str, default:TaskDefinition|None=None) -> TaskDefinition|None:
        if name in self._registry:
            return self._registry[name]
        return default

    def __iter__(self) -> Iterator[str]:
        return iter(self._registry)

    def __len__(self) -> int:
        return len(self._registry)

    def __repr__(self):
        return f"<TasksView: {len(self)} tasks>"

class TaskRegistry:
    """ Owns every TaskDefinition.
    Re-declaring a name appends to its chain, the new schema fully replaces the old.
    """

    def __init__(self):
        self._chains : dict[str, list[TaskDefinitionBuilder]] = defaultdict(list)
        self._frozen : bool                                   = False

    def declare(self, name:str, *, description:str|None=None, action:ActionFn|None=None, is_subtask:bool=False) -> TaskDefinitionBuilder:
        if self._frozen:
            raise IErr.RegistryFrozenError("Can't declare task after loading finished: %s", name)

        match self._chains.get(name, None):
            case None | []:
                logging.debug("Defining Task: %s", name)
            case [*_, last]:
                logging.debug("Overriding Task: %s (depth: %s)", name, len(self._chains[name]))
                if last.definition.is_subtask != is_subtask:
                    logging.info("Task Override changes visibility: %s : subtask=%s", name, is_subtask)

        builder = TaskDefinitionBuilder(name, description=description, action=action, is_subtask=is_subtask)
        self._chains[name].append(builder)
        return builder

    def task(self, name:str, description:str|None=None, action:ActionFn|None=None) -> TaskDefinitionBuilder:
        return self.declare(name, description=description, action=action, is_subtask=False)

    def subtask(self, name:str, description:str|None=None, action:ActionFn|None=None) -> TaskDefinitionBuilder:
        return self.declare(name, description=description, action=action, is_subtask=True)

    def freeze(self) -> None:
        """ End the loading phase. Builders can no longer be modified. """
        logging.debug("Freezing Task Registry with %s tasks", len(self._chains))
        self._frozen = True
        for chain in self._chains.values():
            for builder in chain:
                builder.freeze()

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def chain(self, name:str) -> tuple[TaskDefinition, ...]:
        """ The override chain of a task, oldest first """
        match self._chains.get(name, None):
            case None | []:
                raise IErr.UnrecognizedTaskError(name)
            case [*xs]:
                return tuple(x.definition for x in xs)

    def predecessor(self, definition:TaskDefinition) -> TaskDefinition|None:
        """ The definition `definition` overrides, or None for the base of a chain """
        chain = self.chain(definition.name)
        for idx, curr in enumerate(chain):
            if curr is definition:
                return chain[idx - 1] if idx > 0 else None
        else:
            raise IErr.UnrecognizedTaskError(definition.name)

    def view(self) -> TasksView:
        return TasksView(self)

    def __getitem__(self, name:str) -> TaskDefinition:
        return self.chain(name)[-1]

    def __contains__(self, name:object) -> bool:
        return isinstance(name, str) and bool(self._chains.get(name, None))

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(x for x, y in self._chains.items() if bool(y)))

    def __len__(self) -> int:
        return sum(1 for x in self._chains.values() if bool(x))
