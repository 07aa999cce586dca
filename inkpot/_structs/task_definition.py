#!/usr/bin/env python3
"""
Task Definitions, and the fluent builder which produces them.

A TaskDefinition is immutable. The builder owns the in-progress definition,
replacing it with an updated copy on each fluent call, and checks every
schema rule as params are added, not when the task is run.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING, Any, Self

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, ConfigDict, Field

# ##-- end 3rd party imports

# ##-- 1st party imports
import inkpot.errors as IErr  # noqa: N812
from inkpot._interface import GLOBAL_PARAM_NAMES, PARAM_NAME_RE
from inkpot._structs.arg_types import ArgumentTypes
from inkpot._structs.param_definition import ParamDefinition

# ##-- end 1st party imports

if TYPE_CHECKING:
    from inkpot._interface import ActionFn, ArgumentType_p

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

async def _unset_action(args, env, run_super) -> None:  # noqa: ANN001
    raise IErr.ActionNotSetError("No action was set for this task")

class TaskDefinition(BaseModel):
    """ The name, schema, and action of a task at one point in its override chain """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name                          : str
    description                   : str|None                   = None
    action                        : Any                        = _unset_action
    is_subtask                    : bool                       = False
    param_definitions             : dict[str, ParamDefinition] = Field(default_factory=dict)
    positional_param_definitions  : tuple[ParamDefinition, ...] = ()

    @property
    def all_params(self) -> list[ParamDefinition]:
        return [*self.param_definitions.values(), *self.positional_param_definitions]

    def has_param(self, name:str) -> bool:
        return name in self.param_definitions or any(x.name == name for x in self.positional_param_definitions)

    def __repr__(self):
        kind = "Subtask" if self.is_subtask else "Task"
        return f"<{kind}Definition: {self.name}>"

class TaskDefinitionBuilder:
    """ Accumulates a task's schema, description and action.
    eg:
    dsl.task("greet").add_optional_param("name", default="world").set_action(greet)
    """

    def __init__(self, name:str, *, description:str|None=None, action:ActionFn|None=None, is_subtask:bool=False):
        self._frozen     = False
        self._definition = TaskDefinition(name=name,
                                          description=description,
                                          action=action or _unset_action,
                                          is_subtask=is_subtask)

    @property
    def definition(self) -> TaskDefinition:
        return self._definition

    @property
    def name(self) -> str:
        return self._definition.name

    def freeze(self) -> None:
        self._frozen = True

    def _update(self, **kwargs:Any) -> Self:
        if self._frozen:
            raise IErr.RegistryFrozenError("Can't modify task after loading finished: %s", self.name)
        self._definition = self._definition.model_copy(update=kwargs)
        return self

    def set_description(self, description:str) -> Self:
        return self._update(description=description)

    def set_action(self, action:ActionFn) -> Self:
        if not callable(action):
            raise TypeError("Task actions must be callable", self.name, action)
        return self._update(action=action)

    ##--| named params

    def add_param(self, name:str, description:str|None=None, default:Any=None, type_:ArgumentType_p|None=None, *, is_optional:bool=False) -> Self:
        param = self._build_param(name, description, default, type_, is_optional=is_optional)
        return self._update(param_definitions={**self._definition.param_definitions, name: param})

    def add_optional_param(self, name:str, description:str|None=None, default:Any=None, type_:ArgumentType_p|None=None) -> Self:
        return self.add_param(name, description, default, type_, is_optional=True)

    def add_flag(self, name:str, description:str|None=None) -> Self:
        param = self._build_param(name, description, False, ArgumentTypes.boolean, is_optional=True, is_flag=True)
        return self._update(param_definitions={**self._definition.param_definitions, name: param})

    ##--| positional params

    def add_positional_param(self, name:str, description:str|None=None, default:Any=None, type_:ArgumentType_p|None=None, *, is_optional:bool=False) -> Self:
        param = self._build_param(name, description, default, type_, is_optional=is_optional)
        self._check_positional_order(param)
        return self._update(positional_param_definitions=(*self._definition.positional_param_definitions, param))

    def add_optional_positional_param(self, name:str, description:str|None=None, default:Any=None, type_:ArgumentType_p|None=None) -> Self:
        return self.add_positional_param(name, description, default, type_, is_optional=True)

    def add_variadic_positional_param(self, name:str, description:str|None=None, default:list|None=None, type_:ArgumentType_p|None=None, *, is_optional:bool=False) -> Self:
        param = self._build_param(name, description, default, type_, is_optional=is_optional, is_variadic=True)
        self._check_positional_order(param)
        return self._update(positional_param_definitions=(*self._definition.positional_param_definitions, param))

    def add_optional_variadic_positional_param(self, name:str, description:str|None=None, default:list|None=None, type_:ArgumentType_p|None=None) -> Self:
        return self.add_variadic_positional_param(name, description, default, type_, is_optional=True)

    ##--| checks

    def _build_param(self, name:str, description:str|None, default:Any, type_:ArgumentType_p|None, *, is_optional:bool, is_flag:bool=False, is_variadic:bool=False) -> ParamDefinition:
        task = self.name
        if self._frozen:
            raise IErr.RegistryFrozenError("Can't modify task after loading finished: %s", task)
        if not PARAM_NAME_RE.match(name):
            raise IErr.InvalidParamNameError("%s : %s", task, name, task=task)
        if name in GLOBAL_PARAM_NAMES:
            raise IErr.ParamClashesWithGlobalError("%s : %s", task, name, task=task)
        if self._definition.has_param(name):
            raise IErr.ParamAlreadyDefinedError("%s : %s", task, name, task=task)
        if not is_optional and default is not None:
            raise IErr.DefaultInMandatoryParamError("%s : %s", task, name, task=task)

        type_ = type_ or ArgumentTypes.string
        if not (self._definition.is_subtask or ArgumentTypes.is_cli_type(type_)):
            raise IErr.NonCLITypeInTaskError("%s : %s : %s", task, name, type_.name, task=task)

        param = ParamDefinition(name=name,
                                type_=type_,
                                default=default,
                                description=description,
                                is_optional=is_optional,
                                is_flag=is_flag,
                                is_variadic=is_variadic)

        if default is not None:
            try:
                param.validate_value(default)
            except IErr.InvalidArgumentError as err:
                raise IErr.DefaultValueWrongTypeError("%s : %s : %s", task, name, err, task=task) from err

        return param

    def _check_positional_order(self, param:ParamDefinition) -> None:
        match self._definition.positional_param_definitions:
            case ():
                pass
            case (*_, last) if last.is_variadic:
                raise IErr.ParamAfterVariadicError("%s : %s follows %s", self.name, param.name, last.name, task=self.name)
            case (*_, last) if last.is_optional and not param.is_optional:
                raise IErr.MandatoryParamAfterOptionalError("%s : %s follows %s", self.name, param.name, last.name, task=self.name)
            case _:
                pass
