#!/usr/bin/env python3
"""
Errors of task definition, registration and dispatch
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

from ._base import BackendError, UserError

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"ActionNotSetError", "DefaultInMandatoryParamError", "DefaultValueWrongTypeError",
"EnvironmentFrozenError", "InvalidParamNameError",
"MandatoryParamAfterOptionalError", "NonCLITypeInTaskError",
"ParamAfterVariadicError", "ParamAlreadyDefinedError",
"ParamClashesWithGlobalError", "RegistryFrozenError",
"RunSuperNotDefinedError", "TaskDefinitionError", "UnrecognizedTaskError",

)
# ##-- end Generated Exports

class TaskDefinitionError(UserError):
    """ A task declaration broke a schema rule. Raised when declared, never when run. """
    general_msg = "Inkpot Task Definition Error:"
    code        = "IP200"

    def __init__(self, msg:str, *args, task:str|None=None):
        super().__init__(msg, *args)
        self.task = task

class ParamAfterVariadicError(TaskDefinitionError):
    general_msg = "Positional Param After Variadic:"
    code        = "IP201"

class ParamAlreadyDefinedError(TaskDefinitionError):
    general_msg = "Param Already Defined:"
    code        = "IP202"

class ParamClashesWithGlobalError(TaskDefinitionError):
    general_msg = "Param Clashes With Global Param:"
    code        = "IP203"

class MandatoryParamAfterOptionalError(TaskDefinitionError):
    general_msg = "Mandatory Positional Param After Optional:"
    code        = "IP204"

class DefaultInMandatoryParamError(TaskDefinitionError):
    general_msg = "Default Value In Mandatory Param:"
    code        = "IP205"

class InvalidParamNameError(TaskDefinitionError):
    general_msg = "Invalid Param Name:"
    code        = "IP206"

class DefaultValueWrongTypeError(TaskDefinitionError):
    general_msg = "Default Value Has Wrong Type:"
    code        = "IP207"

class NonCLITypeInTaskError(TaskDefinitionError):
    general_msg = "Non-CLI Type In Task Param:"
    code        = "IP208"

class RegistryFrozenError(BackendError):
    """ Tasks were declared after the registry stopped accepting them """
    general_msg = "Task Registry Is Frozen:"
    code        = "IP209"

class EnvironmentFrozenError(BackendError):
    """ The runtime environment was modified after composition """
    general_msg = "Runtime Environment Is Frozen:"
    code        = "IP210"

class RunSuperNotDefinedError(BackendError):
    """ run_super was called in a task that doesn't override anything """
    general_msg = "No Previous Task Implementation:"
    code        = "IP211"

    def __init__(self, msg:str, *args, task:str|None=None):
        super().__init__(msg, *args)
        self.task = task

class UnrecognizedTaskError(UserError):
    """ A task name was dispatched which isn't registered """
    general_msg = "Unrecognized Task:"
    code        = "IP303"

    def __init__(self, name:str):
        super().__init__("%s", name)
        self.name = name

class ActionNotSetError(TaskDefinitionError):
    """ A task was run that was declared without an action """
    general_msg = "Task Action Not Set:"
    code        = "IP212"
