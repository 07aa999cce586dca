#!/usr/bin/env python3
"""
Re-exports of inkpot's data structures
"""
# ruff: noqa: F401
from ._structs.arg_types import (ArgumentType, ArgumentTypes, BooleanType,
                                 CLIArgumentType, FilePatternType, FloatType,
                                 InputFileType, IntType, JsonType, StringType)
from ._structs.environment import RuntimeEnvironment
from ._structs.param_definition import ParamDefinition
from ._structs.run_super import RunSuperFunction
from ._structs.task_definition import TaskDefinition, TaskDefinitionBuilder
