#!/usr/bin/env python3
"""
These are the inkpot specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from ._base import InkpotError, BackendError, FrontendError, UserError
from .args import (ArgumentError, InvalidArgumentError, MissingParamValueError,
                   MissingRequiredArgumentError, ParseError, RepeatedParamError,
                   UnrecognizedParamError, UnrecognizedPositionalArgumentError)
from .collaborator import (ArtifactNotFoundError, CompilerError,
                           DuplicateArtifactNameError, EnvironmentCheckError,
                           NetworkError)
from .config import ConfigError, InvalidConfigError, MissingConfigError
from .plugin import PluginError, PluginLoadError
from .task import (ActionNotSetError, DefaultInMandatoryParamError, DefaultValueWrongTypeError,
                   EnvironmentFrozenError, InvalidParamNameError,
                   MandatoryParamAfterOptionalError, NonCLITypeInTaskError,
                   ParamAfterVariadicError, ParamAlreadyDefinedError,
                   ParamClashesWithGlobalError, RegistryFrozenError,
                   RunSuperNotDefinedError, TaskDefinitionError,
                   UnrecognizedTaskError)

# ##-- end 1st party imports

class EarlyExit(Exception):  # noqa: N818
    """ Inkpot was instructed to shut down before completing the requested task """
    pass
