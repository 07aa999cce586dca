#!/usr/bin/env python3
"""
Errors raised by the compiler, the network handle and the artifact store,
and by the built-in tasks which drive them
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
"ArtifactNotFoundError", "CompilerError", "DuplicateArtifactNameError",
"EnvironmentCheckError", "NetworkError",

)
# ##-- end Generated Exports

class NetworkError(BackendError):
    """ The chain client couldn't be built or used """
    general_msg = "Inkpot Network Error:"
    code        = "IP500"

class ArtifactNotFoundError(UserError):
    general_msg = "Artifact Not Found:"
    code        = "IP510"

class EnvironmentCheckError(UserError):
    """ A required external toolchain precondition isn't met """
    general_msg = "Toolchain Environment Check Failed:"
    code        = "IP600"

class DuplicateArtifactNameError(UserError):
    """ Two compiled contracts share an output name """
    general_msg = "Duplicate Contract Artifact Name:"
    code        = "IP601"

    def __init__(self, name:str, path1:str, path2:str):
        super().__init__("%s is produced by both %s and %s", name, path1, path2)
        self.name  = name
        self.path1 = path1
        self.path2 = path2

class CompilerError(BackendError):
    general_msg = "Contract Compilation Failed:"
    code        = "IP602"
