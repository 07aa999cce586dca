#!/usr/bin/env python3
"""
Errors of argument parsing, validation and resolution
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Any

# ##-- end stdlib imports

from ._base import FrontendError, UserError

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"ArgumentError", "InvalidArgumentError", "MissingParamValueError",
"MissingRequiredArgumentError", "ParseError", "RepeatedParamError",
"UnrecognizedParamError", "UnrecognizedPositionalArgumentError",

)
# ##-- end Generated Exports

class ArgumentError(UserError):
    """ A task's arguments couldn't be resolved against its schema """
    general_msg = "Inkpot Argument Error:"
    code        = "IP300"

class InvalidArgumentError(ArgumentError):
    """ A value failed its ArgumentType's validate, or failed to parse """
    general_msg = "Invalid Argument Value:"
    code        = "IP301"

    def __init__(self, arg_name:str, expected_type:str, received_value:Any):
        super().__init__("%s : expected %s, received %r", arg_name, expected_type, received_value)
        self.arg_name       = arg_name
        self.expected_type  = expected_type
        self.received_value = received_value

class MissingRequiredArgumentError(ArgumentError):
    general_msg = "Missing Required Argument:"
    code        = "IP306"

    def __init__(self, name:str, *, task:str|None=None):
        super().__init__("%s (task: %s)", name, task)
        self.name = name
        self.task = task

class UnrecognizedPositionalArgumentError(ArgumentError):
    general_msg = "Unrecognized Positional Argument:"
    code        = "IP308"

class ParseError(FrontendError):
    """ In the course of parsing CLI input, a failure occurred. """
    general_msg = "Inkpot CLI Parsing Failure:"
    code        = "IP304"

class UnrecognizedParamError(ParseError):
    general_msg = "Unrecognized Param:"
    code        = "IP305"

class RepeatedParamError(ParseError):
    general_msg = "Param Given More Than Once:"
    code        = "IP309"

class MissingParamValueError(ParseError):
    general_msg = "Param Is Missing Its Value:"
    code        = "IP312"
