#!/usr/bin/env python3
"""
The Argument Types tasks use to validate, and parse, their arguments.

A CLI capable type has `parse`, turning a raw string into the typed value.
`parse` always produces something `validate` accepts.
Composite types (eg: file_pattern) expand one raw token into a list of values.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import glob
import json
import logging as logmod
import os
import pathlib as pl
import re
from collections.abc import Sequence
from typing import (TYPE_CHECKING, Any, ClassVar, Final, Iterator)

# ##-- end stdlib imports

# ##-- 1st party imports
from inkpot.errors import InvalidArgumentError
from inkpot._interface import ArgumentType_p, CLIArgumentType_p

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

HEX_RE     : Final[re.Pattern] = re.compile(r"^0x[0-9a-fA-F]+$")
DECIMAL_RE : Final[re.Pattern] = re.compile(r"^-?[0-9]+$")
TRUE_STRS  : Final[set[str]]   = {"true"}
FALSE_STRS : Final[set[str]]   = {"false"}

class ArgumentType:
    """ Base for argument types which can't come from the command line """
    name         : ClassVar[str]  = "any"
    is_composite : ClassVar[bool] = False

    def validate(self, arg_name:str, value:Any) -> None:
        pass

    def __repr__(self):
        return f"<ArgType: {self.name}>"

class CLIArgumentType(ArgumentType):

    def parse(self, arg_name:str, raw:str) -> Any:
        raise NotImplementedError()

class StringType(CLIArgumentType):
    name = "string"

    def parse(self, arg_name:str, raw:str) -> str:
        return raw

    def validate(self, arg_name:str, value:Any) -> None:
        if not isinstance(value, str):
            raise InvalidArgumentError(arg_name, self.name, value)

class BooleanType(CLIArgumentType):
    name = "boolean"

    def parse(self, arg_name:str, raw:str) -> bool:
        match raw.lower():
            case x if x in TRUE_STRS:
                return True
            case x if x in FALSE_STRS:
                return False
            case _:
                raise InvalidArgumentError(arg_name, self.name, raw)

    def validate(self, arg_name:str, value:Any) -> None:
        if not isinstance(value, bool):
            raise InvalidArgumentError(arg_name, self.name, value)

class IntType(CLIArgumentType):
    """ Decimal or 0x prefixed hexadecimal integers """
    name = "int"

    def parse(self, arg_name:str, raw:str) -> int:
        match raw:
            case x if DECIMAL_RE.match(x):
                return int(x, 10)
            case x if HEX_RE.match(x):
                return int(x, 16)
            case _:
                raise InvalidArgumentError(arg_name, self.name, raw)

    def validate(self, arg_name:str, value:Any) -> None:
        match value:
            case bool():
                raise InvalidArgumentError(arg_name, self.name, value)
            case int():
                pass
            case _:
                raise InvalidArgumentError(arg_name, self.name, value)

class FloatType(CLIArgumentType):
    name = "float"

    def parse(self, arg_name:str, raw:str) -> float:
        try:
            return float(raw)
        except ValueError as err:
            raise InvalidArgumentError(arg_name, self.name, raw) from err

    def validate(self, arg_name:str, value:Any) -> None:
        match value:
            case bool():
                raise InvalidArgumentError(arg_name, self.name, value)
            case int() | float():
                pass
            case _:
                raise InvalidArgumentError(arg_name, self.name, value)

class JsonType(CLIArgumentType):
    """ Any value that can be decoded from a json string """
    name = "json"

    def parse(self, arg_name:str, raw:str) -> Any:
        try:
            return json.loads(raw)
        except json.JSONDecodeError as err:
            raise InvalidArgumentError(arg_name, self.name, raw) from err

    def validate(self, arg_name:str, value:Any) -> None:
        try:
            json.dumps(value)
        except (TypeError, ValueError) as err:
            raise InvalidArgumentError(arg_name, self.name, value) from err

class InputFileType(CLIArgumentType):
    """ A path to an existing, readable, file """
    name = "input_file"

    def parse(self, arg_name:str, raw:str) -> pl.Path:
        path = pl.Path(raw)
        self.validate(arg_name, path)
        return path

    def validate(self, arg_name:str, value:Any) -> None:
        match value:
            case str() | pl.Path():
                path = pl.Path(value)
            case _:
                raise InvalidArgumentError(arg_name, self.name, value)

        if not (path.is_file() and os.access(path, os.R_OK)):
            raise InvalidArgumentError(arg_name, self.name, value)

class FilePatternType(CLIArgumentType):
    """ A glob pattern, expanded against the cwd into a sorted list of paths """
    name         = "file_pattern"
    is_composite = True

    def parse(self, arg_name:str, raw:str) -> list[pl.Path]:
        if not raw:
            raise InvalidArgumentError(arg_name, self.name, raw)
        return sorted(pl.Path(x) for x in glob.glob(raw, recursive=True))

    def validate(self, arg_name:str, value:Any) -> None:
        match value:
            case str():
                raise InvalidArgumentError(arg_name, self.name, value)
            case Sequence() if all(isinstance(x, (str, pl.Path)) for x in value):
                pass
            case _:
                raise InvalidArgumentError(arg_name, self.name, value)

class _ArgumentTypes:
    """ The catalogue of named argument types.
    Access builtins as attributes, eg: `ArgumentTypes.int`
    """

    def __init__(self):
        self._types : dict[str, ArgumentType_p] = {}

    def register(self, arg_type:ArgumentType_p) -> ArgumentType_p:
        match arg_type:
            case ArgumentType_p() if arg_type.name in self._types:
                logging.warning("Replacing Argument Type: %s", arg_type.name)
            case ArgumentType_p():
                pass
            case x:
                raise TypeError("Not an argument type", x)

        self._types[arg_type.name] = arg_type
        return arg_type

    def get(self, name:str) -> ArgumentType_p:
        return self._types[name]

    def __getattr__(self, name:str) -> ArgumentType_p:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._types[name]
        except KeyError:
            raise AttributeError(name) from None

    def __contains__(self, name:str) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[ArgumentType_p]:
        return iter(self._types.values())

    @staticmethod
    def is_cli_type(arg_type:ArgumentType_p) -> bool:
        return isinstance(arg_type, CLIArgumentType_p)

ArgumentTypes = _ArgumentTypes()
for _ctor in [StringType, BooleanType, IntType, FloatType, JsonType, InputFileType, FilePatternType, ArgumentType]:
    ArgumentTypes.register(_ctor())
