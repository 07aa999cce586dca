#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Any, ClassVar

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, ConfigDict, InstanceOf, model_validator

# ##-- end 3rd party imports

# ##-- 1st party imports
from inkpot.errors import InvalidArgumentError
from inkpot._interface import ArgumentType_p, PARAM_PREFIX
from inkpot._structs.arg_types import ArgumentTypes

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ParamDefinition(BaseModel):
    """ Describes one input of a task.
      Flags are always optional booleans, defaulting to False.
      Variadic params collect every remaining positional value into a list.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name         : str
    type_        : InstanceOf[ArgumentType_p]  = ArgumentTypes.string
    default      : Any                         = None
    description  : str|None                    = None
    is_optional  : bool                        = False
    is_flag      : bool                        = False
    is_variadic  : bool                        = False

    _pad         : ClassVar[int]               = 20

    @model_validator(mode="after")
    def _check_flag(self) -> ParamDefinition:
        if self.is_flag and not (self.is_optional and self.type_ is ArgumentTypes.boolean):
            raise ValueError("Flags must be optional booleans", self.name)
        return self

    @property
    def is_composite(self) -> bool:
        return getattr(self.type_, "is_composite", False)

    @property
    def cli_name(self) -> str:
        """ snake_case -> kebab-case """
        return self.name.replace("_", "-")

    @property
    def key_str(self) -> str:
        return f"{PARAM_PREFIX}{self.cli_name}"

    def __str__(self):
        match self:
            case ParamDefinition(is_flag=True):
                head = self.key_str
            case ParamDefinition(is_variadic=True):
                head = f"[{self.name}...]" if self.is_optional else f"<{self.name}...>"
            case ParamDefinition(is_optional=True):
                head = f"[{self.name}]"
            case _:
                head = f"<{self.name}>"

        parts = [f"{head:<{self._pad}}", f"{'(' + self.type_.name + ')':<14}", self.description or ""]
        if self.is_optional and not self.is_flag and self.default is not None:
            parts.append(f"(default: {self.default!r})")
        return " ".join(parts).rstrip()

    def parse_value(self, value:Any) -> Any:
        """ Parse raw strings with a cli type. Non-string values pass through.
        Variadic params parse each item, flattening composite expansions.
        """
        if not ArgumentTypes.is_cli_type(self.type_):
            return value

        match value:
            case list() | tuple() if self.is_variadic:
                parsed = []
                for item in value:
                    match item:
                        case str() if self.is_composite:
                            parsed += self.type_.parse(self.name, item)
                        case str():
                            parsed.append(self.type_.parse(self.name, item))
                        case _:
                            parsed.append(item)
                else:
                    return parsed
            case str() if self.is_variadic and self.is_composite:
                return self.type_.parse(self.name, value)
            case str() if self.is_variadic:
                return [self.type_.parse(self.name, value)]
            case str():
                return self.type_.parse(self.name, value)
            case _:
                return value

    def validate_value(self, value:Any) -> None:
        """ raises InvalidArgumentError on the first bad value """
        match value:
            case _ if not self.is_variadic or self.is_composite:
                self.type_.validate(self.name, value)
            case str():
                raise InvalidArgumentError(self.name, f"list[{self.type_.name}]", value)
            case list() | tuple():
                for item in value:
                    self.type_.validate(self.name, item)
            case _:
                raise InvalidArgumentError(self.name, f"list[{self.type_.name}]", value)
