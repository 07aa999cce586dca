#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import importlib
import logging as logmod
from typing import Any, ClassVar

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, ConfigDict, field_validator

# ##-- end 3rd party imports

# ##-- 1st party imports
from inkpot._interface import IMPORT_SEP

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class CodeReference(BaseModel):
    """
      A reference to a class or function, of the form 'module.path:attr.path'.
      Used from toml, where a plugin or provider factory is named by a string.
    """
    model_config = ConfigDict(frozen=True)

    module     : str
    value      : str

    _separator : ClassVar[str] = IMPORT_SEP

    @classmethod
    def build(cls, ref:str) -> CodeReference:
        match ref.split(cls._separator):
            case [module, value] if module and value:
                return cls(module=module, value=value)
            case _:
                raise ValueError("Code References need the form 'module:attr'", ref)

    @field_validator("module", "value")
    def _no_whitespace(cls, val:str) -> str:
        if val != val.strip():
            raise ValueError("Code Reference parts can't have surrounding whitespace", val)
        return val

    def try_import(self) -> Any:
        """ Import the module and retrieve the referenced attribute.
        Raises ImportError or AttributeError.
        """
        logging.debug("Importing Code Reference: %s", self)
        curr = importlib.import_module(self.module)
        for attr in self.value.split("."):
            curr = getattr(curr, attr)
        return curr

    def __str__(self):
        return f"{self.module}{self._separator}{self.value}"
