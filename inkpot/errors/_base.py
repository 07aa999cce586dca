#!/usr/bin/env python3
"""



"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import ClassVar

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:
class InkpotError(Exception):
    """
      The base class for all inkpot errors
      will try to % format the first argument with remaining args in str()
    """
    general_msg : ClassVar[str] = "Non-Specific Inkpot Error:"
    code        : ClassVar[str] = "IP000"

    def __str__(self):
        try:
            return self.args[0] % self.args[1:]
        except TypeError:
            return str(self.args)

    def render(self) -> str:
        """ The single line shown to users by the cli """
        return f"{self.code} {self.general_msg} {self}"

class BackendError(InkpotError):
    pass

class FrontendError(InkpotError):
    pass

class UserError(InkpotError):
    pass
