#!/usr/bin/env python3
"""
The tasks inkpot provides, registered before any other plugin
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING

# ##-- end stdlib imports

from . import clean, compile_ink, help  # noqa: A004

if TYPE_CHECKING:
    from inkpot.control.overlord import InkpotOverlord

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def register(dsl:InkpotOverlord) -> None:
    for module in [compile_ink, clean, help]:
        module.register(dsl)
