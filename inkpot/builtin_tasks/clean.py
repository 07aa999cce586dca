#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING

# ##-- end stdlib imports

# ##-- 1st party imports
from inkpot import _interface as API  # noqa: N812
from .task_names import TASK_CLEAN

# ##-- end 1st party imports

if TYPE_CHECKING:
    from inkpot._interface import TaskArguments
    from inkpot._structs.environment import RuntimeEnvironment
    from inkpot._structs.run_super import RunSuperFunction
    from inkpot.control.overlord import InkpotOverlord

##-- logging
logging = logmod.getLogger(__name__)
printer = logmod.getLogger(API.PRINTER_NAME)
##-- end logging

async def clean(args:TaskArguments, env:RuntimeEnvironment, run_super:RunSuperFunction) -> None:
    env.artifacts.clear()
    printer.info("Removed artifacts: %s", env.artifacts.path)

def register(dsl:InkpotOverlord) -> None:
    dsl.task(TASK_CLEAN, "Removes the compiled artifacts", clean)
