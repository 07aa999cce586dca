#!/usr/bin/env python3
"""
inkpot, a task runner for ink! smart contract development.

Tasks are declared by plugins against an InkpotOverlord,
can be overridden while keeping access to their previous definition
through run_super, and run within one shared runtime environment.

"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from ._interface import __version__
from .control.overlord import InkpotOverlord
from . import errors

# ##-- end 1st party imports
