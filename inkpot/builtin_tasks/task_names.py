#!/usr/bin/env python3
"""
Names of the builtin tasks
"""
from __future__ import annotations

from typing import Final

from inkpot._interface import TASK_SEP

TASK_HELP                   : Final[str] = "help"
TASK_CLEAN                  : Final[str] = "clean"
TASK_CHECK                  : Final[str] = "check"

TASK_COMPILE                : Final[str] = "compile"
TASK_COMPILE_PRE            : Final[str] = f"{TASK_COMPILE}{TASK_SEP}pre-check"
TASK_COMPILE_INPUT          : Final[str] = f"{TASK_COMPILE}{TASK_SEP}gather-input"
TASK_COMPILE_EXEC           : Final[str] = f"{TASK_COMPILE}{TASK_SEP}invoke-compiler"
TASK_COMPILE_OUTPUT         : Final[str] = f"{TASK_COMPILE}{TASK_SEP}materialize-output"
