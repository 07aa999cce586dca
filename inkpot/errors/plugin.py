#!/usr/bin/env python3
"""
Errors of plugin discovery and loading
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

from ._base import BackendError

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"PluginError", "PluginLoadError",

)
# ##-- end Generated Exports

class PluginError(BackendError):
    """ In the course of starting up, inkpot tried to load a plugin that was bad. """
    general_msg = "Inkpot Plugin Error:"
    code        = "IP400"

class PluginLoadError(PluginError):
    code        = "IP401"
