#!/usr/bin/env python3
"""
Errors raised while loading and reading configuration
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

from ._base import UserError

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# ##-- Generated Exports
__all__ = ( # noqa: RUF022

# -- Classes
"ConfigError", "InvalidConfigError", "MissingConfigError",

)
# ##-- end Generated Exports

class ConfigError(UserError):
    """ The loaded config is missing a required value, or has a bad one """
    general_msg = "Inkpot Config Error:"
    code        = "IP100"

class MissingConfigError(ConfigError):
    """ A requested config file doesn't exist """
    general_msg = "Inkpot Config Not Found:"
    code        = "IP101"

class InvalidConfigError(ConfigError):
    """ A config file exists, but couldn't be read as toml """
    general_msg = "Inkpot Config Invalid:"
    code        = "IP102"
