#!/usr/bin/env python3
"""
Configuration loading.

Sources are merged on first access, later sources win:
builtin defaults <- inkpot.toml | pyproject.toml[tool.inkpot] <- --config file <- cli overrides

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import copy
import functools as ftz
import logging as logmod
import pathlib as pl
from collections.abc import Mapping
from typing import Any

# ##-- end stdlib imports

# ##-- 3rd party imports
import tomlguard
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import inkpot.errors as IErr  # noqa: N812
from inkpot import _interface as API  # noqa: N812

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def to_dict(data:Any) -> Any:
    """ Recursively unwrap TomlGuards into plain containers """
    match data:
        case TomlGuard() | Mapping():
            return {k: to_dict(v) for k, v in data.items()}
        case list() | tuple():
            return [to_dict(x) for x in data]
        case _:
            return data

def deep_merge(base:dict, update:Mapping) -> dict:
    """ Merge update into a copy of base. Tables merge, everything else replaces. """
    result = copy.deepcopy(base)
    for key, val in update.items():
        match result.get(key, None), val:
            case dict() as curr, Mapping():
                result[key] = deep_merge(curr, val)
            case _, _:
                result[key] = to_dict(val)
    else:
        return result

class ConfigLoader:
    """ Finds and merges config sources, lazily, into one immutable TomlGuard """

    def __init__(self, *, root:pl.Path|None=None, target:pl.Path|str|None=None, overrides:dict|None=None):
        self.root          = pl.Path(root or pl.Path.cwd())
        self.target        = pl.Path(target) if target else None
        self.overrides     = overrides or {}
        self.loaded_from   : list[pl.Path] = []

    @ftz.cached_property
    def config(self) -> TomlGuard:
        data = copy.deepcopy(API.DEFAULT_CONFIG)
        for source in self._sources():
            data = deep_merge(data, self._load_source(source))
            self.loaded_from.append(source)
        else:
            data = deep_merge(data, self.overrides)

        data['paths']['root'] = str(self.root)
        logging.debug("Config loaded from: %s", [str(x) for x in self.loaded_from])
        return TomlGuard(data)

    def _sources(self) -> list[pl.Path]:
        sources = []
        match [self.root / x for x in API.DEFAULT_LOAD_TARGETS if (self.root / x).is_file()]:
            case [x, *_]:
                sources.append(x)
            case []:
                logging.info("No config file found in %s, using defaults", self.root)

        match self.target:
            case None:
                pass
            case pl.Path() as x if not x.is_file():
                raise IErr.MissingConfigError("%s", x)
            case pl.Path() as x:
                sources.append(x)

        return sources

    def _load_source(self, source:pl.Path) -> dict:
        try:
            loaded = tomlguard.read(source.read_text())
        except (OSError, ValueError) as err:
            raise IErr.InvalidConfigError("%s : %s", source, err) from err

        match source.name:
            case API.PYPROJ_TOML:
                loaded = loaded.on_fail({}).tool.inkpot()
            case _:
                pass

        return to_dict(loaded)
