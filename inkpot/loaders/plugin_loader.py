#!/usr/bin/env python3
"""
Finds plugins and calls them with the overlord, so they can declare tasks.

Load order, which is also override order:
1. builtin tasks
2. installed entry points, group `inkpot.plugins`
3. `startup.plugins` from config, as 'module:callable' strings
4. python files from `startup.sources.tasks`, each defining `register`

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import importlib.util
import logging as logmod
import pathlib as pl
import sys
from importlib.metadata import EntryPoint, entry_points
from typing import TYPE_CHECKING, Any, Callable, Final, TypeAlias

# ##-- end stdlib imports

# ##-- 1st party imports
import inkpot.errors as IErr  # noqa: N812
from inkpot import _interface as API  # noqa: N812
from inkpot._structs.code_ref import CodeReference

# ##-- end 1st party imports

if TYPE_CHECKING:
    from inkpot.control.overlord import InkpotOverlord

    Plugin: TypeAlias = Callable[[InkpotOverlord], Any]

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

BUILTIN_PLUGIN : Final[str] = "inkpot.builtin_tasks:register"
TASK_MODULE_PREFIX : Final[str] = "inkpot_tasks_"

class PluginLoader:
    """
    Load inkpot plugins from the system, the config, and local task files
    """

    def __init__(self, overlord:InkpotOverlord):
        self.overlord = overlord
        self.loaded   : list[str] = []

    def load(self) -> list[str]:
        """ Load every plugin, then freeze the registry """
        config = self.overlord.config
        logging.debug("---- Loading Plugins: %s", API.PLUGIN_GROUP)
        self._apply(BUILTIN_PLUGIN, self._from_ref(BUILTIN_PLUGIN))

        if not config.on_fail(False).startup.skip_plugin_search():
            self._load_entry_points()

        for ref in config.on_fail([]).startup.plugins():
            self._apply(ref, self._from_ref(ref))

        for source in config.on_fail([]).startup.sources.tasks():
            self._load_task_sources(pl.Path(config.on_fail(".").paths.root()) / source)

        self.overlord.finish_loading()
        logging.debug("Loaded %s plugins, %s tasks", len(self.loaded), len(self.overlord.registry))
        return self.loaded

    def _apply(self, name:str, plugin:Plugin) -> None:
        logging.info("-- Applying Plugin: %s", name)
        if not callable(plugin):
            raise IErr.PluginLoadError("Plugin isn't callable: %s", name)
        plugin(self.overlord)
        self.loaded.append(name)

    def _from_ref(self, ref:str) -> Plugin:
        try:
            return CodeReference.build(ref).try_import()
        except (ValueError, ImportError, AttributeError) as err:
            raise IErr.PluginLoadError("Failed to load plugin: %s : %s", ref, err) from err

    def _load_entry_points(self) -> None:
        logging.info("-- Searching environment for plugins, skip with `startup.skip_plugin_search` in config")
        entry_point : EntryPoint
        for entry_point in sorted(entry_points(group=API.PLUGIN_GROUP), key=lambda x: x.name):
            try:
                plugin = entry_point.load()
            except (ImportError, AttributeError) as err:
                raise IErr.PluginLoadError("Plugin Failed to Load: %s : %s", entry_point, err) from err
            else:
                self._apply(entry_point.name, plugin)

    def _load_task_sources(self, path:pl.Path) -> None:
        """ load a python file, or a directory of them, that declare tasks """
        match path:
            case pl.Path() if path.is_dir():
                targets = sorted(x for x in path.iterdir() if x.suffix == ".py")
            case pl.Path() if path.is_file():
                targets = [path]
            case _:
                raise IErr.PluginLoadError("Task source doesn't exist: %s", path)

        for target in targets:
            logging.info("Loading Tasks from: %s", target)
            module = self._import_file(target)
            match getattr(module, API.PLUGIN_REGISTER_FN, None):
                case None:
                    raise IErr.PluginLoadError("Task source has no '%s' function: %s", API.PLUGIN_REGISTER_FN, target)
                case fn:
                    self._apply(str(target), fn)

    def _import_file(self, target:pl.Path) -> Any:
        mod_name = f"{TASK_MODULE_PREFIX}{target.stem}"
        spec     = importlib.util.spec_from_file_location(mod_name, target)
        if spec is None or spec.loader is None:
            raise IErr.PluginLoadError("Couldn't import task source: %s", target)

        module = importlib.util.module_from_spec(spec)
        sys.modules[mod_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as err:
            del sys.modules[mod_name]
            raise IErr.PluginLoadError("Task source failed to import: %s : %s", target, err) from err
        else:
            return module
