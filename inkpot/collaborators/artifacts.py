#!/usr/bin/env python3
"""
The artifact store: json records of compiled contracts, keyed by contract name.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import json
import logging as logmod
import pathlib as pl
import shutil
from typing import Any, Final

# ##-- end stdlib imports

# ##-- 1st party imports
import inkpot.errors as IErr  # noqa: N812

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

ABI_SUFFIX      : Final[str] = ".json"
CONTRACT_SUFFIX : Final[str] = ".contract"
JSON_INDENT     : Final[int] = 2

class Artifacts:
    """ Reads and writes named json artifact records in a directory """

    def __init__(self, path:pl.Path|str):
        self.path = pl.Path(path)

    def _artifact_path(self, name:str, suffix:str) -> pl.Path:
        return self.path / f"{name}{suffix}"

    def artifact_exists(self, name:str, suffix:str=ABI_SUFFIX) -> bool:
        return self._artifact_path(name, suffix).is_file()

    def read_artifact(self, name:str, suffix:str=ABI_SUFFIX) -> Any:
        target = self._artifact_path(name, suffix)
        if not target.is_file():
            raise IErr.ArtifactNotFoundError("%s (looked in: %s)", name, self.path)

        with target.open() as f:
            return json.load(f)

    def write_artifact(self, name:str, data:Any, suffix:str=ABI_SUFFIX) -> pl.Path:
        self.path.mkdir(parents=True, exist_ok=True)
        target = self._artifact_path(name, suffix)
        logging.debug("Writing Artifact: %s", target)
        with target.open("w") as f:
            json.dump(data, f, indent=JSON_INDENT)
        return target

    def artifact_names(self, suffix:str=ABI_SUFFIX) -> list[str]:
        if not self.path.is_dir():
            return []
        return sorted(x.name.removesuffix(suffix) for x in self.path.iterdir() if x.name.endswith(suffix))

    def clear(self) -> None:
        if not self.path.exists():
            return
        logging.info("Removing Artifacts: %s", self.path)
        shutil.rmtree(self.path)

    def __repr__(self):
        return f"<Artifacts: {self.path}>"
