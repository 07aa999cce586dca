#!/usr/bin/env python3
"""
The ink! compiler collaborator, driving `cargo contract`.

check_env           : is a recent enough cargo-contract installed
get_compiler_input  : find contract manifests from glob patterns
compile             : build each manifest, returning its .contract artifact

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import asyncio
import glob
import logging as logmod
import pathlib as pl
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final

# ##-- end stdlib imports

# ##-- 3rd party imports
import sh
import tomlguard
from packaging.version import InvalidVersion, Version

# ##-- end 3rd party imports

# ##-- 1st party imports
import inkpot.errors as IErr  # noqa: N812
from inkpot import _interface as API  # noqa: N812

# ##-- end 1st party imports

if TYPE_CHECKING:
    from tomlguard import TomlGuard

##-- logging
logging = logmod.getLogger(__name__)
printer = logmod.getLogger(API.PRINTER_NAME)
##-- end logging

CARGO          : Final[str]        = "cargo"
MANIFEST       : Final[str]        = "Cargo.toml"
VERSION_RE     : Final[re.Pattern] = re.compile(r"(\d+\.\d+\.\d+)")
ARTIFACT_DIR   : Final[tuple]      = ("target", "ink")

@dataclass
class InkInput:
    sources  : list[pl.Path]
    options  : dict[str, Any] = field(default_factory=dict)

@dataclass
class InkOutput:
    name      : str
    contract  : pl.Path

def _cargo() -> sh.Command:
    return sh.Command(CARGO)

async def check_env(version:str, toolchain:str|None=None) -> bool:
    """ True if cargo-contract is installed, at `version` or later """
    args = [f"+{toolchain}"] if toolchain else []
    try:
        result = await asyncio.to_thread(_cargo(), *args, "contract", "--version")
    except sh.CommandNotFound:
        logging.warning("cargo isn't installed")
        return False
    except sh.ErrorReturnCode as err:
        logging.warning("cargo-contract isn't available: %s", err.stderr)
        return False

    match VERSION_RE.search(str(result)):
        case None:
            logging.warning("Couldn't read cargo-contract version: %s", result)
            return False
        case found:
            try:
                installed = Version(found[1])
            except InvalidVersion:
                return False

    logging.info("cargo-contract version: %s (required: %s)", installed, version)
    return installed >= Version(version)

def get_compiler_input(config:TomlGuard, patterns:list[str]|None=None) -> InkInput:
    """ Expand glob patterns, relative to the project root, into contract manifests.
    With no patterns, uses `contract.ink.sources`.
    Matched directories use their Cargo.toml.
    """
    root     = pl.Path(config.on_fail(".").paths.root())
    patterns = list(patterns or config.on_fail([]).contract.ink.sources())
    sources  = []
    for pattern in patterns:
        for match in sorted(glob.glob(str(root / pattern), recursive=True)):
            path = pl.Path(match)
            if path.is_dir():
                path = path / MANIFEST
            if path.name == MANIFEST and path.is_file() and path not in sources:
                sources.append(path)

    logging.debug("Compiler Sources: %s", sources)
    return InkInput(sources=sources,
                    options={"toolchain" : config.on_fail(None).contract.ink.toolchain()})

def _contract_name(manifest:pl.Path) -> str:
    data = tomlguard.read(manifest.read_text())
    name = data.on_fail(None).lib.name() or data.package.name
    return name.replace("-", "_")

def _build_one(manifest:pl.Path, toolchain:str|None, verbose:bool) -> InkOutput:
    args = [f"+{toolchain}"] if toolchain else []
    args += ["contract", "build", "--manifest-path", str(manifest)]
    kwargs = {"_cwd": str(manifest.parent)}
    if verbose:
        kwargs['_out'] = lambda line: printer.info(line.rstrip())

    printer.info("Compiling: %s", manifest)
    try:
        _cargo()(*args, **kwargs)
    except sh.CommandNotFound as err:
        raise IErr.CompilerError("cargo isn't installed") from err
    except sh.ErrorReturnCode as err:
        raise IErr.CompilerError("%s : %s", manifest, err.stderr.decode(errors="replace")) from err

    name     = _contract_name(manifest)
    contract = manifest.parent.joinpath(*ARTIFACT_DIR, f"{name}.contract")
    if not contract.is_file():
        raise IErr.CompilerError("Expected artifact wasn't produced: %s", contract)

    return InkOutput(name=name, contract=contract)

async def compile(input:InkInput, verbose:bool=False) -> list[InkOutput]:  # noqa: A001, A002
    """ Build each source in order. The first failure aborts the rest. """
    toolchain = input.options.get("toolchain", None)
    outputs   = []
    for manifest in input.sources:
        outputs.append(await asyncio.to_thread(_build_one, manifest, toolchain, verbose))
    else:
        return outputs
