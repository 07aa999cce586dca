#!/usr/bin/env python3
"""
The compile pipeline:

compile
  -> compile::pre-check            : is the toolchain usable
  -> compile::gather-input         : which contracts to build
  -> compile::invoke-compiler      : build them
  -> compile::materialize-output   : write their artifacts

Each stage is its own subtask, so a plugin can override one stage
without touching the others.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import copy
import json
import logging as logmod
from typing import TYPE_CHECKING, Any

# ##-- end stdlib imports

# ##-- 1st party imports
import inkpot.errors as IErr  # noqa: N812
from inkpot import _interface as API  # noqa: N812
from inkpot._structs.arg_types import ArgumentTypes
from inkpot.collaborators.artifacts import ABI_SUFFIX, CONTRACT_SUFFIX
from inkpot.compiler import ink
from inkpot.utils.log_config import SimpleLogColour
from .task_names import (TASK_CHECK, TASK_COMPILE, TASK_COMPILE_EXEC,
                         TASK_COMPILE_INPUT, TASK_COMPILE_OUTPUT,
                         TASK_COMPILE_PRE)

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

async def pre_check(args:TaskArguments, env:RuntimeEnvironment, run_super:RunSuperFunction) -> None:
    version   = env.config.on_fail("0.8.0").contract.ink.version()
    toolchain = env.config.on_fail(None).contract.ink.toolchain()
    if not await ink.check_env(version, toolchain):
        raise IErr.EnvironmentCheckError("cargo-contract v%s or later is required", version)

async def gather_input(args:TaskArguments, env:RuntimeEnvironment, run_super:RunSuperFunction) -> ink.InkInput:
    return ink.get_compiler_input(env.config, args['source_pattern'])

async def invoke_compiler(args:TaskArguments, env:RuntimeEnvironment, run_super:RunSuperFunction) -> list[ink.InkOutput]:
    if not bool(args['input'].sources):
        return []

    return await ink.compile(args['input'], env.args.on_fail(False).verbose())

async def materialize_output(args:TaskArguments, env:RuntimeEnvironment, run_super:RunSuperFunction) -> None:
    """ Write a full .contract record, and a .json record without the wasm blob,
    for each compiled contract.
    Duplicate names are checked before anything is written.
    """
    if not bool(args['input'].sources):
        return

    seen : dict[str, str] = {}
    for target in args['output']:
        if target.name in seen:
            raise IErr.DuplicateArtifactNameError(target.name, seen[target.name], str(target.contract))
        seen[target.name] = str(target.contract)

    for target in args['output']:
        with target.contract.open() as f:
            abi = json.load(f)

        env.artifacts.write_artifact(target.name, abi, suffix=CONTRACT_SUFFIX)
        stripped = copy.deepcopy(abi)
        stripped.get("source", {}).pop("wasm", None)
        env.artifacts.write_artifact(target.name, stripped, suffix=ABI_SUFFIX)

    printer.info("")
    printer.info("Compiled successfully! You can find all artifacts at %s", SimpleLogColour.cyan(env.artifacts.path))

async def compile_all(args:TaskArguments, env:RuntimeEnvironment, run_super:RunSuperFunction) -> Any:
    await env.run(TASK_COMPILE_PRE)
    input  = await env.run(TASK_COMPILE_INPUT, {"source_pattern": args['source_pattern']})  # noqa: A001
    output = await env.run(TASK_COMPILE_EXEC, {"input": input})
    await env.run(TASK_COMPILE_OUTPUT, {"input": input, "output": output})
    return output

async def check(args:TaskArguments, env:RuntimeEnvironment, run_super:RunSuperFunction) -> None:
    await env.run(TASK_COMPILE_PRE)
    printer.info("The ink toolchain is ready")

def register(dsl:InkpotOverlord) -> None:
    dsl.subtask(TASK_COMPILE_PRE, "Checks cargo-contract is installed", pre_check)

    (dsl.subtask(TASK_COMPILE_INPUT, "Finds the contracts to compile")
     .add_optional_variadic_positional_param("source_pattern", "Glob patterns of contract manifests", [])
     .set_action(gather_input))

    (dsl.subtask(TASK_COMPILE_EXEC, "Compiles contracts with cargo-contract")
     .add_param("input", "The compiler input", type_=ArgumentTypes.any)
     .set_action(invoke_compiler))

    (dsl.subtask(TASK_COMPILE_OUTPUT, "Writes compiled contracts to the artifacts directory")
     .add_param("input", "The compiler input", type_=ArgumentTypes.any)
     .add_param("output", "The compiler output", type_=ArgumentTypes.any)
     .set_action(materialize_output))

    (dsl.task(TASK_COMPILE, "Compiles the ink contracts of the project")
     .add_optional_variadic_positional_param("source_pattern", "Glob patterns of contract manifests", [])
     .set_action(compile_all))

    dsl.task(TASK_CHECK, "Checks the ink toolchain is installed", check)
