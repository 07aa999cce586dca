#!/usr/bin/env python3
"""

"""
from __future__ import annotations

import asyncio
import logging as logmod

import pytest
logging = logmod.root

from tomlguard import TomlGuard

import inkpot.errors as IErr
from inkpot.structs import RunSuperFunction, RuntimeEnvironment, TaskDefinition
from inkpot._structs.code_ref import CodeReference

def build_env(**kwargs):
    base = dict(config=TomlGuard({}), args=TomlGuard({}), tasks={}, run=None, network=None, artifacts=None)
    base.update(kwargs)
    return RuntimeEnvironment(**base)

class TestRunSuperFunction:

    def test_undefined(self):
        obj = RunSuperFunction("simple")
        assert(not obj.is_defined)
        assert(not bool(obj))
        with pytest.raises(IErr.RunSuperNotDefinedError):
            asyncio.run(obj())

    def test_forwards_current_args(self, mocker):
        predecessor = TaskDefinition(name="simple")
        invoke      = mocker.AsyncMock(return_value="prev")
        obj         = RunSuperFunction("simple", predecessor=predecessor, depth=0, invoke=invoke, forward={"a": 1})
        assert(bool(obj))
        assert(asyncio.run(obj()) == "prev")
        invoke.assert_awaited_once_with(predecessor, 0, {"a": 1})

    def test_explicit_args(self, mocker):
        predecessor = TaskDefinition(name="simple")
        invoke      = mocker.AsyncMock(return_value=None)
        obj         = RunSuperFunction("simple", predecessor=predecessor, depth=2, invoke=invoke, forward={"a": 1})
        asyncio.run(obj({"b": 2}))
        invoke.assert_awaited_once_with(predecessor, 2, {"b": 2})

class TestRuntimeEnvironment:

    def test_initial(self):
        obj = build_env()
        assert(not obj.is_frozen)
        assert(isinstance(obj.config, TomlGuard))

    def test_extend_before_freeze(self):
        obj = build_env()
        obj.greeting = "hello"
        obj.config   = TomlGuard({"a": 1})
        assert(obj.greeting == "hello")
        assert(obj.config.a == 1)

    def test_frozen(self):
        obj = build_env()
        obj.freeze()
        assert(obj.is_frozen)
        with pytest.raises(IErr.EnvironmentFrozenError):
            obj.greeting = "hello"

    def test_cant_unfreeze(self):
        obj = build_env()
        obj.freeze()
        with pytest.raises(IErr.EnvironmentFrozenError):
            obj._frozen = False

    def test_cant_delete(self):
        obj = build_env()
        with pytest.raises(IErr.EnvironmentFrozenError):
            del obj.config

class TestCodeReference:

    def test_build(self):
        obj = CodeReference.build("inkpot.control.registry:TaskRegistry")
        assert(obj.module == "inkpot.control.registry")
        assert(obj.value == "TaskRegistry")
        assert(str(obj) == "inkpot.control.registry:TaskRegistry")

    @pytest.mark.parametrize("ref", ["no_separator", "a:b:c", ":value", "module:"])
    def test_build_fail(self, ref):
        with pytest.raises(ValueError):
            CodeReference.build(ref)

    def test_import(self):
        from inkpot.control.registry import TaskRegistry
        assert(CodeReference.build("inkpot.control.registry:TaskRegistry").try_import() is TaskRegistry)

    def test_import_nested_attr(self):
        from inkpot._structs.arg_types import ArgumentTypes
        obj = CodeReference.build("inkpot._structs.arg_types:ArgumentTypes.is_cli_type")
        assert(obj.try_import() == ArgumentTypes.is_cli_type)

    def test_import_missing_attr(self):
        with pytest.raises(AttributeError):
            CodeReference.build("inkpot.control.registry:NotAThing").try_import()

    def test_import_missing_module(self):
        with pytest.raises(ImportError):
            CodeReference.build("inkpot.not_a_module:thing").try_import()
