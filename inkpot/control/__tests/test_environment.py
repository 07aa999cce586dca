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
from inkpot._interface import DEFAULT_CONFIG
from inkpot.collaborators.artifacts import Artifacts
from inkpot.collaborators.network import Network
from inkpot.control.environment import EnvironmentComposer
from inkpot.control.overlord import InkpotOverlord
from inkpot.control.registry import TaskRegistry

class TestEnvironmentComposer:

    def test_compose_defaults(self):
        obj = EnvironmentComposer(TaskRegistry())
        env = obj.compose(config=TomlGuard(DEFAULT_CONFIG), args=TomlGuard({}))
        assert(env.is_frozen)
        assert(isinstance(env.network, Network))
        assert(env.network.name == "development")
        assert(isinstance(env.artifacts, Artifacts))
        assert(obj.environment is env)

    def test_compose_once(self):
        obj   = EnvironmentComposer(TaskRegistry())
        first = obj.compose(config=TomlGuard(DEFAULT_CONFIG), args=TomlGuard({}))
        assert(obj.compose(config=TomlGuard(DEFAULT_CONFIG), args=TomlGuard({})) is first)

    def test_extenders_applied_in_order(self):
        obj   = EnvironmentComposer(TaskRegistry())
        order = []

        @obj.extend
        def add_greeting(env):
            order.append("first")
            env.greeting = "hello"

        @obj.extend
        def shout_greeting(env):
            order.append("second")
            env.greeting = env.greeting.upper()

        env = obj.compose(config=TomlGuard(DEFAULT_CONFIG), args=TomlGuard({}))
        assert(order == ["first", "second"])
        assert(env.greeting == "HELLO")

    def test_extend_after_compose(self):
        obj = EnvironmentComposer(TaskRegistry())
        obj.compose(config=TomlGuard(DEFAULT_CONFIG), args=TomlGuard({}))
        with pytest.raises(IErr.EnvironmentFrozenError):
            obj.extend(lambda env: None)

    def test_extender_must_be_callable(self):
        with pytest.raises(TypeError):
            EnvironmentComposer(TaskRegistry()).extend("not callable")

    def test_artifacts_relative_to_root(self, tmp_path):
        paths  = {"root": str(tmp_path), "artifacts": "out"}
        config = TomlGuard({**DEFAULT_CONFIG, "paths": paths})
        env    = EnvironmentComposer(TaskRegistry()).compose(config=config, args=TomlGuard({}))
        assert(env.artifacts.path == tmp_path / "out")

    def test_absolute_artifacts_path_kept(self, tmp_path):
        paths  = {"root": str(tmp_path / "project"), "artifacts": str(tmp_path / "elsewhere")}
        config = TomlGuard({**DEFAULT_CONFIG, "paths": paths})
        env    = EnvironmentComposer(TaskRegistry()).compose(config=config, args=TomlGuard({}))
        assert(env.artifacts.path == tmp_path / "elsewhere")

    def test_unknown_network(self):
        config = TomlGuard({**DEFAULT_CONFIG, "default_network": "mainnet"})
        with pytest.raises(IErr.ConfigError):
            EnvironmentComposer(TaskRegistry()).compose(config=config, args=TomlGuard({}))

class TestOverlordEnvironment:

    def test_tasks_see_extensions(self, tmp_path):
        obj = InkpotOverlord(artifacts=Artifacts(tmp_path))

        def extender(env):
            env.greeting = "hello"

        def action(args, env, run_super):
            return env.greeting

        obj.extend_environment(extender)
        obj.task("simple", action=action)
        assert(asyncio.run(obj.run("simple")) == "hello")

    def test_tasks_cant_modify_environment(self, tmp_path):
        obj = InkpotOverlord(artifacts=Artifacts(tmp_path))

        def action(args, env, run_super):
            env.greeting = "hello"

        obj.task("simple", action=action)
        with pytest.raises(IErr.EnvironmentFrozenError):
            asyncio.run(obj.run("simple"))

    def test_environment_freezes_registry(self, tmp_path):
        obj = InkpotOverlord(artifacts=Artifacts(tmp_path))
        obj.environment
        assert(obj.registry.is_frozen)
        with pytest.raises(IErr.RegistryFrozenError):
            obj.task("late")

    def test_environment_args(self, tmp_path):
        obj = InkpotOverlord(args={"verbose": True}, artifacts=Artifacts(tmp_path))
        assert(obj.environment.args.verbose is True)
        assert(obj.environment.args.show_stack_traces is False)

    def test_shutdown_disconnects(self, tmp_path, mocker):
        network = mocker.Mock(spec=Network)
        network.disconnect = mocker.AsyncMock()
        obj = InkpotOverlord(network=network, artifacts=Artifacts(tmp_path))
        obj.environment
        asyncio.run(obj.shutdown())
        network.disconnect.assert_awaited_once()

    def test_shutdown_without_environment(self, tmp_path, mocker):
        network = mocker.Mock(spec=Network)
        network.disconnect = mocker.AsyncMock()
        obj = InkpotOverlord(network=network, artifacts=Artifacts(tmp_path))
        asyncio.run(obj.shutdown())
        network.disconnect.assert_not_awaited()
