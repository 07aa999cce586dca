#!/usr/bin/env python3
"""

"""
from __future__ import annotations

import asyncio
import logging as logmod
import sys
import types

import pytest
logging = logmod.root

from tomlguard import TomlGuard

import inkpot.errors as IErr
from inkpot._interface import DEFAULT_CONFIG
from inkpot.collaborators.network import Network
from inkpot.control.config import deep_merge

class FakeSigner:

    def __init__(self, address):
        self.address = address

class FakeClient:

    def __init__(self, name, endpoint):
        self.name         = name
        self.endpoint     = endpoint
        self.disconnected = False

    async def get_signers(self):
        return [FakeSigner("alice"), FakeSigner("bob")]

    def create_signer(self, pair):
        return FakeSigner(pair)

    async def disconnect(self):
        self.disconnected = True

@pytest.fixture
def provider_module(mocker):
    module = types.ModuleType("inkpot_fake_provider")

    def build(*, name, endpoint, config):
        return FakeClient(name, endpoint)

    async def build_async(*, name, endpoint, config):
        return FakeClient(name, endpoint)

    def build_bad(*, name, endpoint, config):
        return object()

    module.build       = build
    module.build_async = build_async
    module.build_bad   = build_bad
    mocker.patch.dict(sys.modules, {"inkpot_fake_provider": module})
    return module

def make_config(provider=None, **kwargs):
    network = {"endpoint": "ws://localhost:9944", "gas_limit": "1000"}
    if provider:
        network['provider'] = provider
    return TomlGuard(deep_merge(DEFAULT_CONFIG, {"networks": {"local": network}, "default_network": "local", **kwargs}))

class TestNetworkBuild:

    def test_build(self):
        obj = Network.build(make_config())
        assert(obj.name == "local")
        assert(obj.endpoint == "ws://localhost:9944")
        assert(obj.gas_limit == 1000)
        assert(obj.provider is None)
        assert(not obj.is_connected)

    def test_build_unknown_network(self):
        with pytest.raises(IErr.ConfigError):
            Network.build(make_config(default_network="mainnet"))

    def test_build_with_provider(self):
        obj = Network.build(make_config("inkpot_fake_provider:build"))
        assert(str(obj.provider) == "inkpot_fake_provider:build")

class TestNetworkConnection:

    def test_client_before_connect(self):
        with pytest.raises(IErr.NetworkError):
            Network.build(make_config()).client

    def test_no_provider(self):
        with pytest.raises(IErr.NetworkError):
            asyncio.run(Network.build(make_config()).get_signers())

    @pytest.mark.parametrize("factory", ["build", "build_async"])
    def test_get_signers_connects(self, provider_module, factory):
        obj     = Network.build(make_config(f"inkpot_fake_provider:{factory}"))
        signers = asyncio.run(obj.get_signers())
        assert([x.address for x in signers] == ["alice", "bob"])
        assert(obj.is_connected)
        assert(obj.client.endpoint == "ws://localhost:9944")
        assert(obj.create_signer("//Charlie").address == "//Charlie")

    def test_bad_client(self, provider_module):
        obj = Network.build(make_config("inkpot_fake_provider:build_bad"))
        with pytest.raises(IErr.NetworkError):
            asyncio.run(obj.connect())

    def test_missing_provider(self):
        obj = Network.build(make_config("inkpot_no_such_provider:build"))
        with pytest.raises(IErr.NetworkError):
            asyncio.run(obj.connect())

    def test_disconnect(self, provider_module):
        obj    = Network.build(make_config("inkpot_fake_provider:build"))
        client = asyncio.run(obj.connect())
        asyncio.run(obj.disconnect())
        assert(client.disconnected)
        assert(not obj.is_connected)

    def test_disconnect_when_not_connected(self):
        asyncio.run(Network.build(make_config()).disconnect())
