#!/usr/bin/env python3
"""
The network handle tasks use to reach a chain.

The chain client itself is external: a configured provider factory,
`networks.<name>.provider = "module:callable"`, builds it on first use.
The factory is called with the network name, endpoint, and the network's config.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import inspect
import logging as logmod
from typing import TYPE_CHECKING, Any

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
import inkpot.errors as IErr  # noqa: N812
from inkpot._interface import ChainClient_p
from inkpot._structs.code_ref import CodeReference

# ##-- end 1st party imports

if TYPE_CHECKING:
    from inkpot._interface import Signer_p

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class Network:
    """ A lazily connecting handle on the selected network """

    def __init__(self, name:str, config:TomlGuard, *, provider:CodeReference|None=None):
        self.name      = name
        self.config    = config
        self.provider  = provider
        self._client   : ChainClient_p|None = None

    @classmethod
    def build(cls, config:TomlGuard) -> Network:
        """ Select the network named by `default_network` """
        name     = config.on_fail("development").default_network()
        networks = config.on_fail({}).networks()
        if name not in networks:
            raise IErr.ConfigError("Unknown network selected: %s (known: %s)", name, list(networks.keys()))

        net_config = TomlGuard(dict(networks[name].items()))
        match net_config.on_fail(None).provider():
            case None:
                provider = None
            case str() as ref:
                provider = CodeReference.build(ref)
            case x:
                raise IErr.ConfigError("Network provider should be a 'module:callable' string: %s : %s", name, x)

        return cls(name, net_config, provider=provider)

    @property
    def endpoint(self) -> str|None:
        return self.config.on_fail(None).endpoint()

    @property
    def gas_limit(self) -> int|None:
        match self.config.on_fail(None).gas_limit():
            case None:
                return None
            case x:
                return int(x)

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> ChainClient_p:
        if self._client is None:
            raise IErr.NetworkError("Network isn't connected yet: %s", self.name)
        return self._client

    async def connect(self) -> ChainClient_p:
        if self._client is not None:
            return self._client
        if self.provider is None:
            raise IErr.NetworkError("No provider configured for network: %s", self.name)

        logging.info("Connecting to Network: %s (%s)", self.name, self.endpoint)
        try:
            factory = self.provider.try_import()
        except (ImportError, AttributeError) as err:
            raise IErr.NetworkError("Network provider couldn't be imported: %s", self.provider) from err

        client = factory(name=self.name, endpoint=self.endpoint, config=self.config)
        if inspect.isawaitable(client):
            client = await client

        if not isinstance(client, ChainClient_p):
            raise IErr.NetworkError("Network provider didn't build a chain client: %s : %s", self.provider, client)

        self._client = client
        return client

    async def get_signers(self) -> list[Signer_p]:
        client = await self.connect()
        return list(await client.get_signers())

    def create_signer(self, pair:Any) -> Signer_p:
        return self.client.create_signer(pair)

    async def disconnect(self) -> None:
        if self._client is None:
            return

        logging.info("Disconnecting from Network: %s", self.name)
        client, self._client = self._client, None
        await client.disconnect()

    def __repr__(self):
        return f"<Network: {self.name} connected={self.is_connected}>"
