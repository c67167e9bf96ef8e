#!/usr/bin/env python3

import re
from dataclasses import dataclass, asdict, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Union
from .errors import NotFoundError, MalformedConfigError

WILDCARD = "*"
CHAIN_ID = re.compile(r"[0-9]+")


def is_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class NetworkProfile:
    host: str
    """
    Address of the node, e.g. the loopback address of a local test chain
    """

    port: int

    network_id: Union[str, int]
    """
    Decimal chain identifier, or "*" to accept any chain.
    Integers are stored as their decimal string.
    """

    gas: int
    """
    Default gas ceiling for transactions sent through this profile
    """

    def __post_init__(self):
        if is_integer(self.network_id):
            object.__setattr__(self, "network_id", str(self.network_id))
        if not isinstance(self.host, str) or self.host == "":
            raise MalformedConfigError("host must be a non-empty string")
        if not is_integer(self.port) or not 1 <= self.port <= 65535:
            raise MalformedConfigError("port out of range (1-65535): " + str(self.port))
        if not isinstance(self.network_id, str) or not (self.network_id == WILDCARD or CHAIN_ID.fullmatch(self.network_id)):
            raise MalformedConfigError("network_id must be \"*\" or a decimal chain id: " + repr(self.network_id))
        if not is_integer(self.gas) or self.gas <= 0:
            raise MalformedConfigError("gas must be positive: " + str(self.gas))

    @property
    def url(self) -> str:
        return "http://" + self.host + ":" + str(self.port)

    def matches(self, chain_id: Union[str, int]) -> bool:
        '''True if this profile accepts the chain identified by `chain_id`'''
        return self.network_id == WILDCARD or self.network_id == str(chain_id)


@dataclass(frozen=True)
class CompilerSpec:
    version: str
    """
    Semantic-version range accepted for the compiler, e.g. "^0.4.24"
    """

    def __post_init__(self):
        if not isinstance(self.version, str) or self.version.strip() == "":
            raise MalformedConfigError("version must be a non-empty string")


@dataclass(frozen=True)
class ConfigDocument:
    networks: Mapping[str, NetworkProfile] = field(default_factory=dict)
    compilers: Mapping[str, CompilerSpec] = field(default_factory=dict)

    def __post_init__(self):
        # sections are exposed read-only
        object.__setattr__(self, "networks", MappingProxyType(dict(self.networks)))
        object.__setattr__(self, "compilers", MappingProxyType(dict(self.compilers)))

    def __hash__(self):
        return hash((frozenset(self.networks.items()), frozenset(self.compilers.items())))

    def get_network(self, name: str) -> NetworkProfile:
        try:
            return self.networks[name]
        except KeyError:
            raise NotFoundError("unknown network: " + str(name)) from None

    def get_compiler_spec(self, toolchain: str) -> CompilerSpec:
        try:
            return self.compilers[toolchain]
        except KeyError:
            raise NotFoundError("unknown compiler toolchain: " + str(toolchain)) from None

    def network_names(self) -> List[str]:
        return sorted(self.networks)

    def compiler_names(self) -> List[str]:
        return sorted(self.compilers)

    def to_dict(self) -> Dict[str, Dict[str, dict]]:
        '''Returns the document as plain nested dicts in canonical shape'''
        return {
            "networks": {name: asdict(profile) for (name, profile) in self.networks.items()},
            "compilers": {name: asdict(spec) for (name, spec) in self.compilers.items()},
        }
