# SPDX-FileCopyrightText: 2024 Ferenc Nandor Janky <ferenj@effective-range.com>
# SPDX-FileCopyrightText: 2024 Attila Gombos <attila.gombos@effective-range.com>
# SPDX-License-Identifier: MIT

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class NetDefinitionType(Enum):
    ETHERNET = 'ethernet'
    WIFI = 'wifi'
    MODEM = 'modem'
    BRIDGE = 'bridge'
    BOND = 'bond'
    VLAN = 'vlan'
    TUNNEL = 'tunnel'
    OTHER = 'other'

    def __repr__(self) -> str:
        return self.name


class Backend(Enum):
    NONE = 'none'
    NETWORKD = 'networkd'
    NETWORK_MANAGER = 'network-manager'
    OPEN_VSWITCH = 'openvswitch'

    def __repr__(self) -> str:
        return self.name


class WifiMode(Enum):
    INFRASTRUCTURE = 'infrastructure'
    ADHOC = 'adhoc'
    AP = 'ap'
    OTHER = 'other'

    def __repr__(self) -> str:
        return self.name


@dataclass(frozen=True)
class MatchSettings(object):
    original_name: Optional[str] = None


@dataclass(frozen=True)
class ModemParams(object):
    auto_config: bool = False
    apn: Optional[str] = None
    device_id: Optional[str] = None
    network_id: Optional[str] = None
    pin: Optional[str] = None
    sim_id: Optional[str] = None
    sim_operator_id: Optional[str] = None


@dataclass(frozen=True)
class NetworkManagerSettings(object):
    uuid: Optional[str] = None
    name: Optional[str] = None
    passthrough: dict[str, str] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not (self.uuid or self.name or self.passthrough)


@dataclass(frozen=True)
class BackendSettings(object):
    nm: NetworkManagerSettings = field(default_factory=NetworkManagerSettings)

    def is_empty(self) -> bool:
        return self.nm.is_empty()


@dataclass(frozen=True)
class AccessPoint(object):
    ssid: str
    hidden: bool = False
    mode: WifiMode = WifiMode.INFRASTRUCTURE
    backend_settings: BackendSettings = field(default_factory=BackendSettings)


@dataclass(frozen=True)
class NetworkDefinition(object):
    """One interface or connection profile as produced by the netplan parser.

    Access points are keyed by SSID. The writer only reads these objects."""
    id: str
    type: NetDefinitionType
    backend: Backend = Backend.NONE
    has_match: bool = False
    match: MatchSettings = field(default_factory=MatchSettings)
    wake_on_lan: bool = False
    modem_params: ModemParams = field(default_factory=ModemParams)
    access_points: dict[str, AccessPoint] = field(default_factory=dict)
    backend_settings: BackendSettings = field(default_factory=BackendSettings)
