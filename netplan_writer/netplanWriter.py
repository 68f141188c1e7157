# SPDX-FileCopyrightText: 2024 Ferenc Nandor Janky <ferenj@effective-range.com>
# SPDX-FileCopyrightText: 2024 Attila Gombos <attila.gombos@effective-range.com>
# SPDX-License-Identifier: MIT

import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from context_logger import get_logger

from netplan_model import NetworkDefinition, NetDefinitionType, Backend
from netplan_utility import NetplanWriteError, open_replacing_file
from netplan_writer.accessPointWriter import write_access_points
from netplan_writer.backendSettingsWriter import write_backend_settings
from netplan_writer.matchWriter import write_match
from netplan_yaml import YamlWriter

log = get_logger('NetplanWriter')

_DEF_TYPE_SECTIONS = MappingProxyType({
    NetDefinitionType.ETHERNET: 'ethernets',
    NetDefinitionType.WIFI: 'wifis',
    NetDefinitionType.MODEM: 'modems',
    NetDefinitionType.BRIDGE: 'bridges',
    NetDefinitionType.BOND: 'bonds',
    NetDefinitionType.VLAN: 'vlans',
    NetDefinitionType.TUNNEL: 'tunnels',
    NetDefinitionType.OTHER: 'others',
})

_BACKEND_NAMES = MappingProxyType({
    Backend.NONE: 'none',
    Backend.NETWORKD: 'networkd',
    Backend.NETWORK_MANAGER: 'NetworkManager',
    Backend.OPEN_VSWITCH: 'OpenVSwitch',
})


@dataclass
class NetplanWriterConfig:
    root_dir: str = '/'
    config_dir: str = 'etc/netplan'
    file_mode: int = 0o600


class INetplanWriter(object):

    def get_file_path(self, definition: NetworkDefinition) -> str:
        raise NotImplementedError()

    def write(self, definition: NetworkDefinition) -> str:
        raise NotImplementedError()


class NetplanWriter(INetplanWriter):
    # NetworkManager produces one file per connection profile, 90-* takes priority over 70-netplan-set.yaml
    NM_FILE_PREFIX = '90-NM-'
    DEFAULT_FILE_PREFIX = '10-netplan-'
    FILE_EXTENSION = '.yaml'
    VERSION = '2'

    def __init__(self, config: Optional[NetplanWriterConfig] = None) -> None:
        self._config = config if config else NetplanWriterConfig()

    def get_file_path(self, definition: NetworkDefinition) -> str:
        uuid = definition.backend_settings.nm.uuid

        if uuid:
            file_name = f'{self.NM_FILE_PREFIX}{uuid}{self.FILE_EXTENSION}'
        else:
            file_name = f'{self.DEFAULT_FILE_PREFIX}{definition.id}{self.FILE_EXTENSION}'

        return os.path.join(self._config.root_dir, self._config.config_dir, file_name)

    def write(self, definition: NetworkDefinition) -> str:
        file_path = self.get_file_path(definition)

        try:
            with open_replacing_file(file_path, self._config.file_mode) as stream:
                writer = YamlWriter(stream, file_path)
                try:
                    self._write_document(writer, definition)
                finally:
                    writer.dispose()
        except NetplanWriteError as error:
            log.error('Failed to write netplan configuration', netdef_id=definition.id, file=file_path,
                      error_type=type(error).__name__, error=str(error))
            raise

        log.info('Written netplan configuration', netdef_id=definition.id, file=file_path)

        return file_path

    def _write_document(self, writer: YamlWriter, definition: NetworkDefinition) -> None:
        writer.start()

        with writer.mapping('network'):
            writer.plain_pair('version', self.VERSION)
            with writer.mapping(_DEF_TYPE_SECTIONS[definition.type]):
                with writer.mapping(definition.id):
                    writer.plain_pair('renderer', _BACKEND_NAMES[definition.backend])

                    # unknown connection types only carry their backend settings
                    if definition.type != NetDefinitionType.OTHER:
                        self._write_typed_fields(writer, definition)

                    write_backend_settings(writer, definition.backend_settings)

        writer.stop()

    def _write_typed_fields(self, writer: YamlWriter, definition: NetworkDefinition) -> None:
        if definition.has_match:
            write_match(writer, definition)

        if definition.wake_on_lan:
            writer.plain_pair('wakeonlan', 'true')

        # modem settings to auto-detect GSM vs CDMA connections
        modem = definition.modem_params
        if modem.auto_config:
            writer.plain_pair('auto-config', 'true')
        writer.optional_quoted_pair('apn', modem.apn)
        writer.optional_quoted_pair('device-id', modem.device_id)
        writer.optional_quoted_pair('network-id', modem.network_id)
        writer.optional_quoted_pair('pin', modem.pin)
        writer.optional_quoted_pair('sim-id', modem.sim_id)
        writer.optional_quoted_pair('sim-operator-id', modem.sim_operator_id)

        if definition.type == NetDefinitionType.WIFI and definition.access_points:
            write_access_points(writer, definition)


def write_netplan_conf(definition: NetworkDefinition, root_dir: Optional[str] = None) -> str:
    return NetplanWriter(NetplanWriterConfig(root_dir=root_dir or '/')).write(definition)
