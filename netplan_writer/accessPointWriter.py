# SPDX-FileCopyrightText: 2024 Ferenc Nandor Janky <ferenj@effective-range.com>
# SPDX-FileCopyrightText: 2024 Attila Gombos <attila.gombos@effective-range.com>
# SPDX-License-Identifier: MIT

from types import MappingProxyType

from context_logger import get_logger

from netplan_model import NetworkDefinition, AccessPoint, WifiMode
from netplan_writer.backendSettingsWriter import write_backend_settings
from netplan_yaml import YamlWriter

log = get_logger('AccessPointWriter')

_WIFI_MODE_NAMES = MappingProxyType({
    WifiMode.INFRASTRUCTURE: 'infrastructure',
    WifiMode.ADHOC: 'adhoc',
    WifiMode.AP: 'ap',
})

_FALLBACK_MODE_NAME = _WIFI_MODE_NAMES[WifiMode.INFRASTRUCTURE]


def write_access_points(writer: YamlWriter, definition: NetworkDefinition) -> None:
    with writer.mapping('access-points'):
        for ssid in sorted(definition.access_points):
            _write_access_point(writer, definition, definition.access_points[ssid])


def _write_access_point(writer: YamlWriter, definition: NetworkDefinition, access_point: AccessPoint) -> None:
    with writer.mapping(access_point.ssid, quoted=True):
        if access_point.hidden:
            writer.plain_pair('hidden', 'true')

        writer.plain_pair('mode', _get_mode_name(definition, access_point))

        write_backend_settings(writer, access_point.backend_settings)


def _get_mode_name(definition: NetworkDefinition, access_point: AccessPoint) -> str:
    mode_name = _WIFI_MODE_NAMES.get(access_point.mode)

    if mode_name is None:
        log.warning('Unsupported access point mode, falling back to infrastructure',
                    netdef_id=definition.id, ssid=access_point.ssid, mode=access_point.mode.value)
        return _FALLBACK_MODE_NAME

    return mode_name
