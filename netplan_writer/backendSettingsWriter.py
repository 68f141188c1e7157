# SPDX-FileCopyrightText: 2024 Ferenc Nandor Janky <ferenj@effective-range.com>
# SPDX-FileCopyrightText: 2024 Attila Gombos <attila.gombos@effective-range.com>
# SPDX-License-Identifier: MIT

from netplan_model import BackendSettings
from netplan_yaml import YamlWriter


def write_backend_settings(writer: YamlWriter, settings: BackendSettings) -> None:
    """Writes the 'networkmanager' section, or nothing if the settings are empty.

    Passthrough values are opaque strings and are always quoted, keys are written
    in sorted order so that repeated writes produce identical files.
    """
    if settings.is_empty():
        return

    nm = settings.nm

    with writer.mapping('networkmanager'):
        if nm.uuid:
            writer.plain_pair('uuid', nm.uuid)
        if nm.name:
            writer.quoted_pair('name', nm.name)
        if nm.passthrough:
            with writer.mapping('passthrough'):
                for key in sorted(nm.passthrough):
                    writer.quoted_pair(key, nm.passthrough[key])
