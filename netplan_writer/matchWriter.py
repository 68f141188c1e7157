# SPDX-FileCopyrightText: 2024 Ferenc Nandor Janky <ferenj@effective-range.com>
# SPDX-FileCopyrightText: 2024 Attila Gombos <attila.gombos@effective-range.com>
# SPDX-License-Identifier: MIT

from netplan_model import NetworkDefinition
from netplan_yaml import YamlWriter


def write_match(writer: YamlWriter, definition: NetworkDefinition) -> None:
    with writer.mapping('match'):
        # an unnamed match renders as 'match: {}'
        if definition.match.original_name:
            writer.plain_pair('name', definition.match.original_name)
