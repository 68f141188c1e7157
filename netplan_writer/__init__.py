# SPDX-FileCopyrightText: 2024 Ferenc Nandor Janky <ferenj@effective-range.com>
# SPDX-FileCopyrightText: 2024 Attila Gombos <attila.gombos@effective-range.com>
# SPDX-License-Identifier: MIT

from .matchWriter import *
from .backendSettingsWriter import *
from .accessPointWriter import *
from .netplanWriter import *
