# SPDX-FileCopyrightText: 2024 Ferenc Nandor Janky <ferenj@effective-range.com>
# SPDX-FileCopyrightText: 2024 Attila Gombos <attila.gombos@effective-range.com>
# SPDX-License-Identifier: MIT

import os
import tempfile
from contextlib import contextmanager
from os.path import exists
from typing import Iterator, TextIO

from context_logger import get_logger

from netplan_utility.writeError import OutputOpenFailure, EmissionFailure

log = get_logger('FileUtility')


def delete_file(file_path: str) -> None:
    if exists(file_path):
        if os.path.islink(file_path):
            os.unlink(file_path)
        else:
            os.remove(file_path)


@contextmanager
def open_replacing_file(file_path: str, mode: int = 0o600) -> Iterator[TextIO]:
    """Yields a UTF-8 text stream whose content replaces ``file_path`` on success.

    The content goes to a temporary file next to the target, which is renamed over
    the target once the stream is closed. On any error the temporary file is removed
    and the target is left untouched.
    """
    directory = os.path.dirname(file_path)

    try:
        os.makedirs(directory, exist_ok=True)
        descriptor, temp_path = tempfile.mkstemp(prefix=f'.{os.path.basename(file_path)}.', dir=directory)
    except OSError as error:
        raise OutputOpenFailure(f'Cannot create output file: {error}', file_path) from error

    try:
        with os.fdopen(descriptor, 'w', encoding='utf-8') as file:
            yield file
    except OSError as error:
        delete_file(temp_path)
        raise EmissionFailure(f'Failed to write output file: {error}', file_path) from error
    except BaseException:
        delete_file(temp_path)
        raise

    try:
        os.chmod(temp_path, mode)
        os.replace(temp_path, file_path)
    except OSError as error:
        delete_file(temp_path)
        raise OutputOpenFailure(f'Cannot replace output file: {error}', file_path) from error

    log.debug('Replaced file', file=file_path, mode=oct(mode))
