import io
import os
from pathlib import Path
from typing import Callable

from netplan_yaml import YamlWriter

TEST_RESOURCE_ROOT = str(Path(os.path.dirname(__file__)).absolute())
TEST_FILE_SYSTEM_ROOT = str(Path(TEST_RESOURCE_ROOT).joinpath('test_root').absolute())
TEST_NETPLAN_DIR = f'{TEST_FILE_SYSTEM_ROOT}/etc/netplan'


def get_expected_file(file_name: str) -> str:
    return f'{TEST_RESOURCE_ROOT}/expected/{file_name}'


def read_file(file_path: str) -> str:
    with open(file_path, 'r', encoding='utf-8') as file:
        return file.read()


def render(write: Callable[[YamlWriter], None]) -> str:
    stream = io.StringIO()
    writer = YamlWriter(stream)
    writer.start()
    write(writer)
    writer.stop()
    writer.dispose()
    return stream.getvalue()
