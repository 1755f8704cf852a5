"""Pytest fixtures.

Every capability is an AsyncMock so tests can spy on calls that must, or must
not, reach the platform.
"""

from unittest.mock import AsyncMock

import pytest

from supa_tools.platform import SupabasePlatform
from supa_tools.server import build_tool_registry


@pytest.fixture
def project_id():
    """Pinned project id."""
    return "proj-1"


@pytest.fixture
def auth():
    return AsyncMock()


@pytest.fixture
def branching():
    return AsyncMock()


@pytest.fixture
def database():
    mock = AsyncMock()
    mock.execute_sql = AsyncMock(return_value=[])
    return mock


@pytest.fixture
def debugging():
    return AsyncMock()


@pytest.fixture
def development():
    return AsyncMock()


@pytest.fixture
def docs():
    return AsyncMock()


@pytest.fixture
def functions():
    return AsyncMock()


@pytest.fixture
def operations():
    return AsyncMock()


@pytest.fixture
def storage():
    return AsyncMock()


@pytest.fixture
def platform(auth, branching, database, debugging, development, docs, functions, operations, storage):
    """Platform implementing every capability."""
    return SupabasePlatform(
        database=database,
        debugging=debugging,
        development=development,
        storage=storage,
        auth=auth,
        functions=functions,
        branching=branching,
        docs=docs,
        operations=operations,
    )


@pytest.fixture
def registry(platform, project_id):
    """Writable registry pinned to proj-1."""
    return build_tool_registry(platform, project_id=project_id, read_only=False)


@pytest.fixture
def read_only_registry(platform, project_id):
    """Read-only registry pinned to proj-1."""
    return build_tool_registry(platform, project_id=project_id, read_only=True)
