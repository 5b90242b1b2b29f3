"""Pytest configuration and shared fixtures."""

import os
import stat
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import AsyncMock, MagicMock

import pytest

# Keep the developer's environment out of the settings under test
for _var in ("DOCKER_HOST_ADDRESS", "DOCKER_BINARY_PATHS", "DOCKER_BINARY_PATH_LOOKUP", "DOCKER_MAX_WORKERS"):
    os.environ.pop(_var, None)

from src.core.tracing import TransactionId
from src.services.container import DockerClient, ProcessRunner


@pytest.fixture
def docker_bin(tmp_path):
    """An executable stand-in for the docker binary."""
    path = tmp_path / "docker"
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(path)


@pytest.fixture
def executor():
    """Bounded executor for blocking process calls."""
    pool = ThreadPoolExecutor(max_workers=2)
    yield pool
    pool.shutdown(wait=True)


@pytest.fixture
def mock_runner():
    """Mock process runner; stdout defaults to empty."""
    runner = MagicMock(spec=ProcessRunner)
    runner.execute_process = AsyncMock(return_value="")
    return runner


@pytest.fixture
def transid():
    """Mock transaction handle recording span calls."""
    handle = MagicMock(spec=TransactionId)
    handle.id = "test-transaction-id"
    handle.started.return_value = MagicMock(name="start_marker")
    return handle


@pytest.fixture
def docker_client(executor, docker_bin, mock_runner):
    """DockerClient targeting the local daemon with a mocked process runner."""
    return DockerClient(
        executor,
        docker_host="",
        binary_paths=[docker_bin],
        binary_path_lookup=False,
        process_runner=mock_runner,
    )
