"""
Docker Lifecycle Tests - against a real daemon

These tests drive a full container lifecycle through the docker CLI. They are
skipped when no docker binary or reachable daemon is available.
"""

import shutil
import subprocess

import pytest

from src.core.tracing import TransactionId
from src.models import ContainerId, ProcessRunningError
from src.services.container import DockerClient


def _docker_available() -> bool:
    docker = shutil.which("docker")
    if not docker:
        return False
    try:
        result = subprocess.run([docker, "info"], capture_output=True, timeout=10)
    except (OSError, subprocess.TimeoutExpired):
        return False
    return result.returncode == 0


pytestmark = pytest.mark.skipif(not _docker_available(), reason="docker daemon not available")

# busybox exits at once without a tty, -t keeps its shell alive
IMAGE = "busybox:latest"


@pytest.fixture
def client(executor):
    return DockerClient(executor, docker_host="")


@pytest.mark.asyncio
async def test_container_lifecycle(client):
    """Pull, run, inspect, pause, unpause, list and remove one container."""
    transid = TransactionId.generate()

    await client.pull(IMAGE, transid=transid)
    container_id = await client.run(IMAGE, ["--label", "docker-cli-client.test=1", "-t"], transid=transid)
    try:
        ip = await client.inspect_ip_address(container_id, "bridge", transid=transid)
        assert ip.as_string

        await client.pause(container_id, transid=transid)
        paused = await client.ps(filters=[("status", "paused")], transid=transid)
        assert container_id in paused

        await client.unpause(container_id, transid=transid)
        labelled = await client.ps(filters=[("label", "docker-cli-client.test=1")], all=True, transid=transid)
        assert container_id in labelled
    finally:
        await client.rm(container_id, transid=transid)

    remaining = await client.ps(filters=[("id", container_id.as_string)], all=True, transid=transid)
    assert remaining == []


@pytest.mark.asyncio
async def test_pause_unknown_container_fails(client):
    """Test that docker's error reaches the caller."""
    with pytest.raises(ProcessRunningError) as exc_info:
        await client.pause(ContainerId("does-not-exist-0000"), transid=TransactionId.generate())

    assert exc_info.value.exit_code != 0
