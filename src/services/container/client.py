"""Docker CLI client.

Serves as interface to the docker command line tool. Every operation spawns
one docker process on the executor handed to the constructor; those calls
block a worker thread until docker exits, so pick the executor with care.

One instance per process is enough.
"""

import asyncio
import ipaddress
import logging
import os
import shutil
from concurrent.futures import Executor
from typing import List, Optional, Sequence, Tuple

import structlog

from ...config import normalize_host, settings
from ...core.tracing import LoggingMarkers, Tracer, TransactionId
from ...models import (
    ContainerId,
    ContainerIp,
    InitializationError,
    ResourceNotFoundError,
    ValidationError,
)
from ..interfaces import DockerApi
from .process import ProcessRunner

logger = structlog.get_logger(__name__)

# Rendered by docker's go templates for a missing map key
NO_VALUE_SENTINEL = "<no value>"

PATH_LOOKUP_MARKER = "$PATH"


def find_docker_binary(candidates: Sequence[str], path_lookup: bool = True) -> str:
    """Return the first executable docker binary.

    Candidates are probed in order, then ``docker`` is looked up on PATH if
    enabled.

    Raises:
        InitializationError: If no candidate is an executable file.
    """
    for candidate in candidates:
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate

    probed = list(candidates)
    if path_lookup:
        probed.append(PATH_LOOKUP_MARKER)
        found = shutil.which("docker")
        if found:
            return found

    raise InitializationError(probed)


def is_ip_address(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


class DockerClient(DockerApi):
    """Docker lifecycle operations implemented on top of the docker CLI."""

    def __init__(
        self,
        executor: Executor,
        docker_host: Optional[str] = None,
        binary_paths: Optional[Sequence[str]] = None,
        binary_path_lookup: Optional[bool] = None,
        process_runner: Optional[ProcessRunner] = None,
    ):
        """Resolve the docker binary and build the command prefix.

        Args:
            executor: Bounded pool the blocking docker calls run on. One worker
                is occupied per in-flight operation.
            docker_host: Remote daemon as ``host:port``; defaults to settings,
                where an empty value means the local daemon.
            binary_paths: Candidate binary locations; defaults to settings.
            binary_path_lookup: Whether to fall back to a PATH lookup.
            process_runner: Override for the process boundary.

        Raises:
            InitializationError: If no docker binary can be found.
        """
        if executor is None and process_runner is None:
            raise ValueError("DockerClient requires an explicit executor")

        docker_config = settings.docker
        candidates = list(binary_paths) if binary_paths is not None else docker_config.binary_paths
        path_lookup = docker_config.binary_path_lookup if binary_path_lookup is None else binary_path_lookup
        host = normalize_host(docker_host) if docker_host is not None else docker_config.host

        # A missing binary fails construction
        docker_bin = find_docker_binary(candidates, path_lookup)

        host_args = ["--host", f"tcp://{host}"] if host else []
        self.docker_cmd: Tuple[str, ...] = tuple([docker_bin] + host_args)
        self.process_runner = process_runner or ProcessRunner(executor)

        logger.info("DockerClient initialized", docker_binary=docker_bin, docker_host=host or "local")

    async def run(self, image: str, args: Sequence[str] = (), *, transid: TransactionId) -> ContainerId:
        if not image:
            raise ValidationError("image must not be empty", field="image")
        stdout = await self._run_cmd(transid, "run", "-d", *args, image)
        return ContainerId(stdout.strip())

    async def inspect_ip_address(self, id: ContainerId, network: str, *, transid: TransactionId) -> ContainerIp:
        if not network:
            raise ValidationError("network must not be empty", field="network")
        if "{" in network or "}" in network:
            raise ValidationError("network must not contain template braces", field="network")
        stdout = await self._run_cmd(
            transid,
            "inspect",
            "--format",
            f"{{{{.NetworkSettings.Networks.{network}.IPAddress}}}}",
            id.as_string,
        )
        stdout = stdout.strip()
        if stdout == NO_VALUE_SENTINEL or not is_ip_address(stdout):
            raise ResourceNotFoundError("IP address", f"{id.as_string} in network {network}", transaction_id=transid.id)
        return ContainerIp(stdout)

    async def pause(self, id: ContainerId, *, transid: TransactionId) -> None:
        await self._run_cmd(transid, "pause", id.as_string)

    async def unpause(self, id: ContainerId, *, transid: TransactionId) -> None:
        await self._run_cmd(transid, "unpause", id.as_string)

    async def rm(self, id: ContainerId, *, transid: TransactionId) -> None:
        await self._run_cmd(transid, "rm", "-f", id.as_string)

    async def ps(
        self,
        filters: Sequence[Tuple[str, str]] = (),
        all: bool = False,
        *,
        transid: TransactionId,
    ) -> List[ContainerId]:
        filter_args = [arg for attr, value in filters for arg in ("--filter", f"{attr}={value}")]
        all_arg = ["--all"] if all else []
        stdout = await self._run_cmd(transid, "ps", "--quiet", "--no-trunc", *all_arg, *filter_args)
        return [ContainerId(line.strip()) for line in stdout.splitlines() if line.strip()]

    async def pull(self, image: str, *, transid: TransactionId) -> None:
        if not image:
            raise ValidationError("image must not be empty", field="image")
        await self._run_cmd(transid, "pull", image)

    async def _run_cmd(self, transid: Tracer, *args: str) -> str:
        """Run one docker command inside a transaction span."""
        cmd = self.docker_cmd + args
        start = transid.started(
            self,
            LoggingMarkers.invoker_docker_cmd(args[0]),
            f"running {' '.join(cmd)}",
        )
        try:
            stdout = await self.process_runner.execute_process(*cmd)
        except asyncio.CancelledError:
            transid.failed(self, start, "cancelled", logging.WARNING)
            raise
        except Exception as e:
            transid.failed(self, start, str(e), logging.ERROR)
            raise
        transid.finished(self, start)
        return stdout
