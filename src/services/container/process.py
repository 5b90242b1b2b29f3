"""Blocking process execution on a bounded thread pool.

Each call to ``execute_process`` holds one executor thread until the child
process exits. Size the executor for the number of docker commands that may
be in flight at once, and never share it with unrelated blocking work.
"""

import asyncio
import subprocess
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Optional

import structlog

from ...config import settings
from ...models.errors import ProcessRunningError

logger = structlog.get_logger(__name__)

# Reported when the process could not be started at all
SPAWN_FAILURE_EXIT_CODE = -1


def create_process_executor(max_workers: Optional[int] = None) -> ThreadPoolExecutor:
    """Create the bounded thread pool docker commands block on."""
    workers = settings.docker_max_workers if max_workers is None else max_workers
    logger.info("Creating docker process executor", max_workers=workers)
    return ThreadPoolExecutor(max_workers=workers, thread_name_prefix="docker-cli")


class ProcessRunner:
    """Runs external commands and returns their captured stdout."""

    def __init__(self, executor: Executor):
        if executor is None:
            raise ValueError("ProcessRunner requires an explicit executor")
        self.executor = executor

    async def execute_process(self, *args: str) -> str:
        """Run ``args`` as a process without a shell.

        Returns:
            Captured stdout with surrounding whitespace stripped.

        Raises:
            ProcessRunningError: If the process exits non-zero or cannot be spawned.
        """
        loop = asyncio.get_running_loop()
        exit_code, stdout, stderr = await loop.run_in_executor(self.executor, self._run_blocking, list(args))

        if exit_code != 0:
            raise ProcessRunningError(exit_code, stdout, stderr)
        return stdout

    @staticmethod
    def _run_blocking(args: list) -> tuple:
        try:
            result = subprocess.run(args, capture_output=True, encoding="utf-8", errors="replace")
        except OSError as e:
            return SPAWN_FAILURE_EXIT_CODE, "", str(e)
        return result.returncode, result.stdout.strip(), result.stderr.strip()
