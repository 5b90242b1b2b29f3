#!/usr/bin/env python3
"""
Docker CLI client - operator tool.

Usage:
  python scripts/docker_cli.py ps [--all] [--filter status=running]
  python scripts/docker_cli.py run IMAGE [EXTRA_ARGS...]
  python scripts/docker_cli.py inspect-ip CONTAINER_ID NETWORK
  python scripts/docker_cli.py pause|unpause|rm CONTAINER_ID
  python scripts/docker_cli.py pull IMAGE

Every command runs under a fresh transaction id, printed with the result.
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Load .env file if it exists
from dotenv import load_dotenv

load_dotenv(Path(__file__).parent.parent / ".env")

from rich.console import Console
from rich.table import Table

from src.config import normalize_host, settings
from src.core.tracing import TransactionId
from src.models import ContainerId, DockerClientException
from src.services.container import DockerClient, create_process_executor
from src.utils.logging import setup_logging

console = Console()


def parse_filter(value: str) -> Tuple[str, str]:
    """Parse a ``key=value`` filter argument."""
    key, sep, filter_value = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"filter must look like key=value, got {value!r}")
    return key, filter_value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage containers through the docker CLI")
    parser.add_argument("--host", default=None, type=normalize_host, help="Remote daemon as host:port or tcp://host:port")
    parser.add_argument("--json", action="store_true", help="Print errors as JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    ps = sub.add_parser("ps", help="List container ids")
    ps.add_argument("--all", action="store_true", help="Include stopped containers")
    ps.add_argument("--filter", dest="filters", action="append", type=parse_filter, default=[])

    run = sub.add_parser("run", help="Start a detached container")
    run.add_argument("image")
    run.add_argument("args", nargs=argparse.REMAINDER, help="Extra docker run arguments")

    inspect = sub.add_parser("inspect-ip", help="Show a container's IP address in a network")
    inspect.add_argument("container_id")
    inspect.add_argument("network")

    for name in ("pause", "unpause", "rm"):
        cmd = sub.add_parser(name, help=f"{name} a container")
        cmd.add_argument("container_id")

    pull = sub.add_parser("pull", help="Pull an image")
    pull.add_argument("image")

    return parser


def render_ids(ids: List[ContainerId]) -> Table:
    table = Table(title="Containers")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Container ID", style="cyan")
    for index, container_id in enumerate(ids, start=1):
        table.add_row(str(index), container_id.as_string)
    return table


async def dispatch(client: DockerClient, args: argparse.Namespace, transid: TransactionId):
    """Run the selected command and return something printable."""
    if args.command == "ps":
        return render_ids(await client.ps(args.filters, args.all, transid=transid))
    if args.command == "run":
        container_id = await client.run(args.image, args.args, transid=transid)
        return f"[green]Started[/green] {container_id}"
    if args.command == "inspect-ip":
        ip = await client.inspect_ip_address(ContainerId(args.container_id), args.network, transid=transid)
        return str(ip)
    if args.command == "pull":
        await client.pull(args.image, transid=transid)
        return f"[green]Pulled[/green] {args.image}"

    operation = getattr(client, args.command)
    await operation(ContainerId(args.container_id), transid=transid)
    return f"[green]{args.command}[/green] {args.container_id}"


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    transid = TransactionId.generate()
    executor = create_process_executor(settings.docker_max_workers)
    try:
        client = DockerClient(executor, docker_host=args.host)
        result = asyncio.run(dispatch(client, args, transid))
    except DockerClientException as e:
        e.transaction_id = e.transaction_id or transid.id
        if args.json:
            console.print_json(e.to_response().model_dump_json())
        else:
            console.print(f"[red]Error:[/red] {e.message}")
        return 1
    finally:
        executor.shutdown(wait=True)

    console.print(result)
    console.print(f"[dim]{transid}[/dim]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
