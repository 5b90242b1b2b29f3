"""Tests for the operator CLI script."""

import argparse
import importlib.util
import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.models import ContainerId, ContainerIp, ProcessRunningError

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "docker_cli.py"


@pytest.fixture(scope="module")
def cli():
    """Load scripts/docker_cli.py as a module."""
    spec = importlib.util.spec_from_file_location("docker_cli", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.ps = AsyncMock(return_value=[ContainerId("id1"), ContainerId("id2")])
    client.run = AsyncMock(return_value=ContainerId("c0ffee"))
    client.inspect_ip_address = AsyncMock(return_value=ContainerIp("172.17.0.2"))
    client.pause = AsyncMock()
    client.unpause = AsyncMock()
    client.rm = AsyncMock()
    client.pull = AsyncMock()
    return client


@pytest.fixture
def run_main(cli, mock_client):
    """Run main() with a mocked client, returning (exit_code, printed)."""

    def _run(argv):
        printed = []
        with patch.object(cli, "setup_logging"), patch.object(cli, "DockerClient", return_value=mock_client), patch.object(
            cli.console, "print", side_effect=lambda *a, **k: printed.append(a[0] if a else None)
        ), patch.object(cli.console, "print_json", side_effect=lambda s: printed.append(json.loads(s))):
            code = cli.main(argv)
        return code, printed

    return _run


class TestParseFilter:
    """Tests for --filter parsing."""

    def test_key_value(self, cli):
        assert cli.parse_filter("status=running") == ("status", "running")

    def test_value_may_contain_equals(self, cli):
        assert cli.parse_filter("label=pool=warm") == ("label", "pool=warm")

    @pytest.mark.parametrize("value", ["status", "=running"])
    def test_invalid(self, cli, value):
        with pytest.raises(argparse.ArgumentTypeError):
            cli.parse_filter(value)


class TestMain:
    """Tests for CLI dispatch."""

    def test_ps(self, run_main, mock_client):
        """Test ps forwards filters and --all."""
        code, printed = run_main(["ps", "--all", "--filter", "status=exited"])

        assert code == 0
        mock_client.ps.assert_awaited_once()
        args, kwargs = mock_client.ps.call_args
        assert args == ([("status", "exited")], True)
        assert kwargs["transid"].id

    def test_run_with_extra_args(self, run_main, mock_client):
        """Test run passes extra docker arguments through."""
        code, printed = run_main(["run", "busybox", "--name", "worker"])

        assert code == 0
        args, _ = mock_client.run.call_args
        assert args == ("busybox", ["--name", "worker"])
        assert "c0ffee" in printed[0]

    def test_inspect_ip(self, run_main, mock_client):
        """Test inspect-ip prints the address."""
        code, printed = run_main(["inspect-ip", "abc", "bridge"])

        assert code == 0
        args, _ = mock_client.inspect_ip_address.call_args
        assert args == (ContainerId("abc"), "bridge")
        assert printed[0] == "172.17.0.2"

    @pytest.mark.parametrize("command", ["pause", "unpause", "rm"])
    def test_unit_commands(self, run_main, mock_client, command):
        """Test commands that take a container id."""
        code, _ = run_main([command, "abc"])

        assert code == 0
        args, _ = getattr(mock_client, command).call_args
        assert args == (ContainerId("abc"),)

    def test_pull(self, run_main, mock_client):
        code, _ = run_main(["pull", "busybox"])

        assert code == 0
        args, _ = mock_client.pull.call_args
        assert args == ("busybox",)

    def test_failure_exits_non_zero(self, run_main, mock_client):
        """Test that client errors are printed and exit with 1."""
        mock_client.pause.side_effect = ProcessRunningError(1, "", "No such container: abc")

        code, printed = run_main(["pause", "abc"])

        assert code == 1
        assert "No such container: abc" in printed[0]

    def test_failure_as_json(self, run_main, mock_client):
        """Test JSON error output carries the transaction id."""
        mock_client.rm.side_effect = ProcessRunningError(1, "", "boom")

        code, printed = run_main(["--json", "rm", "abc"])

        assert code == 1
        assert printed[0]["error_type"] == "process_failed"
        assert printed[0]["transaction_id"]

    @pytest.mark.parametrize(
        "host,expected",
        [("tcp://10.0.0.5:2375", "10.0.0.5:2375"), ("10.0.0.5:2375", "10.0.0.5:2375")],
    )
    def test_host_scheme_is_normalized(self, cli, mock_client, host, expected):
        """Test that --host accepts host:port with or without tcp://."""
        with patch.object(cli, "setup_logging"), patch.object(
            cli, "DockerClient", return_value=mock_client
        ) as client_cls, patch.object(cli.console, "print"):
            code = cli.main(["--host", host, "ps"])

        assert code == 0
        assert client_cls.call_args.kwargs["docker_host"] == expected
