"""Unit tests for the awskit command line (awskit.cli.commands)."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from awskit.cli.commands import main
from awskit.models.functions import InvocationResult
from awskit.models.storage import ListObjectsParams
from awskit.utils.errors import ConfigurationError, StorageError, UserNotFoundError
from tests.conftest import make_user


@pytest.fixture()
def clients() -> MagicMock:
    bundle = MagicMock(name="clients")
    bundle.storage.get = AsyncMock(return_value=b"file body")
    bundle.storage.put = AsyncMock(return_value=None)
    bundle.storage.list = AsyncMock(return_value=["dir/a", "dir/b"])
    bundle.storage.list_tags = AsyncMock(return_value=(["dir/a"], ['"e1"']))
    bundle.storage.delete_folder = AsyncMock(return_value=None)
    bundle.functions.invoke = AsyncMock()
    bundle.directory.count_users = AsyncMock(return_value=3)
    bundle.directory.list_users = AsyncMock()
    bundle.directory_cache.get = AsyncMock()
    return bundle


@pytest.fixture()
def run_cli(clients: MagicMock):
    """Run ``main`` with the client factory and logging setup patched out."""
    with patch("awskit.cli.commands.build_clients", return_value=clients) as build, \
            patch("awskit.cli.commands.configure_logging"):
        def _run(*argv: str) -> int:
            return main(list(argv))

        _run.build = build  # type: ignore[attr-defined]
        yield _run


class TestS3Commands:
    def test_list_prints_keys(self, run_cli, clients: MagicMock, capsys) -> None:
        code = run_cli("s3", "list", "--bucket", "b", "--prefix", "dir/")

        assert code == 0
        assert capsys.readouterr().out.splitlines() == ["dir/a", "dir/b"]
        clients.storage.list.assert_awaited_once_with("b", "dir/", ListObjectsParams())

    def test_list_json_with_params(self, run_cli, clients: MagicMock, capsys) -> None:
        code = run_cli(
            "--json", "s3", "list", "--bucket", "b", "--prefix", "dir/", "--max-keys", "2"
        )

        assert code == 0
        assert json.loads(capsys.readouterr().out) == ["dir/a", "dir/b"]
        params = clients.storage.list.await_args.args[2]
        assert params.max_keys == 2

    def test_list_etags(self, run_cli, clients: MagicMock, capsys) -> None:
        code = run_cli("s3", "list", "--bucket", "b", "--etags")

        assert code == 0
        assert capsys.readouterr().out.strip() == 'dir/a\t"e1"'

    def test_get_to_file(self, run_cli, clients: MagicMock, tmp_path: Path) -> None:
        target = tmp_path / "out.bin"

        code = run_cli("s3", "get", "--bucket", "b", "--key", "k", "-o", str(target))

        assert code == 0
        assert target.read_bytes() == b"file body"

    def test_put_reads_file(self, run_cli, clients: MagicMock, tmp_path: Path) -> None:
        source = tmp_path / "in.txt"
        source.write_bytes(b"upload me")

        code = run_cli("s3", "put", "--bucket", "b", "--key", "k", "--file", str(source))

        assert code == 0
        clients.storage.put.assert_awaited_once_with("b", "k", b"upload me")

    def test_delete_folder(self, run_cli, clients: MagicMock) -> None:
        assert run_cli("s3", "delete-folder", "--bucket", "b", "--folder", "dir") == 0
        clients.storage.delete_folder.assert_awaited_once_with("b", "dir")

    def test_storage_error_exits_nonzero(self, run_cli, clients: MagicMock, capsys) -> None:
        clients.storage.list.side_effect = StorageError(
            "got an error getting s3 objects list", provider_name="s3", code="AccessDenied"
        )

        code = run_cli("s3", "list", "--bucket", "b")

        assert code == 1
        assert capsys.readouterr().err.startswith("Error: [s3] got an error")


    def test_put_missing_local_file(
        self, run_cli, clients: MagicMock, tmp_path: Path, capsys
    ) -> None:
        missing = tmp_path / "nope.txt"

        code = run_cli("s3", "put", "--bucket", "b", "--key", "k", "--file", str(missing))

        assert code == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: ")
        assert "nope.txt" in err
        clients.storage.put.assert_not_awaited()

    def test_get_unwritable_output(
        self, run_cli, clients: MagicMock, tmp_path: Path, capsys
    ) -> None:
        target = tmp_path / "no-such-dir" / "out.bin"

        code = run_cli("s3", "get", "--bucket", "b", "--key", "k", "-o", str(target))

        assert code == 1
        assert capsys.readouterr().err.startswith("Error: ")
        assert not target.exists()

    def test_json_flag_after_command(self, run_cli, clients: MagicMock, capsys) -> None:
        code = run_cli("s3", "list", "--bucket", "b", "--json")

        assert code == 0
        assert json.loads(capsys.readouterr().out) == ["dir/a", "dir/b"]

    def test_json_flag_before_service_still_applies(
        self, run_cli, clients: MagicMock, capsys
    ) -> None:
        code = run_cli("--json", "s3", "list", "--bucket", "b")

        assert code == 0
        assert json.loads(capsys.readouterr().out) == ["dir/a", "dir/b"]


class TestLambdaCommands:
    def test_invoke_prints_payload(self, run_cli, clients: MagicMock, capsys) -> None:
        clients.functions.invoke.return_value = InvocationResult(
            status_code=200, payload=b'{"w": 64}'
        )

        code = run_cli("lambda", "invoke", "--function", "resize", "--payload", '{"w": 64}')

        assert code == 0
        assert capsys.readouterr().out.strip() == '{"w": 64}'
        clients.functions.invoke.assert_awaited_once_with("resize", {"w": 64})

    def test_function_error_exit_code(self, run_cli, clients: MagicMock) -> None:
        clients.functions.invoke.return_value = InvocationResult(
            status_code=200, payload=b"{}", function_error="Unhandled"
        )

        assert run_cli("lambda", "invoke", "--function", "resize") == 1

    def test_invalid_payload_json(self, run_cli, clients: MagicMock, capsys) -> None:
        code = run_cli("lambda", "invoke", "--function", "resize", "--payload", "{not json")

        assert code == 1
        assert "--payload is not valid JSON" in capsys.readouterr().err
        clients.functions.invoke.assert_not_awaited()


class TestCognitoCommands:
    def test_get_goes_through_cache(self, run_cli, clients: MagicMock, capsys) -> None:
        clients.directory_cache.get.return_value = make_user("1234", username="jdoe")

        code = run_cli("--json", "cognito", "get", "--pool", "p", "--sub", "1234")

        assert code == 0
        out = json.loads(capsys.readouterr().out)
        assert out["username"] == "jdoe"
        assert out["attributes"]["sub"] == "1234"
        clients.directory_cache.get.assert_awaited_once_with("p", "1234")

    def test_get_not_found(self, run_cli, clients: MagicMock, capsys) -> None:
        clients.directory_cache.get.side_effect = UserNotFoundError(
            "p", "ghost", provider_name="cognito"
        )

        code = run_cli("cognito", "get", "--pool", "p", "--sub", "ghost")

        assert code == 1
        assert "Error: [cognito] not found" in capsys.readouterr().err

    def test_count(self, run_cli, capsys) -> None:
        assert run_cli("cognito", "count", "--pool", "p") == 0
        assert capsys.readouterr().out.strip() == "3"

    def test_list_limit_defaults_from_settings(self, run_cli, clients: MagicMock) -> None:
        from awskit.models.directory import UserPage

        clients.directory.list_users.return_value = UserPage(users=[make_user("1")])

        with patch("awskit.cli.commands.Settings") as settings_cls:
            settings_cls.return_value.cognito_list_limit = 25
            code = run_cli("cognito", "list", "--pool", "p")

        assert code == 0
        clients.directory.list_users.assert_awaited_once_with(
            "p", limit=25, filter="", pagination_token=None
        )


class TestEntryPoint:
    def test_missing_command_prints_help(self, run_cli, capsys) -> None:
        assert run_cli("s3") == 1
        assert "usage" in capsys.readouterr().out.lower()

    def test_no_service_prints_help(self, run_cli) -> None:
        assert run_cli() == 1

    def test_configuration_error_exits_nonzero(self, run_cli, capsys) -> None:
        run_cli.build.side_effect = ConfigurationError("aws configuration error, no profile")

        code = run_cli("s3", "list", "--bucket", "b")

        assert code == 1
        assert "aws configuration error" in capsys.readouterr().err

    def test_region_forwarded_to_factory(self, run_cli) -> None:
        run_cli("--region", "eu-central-1", "cognito", "count", "--pool", "p")

        assert run_cli.build.call_args.kwargs["region"] == "eu-central-1"
