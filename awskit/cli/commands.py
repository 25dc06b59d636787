"""Command-line access to the awskit providers.

Usage::

    python -m awskit.cli s3 list --bucket my-bucket --prefix reports/
    python -m awskit.cli s3 get --bucket my-bucket --key reports/a.csv -o a.csv
    python -m awskit.cli lambda invoke --function resize --payload '{"w": 64}'
    python -m awskit.cli cognito get --pool eu-west-1_AbCdEf --sub 1234-...

Every command builds its own ``AwsClients`` from the environment (see
``awskit.config.settings``), runs one operation, and exits 0 on success or
1 with the error on stderr.  Logs go to stderr so stdout carries only the
command output.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Awaitable, Callable

from awskit.config.settings import Settings
from awskit.main import AwsClients, build_clients
from awskit.models.directory import UserRecord
from awskit.models.storage import ListObjectsParams
from awskit.utils.errors import AwsKitError
from awskit.utils.logging import configure_logging

_Handler = Callable[[argparse.Namespace, AwsClients], Awaitable[int]]


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


def _emit(data: Any, as_json: bool) -> None:
    if as_json:
        print(json.dumps(data, indent=2, default=str))
    elif isinstance(data, list):
        for item in data:
            print(item)
    elif isinstance(data, dict):
        for key, value in data.items():
            print(f"{key}: {value}")
    else:
        print(data)


def _user_dict(user: UserRecord) -> dict[str, Any]:
    return user.model_dump(mode="json")


# ---------------------------------------------------------------------------
# s3
# ---------------------------------------------------------------------------


async def _handle_s3_get(args: argparse.Namespace, clients: AwsClients) -> int:
    data = await clients.storage.get(args.bucket, args.key)
    if args.output:
        Path(args.output).write_bytes(data)
        print(f"Wrote {len(data)} bytes to {args.output}")
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.flush()
    return 0


async def _handle_s3_put(args: argparse.Namespace, clients: AwsClients) -> int:
    data = Path(args.file).read_bytes()
    await clients.storage.put(args.bucket, args.key, data)
    print(f"Stored {len(data)} bytes at s3://{args.bucket}/{args.key}")
    return 0


async def _handle_s3_delete(args: argparse.Namespace, clients: AwsClients) -> int:
    await clients.storage.delete(args.bucket, args.key)
    return 0


async def _handle_s3_delete_folder(args: argparse.Namespace, clients: AwsClients) -> int:
    await clients.storage.delete_folder(args.bucket, args.folder)
    return 0


async def _handle_s3_list(args: argparse.Namespace, clients: AwsClients) -> int:
    params = ListObjectsParams(
        max_keys=args.max_keys, marker=args.marker, delimiter=args.delimiter
    )
    if args.etags:
        keys, tags = await clients.storage.list_tags(args.bucket, args.prefix, params)
        if args.json:
            _emit([{"key": k, "etag": t} for k, t in zip(keys, tags)], True)
        else:
            _emit([f"{k}\t{t}" for k, t in zip(keys, tags)], False)
        return 0

    keys = await clients.storage.list(args.bucket, args.prefix, params)
    _emit(keys, args.json)
    return 0


async def _handle_s3_info(args: argparse.Namespace, clients: AwsClients) -> int:
    info = await clients.storage.info(args.bucket, args.key)
    _emit(info.model_dump(mode="json"), args.json)
    return 0


# ---------------------------------------------------------------------------
# lambda
# ---------------------------------------------------------------------------


async def _handle_lambda_invoke(args: argparse.Namespace, clients: AwsClients) -> int:
    try:
        request = json.loads(args.payload)
    except json.JSONDecodeError as exc:
        print(f"Error: --payload is not valid JSON: {exc}", file=sys.stderr)
        return 1

    result = await clients.functions.invoke(args.function, request)
    if args.json:
        _emit(
            {
                "status_code": result.status_code,
                "function_error": result.function_error,
                "executed_version": result.executed_version,
                "payload": result.payload.decode("utf-8", errors="replace"),
            },
            True,
        )
    else:
        print(result.payload.decode("utf-8", errors="replace"))
    return 0 if result.ok else 1


# ---------------------------------------------------------------------------
# cognito
# ---------------------------------------------------------------------------


async def _handle_cognito_get(args: argparse.Namespace, clients: AwsClients) -> int:
    user = await clients.directory_cache.get(args.pool, args.sub)
    _emit(_user_dict(user), args.json)
    return 0


async def _handle_cognito_count(args: argparse.Namespace, clients: AwsClients) -> int:
    count = await clients.directory.count_users(args.pool)
    _emit({"estimated_number_of_users": count} if args.json else count, args.json)
    return 0


async def _handle_cognito_list(args: argparse.Namespace, clients: AwsClients) -> int:
    page = await clients.directory.list_users(
        args.pool, limit=args.limit, filter=args.filter, pagination_token=args.token
    )
    if args.json:
        _emit(page.model_dump(mode="json"), True)
    else:
        for user in page.users:
            print(f"{user.username}\t{user.sub or ''}\t{user.status or ''}")
        if page.pagination_token:
            print(f"next token: {page.pagination_token}", file=sys.stderr)
    return 0


_HANDLERS: dict[tuple[str, str], _Handler] = {
    ("s3", "get"): _handle_s3_get,
    ("s3", "put"): _handle_s3_put,
    ("s3", "delete"): _handle_s3_delete,
    ("s3", "delete-folder"): _handle_s3_delete_folder,
    ("s3", "list"): _handle_s3_list,
    ("s3", "info"): _handle_s3_info,
    ("lambda", "invoke"): _handle_lambda_invoke,
    ("cognito", "get"): _handle_cognito_get,
    ("cognito", "count"): _handle_cognito_count,
    ("cognito", "list"): _handle_cognito_list,
}


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser with one sub-parser per service."""
    parser = argparse.ArgumentParser(
        prog="python -m awskit.cli",
        description="Run S3, Lambda and Cognito operations.",
    )
    parser.add_argument("--region", default=None, help="AWS region override")
    parser.add_argument("--json", action="store_true", help="Print JSON output")

    # Lets --json also follow the command, e.g. "s3 list --bucket b --json".
    output = argparse.ArgumentParser(add_help=False)
    output.add_argument(
        "--json", action="store_true", default=argparse.SUPPRESS, help="Print JSON output"
    )
    services = parser.add_subparsers(dest="service", help="AWS service")

    # -- s3 --
    s3_parser = services.add_parser("s3", help="Object storage")
    s3_cmds = s3_parser.add_subparsers(dest="command")

    get_parser = s3_cmds.add_parser("get", parents=[output], help="Download an object")
    get_parser.add_argument("--bucket", required=True)
    get_parser.add_argument("--key", required=True)
    get_parser.add_argument("--output", "-o", help="Write to this file instead of stdout")

    put_parser = s3_cmds.add_parser("put", parents=[output], help="Upload a file")
    put_parser.add_argument("--bucket", required=True)
    put_parser.add_argument("--key", required=True)
    put_parser.add_argument("--file", required=True, help="Local file to upload")

    delete_parser = s3_cmds.add_parser("delete", parents=[output], help="Delete an object")
    delete_parser.add_argument("--bucket", required=True)
    delete_parser.add_argument("--key", required=True)

    folder_parser = s3_cmds.add_parser(
        "delete-folder", parents=[output], help="Delete a folder and its objects"
    )
    folder_parser.add_argument("--bucket", required=True)
    folder_parser.add_argument("--folder", required=True)

    list_parser = s3_cmds.add_parser("list", parents=[output], help="List keys under a prefix")
    list_parser.add_argument("--bucket", required=True)
    list_parser.add_argument("--prefix", default="")
    list_parser.add_argument("--max-keys", type=int, default=0, dest="max_keys")
    list_parser.add_argument("--marker", default="", help="Start listing after this key")
    list_parser.add_argument("--delimiter", default="", help="List common prefixes instead")
    list_parser.add_argument("--etags", action="store_true", help="Include object ETags")

    info_parser = s3_cmds.add_parser("info", parents=[output], help="Show object metadata")
    info_parser.add_argument("--bucket", required=True)
    info_parser.add_argument("--key", required=True)

    # -- lambda --
    lambda_parser = services.add_parser("lambda", help="Function invocation")
    lambda_cmds = lambda_parser.add_subparsers(dest="command")
    invoke_parser = lambda_cmds.add_parser("invoke", parents=[output], help="Invoke a function")
    invoke_parser.add_argument("--function", required=True, help="Function name or ARN")
    invoke_parser.add_argument("--payload", default="{}", help="JSON request body")

    # -- cognito --
    cognito_parser = services.add_parser("cognito", help="User-pool directory")
    cognito_cmds = cognito_parser.add_subparsers(dest="command")

    user_parser = cognito_cmds.add_parser("get", parents=[output], help="Look up a user by sub")
    user_parser.add_argument("--pool", required=True, help="User pool id")
    user_parser.add_argument("--sub", required=True)

    count_parser = cognito_cmds.add_parser(
        "count", parents=[output], help="Estimated number of users"
    )
    count_parser.add_argument("--pool", required=True, help="User pool id")

    users_parser = cognito_cmds.add_parser("list", parents=[output], help="List one page of users")
    users_parser.add_argument("--pool", required=True, help="User pool id")
    users_parser.add_argument("--limit", type=int, default=None)
    users_parser.add_argument("--filter", default="", help='e.g. \'email ^= "jon"\'')
    users_parser.add_argument("--token", default=None, help="Pagination token")

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


async def _run(handler: _Handler, args: argparse.Namespace, clients: AwsClients) -> int:
    try:
        return await handler(args, clients)
    except (AwsKitError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.  Returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    handler = _HANDLERS.get((args.service, getattr(args, "command", None)))
    if handler is None:
        parser.print_help()
        return 1

    app_settings = Settings()
    configure_logging(log_level=app_settings.log_level, json_output=app_settings.json_logs)

    if getattr(args, "limit", 0) is None:
        args.limit = app_settings.cognito_list_limit

    try:
        clients = build_clients(app_settings, region=args.region)
    except AwsKitError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return asyncio.run(_run(handler, args, clients))


if __name__ == "__main__":
    sys.exit(main())
