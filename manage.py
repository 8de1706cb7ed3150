#!/usr/bin/env python3
"""
Stock ledger management CLI.

Usage:
    python manage.py serve       Start the API server
    python manage.py migrate     Apply pending database migrations
    python manage.py export      Write the inventory CSV report
"""

import argparse
import asyncio
import subprocess
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent


def cmd_serve(args: argparse.Namespace) -> None:
    """
    Run the API under uvicorn in a single process.

    Per-item withdrawal locks live in process memory, so the server never
    forks extra workers.
    """
    uvicorn_cmd = [
        sys.executable, "-m", "uvicorn",
        "stockledger.api.main:app",
        "--host", args.host,
        "--port", str(args.port),
    ]
    if args.reload:
        uvicorn_cmd.append("--reload")

    print(f"Starting server on {args.host}:{args.port}...")
    try:
        subprocess.run(uvicorn_cmd, cwd=str(ROOT_DIR), check=False)
    except KeyboardInterrupt:
        print("\nServer stopped.")


async def _migrate(show_status: bool) -> int:
    from stockledger.config import configure_logging
    from stockledger.infrastructure.storage.sqlite.migrations import (
        get_migration_status,
        run_migrations,
        verify_schema_integrity,
    )

    configure_logging()

    if show_status:
        status = await get_migration_status()
        print(f"Current version: {status['current_version']}")
        print(f"Applied: {', '.join(status['applied_migrations']) or '-'}")
        print(f"Pending: {', '.join(status['pending_migrations']) or '-'}")
        if not status["exists"]:
            return 0

        checks = await verify_schema_integrity()
        for check in checks:
            print(f"Check {check['check']}: {check['status']}")
        return 0 if all(c["status"] == "PASS" for c in checks) else 1

    results = await run_migrations()
    if not results:
        print("Database is up to date.")
        return 0

    for result in results:
        state = "ok" if result.success else f"FAILED ({result.error})"
        print(f"  {result.version}: {state}")
    return 0 if all(r.success for r in results) else 1


def cmd_migrate(args: argparse.Namespace) -> None:
    """Apply pending SQL migrations."""
    sys.exit(asyncio.run(_migrate(args.status)))


async def _export(role_name: str, output: str | None) -> None:
    from stockledger.application.use_cases import ExportInventoryUseCase
    from stockledger.config import configure_logging, get_settings
    from stockledger.core.entities.inventory import Role

    # Keep stdout clean for the CSV itself
    configure_logging(stream=sys.stderr)
    try:
        result = await ExportInventoryUseCase().execute(Role(role_name))
    finally:
        if get_settings().storage.backend == "sqlite":
            from stockledger.infrastructure.storage.sqlite import close_pool

            await close_pool()

    if output == "-":
        sys.stdout.write(result.content)
        return

    target = Path(output) if output else ROOT_DIR / result.filename
    # BOM is part of content; utf-8 keeps it as EF BB BF
    target.write_text(result.content, encoding="utf-8", newline="")
    print(f"Wrote {result.row_count} items to {target}")


def cmd_export(args: argparse.Namespace) -> None:
    """Write the CSV report for a role."""
    asyncio.run(_export(args.role, args.output))


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Stock ledger management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # serve
    p_serve = sub.add_parser("serve", help="Start the API server")
    p_serve.add_argument("--host", default="0.0.0.0", help="Bind host (default: 0.0.0.0)")
    p_serve.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    # migrate
    p_migrate = sub.add_parser("migrate", help="Apply pending database migrations")
    p_migrate.add_argument("--status", action="store_true", help="Show migration status only")
    p_migrate.set_defaults(func=cmd_migrate)

    # export
    p_export = sub.add_parser("export", help="Write the inventory CSV report")
    p_export.add_argument(
        "--role",
        choices=["manager", "warehouse"],
        default="warehouse",
        help="Role deciding pricing columns (default: warehouse)",
    )
    p_export.add_argument(
        "--output", "-o",
        default=None,
        help="Output file, '-' for stdout (default: generated file name)",
    )
    p_export.set_defaults(func=cmd_export)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
