#!/usr/bin/env python3
"""
Manual Kit — Company Intranet Manual

CLI entry point for serving the API and moving manual content in and out
of the database.

Usage:
    # Start the web server
    python run_manualkit.py serve --port 8000

    # Create tables and seed the admin user and starter content
    python run_manualkit.py init

    # Dump pages and FAQs to a JSON file
    python run_manualkit.py export --output manual.json

    # Replace pages and FAQs from a JSON file
    python run_manualkit.py import --file manual.json

    # Show version
    python run_manualkit.py version
"""

import argparse
import asyncio
import json
import logging
import os
import sys

logger = logging.getLogger("manualkit.cli")


async def _init():
    from manualkit.db import session as db_session
    from manualkit.db.seed import seed_default_admin, seed_initial_content

    await db_session.init_db()
    await seed_default_admin(db_session.async_session)
    await seed_initial_content(db_session.async_session)


async def _export() -> dict:
    from manualkit.content.store import ContentStore
    from manualkit.core.schemas import dump_pages
    from manualkit.db import session as db_session

    await db_session.init_db()
    async with db_session.async_session() as db:
        store = ContentStore(db)
        pages, pages_version = await store.load_pages()
        faqs, faqs_version = await store.load_faqs()

    logger.info("Exported pages v%d and FAQs v%d", pages_version, faqs_version)
    return {
        "pages": dump_pages(pages),
        "faqs": [f.model_dump(mode="json") for f in faqs],
    }


async def _import(payload: dict):
    from manualkit.content.store import ContentStore
    from manualkit.core.schemas import FaqItem, load_pages
    from manualkit.db import session as db_session

    # Rejects duplicate sibling ids before anything is written.
    pages = load_pages(payload.get("pages", []))
    faqs = [FaqItem.model_validate(f) for f in payload.get("faqs", [])]

    await db_session.init_db()
    async with db_session.async_session() as db:
        store = ContentStore(db)
        await store.save_pages(pages)
        await store.save_faqs(faqs)
        await db.commit()

    logger.info("Imported %d top-level page(s) and %d FAQ(s)", len(pages), len(faqs))


def cmd_serve(args):
    """Start the Manual Kit web server."""
    try:
        import uvicorn
    except ImportError as e:
        print(f"Error: Missing dependency for web server: {e}")
        print("Install with: pip install manualkit")
        sys.exit(1)

    uvicorn.run(
        "manualkit.api.app:create_app",
        host=args.host or os.getenv("MANUAL_HOST", "0.0.0.0"),
        port=args.port or int(os.getenv("MANUAL_PORT", "8000")),
        reload=args.reload,
        factory=True,
    )


def cmd_init(args):
    """Create tables and seed defaults."""
    asyncio.run(_init())
    print("Database initialised.")


def cmd_export(args):
    """Write pages and FAQs to a JSON file."""
    data = asyncio.run(_export())

    output_file = args.output
    output_dir = os.path.dirname(output_file)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    print(f"Content saved to: {output_file}")


def cmd_import(args):
    """Replace pages and FAQs from a JSON file."""
    from manualkit.core.exceptions import ManualKitError

    if not os.path.isfile(args.file):
        print(f"Error: File not found: {args.file}")
        sys.exit(1)

    with open(args.file, "r", encoding="utf-8") as f:
        payload = json.load(f)

    try:
        asyncio.run(_import(payload))
    except (ManualKitError, ValueError) as e:
        print(f"Error: Could not import {args.file}: {e}")
        sys.exit(1)

    print(f"Content imported from: {args.file}")


def cmd_version(args):
    """Show Manual Kit version."""
    from manualkit.version import __version__

    print(f"Manual Kit v{__version__}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="manualkit",
        description="Manual Kit — Company Intranet Manual",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- serve command ---
    serve_parser = subparsers.add_parser("serve", help="Start the Manual Kit web server")
    serve_parser.add_argument("--host", default=None, help="Host to bind to (default: 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    serve_parser.set_defaults(func=cmd_serve)

    # --- init command ---
    init_parser = subparsers.add_parser("init", help="Create tables and seed defaults")
    init_parser.set_defaults(func=cmd_init)

    # --- export command ---
    export_parser = subparsers.add_parser("export", help="Export pages and FAQs to JSON")
    export_parser.add_argument("--output", "-o", default="manual_content.json", help="Output file")
    export_parser.set_defaults(func=cmd_export)

    # --- import command ---
    import_parser = subparsers.add_parser("import", help="Replace pages and FAQs from JSON")
    import_parser.add_argument("--file", "-f", required=True, help="JSON file produced by export")
    import_parser.set_defaults(func=cmd_import)

    # --- version command ---
    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
