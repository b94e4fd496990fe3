"""Command-line tool for generating and managing image names."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from image_namer.batch import BatchItem, BatchNamer
from image_namer.catalog import DEFAULT_THEMES, default_presets, default_word_banks, get_preset
from image_namer.config import get_settings
from image_namer.database import get_database, run_migrations
from image_namer.exceptions import ConfigurationError
from image_namer.generation.word_banks import banks_for_theme
from image_namer.service import create_naming_service


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="image-namer",
        description="Generate human-readable, collision-free image file names",
    )
    parser.add_argument("--database-url", default=None, help="Override DATABASE_URL")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create or migrate the name ledger schema")

    gen = sub.add_parser("generate", help="Generate names for a batch of files")
    gen.add_argument("files", nargs="*", help="Original file names (extension is kept)")
    gen.add_argument("-n", "--count", type=int, default=5, help="Names to generate when no files are given")
    gen.add_argument("--extension", default=".jpg", help="Extension used with --count")
    gen.add_argument("--preset", default="default-kebab", help="Preset id")
    gen.add_argument("--theme", default=None, choices=[t.id for t in DEFAULT_THEMES], help="Narrow words to a theme")
    gen.add_argument("--register", action="store_true", help="Record the names in the ledger")

    rel = sub.add_parser("release", help="Release ledger entries (undo)")
    rel.add_argument("slugs", nargs="+", help="Ledger keys, e.g. bright-sky.jpg")

    sub.add_parser("presets", help="List built-in presets")
    return parser


async def _generate(args: argparse.Namespace) -> int:
    banks = default_word_banks()
    preset = get_preset(args.preset, default_presets(banks))
    if args.theme:
        banks = banks_for_theme(banks, args.theme)

    items = [BatchItem(name) for name in args.files] or [
        BatchItem(f"file-{i + 1}{args.extension}") for i in range(args.count)
    ]

    service = create_naming_service(args.database_url)
    try:
        namer = BatchNamer(service, preset, banks, locale=get_settings().default_locale)
        entries = await namer.run(items, register=args.register)
    finally:
        await service.close()

    for entry in entries:
        print(f"{entry.original_name} -> {entry.new_name}")
    return 0


async def _release(args: argparse.Namespace) -> int:
    service = create_naming_service(args.database_url)
    try:
        touched = await service.release(args.slugs)
    finally:
        await service.close()
    print(f"Released {touched} name(s)")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "init-db":
        db = get_database(args.database_url)
        try:
            applied = run_migrations(db)
        finally:
            db.close()
        print(f"Applied {len(applied)} migration(s)")
        return 0

    if args.command == "presets":
        for preset in default_presets():
            print(f"{preset.id:45s} {preset.template}")
        return 0

    try:
        if args.command == "generate":
            return asyncio.run(_generate(args))
        return asyncio.run(_release(args))
    except (ConfigurationError, KeyError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
