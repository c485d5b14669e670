#!/usr/bin/env python3
"""Seed product catalog script.

Generates a deterministic demo catalog and writes it to the database
configured by DATABASE_URL.

Usage:
    python scripts/seed_catalog.py --mode small
    python scripts/seed_catalog.py --mode full --seed 7
    python scripts/seed_catalog.py --mode small --no-clear
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from catalog_api.catalog.generator import CatalogGenerator, GeneratorConfig
from catalog_api.infrastructure.database import Base, get_engine, get_session_factory
from catalog_api.infrastructure.seeding import save_catalog


async def create_tables() -> None:
    """Create database tables if they don't exist."""
    # Registers the models on Base.metadata
    import catalog_api.infrastructure.models  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed(mode: str, seed_value: int, clear: bool = True) -> dict:
    """Generate and save the catalog.

    Args:
        mode: Catalog size (small/full).
        seed_value: Random seed.
        clear: Whether to clear existing rows.

    Returns:
        Seeding result.
    """
    config = GeneratorConfig.full() if mode == "full" else GeneratorConfig.small()
    config.seed = seed_value
    catalog = CatalogGenerator(config).generate()

    async with get_session_factory()() as session:
        result = await save_catalog(session, catalog, clear_existing=clear)
        await session.commit()
        return result


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the product catalog",
    )
    parser.add_argument(
        "--mode",
        choices=["small", "full"],
        default="small",
        help="Catalog size: small (~40 products) or full (~200 products)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed (default: 42)",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear existing catalog rows before seeding",
    )

    args = parser.parse_args()

    print("=" * 60)
    print("Catalog Seeder")
    print("=" * 60)
    print(f"Mode: {args.mode}")
    print(f"Seed: {args.seed}")
    print(f"Clear existing: {not args.no_clear}")
    print()

    print("Creating database tables...")
    await create_tables()
    print("Tables ready.")
    print()

    result = await seed(args.mode, args.seed, clear=not args.no_clear)

    print(f"  ✓ Categories: {result['categories_created']}")
    print(f"  ✓ Tags: {result['tags_created']}")
    print(f"  ✓ Products: {result['products_created']}")
    print(f"  ✓ Photos: {result['photos_created']}")
    print()

    await get_engine().dispose()

    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
