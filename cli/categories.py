#!/usr/bin/env python3

import sys
import json
import sqlite3
from pathlib import Path
from api.handler import CategoryRequestHandler, CategoryValidationError
from logger import get_logger

logger = get_logger()

SEED_FILE = Path(__file__).parent.parent / "db" / "seed" / "categories.json"


def cmd_list(args, services):
    """List all categories in the database."""
    categories = services.categories.find_all()

    if not categories:
        logger.info("No categories found.")
        return

    names = {category.id: category.name for category in categories}

    logger.info("\nCategories:")
    logger.info("=" * 80)
    for category in categories:
        logger.info(f"ID: {category.id}")
        logger.info(f"Name: {category.name}")
        if category.description:
            logger.info(f"Description: {category.description}")
        if category.parent_id:
            parent_name = names.get(category.parent_id, "Unknown")
            logger.info(f"Parent: {parent_name} (ID: {category.parent_id})")
        logger.info("-" * 80)

    logger.info(f"\nTotal categories: {len(categories)}")


def cmd_create(args, services):
    """Create a new category from command-line arguments."""
    handler = CategoryRequestHandler(services.categories, services.suggester)

    try:
        category = handler.create_category(args.name, args.description, args.parent_id)
    except CategoryValidationError as e:
        logger.error(str(e))
        sys.exit(1)
    except sqlite3.IntegrityError:
        logger.error(f"Category '{args.name}' already exists.")
        sys.exit(1)

    logger.info(f"\n✓ Category created successfully with ID: {category.id}")
    logger.info(f"  Name: {category.name}")
    if category.description:
        logger.info(f"  Description: {category.description}")
    if category.parent_id:
        logger.info(f"  Parent ID: {category.parent_id}")


def cmd_suggest(args, services):
    """Suggest a category for a transaction description."""
    handler = CategoryRequestHandler(services.categories, services.suggester)
    result = handler.suggest(args.description)

    if not result.ok:
        logger.error(result.error)
        sys.exit(1)

    print(result.label)


def _seed_category(services, name, description, parent_id=None):
    """Create a category unless one with this name exists.

    Returns:
        Tuple of (category, created).
    """
    existing = services.categories.find_by_name(name)
    if existing:
        return existing, False
    return services.categories.create(name, description, parent_id), True


def cmd_seed(args, services):
    """Seed categories from JSON file."""
    seed_file = Path(args.file) if args.file else SEED_FILE

    if not seed_file.exists():
        logger.error(f"Seed file not found: {seed_file}")
        sys.exit(1)

    try:
        with open(seed_file, "r") as f:
            categories_data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Error parsing JSON file: {e}")
        sys.exit(1)

    logger.info(f"\nSeeding categories from {seed_file}")
    logger.info("=" * 80)

    created_count = 0
    skipped_count = 0

    for category_data in categories_data:
        name = category_data.get("name")
        if not name:
            logger.warning("Skipping category with no name")
            continue

        parent, created = _seed_category(
            services, name, category_data.get("description")
        )
        if created:
            logger.info(f"✓ Created '{name}' (ID: {parent.id})")
            created_count += 1
        else:
            logger.info(f"⊘ Skipped '{name}' (already exists)")
            skipped_count += 1

        for child_data in category_data.get("children", []):
            child_name = child_data.get("name")
            if not child_name:
                logger.warning(f"Skipping child of '{name}' with no name")
                continue

            # Child names are prefixed with the parent name to stay unique
            prefixed_child_name = f"{name}/{child_name}"
            child, created = _seed_category(
                services,
                prefixed_child_name,
                child_data.get("description"),
                parent.id,
            )
            if created:
                logger.info(f"  ✓ Created '{prefixed_child_name}' (ID: {child.id})")
                created_count += 1
            else:
                logger.info(f"  ⊘ Skipped '{prefixed_child_name}' (already exists)")
                skipped_count += 1

    logger.info("=" * 80)
    logger.info("\nSeeding complete!")
    logger.info(f"Created: {created_count}")
    logger.info(f"Skipped: {skipped_count}")
    logger.info(f"Total: {created_count + skipped_count}")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Manage categories",
        description="Create, list, seed and suggest transaction categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    list_parser = categories_subparsers.add_parser("list", help="List all categories")
    list_parser.set_defaults(func=cmd_list)

    create_parser = categories_subparsers.add_parser(
        "create", help="Create a new category"
    )
    create_parser.add_argument("name", help="Category name (e.g., Groceries)")
    create_parser.add_argument(
        "--description", default=None, help="What belongs in this category"
    )
    create_parser.add_argument(
        "--parent-id", type=int, default=None, help="ID of the parent category"
    )
    create_parser.set_defaults(func=cmd_create)

    suggest_parser = categories_subparsers.add_parser(
        "suggest", help="Suggest a category for a transaction description"
    )
    suggest_parser.add_argument("description", help="Transaction description")
    suggest_parser.set_defaults(func=cmd_suggest)

    seed_parser = categories_subparsers.add_parser(
        "seed", help="Seed categories from JSON file"
    )
    seed_parser.add_argument(
        "--file", default=None, help="Seed file (defaults to db/seed/categories.json)"
    )
    seed_parser.set_defaults(func=cmd_seed)
