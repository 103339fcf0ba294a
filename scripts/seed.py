# scripts/seed.py
"""
Fill an empty pantry with a few demo shelves.

Usage:
    python -m scripts.init_db
    python -m scripts.seed
"""

import logging

from pantry.db.items import create_shelf_item
from pantry.db.shelves import create_shelf, get_all_shelves, save_shelf_name

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

DEMO_SHELVES = {
    "Dairy": ["Milk", "Eggs", "Cheddar", "Butter"],
    "Fridge": ["Hot Sauce", "Ketchup", "Mustard"],
    "Fruits": ["Apples", "Bananas", "Oranges"],
    "Baking": ["Flour", "Sugar", "Baking Soda"],
}


def seed(shelves=DEMO_SHELVES):
    n_items = 0
    for name, item_names in shelves.items():
        shelf = create_shelf()
        save_shelf_name(shelf.id, name)
        for item_name in item_names:
            create_shelf_item(shelf.id, item_name)
            n_items += 1
    return len(shelves), n_items


def main():
    if get_all_shelves():
        logger.warning("Pantry already has shelves; skipping seed.")
        return

    n_shelves, n_items = seed()
    logger.info("Shelves created:   %s", n_shelves)
    logger.info("Items created:     %s", n_items)


if __name__ == "__main__":
    main()
