"""Predefined food catalog and the script that loads it."""

import logging

from supabase import create_client

from diet_planner.adapters.supabase_food_repository import SupabaseFoodRepository
from diet_planner.app_logging import configure_logging
from diet_planner.config import Settings
from diet_planner.services.foods import FoodRepository

_logger = logging.getLogger(__name__)

# name, proteins, carbs, fats (g per 100g), calories (kcal per 100g)
PREDEFINED_FOODS: list[tuple[str, int, int, int, int]] = [
    # meat
    ("Petto di pollo", 31, 0, 4, 165),
    ("Manzo magro", 26, 0, 8, 180),
    ("Tacchino", 29, 0, 1, 135),
    ("Prosciutto crudo", 26, 0, 12, 224),
    ("Bresaola", 32, 0, 2, 151),
    # fish
    ("Salmone", 20, 0, 13, 208),
    ("Tonno al naturale", 26, 0, 1, 116),
    ("Merluzzo", 18, 0, 1, 82),
    ("Orata", 20, 0, 4, 121),
    ("Gamberi", 24, 0, 1, 106),
    # dairy
    ("Latte intero", 3, 5, 4, 64),
    ("Latte scremato", 3, 5, 0, 34),
    ("Yogurt greco", 10, 4, 5, 97),
    ("Parmigiano Reggiano", 36, 4, 26, 392),
    ("Mozzarella", 18, 2, 20, 280),
    ("Ricotta", 11, 3, 13, 174),
    # eggs
    ("Uova intere", 13, 1, 11, 155),
    ("Albume d'uovo", 11, 1, 0, 52),
    # cereals
    ("Pasta di semola", 13, 75, 2, 371),
    ("Pasta integrale", 13, 66, 3, 348),
    ("Riso bianco", 7, 80, 1, 365),
    ("Riso integrale", 8, 77, 3, 370),
    ("Pane bianco", 9, 49, 3, 265),
    ("Pane integrale", 9, 44, 4, 247),
    ("Farro", 15, 67, 3, 357),
    ("Quinoa", 14, 64, 6, 368),
    ("Avena", 17, 66, 7, 389),
    ("Fette biscottate", 11, 72, 6, 378),
    # legumes
    ("Ceci", 19, 61, 6, 364),
    ("Lenticchie", 25, 60, 1, 353),
    ("Fagioli borlotti", 23, 63, 2, 335),
    ("Fagioli cannellini", 23, 60, 2, 333),
    ("Piselli", 5, 14, 0, 81),
    ("Fave", 5, 11, 0, 71),
    # vegetables
    ("Spinaci", 3, 4, 0, 23),
    ("Broccoli", 3, 7, 0, 34),
    ("Zucchine", 1, 3, 0, 17),
    ("Pomodori", 1, 4, 0, 18),
    ("Insalata", 1, 3, 0, 15),
    ("Carote", 1, 10, 0, 41),
    ("Peperoni", 1, 6, 0, 31),
    ("Melanzane", 1, 6, 0, 25),
    ("Cavolfiore", 2, 5, 0, 25),
    # fruit
    ("Banana", 1, 23, 0, 89),
    ("Mela", 0, 14, 0, 52),
    ("Arancia", 1, 12, 0, 47),
    ("Fragole", 1, 8, 0, 32),
    ("Kiwi", 1, 15, 1, 61),
    ("Pera", 0, 15, 0, 57),
    ("Pesca", 1, 10, 0, 39),
    ("Uva", 1, 18, 0, 69),
    # nuts
    ("Mandorle", 21, 22, 50, 579),
    ("Noci", 15, 14, 65, 654),
    ("Nocciole", 15, 17, 61, 628),
    ("Pistacchi", 20, 28, 45, 562),
    ("Arachidi", 26, 16, 49, 567),
    # oils and fats
    ("Olio extravergine d'oliva", 0, 0, 100, 884),
    ("Olio di semi", 0, 0, 100, 900),
    ("Burro", 1, 1, 83, 717),
    # sweets
    ("Cioccolato fondente", 5, 61, 30, 546),
    ("Biscotti secchi", 7, 75, 12, 416),
    ("Miele", 0, 82, 0, 304),
    ("Marmellata", 0, 60, 0, 250),
]


def seed_predefined_foods(repository: FoodRepository) -> int:
    """Insert predefined foods that are not already present.

    Returns the number of rows inserted.
    """
    existing = {
        food.name.casefold() for food in repository.list_foods() if not food.is_custom
    }
    inserted = 0
    for name, proteins, carbs, fats, calories in PREDEFINED_FOODS:
        if name.casefold() in existing:
            continue
        repository.create_food(
            {
                "name": name,
                "proteins": proteins,
                "carbs": carbs,
                "fats": fats,
                "calories": calories,
                "is_custom": False,
                "user_id": None,
            }
        )
        inserted += 1
    return inserted


def main() -> None:
    """Seed the configured Supabase project with the predefined foods."""
    settings = Settings()
    configure_logging(settings.log_level)
    client = create_client(settings.supabase_url, settings.supabase_service_key)
    inserted = seed_predefined_foods(SupabaseFoodRepository(client))
    _logger.info(
        "Seeded %s predefined foods (%s already present)",
        inserted,
        len(PREDEFINED_FOODS) - inserted,
    )


if __name__ == "__main__":
    main()
