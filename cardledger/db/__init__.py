from cardledger.db.database import create_store_engine, init_db
from cardledger.db.operations import (
    card_to_model,
    card_type_to_model,
    collect_card_number,
    get_card_type_id,
    get_card_types,
    get_cards,
    get_cards_by_series_name,
    get_rarities,
    get_rarity_id,
    get_series_by_id,
    get_series_by_name,
    get_unique_series,
    insert_card,
    insert_card_type,
    insert_rarity,
    insert_series,
    parse_release_date,
    rarity_to_model,
    sell_card_number,
    series_to_model,
)
from cardledger.db.seed import STANDARD_CARD_TYPES, STANDARD_RARITIES, seed_reference_data

__all__ = [
    "STANDARD_CARD_TYPES",
    "STANDARD_RARITIES",
    "card_to_model",
    "card_type_to_model",
    "collect_card_number",
    "create_store_engine",
    "get_card_type_id",
    "get_card_types",
    "get_cards",
    "get_cards_by_series_name",
    "get_rarities",
    "get_rarity_id",
    "get_series_by_id",
    "get_series_by_name",
    "get_unique_series",
    "init_db",
    "insert_card",
    "insert_card_type",
    "insert_rarity",
    "insert_series",
    "parse_release_date",
    "rarity_to_model",
    "seed_reference_data",
    "sell_card_number",
    "series_to_model",
]
