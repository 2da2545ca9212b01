"""Environment-driven settings for the item explorer."""

import os

DDRAGON_VERSION = os.environ.get("DDRAGON_VERSION", "15.14.1")
DDRAGON_LOCALE = os.environ.get("DDRAGON_LOCALE", "pt_BR")
DDRAGON_BASE = os.environ.get("DDRAGON_BASE", "https://ddragon.leagueoflegends.com/cdn")

ITEMS_URL = f"{DDRAGON_BASE}/{DDRAGON_VERSION}/data/{DDRAGON_LOCALE}/item.json"
ITEM_IMAGE_URL = f"{DDRAGON_BASE}/{DDRAGON_VERSION}/img/item/{{image}}"
MAPS_URL = os.environ.get(
    "MAPS_URL", "https://static.developer.riotgames.com/docs/lol/maps.json"
)

# Summoner's Rift
DEFAULT_MAP_ID = os.environ.get("DEFAULT_MAP_ID", "11")

REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "10"))

SELECTION_CAP = 6
FUZZY_MIN_LENGTH = 3
MISSING_ATTRIBUTE_VALUE = -1

# Labels whose summed value is shown with a '%' suffix.
PERCENT_ATTRIBUTES = frozenset(
    {
        "Velocidade de Ataque",
        "Chance de Acerto Crítico",
        "Velocidade de Movimento",
        "Tenacidade",
    }
)
