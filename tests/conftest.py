import copy

import pytest

RABADON_DESCRIPTION = (
    "<mainText><stats><attention>130</attention> de Poder de Habilidade</stats><br><br>"
    "<passive>Criação Mágica</passive><br>Aumenta seu Poder de Habilidade total em 30%.</mainText>"
)

HEART_DESCRIPTION = (
    "<mainText><stats><attention>40</attention> de Poder de Habilidade<br>"
    "<attention>300</attention> de Vida</stats></mainText>"
)

BOOTS_DESCRIPTION = (
    "<mainText><stats><attention>25</attention> de Velocidade de Movimento</stats></mainText>"
)

PAYLOAD = {
    "type": "item",
    "version": "15.14.1",
    "data": {
        "3089": {
            "name": "Capuz da Morte de Rabadon",
            "plaintext": "Aumenta muito o Poder de Habilidade",
            "description": RABADON_DESCRIPTION,
            "gold": {"base": 1100, "purchasable": True, "total": 3600, "sell": 2520},
            "maps": {"11": True, "12": True},
            "tags": ["SpellDamage"],
            "image": {"full": "3089.png"},
        },
        "3116": {
            "name": "Cetro de Cristal de Rylai",
            "plaintext": "Os ataques com habilidades causam lentidão",
            "description": HEART_DESCRIPTION,
            "gold": {"base": 800, "purchasable": True, "total": 2600, "sell": 1820},
            "maps": {"11": True, "12": False},
            "tags": ["Health", "SpellDamage"],
            "image": {"full": "3116.png"},
        },
        "1001": {
            "name": "Botas",
            "plaintext": "Aumenta levemente a Velocidade de Movimento",
            "description": BOOTS_DESCRIPTION,
            "gold": {"base": 300, "purchasable": True, "total": 300, "sell": 210},
            "maps": {"11": True, "12": True},
            "tags": ["Boots"],
            "image": {"full": "1001.png"},
        },
        "2052": {
            "name": "Poro-Lanche",
            "plaintext": "",
            "description": "<mainText><stats></stats></mainText>",
            "gold": {"base": 0, "purchasable": False, "total": 0, "sell": 0},
            "maps": {"11": True, "12": True},
            "tags": ["Consumable"],
            "image": {"full": "2052.png"},
        },
    },
}

MAPS = [
    {"mapId": 11, "mapName": "Summoner's Rift", "notes": "Current Version"},
    {"mapId": 12, "mapName": "Howling Abyss", "notes": "ARAM map"},
]


@pytest.fixture
def payload():
    return copy.deepcopy(PAYLOAD)


@pytest.fixture
def maps_payload():
    return copy.deepcopy(MAPS)
