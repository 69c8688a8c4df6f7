"""Request vocabulary shared by the REST wrappers."""

from enum import Enum
from typing import List, TypedDict, Union


class Game(str, Enum):
    CSGO = "csgo"
    DOTA2 = "dota2"
    TF2 = "tf2"
    RUST = "rust"


class SteamAppId(int, Enum):
    CSGO = 730
    DOTA2 = 570
    TF2 = 440
    RUST = 252490


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class ItemsListOrderBy(str, Enum):
    PRICE = "price"
    NAME = "name"
    DISCOUNT = "discount"
    BEST_DEALS = "best_deals"


class Exterior(str, Enum):
    FACTORY_NEW = "FN"
    MINIMAL_WEAR = "MW"
    FIELD_TESTED = "FT"
    WELL_WORN = "WW"
    BATTLE_SCARRED = "BS"


class DopplerPhase(str, Enum):
    ANY = "any"
    PHASE1 = "phase1"
    PHASE2 = "phase2"
    PHASE3 = "phase3"
    PHASE4 = "phase4"
    RUBY = "ruby"
    SAPPHIRE = "sapphire"
    BLACK_PEARL = "black_pearl"
    EMERALD = "emerald"


class ListedItem(TypedDict):
    """Item to put on sale; price in 1/1000 USD."""
    item_id: Union[int, str]
    price: int


class EditItem(TypedDict):
    item_id: Union[int, str]
    price: int


class MerchantListItem(TypedDict):
    item_id: Union[int, str]
    price: int


Ids = Union[int, str, List[int], List[str]]


def as_list(ids: Ids) -> list:
    """Accept one id or many."""
    if isinstance(ids, (list, tuple, set)):
        return list(ids)
    return [ids]
