"""Selling endpoints: inventory, listings and removals."""

from typing import Any, Dict, List, Optional

from .request import RequestExecutor
from .types import EditItem, Game, Ids, ListedItem, as_list


class SellItemsApi:
    """List, reprice and delist items from the Steam inventory."""

    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    async def get_my_inventory(self, skip: int = 0, game: Game = Game.CSGO) -> Dict[str, Any]:
        """Tradable items in the Steam inventory - ``/get-my-inventory``."""
        return await self.executor.get("get-my-inventory", {'skip': skip, 'game': game})

    async def ready_to_transfer_p2p(self, steam_api: str) -> Dict[str, Any]:
        """Whether the account can send P2P trades - ``/ready-to-transfer-p2p``."""
        return await self.executor.get("ready-to-transfer-p2p", {'steam_api': steam_api})

    async def check_wss_user(self, steamid: str) -> Dict[str, Any]:
        """Whether a trade websocket is connected for ``steamid`` - ``/check-wss-user``."""
        return await self.executor.get("check-wss-user", {'steamid': steamid})

    async def edit_items(self, items: List[EditItem], game: Game = Game.CSGO) -> Dict[str, Any]:
        """Change prices of listed items - ``/edit-items``."""
        return await self.executor.post("edit-items", {'items': items}, {'game': game})

    async def fetch_inventory(self, game: Game = Game.CSGO) -> Dict[str, Any]:
        """Ask the site to refresh the Steam inventory - ``/fetch-my-inventory``."""
        return await self.executor.get("fetch-my-inventory", {'game': game})

    async def list_items_steam(self, items: List[ListedItem], game: Game = Game.CSGO) -> Dict[str, Any]:
        """Put items on sale - ``/list-items-steam``."""
        return await self.executor.post("list-items-steam", {'items': items}, {'game': game})

    async def my_listed_items(self, game: Game = Game.CSGO) -> Dict[str, Any]:
        """Items currently on sale - ``/list-items-steam``."""
        return await self.executor.get("list-items-steam", {'game': game})

    async def remove_items(self, ids: Ids) -> Dict[str, Any]:
        """Delist one or more items - ``/remove-items``."""
        return await self.executor.get("remove-items", [('id', i) for i in as_list(ids)])

    async def remove_all(self, game: Optional[Game] = None) -> Dict[str, Any]:
        """Delist everything, optionally for one game - ``/remove-all``."""
        return await self.executor.get("remove-all", {'game': game})
