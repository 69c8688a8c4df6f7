"""Merchant deposit endpoints."""

from typing import Any, Dict, List, Optional, Union

from .request import RequestExecutor
from .types import MerchantListItem, SteamAppId


class MerchantDepositApi:
    """Deposits made by a merchant's users through Waxpeer."""

    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    async def get_history(self, partner: Optional[str] = None, token: Optional[str] = None,
                          skip: Optional[int] = None) -> Dict[str, Any]:
        return await self.executor.get("history", {'partner': partner, 'token': token, 'skip': skip})

    async def get_merchant_user(self, steam_id: str, merchant: str) -> Dict[str, Any]:
        """Registered user of a merchant - ``/merchant/user``."""
        return await self.executor.get("merchant/user", {'steam_id': steam_id, 'merchant': merchant})

    async def post_merchant_user(self, merchant: str, tradelink: str, steam_id: str) -> Dict[str, Any]:
        """Register or update a merchant user - ``/merchant/user``."""
        return await self.executor.post(
            "merchant/user",
            {'tradelink': tradelink, 'steam_id': steam_id},
            {'merchant': merchant}
        )

    async def merchant_inventory_update(self, steam_id: str, merchant: str) -> Dict[str, Any]:
        """Refresh a merchant user's inventory - ``/merchant/inventory``."""
        return await self.executor.post("merchant/inventory", None, {'steam_id': steam_id, 'merchant': merchant})

    async def merchant_inventory(self, steam_id: str, merchant: str,
                                 game: Union[SteamAppId, int] = SteamAppId.CSGO,
                                 skip: int = 0) -> Dict[str, Any]:
        """Cached inventory of a merchant user - ``/merchant/inventory``."""
        return await self.executor.get("merchant/inventory", {
            'steam_id': steam_id,
            'merchant': merchant,
            'game': game,
            'skip': skip,
        })

    async def merchant_list_items_steam(self, merchant: str, steam_id: str,
                                        items: List[MerchantListItem]) -> Dict[str, Any]:
        """Deposit a merchant user's items - ``/merchant/list-items-steam``."""
        return await self.executor.post(
            "merchant/list-items-steam",
            {'items': items},
            {'merchant': merchant, 'steam_id': steam_id}
        )

    async def merchant_deposits_history(self, merchant: str, steam_id: Optional[str] = None,
                                        tx_id: Optional[str] = None) -> Dict[str, Any]:
        """Deposit history of a merchant - ``/merchant/deposits``."""
        return await self.executor.post(
            "merchant/deposits",
            None,
            {'merchant': merchant, 'steam_id': steam_id, 'tx_id': tx_id}
        )
