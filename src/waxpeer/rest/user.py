"""User profile endpoints."""

from typing import Any, Dict

from .request import RequestExecutor
from .types import SortOrder


class UserApi:
    """Account profile, trade history and key management."""

    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    async def get_profile(self) -> Dict[str, Any]:
        """Profile of the key owner - ``/user``."""
        return await self.executor.get("user")

    async def my_history(self, skip: int, start: str, end: str,
                         sort: SortOrder = SortOrder.DESC) -> Dict[str, Any]:
        """
        Sales and purchases between two dates - ``/my-history``.

        Args:
            skip: How many records to skip
            start: Start date, ISO 8601
            end: End date, ISO 8601
            sort: Sort by date
        """
        return await self.executor.post(
            "my-history",
            {'skip': skip, 'start': start, 'end': end, 'sort': SortOrder(sort).value}
        )

    async def change_trade_link(self, tradelink: str) -> Dict[str, Any]:
        """Replace the account trade link - ``/change-tradelink``."""
        return await self.executor.post("change-tradelink", {'tradelink': tradelink})

    async def set_my_keys(self, steam_api: str) -> Dict[str, Any]:
        """Store the Steam web API key - ``/set-my-steamapi``."""
        return await self.executor.get("set-my-steamapi", {'steam_api': steam_api})
