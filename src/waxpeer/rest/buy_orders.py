"""Buy order endpoints."""

from typing import Any, Dict, Optional

from .request import RequestExecutor
from .types import Game, Ids, SortOrder, as_list


class BuyOrdersApi:
    """Create, edit and cancel standing buy orders."""

    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    async def buy_order_history(self, skip: int = 0, game: Optional[Game] = None,
                                sort: SortOrder = SortOrder.ASC) -> Dict[str, Any]:
        """Buy order trigger history - ``/buy-order-history``."""
        return await self.executor.get("buy-order-history", {'skip': skip, 'game': game, 'sort': sort})

    async def buy_orders(self, skip: int = 0, name: Optional[str] = None, own: int = 0,
                         game: Optional[Game] = None) -> Dict[str, Any]:
        """Active buy orders, sorted by price DESC - ``/buy-orders``."""
        return await self.executor.get("buy-orders", {'skip': skip, 'name': name, 'own': own, 'game': game})

    async def create_buy_order(self, name: str, amount: int, price: int,
                               game: Game = Game.CSGO) -> Dict[str, Any]:
        """
        Create a buy order - ``/create-buy-order``.

        Args:
            name: Exact market name of the item
            amount: How many items to buy
            price: Price per item in 1/1000 USD
            game: Game the item belongs to
        """
        return await self.executor.post(
            "create-buy-order",
            None,
            {'name': name, 'amount': amount, 'price': price, 'game': game}
        )

    async def edit_buy_order(self, id: int, amount: int, price: int) -> Dict[str, Any]:
        """Change amount and price of an order - ``/edit-buy-order``."""
        return await self.executor.post("edit-buy-order", {'id': id, 'amount': amount, 'price': price})

    async def remove_buy_order(self, ids: Ids) -> Dict[str, Any]:
        """Cancel one or more orders - ``/remove-buy-order``."""
        return await self.executor.get("remove-buy-order", [('id', i) for i in as_list(ids)])

    async def remove_all_orders(self, game: Optional[Game] = None) -> Dict[str, Any]:
        """Cancel every order, optionally for one game - ``/remove-all-orders``."""
        return await self.executor.get("remove-all-orders", {'game': game})
