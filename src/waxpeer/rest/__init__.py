"""REST wrapper groups for the Waxpeer API."""

from .request import RequestExecutor, SlidingWindowRateLimiter, build_query
from .user import UserApi
from .steam import SteamApi
from .buy_items import BuyItemsApi
from .sell_items import SellItemsApi
from .buy_orders import BuyOrdersApi
from .merchant_deposit import MerchantDepositApi

__all__ = [
    'RequestExecutor',
    'SlidingWindowRateLimiter',
    'build_query',
    'UserApi',
    'SteamApi',
    'BuyItemsApi',
    'SellItemsApi',
    'BuyOrdersApi',
    'MerchantDepositApi',
]
