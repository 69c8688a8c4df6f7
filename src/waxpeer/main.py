"""Listener service - streams Waxpeer push events into the log."""

import asyncio
import logging
import os
import signal
import sys
from typing import Any, Optional

from .client import Waxpeer
from .config.settings import WaxpeerConfig, load_config
from .utils.logging import setup_logging
from .ws.events import SiteEvent, TradeEvent


logger = logging.getLogger(__name__)


class WaxpeerListenerService:
    """Connects the configured push channels and logs every domain event."""

    def __init__(self, config: WaxpeerConfig):
        self.config = config
        self.client: Optional[Waxpeer] = None
        self._shutdown_event = asyncio.Event()

        setup_logging(self.config.logging, service_name="waxpeer-listener")
        logger.info("Waxpeer listener initialized")

    async def start(self):
        """Run until SIGINT/SIGTERM."""
        credentials = self.config.credentials
        if not credentials.api_key:
            raise ValueError("credentials.api_key is required")

        logger.info("Starting Waxpeer listener")
        self.client = Waxpeer(credentials.api_key, self.config)

        if credentials.steam_id:
            trade = self.client.trade_socket(credentials.steam_id, credentials.trade_url)
            for event in TradeEvent:
                trade.on(event, self._logger_for(event.value))
        else:
            logger.warning("No steam id configured, trade websocket disabled")

        website = self.client.website_socket(credentials.website_events)
        for event in SiteEvent:
            website.on(event, self._logger_for(event.value))

        self._setup_signal_handlers()

        await self._shutdown_event.wait()

        logger.info("Shutting down Waxpeer listener")
        await self.client.close()
        logger.info("Waxpeer listener stopped")

    def stop(self):
        self._shutdown_event.set()

    @staticmethod
    def _logger_for(name: str):
        def log_event(data: Any) -> None:
            logger.info(f"{name}: {data}")
        return log_event

    def _setup_signal_handlers(self):
        """Setup signal handlers for graceful shutdown."""
        loop = asyncio.get_running_loop()
        for signum in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(signum, self.stop)
            except NotImplementedError:
                # Windows event loops
                signal.signal(signum, lambda s, f: self.stop())


async def main():
    """Main entry point."""
    config_file = os.getenv("CONFIG_FILE", "config/example.yaml")
    service = WaxpeerListenerService(load_config(config_file))

    try:
        await service.start()
    except Exception as e:
        logger.error(f"Service failed: {e}", exc_info=True)
        sys.exit(1)


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
