"""Upstream product catalogs and their aggregation."""

import asyncio
from typing import Optional, Sequence

import requests

from .config import ProviderSettings
from .errors import UpstreamError
from .logger import get_logger
from .schemas import Product

logger = get_logger("providers")


class ProviderClient:
    """HTTP client for one upstream product catalog.

    Attributes:
        name: Short provider name used in logs and errors.
        url: Endpoint returning the catalog as a JSON array.
        timeout: Seconds before the request is abandoned, None to wait indefinitely.
    """

    def __init__(self, name: str, url: str, timeout: Optional[float] = None):
        """Initialize the client.

        Args:
            name (str): Provider name.
            url (str): Catalog endpoint.
            timeout (float | None): Request timeout in seconds.
        """
        self.name = name
        self.url = url
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: ProviderSettings, timeout: Optional[float] = None) -> "ProviderClient":
        """Build a client from its configured name and URL."""
        return cls(settings.name, settings.url, timeout=timeout)

    def fetch_products(self) -> list[Product]:
        """Fetch the provider's catalog.

        Returns:
            list[Product]: Products in the order the provider returned them.

        Raises:
            UpstreamError: On network failure, non-success status, or a body
                that is not a JSON array.
        """
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            raise UpstreamError(f"Provider '{self.name}' failed: {e}", provider=self.name) from e

        if not isinstance(payload, list):
            raise UpstreamError(
                f"Provider '{self.name}' returned {type(payload).__name__}, expected a JSON array",
                provider=self.name,
            )

        logger.debug(f"Fetched {len(payload)} products from {self.name}")
        return payload


class CatalogAggregator:
    """Concatenates the catalogs of several providers.

    All providers are fetched concurrently. The result keeps the order of
    ``providers``, whatever order the responses arrive in, and any single
    failure fails the whole aggregation.
    """

    def __init__(self, providers: Sequence[ProviderClient]):
        self.providers = list(providers)

    async def fetch_catalog(self) -> list[Product]:
        """Fetch every provider and concatenate their products.

        Returns:
            list[Product]: Products of the first provider, then the second, and so on.

        Raises:
            UpstreamError: If any provider fails. No partial list is returned.
        """
        results = await asyncio.gather(
            *(asyncio.to_thread(provider.fetch_products) for provider in self.providers)
        )

        catalog: list[Product] = []
        for products in results:
            catalog.extend(products)

        logger.info(f"Aggregated {len(catalog)} products from {len(self.providers)} providers")
        return catalog
