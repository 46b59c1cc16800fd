"""
Submission Adapter: posting Variants to the catalog service.

Each Variant is POSTed as JSON to ``<host>/variants`` under basic auth. The
catalog answers 201 on success; anything else aborts the run. There is no
retry.
"""

import logging

import httpx

from ..errors import SubmissionError
from ..models.core import SubmitConfig, Variant

logger = logging.getLogger(__name__)

CREATED = 201


class CatalogClient:
    """
    Blocking HTTP client for the variant catalog.

    Args:
        config: Run configuration (URL, credentials, TLS verification, timeout).
        transport: Optional httpx transport, used to plug in a mock in tests.
    """

    def __init__(self, config: SubmitConfig, transport: httpx.BaseTransport | None = None):
        self.config = config
        self.url = config.variants_url
        self._client = httpx.Client(
            auth=httpx.BasicAuth(config.username, config.password or ""),
            verify=config.verify_ssl,
            timeout=config.timeout,
            transport=transport,
        )
        if not config.verify_ssl:
            logger.warning("SSL certificate verification is disabled")

    def submit(self, variant: Variant) -> httpx.Response:
        """
        Create one variant in the catalog.

        Raises:
            SubmissionError: On any status other than 201 or a transport failure.
        """
        try:
            response = self._client.post(self.url, json=variant.to_wire())
        except httpx.HTTPError as e:
            raise SubmissionError(f"Request to {self.url} failed: {e}") from e

        if response.status_code != CREATED:
            raise SubmissionError(
                f"Catalog returned {response.status_code} for "
                f"{variant.reference_name}:{variant.start}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        logger.debug("Created %s:%d", variant.reference_name, variant.start)
        return response

    def close(self):
        self._client.close()

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
