"""HTTP client for a Confluent-compatible schema registry (read side only)."""

import logging
from typing import Any, List, Optional, Tuple
from urllib.parse import quote

import httpx

from schema_validator.errors import FetchError, NotFoundError

logger = logging.getLogger(__name__)

REGISTRY_CONTENT_TYPE = "application/vnd.schemaregistry.v1+json"


class RegistryClient:
    """Lists subject versions and fetches registered schema text.

    Timeouts and transport failures are reported as FetchError; nothing is
    retried here.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        auth: Optional[Tuple[str, str]] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout,
            auth=auth,
            headers={"Accept": f"{REGISTRY_CONTENT_TYPE}, application/json"},
        )

    def __enter__(self) -> "RegistryClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def _get(self, path: str) -> httpx.Response:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s", url)
        try:
            return self._client.get(url)
        except httpx.TimeoutException as e:
            raise FetchError(f"Timed out requesting {url}: {e}") from e
        except httpx.HTTPError as e:
            raise FetchError(f"Request to {url} failed: {e}") from e

    def _json(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise FetchError(
                f"Registry returned a non-JSON body for {response.request.url}",
                status_code=response.status_code,
            ) from e

    def list_versions(self, subject: str) -> List[int]:
        """
        List registered version numbers for `subject`.

        Raises:
            NotFoundError: if the registry does not know the subject.
            FetchError: on any other failure.
        """
        response = self._get(f"/subjects/{quote(subject, safe='')}/versions")
        if response.status_code == 404:
            logger.debug("Subject %s not registered on %s", subject, self.base_url)
            raise NotFoundError(subject)
        if not response.is_success:
            raise FetchError(
                f"Listing versions for subject '{subject}' failed with HTTP {response.status_code}",
                status_code=response.status_code,
            )
        body = self._json(response)
        if not isinstance(body, list):
            raise FetchError(f"Unexpected versions payload for subject '{subject}': {body!r}")
        try:
            return [int(version) for version in body]
        except (TypeError, ValueError) as e:
            raise FetchError(f"Unexpected versions payload for subject '{subject}': {body!r}") from e

    def get_schema(self, subject: str, version: int) -> str:
        """
        Fetch the schema text registered as `version` of `subject`.

        Raises:
            FetchError: on any unsuccessful response, including 404.
        """
        response = self._get(f"/subjects/{quote(subject, safe='')}/versions/{version}")
        if not response.is_success:
            raise FetchError(
                f"Fetching version {version} of subject '{subject}' failed with HTTP {response.status_code}",
                status_code=response.status_code,
            )
        body = self._json(response)
        if not isinstance(body, dict) or not isinstance(body.get("schema"), str):
            raise FetchError(f"Version {version} of subject '{subject}' has no schema text")
        return body["schema"]
