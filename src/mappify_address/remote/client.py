from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from mappify_address.config import VerifierConfig
from mappify_address.models import (
    PACKAGE_NAME,
    ApiPayload,
    MappifyAddressError,
    MappifyConnectionError,
    ResponseObject,
)

logger = logging.getLogger(__name__)

AUTOCOMPLETE_PATH = "address/autocomplete"


class MappifyClient:
    """Simple REST client for the mappify.io RPC API.

    Makes exactly one request per call; there is no retry or caching.
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        config: Optional[VerifierConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config or VerifierConfig()
        self.base_url = base_url or self._config.base_url
        self._timeout = timeout if timeout is not None else self._config.timeout

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=self._timeout,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> MappifyClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        logger.debug("POST %s%s", self.base_url, path)
        try:
            response = self._client.post(path, json=payload)
        except httpx.RequestError as exc:
            logger.warning("mappify.io request failed: %s", exc)
            raise MappifyConnectionError(
                "remote_request",
                str(exc) or type(exc).__name__,
                {"package": PACKAGE_NAME},
            ) from exc

        if response.status_code != httpx.codes.OK:
            logger.warning(
                "mappify.io returned HTTP %s %s", response.status_code, response.reason_phrase
            )
            raise MappifyConnectionError.from_status(response.status_code, response.reason_phrase)

        try:
            data = response.json()
        except ValueError as exc:
            raise MappifyAddressError(
                "remote_parse",
                f"Invalid JSON body: {exc}",
                {"package": PACKAGE_NAME},
            ) from exc

        if not isinstance(data, dict):
            raise MappifyAddressError(
                "remote_parse",
                "Remote API returned non-object payload",
                {"package": PACKAGE_NAME},
            )
        return data

    def autocomplete(self, street_address: str, api_key: str) -> ResponseObject:
        """Look up candidate matches for a single-line address.

        Args:
            street_address: Address query string.
            api_key: mappify.io API key.

        Returns:
            Parsed response with candidates in service order.

        Raises:
            MappifyConnectionError: On network failure or a non-OK HTTP status.
            MappifyAddressError: If the body is not a valid autocomplete response.
        """
        payload = ApiPayload(street_address=street_address, api_key=api_key)
        data = self._request(AUTOCOMPLETE_PATH, payload.model_dump(by_alias=True))

        try:
            response = ResponseObject.model_validate(data)
        except ValidationError as exc:
            messages = "; ".join(e.get("msg", str(e)) for e in exc.errors())
            raise MappifyAddressError(
                "remote_parse",
                f"Invalid response payload: {messages}",
                {"package": PACKAGE_NAME},
            ) from exc

        logger.debug(
            "mappify.io returned %d candidate(s), confidence=%s",
            len(response.result),
            response.confidence,
        )
        return response
