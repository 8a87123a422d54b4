"""Base HTTP clients for the LicenseChain Solana SDK.

This module provides the single request path shared by the Solana JSON-RPC
client and the LicenseChain REST managers: header construction, the
per-request deadline and the mapping of transport failures into the error
taxonomy.
"""

# Standard library imports
import asyncio
from typing import Any, Dict, List, Optional, Type, TypeVar
from urllib.parse import quote

# Third-party library imports
import httpx
import pydantic

# Internal imports
from licensechain_solana.config import SolanaConfig
from licensechain_solana.constants import API_VERSION, PLATFORM
from licensechain_solana.logging_config import get_logger
from licensechain_solana.utils.errors import (
    AuthenticationError,
    NetworkError,
    RateLimitError,
    RPCError,
    TimeoutError,
    ValidationError,
)

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)

# Get logger
logger = get_logger(__name__)


def _retry_after(response: httpx.Response) -> Optional[float]:
    """Parse the Retry-After header as seconds, if present and numeric."""
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


class BaseHttpClient:
    """Shared HTTP plumbing.

    A fresh ``httpx.AsyncClient`` is opened for each request and closed
    afterwards, so instances hold no connection state and can be used from
    concurrent tasks.
    """

    def __init__(self, config: SolanaConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize the client.

        Args:
            config: SDK configuration
            transport: Optional httpx transport, mainly for tests
        """
        self.config = config
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
            "X-API-Version": API_VERSION,
        }

    async def _send(
        self,
        method: str,
        url: str,
        json: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Send one HTTP request and return the decoded JSON body.

        Args:
            method: HTTP method
            url: Absolute URL
            json: Optional JSON body
            params: Optional query parameters

        Returns:
            Decoded JSON body

        Raises:
            TimeoutError: If the request exceeds the configured deadline
            AuthenticationError: On HTTP 401 or 403
            RateLimitError: On HTTP 429
            NetworkError: On any other transport failure or non-2xx status
        """
        timeout = self.config.timeout_seconds
        logger.debug(f"{method} {url}")

        try:
            async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
                response = await asyncio.wait_for(
                    client.request(method, url, headers=self._headers(), json=json, params=params),
                    timeout=timeout
                )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.warning(f"{method} {url} timed out after {self.config.timeout}ms")
            raise TimeoutError(
                f"Request timed out after {self.config.timeout}ms",
                timeout=self.config.timeout,
                details={"url": url}
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} failed: {type(e).__name__}: {e}")
            raise NetworkError(
                "HTTP request failed",
                details={"url": url, "original_exception": type(e).__name__, "original_message": str(e)}
            ) from e

        self._raise_for_status(response)

        try:
            return response.json()
        except ValueError as e:
            raise NetworkError(
                "Response body is not valid JSON",
                status_code=response.status_code,
                details={"url": url}
            ) from e

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        """Map a non-2xx response into the NetworkError family."""
        if response.is_success:
            return

        status = response.status_code
        message = f"HTTP {status}: {response.reason_phrase}"
        details = {"url": str(response.request.url)}
        logger.warning(message)

        if status in (401, 403):
            raise AuthenticationError(message, status_code=status, details=details)
        if status == 429:
            raise RateLimitError(message, retry_after=_retry_after(response), details=details)
        raise NetworkError(message, status_code=status, details=details)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Release resources. Requests open and close their own connections."""


class BaseSolanaClient(BaseHttpClient):
    """Base client for the Solana JSON-RPC interface."""

    async def _make_request(self, method: str, params: Optional[List[Any]] = None) -> Any:
        """Make a JSON-RPC request to the configured Solana node.

        Args:
            method: The RPC method to call
            params: The parameters to pass to the method

        Returns:
            The ``result`` member of the response

        Raises:
            RPCError: If the node returns an error object or a malformed response
            NetworkError: If the HTTP exchange fails
        """
        payload = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": method,
            "params": params or []
        }

        body = await self._send("POST", self.config.rpc_url, json=payload)
        if not isinstance(body, dict):
            raise RPCError("Malformed JSON-RPC response", details={"method": method})

        error = body.get("error")
        if error:
            if not isinstance(error, dict):
                raise RPCError(f"Solana RPC error: {error}", details={"method": method})
            logger.warning(f"RPC error from {method}: {error.get('message')}")
            raise RPCError(
                error.get("message", "Unknown RPC error"),
                rpc_code=error.get("code"),
                details={"method": method, "data": error.get("data")}
            )

        if "result" not in body:
            raise RPCError("JSON-RPC response has no result", details={"method": method})
        return body["result"]

    def _options(self, commitment: Optional[str] = None, **options: Any) -> Dict[str, Any]:
        """Build the trailing configuration object of an RPC call."""
        options["commitment"] = commitment or self.config.commitment
        return options

    @staticmethod
    def _value(result: Any, method: str) -> Any:
        """Unwrap the ``value`` member of a context-wrapped result."""
        if not isinstance(result, dict) or "value" not in result:
            raise RPCError(f"{method} result has no value", details={"method": method})
        return result["value"]

    @staticmethod
    def _get_path(data: Any, *keys: Any) -> Any:
        """Walk nested dictionaries and lists.

        Raises:
            RPCError: If any step of the path is missing
        """
        current = data
        for key in keys:
            try:
                current = current[key]
            except (KeyError, IndexError, TypeError):
                path = ".".join(str(k) for k in keys)
                raise RPCError(f"Unexpected RPC payload shape, missing {path}", details={"path": path})
        return current

    @staticmethod
    def _decode(model: Type[ModelT], data: Any) -> ModelT:
        """Validate reshaped RPC data against a model.

        Raises:
            RPCError: If the data does not match the model
        """
        try:
            return model.model_validate(data)
        except pydantic.ValidationError as e:
            raise RPCError(
                f"Unexpected RPC payload for {model.__name__}",
                details={"errors": e.errors(include_url=False, include_context=False)}
            ) from e


class BaseRestClient(BaseHttpClient):
    """Base client for the LicenseChain REST backend."""

    def _headers(self) -> Dict[str, str]:
        headers = super()._headers()
        headers["X-Platform"] = PLATFORM
        return headers

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Call a backend endpoint and return its ``data`` member.

        Args:
            method: HTTP method
            endpoint: Path below the configured base URL
            json: Optional JSON body
            params: Optional query parameters

        Returns:
            The ``data`` member of the response body

        Raises:
            ValidationError: If the body has no ``data`` member
            NetworkError: If the HTTP exchange fails
        """
        url = f"{self.config.base_url}{endpoint}"
        body = await self._send(method, url, json=json, params=params)

        if not isinstance(body, dict) or "data" not in body:
            raise ValidationError("Response body has no data member", details={"endpoint": endpoint})
        return body["data"]

    @staticmethod
    def _segment(value: Any) -> str:
        """Percent-encode a caller-supplied identifier for use as one path segment."""
        return quote(str(value), safe="")

    @staticmethod
    def _body(**fields: Any) -> Dict[str, Any]:
        """Build a mutating request body tagged with the platform."""
        body = {key: value for key, value in fields.items() if value is not None}
        body["platform"] = PLATFORM
        return body

    @staticmethod
    def _decode(model: Type[ModelT], data: Any) -> ModelT:
        """Validate a ``data`` member against a model.

        Raises:
            ValidationError: If the data does not match the model
        """
        try:
            return model.model_validate(data)
        except pydantic.ValidationError as e:
            raise ValidationError(
                f"Unexpected response payload for {model.__name__}",
                details={"errors": e.errors(include_url=False, include_context=False)}
            ) from e

    @classmethod
    def _decode_list(cls, model: Type[ModelT], data: Any) -> List[ModelT]:
        if not isinstance(data, list):
            raise ValidationError(
                f"Expected a list of {model.__name__}",
                details={"received": type(data).__name__}
            )
        return [cls._decode(model, item) for item in data]
