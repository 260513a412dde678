"""
API Service
===========

The one place that talks HTTP to the ThermoGuard backend.

WHAT THIS DOES:
--------------
1. Builds the URL (base URL + endpoint + query params)
2. Sends the two JSON headers on every request
3. Enforces a per-request deadline (default 30s)
4. Turns every kind of failure into ONE ThermoGuardError subclass
   with a single readable message

THE DATA FLOW:
-------------
    SensorService / LeituraService
            |
            | get("Sensor") / post("Leitura", {...})
            v
    [ApiService]  --HTTP-->  .NET backend (/api/...)
            |
            | 2xx JSON    -> parsed value
            | 2xx other   -> raw text
            | 2xx garbled -> MalformedResponse
            | non-2xx     -> HttpError("must be <= 100")
            | too slow    -> RequestTimeout
            | no network  -> NetworkError
            | redirects   -> followed (too many -> NetworkError)
            v
        caller

There is NO retry in here. If a call fails, the caller finds out on the
first attempt and decides what to do.

Author: ThermoGuard Team
"""

import asyncio
import logging
from typing import Any, Optional

import httpx

from thermoguard.config import Config, DEFAULT_HEADERS
from thermoguard.exceptions import (
    HttpError,
    MalformedResponse,
    NetworkError,
    RequestTimeout,
    ThermoGuardError,
)
from thermoguard.models import parse_error_envelope

logger = logging.getLogger(__name__)


class ApiService:
    """
    HTTP transport for the ThermoGuard API.

    HOW TO USE:
    ----------
    api = ApiService(base_url="http://localhost:5285/api/")

    sensores = await api.get("Sensor")
    leituras = await api.get("Leitura/por-periodo", {"inicio": "...", "fim": "..."})
    novo = await api.post("Sensor", {"nome": "Câmara 1", "localizacao": "Galpão B"})

    await api.close()

    Pass your own http_client to point it at a fake server in tests.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_ms: Optional[int] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Set up the service.

        Args:
            base_url: API root, ending with "/" (default: Config.API_BASE_URL)
            timeout_ms: Per-request deadline in milliseconds
                        (default: Config.REQUEST_TIMEOUT_MS)
            http_client: Client to send requests with. One is created
                         if not given.
        """
        self.base_url = base_url or Config.API_BASE_URL
        timeout_ms = Config.REQUEST_TIMEOUT_MS if timeout_ms is None else timeout_ms
        self.timeout = timeout_ms / 1000

        # One client for the whole service so connections get reused
        self.http_client = http_client or httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
        )

    def get_headers(self) -> dict:
        return dict(DEFAULT_HEADERS)

    def build_url(self, endpoint: str) -> str:
        return f"{self.base_url}{endpoint}"

    @staticmethod
    def clean_params(params: Optional[dict]) -> dict:
        """Drop query params whose value is None instead of sending them empty."""
        if not params:
            return {}
        return {key: value for key, value in params.items() if value is not None}

    async def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict] = None,
        data: Any = None,
    ) -> Any:
        """
        Send one request and return the decoded body.

        Args:
            method: GET, POST, PUT or DELETE
            endpoint: Path relative to the base URL (e.g. "Sensor/3")
            params: Query parameters (None values are skipped)
            data: JSON body, only sent for POST/PUT

        Returns:
            Parsed JSON for JSON responses, raw text otherwise

        Raises:
            RequestTimeout, NetworkError, HttpError, MalformedResponse
        """
        kwargs = {"headers": self.get_headers()}
        query = self.clean_params(params)
        if query:
            kwargs["params"] = query
        if method in ("POST", "PUT"):
            kwargs["json"] = {} if data is None else data

        url = self.build_url(endpoint)
        logger.debug(f"HTTP {method} {url}")

        try:
            # The deadline covers the whole exchange. When it fires, the
            # outbound call is cancelled; the server may still apply it.
            response = await asyncio.wait_for(
                self.http_client.request(method, url, **kwargs),
                timeout=self.timeout,
            )
            return self.handle_response(response, endpoint)

        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.error(f"Timeout on {method} {endpoint} after {self.timeout:g}s")
            raise RequestTimeout(endpoint, self.timeout) from e
        except httpx.TransportError as e:
            logger.error(f"Network error on {method} {endpoint}: {type(e).__name__}: {e}")
            raise NetworkError(f"Falha de conexão com a API: {e}", endpoint) from e
        except httpx.DecodingError as e:
            logger.error(f"Undecodable body on {method} {endpoint}: {e}")
            raise MalformedResponse(f"Resposta inválida da API: {e}", endpoint) from e
        except httpx.RequestError as e:
            logger.error(f"Request failed on {method} {endpoint}: {type(e).__name__}: {e}")
            raise NetworkError(f"Falha na requisição à API: {e}", endpoint) from e
        except ThermoGuardError as e:
            logger.error(f"Error on {method} {endpoint}: {e}")
            raise

    def handle_response(self, response: httpx.Response, endpoint: str) -> Any:
        """
        Turn a response into a value or an error.

        2xx JSON is parsed, other 2xx bodies come back as text. Anything
        else becomes an HttpError with one message taken from the body.
        """
        if not response.is_success:
            envelope = parse_error_envelope(
                self._decode_error_body(response),
                response.status_code,
                response.reason_phrase,
            )
            raise HttpError(
                envelope.to_message(),
                status_code=response.status_code,
                endpoint=endpoint,
                envelope=envelope,
            )

        logger.debug(f"HTTP {endpoint} response: {response.status_code}")

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            return response.text

        try:
            return response.json()
        except ValueError as e:
            preview = response.text[:300]
            raise MalformedResponse(f"Resposta inválida da API: {preview!r}", endpoint) from e

    @staticmethod
    def _decode_error_body(response: httpx.Response) -> Any:
        # Error bodies are best-effort: no body or bad JSON means "no envelope"
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            logger.warning(f"Could not parse error body: {response.text[:300]!r}")
            return None

    async def get(self, endpoint: str, params: Optional[dict] = None) -> Any:
        return await self.request("GET", endpoint, params=params)

    async def post(self, endpoint: str, data: Any = None) -> Any:
        return await self.request("POST", endpoint, data=data)

    async def put(self, endpoint: str, data: Any = None) -> Any:
        return await self.request("PUT", endpoint, data=data)

    async def delete(self, endpoint: str) -> Any:
        return await self.request("DELETE", endpoint)

    async def close(self):
        """
        Clean up when we're done.

        Called when the app shuts down.
        """
        await self.http_client.aclose()
