import asyncio
import logging
from http.cookiejar import DefaultCookiePolicy
from types import TracebackType
from typing import TYPE_CHECKING, Any, Awaitable, Callable
from urllib.parse import quote, quote_plus

import requests

from smsedgeapi.endpoints import ENDPOINTS, get_endpoint
from smsedgeapi.exceptions import NetworkError
from smsedgeapi.models.endpoint import Endpoint
from smsedgeapi.models.smsedge import NormalizedResult, SMSEdgeResponse
from smsedgeapi.smsedge_api import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    SMSEdgeAPI,
    SMSEdgeConfig,
)
from smsedgeapi.validator import FieldMap, RuleValidator

logger = logging.getLogger("smsedgeapi")


def _is_truthy(value: Any) -> bool:
    # JavaScript truthiness: empty objects and arrays count as true
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == value and value != 0
    return True


class SMSEdge(SMSEdgeAPI):
    """Asynchronous client for the SMSEdge REST API.

    Every endpoint method takes an optional field map and resolves to a
    :class:`SMSEdgeResponse`. Validation, network and parse failures are
    reported through ``status`` instead of being raised::

        async with SMSEdge("my-key") as client:
            res = await client.send_single_sms({"from": "Shop", "to": "15551234567", "text": "Hi"})
            res.raise_for_status()
    """

    if TYPE_CHECKING:
        # generated from ENDPOINTS at import time
        async def get_functions(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def get_http_statuses(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def get_countries(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def send_single_sms(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def send_list(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def get_sms_info(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def create_list(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def delete_list(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def get_list_info(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def get_all_lists(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def create_number(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def delete_number(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def get_numbers(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def get_unsubscribers(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def get_routes(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def number_simple_verify(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def number_hlr_verify(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def text_analyzing(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def get_sending_report(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def get_sending_stats(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...
        async def get_user_details(self, fields: FieldMap | None = None) -> SMSEdgeResponse: ...

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        super().__init__(
            SMSEdgeConfig(api_key=api_key, base_url=base_url, timeout=timeout)
        )
        self._session = requests.Session()
        # calls share nothing but the key and base URL, so never keep cookies
        self._session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
        self._validators = {
            name: RuleValidator(endpoint.rules) for name, endpoint in ENDPOINTS.items()
        }

    async def call(self, name: str, fields: FieldMap | None = None) -> SMSEdgeResponse:
        """Validate ``fields`` for endpoint ``name`` and send the request."""
        endpoint = get_endpoint(name)
        result = self._validators[name].validate(fields)
        if not result.passes:
            logger.error(f"Validation error on {name}: {result.errors_by_field()}")
            return SMSEdgeResponse(
                status="validation_error",
                message="Validation failed",
                errors=result.errors,
            )
        return await self.execute(endpoint.path, fields, endpoint.description)

    async def execute(
        self,
        path: str,
        fields: FieldMap | None = None,
        success_message: str = "Request completed",
    ) -> SMSEdgeResponse:
        params = self.build_params(dict(fields or {}))
        try:
            res = await asyncio.to_thread(self.post_request, path, params)
        except NetworkError as e:
            return SMSEdgeResponse(status="network_error", message=str(e))
        return self._handle_response(res, success_message)

    def post_request(
        self, path: str, params: dict[str, str | int | float]
    ) -> requests.Response:
        logger.debug(f"POST {self.url_for(path)}")
        try:
            return self._session.post(
                url=self.url_for(path),
                headers=self.headers,
                params=params,
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as e:
            message = self._redact(str(e))
            logger.error(f"Network error: {message}")
            raise NetworkError(f"Can't proceed request: {message}") from None

    def _handle_response(
        self, res: requests.Response, success_message: str
    ) -> SMSEdgeResponse:
        if not res.ok:
            logger.warning(f"SMSEdge returned HTTP {res.status_code}")

        try:
            data = res.json()
        except requests.exceptions.JSONDecodeError:
            data = None
        if not isinstance(data, list):
            logger.error(f"Response is not a JSON array: {res.text[:200]}")
            return SMSEdgeResponse(
                status="parse_error",
                message="Failed To Parse Response As JSON",
                data=NormalizedResult.not_json(res.text).model_dump(),
            )

        payload = next((item for item in data if _is_truthy(item)), None)
        if isinstance(payload, dict) and payload.get("success") is False:
            return SMSEdgeResponse(
                status="provider_error",
                message="Provider reported failure",
                data=payload,
            )
        return SMSEdgeResponse(status="success", message=success_message, data=payload)

    def _redact(self, text: str) -> str:
        secret = self.config.api_key.get_secret_value()
        for form in {secret, quote(secret, safe=""), quote_plus(secret)}:
            text = text.replace(form, "***")
        return text

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "SMSEdge":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    async def __aenter__(self) -> "SMSEdge":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<SMSEdge base_url={self.base_url}>"


def _endpoint_method(
    endpoint: Endpoint,
) -> Callable[..., Awaitable[SMSEdgeResponse]]:
    async def method(self: SMSEdge, fields: FieldMap | None = None) -> SMSEdgeResponse:
        return await self.call(endpoint.name, fields)

    method.__name__ = endpoint.name
    method.__qualname__ = f"SMSEdge.{endpoint.name}"
    method.__doc__ = f"{endpoint.description} (``{endpoint.path}``)."
    return method


for _endpoint in ENDPOINTS.values():
    setattr(SMSEdge, _endpoint.name, _endpoint_method(_endpoint))
