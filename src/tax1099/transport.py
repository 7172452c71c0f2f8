"""
Authenticated request dispatch for the Tax1099 API.

Every call is a POST with a JSON body. Responses are either JSON, decoded
into a pydantic model, or raw bytes (PDF downloads).

Security notes:
- Never log request/response bodies (they contain TINs)
- Error messages for non-200 responses DO carry the body, for diagnosis;
  callers decide where those end up
"""

import logging
from typing import Dict, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from .auth import SessionManager
from .config import DEFAULT_TIMEOUT_SECONDS
from .errors import Tax1099DecodeError, Tax1099StatusError, Tax1099TransportError
from .schemas import WireModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

JSON_CONTENT_TYPE = "application/json"
PDF_CONTENT_TYPE = "application/pdf"


class RequestDispatcher:
    """
    Sends Tax1099 requests through one requests.Session.

    Pre-flight for every call: refresh the session token if its lease ran
    out (unless the call is auth-exempt, i.e. the login itself), then
    attach content, accept and bearer headers.
    """

    def __init__(
        self,
        http: requests.Session,
        session_manager: SessionManager,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.http = http
        self.session_manager = session_manager
        self.timeout = timeout

    def _get_headers(self, body: bytes, accept: str) -> Dict[str, str]:
        headers = {"Accept": accept}
        if body:
            headers["Content-Type"] = JSON_CONTENT_TYPE
        token = self.session_manager.bearer_token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _send(
        self,
        url: str,
        payload: Optional[WireModel],
        accept: str,
        auth_exempt: bool,
    ) -> bytes:
        """
        Run pre-flight, POST the payload and return the body of a 200 response.

        Raises:
            ReauthorizationError: If the token refresh fails
            Tax1099TransportError: On network failure
            Tax1099StatusError: If the response status is not 200
        """
        if not auth_exempt:
            self.session_manager.ensure_authorized()

        body = payload.to_wire().encode("utf-8") if payload is not None else b""
        headers = self._get_headers(body, accept)

        try:
            logger.info(f"Tax1099 POST {url}")
            response = self.http.post(
                url,
                data=body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"Request to {url} timed out")
            raise Tax1099TransportError(f"Tax1099 request to {url} timed out") from e
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Connection error for {url}")
            raise Tax1099TransportError(f"Failed to connect to {url}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {type(e).__name__}")
            raise Tax1099TransportError(f"Tax1099 request failed: {type(e).__name__}") from e

        # Log status but NOT response body
        logger.debug(f"Response status: {response.status_code}")

        if response.status_code != 200:
            raise Tax1099StatusError(response.status_code, url, response.text)

        return response.content

    def post_json(
        self,
        url: str,
        payload: Optional[WireModel],
        response_model: Optional[Type[ModelT]] = None,
        auth_exempt: bool = False,
    ) -> Optional[ModelT]:
        """
        POST a JSON payload and decode the JSON response.

        Args:
            url: Fully qualified endpoint URL
            payload: Request model, or None for an empty body
            response_model: Model to decode the body into; None discards it
            auth_exempt: Skip the token freshness check (login only)

        Returns:
            Decoded response model, or None when no model was requested

        Raises:
            Tax1099DecodeError: If the body does not match response_model
            Tax1099StatusError / Tax1099TransportError: See _send
        """
        data = self._send(url, payload, JSON_CONTENT_TYPE, auth_exempt)

        if response_model is None:
            return None

        try:
            return response_model.model_validate_json(data)
        except ValidationError as e:
            logger.error(f"Failed to decode {response_model.__name__} from {url}")
            raise Tax1099DecodeError(
                f"Failed to decode {response_model.__name__} from {url}: {e}", url=url
            ) from e

    def post_for_bytes(
        self,
        url: str,
        payload: Optional[WireModel],
        auth_exempt: bool = False,
    ) -> bytes:
        """
        POST a JSON payload and return the raw response body (PDF).

        Raises:
            Tax1099StatusError / Tax1099TransportError: See _send
        """
        return self._send(url, payload, PDF_CONTENT_TYPE, auth_exempt)
