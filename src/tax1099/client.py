"""
Tax1099 API Client.

Provides high-level interface for the Tax1099 form filing API:
- Validate and import 1098 forms
- Submit a batch of 1098 forms for scheduled, paid filing
- Download filled form PDFs

Each operation checks the request shape locally, then hands off to the
RequestDispatcher. Business rules are validated by Tax1099 and come back in
the response (validation_errors / is_error), not as exceptions.
"""

import time
import logging
from typing import Callable, Optional, Union

import requests

from .auth import Credentials, SessionManager
from .config import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_TOKEN_LEASE_SECONDS,
    Environment,
    Tax1099Config,
)
from .endpoints import (
    DOWNLOAD_PDF_PATH,
    IMPORT_1098_PATH,
    LOGIN_PATH,
    SUBMIT_1098S_PATH,
    VALIDATE_1098_PATH,
    EndpointCategory,
    UrlRouter,
)
from .errors import Tax1099ValidationError
from .schemas import (
    DownloadFormRequest,
    FormStatus,
    LoginRequest,
    LoginResponse,
    Submit1098Request,
    Submit1098Response,
    Submit1098sRequest,
    Submit1098sResponse,
)
from .transport import RequestDispatcher

logger = logging.getLogger(__name__)

VALID_FORM_STATUSES = tuple(status.value for status in FormStatus)


def validate_download_request(payload: DownloadFormRequest) -> None:
    """
    Check the addressing rules of a PDF download request.

    A form is addressed either by form_id alone or by payer_tin together
    with tax_year; form_type is always required; status, when given, must
    be a FormStatus value.

    Raises:
        Tax1099ValidationError: On the first rule violated
    """
    if payload.form_id is not None:
        if payload.payer_tin is not None or payload.tax_year is not None:
            raise Tax1099ValidationError("formId cannot be combined with payerTin or taxYear")
    elif payload.payer_tin is None or payload.tax_year is None:
        raise Tax1099ValidationError("formId or payerTin with taxYear must be provided")

    if not payload.form_type:
        raise Tax1099ValidationError("formType is required")

    if payload.status is not None and payload.status not in VALID_FORM_STATUSES:
        raise Tax1099ValidationError(
            f'status must be "{FormStatus.NOT_SUBMITTED.value}" or "{FormStatus.SUBMITTED.value}"'
        )


class Tax1099Client:
    """
    Client for Tax1099 API operations.

    Construction logs in; the session is refreshed transparently once its
    lease runs out. Instances are not meant to be shared between threads
    without care: token refresh is locked, but requests.Session is not
    guaranteed thread-safe.

    Usage:
        config = load_config()
        with Tax1099Client.from_config(config) as client:
            response = client.validate_1098(request)
            for issue in response.validation_errors:
                print(issue.field, issue.message)

            pdf = client.download_filled_form(
                DownloadFormRequest(form_id=123, form_type="1099-MISC")
            )
    """

    def __init__(
        self,
        environment: Union[Environment, str],
        username: str,
        password: str,
        app_key: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        lease_seconds: float = DEFAULT_TOKEN_LEASE_SECONDS,
        http_session: Optional[requests.Session] = None,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize the client and perform the initial login.

        Args:
            environment: staging or production
            username: Account login (email)
            password: Account password
            app_key: Application key issued by Tax1099
            timeout: Per-request timeout in seconds
            lease_seconds: How long a session token is trusted
            http_session: Session to send requests with (one is created if omitted)
            clock: Source of the current Unix time

        Raises:
            BadLoginError: If the credentials are rejected
            Tax1099ClientError: If the login request fails
        """
        if not isinstance(environment, Environment):
            environment = Environment.parse(environment)

        self.environment = environment
        self.router = UrlRouter(environment)
        self._owns_http = http_session is None
        self._http = http_session if http_session is not None else requests.Session()

        self.session = SessionManager(
            Credentials(username=username, password=password, app_key=app_key),
            login=self._login,
            lease_seconds=lease_seconds,
            clock=clock,
        )
        self.dispatcher = RequestDispatcher(self._http, self.session, timeout=timeout)

        self.authorize()

    @classmethod
    def from_config(cls, config: Tax1099Config, **kwargs) -> "Tax1099Client":
        """Build a client from a Tax1099Config."""
        return cls(
            config.environment,
            config.username,
            config.password,
            config.app_key,
            timeout=config.timeout_seconds,
            lease_seconds=config.token_lease_seconds,
            **kwargs,
        )

    def _login(self, credentials: Credentials) -> Optional[str]:
        """Exchange credentials for a session id (None if rejected)."""
        response = self.dispatcher.post_json(
            self.router.resolve(EndpointCategory.MAIN, LOGIN_PATH),
            LoginRequest(
                login=credentials.username,
                password=credentials.password,
                app_key=credentials.app_key,
            ),
            LoginResponse,
            auth_exempt=True,
        )
        return response.session_id

    def authorize(self) -> None:
        """
        Log in (again) with the client's credentials.

        Raises:
            BadLoginError: If the credentials are rejected
        """
        self.session.authorize()

    def validate_1098(self, payload: Submit1098Request) -> Submit1098Response:
        """
        Validate 1098 forms without storing them.

        Returns:
            Submit1098Response; inspect validation_errors and is_error
        """
        logger.info(f"Validating {len(payload.items)} 1098 item(s)...")
        response = self.dispatcher.post_json(
            self.router.resolve(EndpointCategory.FORM_1098, VALIDATE_1098_PATH),
            payload,
            Submit1098Response,
        )
        logger.info(
            f"...1098 validation complete: {len(response.validation_errors)} validation error(s)"
        )
        return response

    def import_1098(self, payload: Submit1098Request) -> Submit1098Response:
        """
        Import 1098 forms into the Tax1099 account.

        Returns:
            Submit1098Response with one result per inserted form
        """
        logger.info(f"Importing {len(payload.items)} 1098 item(s)...")
        response = self.dispatcher.post_json(
            self.router.resolve(EndpointCategory.FORM_1098, IMPORT_1098_PATH),
            payload,
            Submit1098Response,
        )
        inserted = sum(1 for r in response.result if r.is_inserted)
        logger.info(f"...1098 import complete: {inserted}/{len(response.result)} inserted")
        return response

    def submit_1098s(self, payload: Submit1098sRequest) -> Submit1098sResponse:
        """
        Submit a batch of 1098 forms for filing, with scheduling and payment.

        Returns:
            Submit1098sResponse with the reference ids of the submitted forms
        """
        logger.info("Submitting the 1098 forms...")
        response = self.dispatcher.post_json(
            self.router.resolve(EndpointCategory.PAYMENT, SUBMIT_1098S_PATH),
            payload,
            Submit1098sResponse,
        )
        logger.info(f"...1098 forms submitted (trace {response.trace_identifier})")
        return response

    def download_filled_form(self, payload: DownloadFormRequest) -> bytes:
        """
        Download a filled form PDF.

        Either form_id or the combination of payer_tin and tax_year must be
        provided.

        Returns:
            bytes: The PDF exactly as served

        Raises:
            Tax1099ValidationError: If the request is malformed (nothing is sent)
        """
        validate_download_request(payload)

        logger.info("Downloading filled form PDF...")
        data = self.dispatcher.post_for_bytes(
            self.router.resolve(EndpointCategory.MAIN, DOWNLOAD_PDF_PATH),
            payload,
        )
        logger.info(f"...filled form PDF downloaded ({len(data)} bytes)")
        return data

    def close(self) -> None:
        """Forget the session and close the HTTP session if this client created it."""
        self.session.invalidate()
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "Tax1099Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<Tax1099Client environment={self.environment.value} session={self.session!r}>"
