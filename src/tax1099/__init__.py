"""
Tax1099 API client.

Typed client for the Tax1099 form filing API: 1098 validation, import and
paid submission, and filled-form PDF download.

Modules:
    config: Configuration management via environment variables
    endpoints: Environment-aware URL routing
    auth: Session token lifecycle
    transport: Authenticated JSON/PDF request dispatch
    client: High-level Tax1099 API client
    schemas: Request/response payload models

Usage:
    from tax1099 import Tax1099Client, DownloadFormRequest, load_config

    client = Tax1099Client.from_config(load_config())
    pdf = client.download_filled_form(
        DownloadFormRequest(form_id=123, form_type="1099-MISC")
    )
"""

from .config import Environment, Tax1099Config, load_config, load_config_from_dotenv
from .endpoints import EndpointCategory, UrlRouter
from .auth import Credentials, SessionManager, SessionToken
from .transport import RequestDispatcher
from .client import Tax1099Client, validate_download_request
from .errors import (
    BadLoginError,
    ReauthorizationError,
    Tax1099AuthError,
    Tax1099ClientError,
    Tax1099DecodeError,
    Tax1099Error,
    Tax1099StatusError,
    Tax1099TransportError,
    Tax1099ValidationError,
)
from .schemas import (
    DownloadFormRequest,
    Form1098,
    FormStatus,
    Item1098,
    PayerInfo,
    RecipientInfo,
    SubmissionResult,
    Submit1098Request,
    Submit1098Response,
    Submit1098sRequest,
    Submit1098sResponse,
    TinType,
    ValidationIssue,
)

__all__ = [
    # Config
    "Environment",
    "Tax1099Config",
    "load_config",
    "load_config_from_dotenv",
    # Routing
    "EndpointCategory",
    "UrlRouter",
    # Auth
    "Credentials",
    "SessionManager",
    "SessionToken",
    # Client
    "RequestDispatcher",
    "Tax1099Client",
    "validate_download_request",
    # Errors
    "Tax1099Error",
    "Tax1099ValidationError",
    "Tax1099AuthError",
    "BadLoginError",
    "ReauthorizationError",
    "Tax1099ClientError",
    "Tax1099TransportError",
    "Tax1099StatusError",
    "Tax1099DecodeError",
    # Schemas
    "DownloadFormRequest",
    "Form1098",
    "FormStatus",
    "Item1098",
    "PayerInfo",
    "RecipientInfo",
    "SubmissionResult",
    "Submit1098Request",
    "Submit1098Response",
    "Submit1098sRequest",
    "Submit1098sResponse",
    "TinType",
    "ValidationIssue",
]

__version__ = "0.1.0"
