"""
Tax1099 endpoint routing.

Each endpoint category is served by its own host, and every host has a
staging and a production deployment.
"""

from enum import Enum
from typing import Dict

from .config import Environment


class EndpointCategory(Enum):
    """Backend host families of the Tax1099 API."""
    MAIN = "main"  # login, PDFs
    FORM_1098 = "1098"
    PAYMENT = "payment"


BASE_URLS: Dict[EndpointCategory, Dict[Environment, str]] = {
    EndpointCategory.MAIN: {
        Environment.STAGING: "https://tax1099api.1099cloud.com/api/v1",
        Environment.PRODUCTION: "https://app.tax1099.com/api/v1",
    },
    EndpointCategory.FORM_1098: {
        Environment.STAGING: "https://apiforms.1099cloud.com/api/v1",
        Environment.PRODUCTION: "https://form1098.tax1099.com/api/v1",
    },
    EndpointCategory.PAYMENT: {
        Environment.STAGING: "https://apipayment.1099cloud.com/api/v1",
        Environment.PRODUCTION: "https://apipayment.tax1099.com/api/v1",
    },
}

# API paths
LOGIN_PATH = "login"
VALIDATE_1098_PATH = "form/1098/validate"
IMPORT_1098_PATH = "form/1098/import"
SUBMIT_1098S_PATH = "payment/forms/import/submit/1098"
DOWNLOAD_PDF_PATH = "pdf/forms/getpdfs"


class UrlRouter:
    """Resolves (category, path) to a fully qualified URL for one environment."""

    def __init__(self, environment: Environment):
        if not isinstance(environment, Environment):
            try:
                environment = Environment(environment)
            except ValueError:
                raise ValueError(f"Unknown environment: {environment!r}")
        self.environment = environment

    def base_url(self, category: EndpointCategory) -> str:
        try:
            hosts = BASE_URLS[category]
        except KeyError:
            raise ValueError(f"Unknown endpoint category: {category!r}")
        return hosts[self.environment]

    def resolve(self, category: EndpointCategory, path: str) -> str:
        """
        Build the full URL for an API path.

        Args:
            category: Host family serving the endpoint
            path: Endpoint path relative to the versioned API root

        Returns:
            str: Fully qualified URL
        """
        return f"{self.base_url(category)}/{path.lstrip('/')}"

    def __repr__(self) -> str:
        return f"<UrlRouter environment={self.environment.value}>"
