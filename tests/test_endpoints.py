import pytest

from tax1099 import EndpointCategory, Environment, UrlRouter


@pytest.mark.parametrize(
    "environment, category, expected",
    [
        (Environment.STAGING, EndpointCategory.MAIN, "https://tax1099api.1099cloud.com/api/v1/login"),
        (Environment.PRODUCTION, EndpointCategory.MAIN, "https://app.tax1099.com/api/v1/login"),
        (Environment.STAGING, EndpointCategory.FORM_1098, "https://apiforms.1099cloud.com/api/v1/login"),
        (Environment.PRODUCTION, EndpointCategory.FORM_1098, "https://form1098.tax1099.com/api/v1/login"),
        (Environment.STAGING, EndpointCategory.PAYMENT, "https://apipayment.1099cloud.com/api/v1/login"),
        (Environment.PRODUCTION, EndpointCategory.PAYMENT, "https://apipayment.tax1099.com/api/v1/login"),
    ],
)
def test_resolve_picks_host_by_environment(environment, category, expected):
    assert UrlRouter(environment).resolve(category, "login") == expected


def test_resolve_strips_leading_slash():
    router = UrlRouter(Environment.STAGING)
    assert router.resolve(EndpointCategory.MAIN, "/pdf/forms/getpdfs") == (
        "https://tax1099api.1099cloud.com/api/v1/pdf/forms/getpdfs"
    )


def test_resolve_is_deterministic():
    router = UrlRouter(Environment.PRODUCTION)
    first = router.resolve(EndpointCategory.PAYMENT, "payment/forms/import/submit/1098")
    assert all(
        router.resolve(EndpointCategory.PAYMENT, "payment/forms/import/submit/1098") == first
        for _ in range(5)
    )


def test_unknown_category_is_rejected():
    with pytest.raises(ValueError, match="Unknown endpoint category"):
        UrlRouter(Environment.STAGING).resolve("pdf", "login")


def test_unknown_environment_is_rejected():
    with pytest.raises(ValueError, match="Unknown environment"):
        UrlRouter("qa")
