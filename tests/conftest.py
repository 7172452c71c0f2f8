"""Shared fixtures for Tax1099 client tests."""

import pytest

from tax1099 import (
    Form1098,
    Item1098,
    PayerInfo,
    RecipientInfo,
    Submit1098Request,
    Tax1099Client,
    TinType,
)

from fakes import FakeClock, FakeTax1099, make_response

LOGIN_PATH = "login"


@pytest.fixture
def backend():
    fake = FakeTax1099()
    fake.on(LOGIN_PATH, make_response(200, {"sessionId": "test-token"}))
    return fake


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def client(backend, clock):
    return Tax1099Client(
        "staging",
        "user@example.com",
        "s3cret",
        "app-key",
        http_session=backend.session,
        clock=clock,
    )


@pytest.fixture
def payer_info():
    return PayerInfo(
        payer_id=17,
        client_payer_id="LENDER-1",
        tin_type=TinType.BUSINESS,
        payer_tin="581234567",
        last_name_or_business_name="ABC Mortgage Company",
        address="100 Finance Blvd",
        city="Atlanta",
        state="GA",
        zip_code="30301",
        phone="4045551234",
    )


@pytest.fixture
def form_1098():
    return Form1098(
        recipient_info=RecipientInfo(
            tin_type=TinType.INDIVIDUAL,
            recipient_tin="123456789",
            first_name="John",
            last_name_or_business_name="Homeowner",
            address="456 Oak Lane",
            city="Marietta",
            state="GA",
            zip_code="30060",
            email="john@example.com",
        ),
        tax_year="2024",
        acct_no="LOAN-2024-001",
        mortgage_interest=12500.0,
        mortgage_principal=285000.0,
        mortgage_date="2020-03-15",
        is_address_same=True,
    )


@pytest.fixture
def submit_1098_request(payer_info, form_1098):
    return Submit1098Request(
        tax_year="2024",
        items=[Item1098(payer_info=payer_info, forms=[form_1098])],
    )
