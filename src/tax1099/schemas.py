"""
Pydantic models for Tax1099 API request/response payloads.

These schemas match the Tax1099 wire format. Python attribute names are
snake_case; aliases carry the exact JSON field names. Fields typed
Optional[...] = None are optional-when-empty: they are left out of the
request body unless set.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    PositiveInt,
    ValidationInfo,
    field_validator,
)


class WireModel(BaseModel):
    """Base for all payloads exchanged with the Tax1099 API."""
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> str:
        """Serialize to the JSON body sent over the wire."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


# =============================================================================
# ENUMERATIONS
# =============================================================================

class TinType(str, Enum):
    INDIVIDUAL = "Individual"
    BUSINESS = "Business"


class FormStatus(str, Enum):
    NOT_SUBMITTED = "Not Submitted"
    SUBMITTED = "Submitted"


# =============================================================================
# COMMON
# =============================================================================

class ValidationIssue(WireModel):
    """A per-field validation error reported by the remote service."""
    field: str = ""
    source: str = ""
    message: str = ""


class PayerInfo(WireModel):
    """Filer of the form (the lender, for 1098)."""

    payer_id: int = Field(0, alias="payerId")  # Tax1099's id for the payer
    client_payer_id: Optional[str] = Field(None, alias="clientPayerId")  # your id for the payer
    tin_type: TinType = Field(..., alias="tinType")
    payer_tin: str = Field(..., alias="payerTin")  # TIN, SSN or EIN with no dashes
    first_name: Optional[str] = Field(None, alias="firstName")
    middle_name: Optional[str] = Field(None, alias="middleName")
    last_name_or_business_name: str = Field(..., alias="lastNameOrBusinessName")
    suffix: Optional[str] = None
    address: str
    address2: Optional[str] = None
    city: str
    state: str  # two-letter abbreviation
    zip_code: str = Field(..., alias="zipCode")  # 5 digits, or ZIP+4 with a hyphen
    country: str = "US"
    email: Optional[str] = None
    phone: str = ""
    last_filing: bool = Field(False, alias="lastFiling")  # no more filings expected for this payer
    disregarded_entity: str = Field("", alias="disregardedEntity")
    un_mask_recipient_tin: bool = Field(False, alias="unMaskRecipientTin")
    combined_fed_state_filing: Optional[bool] = Field(None, alias="combinedFedStateFiling")


class RecipientInfo(WireModel):
    """Party the form concerns (the borrower, for 1098)."""

    payer_id: int = Field(0, alias="payerId")
    recipient_id: int = Field(0, alias="recipientId")
    client_recipient_id: Optional[str] = Field(None, alias="clientRecipientId")
    tin_type: TinType = Field(..., alias="tinType")
    recipient_tin: str = Field(..., alias="recipientTin")
    first_name: Optional[str] = Field(None, alias="firstName")
    middle_name: Optional[str] = Field(None, alias="middleName")
    last_name_or_business_name: str = Field(..., alias="lastNameOrBusinessName")
    suffix: Optional[str] = None
    address: str
    address2: Optional[str] = None
    city: str
    state: str
    zip_code: str = Field(..., alias="zipCode")
    country: str = "US"
    email: str = ""
    phone: str = ""
    attention_to: Optional[str] = Field(None, alias="attentionTo")  # contact name, for businesses
    is_active: bool = Field(True, alias="isActive")


# =============================================================================
# 1098 VALIDATE / IMPORT
# =============================================================================

class Form1098(WireModel):
    """A single Form 1098 (Mortgage Interest Statement)."""

    recipient_info: RecipientInfo = Field(..., alias="recipientInfo")
    tax_year: str = Field(..., alias="taxYear")
    # Required when one borrower has more than one account with the payer
    acct_no: str = Field("", alias="acctNo")
    mortgage_interest: float = Field(0.0, alias="mortgageInterest")  # Box 1
    principal_residence: float = Field(0.0, alias="principalResidence")  # Box 6, points paid
    overpaid_interest: float = Field(0.0, alias="overpaidInterest")  # Box 4
    mortgage_premiums: float = Field(0.0, alias="mortgagePremiums")  # unused by the API
    mortgage_principal: float = Field(0.0, alias="mortgagePrincipal")  # Box 2
    mortgage_date: str = Field("", alias="mortgageDate")  # Box 3, origination date
    is_address_same: bool = Field(False, alias="isAddressSame")
    property_address: str = Field("", alias="propertyAddress")
    property_description: str = Field("", alias="propertyDescription")
    usps_mail: bool = Field(False, alias="uspsMail")
    tin_check: bool = Field(False, alias="tinCheck")
    e_delivery: bool = Field(False, alias="eDelivery")
    corrected_return: bool = Field(False, alias="correctedReturn")


class Item1098(WireModel):
    """One payer and the forms filed for it."""
    payer_info: PayerInfo = Field(..., alias="payerInfo")
    forms: List[Form1098] = Field(default_factory=list)


class Submit1098Request(WireModel):
    tax_year: str = Field(..., alias="taxYear")
    items: List[Item1098] = Field(default_factory=list)


class SubmissionResult(WireModel):
    id: int = 0
    is_inserted: bool = Field(False, alias="isInserted")


class Submit1098Response(WireModel):
    result: List[SubmissionResult] = Field(default_factory=list)
    total_count: int = Field(0, alias="totalCount")
    validation_errors: List[ValidationIssue] = Field(default_factory=list, alias="validationErrors")
    message: Optional[str] = None
    status_code: int = Field(0, alias="statusCode")
    original_status_code: int = Field(0, alias="originalStatusCode")
    is_error: bool = Field(False, alias="isError")

    @field_validator(
        "result", "total_count", "validation_errors", "status_code", "original_status_code", "is_error",
        mode="before",
    )
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        # The service sends null for empty lists and unset counters
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


# =============================================================================
# 1098 SUBMIT (PAYMENT)
# =============================================================================

class Submit1098sRequest(WireModel):
    """Scheduled, paid submission of a batch of 1098 forms."""

    tax_year: str = Field(..., alias="taxYear")
    form_name: str = Field(..., alias="formName")
    scheduled_date: AwareDatetime = Field(..., alias="scheduledDate")  # must carry a UTC offset
    is_corrected: bool = Field(False, alias="isCorrected")
    coupon_code: str = Field("", alias="couponCode")
    card_reference_id: str = Field("", alias="cardReferenceId")
    items: List[Item1098] = Field(default_factory=list)


class Submit1098sResponse(WireModel):
    trace_identifier: Optional[str] = Field(None, alias="traceIdentifier")
    message: Optional[str] = None
    status_code: Optional[int] = Field(None, alias="statusCode")
    original_status_code: Optional[int] = Field(None, alias="originalStatusCode")
    is_error: Optional[bool] = Field(None, alias="isError")
    reference_ids: Optional[List[int]] = Field(None, alias="referenceIds")
    payment_response_message: Optional[str] = Field(None, alias="paymentResponseMessage")
    total_count: Optional[int] = Field(None, alias="totalCount")


# =============================================================================
# PDF DOWNLOAD
# =============================================================================

class DownloadFormRequest(WireModel):
    """
    Criteria for downloading a filled form PDF.

    Address the form either by form_id alone, or by payer_tin together
    with tax_year. form_type is always required.
    """

    form_id: Optional[PositiveInt] = Field(None, alias="formId")
    form_type: str = Field("", alias="formType")
    status: Optional[str] = None  # one of FormStatus
    client_payer_id: Optional[str] = Field(None, alias="clientPayerId")
    payer_tin: Optional[str] = Field(None, alias="payerTin")
    tax_year: Optional[str] = Field(None, alias="taxYear")
    disregarded_entity: Optional[str] = Field(None, alias="disregardedEntity")
    card_reference_id: Optional[str] = Field(None, alias="cardReferenceId")
    is_all_copies: Optional[bool] = Field(None, alias="isAllCopies")
    is_payer_copy_only: Optional[bool] = Field(None, alias="isPayerCopyOnly")
    is_recipient_copy_only: Optional[bool] = Field(None, alias="isRecipientCopyOnly")
    is_state_copy_only: Optional[bool] = Field(None, alias="isStateCopyOnly")
    un_mask_pdf: Optional[bool] = Field(None, alias="unMaskPDF")

    # 0 and "" mean "not given"; they are never sent
    @field_validator("form_id", mode="before")
    @classmethod
    def zero_form_id_as_unset(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool) and value == 0:
            return None
        return value

    @field_validator(
        "status", "client_payer_id", "payer_tin", "tax_year", "disregarded_entity", "card_reference_id",
        mode="before",
    )
    @classmethod
    def empty_as_unset(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            value = value.value
        return None if value == "" else value


# =============================================================================
# LOGIN
# =============================================================================

class LoginRequest(WireModel):
    login: str
    password: str = Field(..., repr=False)
    app_key: str = Field(..., alias="appKey", repr=False)


class LoginResponse(WireModel):
    session_id: Optional[str] = Field(None, alias="sessionId", repr=False)
    validation_messages: Optional[List[Any]] = Field(None, alias="validationMessages")
