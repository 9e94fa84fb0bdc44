"""Pydantic models for the financial record processing API.

Wire names are camelCase (``transactionId``, ``riskScore``) to stay
compatible with existing clients; Python attributes are snake_case and
mapped through aliases.
"""

from datetime import datetime
from ipaddress import IPv4Address
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class _RecordModel(BaseModel):
    """Base for transaction record parts: unknown extra fields are kept."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class MerchantDetails(_RecordModel):
    merchant_id: str = Field(alias="merchantId")
    name: str
    category: str
    country_code: str = Field(alias="countryCode")


class TransactionDetails(_RecordModel):
    amount: float = Field(ge=0)
    currency: str = Field(pattern=r"^[A-Z]{3}$")  # ISO 4217 style code
    transaction_date: datetime = Field(alias="transactionDate")
    payment_method: str = Field(alias="paymentMethod")
    merchant_details: MerchantDetails = Field(alias="merchantDetails")


class BillingAddress(_RecordModel):
    street: str
    city: str
    state: str
    postal_code: str = Field(alias="postalCode")
    country: str


class UserDetails(_RecordModel):
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: EmailStr
    phone: str
    billing_address: BillingAddress = Field(alias="billingAddress")


class AdditionalInfo(_RecordModel):
    device_ip: IPv4Address = Field(alias="deviceIp")
    user_agent: str = Field(alias="userAgent")


class TransactionRecord(_RecordModel):
    """A submitted financial transaction with its user and device context."""
    transaction_id: str = Field(alias="transactionId")
    user_id: str = Field(alias="userId")
    transaction_details: TransactionDetails = Field(alias="transactionDetails")
    user_details: UserDetails = Field(alias="userDetails")
    additional_info: AdditionalInfo = Field(alias="additionalInfo")


class ValidationIssue(BaseModel):
    """A single schema violation found in a submitted record."""
    path: str  # dotted instance path, "$" for the document root
    message: str
    validator: str  # the failing schema keyword, e.g. "required"


class ValidationReport(BaseModel):
    """Outcome of validating one record against the transaction schema."""
    valid: bool
    issues: list[ValidationIssue]


class ValidationSuccess(BaseModel):
    message: str


class EncryptedPayload(BaseModel):
    """Ciphertext plus the key that opens it, both hex encoded."""
    model_config = ConfigDict(populate_by_name=True)

    encrypted_data: str = Field(alias="encryptedData")
    key: str


class RiskFactors(BaseModel):
    """The transaction attributes the risk score is computed from."""
    model_config = ConfigDict(extra="allow")

    amount: float
    currency: str


class RiskRequest(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    transaction_details: RiskFactors = Field(alias="transactionDetails")


class RiskAssessment(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    risk_score: int = Field(alias="riskScore")


class StoreResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    file_path: str = Field(alias="filePath")


class RetrieveRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_path: str = Field(alias="filePath")


class RiskConfig(BaseModel):
    """Tunable weights for the additive risk factors."""
    model_config = ConfigDict(frozen=True)

    amount_threshold: float = 1000
    large_amount_weight: int = 5
    home_currency: str = "USD"
    foreign_currency_weight: int = 3


class AppConfig(BaseModel):
    """Process-wide settings, loaded once at startup."""
    model_config = ConfigDict(frozen=True)

    data_dir: Path = Path("/mnt/data")
    store_filename: str = "processedData.json"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    risk: RiskConfig = RiskConfig()
