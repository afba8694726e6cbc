"""User Schemas — account data, auth bundles and login challenges.

Invariants:
    - UserAttributes requires the payment provider/status and one quota per tier
    - Quota strings are non-negative integers written as ASCII digits only,
      at most QUOTA_MAX_DIGITS long so limit_for always converts
    - Every attribute, custom or not, maps string -> string
    - AuthData.ExpiresAt parses as an ISO 8601 date
    - ChallengeParameters: every key AND every value is a string
    - SignInResult is AuthData XOR ChallengeData (both closed, so never both)

Design Decisions:
    - Strict quota format over lenient integer parsing: "12abc" is rejected rather
      than read as 12 (ADR: no partial parses on the wire)
    - ExpiresAt kept as the wire string, parsed view exposed as `expiry`
"""

from datetime import datetime
from typing import Annotated

from pydantic import (
    BaseModel, ConfigDict, Field, StrictStr, StringConstraints, field_validator,
)

from dappbot.core.domain_types import (
    ChallengeType, PaymentProvider, PaymentStatus, Tier,
)


QUOTA_MAX_DIGITS = 18

QuotaString = Annotated[str, StringConstraints(
    strict=True, max_length=QUOTA_MAX_DIGITS, pattern=r"^[0-9]+$",
)]


class UserAttributes(BaseModel):
    """Attribute map of an account. Unknown attributes pass if string-valued."""
    model_config = ConfigDict(extra="allow")

    __pydantic_extra__: dict[str, StrictStr] = Field(init=False)

    payment_provider: PaymentProvider = Field(alias="custom:payment_provider")
    payment_status: PaymentStatus = Field(alias="custom:payment_status")
    standard_limit: QuotaString = Field(alias="custom:standard_limit")
    professional_limit: QuotaString = Field(alias="custom:professional_limit")
    enterprise_limit: QuotaString = Field(alias="custom:enterprise_limit")

    def limit_for(self, tier: Tier) -> int:
        """Maximum number of dapps this account may hold on `tier`."""
        quota = {
            Tier.STANDARD: self.standard_limit,
            Tier.PROFESSIONAL: self.professional_limit,
            Tier.ENTERPRISE: self.enterprise_limit,
        }[tier]
        return int(quota)

    @property
    def is_active(self) -> bool:
        return self.payment_status is PaymentStatus.ACTIVE


class MFAOption(BaseModel):
    model_config = ConfigDict(extra="forbid")

    delivery_medium: StrictStr | None = Field(None, alias="DeliveryMedium")
    attribute_name: StrictStr | None = Field(None, alias="AttributeName")


class UserData(BaseModel):
    """Identity plus attribute map, as returned after login."""
    model_config = ConfigDict(extra="forbid")

    username: StrictStr = Field(alias="Username")
    email: StrictStr = Field(alias="Email")
    user_attributes: UserAttributes = Field(alias="UserAttributes")
    mfa_options: list[MFAOption] | None = Field(None, alias="MFAOptions")
    preferred_mfa_setting: StrictStr | None = Field(None, alias="PreferredMfaSetting")
    user_mfa_setting_list: list[StrictStr] | None = Field(None, alias="UserMFASettingList")


class AuthData(BaseModel):
    """Fully authenticated login: user plus bearer and refresh tokens."""
    model_config = ConfigDict(extra="forbid")

    user: UserData = Field(alias="User")
    authorization: StrictStr = Field(alias="Authorization")
    refresh_token: StrictStr = Field(alias="RefreshToken")
    expires_at: StrictStr = Field(alias="ExpiresAt")

    @field_validator("expires_at")
    @classmethod
    def check_expires_at_is_date(cls, v: str) -> str:
        datetime.fromisoformat(v)  # ValueError -> ValidationError
        return v

    @property
    def expiry(self) -> datetime:
        return datetime.fromisoformat(self.expires_at)


class ChallengeData(BaseModel):
    """Intermediate login step; answer it by sending Session back."""
    model_config = ConfigDict(extra="forbid")

    challenge_name: ChallengeType = Field(alias="ChallengeName")
    challenge_parameters: dict[StrictStr, StrictStr] = Field(alias="ChallengeParameters")
    session: StrictStr = Field(alias="Session")


SignInResult = AuthData | ChallengeData
