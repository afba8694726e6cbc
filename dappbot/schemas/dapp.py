"""Dapp Schemas — the tiered resource item as a sum type over tiers.

Invariants:
    - CoreItem: DappName, Abi, Web3URL, GuardianURL, ContractAddr — all strings
    - StandardItem: Tier in {STANDARD, PROFESSIONAL}, no other keys allowed
    - EnterpriseItem: Tier == ENTERPRISE, TargetRepoName + TargetRepoOwner required
    - Repo fields present <=> Tier is ENTERPRISE (hard XOR, never "extra data")
    - Api variants add OwnerEmail, CreationTime, DnsName, State
    - ReadResult/ViewResult: exists <=> item is not None

Design Decisions:
    - One closed model per tier family over a single model with optional repo
      fields: extra="forbid" rejects stray keys at the boundary (ADR: exact key set)
    - snake_case attributes with wire-name aliases; dump with by_alias=True
    - CoreItem ignores extra keys: it is a projection every richer shape satisfies
"""

from pydantic import (
    BaseModel, ConfigDict, Field, StrictBool, StrictStr,
    field_validator, model_validator,
)

from dappbot.core.domain_types import DappState, Tier


DEFAULT_GUARDIAN_URL = "https://guardian.dapp.bot"


# --- Core ---------------------------------------------------------------------

class CoreItem(BaseModel):
    """Name plus the four strings a frontend needs to talk to the contract."""
    dapp_name: StrictStr = Field(alias="DappName")
    abi: StrictStr = Field(alias="Abi")
    web3_url: StrictStr = Field(alias="Web3URL")
    guardian_url: StrictStr = Field(alias="GuardianURL")
    contract_addr: StrictStr = Field(alias="ContractAddr")


class PublicView(CoreItem):
    """Publicly visible part of a dapp, as rendered on DappHub."""
    model_config = ConfigDict(extra="forbid")


# --- Full (tier-discriminated) --------------------------------------------------

class StandardItem(CoreItem):
    """Full item on a hosted tier. Carries no target repository."""
    model_config = ConfigDict(extra="forbid")

    tier: Tier = Field(alias="Tier")

    @field_validator("tier")
    @classmethod
    def reject_enterprise(cls, v: Tier) -> Tier:
        if v is Tier.ENTERPRISE:
            raise ValueError("ENTERPRISE requires TargetRepoName and TargetRepoOwner")
        return v

    @property
    def is_enterprise(self) -> bool:
        return False


class EnterpriseItem(CoreItem):
    """Full item on the ENTERPRISE tier, built into the owner's repository."""
    model_config = ConfigDict(extra="forbid")

    tier: Tier = Field(alias="Tier")
    target_repo_name: StrictStr = Field(alias="TargetRepoName")
    target_repo_owner: StrictStr = Field(alias="TargetRepoOwner")

    @field_validator("tier")
    @classmethod
    def require_enterprise(cls, v: Tier) -> Tier:
        if v is not Tier.ENTERPRISE:
            raise ValueError(f"{v.value} items cannot carry target repo fields")
        return v

    @property
    def is_enterprise(self) -> bool:
        return True


FullItem = StandardItem | EnterpriseItem


# --- Api representation ---------------------------------------------------------

class _ManagedFields(BaseModel):
    """Metadata the service attaches once a dapp exists."""
    model_config = ConfigDict(extra="forbid")

    owner_email: StrictStr = Field(alias="OwnerEmail")
    creation_time: StrictStr = Field(alias="CreationTime")
    dns_name: StrictStr = Field(alias="DnsName")
    state: DappState = Field(alias="State")


class StandardApiItem(StandardItem, _ManagedFields):
    pass


class EnterpriseApiItem(EnterpriseItem, _ManagedFields):
    pass


ApiItem = StandardApiItem | EnterpriseApiItem


# --- Operation payloads ---------------------------------------------------------

class UpdateArgs(BaseModel):
    """Partial update. DappName, Tier and repo fields are immutable."""
    model_config = ConfigDict(extra="forbid")

    abi: StrictStr | None = Field(None, alias="Abi")
    web3_url: StrictStr | None = Field(None, alias="Web3URL")
    guardian_url: StrictStr | None = Field(None, alias="GuardianURL")
    contract_addr: StrictStr | None = Field(None, alias="ContractAddr")

    def changes(self) -> dict[str, str]:
        """Only the fields the caller actually sent, keyed by wire name."""
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)


class ReadResult(BaseModel):
    """Private read. `exists: false` rides on a 404 success envelope."""
    model_config = ConfigDict(extra="forbid")

    exists: StrictBool
    item: ApiItem | None = None

    @model_validator(mode="after")
    def check_item_matches_exists(self):
        _check_exists(self.exists, self.item)
        return self


class ViewResult(BaseModel):
    """Public read of a dapp's Core view."""
    model_config = ConfigDict(extra="forbid")

    exists: StrictBool
    item: PublicView | None = None

    @model_validator(mode="after")
    def check_item_matches_exists(self):
        _check_exists(self.exists, self.item)
        return self


class ListResult(BaseModel):
    """All dapps owned by the caller."""
    model_config = ConfigDict(extra="forbid")

    count: int = Field(ge=0, strict=True)
    items: list[ApiItem] = []

    @model_validator(mode="after")
    def check_count(self):
        if self.count != len(self.items):
            raise ValueError(f"count {self.count} does not match {len(self.items)} items")
        return self


class MessageResult(BaseModel):
    """Plain acknowledgement of the action taken."""
    model_config = ConfigDict(extra="forbid")

    message: StrictStr


def sample_dapp_args() -> StandardItem:
    """Empty STANDARD item: the correct shape as a value, no hardcoded keys."""
    return StandardItem(
        DappName="",
        Abi="",
        Web3URL="",
        GuardianURL=DEFAULT_GUARDIAN_URL,
        ContractAddr="",
        Tier=Tier.STANDARD,
    )


def _check_exists(exists: bool, item: BaseModel | None) -> None:
    if exists and item is None:
        raise ValueError("exists is true but item is missing")
    if not exists and item is not None:
        raise ValueError("exists is false but an item was returned")
