"""Payment Schemas — plan allocations and Stripe-facing request bodies.

Invariants:
    - StripePlans has exactly standard, professional, enterprise — all required,
      zero included, never defaulted
    - Plan counts are JSON numbers: int or float, never bool
    - Card tokens are produced client-side by Stripe; this module only shapes them
"""

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr

from dappbot.core.domain_types import Tier


PlanCount = StrictInt | StrictFloat


class StripePlans(BaseModel):
    """How many dapps an account may hold on each tier."""
    model_config = ConfigDict(extra="forbid")

    standard: PlanCount
    professional: PlanCount
    enterprise: PlanCount

    def for_tier(self, tier: Tier) -> int | float:
        return getattr(self, tier.value.lower())


class SignUpArgs(BaseModel):
    """New account. Without a token the account starts on the trial plan."""
    model_config = ConfigDict(extra="forbid")

    email: StrictStr
    name: StrictStr
    plans: StripePlans
    coupon: StrictStr | None = None
    token: StrictStr | None = None


class UpdateCardArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")

    token: StrictStr


class UpdatePlanCountArgs(BaseModel):
    """New per-tier capacity; the next invoice is prorated."""
    model_config = ConfigDict(extra="forbid")

    plans: StripePlans


def trial_stripe_plan() -> StripePlans:
    """One standard dapp, the allocation used on trials."""
    return StripePlans(standard=1, professional=0, enterprise=0)


def new_sign_up_args() -> SignUpArgs:
    return SignUpArgs(email="", name="", plans=trial_stripe_plan())
