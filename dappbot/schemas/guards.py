"""Type Guards — total predicates deciding if decoded JSON fits a contract shape.

Invariants:
    - Every guard returns bool and never raises, for any input
    - Only mappings qualify: None, lists, scalars and model instances -> False
    - Same input, same answer: validators are built once at import and never mutated
    - No partial-validity signal; callers needing a reason re-validate themselves

Design Decisions:
    - Guards delegate to the pydantic schemas instead of hand-written key checks:
      the closed models ARE the field-set rules (ADR: one source of truth)
    - TypeAdapter per shape over Model.model_validate: unions (FullItem, ApiItem,
      SignInResult) validate the same way as single models
"""

from typing import Any, Mapping

from pydantic import TypeAdapter, ValidationError

from dappbot.schemas.auth import (
    BeginPassResetArgs, ConfirmPassResetArgs, LoginArgs, LoginBody,
    NewPassChallengeArgs, PasswordResetBody, RefreshArgs,
)
from dappbot.schemas.dapp import ApiItem, CoreItem, FullItem, UpdateArgs
from dappbot.schemas.payment import (
    SignUpArgs, StripePlans, UpdateCardArgs, UpdatePlanCountArgs,
)
from dappbot.schemas.user import (
    AuthData, ChallengeData, SignInResult, UserAttributes, UserData,
)


_ADAPTERS: dict[Any, TypeAdapter] = {
    shape: TypeAdapter(shape)
    for shape in (
        CoreItem, FullItem, ApiItem, UpdateArgs,
        UserAttributes, UserData, AuthData, ChallengeData, SignInResult,
        StripePlans, SignUpArgs, UpdateCardArgs, UpdatePlanCountArgs,
        LoginArgs, RefreshArgs, NewPassChallengeArgs, LoginBody,
        BeginPassResetArgs, ConfirmPassResetArgs, PasswordResetBody,
    )
}


def parse_as(shape: Any, value: Any) -> Any | None:
    """Validated instance of `shape`, or None when `value` does not conform."""
    if not isinstance(value, Mapping):
        return None
    adapter = _ADAPTERS.get(shape) or TypeAdapter(shape)
    try:
        return adapter.validate_python(value)
    except ValidationError:
        return None


def _conforms(shape: Any, value: Any) -> bool:
    return parse_as(shape, value) is not None


# ─── Dapp ────────────────────────────────────────────────────────

def is_core(value: Any) -> bool:
    """All five Core strings present; other keys are not inspected."""
    return _conforms(CoreItem, value)


def is_full(value: Any) -> bool:
    """Core + Tier, with repo fields present iff Tier is ENTERPRISE, no extra keys."""
    return _conforms(FullItem, value)


def is_api(value: Any) -> bool:
    """Full + OwnerEmail, CreationTime, DnsName and a known State."""
    return _conforms(ApiItem, value)


def is_update_args(value: Any) -> bool:
    return _conforms(UpdateArgs, value)


# ─── User / Auth ─────────────────────────────────────────────────

def is_user_attributes(value: Any) -> bool:
    return _conforms(UserAttributes, value)


def is_user_data(value: Any) -> bool:
    return _conforms(UserData, value)


def is_auth_data(value: Any) -> bool:
    return _conforms(AuthData, value)


def is_challenge_data(value: Any) -> bool:
    return _conforms(ChallengeData, value)


def is_sign_in_result(value: Any) -> bool:
    """Exactly one of AuthData or ChallengeData."""
    return _conforms(SignInResult, value)


def is_login_args(value: Any) -> bool:
    return _conforms(LoginArgs, value)


def is_refresh_args(value: Any) -> bool:
    return _conforms(RefreshArgs, value)


def is_new_pass_challenge_args(value: Any) -> bool:
    return _conforms(NewPassChallengeArgs, value)


def is_login_body(value: Any) -> bool:
    return _conforms(LoginBody, value)


def is_begin_pass_reset_args(value: Any) -> bool:
    return _conforms(BeginPassResetArgs, value)


def is_confirm_pass_reset_args(value: Any) -> bool:
    return _conforms(ConfirmPassResetArgs, value)


def is_password_reset_body(value: Any) -> bool:
    return _conforms(PasswordResetBody, value)


# ─── Payment ─────────────────────────────────────────────────────

def is_stripe_plans(value: Any) -> bool:
    return _conforms(StripePlans, value)


def is_sign_up_args(value: Any) -> bool:
    return _conforms(SignUpArgs, value)


def is_update_card_args(value: Any) -> bool:
    return _conforms(UpdateCardArgs, value)


def is_update_plan_count_args(value: Any) -> bool:
    return _conforms(UpdatePlanCountArgs, value)
