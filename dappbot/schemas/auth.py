"""Auth Schemas — request bodies for login and password reset.

Invariants:
    - Every body is a closed shape of strings (camelCase on the wire)
    - LoginBody is exactly one of LoginArgs, RefreshArgs, NewPassChallengeArgs
    - PasswordResetBody is exactly one of BeginPassResetArgs, ConfirmPassResetArgs

Design Decisions:
    - alias_generator=to_camel: snake_case in Python, camelCase on the wire
"""

from pydantic import BaseModel, ConfigDict, StrictStr
from pydantic.alias_generators import to_camel


class _AuthArgs(BaseModel):
    model_config = ConfigDict(extra="forbid", alias_generator=to_camel)


class LoginArgs(_AuthArgs):
    username: StrictStr
    password: StrictStr


class RefreshArgs(_AuthArgs):
    """Fresh credentials from a refresh token, valid for about a month."""
    refresh_token: StrictStr


class NewPassChallengeArgs(_AuthArgs):
    """Answer to NEW_PASSWORD_REQUIRED. `session` comes from the challenge,
    it is not the Authorization token."""
    username: StrictStr
    new_password: StrictStr
    session: StrictStr


class BeginPassResetArgs(_AuthArgs):
    username: StrictStr


class ConfirmPassResetArgs(_AuthArgs):
    """Completes a reset with the code emailed by BeginPassReset."""
    username: StrictStr
    new_password: StrictStr
    password_reset_code: StrictStr


LoginBody = LoginArgs | RefreshArgs | NewPassChallengeArgs
PasswordResetBody = BeginPassResetArgs | ConfirmPassResetArgs
