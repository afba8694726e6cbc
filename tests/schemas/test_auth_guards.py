"""Auth Guards — login and password-reset request bodies.

Tests cover:
    - Each body is a closed camelCase shape of strings
    - LoginBody / PasswordResetBody accept exactly one variant
    - snake_case keys are unknown keys on the wire
"""

import pytest

from dappbot.schemas.auth import ConfirmPassResetArgs, LoginBody, RefreshArgs
from dappbot.schemas.guards import (
    is_begin_pass_reset_args, is_confirm_pass_reset_args, is_login_args,
    is_login_body, is_new_pass_challenge_args, is_password_reset_body,
    is_refresh_args, parse_as,
)


LOGIN = {"username": "owner", "password": "hunter2!A"}
REFRESH = {"refreshToken": "refresh-token"}
NEW_PASS = {"username": "owner", "newPassword": "hunter3!A", "session": "opaque"}
BEGIN_RESET = {"username": "owner"}
CONFIRM_RESET = {"username": "owner", "newPassword": "hunter3!A", "passwordResetCode": "123456"}


def test_each_body_matches_its_guard():
    assert is_login_args(LOGIN)
    assert is_refresh_args(REFRESH)
    assert is_new_pass_challenge_args(NEW_PASS)
    assert is_begin_pass_reset_args(BEGIN_RESET)
    assert is_confirm_pass_reset_args(CONFIRM_RESET)


def test_bodies_do_not_cross_match():
    assert not is_login_args(NEW_PASS)
    assert not is_begin_pass_reset_args(CONFIRM_RESET)
    assert not is_confirm_pass_reset_args(BEGIN_RESET)


def test_snake_case_keys_are_rejected():
    assert not is_refresh_args({"refresh_token": "refresh-token"})


def test_non_string_password_rejected():
    assert not is_login_args({"username": "owner", "password": 1234})


@pytest.mark.parametrize("body", [LOGIN, REFRESH, NEW_PASS])
def test_login_body_accepts_each_variant(body):
    assert is_login_body(body)


def test_login_body_rejects_mixed_variants():
    assert not is_login_body({**LOGIN, **REFRESH})


def test_login_body_narrows_to_variant():
    parsed = parse_as(LoginBody, REFRESH)
    assert isinstance(parsed, RefreshArgs)
    assert parsed.refresh_token == "refresh-token"


def test_password_reset_body_variants():
    assert is_password_reset_body(BEGIN_RESET)
    parsed = parse_as(ConfirmPassResetArgs, CONFIRM_RESET)
    assert parsed.password_reset_code == "123456"
    assert is_password_reset_body(CONFIRM_RESET)
    assert not is_password_reset_body({})
