"""Response Envelope — maps a domain outcome to a status code and {data, err} body.

Invariants:
    - All functions are PURE: no IO, no shared state, never raise
    - Exactly one of data/err is non-null on the wire
    - Status precedence: is_err → is_create → is_read with falsy `exists` → 200
    - An error envelope with no explicit code defaults to 500

Design Decisions:
    - Ok/Err variants over a nullable pair: "both set" and "neither set" are
      unrepresentable (ADR: sum type envelope)
    - Transport framing (headers, JSONResponse) lives in api/responses.py,
      keeping the builder framework-free (ADR: ExMA Functional Core)
"""

import json
from dataclasses import dataclass, replace
from typing import Any, Mapping

from pydantic_core import to_jsonable_python


_MISSING = object()


@dataclass(frozen=True)
class ResponseOptions:
    """Flags fed into response(). Any combination is valid; precedence resolves it."""
    is_err: bool = False
    is_create: bool = False     # 201 Created
    is_read: bool = False       # 404 when the payload says the item does not exist
    error_response_code: int | None = None


@dataclass(frozen=True)
class Ok:
    """Successful envelope variant."""
    data: Any

    def to_wire(self) -> dict:
        return {"data": _to_wire_value(self.data), "err": None}


@dataclass(frozen=True)
class Err:
    """Error envelope variant. `err` carries at least a `message`."""
    err: Any

    def to_wire(self) -> dict:
        return {"data": None, "err": _to_wire_value(self.err)}


Envelope = Ok | Err


@dataclass(frozen=True)
class ApiResponse:
    """Status code plus envelope, built fresh for every response."""
    status_code: int
    envelope: Envelope

    @property
    def is_error(self) -> bool:
        return isinstance(self.envelope, Err)

    def body(self) -> dict:
        return self.envelope.to_wire()

    def to_json(self) -> str:
        return json.dumps(self.body(), ensure_ascii=False)


def response(body: Any, opts: ResponseOptions | None = None) -> ApiResponse:
    """Build the envelope for `body`; prefer the specific wrappers below."""
    opts = opts or ResponseOptions()
    status_code = _derive_status_code(body, opts)
    envelope: Envelope = Err(body) if opts.is_err else Ok(body)
    return ApiResponse(status_code=status_code, envelope=envelope)


def success_response(body: Any, opts: ResponseOptions | None = None) -> ApiResponse:
    """200 (or 201/404 per is_create/is_read) with `body` under `data`."""
    return response(body, replace(opts or ResponseOptions(), is_err=False))


def user_error_response(body: Any, opts: ResponseOptions | None = None) -> ApiResponse:
    """Bad request: `body` under `err`, status 400 unless a code was set."""
    opts = opts or ResponseOptions()
    return response(body, replace(
        opts, is_err=True, error_response_code=opts.error_response_code or 400,
    ))


def unexpected_error_response(body: Any, opts: ResponseOptions | None = None) -> ApiResponse:
    """Internal failure: `body` under `err`, status 500 unless a code was set."""
    opts = opts or ResponseOptions()
    return response(body, replace(
        opts, is_err=True, error_response_code=opts.error_response_code or 500,
    ))


def error_body(message: str, **extra: Any) -> dict:
    """Err payload with the mandatory `message` key first."""
    return {"message": message, **extra}


# ─── Helpers ─────────────────────────────────────────────────────

def _derive_status_code(body: Any, opts: ResponseOptions) -> int:
    if opts.is_err:
        return opts.error_response_code or 500
    if opts.is_create:
        return 201
    if opts.is_read and _reports_missing(body):
        # 200-shaped payload riding on a 404: the read succeeded, found nothing
        return 404
    return 200


def _reports_missing(body: Any) -> bool:
    """True only when `body` has an `exists` field and it is falsy."""
    if isinstance(body, Mapping):
        exists = body.get("exists", _MISSING)
    else:
        exists = getattr(body, "exists", _MISSING)
    return exists is not _MISSING and not exists


def _to_wire_value(value: Any) -> Any:
    # pydantic models dump by alias so wire keys keep their casing
    return to_jsonable_python(value, by_alias=True, fallback=str)
