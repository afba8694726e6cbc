"""API test fixtures — app with sample routes + async HTTP client.

Invariants:
    - Every test gets a fresh app from create_app() (no shared routes)
    - Sample routes raise each failure class the handlers must render

Design Decisions:
    - raise_app_exceptions=False: the catch-all handler answers, but Starlette
      re-raises after responding; the client must not surface that re-raise
"""

from typing import Any

import pytest
from fastapi import APIRouter, Body
from httpx import ASGITransport, AsyncClient

from dappbot.api.responses import to_json_response
from dappbot.api.validation import require_shape
from dappbot.core.errors import ErrorContext, ForbiddenError
from dappbot.core.responses import ResponseOptions, success_response
from dappbot.main import create_app
from dappbot.schemas.dapp import ReadResult
from dappbot.schemas.guards import is_stripe_plans


def _make_sample_router() -> APIRouter:
    router = APIRouter(prefix="/sample")

    @router.put("/plans")
    async def update_plans(body: Any = Body(...)):
        require_shape(body, is_stripe_plans, "StripePlans")
        return to_json_response(success_response({"plans": body}))

    @router.post("/dapps/{dapp_name}")
    async def create_dapp(dapp_name: str):
        return to_json_response(success_response(
            {"message": f"Dapp {dapp_name} created"}, ResponseOptions(is_create=True),
        ))

    @router.get("/dapps/{dapp_name}")
    async def read_dapp(dapp_name: str):
        return to_json_response(success_response(
            ReadResult(exists=False), ResponseOptions(is_read=True),
        ))

    @router.delete("/dapps/{dapp_name}")
    async def delete_dapp(dapp_name: str):
        raise ForbiddenError("Not your dapp", ErrorContext(dapp_name=dapp_name))

    @router.get("/count/{count}")
    async def typed_count(count: int):
        return to_json_response(success_response({"count": count}))

    @router.get("/boom")
    async def boom():
        raise RuntimeError("connection string leaked: postgres://secret")

    return router


@pytest.fixture
def app():
    app = create_app()
    app.include_router(_make_sample_router())
    return app


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
