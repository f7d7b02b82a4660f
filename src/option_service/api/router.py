"""
Option API router aggregator.

One sub-router per enabled option entity, each mounted at ``/<slug>``:
    - /tender_status_option/create/one
    - /plan_status_option/read/all
    - ...

The aggregate router is mounted at ``settings.api_prefix`` (``/api``).
Health routes are not part of it and stay at the root level.
"""

from typing import Sequence

from fastapi import APIRouter

from option_service.api.routes.options import build_option_router
from option_service.domain.entities import OptionEntity


def build_api_router(entities: Sequence[OptionEntity]) -> APIRouter:
    router = APIRouter()
    for entity in entities:
        router.include_router(build_option_router(entity))
    return router


__all__ = ["build_api_router"]
