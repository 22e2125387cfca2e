from __future__ import annotations

import logging

from fastapi import APIRouter, Body, HTTPException, Request
from fastapi.responses import Response

from loadshedding.core.serialization import (
    monthly_to_payload,
    raw_monthly_from_mapping,
    raw_schedule_from_mapping,
    schedule_to_payload,
)
from loadshedding.parsers.errors import InvalidRecord, ParseError

router = APIRouter()

_logger = logging.getLogger("loadshedding.api")


def _reject(request: Request, kind: str, error: ParseError) -> HTTPException:
    _logger.warning("Rejected %s document: %s", kind, error)
    request.app.state.metrics.mark_failure(kind, error)
    return HTTPException(status_code=422, detail=error.to_detail())


def _check_batch_size(request: Request, kind: str, count: int) -> None:
    limit = request.app.state.settings.max_batch_size
    if count > limit:
        request.app.state.metrics.normalize_requests_total.labels(kind=kind, status="too_large").inc()
        raise HTTPException(
            status_code=413,
            detail=f"Document holds {count} records, limit is {limit}",
        )


@router.get("/healthz")
async def healthz(request: Request) -> dict:
    return {
        "status": "ok",
        "maxBatchSize": request.app.state.settings.max_batch_size,
    }


@router.post("/v1/schedule/normalize")
async def normalize_schedule(request: Request, payload: dict = Body(...)) -> dict:
    metrics = request.app.state.metrics
    with metrics.normalize_duration_seconds.time():
        # Non-list collections count as empty here and are rejected below.
        record_count = sum(
            len(value)
            for value in (payload.get("changes"), payload.get("historical_changes"))
            if isinstance(value, list)
        )
        _check_batch_size(request, "schedule", record_count)

        try:
            raw = raw_schedule_from_mapping(payload)
        except InvalidRecord as exc:
            raise _reject(request, "schedule", exc) from exc

        result = request.app.state.normalizer.try_schedule(raw)

    if not result.ok:
        raise _reject(request, "schedule", result.error)

    metrics.mark_success("schedule", record_count)
    return schedule_to_payload(result.value)


@router.post("/v1/monthly/normalize")
async def normalize_monthly(request: Request, payload: dict = Body(...)) -> dict:
    metrics = request.app.state.metrics
    with metrics.normalize_duration_seconds.time():
        events = payload.get("events")
        if not isinstance(events, list):
            raise _reject(
                request,
                "monthly",
                InvalidRecord("events must be a list", field="events", value=events),
            )
        _check_batch_size(request, "monthly", len(events))

        try:
            raws = [raw_monthly_from_mapping(item) for item in events]
        except InvalidRecord as exc:
            raise _reject(request, "monthly", exc) from exc

        result = request.app.state.normalizer.try_monthly_many(raws)

    if not result.ok:
        raise _reject(request, "monthly", result.error)

    metrics.mark_success("monthly", len(result.value))
    items = [monthly_to_payload(item) for item in result.value]
    return {
        "count": len(items),
        "items": items,
    }


@router.get("/metrics")
async def metrics(request: Request) -> Response:
    payload, content_type = request.app.state.metrics.render()
    return Response(content=payload, media_type=content_type)
