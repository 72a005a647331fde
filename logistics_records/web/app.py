"""FastAPI-based HTTP interface for the logistics record tables.

Responses carry the same JSON text the console prints. Records are created
and updated from form fields named after the serialized attributes
(``phoneNumber``, ``equipmentCapacity``, ...).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from fastapi import FastAPI, Form, Request
from fastapi.responses import Response

from ..config import Settings
from ..domain import Equipment, FieldSpec, parse_field
from ..equipment import Notice
from ..logger import configure_logging, get_logger
from ..repository import (
    InMemoryRepository,
    InvalidFieldError,
    NotFound,
    ValidationError,
)
from ..serialization import render_failure, to_json
from ..services import LogisticsService, seed_demo_data

logger = get_logger(__name__)

JSON_MEDIA_TYPE = "application/json"

_EQUIPMENT_ID = Equipment.spec_for("id")
_EQUIPMENT_NAME = Equipment.spec_for("name")
_DRONE_ID = FieldSpec("drone_id", "drone_id", int, False, False)
_TRIP_DATE = FieldSpec("date", "date", str, False, False)
_RANGE_BOUNDS = (
    FieldSpec("low", "low", int, False, False),
    FieldSpec("high", "high", int, False, False),
)


def _respond(result: Any, *, status_code: int = 200) -> Response:
    if isinstance(result, NotFound):
        status_code = 404
    elif isinstance(result, ValidationError):
        status_code = 422
    return Response(content=to_json(result), media_type=JSON_MEDIA_TYPE, status_code=status_code)


def _failure(failure: Any, status_code: int) -> Response:
    return Response(
        content=render_failure(failure), media_type=JSON_MEDIA_TYPE, status_code=status_code
    )


def _form_attributes(form: Any, specs: Sequence[FieldSpec]) -> Dict[str, Any]:
    return {spec.attr: parse_field(spec, form.get(spec.wire)) for spec in specs}


def _drone_trip_args(
    equipment_id: Optional[str], drone_id: Optional[str], date: Optional[str]
) -> Tuple[int, int, str]:
    return (
        parse_field(_EQUIPMENT_ID, equipment_id),
        parse_field(_DRONE_ID, drone_id),
        parse_field(_TRIP_DATE, date),
    )


def _notice(notice: Notice) -> Dict[str, Any]:
    return {"ok": notice.ok, "message": notice.message}


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[LogisticsService] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    service = service or LogisticsService()
    if settings.seed_demo_data:
        seed_demo_data(service)

    app = FastAPI(title=settings.app_title)
    app.state.logistics_service = service

    def lookup(request: Request, table: str) -> Optional[InMemoryRepository]:
        service: LogisticsService = request.app.state.logistics_service
        return service.tables().get(table)

    def split_key(repo: InMemoryRepository, key: str) -> Optional[List[str]]:
        parts = key.split("/")
        if len(parts) != len(repo.key_attrs):
            return None
        return parts

    @app.get("/")
    async def overview(request: Request) -> Dict[str, int]:
        service: LogisticsService = request.app.state.logistics_service
        return service.counts()

    # ------------------------------------------------------------------
    # Equipment desk
    # ------------------------------------------------------------------
    @app.get("/equipment")
    async def list_equipment(request: Request):
        service: LogisticsService = request.app.state.logistics_service
        return _respond(service.equipment.list())

    @app.post("/equipment")
    async def add_equipment(
        request: Request,
        id: Optional[str] = Form(None),
        name: Optional[str] = Form(None),
    ):
        service: LogisticsService = request.app.state.logistics_service
        try:
            equipment_id = parse_field(_EQUIPMENT_ID, id)
            name = parse_field(_EQUIPMENT_NAME, name)
        except InvalidFieldError as exc:
            return _respond(ValidationError.from_error(exc))
        return _respond(service.equipment.add(equipment_id, name), status_code=201)

    @app.get("/equipment/{equipment_id}/rent")
    async def rent_equipment(equipment_id: str, request: Request):
        service: LogisticsService = request.app.state.logistics_service
        try:
            parsed_id = parse_field(_EQUIPMENT_ID, equipment_id)
        except InvalidFieldError as exc:
            return _respond(ValidationError.from_error(exc))
        result = service.equipment.rent(parsed_id)
        if isinstance(result, NotFound):
            return _respond(result)
        return {"id": parsed_id, "name": result}

    @app.post("/equipment/{equipment_id}/return")
    async def return_equipment(equipment_id: str, request: Request):
        service: LogisticsService = request.app.state.logistics_service
        try:
            parsed_id = parse_field(_EQUIPMENT_ID, equipment_id)
        except InvalidFieldError as exc:
            return _respond(ValidationError.from_error(exc))
        return _notice(service.equipment.return_equipment(parsed_id))

    @app.post("/equipment/{equipment_id}/deliver")
    async def deliver_equipment(
        equipment_id: str,
        request: Request,
        drone_id: Optional[str] = Form(None),
        date: Optional[str] = Form(None),
    ):
        service: LogisticsService = request.app.state.logistics_service
        try:
            args = _drone_trip_args(equipment_id, drone_id, date)
        except InvalidFieldError as exc:
            return _respond(ValidationError.from_error(exc))
        return _notice(service.equipment.deliver(*args))

    @app.post("/equipment/{equipment_id}/pickup")
    async def pickup_equipment(
        equipment_id: str,
        request: Request,
        drone_id: Optional[str] = Form(None),
        date: Optional[str] = Form(None),
    ):
        service: LogisticsService = request.app.state.logistics_service
        try:
            args = _drone_trip_args(equipment_id, drone_id, date)
        except InvalidFieldError as exc:
            return _respond(ValidationError.from_error(exc))
        return _notice(service.equipment.pickup(*args))

    # ------------------------------------------------------------------
    # Record tables
    # ------------------------------------------------------------------
    @app.get("/{table}/query/{field}/range")
    async def query_range(
        table: str,
        field: str,
        request: Request,
        low: Optional[str] = None,
        high: Optional[str] = None,
    ):
        repo = lookup(request, table)
        if repo is None:
            return _failure(NotFound("table", table), 404)
        if field not in repo.range_fields:
            return _failure(ValidationError("field", field), 400)
        try:
            bounds = [parse_field(spec, raw) for spec, raw in zip(_RANGE_BOUNDS, (low, high))]
        except InvalidFieldError as exc:
            return _respond(ValidationError.from_error(exc))
        return _respond(repo.find_in_range(field, *bounds))

    @app.get("/{table}/query/{field}")
    async def query_exact(
        table: str, field: str, request: Request, value: Optional[str] = None
    ):
        repo = lookup(request, table)
        if repo is None:
            return _failure(NotFound("table", table), 404)
        if field not in repo.queryable_fields:
            return _failure(ValidationError("field", field), 400)
        try:
            wanted = parse_field(repo.record_type.spec_for(field), value)
        except InvalidFieldError as exc:
            return _respond(ValidationError.from_error(exc))
        return _respond(repo.find_by(field, wanted))

    @app.get("/{table}")
    async def list_records(table: str, request: Request):
        repo = lookup(request, table)
        if repo is None:
            return _failure(NotFound("table", table), 404)
        return _respond(repo.list())

    @app.post("/{table}")
    async def create_record(table: str, request: Request):
        repo = lookup(request, table)
        if repo is None:
            return _failure(NotFound("table", table), 404)
        specs = repo.creation_specs()
        form = await request.form()
        try:
            attrs = _form_attributes(form, specs)
        except InvalidFieldError as exc:
            return _respond(ValidationError.from_error(exc))
        return _respond(repo.create(**attrs), status_code=201)

    @app.get("/{table}/{key:path}")
    async def get_record(table: str, key: str, request: Request):
        repo = lookup(request, table)
        if repo is None:
            return _failure(NotFound("table", table), 404)
        parts = split_key(repo, key)
        if parts is None:
            return _failure(NotFound(repo.key_field, key), 404)
        return _respond(repo.get(*parts))

    @app.put("/{table}/{key:path}")
    async def update_record(table: str, key: str, request: Request):
        repo = lookup(request, table)
        if repo is None:
            return _failure(NotFound("table", table), 404)
        parts = split_key(repo, key)
        if parts is None:
            return _failure(NotFound(repo.key_field, key), 404)
        form = await request.form()
        try:
            attrs = _form_attributes(form, repo.record_type.value_specs())
        except InvalidFieldError as exc:
            return _respond(ValidationError.from_error(exc))
        return _respond(repo.update(*parts, **attrs))

    @app.delete("/{table}/{key:path}")
    async def delete_record(table: str, key: str, request: Request):
        repo = lookup(request, table)
        if repo is None:
            return _failure(NotFound("table", table), 404)
        parts = split_key(repo, key)
        if parts is None:
            return _failure(NotFound(repo.key_field, key), 404)
        return _respond(repo.delete(*parts))

    logger.info("HTTP interface ready for tables %s", ", ".join(service.tables()))
    return app


__all__ = ["create_app"]
