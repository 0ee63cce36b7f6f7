"""
FastAPI application exposing the Thai QR codec over HTTP.
"""
from __future__ import annotations

from typing import List, Optional

from fastapi import FastAPI, HTTPException

from thaiqr.errors import GenerationError, GenerationValidationError, ParseError
from thaiqr.generation import generate_thai_qr, sample_input, validate_input
from thaiqr.history import HistorySource, HistoryStore
from thaiqr.parsing.payload import decode_payload
from thaiqr.rendering import make_renderer
from thaiqr.server_app.config import ServerSettings, get_settings
from thaiqr.server_app.logging import create_logger, ring_buffer
from thaiqr.server_app.models import (
    DecodeRequest,
    DecodeResponse,
    DecodedModel,
    GenerateResponse,
    GeneratorInputModel,
    HistoryItemModel,
    ValidateResponse,
)


def create_app(settings: Optional[ServerSettings] = None, history: Optional[HistoryStore] = None) -> FastAPI:
    settings = settings or get_settings()
    logger = create_logger("thaiqr", settings.log_ring_size, settings.log_level)
    if history is None:
        history = HistoryStore(path=settings.history_path, max_items=settings.history_max_items)
    renderer = make_renderer(
        box_size=settings.qr_box_size,
        border=settings.qr_border,
        error_correction=settings.qr_error_correction,
    )

    app = FastAPI(title="thaiqr")
    app.state.settings = settings
    app.state.history = history
    app.state.renderer = renderer
    app.state.logger = logger

    @app.post("/decode", response_model=DecodeResponse)
    def decode(req: DecodeRequest) -> DecodeResponse:
        try:
            data = decode_payload(req.payload)
        except ParseError as exc:
            logger.info("decode_failed", extra={"details": {"error": exc.message, "source": req.source.value}})
            raise HTTPException(status_code=422, detail=[exc.message]) from exc
        item = history.add(data, req.source)
        logger.info(
            "payload_decoded",
            extra={"details": {"fields": len(data.parsed_fields), "source": req.source.value, "checksum_valid": data.checksum_valid}},
        )
        return DecodeResponse(history_id=item.id, data=DecodedModel.from_data(data))

    @app.post("/validate", response_model=ValidateResponse)
    def validate(body: GeneratorInputModel) -> ValidateResponse:
        errors = validate_input(body.to_input())
        return ValidateResponse(valid=not errors, errors=errors)

    @app.post("/generate", response_model=GenerateResponse)
    def generate(body: GeneratorInputModel) -> GenerateResponse:
        try:
            result = generate_thai_qr(body.to_input(), renderer=app.state.renderer)
        except GenerationValidationError as exc:
            logger.info("generate_rejected", extra={"details": {"errors": exc.errors}})
            raise HTTPException(status_code=422, detail=exc.errors) from exc
        except GenerationError as exc:
            logger.error("generate_failed", extra={"details": {"error": str(exc)}})
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        item = history.add(decode_payload(result.qr_string), HistorySource.TEXT)
        logger.info("qr_generated", extra={"details": body.model_dump()})
        return GenerateResponse(qr_string=result.qr_string, qr_code_image=result.qr_code_image, history_id=item.id)

    @app.get("/sample", response_model=GeneratorInputModel)
    def sample() -> GeneratorInputModel:
        return GeneratorInputModel.from_input(sample_input())

    @app.get("/history", response_model=List[HistoryItemModel])
    def list_history() -> List[HistoryItemModel]:
        return [HistoryItemModel.from_item(item) for item in history.items()]

    @app.delete("/history/{item_id}")
    def delete_history_item(item_id: str) -> dict:
        if not history.remove(item_id):
            raise HTTPException(status_code=404, detail=f"History item {item_id} not found")
        return {"deleted": item_id}

    @app.delete("/history")
    def clear_history() -> dict:
        history.clear()
        logger.info("history_cleared")
        return {"cleared": True}

    @app.get("/logs")
    def logs(event: Optional[str] = None) -> List[dict]:
        handler = ring_buffer(logger)
        return handler.get_events(event) if handler else []

    return app
