from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from fotobox_advisor.api.v1.schemas import (
    ChooseRequestSchema,
    EnterRequestSchema,
    QuoteResponseSchema,
    SessionResponseSchema,
    StepSchema,
    SummaryResponseSchema,
)
from fotobox_advisor.application.exceptions import FlowError, InvalidSelection, UnknownStep
from fotobox_advisor.application.ports.session_store import SessionStorePort
from fotobox_advisor.application.use_cases.flow_controller import FlowController
from fotobox_advisor.application.use_cases.pricing import PricingEngine
from fotobox_advisor.application.utils.quote_text import render_quote_text, render_selection_summary
from fotobox_advisor.wiring.dependencies import get_pricing_engine, get_session_store

router = APIRouter()
logger = logging.getLogger(__name__)


def _controller(session_id: str, store: SessionStorePort) -> FlowController:
    controller = store.get(session_id)
    if controller is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return controller


def _session_response(session_id: str, step) -> SessionResponseSchema:
    return SessionResponseSchema(session_id=session_id, step=StepSchema.from_descriptor(step))


@router.post("/sessions", response_model=SessionResponseSchema, status_code=201)
def create_session(store: SessionStorePort = Depends(get_session_store)):
    session_id, controller = store.create()
    logger.info("Session started", extra={"session_id": session_id})
    return _session_response(session_id, controller.current_step())


@router.get("/sessions/{session_id}", response_model=SessionResponseSchema)
def get_session(session_id: str, store: SessionStorePort = Depends(get_session_store)):
    return _session_response(session_id, _controller(session_id, store).current_step())


@router.delete("/sessions/{session_id}", status_code=204)
def delete_session(session_id: str, store: SessionStorePort = Depends(get_session_store)) -> None:
    _controller(session_id, store)
    store.discard(session_id)
    logger.info("Session discarded", extra={"session_id": session_id})


@router.post("/sessions/{session_id}/choose", response_model=SessionResponseSchema)
def choose(session_id: str, req: ChooseRequestSchema, store: SessionStorePort = Depends(get_session_store)):
    controller = _controller(session_id, store)
    try:
        step = controller.choose(req.step_id, req.value)
    except FlowError as e:
        logger.warning("Choice rejected", extra={"session_id": session_id, "step_id": req.step_id, "reason": str(e)})
        raise HTTPException(status_code=409, detail=str(e))
    return _session_response(session_id, step)


@router.post("/sessions/{session_id}/advance", response_model=SessionResponseSchema)
def advance(session_id: str, store: SessionStorePort = Depends(get_session_store)):
    controller = _controller(session_id, store)
    try:
        step = controller.advance()
    except FlowError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _session_response(session_id, step)


@router.post("/sessions/{session_id}/back", response_model=SessionResponseSchema)
def back(session_id: str, store: SessionStorePort = Depends(get_session_store)):
    return _session_response(session_id, _controller(session_id, store).back())


@router.post("/sessions/{session_id}/enter", response_model=SessionResponseSchema)
def enter(session_id: str, req: EnterRequestSchema, store: SessionStorePort = Depends(get_session_store)):
    controller = _controller(session_id, store)
    try:
        step = controller.enter(req.step_id)
    except UnknownStep as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FlowError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _session_response(session_id, step)


@router.post("/sessions/{session_id}/reset", response_model=SessionResponseSchema)
def reset(session_id: str, store: SessionStorePort = Depends(get_session_store)):
    return _session_response(session_id, _controller(session_id, store).reset())


@router.get("/sessions/{session_id}/quote", response_model=QuoteResponseSchema)
def quote(
    session_id: str,
    store: SessionStorePort = Depends(get_session_store),
    engine: PricingEngine = Depends(get_pricing_engine),
):
    controller = _controller(session_id, store)
    try:
        result = engine.price(controller.selection, controller.catalog)
    except InvalidSelection as e:
        logger.exception("Selection cannot be priced", extra={"session_id": session_id})
        raise HTTPException(status_code=422, detail=str(e))
    return QuoteResponseSchema.from_quote(result)


@router.get("/sessions/{session_id}/summary", response_model=SummaryResponseSchema)
def summary(
    session_id: str,
    store: SessionStorePort = Depends(get_session_store),
    engine: PricingEngine = Depends(get_pricing_engine),
):
    controller = _controller(session_id, store)
    try:
        result = engine.price(controller.selection, controller.catalog)
    except InvalidSelection as e:
        raise HTTPException(status_code=422, detail=str(e))
    return SummaryResponseSchema(
        selection=render_selection_summary(controller.selection, controller.catalog),
        prices=render_quote_text(result),
    )
