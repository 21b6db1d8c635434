"""Converter endpoints.

Every request carries the client's canonical state; the response is the new
state together with all derived widget values. Input that cannot be parsed
leaves the state unchanged and is reported with ``accepted=false``.
"""

from __future__ import annotations

from fastapi import APIRouter

from florence_time.api.v1.dependencies import TimezoneTableDep, build_controller
from florence_time.schemas.clock import (
    ClockViewOut,
    HexSliderEdit,
    HexTextEdit,
    MinuteSliderEdit,
    TimeEdit,
    TimezoneSelect,
    ViewRequest,
)
from florence_time.services.controller import ClockController

router = APIRouter(prefix="/convert", tags=["convert"])


def _view(controller: ClockController) -> ClockViewOut:
    view = controller.render()
    return ClockViewOut(
        fraction=view.fraction,
        timezone_index=view.timezone_index,
        hex_text=view.hex_text,
        hex_slider=view.hex_slider,
        minute_slider=view.minute_slider,
        time=view.time,
        hex_position=view.hex_position,
        accepted=controller.last_edit_accepted,
    )


@router.post("/view", response_model=ClockViewOut)
async def render_view(body: ViewRequest, table: TimezoneTableDep) -> ClockViewOut:
    """Derive the widget values for a state without editing it."""
    return _view(build_controller(body.state, table))


@router.post("/hex-text", response_model=ClockViewOut)
async def edit_hex_text(body: HexTextEdit, table: TimezoneTableDep) -> ClockViewOut:
    """Apply an edit of the hexadecimal text field."""
    controller = build_controller(body.state, table)
    controller.on_hex_text_edit(body.raw)
    return _view(controller)


@router.post("/hex-slider", response_model=ClockViewOut)
async def drag_hex_slider(body: HexSliderEdit, table: TimezoneTableDep) -> ClockViewOut:
    """Apply a move of the 256-step hexadecimal slider."""
    controller = build_controller(body.state, table)
    controller.on_hex_slider_drag(body.raw)
    return _view(controller)


@router.post("/time", response_model=ClockViewOut)
async def edit_time(body: TimeEdit, table: TimezoneTableDep) -> ClockViewOut:
    """Apply an edit of the ``HH:MM`` field."""
    controller = build_controller(body.state, table)
    controller.on_time_widget_edit(body.raw)
    return _view(controller)


@router.post("/minute-slider", response_model=ClockViewOut)
async def drag_minute_slider(body: MinuteSliderEdit, table: TimezoneTableDep) -> ClockViewOut:
    """Apply a move of the 288-step (5 minute) slider."""
    controller = build_controller(body.state, table)
    controller.on_minute_slider_drag(body.raw)
    return _view(controller)


@router.post("/timezone", response_model=ClockViewOut)
async def select_timezone(body: TimezoneSelect, table: TimezoneTableDep) -> ClockViewOut:
    """Select another timezone; the canonical fraction stays put."""
    controller = build_controller(body.state, table)
    controller.on_timezone_select(body.index)
    return _view(controller)
