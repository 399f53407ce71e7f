"""
Order Routes for Cupcake Shop
=============================

Customer-facing endpoints that drive the order flow. Every endpoint returns
the StepView of the step that is active after the action, so a client only
ever renders the latest response.

Endpoints:
----------
- GET  /order:             Current step view
- POST /order/start:       Choose quantity (Start -> Flavor)
- POST /order/flavor:      Choose flavor (stays on Flavor)
- POST /order/pickup-date: Choose pickup date (stays on Pickup)
- POST /order/next:        Continue (Flavor -> Pickup, Pickup -> Summary)
- POST /order/back:        Previous step; no-op at Start
- POST /order/cancel:      Reset the order and return to Start
- POST /order/restore:     Resume at a step by identifier
- POST /order/send:        Share the summary and start over
- GET  /catalog:           Flavors, quantities and prices

Error Handling:
---------------
- 400: Quantity not offered
- 409: Action not available at the current step
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from ..catalog import (
    FLAVORS,
    PICKUP_OPTION_COUNT,
    PRICE_FOR_SAME_DAY_PICKUP,
    PRICE_PER_CUPCAKE,
    QUANTITY_OPTIONS,
)
from ..order_session import OrderSession
from ..order_state import InvalidQuantityError
from ..schemas import (
    CatalogResponse,
    FlavorRequest,
    PickupDateRequest,
    RestoreStepRequest,
    SendOrderResponse,
    StartOrderRequest,
    StepView,
)
from ..step_flow import InvalidTransitionError


logger = logging.getLogger(__name__)

order_router = APIRouter(prefix="/order", tags=["Order"])
catalog_router = APIRouter(prefix="/catalog", tags=["Catalog"])


def get_order_session(request: Request) -> OrderSession:
    """The process-wide order session created by create_app()."""
    return request.app.state.order_session


def _conflict(exc: InvalidTransitionError) -> HTTPException:
    logger.info("Rejected action at %s step: %s", exc.step.value, exc)
    return HTTPException(status_code=409, detail=str(exc))


@order_router.get("", response_model=StepView)
def get_current_step(session: OrderSession = Depends(get_order_session)) -> StepView:
    return session.view()


@order_router.post("/start", response_model=StepView)
def start_order(
    req: StartOrderRequest,
    session: OrderSession = Depends(get_order_session),
) -> StepView:
    try:
        return session.start_order(req.quantity)
    except InvalidQuantityError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except InvalidTransitionError as exc:
        raise _conflict(exc)


@order_router.post("/flavor", response_model=StepView)
def select_flavor(
    req: FlavorRequest,
    session: OrderSession = Depends(get_order_session),
) -> StepView:
    try:
        return session.select_flavor(req.flavor)
    except InvalidTransitionError as exc:
        raise _conflict(exc)


@order_router.post("/pickup-date", response_model=StepView)
def select_pickup_date(
    req: PickupDateRequest,
    session: OrderSession = Depends(get_order_session),
) -> StepView:
    try:
        return session.select_pickup_date(req.pickup_date)
    except InvalidTransitionError as exc:
        raise _conflict(exc)


@order_router.post("/next", response_model=StepView)
def next_step(session: OrderSession = Depends(get_order_session)) -> StepView:
    try:
        return session.next_step()
    except InvalidTransitionError as exc:
        raise _conflict(exc)


@order_router.post("/back", response_model=StepView)
def navigate_back(session: OrderSession = Depends(get_order_session)) -> StepView:
    return session.navigate_back()


@order_router.post("/cancel", response_model=StepView)
def cancel_order(session: OrderSession = Depends(get_order_session)) -> StepView:
    return session.cancel_order()


@order_router.post("/restore", response_model=StepView)
def restore_step(
    req: RestoreStepRequest,
    session: OrderSession = Depends(get_order_session),
) -> StepView:
    return session.restore_step(req.step)


@order_router.post("/send", response_model=SendOrderResponse)
def send_order(session: OrderSession = Depends(get_order_session)) -> SendOrderResponse:
    try:
        share_result, view = session.send_order()
    except InvalidTransitionError as exc:
        raise _conflict(exc)
    return SendOrderResponse(share=share_result, view=view)


@catalog_router.get("", response_model=CatalogResponse)
def get_catalog() -> CatalogResponse:
    return CatalogResponse(
        flavors=FLAVORS,
        quantity_options=QUANTITY_OPTIONS,
        price_per_cupcake=PRICE_PER_CUPCAKE,
        same_day_pickup_surcharge=PRICE_FOR_SAME_DAY_PICKUP,
        pickup_option_count=PICKUP_OPTION_COUNT,
    )
