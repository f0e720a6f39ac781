from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from iceorders.api.routes_orders import router as orders_router
from iceorders.core.config import get_settings
from iceorders.core.logging import configure_logging
from iceorders.persistence.pg import init_db
from iceorders.persistence.store import OrderTransitionError

configure_logging()
logger = logging.getLogger(__name__)
settings = get_settings()

app = FastAPI(title=settings.app_name)


@app.on_event("startup")
def on_startup() -> None:
    init_db()
    logger.info(
        "order service ready: similarity_threshold=%s similarity_min_length=%s",
        settings.similarity_threshold,
        settings.similarity_min_length,
    )


@app.exception_handler(OrderTransitionError)
async def order_transition_handler(_: Request, exc: OrderTransitionError):
    return JSONResponse(
        status_code=409,
        content={
            "detail": str(exc),
            "error": "order_transition",
        },
    )


@app.get("/healthz")
def healthz() -> dict:
    return {"status": "ok"}


app.include_router(orders_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
