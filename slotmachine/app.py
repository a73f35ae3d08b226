"""FastAPI server rendering slot cards for the request's query parameters."""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from slotmachine.demo import DEMO_CONFIG
from slotmachine.errors import NoCardFound, NoSuchAlias, NoSuchSlot, SlotMachineError
from slotmachine.parameters import QueryParameters
from slotmachine.settings import settings
from slotmachine.slot_machine import SlotMachine

logger = structlog.get_logger()


def create_app(machine: SlotMachine, default_index: int | None = None) -> FastAPI:
    """Build the HTTP app around a slot machine.

    Every request gets its own machine bound to the request's query string;
    the slots themselves are shared.
    """
    if default_index is None:
        default_index = settings.DEFAULT_INDEX

    app = FastAPI(title="Slot Machine")

    async def lookup_failed(request: Request, exc: SlotMachineError) -> JSONResponse:
        logger.warning("slot_lookup_failed", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=404, content={"error": str(exc)})

    for error in (NoSuchSlot, NoCardFound, NoSuchAlias):
        app.add_exception_handler(error, lookup_failed)

    @app.get("/")
    async def root():
        """Root endpoint providing basic API information."""
        return {"message": "Slot Machine API: GET /slots/{name} renders a slot for the query string."}

    @app.get("/slots")
    async def list_slots():
        return {"slots": machine.registry.names(), "realized": len(machine)}

    @app.get("/slots/{name}")
    async def render_slot(name: str, request: Request):
        """Render a slot, picking cards from the request's query parameters."""
        bound = machine.with_parameters(QueryParameters.from_query_params(request.query_params))
        card = bound.render(name, default_index)
        logger.info("slot_served", slot=name, query=str(request.query_params))
        return {"slot": name, "card": card}

    @app.get("/slots/{name}/aliases/{alias}")
    async def card_by_alias(name: str, alias: str):
        return {"slot": name, "alias": alias, "card": machine[name].get_card_by_alias(alias)}

    return app


app = create_app(SlotMachine(DEMO_CONFIG))
