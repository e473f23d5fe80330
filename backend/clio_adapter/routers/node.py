"""Node endpoints: static description and operation execution.

The host posts the collected parameters of every input item; each one is
run through the resource module and the output items come back in order.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from loguru import logger
from pydantic import BaseModel

from clio_adapter import node
from clio_adapter.exceptions import ClioAdapterError
from clio_adapter.models import ExecutionItem
from clio_adapter.services.clio_client import ClioAPIError, ClioClient
from clio_adapter.services.credentials import credential_description
from clio_adapter.services.webhook import trigger_description

router = APIRouter(prefix="/api/clio", tags=["clio-node"])


class ExecuteRequest(BaseModel):
    """Request body for the execute endpoint."""

    resource: str
    operation: str
    items: list[ExecutionItem] = [ExecutionItem()]
    continue_on_fail: bool = False


def get_client() -> ClioClient:
    return ClioClient()


@router.get("/describe")
async def describe():
    return {
        "node": node.describe().model_dump(),
        "trigger": trigger_description().model_dump(),
        "credential": credential_description(),
    }


@router.post("/execute")
async def execute(req: ExecuteRequest):
    """Run ``resource.operation`` over every item with the configured credentials."""
    logger.info("Execute request: {}.{} ({} items)", req.resource, req.operation, len(req.items))

    async with get_client() as client:
        try:
            outputs = await node.execute(
                client,
                req.resource,
                req.operation,
                req.items,
                continue_on_fail=req.continue_on_fail,
            )
        except ClioAPIError as e:
            raise HTTPException(status_code=502, detail=str(e))
        except ClioAdapterError as e:
            logger.warning("Rejected {}.{}: {}", req.resource, req.operation, e)
            raise HTTPException(status_code=400, detail=str(e))

    return {"items": [o.model_dump(mode="json", by_alias=True, exclude_none=True) for o in outputs]}
