"""Query API routes."""
from fastapi import APIRouter, Depends, HTTPException, Request
from azmon.errors import AzureMonitorError
from azmon.schemas.query import QueryRequest, QueryResponse
from azmon.services.dispatcher import QueryDispatcher

router = APIRouter()


def get_dispatcher(request: Request) -> QueryDispatcher:
    """Dependency returning the dispatcher built at startup."""
    return request.app.state.dispatcher


@router.post("/query", response_model=QueryResponse)
async def execute_query(
    data: QueryRequest,
    dispatcher: QueryDispatcher = Depends(get_dispatcher),
):
    """Execute a batch of frontend queries."""
    try:
        return await dispatcher.execute(data.to_batch())
    except AzureMonitorError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
