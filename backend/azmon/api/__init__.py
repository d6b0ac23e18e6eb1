"""API routes."""
from fastapi import APIRouter
from azmon.api import query

api_router = APIRouter()

api_router.include_router(query.router, prefix="/ds", tags=["Query"])
