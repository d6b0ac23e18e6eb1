"""Pydantic schemas for request/response models."""
from azmon.schemas.datasource import (
    DataSourceInfo,
    PLUGIN_ID,
)
from azmon.schemas.query import (
    TimeRange,
    Query,
    QueryBatch,
    QueryResult,
    ResultSet,
    QueryResponse,
    QueryRequest,
)

__all__ = [
    "DataSourceInfo",
    "PLUGIN_ID",
    "TimeRange",
    "Query",
    "QueryBatch",
    "QueryResult",
    "ResultSet",
    "QueryResponse",
    "QueryRequest",
]
