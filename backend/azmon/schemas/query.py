"""Query schemas."""
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field, field_validator


class TimeRange(BaseModel):
    """Time range shared by every query of a batch."""
    from_: datetime = Field(alias="from")
    to: datetime

    class Config:
        populate_by_name = True
        frozen = True

    @property
    def timespan(self) -> str:
        """ISO 8601 interval, e.g. 2024-01-01T00:00:00Z/2024-01-01T06:00:00Z."""
        return f"{_utc(self.from_)}/{_utc(self.to)}"


def _utc(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class Query(BaseModel):
    """A single frontend query. The model payload is opaque to the dispatcher."""
    ref_id: str = Field(alias="refId")
    query_type: str = Field(default="", alias="queryType")
    model: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        populate_by_name = True
        frozen = True

    @classmethod
    def from_model(cls, model: Dict[str, Any]) -> "Query":
        """Build a query from a raw frontend query document."""
        return cls(
            ref_id=str(model.get("refId", "")),
            query_type=str(model.get("queryType") or ""),
            model=model,
        )


class QueryBatch(BaseModel):
    """Ordered queries plus the time range they share."""
    queries: List[Query] = []
    time_range: TimeRange

    class Config:
        frozen = True


class QueryResult(BaseModel):
    """Result of one query: the untouched backend payload or an error."""
    ref_id: str = Field(alias="refId")
    payload: Optional[Any] = None
    error: Optional[str] = None
    meta: Dict[str, Any] = {}

    class Config:
        populate_by_name = True


ResultSet = Dict[str, QueryResult]


class QueryResponse(BaseModel):
    """Results of a whole batch keyed by ref id."""
    results: Dict[str, QueryResult] = {}


class QueryRequest(BaseModel):
    """Frontend query request body."""
    from_: datetime = Field(alias="from")
    to: datetime
    queries: List[Dict[str, Any]]

    class Config:
        populate_by_name = True

    @field_validator("queries")
    @classmethod
    def check_ref_ids(cls, queries: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        for index, model in enumerate(queries):
            if not model.get("refId"):
                raise ValueError(f"query {index} has no refId")
        return queries

    def to_batch(self) -> QueryBatch:
        """Convert the request into an immutable batch."""
        return QueryBatch(
            queries=[Query.from_model(model) for model in self.queries],
            time_range=TimeRange(from_=self.from_, to=self.to),
        )
