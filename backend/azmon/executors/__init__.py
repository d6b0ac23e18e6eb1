"""Backend executors, one per Azure Monitor sub-service."""
import logging
from abc import ABC, abstractmethod
from typing import Dict, Any, List
from urllib.parse import quote
import httpx
from azmon.errors import BackendExecutionError
from azmon.models.service import ServiceType, Endpoint, CLOUD_ENDPOINTS
from azmon.schemas.datasource import DataSourceInfo
from azmon.schemas.query import Query, QueryResult, ResultSet, TimeRange

logger = logging.getLogger(__name__)


class BaseExecutor(ABC):
    """Base class for the four service executors.

    Subclasses only build the HTTP request for a single query; sending it and
    turning the response into a QueryResult is shared.
    """

    service_type: ServiceType
    endpoint: Endpoint
    model_key: str

    def __init__(self, http_client: httpx.AsyncClient, ds_info: DataSourceInfo):
        self.http_client = http_client
        self.ds_info = ds_info

    def _error(self, message: str) -> BackendExecutionError:
        return BackendExecutionError(self.service_type.value, message)

    def _quote(self, value: str, safe: str = "") -> str:
        """Percent-encode a model value used as a URL path segment."""
        return quote(value, safe=safe)

    def _get_base_url(self) -> str:
        """Get the API base URL for the data source's cloud."""
        cloud = self.ds_info.get("cloudName", "azuremonitor")
        endpoints = CLOUD_ENDPOINTS.get(cloud)
        if endpoints is None:
            raise self._error(f"unknown cloud {cloud!r}")
        return endpoints[self.endpoint]

    def _sub_model(self, query: Query) -> Dict[str, Any]:
        """Get this service's section of the query model."""
        section = query.model.get(self.model_key)
        if not isinstance(section, dict):
            raise self._error(f"query {query.ref_id!r} has no {self.model_key!r} object")
        return section

    def _require(self, query: Query, value: Any, field: str) -> str:
        if not value:
            raise self._error(f"query {query.ref_id!r} is missing {field!r}")
        return str(value)

    @abstractmethod
    def build_request(self, query: Query, time_range: TimeRange) -> httpx.Request:
        """Build the HTTP request for one query."""
        pass

    async def execute_time_series_query(
        self,
        queries: List[Query],
        time_range: TimeRange,
    ) -> ResultSet:
        """
        Execute a bucket of queries.

        Returns: ResultSet keyed by ref id; empty input returns an empty set
        without touching the network.
        """
        results: ResultSet = {}
        for query in queries:
            try:
                request = self.build_request(query, time_range)
            except httpx.InvalidURL as e:
                raise self._error(f"invalid request URL for query {query.ref_id!r}: {e}") from e
            results[query.ref_id] = await self._send(query, request)
        return results

    async def _send(self, query: Query, request: httpx.Request) -> QueryResult:
        meta = {"method": request.method, "url": str(request.url)}
        try:
            response = await self.http_client.send(request)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise self._error(f"request failed: {e}") from e

        if response.status_code in (401, 403):
            raise self._error(f"authentication failed: HTTP {response.status_code}")
        if not response.is_success:
            logger.info(
                "%s query %s returned HTTP %s",
                self.service_type.value, query.ref_id, response.status_code,
            )
            return QueryResult(
                ref_id=query.ref_id,
                error=f"HTTP {response.status_code}: {response.text}",
                meta=meta,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise self._error(f"malformed response: {e}") from e
        return QueryResult(ref_id=query.ref_id, payload=payload, meta=meta)
