"""Error types raised while dispatching a query batch."""
from typing import Optional
from fastapi import status


class AzureMonitorError(Exception):
    """Base class for dispatcher errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class UnsupportedQueryTypeError(AzureMonitorError):
    """A query declared a type no executor handles."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, query_type: str):
        self.query_type = query_type
        super().__init__(f'alerting not supported for "{query_type}"')


class BackendExecutionError(AzureMonitorError):
    """An executor failed; fatal for the whole batch."""

    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, service_type: str, message: str):
        self.service_type = service_type
        super().__init__(f"{service_type}: {message}")


class QueryTimeoutError(AzureMonitorError):
    """The batch deadline passed before every executor finished."""

    status_code = status.HTTP_504_GATEWAY_TIMEOUT

    def __init__(self, timeout: Optional[float]):
        self.timeout = timeout
        super().__init__(f"query batch exceeded deadline of {timeout}s")


class DuplicateRefIdError(AzureMonitorError):
    """Two queries of one batch share a ref id."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, ref_id: str, first: str, second: str):
        self.ref_id = ref_id
        super().__init__(f'duplicate ref id "{ref_id}" ({first}, {second})')


class UnknownDataSourceError(AzureMonitorError):
    """No factory is registered for a data source plugin id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, plugin_id: str):
        self.plugin_id = plugin_id
        super().__init__(f"Unknown datasource type: {plugin_id}")
