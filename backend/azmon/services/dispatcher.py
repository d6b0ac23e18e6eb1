"""Query dispatcher: classify, fan out to executors, merge."""
import asyncio
import logging
from typing import Dict, List, Mapping, Optional
from azmon.errors import DuplicateRefIdError, QueryTimeoutError
from azmon.executors import BaseExecutor
from azmon.models.service import ServiceType
from azmon.schemas.query import Query, QueryBatch, QueryResponse, ResultSet, TimeRange
from azmon.services import aggregator
from azmon.services.classifier import classify

logger = logging.getLogger(__name__)


class QueryDispatcher:
    """
    Routes a query batch to the four service executors and merges their results.

    Holds no per-batch state, so one instance serves concurrent requests.
    """

    def __init__(
        self,
        executors: Mapping[ServiceType, BaseExecutor],
        timeout: Optional[float] = None,
        strict_ref_ids: bool = False,
    ):
        missing = [service_type.value for service_type in ServiceType if service_type not in executors]
        if missing:
            raise ValueError(f"No executor configured for: {', '.join(missing)}")
        self.executors = dict(executors)
        self.timeout = timeout
        self.strict_ref_ids = strict_ref_ids

    async def execute(self, batch: QueryBatch) -> QueryResponse:
        """
        Execute a batch.

        Raises UnsupportedQueryTypeError before any executor runs, the first
        executor error (in service order among those that failed), or
        QueryTimeoutError when the deadline passes. Cancelling the caller
        cancels every in-flight executor call.
        """
        buckets = classify(batch)
        self._check_ref_ids(batch)
        logger.debug(
            "Dispatching %d queries: %s",
            len(batch.queries),
            {service_type.value: len(queries) for service_type, queries in buckets.items()},
        )

        tasks: Dict[ServiceType, asyncio.Task] = {}
        try:
            async with asyncio.timeout(self.timeout):
                async with asyncio.TaskGroup() as tg:
                    for service_type in ServiceType:
                        tasks[service_type] = tg.create_task(
                            self._run(service_type, buckets[service_type], batch.time_range)
                        )
        except TimeoutError:
            raise QueryTimeoutError(self.timeout) from None
        except ExceptionGroup as group:
            raise _first_error(tasks, group) from None

        return aggregator.merge(
            [(service_type, tasks[service_type].result()) for service_type in ServiceType],
            strict=self.strict_ref_ids,
        )

    def _check_ref_ids(self, batch: QueryBatch) -> None:
        """Flag queries sharing a ref id; only the last of them keeps a result."""
        seen: Dict[str, str] = {}
        for query in batch.queries:
            previous = seen.get(query.ref_id)
            if previous is not None:
                if self.strict_ref_ids:
                    raise DuplicateRefIdError(query.ref_id, previous, query.query_type)
                # Collisions across services are reported when results are merged
                if previous == query.query_type:
                    logger.warning(
                        "Ref id %r used by several %s queries; only the last result is kept",
                        query.ref_id, query.query_type,
                    )
            seen[query.ref_id] = query.query_type

    async def _run(
        self,
        service_type: ServiceType,
        queries: List[Query],
        time_range: TimeRange,
    ) -> ResultSet:
        try:
            return await self.executors[service_type].execute_time_series_query(queries, time_range)
        except Exception as e:
            logger.warning("%s executor failed: %s", service_type.value, e)
            raise


def _first_error(tasks: Mapping[ServiceType, asyncio.Task], group: ExceptionGroup) -> Exception:
    """Pick the error of the earliest failed service in invocation order."""
    for service_type in ServiceType:
        task = tasks.get(service_type)
        if task is None or not task.done() or task.cancelled():
            continue
        error = task.exception()
        if error is not None:
            return error
    return group.exceptions[0]
