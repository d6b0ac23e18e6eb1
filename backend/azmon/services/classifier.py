"""Query classification by declared service type."""
from typing import Dict, List
from azmon.errors import UnsupportedQueryTypeError
from azmon.models.service import ServiceType
from azmon.schemas.query import Query, QueryBatch


def classify(batch: QueryBatch) -> Dict[ServiceType, List[Query]]:
    """
    Partition a batch into one bucket per service type.

    Every service type gets a bucket, possibly empty, and queries keep their
    batch order. An unrecognized type fails the whole batch.
    """
    buckets: Dict[ServiceType, List[Query]] = {service_type: [] for service_type in ServiceType}
    for query in batch.queries:
        try:
            service_type = ServiceType(query.query_type)
        except ValueError:
            raise UnsupportedQueryTypeError(query.query_type) from None
        buckets[service_type].append(query)
    return buckets
