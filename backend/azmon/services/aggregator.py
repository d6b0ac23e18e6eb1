"""Merging of per-service result sets."""
import logging
from typing import Dict, Sequence, Tuple
from azmon.errors import DuplicateRefIdError
from azmon.models.service import ServiceType
from azmon.schemas.query import QueryResponse, ResultSet

logger = logging.getLogger(__name__)


def merge(
    results: Sequence[Tuple[ServiceType, ResultSet]],
    strict: bool = False,
) -> QueryResponse:
    """
    Fold result sets into one response in the given order.

    Ref ids are expected to be unique across services. When two services
    return the same ref id the later one wins and the collision is logged,
    or DuplicateRefIdError is raised in strict mode.
    """
    response = QueryResponse()
    owners: Dict[str, ServiceType] = {}
    for service_type, result_set in results:
        for ref_id, result in result_set.items():
            previous = owners.get(ref_id)
            if previous is not None:
                if strict:
                    raise DuplicateRefIdError(ref_id, previous.value, service_type.value)
                logger.warning(
                    "Ref id %r returned by %s overwrites result from %s",
                    ref_id, service_type.value, previous.value,
                )
            owners[ref_id] = service_type
            response.results[ref_id] = result
    return response
