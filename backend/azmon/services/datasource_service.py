"""DataSource service."""
from typing import Dict
import httpx
from azmon.config import Settings
from azmon.executors import BaseExecutor
from azmon.executors.azure_monitor import AzureMonitorExecutor
from azmon.executors.application_insights import ApplicationInsightsExecutor
from azmon.executors.log_analytics import LogAnalyticsExecutor
from azmon.executors.insights_analytics import InsightsAnalyticsExecutor
from azmon.models.service import ServiceType
from azmon.registry import DataSourceRegistry
from azmon.schemas.datasource import DataSourceInfo, PLUGIN_ID
from azmon.services.dispatcher import QueryDispatcher


def get_executor(
    service_type: ServiceType,
    http_client: httpx.AsyncClient,
    ds_info: DataSourceInfo,
) -> BaseExecutor:
    """Get the executor for a service type."""
    if service_type == ServiceType.AZURE_MONITOR:
        return AzureMonitorExecutor(http_client, ds_info)
    elif service_type == ServiceType.APPLICATION_INSIGHTS:
        return ApplicationInsightsExecutor(http_client, ds_info)
    elif service_type == ServiceType.AZURE_LOG_ANALYTICS:
        return LogAnalyticsExecutor(http_client, ds_info)
    elif service_type == ServiceType.INSIGHTS_ANALYTICS:
        return InsightsAnalyticsExecutor(http_client, ds_info)
    else:
        raise ValueError(f"Unknown service type: {service_type}")


def new_query_dispatcher(
    ds_info: DataSourceInfo,
    http_client: httpx.AsyncClient,
    settings: Settings,
) -> QueryDispatcher:
    """Create a dispatcher whose executors share one HTTP client and connection info."""
    executors: Dict[ServiceType, BaseExecutor] = {
        service_type: get_executor(service_type, http_client, ds_info)
        for service_type in ServiceType
    }
    return QueryDispatcher(
        executors,
        timeout=settings.query_timeout_seconds,
        strict_ref_ids=settings.strict_ref_ids,
    )


def register_plugin(registry: DataSourceRegistry) -> None:
    """Register the Azure Monitor data source with a registry."""
    registry.register(PLUGIN_ID, new_query_dispatcher)
