"""Azure Monitor metrics executor."""
import httpx
from azmon.executors import BaseExecutor
from azmon.models.service import ServiceType, Endpoint
from azmon.schemas.query import Query, TimeRange

API_VERSION = "2018-01-01"


class AzureMonitorExecutor(BaseExecutor):
    """Executor for the Azure Monitor metrics API."""

    service_type = ServiceType.AZURE_MONITOR
    endpoint = Endpoint.MANAGEMENT
    model_key = "azureMonitor"

    def _get_headers(self) -> dict:
        """Get request headers."""
        headers = {"Content-Type": "application/json"}
        token = self.ds_info.secret("accessToken")
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def build_request(self, query: Query, time_range: TimeRange) -> httpx.Request:
        model = self._sub_model(query)
        subscription = self._require(
            query,
            query.model.get("subscription") or self.ds_info.get("subscriptionId"),
            "subscription",
        )
        resource_group = self._require(query, model.get("resourceGroup"), "resourceGroup")
        metric_definition = self._require(query, model.get("metricDefinition"), "metricDefinition")
        resource_name = self._require(query, model.get("resourceName"), "resourceName")

        path = (
            f"/subscriptions/{self._quote(subscription)}/resourceGroups/{self._quote(resource_group)}"
            f"/providers/{self._quote(metric_definition, safe='/')}/{self._quote(resource_name)}"
            f"/providers/microsoft.insights/metrics"
        )
        params = {
            "api-version": API_VERSION,
            "timespan": time_range.timespan,
            "metricnames": self._require(query, model.get("metricName"), "metricName"),
        }
        if model.get("aggregation"):
            params["aggregation"] = model["aggregation"]
        time_grain = model.get("timeGrain")
        if time_grain and time_grain != "auto":
            params["interval"] = time_grain
        if model.get("metricNamespace"):
            params["metricnamespace"] = model["metricNamespace"]
        if model.get("filter"):
            params["$filter"] = model["filter"]
        if model.get("top"):
            params["top"] = str(model["top"])

        return self.http_client.build_request(
            "GET",
            f"{self._get_base_url()}{path}",
            headers=self._get_headers(),
            params=params,
        )
