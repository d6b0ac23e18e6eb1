"""Azure Log Analytics executor."""
import httpx
from azmon.executors import BaseExecutor
from azmon.models.service import ServiceType, Endpoint
from azmon.schemas.query import Query, TimeRange


class LogAnalyticsExecutor(BaseExecutor):
    """Executor for Log Analytics workspace queries."""

    service_type = ServiceType.AZURE_LOG_ANALYTICS
    endpoint = Endpoint.LOG_ANALYTICS
    model_key = "azureLogAnalytics"

    def _get_headers(self) -> dict:
        """Get request headers."""
        headers = {"Content-Type": "application/json"}
        # Workspace tokens are issued for a different resource than the management API
        token = self.ds_info.secret("logAnalyticsAccessToken") or self.ds_info.secret("accessToken")
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def build_request(self, query: Query, time_range: TimeRange) -> httpx.Request:
        model = self._sub_model(query)
        workspace = self._require(
            query,
            model.get("workspace") or self.ds_info.get("logAnalyticsDefaultWorkspace"),
            "workspace",
        )
        body = {
            "query": self._require(query, model.get("query"), "query"),
            "timespan": time_range.timespan,
        }

        return self.http_client.build_request(
            "POST",
            f"{self._get_base_url()}/v1/workspaces/{self._quote(workspace)}/query",
            headers=self._get_headers(),
            json=body,
        )
