"""Application Insights metrics executor."""
import httpx
from azmon.executors import BaseExecutor
from azmon.models.service import ServiceType, Endpoint
from azmon.schemas.query import Query, TimeRange


class ApplicationInsightsExecutor(BaseExecutor):
    """Executor for the Application Insights metrics API."""

    service_type = ServiceType.APPLICATION_INSIGHTS
    endpoint = Endpoint.APP_INSIGHTS
    model_key = "appInsights"

    def _get_headers(self) -> dict:
        """Get request headers."""
        headers = {}
        api_key = self.ds_info.secret("appInsightsApiKey")
        if api_key:
            headers["X-Api-Key"] = api_key
        return headers

    def build_request(self, query: Query, time_range: TimeRange) -> httpx.Request:
        model = self._sub_model(query)
        app_id = self._require(query, self.ds_info.get("appInsightsAppId"), "appInsightsAppId")
        metric_name = self._require(query, model.get("metricName"), "metricName")

        params = {"timespan": time_range.timespan}
        if model.get("aggregation"):
            params["aggregation"] = model["aggregation"]
        time_grain = model.get("timeGrain")
        if time_grain and time_grain != "auto":
            params["interval"] = time_grain
        if model.get("dimension"):
            params["segment"] = model["dimension"]
        if model.get("dimensionFilter"):
            params["filter"] = model["dimensionFilter"]

        return self.http_client.build_request(
            "GET",
            f"{self._get_base_url()}/v1/apps/{self._quote(app_id)}/metrics/{self._quote(metric_name, safe='/')}",
            headers=self._get_headers(),
            params=params,
        )
