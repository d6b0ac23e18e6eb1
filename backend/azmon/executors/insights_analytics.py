"""Application Insights analytics (raw query) executor."""
import httpx
from azmon.executors import BaseExecutor
from azmon.models.service import ServiceType, Endpoint
from azmon.schemas.query import Query, TimeRange


class InsightsAnalyticsExecutor(BaseExecutor):
    """Executor for raw Application Insights analytics queries."""

    service_type = ServiceType.INSIGHTS_ANALYTICS
    endpoint = Endpoint.APP_INSIGHTS
    model_key = "insightsAnalytics"

    def _get_headers(self) -> dict:
        headers = {}
        api_key = self.ds_info.secret("appInsightsApiKey")
        if api_key:
            headers["X-Api-Key"] = api_key
        return headers

    def build_request(self, query: Query, time_range: TimeRange) -> httpx.Request:
        model = self._sub_model(query)
        app_id = self._require(query, self.ds_info.get("appInsightsAppId"), "appInsightsAppId")
        params = {
            "query": self._require(query, model.get("rawQueryString"), "rawQueryString"),
            "timespan": time_range.timespan,
        }

        return self.http_client.build_request(
            "GET",
            f"{self._get_base_url()}/v1/apps/{self._quote(app_id)}/query",
            headers=self._get_headers(),
            params=params,
        )
