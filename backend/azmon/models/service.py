"""Azure Monitor sub-service types and cloud endpoints."""
import enum
from typing import Dict


class ServiceType(str, enum.Enum):
    """Supported query types, in the order their executors are invoked."""
    AZURE_MONITOR = "Azure Monitor"
    APPLICATION_INSIGHTS = "Application Insights"
    AZURE_LOG_ANALYTICS = "Azure Log Analytics"
    INSIGHTS_ANALYTICS = "Insights Analytics"


class Endpoint(str, enum.Enum):
    """API families the executors talk to."""
    MANAGEMENT = "management"
    APP_INSIGHTS = "appinsights"
    LOG_ANALYTICS = "loganalytics"


CLOUD_ENDPOINTS: Dict[str, Dict[Endpoint, str]] = {
    "azuremonitor": {
        Endpoint.MANAGEMENT: "https://management.azure.com",
        Endpoint.APP_INSIGHTS: "https://api.applicationinsights.io",
        Endpoint.LOG_ANALYTICS: "https://api.loganalytics.io",
    },
    "chinaazuremonitor": {
        Endpoint.MANAGEMENT: "https://management.chinacloudapi.cn",
        Endpoint.APP_INSIGHTS: "https://api.applicationinsights.azure.cn",
        Endpoint.LOG_ANALYTICS: "https://api.loganalytics.azure.cn",
    },
    "govazuremonitor": {
        Endpoint.MANAGEMENT: "https://management.usgovcloudapi.net",
        Endpoint.APP_INSIGHTS: "https://api.applicationinsights.us",
        Endpoint.LOG_ANALYTICS: "https://api.loganalytics.us",
    },
}
