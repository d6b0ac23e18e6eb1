"""Application configuration management."""
from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache
from azmon.schemas.datasource import DataSourceInfo


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Azure Monitor Query Dispatcher"
    debug: bool = False
    log_level: str = "INFO"

    # Dispatch
    http_timeout_seconds: float = 30.0
    query_timeout_seconds: Optional[float] = None  # Per-batch deadline, None disables it
    strict_ref_ids: bool = False  # Reject ref id collisions across services

    # Data source connection info
    datasource_name: str = "Azure Monitor"
    azure_cloud: str = "azuremonitor"  # azuremonitor, chinaazuremonitor, govazuremonitor
    azure_subscription_id: str = ""
    azure_tenant_id: str = ""
    azure_client_id: str = ""
    azure_access_token: str = ""

    # Log Analytics
    log_analytics_default_workspace: str = ""
    log_analytics_access_token: str = ""

    # Application Insights
    app_insights_app_id: str = ""
    app_insights_api_key: str = ""

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    def datasource_info(self) -> DataSourceInfo:
        """Build the shared data source connection info."""
        return DataSourceInfo(
            name=self.datasource_name,
            json_data={
                "cloudName": self.azure_cloud,
                "subscriptionId": self.azure_subscription_id,
                "tenantId": self.azure_tenant_id,
                "clientId": self.azure_client_id,
                "logAnalyticsDefaultWorkspace": self.log_analytics_default_workspace,
                "appInsightsAppId": self.app_insights_app_id,
            },
            secure_json_data={
                "accessToken": self.azure_access_token,
                "logAnalyticsAccessToken": self.log_analytics_access_token,
                "appInsightsApiKey": self.app_insights_api_key,
            },
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
