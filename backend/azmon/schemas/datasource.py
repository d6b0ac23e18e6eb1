"""DataSource schemas."""
from typing import Dict, Any
from pydantic import BaseModel, Field

PLUGIN_ID = "grafana-azure-monitor-datasource"


class DataSourceInfo(BaseModel):
    """Connection info shared by all executors of one data source."""
    name: str
    type: str = PLUGIN_ID
    json_data: Dict[str, Any] = Field(default_factory=dict)  # cloudName, subscriptionId, workspace, app id
    secure_json_data: Dict[str, str] = Field(default_factory=dict)  # access tokens, API keys

    class Config:
        frozen = True

    def get(self, key: str, default: str = "") -> str:
        """Read a plain json_data value as a string."""
        value = self.json_data.get(key)
        return str(value) if value else default

    def secret(self, key: str) -> str:
        """Read a secure_json_data value."""
        return self.secure_json_data.get(key) or ""
