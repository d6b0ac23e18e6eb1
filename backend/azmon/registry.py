"""Data source plugin registry."""
import logging
from typing import Callable, Dict, List, TYPE_CHECKING
import httpx
from azmon.config import Settings
from azmon.errors import UnknownDataSourceError
from azmon.schemas.datasource import DataSourceInfo

if TYPE_CHECKING:
    from azmon.services.dispatcher import QueryDispatcher

logger = logging.getLogger(__name__)

DispatcherFactory = Callable[[DataSourceInfo, httpx.AsyncClient, Settings], "QueryDispatcher"]


class DataSourceRegistry:
    """Maps data source plugin ids to dispatcher factories.

    Owned by the application; plugins are registered explicitly at startup.
    """

    def __init__(self):
        self._factories: Dict[str, DispatcherFactory] = {}

    def register(self, plugin_id: str, factory: DispatcherFactory) -> None:
        if plugin_id in self._factories:
            raise ValueError(f"Datasource {plugin_id!r} is already registered")
        self._factories[plugin_id] = factory
        logger.info("Registered datasource %s", plugin_id)

    def plugin_ids(self) -> List[str]:
        return sorted(self._factories)

    def create(
        self,
        ds_info: DataSourceInfo,
        http_client: httpx.AsyncClient,
        settings: Settings,
    ) -> "QueryDispatcher":
        """Create a dispatcher for a data source using its plugin's factory."""
        factory = self._factories.get(ds_info.type)
        if factory is None:
            raise UnknownDataSourceError(ds_info.type)
        return factory(ds_info, http_client, settings)
