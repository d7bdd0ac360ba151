"""Forecast session: resolve a city, fetch its forecast and parse it."""

import copy
import logging

import httpx

from weatherview.config.schema import AppConfig
from weatherview.ingest.city_codes import CityCodeIndex, InvalidCityName, validate_city_name
from weatherview.ingest.forecast_parser import parse_forecast
from weatherview.ingest.tianqi_client import TianqiClient
from weatherview.models.forecast import ForecastTable
from weatherview.models.session import (
    INVALID_CITY_MESSAGE,
    REQUEST_FAILED_MESSAGE,
    RefreshOutcome,
    RefreshStatus,
)

logger = logging.getLogger(__name__)


class ForecastSession:
    def __init__(
        self,
        index: CityCodeIndex,
        client: TianqiClient,
        table: ForecastTable | None = None,
        max_name_length: int = 20,
    ):
        self.index = index
        self.client = client
        self.table = table if table is not None else ForecastTable()
        self.max_name_length = max_name_length

    @classmethod
    def from_config(cls, config: AppConfig) -> "ForecastSession":
        return cls(
            index=CityCodeIndex.from_path(config.dataset.path),
            client=TianqiClient.from_config(config),
            max_name_length=config.dataset.max_name_length,
        )

    def refresh(self, city_name: str) -> RefreshOutcome:
        """Run one lookup for user-entered ``city_name``.

        No request is sent unless the name resolves. On any failure the
        forecast table is left as it was.
        """
        try:
            name = validate_city_name(city_name, self.max_name_length)
        except InvalidCityName as e:
            logger.info("Rejected city name: %s", e)
            return RefreshOutcome(
                RefreshStatus.INVALID_NAME, city_name, message=INVALID_CITY_MESSAGE
            )

        code = self.index.resolve(name)
        if code is None:
            logger.info("No city code for %r", name)
            return RefreshOutcome(
                RefreshStatus.CITY_NOT_FOUND, name, message=INVALID_CITY_MESSAGE
            )

        try:
            raw = self.client.get_forecast(code)
        except httpx.HTTPError:
            logger.exception("Failed to fetch forecast for %s (%s)", name, code)
            return RefreshOutcome(
                RefreshStatus.TRANSPORT_FAILED, name, code, REQUEST_FAILED_MESSAGE
            )

        # The table is only updated once at least one day has parsed.
        staged = copy.deepcopy(self.table)
        written = parse_forecast(raw, into=staged)
        if written is None:
            return RefreshOutcome(
                RefreshStatus.PARSE_FAILED, name, code, REQUEST_FAILED_MESSAGE
            )
        if written == 0:
            logger.warning("Forecast response for %s (%s) carried no days", name, code)
            return RefreshOutcome(
                RefreshStatus.NO_DATA, name, code, REQUEST_FAILED_MESSAGE
            )
        self.table.days = staged.days
        self.table.valid_through = staged.valid_through

        logger.info(
            "Forecast refreshed for %s (%s): %d days",
            name, code, self.table.valid_through,
        )
        return RefreshOutcome(RefreshStatus.OK, name, code)
