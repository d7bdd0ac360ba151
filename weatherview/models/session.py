"""Outcome of a single resolve-fetch-parse refresh."""

from dataclasses import dataclass
from enum import StrEnum


class RefreshStatus(StrEnum):
    OK = "ok"
    INVALID_NAME = "invalid_name"
    CITY_NOT_FOUND = "city_not_found"
    TRANSPORT_FAILED = "transport_failed"
    PARSE_FAILED = "parse_failed"
    NO_DATA = "no_data"


INVALID_CITY_MESSAGE = "请输入正确的城市名称"
REQUEST_FAILED_MESSAGE = "网络请求失败"


@dataclass(frozen=True)
class RefreshOutcome:
    status: RefreshStatus
    city_name: str
    city_code: str | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status == RefreshStatus.OK
