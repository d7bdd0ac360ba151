"""City name to tianqiapi city code lookup, built from the bundled dataset."""

import json
import logging
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

# Tried in order after the unmodified name: city, county, district.
ADMIN_SUFFIXES = ("市", "县", "区")

_FORBIDDEN_NAME_CHARS = set('&=?/#{}[]"')


class DatasetUnavailable(Exception):
    """The city dataset could not be read or is not a JSON array."""


class InvalidCityName(ValueError):
    pass


def parse_city_dataset(source: bytes) -> dict[str, str]:
    """Decode a ``[{"city_name": ..., "city_code": ...}, ...]`` buffer.

    Entries that are not objects or lack either string field are skipped.
    Later duplicates overwrite earlier ones.
    """
    try:
        records = json.loads(source)
    except (ValueError, TypeError) as e:
        raise DatasetUnavailable(f"city dataset is not valid JSON: {e}") from e
    if not isinstance(records, list):
        raise DatasetUnavailable(
            f"city dataset root is {type(records).__name__}, expected array"
        )

    entries: dict[str, str] = {}
    skipped = 0
    for record in records:
        if not isinstance(record, dict):
            skipped += 1
            continue
        name = record.get("city_name")
        code = record.get("city_code")
        if not isinstance(name, str) or not isinstance(code, str):
            skipped += 1
            continue
        entries[name] = code
    if skipped:
        logger.debug("Skipped %d malformed city records", skipped)
    return entries


class CityCodeIndex:
    """Name to code mapping, built at most once.

    When constructed with a ``source`` callable the build is deferred until
    the first :meth:`resolve`. A failed build leaves the index empty and
    records the failure in :attr:`load_error`; lookups then always miss.
    """

    def __init__(self, source: Callable[[], bytes] | None = None):
        self._source = source
        self._entries: dict[str, str] = {}
        self._built = False
        self.load_error: DatasetUnavailable | None = None

    @classmethod
    def from_bytes(cls, data: bytes) -> "CityCodeIndex":
        index = cls(lambda: data)
        index.load()
        return index

    @classmethod
    def from_path(cls, path: str | Path) -> "CityCodeIndex":
        path = Path(path)

        def read() -> bytes:
            try:
                return path.read_bytes()
            except OSError as e:
                raise DatasetUnavailable(f"cannot read {path}: {e}") from e

        return cls(read)

    @property
    def built(self) -> bool:
        return self._built

    @property
    def available(self) -> bool:
        return self._built and self.load_error is None

    def load(self) -> None:
        if self._built:
            return
        self._built = True
        if self._source is None:
            return
        try:
            self._entries = parse_city_dataset(self._source())
        except DatasetUnavailable as e:
            self.load_error = e
            self._entries = {}
            logger.warning("City dataset unavailable, all lookups will miss: %s", e)
            return
        logger.info("Loaded %d city codes", len(self._entries))

    def resolve(self, name: str) -> str | None:
        """Return the city code for ``name``, or None if not found.

        Tries ``name`` as given, then with each administrative suffix.
        Matching is exact.
        """
        self.load()
        for candidate in (name, *(name + s for s in ADMIN_SUFFIXES)):
            code = self._entries.get(candidate)
            if code is not None:
                return code
        return None

    def __len__(self) -> int:
        self.load()
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        self.load()
        return name in self._entries


def validate_city_name(name: str, max_length: int = 20) -> str:
    """Check user input before resolving. Returns the stripped name."""
    stripped = name.strip()
    if not stripped:
        raise InvalidCityName("city name is empty")
    if len(stripped) > max_length:
        raise InvalidCityName(
            f"city name longer than {max_length} characters: {stripped!r}"
        )
    if any(c.isascii() and c.isdigit() for c in stripped):
        raise InvalidCityName(f"city name contains digits: {stripped!r}")
    bad = _FORBIDDEN_NAME_CHARS.intersection(stripped)
    if bad:
        raise InvalidCityName(
            f"city name contains {''.join(sorted(bad))!r}: {stripped!r}"
        )
    return stripped
