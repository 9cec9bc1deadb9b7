import io
import json
from dataclasses import dataclass
from datetime import timedelta

from loguru import logger

from tea_timer.core.duration import format_duration, parse_duration
from tea_timer.core.errors import CatalogFileError, CatalogParseError, TeaTimerError


@dataclass(frozen=True)
class TeaProfile:
    id: int
    category: str
    name: str
    steep_time: timedelta
    temperature: int

    @classmethod
    def from_dict(cls, record):
        """Build a profile from one JSON record (id, type, name, steepTime, temp)."""
        if not isinstance(record, dict):
            raise CatalogParseError(f"Expected a tea object, got {type(record).__name__}")

        fields = {"id": int, "type": str, "name": str, "steepTime": str, "temp": int}
        for key, expected in fields.items():
            if key not in record:
                raise CatalogParseError(f"Tea record is missing '{key}': {record}")
            value = record[key]
            # bool is an int subclass, but true/false is never a valid id or temp
            if not isinstance(value, expected) or isinstance(value, bool):
                raise CatalogParseError(f"Field '{key}' must be {expected.__name__}, got {value!r}")

        try:
            steep_time = parse_duration(record["steepTime"])
        except TeaTimerError as e:
            raise CatalogParseError(f"Bad steepTime for '{record['name']}': {e}") from e

        return cls(
            id=record["id"],
            category=record["type"],
            name=record["name"],
            steep_time=steep_time,
            temperature=record["temp"],
        )

    def to_dict(self):
        return {
            "id": self.id,
            "type": self.category,
            "name": self.name,
            "steepTime": format_duration(self.steep_time),
            "temp": self.temperature,
        }


DEFAULT_TEAS = [
    TeaProfile(0, "White", "White Dragon", timedelta(minutes=2), 70),
    TeaProfile(1, "Green", "Temple of Heaven", timedelta(minutes=2), 80),
    TeaProfile(2, "Green", "Green Dragon", timedelta(minutes=2), 80),
    TeaProfile(3, "Black", "Lapsang Souchong", timedelta(minutes=2), 100),
    TeaProfile(4, "Black", "Greenfield Magic Yunnan", timedelta(minutes=7), 100),
]


def default_catalog():
    return list(DEFAULT_TEAS)


def parse_catalog(source):
    """Parse a JSON stream, string or bytes into teas. Raises CatalogParseError."""
    # JSONDecodeError, UnicodeDecodeError and oversized integer literals are all ValueErrors
    try:
        if isinstance(source, (str, bytes, bytearray)):
            raw = json.loads(source)
        else:
            raw = json.load(source)
    except (ValueError, RecursionError) as e:
        raise CatalogParseError(str(e)) from e

    if not isinstance(raw, list):
        raise CatalogParseError(f"Expected a list of teas, got {type(raw).__name__}")
    return [TeaProfile.from_dict(record) for record in raw]


def load_catalog(source=None):
    """Load teas from an external source, falling back to the built-in list.

    Returns (teas, warning). When the source cannot be parsed the built-in
    teas come back along with a CatalogParseError describing why; the error
    is never raised.
    """
    if source is None:
        return default_catalog(), None

    try:
        teas = parse_catalog(source)
    except CatalogParseError as e:
        warning = CatalogParseError(f"Failed to parse file. Using default list of teas! Error was: {e}")
        logger.debug("{}", warning)
        return default_catalog(), warning

    logger.debug("Loaded {} teas from external catalog", len(teas))
    return teas, None


def load_catalog_file(path):
    """Open a JSON catalog file; unreadable files are fatal, malformed ones are not."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return load_catalog(f)
    except OSError as e:
        raise CatalogFileError(f"Failed to open file! Error was: {e}") from e


def dump_catalog(teas):
    """Serialize teas to the JSON format load_catalog reads."""
    buf = io.StringIO()
    json.dump([t.to_dict() for t in teas], buf, indent=2)
    return buf.getvalue()
