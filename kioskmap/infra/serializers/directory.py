import json
import logging
from typing import IO, Any, Dict, List, NamedTuple, Optional

from kioskmap.domain import (
    Ad,
    Category,
    Directory,
    FloorPlan,
    Kiosk,
    Place,
    Point,
)
from kioskmap.exceptions import DeserializationError
from kioskmap.utils import camelcase_to_snakecase, performance_logging

logger = logging.getLogger(__name__)


class DirectoryInputs(NamedTuple):
    kiosk_data: IO[bytes]
    floor_plans_data: IO[bytes]
    places_data: IO[bytes]
    categories_data: Optional[IO[bytes]] = None
    ads_data: Optional[IO[bytes]] = None


def _normalize(record: Any) -> Dict[str, Any]:
    if not isinstance(record, dict):
        raise DeserializationError(f"Expected an object, got {record!r}")
    return {camelcase_to_snakecase(key): value for key, value in record.items()}


def _require(record: Dict[str, Any], key: str) -> Any:
    try:
        return record[key]
    except KeyError:
        raise DeserializationError(
            f"Missing '{key}' in record {record!r}"
        ) from None


def _parse_location(record: Dict[str, Any]) -> Point:
    try:
        return Point(
            x=float(_require(record, "location_x")),
            y=float(_require(record, "location_y")),
        )
    except (TypeError, ValueError) as e:
        raise DeserializationError(
            f"Invalid location in record {record!r}"
        ) from e


def _parse_display_order(record: Dict[str, Any]) -> int:
    try:
        return int(record.get("display_order") or 0)
    except (TypeError, ValueError) as e:
        raise DeserializationError(
            f"Invalid display order in record {record!r}"
        ) from e


class DirectoryDeserializer:
    """Turns the JSON payloads of the kiosk API into a
    [`Directory`][kioskmap.domain.models.directory.Directory]."""

    def __init__(self):
        self._floor_plans: Dict[str, FloorPlan] = {}
        self._categories: Dict[str, Category] = {}

    def _parse_floor_plan(self, raw: Any) -> FloorPlan:
        record = _normalize(raw)
        floor_plan_id = str(_require(record, "id"))
        if floor_plan_id in self._floor_plans:
            return self._floor_plans[floor_plan_id]

        floor_plan = FloorPlan(
            floor_plan_id=floor_plan_id,
            name=_require(record, "name"),
            image_url=record.get("image_url") or "",
            display_order=_parse_display_order(record),
        )
        self._floor_plans[floor_plan_id] = floor_plan
        return floor_plan

    def _parse_category(self, raw: Any) -> Optional[Category]:
        if raw is None:
            return None

        record = _normalize(raw)
        category_id = str(_require(record, "id"))
        if category_id in self._categories:
            return self._categories[category_id]

        category = Category(
            category_id=category_id,
            name=_require(record, "name"),
            icon_key=record.get("icon_key") or "",
        )
        self._categories[category_id] = category
        return category

    def _parse_place(self, raw: Any) -> Place:
        record = _normalize(raw)
        return Place(
            place_id=str(_require(record, "id")),
            name=_require(record, "name"),
            location=_parse_location(record),
            floor_plan=self._parse_floor_plan(_require(record, "floor_plan")),
            description=record.get("description") or "",
            business_hours=record.get("business_hours") or "",
            logo_url=record.get("logo_url"),
            cover_url=record.get("cover_url"),
            category=self._parse_category(record.get("category")),
        )

    def _parse_kiosk(self, raw: Any) -> Kiosk:
        record = _normalize(raw)
        return Kiosk(
            kiosk_id=str(_require(record, "id")),
            name=_require(record, "name"),
            location=_parse_location(record),
            floor_plan=self._parse_floor_plan(_require(record, "floor_plan")),
        )

    @staticmethod
    def _parse_ad(raw: Any) -> Ad:
        record = _normalize(raw)
        return Ad(
            ad_id=str(_require(record, "id")),
            name=_require(record, "name"),
            image_url=_require(record, "image_url"),
            is_active=bool(record.get("is_active", True)),
            display_order=_parse_display_order(record),
        )

    @staticmethod
    def _load_list(fp: IO[bytes], name: str) -> List[Any]:
        data = json.load(fp)
        if not isinstance(data, list):
            raise DeserializationError(
                f"Expected a list of {name}, got {type(data).__name__}"
            )
        return data

    def deserialize(self, inputs: DirectoryInputs) -> Directory:
        self._floor_plans = {}
        self._categories = {}

        with performance_logging("parse directory", logger=logger):
            floor_plans = []
            seen_ids = set()
            for raw in self._load_list(inputs.floor_plans_data, "floor plans"):
                floor_plan = self._parse_floor_plan(raw)
                if floor_plan.floor_plan_id in seen_ids:
                    logger.warning(
                        f"Skipping duplicate floor plan {floor_plan.floor_plan_id}"
                    )
                    continue
                seen_ids.add(floor_plan.floor_plan_id)
                floor_plans.append(floor_plan)
            floor_plans.sort(key=lambda floor_plan: floor_plan.display_order)

            categories = []
            if inputs.categories_data is not None:
                categories = [
                    self._parse_category(raw)
                    for raw in self._load_list(
                        inputs.categories_data, "categories"
                    )
                ]

            kiosk = self._parse_kiosk(json.load(inputs.kiosk_data))

            places = [
                self._parse_place(raw)
                for raw in self._load_list(inputs.places_data, "places")
            ]

            ads = []
            if inputs.ads_data is not None:
                ads = self.deserialize_ads(inputs.ads_data)

        # Floors only referenced by the kiosk or a place still need to be known
        known_ids = {floor_plan.floor_plan_id for floor_plan in floor_plans}
        for floor_plan_id, floor_plan in self._floor_plans.items():
            if floor_plan_id not in known_ids:
                logger.warning(
                    f"Floor plan {floor_plan_id} is referenced but not listed"
                )
                floor_plans.append(floor_plan)

        return Directory(
            kiosk=kiosk,
            floor_plans=floor_plans,
            places=places,
            categories=categories,
            ads=ads,
        )

    def deserialize_ads(self, fp: IO[bytes]) -> List[Ad]:
        """Parse an ads payload. Inactive ads are dropped, the rest are
        returned in rotation order."""
        ads = [self._parse_ad(raw) for raw in self._load_list(fp, "ads")]
        ads = [ad for ad in ads if ad.is_active]
        ads.sort(key=lambda ad: ad.display_order)
        return ads
