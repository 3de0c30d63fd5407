import logging
from typing import Dict, List, Optional

from kioskmap.domain.models import (
    Ad,
    Directory,
    FloorPlan,
    Insets,
    Place,
    Transform,
    ViewSize,
)
from kioskmap.exceptions import KioskMapParameterError

from .viewport import compute_fit

logger = logging.getLogger(__name__)


class MapNavigator:
    """Screen state of a kiosk map: current floor, selection and filters.

    Selecting a place returns the transform that shows the kiosk and the
    place together. The map UI applies that transform to its pan-zoom view.
    """

    def __init__(
        self,
        directory: Directory,
        view_size: ViewSize,
        insets: Optional[Insets] = None,
        padding: Optional[float] = None,
        max_scale: Optional[float] = None,
    ):
        self.directory = directory
        self.view_size = view_size
        self.insets = insets
        self.padding = padding
        self.max_scale = max_scale

        self.current_floor_plan_id = directory.kiosk.floor_plan.floor_plan_id
        self.selected_place: Optional[Place] = None
        self.search_term: Optional[str] = None
        self.category_id: Optional[str] = None
        self.idle = False

    @property
    def kiosk(self):
        return self.directory.kiosk

    @property
    def current_floor_plan(self) -> Optional[FloorPlan]:
        return self.directory.get_floor_plan(self.current_floor_plan_id)

    @property
    def kiosk_visible(self) -> bool:
        return (
            self.kiosk.floor_plan.floor_plan_id == self.current_floor_plan_id
        )

    @property
    def visible_places(self) -> List[Place]:
        return [
            place
            for place in self.directory.places
            if place.floor_plan.floor_plan_id == self.current_floor_plan_id
            and self._passes_filters(place)
        ]

    @property
    def floor_result_counts(self) -> Dict[str, int]:
        """Number of places passing the filters per floor plan id. Floors
        without a match are left out."""
        counts: Dict[str, int] = {}
        for place in self.directory.places:
            if self._passes_filters(place):
                floor_plan_id = place.floor_plan.floor_plan_id
                counts[floor_plan_id] = counts.get(floor_plan_id, 0) + 1
        return counts

    def _passes_filters(self, place: Place) -> bool:
        if self.category_id is not None and (
            place.category is None
            or place.category.category_id != self.category_id
        ):
            return False
        return place.matches(self.search_term)

    def _fit(self, place: Place) -> Transform:
        return compute_fit(
            self.kiosk.location,
            place.location,
            self.view_size,
            padding=self.padding,
            max_scale=self.max_scale,
            insets=self.insets,
        )

    def change_floor(self, floor_plan_id: str):
        if self.directory.get_floor_plan(floor_plan_id) is None:
            raise KioskMapParameterError(
                f"Unknown floor plan '{floor_plan_id}'"
            )
        self.current_floor_plan_id = floor_plan_id

    def select_place(self, place: Optional[Place]) -> Optional[Transform]:
        self.selected_place = place
        if place is None:
            return None
        return self._fit(place)

    def show_on_map(self, place: Place) -> Transform:
        floor_plan_id = place.floor_plan.floor_plan_id
        if floor_plan_id != self.current_floor_plan_id:
            logger.debug(
                f"Switching to floor {floor_plan_id} to show {place.name}"
            )
            self.change_floor(floor_plan_id)
        return self.select_place(place)

    def set_filters(
        self,
        search_term: Optional[str] = None,
        category_id: Optional[str] = None,
    ):
        self.search_term = search_term or None
        self.category_id = category_id

    def reset_filters(self):
        self.set_filters()

    def resize(self, view_size: ViewSize) -> Optional[Transform]:
        self.view_size = view_size
        if self.selected_place is None:
            return None
        return self._fit(self.selected_place)

    def go_idle(self) -> List[Ad]:
        """Enter the idle screen and return the ads to rotate through."""
        self.idle = True
        self.select_place(None)
        return list(self.directory.ads)

    def reset(self) -> Transform:
        self.idle = False
        self.select_place(None)
        self.reset_filters()
        self.current_floor_plan_id = self.kiosk.floor_plan.floor_plan_id
        return Transform.identity()
