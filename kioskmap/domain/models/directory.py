from dataclasses import dataclass, field
from typing import List, Optional

from .geometry import Point


@dataclass(frozen=True)
class FloorPlan:
    """
    A single floor of the venue.

    Attributes:
        floor_plan_id: Identifier of the floor plan.
        name: Display name, e.g. "Ground floor".
        image_url: Location of the floor-plan image.
        display_order: Position of the floor in floor selectors.
    """

    floor_plan_id: str
    name: str
    image_url: str
    display_order: int = 0

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Category:
    """
    Attributes:
        category_id: Identifier of the category.
        name: Display name.
        icon_key: Key into the icon registry of the frontend.
    """

    category_id: str
    name: str
    icon_key: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Place:
    """
    A destination (shop, restaurant, service desk, ...) on a floor plan.

    Attributes:
        place_id: Identifier of the place.
        name: Display name.
        location: See [`Point`][kioskmap.domain.models.geometry.Point]
        floor_plan: See [`FloorPlan`][kioskmap.domain.models.directory.FloorPlan]
        description: Free text description.
        business_hours: Free text opening hours.
        logo_url: Location of the logo image, if any.
        cover_url: Location of the cover image, if any.
        category: See [`Category`][kioskmap.domain.models.directory.Category]
    """

    place_id: str
    name: str
    location: Point
    floor_plan: FloorPlan
    description: str = ""
    business_hours: str = ""
    logo_url: Optional[str] = None
    cover_url: Optional[str] = None
    category: Optional[Category] = None

    def matches(self, search_term: str) -> bool:
        """Case-insensitive substring match on name or description."""
        if not search_term:
            return True

        term = search_term.lower()
        return term in self.name.lower() or term in self.description.lower()

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Kiosk:
    """
    The physical kiosk the map is shown on.

    Attributes:
        kiosk_id: Identifier of the kiosk.
        name: Display name.
        location: Where the kiosk stands on its floor plan.
        floor_plan: The floor the kiosk is on.
    """

    kiosk_id: str
    name: str
    location: Point
    floor_plan: FloorPlan

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Ad:
    """
    Advertisement shown on the idle screen of a kiosk.

    Attributes:
        ad_id: Identifier of the ad.
        name: Internal name.
        image_url: Location of the ad image.
        is_active: Whether the ad is currently scheduled.
        display_order: Position in the rotation.
    """

    ad_id: str
    name: str
    image_url: str
    is_active: bool = True
    display_order: int = 0

    def __str__(self):
        return self.name


@dataclass
class Directory:
    kiosk: Kiosk
    floor_plans: List[FloorPlan] = field(default_factory=list)
    places: List[Place] = field(default_factory=list)
    categories: List[Category] = field(default_factory=list)
    ads: List[Ad] = field(default_factory=list)

    def get_floor_plan(self, floor_plan_id: str) -> Optional[FloorPlan]:
        for floor_plan in self.floor_plans:
            if floor_plan.floor_plan_id == floor_plan_id:
                return floor_plan
        return None

    def get_place(self, place_id: str) -> Optional[Place]:
        for place in self.places:
            if place.place_id == place_id:
                return place
        return None

    def get_category(self, category_id: str) -> Optional[Category]:
        for category in self.categories:
            if category.category_id == category_id:
                return category
        return None
