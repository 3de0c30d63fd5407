from .geometry import Bounds, Insets, Point, Transform, ViewSize
from .directory import Ad, Category, Directory, FloorPlan, Kiosk, Place

__all__ = [
    "Bounds",
    "Insets",
    "Point",
    "Transform",
    "ViewSize",
    "Ad",
    "Category",
    "Directory",
    "FloorPlan",
    "Kiosk",
    "Place",
]
