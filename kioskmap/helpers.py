import logging
from typing import Mapping, Optional, Sequence, Union
from urllib.parse import urlsplit

from .config import get_config
from .domain import Insets, Point, Transform, ViewSize, compute_fit

logger = logging.getLogger(__name__)

PointLike = Union[Point, Sequence[float], Mapping[str, float]]
ViewSizeLike = Union[ViewSize, Sequence[float], Mapping[str, float]]
InsetsLike = Union[Insets, Sequence[float], Mapping[str, float]]


def to_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    if isinstance(value, Mapping):
        return Point(x=float(value["x"]), y=float(value["y"]))
    x, y = value
    return Point(x=float(x), y=float(y))


def to_view_size(value: ViewSizeLike) -> ViewSize:
    if isinstance(value, ViewSize):
        return value
    if isinstance(value, Mapping):
        return ViewSize(
            width=float(value["width"]), height=float(value["height"])
        )
    width, height = value
    return ViewSize(width=float(width), height=float(height))


def to_insets(value: InsetsLike) -> Insets:
    """Insets from an object, a mapping or a CSS-like (top, right, bottom, left)."""
    if isinstance(value, Insets):
        return value
    if isinstance(value, Mapping):
        return Insets(**{key: float(v) for key, v in value.items()})
    top, right, bottom, left = value
    return Insets(
        top=float(top), right=float(right), bottom=float(bottom), left=float(left)
    )


def fit(
    point_a: PointLike,
    point_b: PointLike,
    view_size: ViewSizeLike,
    padding: Optional[float] = None,
    max_scale: Optional[float] = None,
    insets: Optional[InsetsLike] = None,
) -> Transform:
    # convert raw input to objects
    return compute_fit(
        to_point(point_a),
        to_point(point_b),
        to_view_size(view_size),
        padding=padding,
        max_scale=max_scale,
        insets=to_insets(insets) if insets is not None else None,
    )


def asset_url(path: Optional[str], base_url: Optional[str] = None) -> str:
    """
    Resolve an asset path (logo, floor-plan image, ad) against the origin of
    the API. Without a usable base url the path is returned unchanged.

    Examples:
        >>> asset_url("uploads/logo.png", "http://localhost:3000/api")
        'http://localhost:3000/uploads/logo.png'
    """
    if not path:
        return ""

    base_url = base_url or get_config("api.base_url")
    parts = urlsplit(base_url or "")
    if not parts.scheme or not parts.netloc:
        logger.warning(
            f"Invalid API base url for generating asset url: {base_url!r}"
        )
        return path

    return f"{parts.scheme}://{parts.netloc}/{path.lstrip('/')}"


__all__ = ["fit", "to_point", "to_view_size", "to_insets", "asset_url"]
