from typing import Iterable, Optional

from kioskmap.config import get_config
from kioskmap.domain.models import Bounds, Insets, Point, Transform, ViewSize


def fit_points(
    points: Iterable[Point],
    view_size: ViewSize,
    padding: Optional[float] = None,
    max_scale: Optional[float] = None,
    insets: Optional[Insets] = None,
) -> Transform:
    """
    Calculate the pan and zoom that fit all points within the viewport.

    The bounding box of the points, grown by `padding` on every side, is
    scaled to fit the part of the viewport not covered by `insets` and
    centered in it. The zoom never exceeds `max_scale`.

    Arguments:
        points: One or more points in floor-plan coordinates.
        view_size: See [`ViewSize`][kioskmap.domain.models.geometry.ViewSize]
        padding: Margin to keep clear around the bounding box, in floor-plan
            units. Defaults to the `fit.padding` config.
        max_scale: Zoom cap. Defaults to the `fit.max_scale` config.
        insets: See [`Insets`][kioskmap.domain.models.geometry.Insets]

    Returns:
        See [`Transform`][kioskmap.domain.models.geometry.Transform]

    Note:
        When the padded box has no width or height (coincident points and
        no padding) a `ZeroDivisionError` is raised. Callers are responsible
        for passing a positive padding.
    """
    if padding is None:
        padding = get_config("fit.padding")
    if max_scale is None:
        max_scale = get_config("fit.max_scale")
    if insets is None:
        insets = Insets.none()

    bounds = Bounds.from_points(*points)

    available_width = view_size.width - insets.left - insets.right
    available_height = view_size.height - insets.top - insets.bottom

    scale_x = available_width / (bounds.width + padding * 2)
    scale_y = available_height / (bounds.height + padding * 2)
    scale = min(scale_x, scale_y, max_scale)

    center = bounds.center
    return Transform(
        x=insets.left + available_width / 2 - center.x * scale,
        y=insets.top + available_height / 2 - center.y * scale,
        scale=scale,
    )


def compute_fit(
    point_a: Point,
    point_b: Point,
    view_size: ViewSize,
    padding: Optional[float] = None,
    max_scale: Optional[float] = None,
    insets: Optional[Insets] = None,
) -> Transform:
    """
    Calculate the pan and zoom that show both points with padding around them.

    Typically `point_a` is the kiosk location and `point_b` the selected
    destination. See [`fit_points`][kioskmap.domain.services.viewport.fit_points]
    """
    return fit_points(
        (point_a, point_b),
        view_size,
        padding=padding,
        max_scale=max_scale,
        insets=insets,
    )
