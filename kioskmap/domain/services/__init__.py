from .viewport import compute_fit, fit_points
from .navigation import MapNavigator
from .inactivity import InactivityTimer

__all__ = ["compute_fit", "fit_points", "MapNavigator", "InactivityTimer"]
