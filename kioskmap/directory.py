"""Functions for loading the kiosk directory (kiosk, floor plans, places, ads)."""

from ._providers.directory import load, load_ads, load_api

__all__ = ["load", "load_ads", "load_api"]
