import logging
from typing import List, Optional
from urllib.parse import urlencode

from kioskmap.config import get_config
from kioskmap.domain import Ad, Directory
from kioskmap.exceptions import KioskMapParameterError
from kioskmap.infra.serializers.directory import (
    DirectoryDeserializer,
    DirectoryInputs,
)
from kioskmap.io import FileLike, Source, open_as_file

logger = logging.getLogger(__name__)


def _resolve_base_url(base_url: Optional[str]) -> str:
    base_url = base_url or get_config("api.base_url")
    if not base_url:
        raise KioskMapParameterError(
            "No API base url given. Pass base_url or set the 'api.base_url' config."
        )
    return base_url.rstrip("/")


def load(
    kiosk_data: FileLike,
    floor_plans_data: FileLike,
    places_data: FileLike,
    categories_data: Optional[FileLike] = None,
    ads_data: Optional[FileLike] = None,
) -> Directory:
    """
    Load the directory of a kiosk.

    Args:
        kiosk_data: JSON document describing the kiosk, including its floor plan.
        floor_plans_data: JSON list of all floor plans.
        places_data: JSON list of places.
        categories_data: JSON list of place categories.
        ads_data: JSON list of ads shown while the kiosk is idle.

    Returns:
        The parsed directory.
    """
    deserializer = DirectoryDeserializer()
    with open_as_file(kiosk_data) as kiosk_data_fp, open_as_file(
        floor_plans_data
    ) as floor_plans_data_fp, open_as_file(
        places_data
    ) as places_data_fp, open_as_file(
        Source.create(categories_data, optional=True)
    ) as categories_data_fp, open_as_file(
        Source.create(ads_data, optional=True)
    ) as ads_data_fp:
        return deserializer.deserialize(
            inputs=DirectoryInputs(
                kiosk_data=kiosk_data_fp,
                floor_plans_data=floor_plans_data_fp,
                places_data=places_data_fp,
                categories_data=categories_data_fp,
                ads_data=ads_data_fp,
            )
        )


def load_ads(ads_data: FileLike) -> List[Ad]:
    """
    Load the active ads, in rotation order.

    Args:
        ads_data: JSON list of ads.
    """
    deserializer = DirectoryDeserializer()
    with open_as_file(ads_data) as ads_data_fp:
        return deserializer.deserialize_ads(ads_data_fp)


def load_api(
    kiosk_id: str,
    base_url: Optional[str] = None,
    search_term: Optional[str] = None,
    category_id: Optional[str] = None,
    ads: bool = False,
) -> Directory:
    """
    Load the directory of a kiosk from the kiosk HTTP API.

    Args:
        kiosk_id: The id of the kiosk.
        base_url: Root of the API. Defaults to the `api.base_url` config.
        search_term: Only load places whose name or description matches.
        category_id: Only load places in this category.
        ads: Also load the active ads from `/ads/active`.

    Returns:
        The parsed directory.
    """
    base_url = _resolve_base_url(base_url)

    params = {}
    if search_term:
        params["searchTerm"] = search_term
    if category_id:
        params["categoryId"] = category_id

    places_url = f"{base_url}/places"
    if params:
        places_url += f"?{urlencode(params)}"

    logger.info(f"Loading directory for kiosk {kiosk_id} from {base_url}")
    return load(
        kiosk_data=f"{base_url}/kiosks/{kiosk_id}/public",
        floor_plans_data=f"{base_url}/floor-plans",
        places_data=places_url,
        categories_data=f"{base_url}/categories",
        ads_data=f"{base_url}/ads/active" if ads else None,
    )
