"""
Text products service.

NWS text products (AFD, HWO, ZFP, ...): single products, searches by
office/location/type, and the product type and issuance location lists.
"""

import logging
from datetime import datetime
from typing import List, Optional

from noaa_weather.configuration import Configuration
from noaa_weather.data_ingestion.nws_http import encode_path_param, fetch
from noaa_weather.models.products import (
    TextProduct,
    TextProductCollection,
    TextProductLocationCollection,
    TextProductTypeCollection,
)

logger = logging.getLogger(__name__)


async def get_products_by_location(configuration: Configuration, location_id: str) -> TextProductTypeCollection:
    """Product types issued for ``location_id``."""
    path = f"/products/locations/{encode_path_param(location_id)}/types"
    return await fetch(configuration, path, TextProductTypeCollection, send_api_key=True)


async def get_product(configuration: Configuration, product_id: str) -> TextProduct:
    return await fetch(configuration, f"/products/{encode_path_param(product_id)}", TextProduct, send_api_key=True)


async def get_product_locations(configuration: Configuration) -> TextProductLocationCollection:
    return await fetch(configuration, "/products/locations", TextProductLocationCollection, send_api_key=True)


async def get_product_types(configuration: Configuration) -> TextProductTypeCollection:
    return await fetch(configuration, "/products/types", TextProductTypeCollection, send_api_key=True)


async def get_products(
    configuration: Configuration,
    *,
    location: Optional[List[str]] = None,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    office: Optional[List[str]] = None,
    wmoid: Optional[List[str]] = None,
    type: Optional[List[str]] = None,
    limit: Optional[int] = None,
) -> TextProductCollection:
    """Search products. ``office`` takes 4-letter CCCC ids (e.g. KBOU)."""
    query = {
        "location": location,
        "start": start,
        "end": end,
        "office": office,
        "wmoid": wmoid,
        "type": type,
        "limit": limit,
    }
    return await fetch(configuration, "/products", TextProductCollection, query=query, send_api_key=True)


async def get_products_by_type(configuration: Configuration, type_id: str) -> TextProductCollection:
    return await fetch(
        configuration, f"/products/types/{encode_path_param(type_id)}", TextProductCollection, send_api_key=True
    )


async def get_products_by_type_and_location(
    configuration: Configuration, type_id: str, location_id: str
) -> TextProductCollection:
    path = f"/products/types/{encode_path_param(type_id)}/locations/{encode_path_param(location_id)}"
    return await fetch(configuration, path, TextProductCollection, send_api_key=True)


async def get_product_issuance_locations_by_type(
    configuration: Configuration, type_id: str
) -> TextProductLocationCollection:
    path = f"/products/types/{encode_path_param(type_id)}/locations"
    return await fetch(configuration, path, TextProductLocationCollection, send_api_key=True)
