"""NGSI entity type → 렌더러 매핑과 entity 단위 dispatch"""

import logging
from collections.abc import Callable

from ngsi2poi.transformers import alerts, devices, environment, mobility, parking, places, waste, weather
from ngsi2poi.transformers.common import RenderContext, has_location, to_coordinates

_LOGGER = logging.getLogger(__name__)

Renderer = Callable[[dict, dict, RenderContext], dict]

RENDERERS: dict[str, Renderer] = {
    "AirQualityObserved": environment.render_air_quality_observed,
    "WaterQualityObserved": environment.render_water_quality_observed,
    "NoiseLevelObserved": environment.render_noise_level_observed,
    "NightSkyQuality": environment.render_night_sky_quality,

    "OffStreetParking": parking.render_off_street_parking,
    "OnStreetParking": parking.render_on_street_parking,

    "WeatherForecast": weather.render_weather_forecast,
    "WeatherObserved": weather.render_weather_observed,

    "PointOfInterest": places.render_point_of_interest,
    "Beach": places.render_beach,
    "Museum": places.render_museum,
    "Garden": places.render_garden,

    "Device": devices.render_device,
    "Streetlight": devices.render_streetlight,
    "StreetlightGroup": devices.render_streetlight_group,
    "StreetlightControlCabinet": devices.render_streetlight_control_cabinet,

    "WasteContainer": waste.render_waste_container,
    "WasteContainerIsle": waste.render_waste_container_isle,
    "Open311:ServiceRequest": waste.render_service_request,

    "Vehicle": mobility.render_vehicle,
    "BikeHireDockingStation": mobility.render_bike_hire_docking_station,

    "KeyPerformanceIndicator": alerts.render_key_performance_indicator,
    "Alert": alerts.render_alert,
}


def dispatch(entity: dict, ctx: RenderContext | None = None) -> dict | None:
    """entity 하나를 type에 맞는 렌더러로 POI로 변환한다.

    지원하지 않는 type은 로그를 남기고 건너뛴다. location이 없거나
    올바른 GeoJSON Point가 아니면 로그 없이 건너뛴다.

    Returns:
        POI dict 또는 None (건너뛴 경우)
    """
    entity_type = entity.get("type")
    renderer = RENDERERS.get(entity_type) if isinstance(entity_type, str) else None
    if renderer is None:
        _LOGGER.info("Entity type is not supported: %s", entity_type)
        return None

    if not has_location(entity):
        return None

    coordinates = to_coordinates(entity["location"])
    return renderer(entity, coordinates, ctx or RenderContext())
