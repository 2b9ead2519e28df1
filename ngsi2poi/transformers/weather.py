"""WeatherForecast / WeatherObserved → POI 변환"""

from ngsi2poi.transformers.common import (
    RenderContext,
    build_icon,
    build_poi,
    date_html,
    display,
    format_address,
    format_date_range,
    info_html,
    wrap,
)
from ngsi2poi.utils import percent


def _weather_icon(entity: dict, ctx: RenderContext) -> dict:
    weather_type = entity.get("weatherType")
    if weather_type:
        name = str(weather_type).replace(" ", "")
    else:
        name = "weather"
    return build_icon(f"images/weather/{name}.png", ctx, kind="weather")


def _wind_html(entity: dict) -> list[str]:
    parts = []
    if entity.get("windSpeed"):
        parts.append(info_html(f"{display(entity['windSpeed'])}m/s", "Wind speed"))
    if entity.get("windDirection"):
        parts.append(info_html(f"{display(entity['windDirection'])}º", "Wind direction"))
    return parts


def _temperature_html(entity: dict) -> str:
    if not entity.get("temperature"):
        return ""
    return (
        '<p><i class="fa fa-fw fa-thermometer-half"/> <b>Temperature:</b> '
        f"{display(entity['temperature'])}ºC</p>"
    )


def _humidity_html(entity: dict) -> str:
    if not entity.get("relativeHumidity"):
        return ""
    return f'<p><i class="fa fa-fw fa-tint"/> <b>Humidity:</b> {percent(entity["relativeHumidity"])}%</p>'


# ── WeatherForecast ───────────────────────────────────────────────────────

def _forecast_title(entity: dict) -> str:
    address = entity.get("address")
    if not isinstance(address, dict) or not address.get("addressLocality"):
        return entity["id"]
    if address.get("addressRegion"):
        return f"{address['addressLocality']} ({address['addressRegion']})"
    return address["addressLocality"]


def render_weather_forecast(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """기상 예보 entity를 POI로 변환한다.

    Args:
        entity: WeatherForecast entity (dateIssued, validFrom/validTo, weatherType 등)
        coordinates: to_coordinates() 결과
        ctx: 언어 / 아이콘 기준 URL
    """
    parts = [
        format_address(entity.get("address")),
        date_html(entity.get("dateIssued") or entity.get("dateObserved"), ctx.language),
    ]

    if entity.get("validFrom") and entity.get("validTo"):
        validity = format_date_range(entity["validFrom"], entity["validTo"], ctx.language)
        parts.append(info_html(validity, "Validity"))

    parts.append(_temperature_html(entity))
    if entity.get("feelsLikeTemperature"):
        parts.append(
            '<p><i class="fa fa-fw fa-thermometer-half"/> <b>Feels Like:</b> '
            f"{display(entity['feelsLikeTemperature'])}ºC</p>"
        )
    parts.append(_humidity_html(entity))
    parts.extend(_wind_html(entity))
    if entity.get("precipitationProbability"):
        parts.append(info_html(f"{percent(entity['precipitationProbability'])}%", "Precipitation probability"))

    return build_poi(
        entity,
        coordinates,
        _weather_icon(entity, ctx),
        _forecast_title(entity),
        wrap(parts),
    )


# ── WeatherObserved ───────────────────────────────────────────────────────

def _pressure_html(entity: dict) -> str:
    pressure = entity.get("barometricPressure")
    tendency = entity.get("pressureTendency")
    if pressure:
        text = f"{display(pressure)}hPa"
        if tendency:
            text += f" ({display(tendency)})"
        return info_html(text, "Pressure")
    if tendency:
        return info_html(display(tendency), "Pressure tendency")
    return ""


def render_weather_observed(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """기상 관측 → POI. 제목은 name → stationName → id."""
    parts = [
        format_address(entity.get("address")),
        date_html(entity.get("dateObserved"), ctx.language),
        _pressure_html(entity),
        _temperature_html(entity),
    ]
    if entity.get("precipitation"):
        parts.append(info_html(f"{display(entity['precipitation'])}l/m<sup>2</sup>", "Precipitation"))
    parts.append(_humidity_html(entity))
    parts.extend(_wind_html(entity))

    return build_poi(
        entity,
        coordinates,
        _weather_icon(entity, ctx),
        entity.get("name") or entity.get("stationName"),
        wrap(parts),
    )
