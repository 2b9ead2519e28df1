"""OffStreetParking / OnStreetParking → POI 변환

레벨 이름은 혼잡도 기준이다. 빈 자리가 적을수록 높은 레벨(veryhigh)이 된다.
"""

from ngsi2poi.transformers.common import (
    RenderContext,
    build_icon,
    build_poi,
    date_html,
    description_html,
    format_address,
    info_html,
    wrap,
)
from ngsi2poi.transformers.tables import LEVEL_STYLES
from ngsi2poi.utils import format_number, to_number


def off_street_level(entity: dict) -> str:
    if entity.get("availableSpotNumber") is None:
        return "unknown"
    spots = to_number(entity["availableSpotNumber"])
    if spots <= 5:
        return "veryhigh"
    if spots <= 10:
        return "high"
    if spots <= 20:
        return "moderate"
    if spots <= 40:
        return "low"
    return "verylow"


def on_street_level(entity: dict) -> str:
    if entity.get("availableSpotNumber") is None:
        return "unknown"
    spots = to_number(entity["availableSpotNumber"])
    if spots == 0:
        return "veryhigh"
    if spots < 2:
        return "high"
    if spots <= 5:
        return "moderate"
    if spots <= 10:
        return "low"
    return "verylow"


def _build_parking_info_window(entity: dict, ctx: RenderContext) -> str:
    parts = [
        description_html(entity),
        format_address(entity.get("address")),
        date_html(entity.get("dateModified"), ctx.language),
    ]

    available = entity.get("availableSpotNumber")
    total = entity.get("totalSpotNumber")
    if available is not None and total is not None:
        parts.append(info_html(
            f"{format_number(available)} available parking spots out of {format_number(total)}"
        ))
    elif available is not None:
        parts.append(info_html(f"{format_number(available)} available parking spots"))

    return wrap(parts)


def _render_parking(entity: dict, coordinates: dict, ctx: RenderContext, level: str) -> dict:
    return build_poi(
        entity,
        coordinates,
        build_icon(f"images/parking/{level}.png", ctx),
        entity.get("name"),
        _build_parking_info_window(entity, ctx),
        style=LEVEL_STYLES[level],
    )


def render_off_street_parking(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """노외 주차장 → POI. 레벨은 off_street_level() 기준."""
    return _render_parking(entity, coordinates, ctx, off_street_level(entity))


def render_on_street_parking(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """노상 주차 구역 → POI. 레벨은 on_street_level() 기준."""
    return _render_parking(entity, coordinates, ctx, on_street_level(entity))
