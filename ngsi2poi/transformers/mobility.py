"""Vehicle / BikeHireDockingStation → POI 변환"""

from ngsi2poi.transformers.common import (
    RenderContext,
    as_list,
    build_icon,
    build_poi,
    description_html,
    display,
    format_address,
    has_value,
    info_html,
    list_html,
    wrap,
)
from ngsi2poi.transformers.tables import BIKE_STATUS_PRIORITY


# ── Vehicle ───────────────────────────────────────────────────────────────

def vehicle_title(entity: dict) -> str:
    """name (번호판 또는 차대번호) → 번호판/차대번호 → id"""
    identifier = entity.get("vehiclePlateIdentifier") or entity.get("vehicleIdentificationNumber")
    name = entity.get("name")
    if name and identifier:
        return f"{name} ({identifier})"
    return name or identifier or entity["id"]


def _vehicle_icon_name(entity: dict) -> str:
    vehicle_type = entity.get("vehicleType") or "generic"
    service_status = entity.get("serviceStatus")
    if isinstance(service_status, str) and service_status.strip():
        return f"{vehicle_type}-{service_status.split(',')[0].strip()}"
    return vehicle_type


def render_vehicle(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """차량 → POI. 아이콘은 vehicleType과 serviceStatus 첫 항목 조합."""
    parts = [
        description_html(entity),
        format_address(entity.get("address")),
    ]
    if entity.get("vehicleType"):
        parts.append(info_html(display(entity["vehicleType"]), "Type"))
    if has_value(entity.get("category")):
        parts.append(info_html(display(entity["category"]), "Category"))
    parts.append(list_html("Services provided", [display(s) for s in as_list(entity.get("serviceProvided"))]))
    if entity.get("serviceStatus"):
        parts.append(info_html(display(entity["serviceStatus"]), "Service status"))
    if entity.get("vehicleSpecialUsage"):
        parts.append(info_html(display(entity["vehicleSpecialUsage"]), "Special usage"))
    if entity.get("speed"):
        parts.append(info_html(display(entity["speed"]), "Speed"))
    if entity.get("cargoWeight"):
        parts.append(info_html(display(entity["cargoWeight"]), "Cargo weight"))

    return build_poi(
        entity,
        coordinates,
        build_icon(f"images/vehicle/{_vehicle_icon_name(entity)}.png", ctx),
        vehicle_title(entity),
        wrap(parts),
    )


# ── BikeHireDockingStation ────────────────────────────────────────────────

def bike_station_status(entity: dict) -> str:
    """우선순위 목록에서 status에 처음 포함되는 값을 고른다. 없으면 "working"."""
    status = entity.get("status")
    if not status or not isinstance(status, (str, list, tuple)):
        return "working"
    for candidate in BIKE_STATUS_PRIORITY:
        if candidate in status:
            return candidate
    return "working"


def render_bike_hire_docking_station(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """자전거 대여소 → POI.

    아이콘은 bike_station_status() 결과, 빈 슬롯 수는 전체 슬롯 수가 있으면 "N/M"으로 표시한다.
    """
    parts = [
        description_html(entity),
        format_address(entity.get("address")),
    ]
    if has_value(entity.get("status")):
        parts.append(info_html(display(entity["status"]), "Status"))
    if entity.get("availableBikeNumber"):
        parts.append(info_html(display(entity["availableBikeNumber"]), "Available bikes"))
    if entity.get("freeSlotNumber"):
        free = display(entity["freeSlotNumber"])
        if entity.get("totalSlotNumber"):
            free += f"/{display(entity['totalSlotNumber'])}"
        parts.append(info_html(free, "Free slots"))
    if entity.get("outOfServiceSlotNumber"):
        parts.append(info_html(display(entity["outOfServiceSlotNumber"]), "Out of service slots"))
    if entity.get("openingHours"):
        parts.append(info_html(display(entity["openingHours"]), "Open hours"))

    return build_poi(
        entity,
        coordinates,
        build_icon(f"images/bikestation/{bike_station_status(entity)}.png", ctx),
        entity.get("name"),
        wrap(parts),
    )
