"""Device, 가로등 관련 entity → POI 변환"""

from ngsi2poi.transformers.common import (
    RenderContext,
    as_list,
    build_icon,
    build_poi,
    date_html,
    description_html,
    display,
    format_address,
    has_value,
    info_html,
    list_html,
    parse_key_values,
    wrap,
)


# ── Device ────────────────────────────────────────────────────────────────

def _device_values(entity: dict) -> list[str]:
    """value의 "key=value" 항목을 controlledProperty와 위치로 짝지어 표시한다.

    controlledProperty에 대응 항목이 없으면 key를 라벨로 사용한다.
    """
    properties = as_list(entity.get("controlledProperty"))
    items = []
    for i, pair in enumerate(parse_key_values(entity.get("value"))):
        if pair is None:
            continue
        label = properties[i] if i < len(properties) and properties[i] else pair.key
        items.append(f"<b>{label}</b>: {pair.value}")
    return items


def render_device(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """Device entity → POI. value 항목을 controlledProperty와 짝지어 표시한다."""
    category = as_list(entity.get("category"))
    icon_name = category[0] if len(category) == 1 else "generic"

    parts = [
        description_html(entity),
        format_address(entity.get("address")),
        date_html(entity.get("dateModified"), ctx.language),
        list_html("Values", _device_values(entity)),
    ]

    return build_poi(
        entity,
        coordinates,
        build_icon(f"images/devices/{icon_name}.png", ctx),
        entity.get("name"),
        wrap(parts),
    )


# ── Streetlight ───────────────────────────────────────────────────────────

def _illuminance_html(entity: dict) -> str:
    if entity.get("illuminanceLevel") is None:
        return ""
    return info_html(f"Illuminance level: {display(entity['illuminanceLevel'])}/1")


def render_streetlight(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """가로등 → POI. status가 ok가 아니면 notworking 아이콘."""
    status = entity.get("status")
    power_state = entity.get("powerState")

    if status != "ok":
        icon_name = "notworking"
    elif power_state == "off":
        icon_name = "off"
    else:
        icon_name = "on"

    parts = [
        description_html(entity),
        format_address(entity.get("address")),
    ]

    status_text = power_state if status == "ok" else status
    if status == "ok" and not status_text:
        status_text = "Unknown"
    if status_text:
        parts.append(info_html(f"Street light status: {display(status_text)}"))

    if entity.get("locationCategory") is not None:
        parts.append(info_html(f"Location: {display(entity['locationCategory'])}"))
    if entity.get("lanternHeight") is not None:
        parts.append(info_html(f"Height: {display(entity['lanternHeight'])}m"))
    parts.append(_illuminance_html(entity))

    return build_poi(
        entity,
        coordinates,
        build_icon(f"images/streetlight/{icon_name}.png", ctx),
        entity.get("areaServed"),
        wrap(parts),
    )


def render_streetlight_group(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """가로등 그룹 → POI."""
    power_state = entity.get("powerState")
    icon_name = "on" if power_state == "on" else "off"

    parts = [
        description_html(entity),
        format_address(entity.get("address")),
        info_html(f"Street light status: {display(power_state) if power_state else 'Unknown'}"),
    ]
    if has_value(entity.get("switchingMode")):
        parts.append(info_html(f"Switching mode: {display(entity['switchingMode'])}"))
    parts.append(_illuminance_html(entity))

    return build_poi(
        entity,
        coordinates,
        build_icon(f"images/streetlight/{icon_name}.png", ctx),
        entity.get("areaServed"),
        wrap(parts),
    )


def _mapping_items(value) -> list[str]:
    if not isinstance(value, dict):
        return []
    return [f"<b>{key}: </b>{display(item)}" for key, item in value.items()]


def render_streetlight_control_cabinet(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    parts = [
        description_html(entity),
        format_address(entity.get("address")),
    ]

    energy = entity.get("energyConsumed") or entity.get("lastMeterReading")
    if energy:
        parts.append(info_html(f"Energy consumed: {display(energy)} kW"))

    parts.append(list_html("Intensity", _mapping_items(entity.get("intensity"))))
    parts.append(list_html("Reactive power", _mapping_items(entity.get("reactivePower"))))

    return build_poi(
        entity,
        coordinates,
        build_icon("images/streetlight/cabinet.png", ctx),
        entity.get("areaServed"),
        wrap(parts),
    )
