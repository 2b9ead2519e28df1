"""장소 entity (PointOfInterest, Beach, Museum, Garden) → POI 변환"""

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
    name_with_alternate,
    wrap,
)


def render_point_of_interest(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """PointOfInterest → POI. 아이콘은 첫 번째 category."""
    category = as_list(entity.get("category"))
    icon_name = category[0] if category else "poi"

    parts = [
        description_html(entity),
        format_address(entity.get("address")),
        date_html(entity.get("dateModified"), ctx.language),
    ]

    return build_poi(
        entity,
        coordinates,
        build_icon(f"images/poi/{icon_name}.png", ctx),
        entity.get("name"),
        wrap(parts),
    )


def render_beach(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """해변 → POI. 아이콘은 occupationRate, 없으면 unknown."""
    occupation = entity.get("occupationRate")

    parts = [
        description_html(entity),
        format_address(entity.get("address")),
    ]
    if occupation:
        parts.append(info_html(f"Occupation rate: {display(occupation)}"))
    parts.append(list_html("Beach characteristics", [display(i) for i in as_list(entity.get("beachType"))]))
    parts.append(list_html("Beach facilities", [display(i) for i in as_list(entity.get("facilities"))]))
    parts.append(list_html("Beach access", [display(i) for i in as_list(entity.get("accessType"))]))
    if entity.get("length"):
        parts.append(info_html(f"Length: {display(entity['length'])}m"))
    if entity.get("width"):
        parts.append(info_html(f"Width: {display(entity['width'])}m"))

    return build_poi(
        entity,
        coordinates,
        build_icon(f"images/beach/{occupation or 'unknown'}.png", ctx),
        name_with_alternate(entity),
        wrap(parts),
    )


def _opening_hours_items(entity: dict) -> list[str]:
    items = []
    for opening in as_list(entity.get("openingHoursSpecification")):
        if not isinstance(opening, dict) or not opening.get("dayOfWeek"):
            continue
        hours = " - ".join(str(opening[key]) for key in ("opens", "closes") if opening.get(key))
        items.append(f"<b>{display(opening['dayOfWeek'])}: </b>{hours}")
    return items


def render_museum(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """박물관 → POI. artPeriod가 있으면 historicalPeriod 대신 표시한다."""
    parts = [
        description_html(entity),
        format_address(entity.get("address")),
    ]

    if has_value(entity.get("artPeriod")):
        parts.append(info_html(display(entity["artPeriod"]), "Art period"))
    elif has_value(entity.get("historicalPeriod")):
        parts.append(info_html(display(entity["historicalPeriod"]), "Historical period"))

    if has_value(entity.get("museumType")):
        parts.append(info_html(display(entity["museumType"]), "Museum type"))
    if entity.get("buildingType"):
        parts.append(info_html(display(entity["buildingType"]), "Building type"))

    parts.append(list_html("Opening hours", _opening_hours_items(entity)))
    parts.append(list_html("Museum facilities", [display(i) for i in as_list(entity.get("facilities"))]))

    return build_poi(
        entity,
        coordinates,
        build_icon("images/museum/museum.png", ctx),
        name_with_alternate(entity),
        wrap(parts),
    )


def render_garden(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    parts = [
        description_html(entity),
        format_address(entity.get("address")),
    ]
    if has_value(entity.get("category")):
        parts.append(info_html(display(entity["category"]), "Category"))
    if entity.get("style"):
        parts.append(info_html(display(entity["style"]), "Garden style"))
    if entity.get("openingHours"):
        parts.append(info_html(display(entity["openingHours"]), "Open hours"))

    return build_poi(
        entity,
        coordinates,
        build_icon("images/garden/garden.png", ctx),
        name_with_alternate(entity),
        wrap(parts),
    )
