"""폐기물 수거 및 Open311 민원 entity → POI 변환"""

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
    wrap,
)
from ngsi2poi.utils import percent


def render_waste_container(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """쓰레기통 → POI. status가 ok면 ok, 아니면 bad 아이콘."""
    status = entity.get("status")

    parts = [
        description_html(entity),
        format_address(entity.get("address")),
    ]
    if has_value(entity.get("category")):
        parts.append(info_html(f"Container type: {display(entity['category'])}"))
    if status:
        parts.append(info_html(f"Container status: {display(status)}"))
    if entity.get("fillingLevel") is not None:
        parts.append(info_html(f"Filling level: {percent(entity['fillingLevel'])}%"))

    return build_poi(
        entity,
        coordinates,
        build_icon(f"images/waste/{'ok' if status == 'ok' else 'bad'}.png", ctx),
        entity.get("serialNumber"),
        wrap(parts),
    )


def render_waste_container_isle(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    parts = [
        description_html(entity),
        format_address(entity.get("address")),
    ]
    if has_value(entity.get("features")):
        parts.append(info_html(f"Isle features: {display(entity['features'])}"))
    if entity.get("containers"):
        parts.append(info_html(f"Number of containers: {len(as_list(entity['containers']))}"))

    return build_poi(
        entity,
        coordinates,
        build_icon("images/waste/ok.png", ctx),
        entity.get("name"),
        wrap(parts),
    )


def render_service_request(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """Open311 민원 → POI. 구조화된 주소가 없으면 address_string을 표시한다."""
    status = entity.get("status")
    if status in ("open", "closed"):
        icon_name = status
    else:
        icon_name = "civicissues"

    address = format_address(entity.get("address"))
    if not address and entity.get("address_string"):
        address = f'<p><b><i class="fa fa-fw fa-address-card"/> Address: </b></p><p>{entity["address_string"]}</p>'

    parts = [description_html(entity), address]
    if status:
        text = display(status)
        if entity.get("status_notes"):
            text += f": {display(entity['status_notes'])}"
        parts.append(info_html(text, "Request status"))
    if entity.get("agency_responsible"):
        parts.append(info_html(display(entity["agency_responsible"]), "Responsible"))

    return build_poi(
        entity,
        coordinates,
        build_icon(f"images/civicissues/{icon_name}.png", ctx),
        entity.get("service_name"),
        wrap(parts),
    )
