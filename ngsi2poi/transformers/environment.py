"""환경 관측 entity (대기질, 수질, 소음, 밤하늘) → POI 변환"""

from ngsi2poi.transformers.common import (
    RenderContext,
    build_icon,
    build_poi,
    date_html,
    description_html,
    display,
    format_address,
    format_date_range,
    info_html,
    list_html,
    name_with_alternate,
    parse_measurands,
    wrap,
)
from ngsi2poi.transformers.tables import (
    LEVEL_STYLES,
    NIGHT_SKY_STYLES,
    POLLUTANTS,
    UNITS,
    WATER_MEASURES,
)
from ngsi2poi.utils import format_number, percent, round_to, to_number


def _observed_date_html(entity: dict, language: str) -> str:
    """dateObserved, 없으면 dateObservedFrom/dateObservedTo 쌍을 사용한다."""
    if entity.get("dateObserved"):
        return date_html(entity["dateObserved"], language)
    if entity.get("dateObservedFrom") and entity.get("dateObservedTo"):
        text = format_date_range(entity["dateObservedFrom"], entity["dateObservedTo"], language)
        return f'<p><b><i class="fa fa-fw fa-clock-o"/> Date: </b> {text}</p>'
    return ""


def _source_html(entity: dict) -> str:
    if not entity.get("source"):
        return ""
    return f'<p><b><i class="fa fa-fw fa-feed"/> Source: </b> {entity["source"]}</p>'


def _measurand_items(entity: dict, digits: int) -> list[str]:
    items = []
    for measurand in parse_measurands(entity.get("measurand")):
        value = format_number(round_to(measurand.value, digits))
        unit = UNITS.get(measurand.unit, measurand.unit) if measurand.unit else ""
        items.append(f"<b>{measurand.name}</b>: {value} {unit}".rstrip())
    return items


# ── AirQualityObserved ────────────────────────────────────────────────────

def air_quality_level(entity: dict) -> str:
    """NO2 (µg/m³) 값으로 대기질 레벨을 결정한다."""
    if "NO2" not in entity or entity["NO2"] is None:
        return "unknown"
    no2 = to_number(entity["NO2"])
    if no2 <= 50:
        return "verylow"
    if no2 <= 100:
        return "low"
    if no2 <= 200:
        return "moderate"
    if no2 <= 400:
        return "high"
    return "veryhigh"


def _air_quality_title(entity: dict) -> str:
    name = entity.get("stationName")
    if not name:
        return entity["id"]
    if entity.get("stationCode"):
        return f"{name} ({entity['stationCode']})"
    return name


def render_air_quality_observed(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """대기질 관측 entity를 POI로 변환한다.

    Args:
        entity: AirQualityObserved entity (NO2 등 오염물질 속성, measurand 리스트)
        coordinates: to_coordinates() 결과
        ctx: 언어 / 아이콘 기준 URL

    Returns:
        NO2 레벨별 style이 포함된 POI dict
    """
    level = air_quality_level(entity)

    parts = [
        format_address(entity.get("address")),
        _observed_date_html(entity, ctx.language),
        _source_html(entity),
    ]

    measures = [
        f"<b>{name}</b>: {format_number(round_to(entity[name], 2))} {unit}"
        for name, unit in POLLUTANTS
        if entity.get(name) is not None
    ]
    measures.extend(_measurand_items(entity, 2))
    parts.append(list_html("Measures", measures))

    return build_poi(
        entity,
        coordinates,
        build_icon(f"images/airquality/{level}.png", ctx),
        _air_quality_title(entity),
        wrap(parts),
        style=LEVEL_STYLES[level],
    )


# ── WaterQualityObserved ──────────────────────────────────────────────────

def water_quality_status(entity: dict) -> str:
    """용존산소(O2)와 pH가 허용 범위를 벗어나면 "bad"."""
    o2 = entity.get("O2")
    if o2:
        o2 = to_number(o2)
        if o2 < 4.0 or o2 > 12.0:
            return "bad"
    ph = entity.get("pH")
    if ph:
        ph = to_number(ph)
        if ph < 6.5 or ph > 9.0:
            return "bad"
    return "good"


def _water_quality_title(entity: dict) -> str:
    address = entity.get("address")
    if isinstance(address, str) and address:
        return address
    if isinstance(address, dict):
        label = address.get("streetAddress") or address.get("addressLocality")
        if label:
            return label
    return entity["id"]


def render_water_quality_observed(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """수질 관측 entity를 POI로 변환한다.

    측정값은 소수점 4자리, 화학 성분(measurand)은 3자리로 반올림한다.
    """
    status = water_quality_status(entity)

    parts = [
        format_address(entity.get("address")),
        _observed_date_html(entity, ctx.language),
        _source_html(entity),
    ]

    measures = []
    for measure in WATER_MEASURES:
        if entity.get(measure["name"]):
            value = format_number(round_to(entity[measure["name"]], 4))
            measures.append(f"<b>{measure['title']}</b>: {value} {measure['unit']}".rstrip())
    parts.append(list_html("Measures", measures))
    parts.append(list_html("Chemical agents", _measurand_items(entity, 3)))

    return build_poi(
        entity,
        coordinates,
        build_icon(f"images/waterquality/{status}.png", ctx),
        _water_quality_title(entity),
        wrap(parts),
    )


# ── NoiseLevelObserved ────────────────────────────────────────────────────

def render_noise_level_observed(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """소음 관측 → POI. measurand는 "name|value" 형식."""
    parts = [
        description_html(entity),
        format_address(entity.get("address")),
        _observed_date_html(entity, ctx.language),
    ]

    if entity.get("sonometerClass") is not None:
        parts.append(
            f'<p><b><i class="fa fa-fw fa-info"/> Sonometer class: </b> {entity["sonometerClass"]}</p>'
        )

    parameters = [
        f"<b>{measurand.name}</b>: {format_number(round_to(measurand.value, 2))}"
        for measurand in parse_measurands(entity.get("measurand"), separator="|")
    ]
    parts.append(list_html("Acoustic parameters", parameters))

    return build_poi(
        entity,
        coordinates,
        build_icon("images/noiselevel/noise.png", ctx),
        entity.get("name"),
        wrap(parts),
    )


# ── NightSkyQuality ───────────────────────────────────────────────────────

def night_sky_level(entity: dict) -> str:
    """skyMagnitude (mag/arcsec²)로 밤하늘 품질 레벨을 결정한다."""
    if entity.get("skyMagnitude") is None:
        return "unknown"
    magnitude = to_number(entity["skyMagnitude"])
    if magnitude < 17.5:
        return "verydeficient"
    if magnitude < 18:
        return "deficient"
    if magnitude < 19:
        return "low"
    if magnitude < 20:
        return "moderate"
    if magnitude < 21:
        return "good"
    if magnitude < 21.4:
        return "verygood"
    return "excellent"


def render_night_sky_quality(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """밤하늘 품질 → POI. skyMagnitude 레벨별 style 포함."""
    level = night_sky_level(entity)

    parts = [
        description_html(entity),
        format_address(entity.get("address")),
        _observed_date_html(entity, ctx.language),
    ]
    if entity.get("skyMagnitude") is not None:
        parts.append(info_html(f"{display(entity['skyMagnitude'])} mag/arcsec²", "Sky magnitude"))
    if entity.get("temperature") is not None:
        parts.append(info_html(f"{display(entity['temperature'])}ºC", "Temperature"))
    if entity.get("relativeHumidity") is not None:
        parts.append(info_html(f"{percent(entity['relativeHumidity'])}%", "Humidity"))

    return build_poi(
        entity,
        coordinates,
        build_icon(f"images/nightsky/{level}.png", ctx),
        name_with_alternate(entity),
        wrap(parts),
        style=NIGHT_SKY_STYLES[level],
    )
