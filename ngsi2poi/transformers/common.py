"""렌더러 공통 기능: 좌표 추출, 날짜/주소 포맷, 패킹 문자열 파싱, POI 조립"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, NamedTuple

from babel import Locale, UnknownLocaleError
from babel.dates import format_skeleton, format_time
from dateutil.parser import parse as parse_date

from ngsi2poi.assets import resolve_asset_url
from ngsi2poi.config import ASSET_BASE_URL, DEFAULT_LANGUAGE, ICON_STYLES
from ngsi2poi.utils import format_number, parse_float

INVALID_DATE = "Invalid date"
_NBSP_TO_SPACE = str.maketrans({"\u202f": " ", "\xa0": " "})


@dataclass(frozen=True)
class RenderContext:
    """한 번의 호출 동안 렌더러에 전달되는 외부 컨텍스트."""

    language: str = DEFAULT_LANGUAGE
    asset_base_url: str = ASSET_BASE_URL


class Measurand(NamedTuple):
    name: str
    value: str
    unit: str | None = None


class KeyValue(NamedTuple):
    key: str
    value: str


# ── 좌표 ──────────────────────────────────────────────────────────────────

def has_location(entity: dict) -> bool:
    """GeoJSON Point 형태의 location이 있는지 확인한다."""
    location = entity.get("location")
    if not isinstance(location, dict):
        return False
    coordinates = location.get("coordinates")
    return isinstance(coordinates, (list, tuple)) and len(coordinates) >= 2


def to_coordinates(location: dict) -> dict:
    """GeoJSON location → {"system", "lng", "lat"}

    GeoJSON은 경도, 위도(, 고도) 순서다. 숫자로 읽을 수 없는 값은 NaN이 된다.
    """
    coordinates = location["coordinates"]
    return {
        "system": "WGS84",
        "lng": parse_float(coordinates[0]),
        "lat": parse_float(coordinates[1]),
    }


# ── 날짜 ──────────────────────────────────────────────────────────────────

def _get_locale(language: str | None) -> Locale:
    try:
        return Locale.parse((language or DEFAULT_LANGUAGE).replace("-", "_"))
    except (UnknownLocaleError, ValueError):
        return Locale.parse("en")


def _parse_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # epoch milliseconds
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return parse_date(value)
    except (ValueError, OverflowError):
        return None


def _format_single(value: Any, language: str) -> str:
    parsed = _parse_datetime(value)
    if parsed is None:
        return INVALID_DATE
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    locale = _get_locale(language)
    day = format_skeleton("yMMMEd", parsed, locale=locale)
    time = format_time(parsed, "short", locale=locale)
    # CLDR 42+ 패턴의 좁은 공백(U+202F)과 NBSP는 일반 공백으로 통일
    return f"{day} {time}".translate(_NBSP_TO_SPACE)


def format_date(value: Any, language: str = DEFAULT_LANGUAGE) -> str:
    """날짜 또는 "from/to" 복합 날짜 문자열을 로케일에 맞는 긴 형식으로 변환한다.

    Args:
        value: ISO 형식 날짜 문자열, "<from>/<to>" 문자열, datetime 또는 epoch ms
        language: "es", "pt-BR" 같은 언어 코드

    Returns:
        "Mon, Nov 28, 2016 12:00 PM" 또는 "From ... to ..." 형식 문자열.
        해석할 수 없으면 "Invalid date".
    """
    if not isinstance(value, str):
        return _format_single(value, language)

    parts = value.split("/")
    if len(parts) == 1:
        return _format_single(parts[0], language)
    if len(parts) == 2:
        return format_date_range(parts[0], parts[1], language)
    return INVALID_DATE


def format_date_range(start: Any, end: Any, language: str = DEFAULT_LANGUAGE) -> str:
    """시작/종료 날짜 쌍을 "From <start> to <end>" 형식으로 변환한다."""
    return f"From {_format_single(start, language)} to {_format_single(end, language)}"


# ── 주소 ──────────────────────────────────────────────────────────────────

def format_address(address: Any) -> str:
    """postal address 객체를 HTML 조각으로 변환한다. 없으면 빈 문자열."""
    if not isinstance(address, dict):
        return ""

    lines: list[str] = []
    if address.get("streetAddress"):
        lines.append(str(address["streetAddress"]))

    locality = ", ".join(
        str(address[key])
        for key in ("addressLocality", "addressRegion", "postalCode")
        if address.get(key)
    )
    if locality:
        lines.append(locality)

    if address.get("addressCountry"):
        lines.append(str(address["addressCountry"]))

    if not lines:
        return ""
    return '<p><b><i class="fa fa-fw fa-address-card"/> Address: </b></p><p>' + "<br/>".join(lines) + "</p>"


# ── 패킹 문자열 파싱 ────────────────────────────────────────────────────────

def parse_measurands(values: Any, separator: str = ",") -> list[Measurand]:
    """["name,value,unit", ...] 리스트를 Measurand 리스트로 변환한다.

    구분자로 나눠 2개 미만인 항목은 건너뛴다.
    """
    if isinstance(values, str):
        values = [values]
    if not isinstance(values, (list, tuple)):
        return []

    result: list[Measurand] = []
    for text in values:
        if not isinstance(text, str):
            continue
        data = [part.strip() for part in text.split(separator)]
        if len(data) < 2 or not data[0]:
            continue
        unit = data[2] if len(data) > 2 else None
        result.append(Measurand(data[0], data[1], unit))
    return result


def parse_key_values(text: Any) -> list[KeyValue | None]:
    """"key=value;key=value" 문자열을 위치를 유지한 채 파싱한다.

    형식이 잘못된 항목은 None으로 남겨 다른 리스트와의 위치 대응을 유지한다.
    """
    if not isinstance(text, str):
        return []
    pairs: list[KeyValue | None] = []
    for item in text.split(";"):
        data = item.split("=")
        if len(data) != 2:
            pairs.append(None)
            continue
        pairs.append(KeyValue(data[0].strip(), data[1].strip()))
    return pairs


# ── HTML 조각 ─────────────────────────────────────────────────────────────

def display(value: Any) -> str:
    """속성 값을 info window 표시용 문자열로 변환한다. None 항목은 제외한다."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(display(item) for item in value if item is not None)
    return format_number(value)


def has_value(value: Any) -> bool:
    """값이 있고 표시할 내용이 남는지 확인한다 ([None] 같은 리스트는 False)."""
    return bool(value) and bool(display(value))


def as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [item for item in value if item is not None]
    return [value]


def description_html(entity: dict) -> str:
    if entity.get("description") is None:
        return ""
    return f"<p>{entity['description']}</p>"


def date_html(value: Any, language: str) -> str:
    if not value:
        return ""
    return f'<p><b><i class="fa fa-fw fa-clock-o"/> Date: </b> {format_date(value, language)}</p>'


def info_html(text: str, label: str | None = None) -> str:
    """'fa-info' 아이콘이 붙은 한 줄 문단을 만든다."""
    if label:
        return f'<p><i class="fa fa-fw fa-info"/> <b>{label}:</b> {text}</p>'
    return f'<p><i class="fa fa-fw fa-info"/> {text}</p>'


def list_html(title: str, items: list[str]) -> str:
    """제목 문단과 <ul> 목록을 만든다. 항목이 없으면 빈 문자열."""
    if not items:
        return ""
    body = "".join(f"  <li>{item}</li>" for item in items)
    return f'<p><b><i class="fa fa-fw fa-list-ul"/> {title}</b>:</p><ul>{body}</ul>'


def wrap(parts: list[str]) -> str:
    return "<div>" + "".join(parts) + "</div>"


# ── POI 조립 ──────────────────────────────────────────────────────────────

def name_with_alternate(entity: dict) -> str:
    """name (alternateName) → id"""
    name = entity.get("name")
    if not name:
        return entity["id"]
    if entity.get("alternateName"):
        return f"{name} ({entity['alternateName']})"
    return name


def build_icon(path: str, ctx: RenderContext, kind: str = "marker") -> dict:
    style = ICON_STYLES[kind]
    return {
        "anchor": list(style["anchor"]),
        "scale": style["scale"],
        "src": resolve_asset_url(path, ctx.asset_base_url),
    }


def build_poi(
    entity: dict,
    coordinates: dict,
    icon: dict,
    title: Any,
    info_window: str,
    style: dict | None = None,
) -> dict:
    """렌더러 결과를 POI 레코드로 조립한다.

    data에는 원본 entity를 복사 없이 그대로 담는다.
    """
    poi = {
        "id": entity["id"],
        "icon": icon,
        "tooltip": entity["id"],
        "data": entity,
        "title": title if title else entity["id"],
        "infoWindow": info_window,
        "currentLocation": coordinates,
        "location": entity["location"],
    }
    if style is not None:
        poi["style"] = dict(style)
    return poi
