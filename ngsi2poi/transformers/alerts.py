"""Alert / KeyPerformanceIndicator → POI 변환"""

from ngsi2poi.transformers.common import (
    RenderContext,
    build_icon,
    build_poi,
    date_html,
    description_html,
    display,
    format_address,
    format_date,
    info_html,
    wrap,
)
from ngsi2poi.transformers.tables import ALERT_SEVERITY_REMAP, ALERT_SUBCATEGORY_REMAP
from ngsi2poi.utils import decamelize, strip_whitespace


# ── KeyPerformanceIndicator ───────────────────────────────────────────────

def render_key_performance_indicator(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """KPI entity → POI. 아이콘은 currentStanding(공백 제거) 기준."""
    standing = entity.get("currentStanding")
    icon_name = strip_whitespace(str(standing)) if standing else "undefined"

    parts = [
        description_html(entity),
        format_address(entity.get("address")),
    ]
    if standing:
        parts.append(info_html(display(standing), "Current standing"))
    if entity.get("process"):
        parts.append(info_html(display(entity["process"]), "Process"))
    if entity.get("product"):
        parts.append(info_html(display(entity["product"]), "Product"))
    if entity.get("kpiValue") is not None:
        parts.append(info_html(display(entity["kpiValue"]), "Value"))
    if entity.get("dateModified"):
        parts.append(info_html(format_date(entity["dateModified"], ctx.language), "Last update"))
    if entity.get("calculationFrequency"):
        parts.append(info_html(display(entity["calculationFrequency"]), "Calculation frequency"))

    return build_poi(
        entity,
        coordinates,
        build_icon(f"images/kpi/{icon_name}.png", ctx),
        entity.get("name"),
        wrap(parts),
    )


# ── Alert ─────────────────────────────────────────────────────────────────

def _alert_subcategory(entity: dict):
    return entity.get("subCategory") or entity.get("subcategory")


def alert_icon_path(entity: dict) -> str:
    """카테고리/서브카테고리(아이콘용으로 재매핑)와 심각도로 아이콘 경로를 만든다.

    문자열이 아닌 값(리스트 등)은 기본값(generic, informational)으로 대체한다.
    """
    category = entity.get("category")
    if not isinstance(category, str) or not category:
        category = "generic"

    subcategory = _alert_subcategory(entity)
    if isinstance(subcategory, str) and subcategory:
        subcategory = ALERT_SUBCATEGORY_REMAP.get(category, {}).get(subcategory, subcategory)
    else:
        subcategory = category

    severity = entity.get("severity")
    if not isinstance(severity, str) or not severity:
        severity = "informational"
    severity = ALERT_SEVERITY_REMAP.get(severity, severity)
    return f"images/alerts/{category}/{subcategory}-{severity}.png"


def render_alert(entity: dict, coordinates: dict, ctx: RenderContext) -> dict:
    """Alert entity → POI. 제목은 'Alert - <category>'."""
    category = entity.get("category")
    subcategory = _alert_subcategory(entity)

    parts = [format_address(entity.get("address"))]
    if subcategory:
        parts.append(info_html(decamelize(display(subcategory)), "Subcategory"))
    if entity.get("severity"):
        parts.append(info_html(display(entity["severity"]), "Severity"))
    parts.append(description_html(entity))
    parts.append(date_html(entity.get("dateObserved"), ctx.language))
    if entity.get("alertSource"):
        parts.append(info_html(display(entity["alertSource"]), "Source"))

    return build_poi(
        entity,
        coordinates,
        build_icon(alert_icon_path(entity), ctx),
        f"Alert - {display(category)}" if category else None,
        wrap(parts),
    )
