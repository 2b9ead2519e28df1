"""NGSI entity 목록 → POI 목록 + GeoJSON 변환"""

import json
from pathlib import Path

from ngsi2poi.transformers.common import RenderContext
from ngsi2poi.transformers.registry import dispatch

OUTPUT_DIR = Path(__file__).resolve().parent.parent.parent / "output"


def transform_pois(entities: list[dict], ctx: RenderContext | None = None) -> list[dict]:
    """entity 목록을 입력 순서대로 POI로 변환한다. 건너뛴 entity는 제외된다."""
    ctx = ctx or RenderContext()
    pois = []
    for entity in entities:
        poi = dispatch(entity, ctx)
        if poi is not None:
            pois.append(poi)
    return pois


def _to_geojson_feature(poi: dict) -> dict:
    """POI → GeoJSON Feature 변환."""
    return {
        "type": "Feature",
        "geometry": {
            "type": "Point",
            "coordinates": [poi["currentLocation"]["lng"], poi["currentLocation"]["lat"]],
        },
        "properties": {
            "id": poi["id"],
            "type": poi["data"].get("type"),
            "title": poi["title"],
            "icon": poi["icon"]["src"],
        },
    }


def pois_to_geojson(pois: list[dict]) -> dict:
    return {
        "type": "FeatureCollection",
        "features": [_to_geojson_feature(poi) for poi in pois],
    }


def save_pois(pois: list[dict], output_dir: Path | None = None) -> list[Path]:
    """POI 목록을 output/pois.json, pois_geo.json으로 저장한다."""
    out_dir = output_dir or OUTPUT_DIR
    out_dir.mkdir(parents=True, exist_ok=True)

    pois_path = out_dir / "pois.json"
    pois_path.write_text(
        json.dumps(pois, ensure_ascii=False, indent=2),
        encoding="utf-8",
    )

    geo_path = out_dir / "pois_geo.json"
    geo_path.write_text(
        json.dumps(pois_to_geojson(pois), ensure_ascii=False, indent=2),
        encoding="utf-8",
    )

    return [pois_path, geo_path]
