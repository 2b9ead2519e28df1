"""entityInput 수신 → POI 변환 → poiOutput 전송"""

import json
from collections.abc import Callable
from typing import Any

from ngsi2poi.config import ASSET_BASE_URL, DEFAULT_LANGUAGE
from ngsi2poi.transformers.common import RenderContext
from ngsi2poi.transformers.pois import transform_pois


class EndpointTypeError(TypeError):
    """입력 endpoint로 들어온 데이터의 형식이 잘못되었을 때 발생한다."""


def normalize_entities(raw: Any) -> list[dict]:
    """입력값을 entity 리스트로 정규화한다.

    문자열이면 JSON으로 파싱하고, 단일 객체는 1개짜리 리스트로 감싼다.

    Raises:
        EndpointTypeError: JSON이 아니거나 객체/객체 배열이 아닌 경우
    """
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise EndpointTypeError(f"Invalid JSON data: {e}") from e

    if isinstance(raw, dict):
        return [raw]
    if not isinstance(raw, list):
        raise EndpointTypeError(f"Expected an entity or a list of entities, got {type(raw).__name__}")
    if not all(isinstance(entity, dict) for entity in raw):
        raise EndpointTypeError("Every item of the entity list must be an object")
    return raw


def _current_language(language: str | Callable[[], str] | None) -> str:
    if callable(language):
        language = language()
    return language or DEFAULT_LANGUAGE


def process_incoming_data(
    raw: Any,
    emit: Callable[[list[dict]], None],
    language: str | Callable[[], str] | None = None,
    asset_base_url: str | None = None,
) -> None:
    """entityInput 데이터를 POI 목록으로 변환해 emit으로 한 번 전달한다.

    입력 검증에 실패하면 아무것도 전달하지 않고 예외를 던진다.

    Args:
        raw: JSON 문자열 또는 디코딩된 entity / entity 리스트
        emit: poiOutput으로 POI 리스트를 전달하는 함수
        language: 언어 코드 또는 호출 시점의 언어를 돌려주는 함수
        asset_base_url: 아이콘 URL 기준. None이면 설정값 사용.
    """
    entities = normalize_entities(raw)
    ctx = RenderContext(
        language=_current_language(language),
        asset_base_url=ASSET_BASE_URL if asset_base_url is None else asset_base_url,
    )
    emit(transform_pois(entities, ctx))
