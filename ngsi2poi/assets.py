"""아이콘 이미지 상대 경로 → 절대 URL 변환"""

import httpx

from ngsi2poi.config import ASSET_BASE_URL


def resolve_asset_url(path: str, base_url: str | None = None) -> str:
    """상대 경로를 base_url 기준의 절대 URL로 변환한다.

    base_url이 비어 있으면 경로를 그대로 반환한다. 이미지는 조회하지 않는다.

    Args:
        path: "images/parking/low.png" 같은 상대 경로
        base_url: 기준 URL. None이면 ASSET_BASE_URL 설정값을 사용한다.
    """
    base = ASSET_BASE_URL if base_url is None else base_url
    if not base:
        return path
    return str(httpx.URL(base).join(path))
