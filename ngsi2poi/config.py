import os

from dotenv import load_dotenv

load_dotenv()

# 아이콘 상대 경로를 절대 URL로 바꿀 때 사용하는 기준 URL (비어 있으면 상대 경로 유지)
ASSET_BASE_URL = os.environ.get("NGSI2POI_ASSET_BASE_URL", "")

DEFAULT_LANGUAGE = os.environ.get("NGSI2POI_LANGUAGE", "en")

LOG_LEVEL = os.environ.get("NGSI2POI_LOG_LEVEL", "INFO")

INPUT_ENDPOINT = "entityInput"
OUTPUT_ENDPOINT = "poiOutput"

ICON_STYLES = {
    "marker": {"anchor": [0.5, 1], "scale": 0.4},
    "weather": {"anchor": [0.5, 0.5], "scale": 0.5},
}
