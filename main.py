import argparse
import logging
import sys
from pathlib import Path


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="NGSI context entity → 지도 위젯용 POI 변환"
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="NGSI entity JSON 파일 경로 (생략하면 stdin)",
    )
    parser.add_argument(
        "--language",
        help="날짜 표시 언어 (기본값: NGSI2POI_LANGUAGE)",
    )
    parser.add_argument(
        "--asset-base-url",
        help="아이콘 이미지 기준 URL (기본값: NGSI2POI_ASSET_BASE_URL)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="pois.json / pois_geo.json 저장 디렉토리 (기본값: output/)",
    )
    return parser.parse_args()


def _read_input(path: str | None) -> str:
    """입력 파일 또는 stdin에서 JSON 텍스트를 읽는다."""
    if path is None:
        return sys.stdin.read()
    input_path = Path(path)
    if not input_path.exists():
        raise FileNotFoundError(f"Input data not found: {input_path}")
    return input_path.read_text(encoding="utf-8")


def run_transform(args: argparse.Namespace) -> None:
    from ngsi2poi.transformers.pois import save_pois
    from ngsi2poi.wiring import process_incoming_data

    raw = _read_input(args.input)

    print("[Transform] POI 변환 시작...")
    result: list[list[dict]] = []
    process_incoming_data(
        raw,
        result.append,
        language=args.language,
        asset_base_url=args.asset_base_url,
    )
    pois = result[0]
    print(f"[Transform] POI 변환 완료 ({len(pois)} pois)")

    for p in save_pois(pois, args.output_dir):
        print(f"[Output] 저장 완료: {p}")


def main() -> None:
    from ngsi2poi.config import LOG_LEVEL

    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    run_transform(parse_args())


if __name__ == "__main__":
    main()
