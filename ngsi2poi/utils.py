import math
import re

_LEADING_FLOAT = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INFINITY = re.compile(r"[+-]?Infinity")
_HEX = re.compile(r"0[xX][0-9a-fA-F]+")
_CAMEL_BOUNDARY =re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def parse_float(value) -> float:
    """숫자 또는 숫자로 시작하는 문자열을 float로 변환한다. 실패하면 NaN."""
    if isinstance(value, bool):
        return float("nan")
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return float("nan")
    match = _LEADING_FLOAT.match(value)
    if not match:
        return float("nan")
    return float(match.group(0))


def to_number(value) -> float:
    """값 전체를 숫자로 변환한다. 임계값 비교에 사용한다.

    parse_float와 달리 '3 spots' 같은 문자열은 NaN, 빈 문자열은 0이 된다.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return float("nan")
    text = value.strip()
    if not text:
        return 0.0
    if _DECIMAL.fullmatch(text):
        return float(text)
    if _INFINITY.fullmatch(text):
        return float("-inf") if text.startswith("-") else float("inf")
    if _HEX.fullmatch(text):
        return float(int(text, 16))
    return float("nan")


def round_to(value, digits: int) -> float:
    """소수점 digits 자리로 반올림한다 (0.5는 항상 올림)."""
    number = parse_float(value)
    if math.isnan(number) or math.isinf(number):
        return number
    factor = 10 ** digits
    return math.floor(number * factor + 0.5) / factor


def format_number(value) -> str:
    """정수로 떨어지는 float는 소수점 없이 문자열로 만든다.

    '65.0' 대신 '65', NaN은 'NaN'으로 표시한다.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def percent(value) -> str:
    """0~1 비율 값을 백분율 숫자 문자열로 변환한다."""
    return format_number(parse_float(value) * 100)


def decamelize(text: str) -> str:
    """'carWrongDirection' → 'Car wrong direction'"""
    words = _CAMEL_BOUNDARY.sub(" ", text).split()
    if not words:
        return ""
    label = " ".join(word.lower() for word in words)
    return label[0].upper() + label[1:]


def strip_whitespace(text: str) -> str:
    """문자열의 모든 공백 문자를 제거한다."""
    return re.sub(r"\s+", "", text)
