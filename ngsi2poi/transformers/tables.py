"""렌더러가 참조하는 정적 조회 테이블"""

# 측정값 문자열("name,value,unitcode")의 단위 코드 → 표시 단위
UNITS = {
    "GP": "µg/m³",
    "GQ": "mg/m³",
    "M1": "mg/l",
}

# AirQualityObserved에서 추적하는 오염물질 (속성명, 표시 단위)
POLLUTANTS = [
    ("NO2", "µg/m³"),
    ("NO", "µg/m³"),
    ("NOx", "µg/m³"),
    ("CO", "mg/m³"),
    ("CO2", "mg/m³"),
    ("SO2", "µg/m³"),
    ("O3", "µg/m³"),
    ("PM10", "µg/m³"),
    ("PM2.5", "µg/m³"),
    ("PM1", "µg/m³"),
    ("C6H6", "µg/m³"),
    ("C7H8", "µg/m³"),
    ("NH3", "µg/m³"),
    ("H2S", "µg/m³"),
    ("As", "ng/m³"),
    ("Cd", "ng/m³"),
    ("Ni", "ng/m³"),
    ("Pb", "µg/m³"),
]

WATER_MEASURES = [
    {"name": "temperature", "unit": "ºC", "title": "Temperature"},
    {"name": "conductivity", "unit": "S/m", "title": "Conductivity"},
    {"name": "conductance", "unit": "S/m", "title": "Conductance"},
    {"name": "tss", "unit": "mg/L", "title": "Total suspended solids"},
    {"name": "tds", "unit": "mg/L", "title": "Total dissolved solids"},
    {"name": "turbidity", "unit": "FTU", "title": "Turbidity"},
    {"name": "salinity", "unit": "ppt", "title": "Salinity"},
    {"name": "pH", "unit": "", "title": "pH"},
    {"name": "orp", "unit": "mV", "title": "Oxidation-Reduction potential"},
    {"name": "O2", "unit": "mg/L", "title": "Dissolved oxygen"},
]

# 대기질/주차 분류 레벨별 스타일
LEVEL_STYLES = {
    "unknown": {"fill": "rgba(51, 51, 51, 0.1)", "stroke": "#333333"},
    "verylow": {"fill": "rgba(121, 188, 106, 0.3)", "stroke": "rgb(99, 112, 30)"},
    "low": {"fill": "rgba(187, 207, 76, 0.3)", "stroke": "rgba(187, 207, 76, 0.9)"},
    "moderate": {"fill": "rgba(238, 194, 11, 0.3)", "stroke": "rgba(238, 194, 11, 0.9)"},
    "high": {"fill": "rgba(242, 147, 5, 0.3)", "stroke": "rgba(242, 147, 5, 0.9)"},
    "veryhigh": {"fill": "rgba(150, 0, 24, 0.3)", "stroke": "rgba(150, 0, 24, 0.9)"},
}

NIGHT_SKY_STYLES = {
    "unknown": {"fill": "rgba(51, 51, 51, 0.1)", "stroke": "#333333"},
    "verydeficient": {"fill": "rgba(150, 0, 24, 0.3)", "stroke": "rgba(150, 0, 24, 0.9)"},
    "deficient": {"fill": "rgba(242, 147, 5, 0.3)", "stroke": "rgba(242, 147, 5, 0.9)"},
    "low": {"fill": "rgba(238, 194, 11, 0.3)", "stroke": "rgba(238, 194, 11, 0.9)"},
    "moderate": {"fill": "rgba(187, 207, 76, 0.3)", "stroke": "rgba(187, 207, 76, 0.9)"},
    "good": {"fill": "rgba(121, 188, 106, 0.3)", "stroke": "rgb(99, 112, 30)"},
    "verygood": {"fill": "rgba(64, 144, 196, 0.3)", "stroke": "rgba(64, 144, 196, 0.9)"},
    "excellent": {"fill": "rgba(35, 52, 140, 0.3)", "stroke": "rgba(35, 52, 140, 0.9)"},
}

# 우선순위 순서. working은 기본값이라 포함하지 않는다.
BIKE_STATUS_PRIORITY = ["outOfService", "withIncidence", "full", "almostFull"]

# 카테고리별 alert subcategory → 아이콘용 subcategory
ALERT_SUBCATEGORY_REMAP = {
    "traffic": {
        "carWrongDirection": "carAccident",
        "carStopped": "carAccident",
        "injuredBiker": "carAccident",
    },
    "weather": {
        "heatWave": "highTemperature",
    },
    "health": {
        "bumpedPatient": "fallenPatient",
        "tropicalCyclone": "tornado",
        "hurricane": "tornado",
    },
}

ALERT_SEVERITY_REMAP = {
    "critical": "high",
}
