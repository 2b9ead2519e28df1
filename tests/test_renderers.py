"""Tests for the per-type renderers and the dispatch registry."""

from __future__ import annotations

import logging

import pytest

from conftest import BASE_URL, make_entity
from ngsi2poi.transformers.alerts import alert_icon_path
from ngsi2poi.transformers.common import RenderContext
from ngsi2poi.transformers.environment import air_quality_level, night_sky_level, water_quality_status
from ngsi2poi.transformers.mobility import bike_station_status, vehicle_title
from ngsi2poi.transformers.parking import off_street_level, on_street_level
from ngsi2poi.transformers.pois import transform_pois
from ngsi2poi.transformers.registry import RENDERERS, dispatch
from ngsi2poi.transformers.tables import LEVEL_STYLES, NIGHT_SKY_STYLES


def _render(entity: dict, ctx: RenderContext) -> dict:
    poi = dispatch(entity, ctx)
    assert poi is not None
    return poi


def _icon(poi: dict) -> str:
    return poi["icon"]["src"].removeprefix(BASE_URL)


@pytest.mark.parametrize("entity_type", sorted(RENDERERS))
def test_minimal_entity_renders_without_placeholders(entity_type, ctx):
    """Every renderer tolerates an entity with only id, type and location."""
    entity = make_entity(entity_type)
    poi = _render(entity, ctx)

    assert poi["id"] == "entity-1"
    assert poi["tooltip"] == "entity-1"
    assert poi["data"] is entity
    assert poi["title"]
    assert poi["infoWindow"].startswith("<div>")
    assert poi["infoWindow"].endswith("</div>")
    assert "undefined" not in poi["infoWindow"]
    assert "None" not in poi["infoWindow"]
    assert poi["icon"]["src"].startswith(BASE_URL)


@pytest.mark.parametrize("entity_type", sorted(RENDERERS))
def test_null_attributes_render_without_placeholders(entity_type, ctx):
    """Attributes explicitly set to null are treated like missing ones."""
    attrs = dict.fromkeys(
        [
            "name", "description", "address", "dateObserved", "dateModified", "status",
            "category", "measurand", "value", "controlledProperty", "powerState",
            "serviceStatus", "severity", "currentStanding", "availableSpotNumber",
            "NO2", "skyMagnitude", "fillingLevel", "sonometerClass",
        ]
    )
    poi = _render(make_entity(entity_type, **attrs), ctx)
    assert "undefined" not in poi["infoWindow"]
    assert "None" not in poi["infoWindow"]


def test_only_classified_types_carry_style(ctx):
    styled = {
        entity_type
        for entity_type in RENDERERS
        if "style" in _render(make_entity(entity_type), ctx)
    }
    assert styled == {"AirQualityObserved", "OffStreetParking", "OnStreetParking", "NightSkyQuality"}


def test_dispatch_logs_unsupported_type_once(ctx, caplog):
    caplog.set_level(logging.INFO, logger="ngsi2poi.transformers.registry")
    assert dispatch(make_entity("MyType"), ctx) is None
    assert [r.getMessage() for r in caplog.records] == ["Entity type is not supported: MyType"]


def test_dispatch_unsupported_type_without_location_still_logs(ctx, caplog):
    caplog.set_level(logging.INFO, logger="ngsi2poi.transformers.registry")
    assert dispatch({"id": "1", "type": "MyType"}, ctx) is None
    assert len(caplog.records) == 1


def test_dispatch_without_context_uses_defaults():
    poi = dispatch(make_entity("Museum"))
    assert poi["icon"]["src"].endswith("images/museum/museum.png")


# ── AirQualityObserved ────────────────────────────────────────────────────

@pytest.mark.parametrize(
    ("no2", "level"),
    [
        (None, "unknown"), (0, "verylow"), (50, "verylow"), (50.1, "low"), (100, "low"),
        (200, "moderate"), (400, "high"), (400.5, "veryhigh"),
    ],
)
def test_air_quality_level(no2, level):
    entity = {"id": "1"} if no2 is None else {"id": "1", "NO2": no2}
    assert air_quality_level(entity) == level


@pytest.mark.parametrize(
    ("no2", "level"),
    [("", "verylow"), (" 120 ", "moderate"), ("120 µg", "veryhigh"), ("high", "veryhigh")],
)
def test_air_quality_level_coerces_whole_value(no2, level):
    """String values only count when the whole string is a number; blank counts as zero."""
    assert air_quality_level({"id": "1", "NO2": no2}) == level


def test_air_quality_without_no2(ctx):
    entity = make_entity("AirQualityObserved", id="1", CO=500)
    poi = _render(entity, ctx)
    assert poi["style"] == {"fill": "rgba(51, 51, 51, 0.1)", "stroke": "#333333"}
    assert poi["title"] == "1"
    assert _icon(poi) == "images/airquality/unknown.png"


def test_air_quality_full(ctx):
    entity = make_entity(
        "AirQualityObserved",
        stationName="Plaza de España",
        stationCode="28079004",
        NO2=120.456,
        CO=0.25,
        source="http://datos.madrid.es",
        dateObserved="2016-11-28T12:00:00.00Z",
        measurand=["SO2, 3.333, GP"],
        address={"addressLocality": "Madrid", "addressCountry": "ES"},
    )
    poi = _render(entity, ctx)
    assert poi["title"] == "Plaza de España (28079004)"
    assert poi["style"] == LEVEL_STYLES["moderate"]
    html = poi["infoWindow"]
    assert "<b>NO2</b>: 120.46 µg/m³" in html
    assert "<b>CO</b>: 0.25 mg/m³" in html
    assert "<b>SO2</b>: 3.33 µg/m³" in html
    assert "http://datos.madrid.es" in html
    assert "Madrid<br/>ES" in html
    assert "Nov 28, 2016" in html


def test_air_quality_station_name_only(ctx):
    poi = _render(make_entity("AirQualityObserved", stationName="Retiro"), ctx)
    assert poi["title"] == "Retiro"


# ── WaterQualityObserved ──────────────────────────────────────────────────

@pytest.mark.parametrize(
    ("attrs", "status"),
    [
        ({}, "good"), ({"pH": 7.4}, "good"), ({"pH": 6.4}, "bad"), ({"pH": 9.1}, "bad"),
        ({"O2": 3.9}, "bad"), ({"O2": 12.5}, "bad"), ({"O2": 8, "pH": 7}, "good"),
    ],
)
def test_water_quality_status(attrs, status):
    assert water_quality_status(attrs) == status


def test_water_quality(ctx):
    entity = make_entity(
        "WaterQualityObserved",
        pH=7.123456,
        temperature=18,
        dateObservedFrom="2016-11-28T12:00:00.00Z",
        dateObservedTo="2016-11-28T13:00:00.00Z",
        measurand=["Pb, 0.0123456, M1"],
    )
    poi = _render(entity, ctx)
    assert poi["title"] == "entity-1"
    assert _icon(poi) == "images/waterquality/good.png"
    html = poi["infoWindow"]
    assert "<b>pH</b>: 7.1235" in html
    assert "<b>Temperature</b>: 18 ºC" in html
    assert "From Mon, Nov 28, 2016" in html
    assert "<b>Pb</b>: 0.012 mg/l" in html


def test_water_quality_title_from_address(ctx):
    poi = _render(make_entity("WaterQualityObserved", address="Río Manzanares"), ctx)
    assert poi["title"] == "Río Manzanares"


# ── NoiseLevelObserved ────────────────────────────────────────────────────

def test_noise_level(ctx):
    entity = make_entity(
        "NoiseLevelObserved",
        name="Sonómetro 1",
        sonometerClass="1",
        measurand=["LAeq|67.856", "broken", "LAmax|80"],
    )
    poi = _render(entity, ctx)
    assert poi["title"] == "Sonómetro 1"
    assert _icon(poi) == "images/noiselevel/noise.png"
    html = poi["infoWindow"]
    assert "<b>LAeq</b>: 67.86" in html
    assert "<b>LAmax</b>: 80" in html
    assert "broken" not in html


def test_noise_level_title_fallback(ctx):
    assert _render(make_entity("NoiseLevelObserved", LAS=91.6), ctx)["title"] == "entity-1"


# ── NightSkyQuality ───────────────────────────────────────────────────────

@pytest.mark.parametrize(
    ("magnitude", "level"),
    [
        (None, "unknown"), (17.4, "verydeficient"), (17.5, "deficient"), (18, "low"),
        (19, "moderate"), (20.9, "good"), (21.3, "verygood"), (21.4, "excellent"),
    ],
)
def test_night_sky_level(magnitude, level):
    assert night_sky_level({"skyMagnitude": magnitude}) == level


def test_night_sky_style(ctx):
    poi = _render(make_entity("NightSkyQuality", skyMagnitude=21.5), ctx)
    assert poi["style"] == NIGHT_SKY_STYLES["excellent"]
    assert "21.5 mag/arcsec²" in poi["infoWindow"]


# ── Parking ───────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    ("spots", "level"),
    [(None, "unknown"), (0, "veryhigh"), (5, "veryhigh"), (6, "high"), (10, "high"),
     (20, "moderate"), (40, "low"), (41, "verylow")],
)
def test_off_street_level(spots, level):
    assert off_street_level({"availableSpotNumber": spots}) == level


@pytest.mark.parametrize(
    ("spots", "level"),
    [(None, "unknown"), (0, "veryhigh"), (1, "high"), (2, "moderate"), (5, "moderate"),
     (10, "low"), (11, "verylow")],
)
def test_on_street_level(spots, level):
    assert on_street_level({"availableSpotNumber": spots}) == level


@pytest.mark.parametrize(("spots", "level"), [("3 spots", "verylow"), ("3", "veryhigh"), ("", "veryhigh")])
def test_parking_levels_coerce_whole_value(spots, level):
    assert off_street_level({"availableSpotNumber": spots}) == level
    assert on_street_level({"availableSpotNumber": spots}) == level


def test_minimal_off_street_parking(ctx):
    entity = make_entity("OffStreetParking", name="Parque de estacionamento Trindade", category=["public"])
    poi = _render(entity, ctx)
    assert poi["title"] == "Parque de estacionamento Trindade"
    assert poi["style"] == LEVEL_STYLES["unknown"]
    assert "available" not in poi["infoWindow"]


def test_off_street_parking(ctx):
    entity = make_entity(
        "OffStreetParking",
        name="Parque de estacionamento Trindade",
        description="Municipal car park",
        availableSpotNumber=100,
        totalSpotNumber=414,
        dateModified="2016-06-02T09:25:55.00Z",
        address={"streetAddress": "Rua de Fernandes Tomás", "addressLocality": "Porto"},
    )
    poi = _render(entity, ctx)
    assert _icon(poi) == "images/parking/verylow.png"
    html = poi["infoWindow"]
    assert html.startswith("<div><p>Municipal car park</p>")
    assert "100 available parking spots out of 414" in html
    assert "Rua de Fernandes Tomás<br/>Porto" in html


def test_on_street_parking_without_total(ctx):
    poi = _render(make_entity("OnStreetParking", availableSpotNumber=0), ctx)
    assert poi["style"] == LEVEL_STYLES["veryhigh"]
    assert "0 available parking spots</p>" in poi["infoWindow"]


# ── Weather ───────────────────────────────────────────────────────────────

def test_weather_forecast(ctx):
    entity = make_entity(
        "WeatherForecast",
        weatherType="Light rain",
        address={"addressLocality": "Valladolid", "addressRegion": "Castilla y León"},
        temperature=12,
        relativeHumidity=0.65,
        precipitationProbability=0.3,
        validFrom="2016-11-30T00:00:00.00Z",
        validTo="2016-11-30T12:00:00.00Z",
    )
    poi = _render(entity, ctx)
    assert poi["title"] == "Valladolid (Castilla y León)"
    assert _icon(poi) == "images/weather/Lightrain.png"
    assert poi["icon"]["anchor"] == [0.5, 0.5]
    assert poi["icon"]["scale"] == 0.5
    html = poi["infoWindow"]
    assert "12ºC" in html
    assert "Humidity:</b> 65%" in html
    assert "Precipitation probability:</b> 30%" in html
    assert "From Wed, Nov 30, 2016" in html


def test_weather_forecast_title_locality_only(ctx):
    poi = _render(make_entity("WeatherForecast", address={"addressLocality": "Soria"}), ctx)
    assert poi["title"] == "Soria"
    assert _icon(poi) == "images/weather/weather.png"


@pytest.mark.parametrize(
    ("attrs", "title"),
    [({"name": "Retiro", "stationName": "S1"}, "Retiro"), ({"stationName": "S1"}, "S1"), ({}, "entity-1")],
)
def test_weather_observed_title(attrs, title, ctx):
    assert _render(make_entity("WeatherObserved", **attrs), ctx)["title"] == title


def test_weather_observed_pressure(ctx):
    entity = make_entity("WeatherObserved", barometricPressure=1020, pressureTendency="raising", precipitation=2)
    html = _render(entity, ctx)["infoWindow"]
    assert "Pressure:</b> 1020hPa (raising)" in html
    assert "2l/m<sup>2</sup>" in html


# ── Places ────────────────────────────────────────────────────────────────

def test_point_of_interest(ctx):
    poi = _render(make_entity("PointOfInterest", name="Faro", category=["113"]), ctx)
    assert poi["title"] == "Faro"
    assert _icon(poi) == "images/poi/113.png"


def test_beach(ctx):
    entity = make_entity(
        "Beach",
        name="Playa de la Concha",
        alternateName="La Concha",
        occupationRate="high",
        beachType=["urban", "whiteSand"],
        length=1350,
    )
    poi = _render(entity, ctx)
    assert poi["title"] == "Playa de la Concha (La Concha)"
    assert _icon(poi) == "images/beach/high.png"
    html = poi["infoWindow"]
    assert "<li>whiteSand</li>" in html
    assert "Length: 1350m" in html
    assert "Beach facilities" not in html


def test_beach_unknown_occupation(ctx):
    assert _icon(_render(make_entity("Beach"), ctx)) == "images/beach/unknown.png"


def test_museum(ctx):
    entity = make_entity(
        "Museum",
        name="Museo del Prado",
        historicalPeriod=["XIX"],
        museumType=["fineArts"],
        openingHoursSpecification=[{"dayOfWeek": "Monday", "opens": "10:00", "closes": "20:00"}],
    )
    html = _render(entity, ctx)["infoWindow"]
    assert "Historical period:</b> XIX" in html
    assert "Museum type:</b> fineArts" in html
    assert "<b>Monday: </b>10:00 - 20:00" in html


def test_garden(ctx):
    entity = make_entity("Garden", name="Retiro", category=["public", "botanical"], openingHours="Mo-Su")
    poi = _render(entity, ctx)
    assert poi["title"] == "Retiro"
    assert "Category:</b> public, botanical" in poi["infoWindow"]
    assert "Open hours:</b> Mo-Su" in poi["infoWindow"]


# ── Devices ───────────────────────────────────────────────────────────────

def test_device_values_pair_with_controlled_property(ctx):
    entity = make_entity(
        "Device",
        category=["sensor"],
        controlledProperty=["temperature", "humidity"],
        value="t=21.7;malformed;h=0.45",
    )
    poi = _render(entity, ctx)
    assert _icon(poi) == "images/devices/sensor.png"
    html = poi["infoWindow"]
    assert "<b>temperature</b>: 21.7" in html
    assert "<b>h</b>: 0.45" in html
    assert "malformed" not in html


def test_device_generic_icon(ctx):
    poi = _render(make_entity("Device", category=["sensor", "actuator"]), ctx)
    assert _icon(poi) == "images/devices/generic.png"


@pytest.mark.parametrize(
    ("attrs", "icon"),
    [
        ({"status": "ok", "powerState": "on"}, "on"),
        ({"status": "ok", "powerState": "off"}, "off"),
        ({"status": "ok"}, "on"),
        ({"status": "defectiveLamp", "powerState": "on"}, "notworking"),
        ({}, "notworking"),
    ],
)
def test_streetlight_icon(attrs, icon, ctx):
    assert _icon(_render(make_entity("Streetlight", **attrs), ctx)) == f"images/streetlight/{icon}.png"


def test_streetlight(ctx):
    entity = make_entity("Streetlight", status="ok", powerState="off", areaServed="Calle Comercial", lanternHeight=10)
    poi = _render(entity, ctx)
    assert poi["title"] == "Calle Comercial"
    assert "Street light status: off" in poi["infoWindow"]
    assert "Height: 10m" in poi["infoWindow"]


def test_streetlight_group(ctx):
    poi = _render(make_entity("StreetlightGroup", switchingMode=["night-ON", "barrier"]), ctx)
    assert _icon(poi) == "images/streetlight/off.png"
    assert "Street light status: Unknown" in poi["infoWindow"]
    assert "Switching mode: night-ON, barrier" in poi["infoWindow"]


def test_streetlight_control_cabinet(ctx):
    entity = make_entity(
        "StreetlightControlCabinet",
        lastMeterReading=162.4,
        intensity={"R": 20.1},
        reactivePower={"S": 45},
    )
    poi = _render(entity, ctx)
    assert poi["title"] == "entity-1"
    html = poi["infoWindow"]
    assert "Energy consumed: 162.4 kW" in html
    assert "<b>R: </b>20.1" in html
    assert "Reactive power" in html


# ── Waste / Open311 ───────────────────────────────────────────────────────

def test_waste_container(ctx):
    entity = make_entity("WasteContainer", serialNumber="SN-1", status="ok", fillingLevel=0.4, category=["underground"])
    poi = _render(entity, ctx)
    assert poi["title"] == "SN-1"
    assert _icon(poi) == "images/waste/ok.png"
    assert "Filling level: 40%" in poi["infoWindow"]


def test_waste_container_isle(ctx):
    poi = _render(make_entity("WasteContainerIsle", features=["roofed"], containers=["a", "b"]), ctx)
    assert "Isle features: roofed" in poi["infoWindow"]
    assert "Number of containers: 2" in poi["infoWindow"]


@pytest.mark.parametrize(("status", "icon"), [("open", "open"), ("closed", "closed"), ("pending", "civicissues")])
def test_service_request_icon(status, icon, ctx):
    poi = _render(make_entity("Open311:ServiceRequest", status=status), ctx)
    assert _icon(poi) == f"images/civicissues/{icon}.png"


def test_service_request(ctx):
    entity = make_entity(
        "Open311:ServiceRequest",
        service_name="Graffiti",
        status="open",
        address_string="Calle Mayor 1",
        agency_responsible="Ayuntamiento",
    )
    poi = _render(entity, ctx)
    assert poi["title"] == "Graffiti"
    html = poi["infoWindow"]
    assert "Request status:</b> open</p>" in html
    assert "Calle Mayor 1" in html
    assert "Responsible:</b> Ayuntamiento" in html


# ── Mobility ──────────────────────────────────────────────────────────────

def test_vehicle_title_plate_only(ctx):
    entity = make_entity(
        "Vehicle",
        id="vehicle:WasteManagement:1",
        vehicleType="lorry",
        category=["municipalServices"],
        vehiclePlateIdentifier="3456ABC",
    )
    poi = _render(entity, ctx)
    assert poi["title"] == "3456ABC"
    assert _icon(poi) == "images/vehicle/lorry.png"


@pytest.mark.parametrize(
    ("attr", "value"),
    [("vehiclePlateIdentifier", "3456ABC"), ("vehicleIdentificationNumber", "1M8GDM9AXKP042788")],
)
def test_vehicle_title_with_name(attr, value, ctx):
    entity = make_entity(
        "Vehicle",
        vehicleType="lorry",
        name="C Recogida 1",
        speed=50,
        cargoWeight=314,
        serviceStatus="onRoute, garbageCollection",
        serviceProvided=["gargabeCollection", "wasteContainerCleaning"],
        **{attr: value},
    )
    poi = _render(entity, ctx)
    assert poi["title"] == f"C Recogida 1 ({value})"
    assert _icon(poi) == "images/vehicle/lorry-onRoute.png"
    assert "undefined" not in poi["infoWindow"]
    assert "<li>wasteContainerCleaning</li>" in poi["infoWindow"]


def test_vehicle_title_fallbacks():
    assert vehicle_title({"id": "v1", "name": "Bus 7"}) == "Bus 7"
    assert vehicle_title({"id": "v1"}) == "v1"


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        (["full", "withIncidence"], "withIncidence"),
        (["almostFull"], "almostFull"),
        ("outOfService", "outOfService"),
        ([], "working"),
        (None, "working"),
        (["working"], "working"),
    ],
)
def test_bike_station_status(status, expected):
    assert bike_station_status({"status": status}) == expected


@pytest.mark.parametrize("removed", [[], ["totalSlotNumber"], ["freeSlotNumber", "address", "description"]])
def test_bike_hire_docking_station(removed, ctx):
    entity = make_entity(
        "BikeHireDockingStation",
        id="malaga-bici-7",
        name="07-Diputacion",
        availableBikeNumber=18,
        freeSlotNumber=10,
        outOfServiceSlotNumber=2,
        totalSlotNumber=30,
        address={"streetAddress": "Paseo Antonio Banderas", "addressLocality": "Málaga"},
        description="Punto de alquiler de bicicletas",
        dateModified="2017-05-09T09:25:55.00Z",
    )
    for attr in removed:
        del entity[attr]

    poi = _render(entity, ctx)
    assert poi["title"] == "07-Diputacion"
    assert _icon(poi) == "images/bikestation/working.png"
    assert "undefined" not in poi["infoWindow"]
    if not removed:
        assert "Free slots:</b> 10/30" in poi["infoWindow"]
    elif removed == ["totalSlotNumber"]:
        assert "Free slots:</b> 10</p>" in poi["infoWindow"]


# ── KPI / Alert ───────────────────────────────────────────────────────────

def test_key_performance_indicator(ctx):
    entity = make_entity(
        "KeyPerformanceIndicator",
        name="Hotel occupancy",
        currentStanding="very good",
        kpiValue=0.87,
        calculationFrequency="monthly",
        dateModified="2016-11-28T12:00:00.00Z",
    )
    poi = _render(entity, ctx)
    assert _icon(poi) == "images/kpi/verygood.png"
    assert "Value:</b> 0.87" in poi["infoWindow"]
    assert "Calculation frequency:</b> monthly" in poi["infoWindow"]


def test_key_performance_indicator_without_standing(ctx):
    poi = _render(make_entity("KeyPerformanceIndicator"), ctx)
    assert _icon(poi) == "images/kpi/undefined.png"
    assert "undefined" not in poi["infoWindow"]


def test_minimal_alert(ctx):
    entity = make_entity(
        "Alert",
        id="1",
        category="traffic",
        dateObserved="2017-01-02T09:25:55.00Z",
        alertSource="https://account.lab.fiware.org/users/8",
    )
    poi = _render(entity, ctx)
    assert poi["title"] == "Alert - traffic"
    assert "style" not in poi
    assert _icon(poi) == "images/alerts/traffic/traffic-informational.png"


def test_alert(ctx):
    entity = make_entity(
        "Alert",
        category="traffic",
        subCategory="carWrongDirection",
        severity="critical",
        description="Car driving in the wrong direction",
        alertSource="Camera1234",
    )
    poi = _render(entity, ctx)
    assert _icon(poi) == "images/alerts/traffic/carAccident-high.png"
    html = poi["infoWindow"]
    assert "Subcategory:</b> Car wrong direction" in html
    assert "Severity:</b> critical" in html
    assert "Camera1234" in html


@pytest.mark.parametrize(
    ("category", "subcategory", "severity", "path"),
    [
        ("weather", "heatWave", "medium", "images/alerts/weather/highTemperature-medium.png"),
        ("health", "bumpedPatient", None, "images/alerts/health/fallenPatient-informational.png"),
        ("health", "hurricane", "high", "images/alerts/health/tornado-high.png"),
        ("security", "robbery", "informational", "images/alerts/security/robbery-informational.png"),
        ("weather", "carStopped", "low", "images/alerts/weather/carStopped-low.png"),
    ],
)
def test_alert_icon_path(category, subcategory, severity, path):
    entity = {"id": "1", "category": category, "subCategory": subcategory, "severity": severity}
    assert alert_icon_path(entity) == path


@pytest.mark.parametrize(
    ("attrs", "path"),
    [
        ({"category": "traffic", "severity": ["high"]}, "images/alerts/traffic/traffic-informational.png"),
        ({"category": ["traffic"], "subCategory": "carStopped"}, "images/alerts/generic/carStopped-informational.png"),
        ({"category": "traffic", "subCategory": ["carStopped"]}, "images/alerts/traffic/traffic-informational.png"),
    ],
)
def test_alert_with_list_values_does_not_abort_batch(attrs, path, ctx):
    """Non-string category, subcategory or severity fall back to the icon defaults."""
    entities = [make_entity("Alert", id="bad", **attrs), make_entity("Museum", id="next")]
    pois = transform_pois(entities, ctx)

    assert [poi["id"] for poi in pois] == ["bad", "next"]
    assert _icon(pois[0]) == path
    assert "None" not in pois[0]["infoWindow"]


def test_alert_list_category_title(ctx):
    poi = _render(make_entity("Alert", category=["traffic"], severity=["high"]), ctx)
    assert poi["title"] == "Alert - traffic"
    assert "Severity:</b> high" in poi["infoWindow"]


def test_list_attributes_skip_none_items(ctx):
    entity = make_entity("Beach", facilities=[None, "showers"], beachType=[None])
    html = _render(entity, ctx)["infoWindow"]
    assert "<li>showers</li>" in html
    assert "None" not in html
    assert "Beach characteristics" not in html


def test_none_only_list_leaves_no_empty_row(ctx):
    html = _render(make_entity("Garden", category=[None]), ctx)["infoWindow"]
    assert "Category" not in html
