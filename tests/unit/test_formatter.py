"""
Тесты для канонического представления GeoUri

Проверяет:
1. Формат geo:<lat>,<lon>[,<alt>][;u=<unc>]
2. Отсутствие параметра crs в выводе
3. Round-trip и идемпотентность
"""

import pytest

from geo_uri import CoordRefSystem, GeoUri, format_geo_uri


class TestDisplay:
    def test_display(self) -> None:
        geo = GeoUri(crs=CoordRefSystem.WGS84, latitude=52.107, longitude=5.134)
        assert str(geo) == "geo:52.107,5.134"

        geo.altitude = 3.6
        assert str(geo) == "geo:52.107,5.134,3.6"

        geo.uncertainty = 25_000.0
        assert str(geo) == "geo:52.107,5.134,3.6;u=25000"

    def test_uncertainty_without_altitude(self) -> None:
        geo = GeoUri(latitude=52.107, longitude=5.134, uncertainty=1000.0)
        assert f"{geo}" == "geo:52.107,5.134;u=1000"

    def test_crs_never_emitted(self) -> None:
        geo = GeoUri.parse("geo:48.198634,16.371648;crs=wgs84;u=40")
        assert str(geo) == "geo:48.198634,16.371648;u=40"

    def test_unknown_params_dropped(self) -> None:
        assert str(GeoUri.parse("geo:47,11;foo=blue")) == "geo:47,11"

    def test_format_function(self) -> None:
        geo = GeoUri(latitude=-33.8688, longitude=151.2093, altitude=58.0)
        assert format_geo_uri(geo) == str(geo) == "geo:-33.8688,151.2093,58"

    def test_small_values_positional(self) -> None:
        geo = GeoUri(latitude=1e-07, longitude=-0.0)
        assert str(geo) == "geo:0.0000001,-0"


class TestRoundTrip:
    @pytest.mark.parametrize(
        "latitude, longitude",
        [(52.107, 5.134), (90.0, 0.0), (-90.0, 180.0), (0.1 + 0.2, -179.999999), (1e-07, 1e-12)],
    )
    def test_parse_format(self, latitude: float, longitude: float) -> None:
        """Инвариант: parse(str(x)) == x"""
        geo = GeoUri.builder().latitude(latitude).longitude(longitude).build()
        assert GeoUri.parse(str(geo)) == geo

    @pytest.mark.parametrize(
        "uri",
        [
            "geo:48.2010,16.3695,183",
            "geo:52.107,5.134,3.6;u=1000",
            "GEO:22.300,-118.44;CRS=WGS84;U=0.5;foo=bar",
            "geo:1e1,-1e2,1e-3",
        ],
    )
    def test_idempotent(self, uri: str) -> None:
        """Инвариант: str(parse(str(x))) == str(x)"""
        text = str(GeoUri.parse(uri))
        assert str(GeoUri.parse(text)) == text
