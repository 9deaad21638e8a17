"""
Тесты для GeoUriBuilder

Проверяет:
1. Ошибки незаданных обязательных полей
2. Однократную валидацию в build()
3. Переиспользование builder
"""

import pytest

from geo_uri import (
    BuilderValidationError,
    CoordRefSystem,
    GeoUri,
    GeoUriBuilder,
    GeoUriBuilderError,
    OutOfRangeLatitude,
    OutOfRangeUncertainty,
    UninitializedFieldError,
)


class TestUninitialized:
    def test_empty_builder(self) -> None:
        with pytest.raises(UninitializedFieldError) as exc_info:
            GeoUri.builder().build()
        assert exc_info.value.field == "latitude"

    def test_missing_latitude(self) -> None:
        with pytest.raises(UninitializedFieldError) as exc_info:
            GeoUri.builder().longitude(5.134).build()
        assert str(exc_info.value) == "uninitialized field: latitude"

    def test_missing_longitude(self) -> None:
        with pytest.raises(UninitializedFieldError) as exc_info:
            GeoUri.builder().latitude(52.107).build()
        assert str(exc_info.value) == "uninitialized field: longitude"

    def test_builder_error_base(self) -> None:
        with pytest.raises(GeoUriBuilderError):
            GeoUri.builder().build()


class TestBuild:
    def test_minimal(self) -> None:
        geo = GeoUri.builder().latitude(52.107).longitude(5.134).build()
        assert geo.latitude == pytest.approx(52.107, abs=1e-3)
        assert geo.longitude == pytest.approx(5.134, abs=1e-3)
        assert geo.altitude is None
        assert geo.uncertainty is None
        assert geo.crs is CoordRefSystem.WGS84

    def test_all_fields(self) -> None:
        geo = (
            GeoUri.builder()
            .crs(CoordRefSystem.WGS84)
            .latitude(52.107)
            .longitude(5.134)
            .altitude(3.6)
            .uncertainty(1_000.0)
            .build()
        )
        assert str(geo) == "geo:52.107,5.134,3.6;u=1000"

    def test_zero_is_a_value(self) -> None:
        """0.0 — заданное значение, а не отсутствие"""
        geo = GeoUri.builder().latitude(0.0).longitude(0.0).uncertainty(0.0).build()
        assert geo.uncertainty == 0.0

    def test_values_coerced_to_float(self) -> None:
        """build() собирает модель без повторной валидации, но с float полями"""
        geo = GeoUri.builder().latitude(52).longitude(5).altitude(183).uncertainty(40).build()
        assert geo.to_tuple() == (52.0, 5.0, 183.0)
        assert all(isinstance(v, float) for v in geo.to_tuple())
        assert isinstance(geo.uncertainty, float)
        assert geo == GeoUri(latitude=52.0, longitude=5.0, altitude=183.0, uncertainty=40.0)

    def test_built_value_guards_assignment(self) -> None:
        geo = GeoUri.builder().latitude(52.107).longitude(5.134).build()
        with pytest.raises(OutOfRangeLatitude):
            geo.latitude = 100.0
        assert geo.latitude == 52.107

    def test_builder_type(self) -> None:
        assert isinstance(GeoUri.builder(), GeoUriBuilder)


class TestValidation:
    def test_latitude_out_of_range(self) -> None:
        with pytest.raises(BuilderValidationError) as exc_info:
            GeoUri.builder().latitude(100.0).longitude(5.134).build()
        assert str(exc_info.value) == "Latitude coordinate is out of range"
        assert isinstance(exc_info.value.__cause__, OutOfRangeLatitude)

    def test_longitude_out_of_range(self) -> None:
        with pytest.raises(BuilderValidationError) as exc_info:
            GeoUri.builder().latitude(52.107).longitude(-200.0).build()
        assert exc_info.value.message == "Longitude coordinate is out of range"

    def test_negative_uncertainty(self) -> None:
        with pytest.raises(BuilderValidationError) as exc_info:
            GeoUri.builder().latitude(52.107).longitude(5.134).uncertainty(-1).build()
        assert isinstance(exc_info.value.__cause__, OutOfRangeUncertainty)

    def test_first_violation_reported(self) -> None:
        with pytest.raises(BuilderValidationError) as exc_info:
            GeoUri.builder().latitude(100.0).longitude(-200.0).uncertainty(-1.0).build()
        assert isinstance(exc_info.value.__cause__, OutOfRangeLatitude)


class TestReuse:
    def test_builder_reusable(self) -> None:
        """Builder сохраняет значения между вызовами build()"""
        builder = GeoUri.builder()
        builder.latitude(52.107)
        builder.longitude(5.134)
        first = builder.build()

        builder.latitude(100.0)
        with pytest.raises(BuilderValidationError):
            builder.build()

        builder.latitude(52.107).longitude(-200.0)
        with pytest.raises(BuilderValidationError):
            builder.build()

        builder.longitude(5.134).uncertainty(-200.0)
        with pytest.raises(BuilderValidationError):
            builder.build()

        builder.uncertainty(10.0)
        second = builder.build()
        assert second.uncertainty == 10.0
        assert first.uncertainty is None
