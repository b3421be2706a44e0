import itertools

import pytest

from py_quantify import (
    UNIT_TYPES, Unit, factor_table, parse_unit, PreferredUnits, UnitConversionError, UnitTypeError,
    LengthUnit, MassUnit, TimeUnit, SpeedUnit, AccelerationUnit, ForceUnit, DensityUnit, PressureUnit, EnergyUnit,
    PowerUnit, AngleUnit, AngularVelocityUnit, FrequencyUnit, VolumeUnit, ElectricChargeUnit,
    TemperatureUnit, TemperatureDeltaUnit,
    Length, Mass, Time, Density,
)

FACTOR_UNIT_TYPES = [t for t in UNIT_TYPES if t is not TemperatureUnit]


def back_n_forth_pytest(value, units, unit_class):
    u = unit_class(value, units)
    v = u >> units
    assert pytest.approx(v, abs=1e-7) == value


class TestFactorTables:

    @pytest.mark.parametrize("unit_type", FACTOR_UNIT_TYPES, ids=lambda t: t.__name__)
    def test_base_unit_is_first_and_has_factor_one(self, unit_type):
        base = unit_type.base_unit()
        assert base is list(unit_type)[0]
        assert base.factor_to_base == 1.0

    @pytest.mark.parametrize("unit_type", FACTOR_UNIT_TYPES, ids=lambda t: t.__name__)
    def test_members_are_distinct(self, unit_type):
        # Enum silently aliases members with equal values
        assert len(list(unit_type)) == len(unit_type.__members__)
        symbols = [u.symbol for u in unit_type]
        assert len(symbols) == len(set(symbols))

    @pytest.mark.parametrize("unit_type", FACTOR_UNIT_TYPES, ids=lambda t: t.__name__)
    def test_self_factor_is_exactly_one(self, unit_type):
        for unit in unit_type:
            assert unit.factor_to(unit) == 1.0

    @pytest.mark.parametrize("unit_type", FACTOR_UNIT_TYPES, ids=lambda t: t.__name__)
    def test_pairwise_factors_round_trip(self, unit_type):
        for a, b in itertools.product(unit_type, repeat=2):
            assert a.factor_to(b) * b.factor_to(a) == pytest.approx(1.0, rel=1e-12)
            assert a.factor_to(b) == pytest.approx(a.factor_to_base / b.factor_to_base, rel=1e-12)

    @pytest.mark.parametrize("unit_type", FACTOR_UNIT_TYPES, ids=lambda t: t.__name__)
    def test_factors_are_read_only(self, unit_type):
        unit = unit_type.base_unit()
        with pytest.raises(TypeError):
            unit._factors[unit] = 2.0

    def test_foreign_dimension_factor(self):
        with pytest.raises(UnitConversionError):
            LengthUnit.Meter.factor_to(MassUnit.Kilogram)
        with pytest.raises(TypeError):
            LengthUnit.Meter.factor_to("m")  # type: ignore

    @pytest.mark.parametrize("source, target, expected", [
        (LengthUnit.Kilometer, LengthUnit.Meter, 1000.0),
        (LengthUnit.Foot, LengthUnit.Inch, 12.0),
        (LengthUnit.Mile, LengthUnit.Foot, 5280.0),
        (MassUnit.Pound, MassUnit.Ounce, 16.0),
        (TimeUnit.Hour, TimeUnit.Minute, 60.0),
        (SpeedUnit.KilometerPerHour, SpeedUnit.MeterPerSecond, 1 / 3.6),
        (AccelerationUnit.StandardGravity, AccelerationUnit.MeterPerSecondSquared, 9.80665),
        (PressureUnit.Atmosphere, PressureUnit.Pascal, 101325.0),
        (PressureUnit.Bar, PressureUnit.Hectopascal, 1000.0),
        (EnergyUnit.KilowattHour, EnergyUnit.Joule, 3.6e6),
        (AngleUnit.Revolution, AngleUnit.Degree, 360.0),
        (AngleUnit.Degree, AngleUnit.Arcminute, 60.0),
        (AngularVelocityUnit.RevolutionPerSecond, AngularVelocityUnit.RevolutionPerMinute, 60.0),
        (VolumeUnit.Liter, VolumeUnit.Milliliter, 1000.0),
        (DensityUnit.GramPerCubicCentimeter, DensityUnit.KilogramPerCubicMeter, 1000.0),
        (ElectricChargeUnit.AmpereHour, ElectricChargeUnit.Coulomb, 3600.0),
        (TemperatureDeltaUnit.Celsius, TemperatureDeltaUnit.Fahrenheit, 1.8),
        (FrequencyUnit.Kilohertz, FrequencyUnit.Hertz, 1000.0),
        (PowerUnit.Kilowatt, PowerUnit.Watt, 1000.0),
    ])
    def test_known_factors(self, source, target, expected):
        assert source.factor_to(target) == pytest.approx(expected, rel=1e-12)

    def test_factor_table_rejects_non_unit_base(self):
        with pytest.raises(ValueError, match="must have a factor of 1"):
            @factor_table
            class BadUnit(Unit):
                Half = (0.5, 'half')
                Whole = (1.0, 'whole')

    def test_temperature_units_have_no_factors(self):
        with pytest.raises(UnitConversionError):
            TemperatureUnit.Celsius.factor_to(TemperatureUnit.Kelvin)
        with pytest.raises(UnitConversionError):
            _ = TemperatureUnit.Kelvin.factor_to_base

    @pytest.mark.parametrize("unit", list(TemperatureUnit), ids=lambda u: f"unit_{u.name}")
    def test_temperature_delta_unit(self, unit):
        assert unit.delta_unit is TemperatureDeltaUnit[unit.name]
        assert unit.delta_unit.symbol == unit.symbol


class TestUnitObjects:

    @pytest.mark.parametrize("unit_type", UNIT_TYPES, ids=lambda t: t.__name__)
    def test_quantity_class_registered(self, unit_type):
        quantity_class = unit_type.quantity_class()
        assert quantity_class.__dict__['_unit_type'] is unit_type
        assert isinstance(unit_type.base_unit()(1), quantity_class)

    def test_unregistered_quantity_class(self):
        @factor_table
        class LonelyUnit(Unit):
            One = (1.0, 'one')

        with pytest.raises(UnitTypeError):
            LonelyUnit.quantity_class()
        with pytest.raises(UnitTypeError):
            LonelyUnit.One(1)

    def test_repr_str_key(self):
        assert repr(LengthUnit.NauticalMile) == 'NauticalMile'
        assert str(LengthUnit.NauticalMile) == 'nmi'
        assert LengthUnit.NauticalMile.key == 'nautical mile'
        assert DensityUnit.KilogramPerCubicMeter.symbol == 'kg/m³'

    def test_call_builds_quantity(self):
        d = LengthUnit.Foot(3)
        assert isinstance(d, Length)
        assert d.value == 3.0
        assert d.unit is LengthUnit.Foot

    def test_call_converts_quantity(self):
        d = LengthUnit.Foot(Length.Inch(24))
        assert d.unit is LengthUnit.Foot
        assert d.value == pytest.approx(2.0)

    @pytest.mark.parametrize("unit", list(LengthUnit), ids=lambda u: f"unit_{u.name}")
    def test_length_back_n_forth(self, unit):
        back_n_forth_pytest(3, unit, Length)

    @pytest.mark.parametrize("unit", list(MassUnit), ids=lambda u: f"unit_{u.name}")
    def test_mass_back_n_forth(self, unit):
        back_n_forth_pytest(3, unit, Mass)


class TestUnitsParser:

    @pytest.mark.parametrize("alias, expected", [
        ('m', LengthUnit.Meter),
        ('meter', LengthUnit.Meter),
        ('Metre', LengthUnit.Meter),
        ('meters', LengthUnit.Meter),
        (' Yards ', LengthUnit.Yard),
        ('ft', LengthUnit.Foot),
        ('feet', LengthUnit.Foot),
        ('inches', LengthUnit.Inch),
        ('nm', LengthUnit.Nanometer),
        ('nmi', LengthUnit.NauticalMile),
        ('g', MassUnit.Gram),
        ('kg', MassUnit.Kilogram),
        ('Mg', MassUnit.Megagram),
        ('mg', MassUnit.Milligram),
        ('lbs', MassUnit.Pound),
        ('ps', TimeUnit.Picosecond),
        ('PS', PowerUnit.MetricHorsepower),
        ('sec', TimeUnit.Second),
        ('hours', TimeUnit.Hour),
        ('ml', VolumeUnit.Milliliter),
        ('ML', VolumeUnit.Megaliter),
        ('m/s', SpeedUnit.MeterPerSecond),
        ('m / s', SpeedUnit.MeterPerSecond),
        ('fps', SpeedUnit.FootPerSecond),
        ('g0', AccelerationUnit.StandardGravity),
        ('newtons', ForceUnit.Newton),
        ('kg/m3', DensityUnit.KilogramPerCubicMeter),
        ('kg/m³', DensityUnit.KilogramPerCubicMeter),
        ('psi', PressureUnit.Psi),
        ('inHg', PressureUnit.InchOfMercury),
        ('ft*lb', EnergyUnit.FootPound),
        ('footpound', EnergyUnit.FootPound),
        ('deg', AngleUnit.Degree),
        ('moa', AngleUnit.Arcminute),
        ('rpm', AngularVelocityUnit.RevolutionPerMinute),
        ('hz', FrequencyUnit.Hertz),
        ('°C', TemperatureUnit.Celsius),
        ('degf', TemperatureUnit.Fahrenheit),
        ('kelvin', TemperatureUnit.Kelvin),
    ])
    def test_parse_unit(self, alias, expected):
        assert parse_unit(alias) is expected

    def test_parse_unit_preferred_field(self):
        assert parse_unit('density') is DensityUnit.KilogramPerCubicMeter
        PreferredUnits.density = DensityUnit.PoundPerCubicFoot
        assert parse_unit('density') is DensityUnit.PoundPerCubicFoot

    def test_parse_unit_unknown(self):
        assert parse_unit('furlong') is None
        assert parse_unit('oops') is None

    def test_parse_unit_type_error(self):
        with pytest.raises(TypeError):
            parse_unit(1)  # type: ignore

    def test_from_alias_scoped_to_dimension(self):
        assert FrequencyUnit.from_alias('rpm') is FrequencyUnit.RevolutionPerMinute
        assert AngularVelocityUnit.from_alias('rpm') is AngularVelocityUnit.RevolutionPerMinute
        assert LengthUnit.from_alias('kg') is None
        assert TemperatureDeltaUnit.from_alias('°F') is TemperatureDeltaUnit.Fahrenheit

    @pytest.mark.parametrize("unit_type, alias", [
        (LengthUnit, 'ms'),
        (LengthUnit, 'kms'),
        (MassUnit, 'kgs'),
        (ForceUnit, 'Ns'),
        (EnergyUnit, 'Js'),
    ])
    def test_from_alias_symbol_is_not_pluralized(self, unit_type, alias):
        assert unit_type.from_alias(alias) is None

    def test_from_alias_plural_of_name(self):
        assert LengthUnit.from_alias('kilometers') is LengthUnit.Kilometer
        assert LengthUnit.from_alias('metres') is LengthUnit.Meter
        assert TimeUnit.from_alias('ms') is TimeUnit.Millisecond

    def test_from_alias_type_error(self):
        with pytest.raises(TypeError):
            LengthUnit.from_alias(None)  # type: ignore


class TestPreferredUnits:

    def test_defaults(self):
        assert PreferredUnits.length is LengthUnit.Meter
        assert PreferredUnits.temperature is TemperatureUnit.Celsius
        assert PreferredUnits.temperature_delta is TemperatureDeltaUnit.Kelvin

    def test_set_units_and_aliases(self):
        PreferredUnits.set(length=LengthUnit.Foot, mass='lb', temperature='°F', density='g/cc')
        assert PreferredUnits.length is LengthUnit.Foot
        assert PreferredUnits.mass is MassUnit.Pound
        assert PreferredUnits.temperature is TemperatureUnit.Fahrenheit
        assert PreferredUnits.density is DensityUnit.GramPerCubicCentimeter

    def test_set_skips_invalid_entries(self, caplog):
        PreferredUnits.set(length=MassUnit.Kilogram, mass='furlong', speed=5, nonsense='m')
        assert PreferredUnits.length is LengthUnit.Meter
        assert PreferredUnits.mass is MassUnit.Kilogram
        assert PreferredUnits.speed is SpeedUnit.MeterPerSecond
        messages = caplog.text
        assert "is not a LengthUnit" in messages
        assert "not a member of MassUnit" in messages
        assert "attribute='nonsense' not found" in messages

    def test_set_rejects_plural_of_symbol(self, caplog):
        PreferredUnits.set(length='ms')
        assert PreferredUnits.length is LengthUnit.Meter
        assert "not a member of LengthUnit" in caplog.text
        PreferredUnits.set(length='ft')
        PreferredUnits.set(length='ms')
        assert PreferredUnits.length is LengthUnit.Foot

    def test_restore_defaults(self):
        PreferredUnits.length = LengthUnit.Mile
        PreferredUnits.restore_defaults()
        assert PreferredUnits.length is LengthUnit.Meter

    def test_repr(self):
        text = repr(PreferredUnits)
        assert "length = Meter" in text
        assert "temperature = Celsius" in text

    def test_of_uses_preferred_unit(self):
        PreferredUnits.density = DensityUnit.GramPerCubicCentimeter
        assert Density.of(1.5) == Density.GramPerCubicCentimeter(1.5)


class TestIterator:

    @pytest.mark.parametrize(
        "start, step, end, include_end, expected_count, expected_values",
        [
            (0, 100, 1000, True, 11, [i * 100 for i in range(11)]),
            (0, 100, 1000, False, 10, [i * 100 for i in range(10)]),
        ]
    )
    def test_finite_counter(self, start, step, end, include_end, expected_count, expected_values):
        counter = LengthUnit.Meter.counter(start, step, end, include_end=include_end)
        items = list(counter)

        assert len(items) == expected_count
        for i, item in enumerate(items):
            assert isinstance(item, Length)
            assert (item >> Length.Meter) == pytest.approx(expected_values[i])

    def test_infinite_counter(self):
        counter = LengthUnit.Meter.counter(0, 100)
        for i in range(10):
            item = next(counter)
            assert isinstance(item, Length)
            assert (item >> Length.Meter) == pytest.approx(i * 100)

    @pytest.mark.parametrize(
        "start, step, end, include_end, expected_count, expected_values",
        [
            (-100, -50, -500, True, 9, [-100 - i * 50 for i in range(9)]),
            (-100, -50, -500, False, 8, [-100 - i * 50 for i in range(8)]),
        ]
    )
    def test_backward_finite_counter(self, start, step, end, include_end, expected_count, expected_values):
        items = list(LengthUnit.Meter.counter(start, step, end, include_end=include_end))

        assert len(items) == expected_count
        for i, item in enumerate(items):
            assert (item >> Length.Meter) == pytest.approx(expected_values[i])

    def test_counter_keeps_unit(self):
        items = list(TimeUnit.Millisecond.counter(start=0, step=10, end=20))
        assert [t.unit for t in items] == [TimeUnit.Millisecond] * 3
        assert items[-1] == Time.Millisecond(20)

    @pytest.mark.parametrize(
        "input_items, sort, reverse, expected_values",
        [
            ([0, 200, 100], False, False, [0, 200, 100]),
            ([0, 200, 100], True, False, [0, 100, 200]),
            ([0, 200, 100], True, True, [200, 100, 0]),
            ([], False, False, []),
            ([50], False, False, [50]),
        ]
    )
    def test_iterable_generic(self, input_items, sort, reverse, expected_values):
        items = list(LengthUnit.Meter.iterator(input_items, sort=sort, reverse=reverse))

        assert len(items) == len(expected_values)
        for i, item in enumerate(items):
            assert isinstance(item, Length)
            assert (item >> LengthUnit.Meter) == pytest.approx(expected_values[i])

    def test_counter_infinite_invalid_step(self):
        with pytest.raises(ValueError, match="For infinite iteration, 'step' cannot be zero."):
            list(LengthUnit.Meter.counter(0, 0))

    def test_counter_finite_zero_step(self):
        items = list(LengthUnit.Meter.counter(10, 0, 20))
        assert len(items) == 1
        assert (items[0] >> Length.Meter) == pytest.approx(10)

    def test_counter_inconsistent_step_direction(self):
        with pytest.raises(ValueError,
                           match=r"For an incremental step \(step > 0\), 'start' cannot be greater than 'end'."):
            list(LengthUnit.Meter.counter(0, 10, -100))
        with pytest.raises(ValueError,
                           match=r"For a decrementing step \(step < 0\), 'start' cannot be less than 'end'."):
            list(LengthUnit.Meter.counter(-100, -10, 0))

    def test_counter_non_numeric_input(self):
        with pytest.raises(TypeError):
            list(LengthUnit.Meter.counter("a", 1, 10))  # type: ignore

    def test_iterator_non_numeric_input(self):
        with pytest.raises(TypeError):
            list(LengthUnit.Meter.iterator([1, "b", 3]))  # type: ignore
