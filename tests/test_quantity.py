import pytest

from py_quantify import (
    UNIT_TYPES, PreferredUnits, GenericQuantity, Comparable, Measurable, parse,
    UnitTypeError, UnitConversionError, UnitAliasError,
    LengthUnit, MassUnit, DensityUnit, FrequencyUnit, TemperatureUnit,
    Length, Mass, Density, Speed, Frequency, AngularVelocity, Temperature,
)

QUANTITY_CLASSES = [t.quantity_class() for t in UNIT_TYPES]
LINEAR_QUANTITY_CLASSES = [c for c in QUANTITY_CLASSES if c is not Temperature]


class TestConstruction:

    def test_value_is_stored_as_given(self):
        d = Length(1, LengthUnit.Kilometer)
        assert d.value == 1.0
        assert isinstance(d.value, float)
        assert d.unit is LengthUnit.Kilometer
        assert d.raw_value == 1000.0

    def test_unit_attributes_on_class(self):
        for quantity_class in QUANTITY_CLASSES:
            for unit in quantity_class._unit_type:
                assert getattr(quantity_class, unit.name) is unit

    def test_invalid_value(self):
        with pytest.raises(TypeError):
            Length("5", LengthUnit.Meter)  # type: ignore

    def test_invalid_unit(self):
        with pytest.raises(TypeError):
            Length(5, "m")  # type: ignore
        with pytest.raises(UnitConversionError):
            Length(5, MassUnit.Kilogram)  # type: ignore

    def test_no_new_attributes(self):
        d = Length.Meter(1)
        with pytest.raises(AttributeError):
            d.foo = 1  # type: ignore

    def test_protocols(self):
        d = Length.Meter(1)
        assert isinstance(d, Comparable)
        assert isinstance(d, Measurable)
        assert isinstance(d, GenericQuantity)


class TestUnitConversionSyntax:

    def setup_method(self):
        self.low = Length.Yard(10)
        self.high = Length.Yard(100)

    def test__eq__(self):
        assert self.low == Length.Yard(10)
        assert self.low == Length(10, LengthUnit.Yard)
        assert self.low != self.high

    def test_identity_conversion(self):
        assert self.low.convert(LengthUnit.Yard) is self.low
        assert (self.low << LengthUnit.Yard) is self.low
        assert self.low.get_in(LengthUnit.Yard) == 10.0
        assert (self.low >> LengthUnit.Yard) == 10.0

    def test_conversion_operators(self):
        assert (self.high >> Length.Foot) == pytest.approx(300)
        converted = self.high << Length.Meter
        assert isinstance(converted, Length)
        assert converted.unit is LengthUnit.Meter
        assert converted.value == pytest.approx(91.44)
        assert self.high.unit is LengthUnit.Yard

    def test_aliases(self):
        assert self.high.get_value(Length.Foot) == self.high.get_in(Length.Foot)
        assert self.high.convert_to(Length.Foot) == self.high.convert(Length.Foot)

    def test_foreign_unit(self):
        with pytest.raises(UnitConversionError):
            self.low.get_in(MassUnit.Kilogram)  # type: ignore
        with pytest.raises(UnitConversionError):
            self.low >> MassUnit.Gram  # type: ignore
        with pytest.raises(UnitConversionError):
            self.low.convert(MassUnit.Gram)  # type: ignore

    def test_float(self):
        assert float(Length.Kilometer(1.5)) == 1500.0


class TestEqualityAndOrdering:

    def test_equality_is_representational(self):
        a = Density(1.0, DensityUnit.KilogramPerCubicMeter)
        b = Density(1000.0, DensityUnit.GramPerCubicMeter)
        assert a != b
        assert a.compare_to(b) == 0
        assert b.compare_to(a) == 0
        assert a.isclose(b)
        assert a <= b and a >= b
        assert not a < b and not a > b

    def test_different_types_are_not_equal(self):
        assert Length.Meter(1) != Mass.Kilogram(1)
        assert Length.Meter(1) != 1.0
        assert Length.Meter(1) is not None

    def test_hash_follows_equality(self):
        assert hash(Length.Meter(1)) == hash(Length.Meter(1.0))
        assert len({Length.Meter(1), Length.Meter(1.0), Length.Kilometer(0.001)}) == 2

    @pytest.mark.parametrize("smaller, larger", [
        (Length.Meter(999), Length.Kilometer(1)),
        (Length.Inch(11), Length.Foot(1)),
        (Mass.Gram(999), Mass.Kilogram(1)),
        (Length.Meter(-1), Length.Meter(0)),
    ])
    def test_ordering_is_physical(self, smaller, larger):
        assert smaller < larger
        assert larger > smaller
        assert smaller <= larger
        assert larger >= smaller
        assert smaller.compare_to(larger) == -1
        assert larger.compare_to(smaller) == 1

    def test_sorting_mixed_units(self):
        values = [Length.Foot(4), Length.Meter(1), Length.Inch(1), Length.Centimeter(50)]
        assert sorted(values) == [Length.Inch(1), Length.Centimeter(50), Length.Meter(1), Length.Foot(4)]

    def test_comparing_other_dimensions(self):
        with pytest.raises(TypeError):
            _ = Length.Meter(1) < Mass.Kilogram(1)
        with pytest.raises(UnitTypeError):
            Length.Meter(1).compare_to(Mass.Kilogram(1))  # type: ignore
        with pytest.raises(UnitTypeError):
            Length.Meter(1).isclose(Mass.Kilogram(1))  # type: ignore

    def test_isclose_tolerances(self):
        assert Length.Meter(1).isclose(Length.Millimeter(1001), rel_tol=1e-2)
        assert not Length.Meter(1).isclose(Length.Millimeter(1001))
        assert Length.Meter(0).isclose(Length.Millimeter(0.5), abs_tol=1.0)


class TestArithmetic:

    def test_add_keeps_left_unit(self):
        assert Length.Meter(1) + Length.Centimeter(50) == Length.Meter(1.5)
        assert Length.Centimeter(50) + Length.Meter(1) == Length.Centimeter(150)

    def test_sub_keeps_left_unit(self):
        result = Length.Foot(3) - Length.Inch(6)
        assert result.unit is LengthUnit.Foot
        assert result.value == pytest.approx(2.5)

    def test_density_sum(self):
        total = Density(1, DensityUnit.KilogramPerCubicMeter) + Density(1000, DensityUnit.GramPerCubicMeter)
        assert total == Density(2.0, DensityUnit.KilogramPerCubicMeter)

    def test_scalar_multiplication(self):
        assert 3 * Length.Foot(2) == Length.Foot(6)
        assert Length.Foot(2) * 3 == Length.Foot(6)
        assert Length.Foot(2) * 0.5 == Length.Foot(1)

    def test_scalar_division(self):
        assert Length.Meter(6) / 2 == Length.Meter(3)

    def test_ratio(self):
        assert Length.Meter(3) / Length.Meter(1.5) == 2.0
        assert Length.Kilometer(1) / Length.Meter(500) == 2.0
        assert isinstance(Length.Yard(100) / Length.Foot(3), float)

    def test_negation_and_abs(self):
        assert -Length.Meter(2) == Length.Meter(-2)
        assert abs(Length.Meter(-2)) == Length.Meter(2)

    def test_operations_do_not_mutate(self):
        d = Length.Meter(1)
        alias = d
        d += Length.Meter(1)
        d *= 2
        assert alias == Length.Meter(1)
        assert d == Length.Meter(4)

    @pytest.mark.parametrize("operation", [
        lambda: Length.Meter(1) + Mass.Kilogram(1),
        lambda: Length.Meter(1) - Mass.Kilogram(1),
        lambda: Length.Meter(1) + 1,
        lambda: 1 + Length.Meter(1),
        lambda: Length.Meter(1) * Length.Meter(1),
        lambda: Length.Meter(1) / Mass.Kilogram(1),
        lambda: 2 / Length.Meter(1),
    ])
    def test_unsupported_operations(self, operation):
        with pytest.raises(TypeError):
            operation()

    @pytest.mark.parametrize("quantity_class", QUANTITY_CLASSES, ids=lambda c: c.__name__)
    def test_scalar_zero_division(self, quantity_class):
        q = quantity_class._unit_type.base_unit()(5)
        with pytest.raises(ZeroDivisionError):
            _ = q / 0
        with pytest.raises(ZeroDivisionError):
            _ = q / 0.0

    @pytest.mark.parametrize("quantity_class", LINEAR_QUANTITY_CLASSES, ids=lambda c: c.__name__)
    def test_zero_quantity_division(self, quantity_class):
        unit = quantity_class._unit_type.base_unit()
        with pytest.raises(ZeroDivisionError):
            _ = unit(5) / unit(0)


class TestFormatting:

    def test_str(self):
        assert str(Length.Meter(5)) == '5.0 m'
        assert str(Density(1000, DensityUnit.KilogramPerCubicMeter)) == '1000.0 kg/m³'

    def test_repr(self):
        assert repr(Length.Kilometer(1.5)) == '<Length: 1.5 km (1500.0)>'
        assert repr(Temperature.Celsius(20)) == '<Temperature: 20.0 °C (293.15)>'

    def test_format(self):
        d = Length.Kilometer(1.23456)
        assert d.format(fraction_digits=2) == '1.23 km'
        assert d.format(show_unit_symbol=False) == '1.23456'
        assert Length.Kilometer(1.5).format(Length.Meter, 0, unit_symbol_separator='') == '1500m'
        assert Length.Kilometer(1.5).format(Length.Meter, fraction_digits=1) == '1500.0 m'


class TestOfAndParse:

    def test_of(self):
        d = Length.Foot(1)
        assert Length.of(d) is d
        assert Length.of(None) is None
        assert Length.of(3) == Length.Meter(3)
        PreferredUnits.length = LengthUnit.Foot
        assert Length.of(3) == Length.Foot(3)
        with pytest.raises(TypeError):
            Length.of("3")  # type: ignore

    def test_preferred_unit(self):
        assert Mass.preferred_unit() is MassUnit.Kilogram
        PreferredUnits.mass = MassUnit.Pound
        assert Mass.preferred_unit() is MassUnit.Pound

    @pytest.mark.parametrize("text, expected", [
        ('2yd', Length.Yard(2)),
        ('12.5 km', Length.Kilometer(12.5)),
        ('-3ft', Length.Foot(-3)),
        ('1e3 m', Length.Meter(1000)),
        ('.5 kg', Mass.Kilogram(0.5)),
        ('10 mph', Speed.MilePerHour(10)),
        ('-40 °F', Temperature.Fahrenheit(-40)),
        ('1000 kg/m³', Density.KilogramPerCubicMeter(1000)),
    ])
    def test_parse(self, text, expected):
        assert parse(text) == expected

    def test_parse_bare_number(self):
        assert parse(100, LengthUnit.Meter) == Length.Meter(100)
        assert parse('100', 'ft') == Length.Foot(100)
        assert parse(5, 'density') == Density.KilogramPerCubicMeter(5)

    def test_parse_errors(self):
        with pytest.raises(UnitAliasError):
            parse('10 foobars')
        with pytest.raises(UnitAliasError):
            parse('abc')
        with pytest.raises(UnitAliasError):
            parse('5', 'bogus')
        with pytest.raises(UnitAliasError):
            parse(5)
        with pytest.raises(TypeError):
            parse([5])  # type: ignore

    @pytest.mark.parametrize("quantity_class, text", [
        (Length, '5 ms'),
        (Length, '2 kms'),
        (Mass, '3 kgs'),
    ])
    def test_class_parse_rejects_plural_of_symbol(self, quantity_class, text):
        with pytest.raises(UnitAliasError):
            quantity_class.parse(text)

    def test_class_parse(self):
        assert Length.parse('12.5 km') == Length.Kilometer(12.5)
        assert Length.parse('3') == Length.Meter(3)
        assert Length.parse(3, LengthUnit.Foot) == Length.Foot(3)
        assert Frequency.parse('60 rpm') == Frequency(60, FrequencyUnit.RevolutionPerMinute)
        assert AngularVelocity.parse('60 rpm') == AngularVelocity.RevolutionPerMinute(60)
        assert Temperature.parse('20') == Temperature(20, TemperatureUnit.Celsius)

    def test_class_parse_wrong_dimension(self):
        with pytest.raises(UnitAliasError):
            Length.parse('5 kg')
        with pytest.raises(UnitAliasError):
            Length.parse('5 foobars')
