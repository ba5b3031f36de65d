import pytest

from LengthCalc import Tokenizer as tokenizer_module
from LengthCalc.error import CompilerError, ConfigurationError, ParseError, SolveError
from LengthCalc.LengthEngine import Compiler
from LengthCalc.Tokenizer import TokenType
from LengthCalc.UnitSystem import Unit, UnitType, Solution

from conftest import make_compiler


@pytest.fixture(autouse=True)
def c_locale(monkeypatch):
    monkeypatch.setattr(tokenizer_module, "locale_decimal_point", lambda: ".")


# -----------------------------
# Metric
# -----------------------------

def test_mixed_metric_and_imperial(metric):
    result = metric.eval("5m + 3ft")
    assert result.value == pytest.approx(5.9144)
    assert result.units == Unit(1.0, UnitType.METRIC)
    assert metric.format(result) == "5.9144m"


def test_plain_multiplication(metric):
    result = metric.eval("2 * 3")
    assert result.value == 6.0
    assert result.units == metric.default_unit()
    assert metric.format(result) == "6m"


@pytest.mark.parametrize("expression, expected", [
    ("120mm", "120mm"),
    ("1500m", "1.5km"),
    ("2500km", "2.5Mm"),
    ("0.5m", "500mm"),
    ("5cm", "50mm"),
    ("1in", "25.4mm"),
    ("10mm / 2mm", "5mm"),
    ("(1 + 2) * 3", "9m"),
    ("0", "0m"),
    ("1km - 1", "0m"),
    ("1km - 0.001", "999m"),
])
def test_metric_results(metric, expression, expected):
    assert metric.format(metric.eval(expression)) == expected


def test_centimeters_when_enabled():
    compiler = make_compiler(UnitType.METRIC, output_to_cm=True)
    assert compiler.format(compiler.eval("5cm")) == "5cm"


def test_unit_inheritance(metric):
    previous = Solution(0.12, Unit(1.0, UnitType.METRIC))
    result = metric.eval("+5", previous)
    assert result.units.unit_type == UnitType.METRIC
    assert result.value == 5.0


def test_unit_inheritance_from_millimeters(metric):
    previous = metric.eval("120mm")
    result = metric.eval("+5", previous)
    assert result.units == Unit(0.001, UnitType.METRIC)
    assert metric.format(result) == "5mm"


def test_legacy_subtraction_can_be_switched_off():
    compiler = make_compiler(UnitType.METRIC, legacy_unit_subtraction=False)
    assert compiler.format(compiler.eval("5m - 3ft")) == "4.0856m"


# -----------------------------
# Imperial
# -----------------------------

@pytest.mark.parametrize("expression, expected", [
    ("1/8in", "1/8in"),
    ("1+3/8in", "1+3/8in"),
    ("-1/2in", "-1/2in"),
    ("0.3333in", "0.3333in"),
    ("3ft", "3ft"),
    ("18in", "18in"),
    ("24in", "2ft"),
    ("80in", "6+2/3ft"),
    ("89in", "7ft5in"),
    ("2yd", "6ft"),
    ("5280ft", "1mi"),
    ("1m", "39.370079in"),
    ("500th", "500th"),
    ("2", "2ft"),
    ("0", "0ft"),
])
def test_imperial_results(imperial, expression, expected):
    assert imperial.format(imperial.eval(expression)) == expected


def test_imperial_fraction_switch(imperial):
    imperial.set_imperial_fractions(False)
    assert imperial.format(imperial.eval("1/8in")) == "0.125in"


def test_yards_when_enabled():
    compiler = make_compiler(UnitType.IMPERIAL, output_to_yards=True)
    assert compiler.format(compiler.eval("36ft")) == "12yd"


# -----------------------------
# Generic
# -----------------------------

@pytest.mark.parametrize("expression, expected", [
    ("2*(3+4)", "14"),
    ("7/2", "3.5"),
    ("0x10 + 0b11", "19"),
    ("5-(-3)", "8"),
    ("1-2-3", "-4"),
    ("-(2+3)*2", "-10"),
])
def test_generic_results(generic, expression, expected):
    assert generic.format(generic.eval(expression)) == expected


def test_generic_mode_knows_no_units(generic):
    with pytest.raises(SolveError) as info:
        generic.eval("5mm")
    assert info.value.code == "2003"


# -----------------------------
# Errors
# -----------------------------

def test_unbalanced_open_parenthesis(metric):
    with pytest.raises(ParseError):
        metric.eval("(1+2")


def test_unexpected_close_parenthesis(metric):
    with pytest.raises(SolveError) as info:
        metric.eval("1+2)")
    assert "Unexpected close parenthesis" in str(info.value)
    assert str(info.value).startswith("[SOLVE]")


def test_errors_carry_the_expression(metric):
    with pytest.raises(CompilerError) as info:
        metric.eval("1 $ 2")
    assert info.value.expression == "1 $ 2"
    assert info.value.stage == "PARSE"


def test_failed_eval_leaves_previous_untouched(metric):
    previous = metric.eval("120mm")
    with pytest.raises(CompilerError):
        metric.eval("1 2", previous)
    assert previous.units == Unit(0.001, UnitType.METRIC)


# -----------------------------
# Round trips
# -----------------------------

@pytest.mark.parametrize("unit_type, expression", [
    (UnitType.METRIC, "5m + 3ft"),
    (UnitType.METRIC, "1500m"),
    (UnitType.METRIC, "0.5m"),
    (UnitType.METRIC, "3.25mm"),
    (UnitType.IMPERIAL, "1/8in"),
    (UnitType.IMPERIAL, "-1/2in"),
    (UnitType.IMPERIAL, "80in"),
    (UnitType.IMPERIAL, "5280ft"),
])
def test_formatted_result_evaluates_to_the_same_value(unit_type, expression):
    compiler = make_compiler(unit_type)
    first = compiler.eval(expression)
    second = compiler.eval(compiler.format(first))
    assert second.value == pytest.approx(first.value)
    assert compiler.format(second) == compiler.format(first)


@pytest.mark.parametrize("name", ["mm", "m", "km", "in", "ft", "mi"])
def test_unit_round_trip(metric, name):
    first = metric.eval("7" + name)
    second = metric.eval(metric.format(first))
    assert second.value == pytest.approx(first.value)


# -----------------------------
# Facade
# -----------------------------

def test_parse_and_solve_separately(metric):
    tokens = metric.parse("2ft")
    assert [token.type for token in tokens] == [TokenType.NUMERIC_LITERAL, TokenType.UNIT]
    assert metric.solve(tokens) == metric.eval("2ft")


def test_to_postfix(metric):
    assert [token.text for token in metric.to_postfix(metric.parse("-1+2"))] == ["1", "u-", "2", "+"]


def test_calculate(metric):
    text, solution = metric.calculate("1500m")
    assert text == "1.5km"
    assert solution.units == Unit(1000.0, UnitType.METRIC)


def test_set_output_system(metric):
    metric.set_output_system("imperial")
    assert metric.unit_type == UnitType.IMPERIAL
    assert metric.default_unit() == Unit(12000.0, UnitType.IMPERIAL)
    assert metric.format(metric.eval("1")) == "1ft"

    with pytest.raises(ConfigurationError):
        metric.set_output_system("nautical")


def test_locale_decimal_point(metric, monkeypatch):
    monkeypatch.setattr(tokenizer_module, "locale_decimal_point", lambda: "·")
    assert metric.eval("1·5").value == 1.5


def test_settings_are_validated():
    with pytest.raises(ConfigurationError):
        Compiler(UnitType.METRIC, settings={"decimal_places": "six"})


def test_units_written_back_to_back_are_indeterminate(imperial):
    with pytest.raises(SolveError) as info:
        imperial.eval("2ft6in")
    assert info.value.code == "2005"


def test_failure_is_logged_with_its_error_group(metric, caplog):
    with caplog.at_level("DEBUG", logger="LengthCalc.LengthEngine"):
        with pytest.raises(SolveError):
            metric.eval("1 / 0")
    assert "Solve Error: Division by zero." in caplog.text
