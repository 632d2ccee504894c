import pytest

from algokit.calculator import calculate, convert_temperature, main


@pytest.mark.parametrize("a,b", [(7, 5), (-3, 9), (0, 0), (123456, -654321)])
def test_basic_operations(a, b):
    assert calculate("+", a, b) == a + b
    assert calculate("-", a, b) == a - b
    assert calculate("*", a, b) == a * b


def test_division_truncates_toward_zero():
    assert calculate("/", -7, 2) == -3
    assert calculate("/", 7, -2) == -3
    assert calculate("/", 9, 3) == 3


@pytest.mark.parametrize("a,b", [(17, 5), (-17, 5), (17, -5), (-17, -5)])
def test_division_identity(a, b):
    q = calculate("/", a, b)
    assert abs(a - q * b) < abs(b)
    assert abs(q * b) <= abs(a)


def test_percentage():
    assert calculate("%", 200, 15) == 30
    assert calculate("%", 100, 42) == 42


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        calculate("/", 1, 0)


def test_unknown_operator():
    with pytest.raises(ValueError):
        calculate("^", 1, 2)


def test_celsius_to_fahrenheit_freezing():
    assert convert_temperature(0, "C") == pytest.approx(32.0)
    assert convert_temperature(32, "F") == pytest.approx(0.0)


@pytest.mark.parametrize("value", [-40.0, 0.0, 36.6, 100.0, 451.0])
def test_temperature_round_trip(value):
    assert convert_temperature(convert_temperature(value, "C"), "F") == pytest.approx(value)


def test_unknown_scale():
    with pytest.raises(ValueError):
        convert_temperature(10, "K")


def test_main_calc(capsys):
    assert main(["calc", "*", "6", "7"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.endswith(f"= {calculate('*', 6, 7)}")
    assert out.startswith("6 * 7")


def test_main_bad_operator(capsys):
    assert main(["calc", "^", "6", "7"]) == 1
    assert "Error! operator is not correct" in capsys.readouterr().out


def test_main_temperature(capsys):
    assert main(["temp", "C", "0"]) == 0
    assert capsys.readouterr().out.strip() == "The temperature in Fahrenheit is: 32.00°F"


def test_main_bad_scale(capsys):
    assert main(["temp", "X", "0"]) == 1
    assert "Error! enter the correct letter" in capsys.readouterr().out