import pytest

from ninetools.rpn import RpnCalculator, RpnError, evaluate, main


def test_worked_example():
    assert evaluate("8 9 * 9 - 9 - 9 - 4 - 1 +") == 42


def test_mixed_operations():
    assert evaluate("1 2 * 2 / 2 * 2 4 - +") == 0


def test_division_truncates_toward_zero():
    assert evaluate("-7 2 /") == -3


def test_single_number():
    assert evaluate("5") == 5


def test_atoi_prefix_is_accepted():
    assert evaluate("12abc") == 12


def test_zero_token():
    assert evaluate("0") == 0


@pytest.mark.parametrize("a, b", [(3, 9), (1, 1), (-4, 6), (8, 2)])
def test_subtraction_antisymmetric(a, b):
    assert evaluate(f"{a} {b} -") == -evaluate(f"{b} {a} -")


@pytest.mark.parametrize("a, b", [(3, 9), (-4, 6), (8, 0)])
def test_commutative_operators(a, b):
    assert evaluate(f"{a} {b} +") == evaluate(f"{b} {a} +")
    assert evaluate(f"{a} {b} *") == evaluate(f"{b} {a} *")


@pytest.mark.parametrize("a, b", [(9, 3), (7, 2), (-9, 4), (9, -4)])
def test_division_then_multiplication_bounded(a, b):
    quotient = evaluate(f"{a} {b} /")
    assert abs(quotient * b) <= abs(a)
    assert abs(a) - abs(quotient * b) < abs(b)


@pytest.mark.parametrize(
    "expression, message",
    [
        ("1 +", "Error: need more numbers."),
        ("1 0 /", "Error: by 0 ?? "),
        ("1 2", "Error: expresion invalid"),
        ("", "Error: expresion invalid"),
        ("(1 + 1)", "Error: invalid format"),
        ("abc", "Error: invalid format"),
        ("00", "Error: invalid format"),
        ("1 2 ++", "Error: invalid format"),
    ],
)
def test_errors(expression, message):
    with pytest.raises(RpnError) as info:
        evaluate(expression)
    assert str(info.value) == message


@pytest.mark.parametrize("char, expected", [("+", True), ("-", True), ("*", True), ("/", True), ("%", False), ("1", False)])
def test_is_operator(char, expected):
    assert RpnCalculator().is_operator(char) is expected


def test_result_on_empty_calculator():
    with pytest.raises(RpnError, match="I dont have any result"):
        RpnCalculator().result()


def test_unknown_operator():
    calculator = RpnCalculator()
    calculator.calculate("3")
    with pytest.raises(RpnError, match="expresion invalid"):
        calculator.calculate("4")
    with pytest.raises(RpnError) as info:
        calculator.perform_operation("%")
    assert str(info.value) == "Error: not find your operator"


def test_perform_operation_needs_two_numbers():
    calculator = RpnCalculator()
    calculator.calculate("3")
    with pytest.raises(RpnError, match="need more numbers"):
        calculator.perform_operation("+")


def test_main_prints_result(capsys):
    assert main(["5"]) == 0
    assert capsys.readouterr().out == "5\n"


def test_main_reports_error(capsys):
    assert main(["1 +"]) == 1
    assert capsys.readouterr().err == "Error: need more numbers.\n"


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err