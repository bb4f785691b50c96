import math

import pytest

from basicprograms import cli, numbers, patterns, text


def run(capsys, *argv):
    code = cli.main(list(argv))
    return code, capsys.readouterr().out


def test_record_defaults(capsys):
    code, out = run(capsys, "record")
    assert code == 0
    assert out == "25\nHarsh\n"


def test_record_dataclass():
    rec = cli.Record(num=3, name="x")
    assert (rec.num, rec.name) == (3, "x")
    assert cli.Record() == cli.Record(25, "Harsh")


def test_gcd_lines(capsys):
    _, out = run(capsys, "gcd", "12", "6")
    assert out.split() == [str(math.gcd(12, 6))] * 3


def test_lcm_lines(capsys):
    _, out = run(capsys, "lcm", "4", "6")
    assert out.split() == [str(math.lcm(4, 6))] * 2


def test_even_odd_default(capsys):
    _, out = run(capsys, "even-odd")
    assert out == "Odd\n"


def test_even(capsys):
    _, out = run(capsys, "even-odd", "8")
    assert out == "even\n"


def test_factorial_default(capsys):
    _, out = run(capsys, "factorial")
    assert out == f"{math.factorial(5)}\n"


@pytest.mark.parametrize("n,expected", [(0, "Is Not Prime"), (1, "Is Not Prime"), (7, "Is Prime")])
def test_prime(capsys, n, expected):
    _, out = run(capsys, "prime", str(n))
    assert out == expected + "\n"


@pytest.mark.parametrize("year", [1900, 2000, 2023])
def test_leap(capsys, year):
    _, out = run(capsys, "leap", str(year))
    assert out.strip() == ("Leap" if numbers.is_leap_year(year) else "Not Leap")


def test_armstrong(capsys):
    _, out = run(capsys, "armstrong", "153")
    assert out == "Armstrong\n"


def test_fibonacci(capsys):
    _, out = run(capsys, "fibonacci", "10")
    assert [int(t) for t in out.split()] == numbers.fibonacci(10)


def test_digit_sum(capsys):
    _, out = run(capsys, "digit-sum", "-405")
    assert int(out) == numbers.digit_sum(405)


def test_vowels(capsys):
    _, out = run(capsys, "vowels", "Hello World")
    assert tuple(map(int, out.split())) == text.count_vowels_consonants("Hello World")


def test_reverse(capsys):
    _, out = run(capsys, "reverse", "Hello World")
    assert text.reverse(out.rstrip("\n")) == "Hello World"


def test_palindrome(capsys):
    _, out = run(capsys, "palindrome", "racecar")
    assert out == "Palindrome\n"
    _, out = run(capsys, "palindrome", "hello")
    assert out == "Not Palindrome\n"


def test_patterns(capsys):
    _, out = run(capsys, "patterns", "3")
    assert out == patterns.all_patterns(3)


def test_missing_command_exits():
    with pytest.raises(SystemExit):
        cli.main([])