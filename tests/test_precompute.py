import pytest

from swaprouter.precompute import get_precompute_order_of_magnitude


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, 0),
        (1, 0),
        (9, 0),
        (10**9 * 10**6 + 1, 15),
        (1234567890323344555, 18),
    ],
)
def test_fixed_cases(amount, expected):
    assert get_precompute_order_of_magnitude(amount) == expected


@pytest.mark.parametrize("power", range(1, 20))
def test_exact_power_of_ten(power):
    assert get_precompute_order_of_magnitude(10**power) == power


@pytest.mark.parametrize("power", range(1, 20))
def test_power_of_ten_plus_one(power):
    assert get_precompute_order_of_magnitude(10**power + 1) == power


@pytest.mark.parametrize("power", range(1, 20))
def test_power_of_ten_minus_one(power):
    assert get_precompute_order_of_magnitude(10**power - 1) == power - 1


def test_monotonic_over_range():
    previous = 0
    for amount in range(0, 20000, 7):
        current = get_precompute_order_of_magnitude(amount)
        assert current >= previous
        previous = current