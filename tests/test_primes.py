import pytest

from primeprobe.primes import is_prime, next_prime


@pytest.mark.parametrize("value", [2, 3, 691, 811])
def test_known_primes(value):
    assert is_prime(value) is True


@pytest.mark.parametrize("a, b", [(2, 2), (3, 3), (5, 7), (7, 7), (13, 17), (29, 31)])
def test_products_are_not_prime(a, b):
    assert is_prime(a * b) is False


@pytest.mark.parametrize("value", [1, 0, -1, -50])
def test_undefined_below_two(value):
    with pytest.raises(ValueError):
        is_prime(value)


@pytest.mark.parametrize("value", [2, 3, 691, 811])
def test_next_prime_of_prime_is_itself(value):
    assert next_prime(value) == value


@pytest.mark.parametrize("value", [-5, 0, 1])
def test_next_prime_below_two(value):
    assert next_prime(value) == 2


@pytest.mark.parametrize("start", range(2, 200))
def test_next_prime_is_smallest_prime_not_below(start):
    result = next_prime(start)
    assert result >= start
    assert is_prime(result)
    assert not any(is_prime(n) for n in range(start, result))