from decimal import Decimal

import pytest

from swaprouter.errors import RouterError
from swaprouter.models import Coin, PoolType
from swaprouter.pools import (
    CosmWasmPoolModel,
    InvalidPoolTypeError,
    PoolError,
    RoutableResultPool,
    RoutableTransmuterPool,
    TransmuterInsufficientBalanceError,
    charge_taker_fee_exact_in,
    validate_balance,
)

USDC = "usdc"
ETH = "eth"
DEFAULT_AMOUNT = 1_000_000
DEFAULT_BALANCES = (Coin(USDC, DEFAULT_AMOUNT), Coin(ETH, DEFAULT_AMOUNT))


def _transmuter(balances, token_out_denom=ETH, taker_fee=Decimal(0)):
    return RoutableTransmuterPool(
        chain_pool=CosmWasmPoolModel(pool_id=7, code_id=148),
        balances=balances,
        token_out_denom=token_out_denom,
        taker_fee=taker_fee,
    )


def test_valid_transmuter_quote():
    pool = _transmuter(DEFAULT_BALANCES)
    out = pool.calculate_token_out_by_token_in(Coin(USDC, DEFAULT_AMOUNT))
    assert out == Coin(ETH, DEFAULT_AMOUNT)


def test_token_in_larger_than_balance_of_token_in_is_fine():
    balances = (Coin(USDC, DEFAULT_AMOUNT - 1), Coin(ETH, DEFAULT_AMOUNT))
    pool = _transmuter(balances)
    out = pool.calculate_token_out_by_token_in(Coin(USDC, DEFAULT_AMOUNT))
    assert out.amount == DEFAULT_AMOUNT


def test_token_in_larger_than_balance_of_token_out_errors():
    balances = (Coin(USDC, DEFAULT_AMOUNT), Coin(ETH, DEFAULT_AMOUNT - 1))
    pool = _transmuter(balances)
    with pytest.raises(TransmuterInsufficientBalanceError) as info:
        pool.calculate_token_out_by_token_in(Coin(USDC, DEFAULT_AMOUNT))
    assert info.value == TransmuterInsufficientBalanceError(
        denom=ETH,
        balance_amount=str(DEFAULT_AMOUNT - 1),
        amount=str(DEFAULT_AMOUNT),
    )
    assert isinstance(info.value, RouterError)


def test_validate_balance_equal_amount_passes_and_missing_denom_fails():
    assert validate_balance(5, (Coin(ETH, 5),), ETH) is None
    with pytest.raises(TransmuterInsufficientBalanceError) as info:
        validate_balance(1, (Coin(ETH, 5),), USDC)
    assert info.value.balance_amount == "0"


@pytest.mark.parametrize(
    "amount, fee, expected",
    [
        (1000, Decimal("0.002"), 998),
        (1000, Decimal(0), 1000),
        (999, Decimal("0.01"), 989),
        (1, Decimal("0.5"), 0),
    ],
)
def test_charge_taker_fee_exact_in(amount, fee, expected):
    assert charge_taker_fee_exact_in(Coin(USDC, amount), fee) == Coin(USDC, expected)


def test_transmuter_charges_its_taker_fee():
    pool = _transmuter(DEFAULT_BALANCES, taker_fee=Decimal("0.002"))
    assert pool.charge_taker_fee_exact_in(Coin(USDC, 1000)) == Coin(USDC, 998)


def test_transmuter_properties_and_spot_price():
    pool = _transmuter(DEFAULT_BALANCES)
    assert pool.id == 7
    assert pool.code_id == 148
    assert pool.pool_type == PoolType.COSMWASM
    assert pool.pool_denoms == (USDC, ETH)
    assert pool.is_generalized_cosmwasm_pool is False
    assert pool.calc_spot_price(USDC, ETH) == Decimal(1)


def test_transmuter_str():
    pool = _transmuter(DEFAULT_BALANCES)
    assert str(pool) == "pool (7), pool type (3) Transmuter, pool denoms ([usdc eth]), token out (eth)"


def test_result_pool_str_and_denoms():
    pool = RoutableResultPool(
        id=3,
        pool_type=PoolType.CONCENTRATED,
        balances=(Coin("bar", 1), Coin("foo", 2)),
        token_out_denom="foo",
    )
    assert pool.pool_denoms == ("bar", "foo")
    assert str(pool) == "pool (3), pool type (2), pool denoms ([bar foo])"


def test_result_pool_charges_taker_fee():
    pool = RoutableResultPool(id=1, pool_type=PoolType.BALANCER, taker_fee=Decimal("0.002"))
    assert pool.charge_taker_fee_exact_in(Coin(USDC, 1000)) == Coin(USDC, 998)


def test_result_pool_cannot_quote_or_price():
    pool = RoutableResultPool(id=1, pool_type=PoolType.BALANCER)
    with pytest.raises(PoolError):
        pool.calculate_token_out_by_token_in(Coin(USDC, 10))
    with pytest.raises(PoolError):
        pool.calc_spot_price(USDC, ETH)


def test_invalid_pool_type_error_message():
    err = InvalidPoolTypeError(2)
    assert str(err) == "invalid pool type (2)"
    assert err == InvalidPoolTypeError(2)