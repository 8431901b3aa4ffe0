from swaprouter.models import (
    CandidatePool,
    CandidatePoolWrapper,
    CandidateRoutes,
    Coin,
    PoolWrapper,
)


def test_coin_is_zero():
    assert Coin("uosmo", 0).is_zero() is True
    assert Coin("uosmo", 7).is_zero() is False


def test_coin_str_is_amount_then_denom():
    assert str(Coin("uosmo", 5)) == "5uosmo"


def test_pool_wrapper_amount_of_present_denom():
    pool = PoolWrapper(id=1, pool_denoms=("a", "b"), balances=(Coin("a", 100), Coin("b", 250)))
    assert pool.amount_of("a") == 100
    assert pool.amount_of("b") == 250


def test_pool_wrapper_amount_of_missing_denom_is_zero():
    pool = PoolWrapper(id=1, pool_denoms=("a",), balances=(Coin("a", 100),))
    assert pool.amount_of("zzz") == 0


def test_candidate_pool_wrapper_exposes_candidate_pool():
    wrapper = CandidatePoolWrapper(id=4, token_out_denom="b", pool_denoms=("a", "b"), idx=2)
    assert wrapper.candidate_pool == CandidatePool(4, "b")


def test_candidate_routes_defaults_are_independent():
    first = CandidateRoutes()
    second = CandidateRoutes()
    first.unique_pool_ids.add(1)
    assert second.unique_pool_ids == set()
    assert first.routes == []