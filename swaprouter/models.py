"""Core value types shared by the route finder and the quoting code."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, FrozenSet, List, Optional, Tuple


class PoolType(enum.IntEnum):
    """Kind of liquidity pool."""

    BALANCER = 0
    STABLESWAP = 1
    CONCENTRATED = 2
    COSMWASM = 3


@dataclass(frozen=True)
class Coin:
    """An integer amount of a single denomination."""

    denom: str
    amount: int

    def is_zero(self) -> bool:
        """Return True when the amount is zero."""
        return self.amount == 0

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


@dataclass(frozen=True)
class CandidatePool:
    """One hop of a candidate route: a pool and the denomination it yields."""

    id: int
    token_out_denom: str


@dataclass(frozen=True)
class CandidatePoolWrapper:
    """A candidate hop together with the pool's denominations and its index among all pools."""

    id: int
    token_out_denom: str
    pool_denoms: Tuple[str, ...] = ()
    idx: int = 0

    @property
    def candidate_pool(self) -> CandidatePool:
        return CandidatePool(self.id, self.token_out_denom)


@dataclass
class CandidateRoute:
    """An ordered sequence of hops from the token in to the token out."""

    pools: List[CandidatePool] = field(default_factory=list)


@dataclass
class CandidateRoutes:
    """Validated candidate routes and every pool ID seen while validating them."""

    routes: List[CandidateRoute] = field(default_factory=list)
    unique_pool_ids: set = field(default_factory=set)


@dataclass
class PoolWrapper:
    """A pool as seen by the router: identity, denominations and balances."""

    id: int
    pool_denoms: Tuple[str, ...]
    balances: Tuple[Coin, ...] = ()
    pool_type: PoolType = PoolType.BALANCER
    spread_factor: Decimal = Decimal(0)
    pool_liquidity_cap: int = 0
    chain_model: Any = None
    tick_model: Optional[Any] = None

    def amount_of(self, denom: str) -> int:
        """Return the pool balance of ``denom``, or 0 if the pool holds none."""
        return next((coin.amount for coin in self.balances if coin.denom == denom), 0)

    @property
    def denom_set(self) -> FrozenSet[str]:
        return frozenset(self.pool_denoms)