"""Routable pools that quote without consulting the chain: transmuter and result pools."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Iterable, Tuple

from swaprouter.errors import RouterError
from swaprouter.models import Coin, PoolType

_ONE = Decimal(1)


class PoolError(RouterError):
    """Base class for errors raised by routable pools."""


@dataclass(eq=True)
class InvalidPoolTypeError(PoolError):
    pool_type: int

    def __str__(self) -> str:
        return f"invalid pool type ({self.pool_type})"


@dataclass(eq=True)
class TransmuterInsufficientBalanceError(PoolError):
    denom: str
    balance_amount: str
    amount: str

    def __str__(self) -> str:
        return (
            f"insufficient balance of token ({self.denom}), balance "
            f"({self.balance_amount}), amount ({self.amount})"
        )


def _amount_of(balances: Iterable[Coin], denom: str) -> int:
    return next((coin.amount for coin in balances if coin.denom == denom), 0)


def _format_denoms(denoms: Iterable[str]) -> str:
    return "[" + " ".join(denoms) + "]"


def charge_taker_fee_exact_in(token_in: Coin, taker_fee: Decimal) -> Coin:
    """Return ``token_in`` reduced by ``taker_fee``, truncated to an integer amount."""
    with localcontext() as ctx:
        ctx.prec = 120
        after_fee = Decimal(token_in.amount) * (_ONE - Decimal(taker_fee))
    return Coin(token_in.denom, int(after_fee))


def validate_balance(token_in_amount: int, balances: Iterable[Coin], denom_to_validate: str) -> None:
    """Raise if the pool holds less of ``denom_to_validate`` than ``token_in_amount``."""
    balance = _amount_of(balances, denom_to_validate)
    if token_in_amount > balance:
        raise TransmuterInsufficientBalanceError(
            denom=denom_to_validate,
            balance_amount=str(balance),
            amount=str(token_in_amount),
        )


@dataclass(frozen=True)
class CosmWasmPoolModel:
    """The chain-side description of a CosmWasm pool."""

    pool_id: int
    code_id: int
    contract_address: str = ""


@dataclass
class RoutableTransmuterPool:
    """A CosmWasm transmuter pool: swaps one-to-one as long as the pool has the balance."""

    chain_pool: CosmWasmPoolModel
    balances: Tuple[Coin, ...] = ()
    token_out_denom: str = ""
    taker_fee: Decimal = Decimal(0)
    spread_factor: Decimal = Decimal(0)

    @property
    def id(self) -> int:
        return self.chain_pool.pool_id

    @property
    def code_id(self) -> int:
        return self.chain_pool.code_id

    @property
    def pool_denoms(self) -> Tuple[str, ...]:
        return tuple(coin.denom for coin in self.balances)

    @property
    def pool_type(self) -> PoolType:
        return PoolType.COSMWASM

    @property
    def is_generalized_cosmwasm_pool(self) -> bool:
        return False

    def calculate_token_out_by_token_in(self, token_in: Coin) -> Coin:
        """Return the same amount in the out denom, if the pool holds enough of it."""
        if self.pool_type != PoolType.COSMWASM:
            raise InvalidPoolTypeError(int(self.pool_type))
        validate_balance(token_in.amount, self.balances, self.token_out_denom)
        return Coin(self.token_out_denom, token_in.amount)

    def charge_taker_fee_exact_in(self, token_in: Coin) -> Coin:
        """Return ``token_in`` after this pool's taker fee."""
        return charge_taker_fee_exact_in(token_in, self.taker_fee)

    def calc_spot_price(self, base_denom: str, quote_denom: str) -> Decimal:
        """Transmuter swaps are one-to-one, so the spot price is always 1."""
        return Decimal(1)

    def __str__(self) -> str:
        return (
            f"pool ({self.id}), pool type ({int(PoolType.COSMWASM)}) Transmuter, "
            f"pool denoms ({_format_denoms(self.pool_denoms)}), "
            f"token out ({self.token_out_denom})"
        )


@dataclass
class RoutableResultPool:
    """Pool data returned to clients inside a quote; it cannot quote by itself."""

    id: int
    pool_type: PoolType
    spread_factor: Decimal = Decimal(0)
    token_out_denom: str = ""
    taker_fee: Decimal = Decimal(0)
    code_id: int = 0
    balances: Tuple[Coin, ...] = ()

    @property
    def pool_denoms(self) -> Tuple[str, ...]:
        return tuple(coin.denom for coin in self.balances)

    @property
    def is_generalized_cosmwasm_pool(self) -> bool:
        return False

    def _unsupported(self, operation: str) -> PoolError:
        return PoolError(f"result pool ({self.id}) cannot {operation}: not implemented")

    def calculate_token_out_by_token_in(self, token_in: Coin) -> Coin:
        """Result pools carry no pool state, so they cannot estimate a swap."""
        operation = (
            f"estimate the amount out of {self.token_out_denom or 'any denom'} "
            f"for {token_in.amount}{token_in.denom}"
        )
        raise self._unsupported(operation)

    def charge_taker_fee_exact_in(self, token_in: Coin) -> Coin:
        """Return ``token_in`` after this pool's taker fee."""
        return charge_taker_fee_exact_in(token_in, self.taker_fee)

    def calc_spot_price(self, base_denom: str, quote_denom: str) -> Decimal:
        """Result pools carry no pool state, so they have no spot price."""
        operation = f"compute the spot price of {base_denom} in {quote_denom}"
        raise self._unsupported(operation)

    def __str__(self) -> str:
        return (
            f"pool ({self.id}), pool type ({int(self.pool_type)}), "
            f"pool denoms ({_format_denoms(self.pool_denoms)})"
        )