"""Quotes over candidate routes: best single route and optimal splits."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence, Tuple

from swaprouter.errors import RouterError
from swaprouter.models import Coin

_log = logging.getLogger(__name__)

TOTAL_INCREMENTS = 10


class QuoteError(RouterError):
    """Raised when a quote cannot be computed."""


class Route(Protocol):
    """Anything that can estimate the amount out for a given amount in."""

    def calculate_token_out_by_token_in(self, token_in: Coin) -> Coin: ...


@dataclass
class RouteWithOutAmount:
    """A route together with the amounts it takes in and gives out in a quote."""

    route: Any
    out_amount: int
    in_amount: int

    def calculate_token_out_by_token_in(self, token_in: Coin) -> Coin:
        """Delegate the estimate to the wrapped route."""
        return self.route.calculate_token_out_by_token_in(token_in)

    @property
    def pools(self) -> Sequence[Any]:
        return getattr(self.route, "pools", ())


@dataclass
class Quote:
    """The result of quoting ``amount_in`` over one or more routes."""

    amount_in: Coin
    amount_out: int
    route: List[RouteWithOutAmount] = field(default_factory=list)


@dataclass
class Split:
    """Routes making up a split and the total amount they give out."""

    routes: List[RouteWithOutAmount] = field(default_factory=list)
    current_total_out: int = 0


def _amount_of(coin: Optional[Coin]) -> int:
    if coin is None or coin.amount is None:
        return 0
    return coin.amount


def get_split_quote(routes: Sequence[Any], token_in: Coin) -> Quote:
    """Split ``token_in`` over ``routes`` in tenths to maximise the amount out.

    Uses a knapsack-style dynamic programme over the routes and increments.
    """
    if not routes:
        raise QuoteError("no routes")

    if len(routes) == 1:
        only = routes[0]
        coin_out = only.calculate_token_out_by_token_in(token_in)
        out = _amount_of(coin_out)
        return Quote(
            amount_in=token_in,
            amount_out=out,
            route=[RouteWithOutAmount(route=only, out_amount=out, in_amount=token_in.amount)],
        )

    def in_amount_for(p: int) -> int:
        return p * token_in.amount // TOTAL_INCREMENTS

    out_cache: Dict[Tuple[int, int], int] = {}

    def out_amount_for(route_index: int, in_amount: int) -> int:
        key = (route_index, in_amount)
        if key not in out_cache:
            try:
                coin_out = routes[route_index].calculate_token_out_by_token_in(
                    Coin(token_in.denom, in_amount)
                )
                out_cache[key] = _amount_of(coin_out)
            except Exception:  # a failing estimate counts as no output
                out_cache[key] = 0
        return out_cache[key]

    n = len(routes)
    dp = [[0] * (n + 1) for _ in range(TOTAL_INCREMENTS + 1)]
    proportions = [[0] * (n + 1) for _ in range(TOTAL_INCREMENTS + 1)]

    for x in range(1, TOTAL_INCREMENTS + 1):
        for j in range(1, n + 1):
            dp[x][j] = dp[x][j - 1]
            proportions[x][j] = 0
            for p in range(x + 1):
                choice = dp[x - p][j - 1] + out_amount_for(j - 1, in_amount_for(p))
                if choice > dp[x][j]:
                    dp[x][j] = choice
                    proportions[x][j] = p

    optimal = [0] * (n + 1)
    x = TOTAL_INCREMENTS
    for j in range(n, 0, -1):
        optimal[j] = proportions[x][j]
        x -= proportions[x][j]
    increments = optimal[1:]

    best_amount_out = dp[TOTAL_INCREMENTS][n]
    if best_amount_out == 0:
        raise QuoteError("amount out is zero, try increasing amount in")

    total_increments_in_splits = 0
    total_out_from_splits = 0
    result_routes: List[RouteWithOutAmount] = []
    for i, (route, increment) in enumerate(zip(routes, increments)):
        in_amount = in_amount_for(increment)
        out_amount = out_amount_for(i, in_amount)

        if in_amount == 0 and out_amount == 0:
            continue
        if in_amount == 0:
            raise QuoteError(
                f"in amount is zero when out is not ({out_amount}), route index ({i})"
            )
        if out_amount == 0:
            raise QuoteError(
                f"out amount is zero when in is not ({in_amount}), route index ({i})"
            )

        result_routes.append(
            RouteWithOutAmount(route=route, out_amount=out_amount, in_amount=in_amount)
        )
        total_increments_in_splits += increment
        total_out_from_splits += out_amount

    if total_out_from_splits != best_amount_out:
        raise QuoteError(
            f"total amount out from splits ({total_out_from_splits}) does not equal "
            f"actual amount out ({best_amount_out})"
        )

    if total_increments_in_splits != TOTAL_INCREMENTS:
        raise QuoteError(
            f"total increments ({TOTAL_INCREMENTS}) does not match expected total "
            f"increments ({TOTAL_INCREMENTS})"
        )

    return Quote(amount_in=token_in, amount_out=best_amount_out, route=result_routes)


def estimate_and_rank_single_route_quote(
    routes: Sequence[Any],
    token_in: Coin,
    logger: Optional[logging.Logger] = None,
) -> Tuple[Quote, List[RouteWithOutAmount]]:
    """Quote ``token_in`` over each route alone.

    Returns the best quote and all successful routes sorted by amount out,
    highest first. Routes whose estimate fails are skipped; if all fail,
    the first failure is raised.
    """
    logger = logger or _log
    if not routes:
        raise QuoteError(f"no routes were provided for token in ({token_in.denom})")

    ranked: List[RouteWithOutAmount] = []
    failures: List[Exception] = []
    for route in routes:
        try:
            coin_out = route.calculate_token_out_by_token_in(token_in)
        except Exception as exc:
            logger.debug("skipping single route due to error in estimate: %s", exc)
            failures.append(exc)
            continue
        ranked.append(
            RouteWithOutAmount(
                route=route, out_amount=_amount_of(coin_out), in_amount=token_in.amount
            )
        )

    if not ranked and failures:
        raise failures[0]

    ranked.sort(key=lambda r: r.out_amount, reverse=True)
    best = ranked[0]
    quote = Quote(amount_in=token_in, amount_out=best.out_amount, route=[best])
    return quote, ranked


def get_best_single_route_quote(
    token_in: Coin,
    routes: Sequence[Any],
    logger: Optional[logging.Logger] = None,
) -> Quote:
    """Return the quote of the single route giving the largest amount out."""
    quote, _ = estimate_and_rank_single_route_quote(routes, token_in, logger)
    return quote


RouteEstimator = Callable[[Coin], Coin]