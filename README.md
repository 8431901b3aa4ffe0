# swaprouter

Routing primitives for swapping tokens through liquidity pools: finding
candidate routes between two denominations, validating and filtering those
routes, quoting an input amount over the best single route or split across
several routes, and simple pools that quote without any outside state.

It is a library only; it has no command-line interface.

## Installation

```
pip install swaprouter
```

For running the test suite:

```
pip install "swaprouter[test]"
pytest
```

## Modules

| Module | Purpose |
| --- | --- |
| `swaprouter.models` | `Coin`, `PoolType`, `PoolWrapper`, `CandidatePool`, `CandidatePoolWrapper`, `CandidateRoute`, `CandidateRoutes` |
| `swaprouter.routes` | `get_candidate_routes`, `validate_and_filter_routes` |
| `swaprouter.quotes` | `get_split_quote`, `get_best_single_route_quote`, `estimate_and_rank_single_route_quote`, `Quote`, `RouteWithOutAmount`, `Split`, `QuoteError` |
| `swaprouter.pools` | `RoutableTransmuterPool`, `RoutableResultPool`, `CosmWasmPoolModel`, `charge_taker_fee_exact_in`, `validate_balance`, and the pool errors |
| `swaprouter.precompute` | `get_precompute_order_of_magnitude` |
| `swaprouter.errors` | `RouterError` and the exceptions raised while validating routes |

## Finding and validating routes

`get_candidate_routes(pools, token_in, token_out_denom, max_routes,
max_pools_per_route, logger=None)` runs a breadth-first search over the given
`PoolWrapper` list, in the order given. A pool is only used as the first hop
if it holds at least the input amount of the input denomination. The search
stops once `max_routes` routes are found, and no route has more than
`max_pools_per_route` hops.

The routes found are passed through `validate_and_filter_routes`, which:

- drops routes that use the same pool twice, or whose intermediate hops hold
  the input denomination or the route's output denomination (a warning is
  logged for the latter two);
- raises `NoPoolsInRouteError`, `PreviousTokenOutDenomNotInPoolError`,
  `CurrentTokenOutDenomNotInPoolError`, `TokenOutMismatchBetweenRoutesError`
  or `TokenOutDenomMatchesTokenInDenomError` for malformed routes.

The result is a `CandidateRoutes` with the kept `routes` and the set of every
pool ID seen in `unique_pool_ids`.

```python
from swaprouter.models import Coin, PoolWrapper
from swaprouter.routes import get_candidate_routes

pools = [
    PoolWrapper(
        id=1,
        pool_denoms=("uosmo", "uatom"),
        balances=(Coin("uosmo", 10_000_000), Coin("uatom", 5_000_000)),
    ),
]

found = get_candidate_routes(pools, Coin("uosmo", 1_000_000), "uatom", 10, 4)
for route in found.routes:
    print([(pool.id, pool.token_out_denom) for pool in route.pools])
# [(1, 'uatom')]
```

## Quoting

A route, for quoting, is any object with a
`calculate_token_out_by_token_in(token_in)` method returning a `Coin`.

- `get_split_quote(routes, token_in)` splits the input into ten equal
  increments and uses dynamic programming to find the distribution across
  routes with the highest total output. With one route it quotes that route
  alone. A route whose estimate raises is treated as giving nothing for that
  increment. It raises `QuoteError` for an empty route list, a zero total
  output, or an inconsistent split.
- `estimate_and_rank_single_route_quote(routes, token_in, logger=None)`
  quotes the full amount over each route and returns the best `Quote` and all
  successful routes sorted by amount out, highest first. Failing routes are
  skipped; if every route fails, the first failure is raised.
- `get_best_single_route_quote(token_in, routes, logger=None)` returns just
  the best quote.

```python
from decimal import Decimal
from swaprouter.models import Coin
from swaprouter.pools import CosmWasmPoolModel, RoutableTransmuterPool
from swaprouter.quotes import get_split_quote

pool = RoutableTransmuterPool(
    chain_pool=CosmWasmPoolModel(pool_id=7, code_id=148),
    balances=(Coin("usdc", 1_000_000), Coin("usdt", 1_000_000)),
    token_out_denom="usdt",
    taker_fee=Decimal("0.001"),
)

quote = get_split_quote([pool], Coin("usdc", 500_000))
print(quote.amount_out)            # 500000
for split in quote.route:
    print(split.in_amount, split.out_amount)
```

## Pools

- `RoutableTransmuterPool` swaps one-to-one: the amount out equals the amount
  in, provided the pool's balance of the output denomination covers it;
  otherwise `TransmuterInsufficientBalanceError` is raised. Its spot price is
  always `Decimal(1)`.
- `RoutableResultPool` carries pool data for presenting in quotes. It cannot
  estimate a swap or a spot price; both raise `PoolError`.
- `charge_taker_fee_exact_in(token_in, taker_fee)` returns the input reduced
  by the fee, truncated to an integer amount. Both pool classes expose it as a
  method using their own `taker_fee`.
- `validate_balance(token_in_amount, balances, denom)` raises
  `TransmuterInsufficientBalanceError` when the balance of `denom` is below
  the amount.

## Order of magnitude

`get_precompute_order_of_magnitude(amount)` returns the base-10 order of
magnitude of a non-negative integer (0 for 0 through 9, 1 for 10 through 99,
and so on) using a table indexed by bit length.

## What this package does not do

- It keeps no store of taker fees; pass the fee to each pool yourself.
- It does not query contracts or a chain node, so it has no pools that are
  quoted by such queries, and no pool math for balancer, stableswap or
  concentrated-liquidity pools.
- It does not build routable pools from `PoolWrapper` records; create
  `RoutableTransmuterPool` or your own route objects directly.