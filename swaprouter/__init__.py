"""Route finding, route validation, split quoting and simple routable pools for liquidity-pool swaps."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "models",
    "pools",
    "precompute",
    "quotes",
    "routes",
]