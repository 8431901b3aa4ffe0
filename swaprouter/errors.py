"""Errors raised while building and validating swap routes."""

from __future__ import annotations

from dataclasses import dataclass


class RouterError(Exception):
    """Base class for all routing errors."""


class NilCurrentRouteError(RouterError):
    """Raised when a route under construction is missing."""

    def __init__(self, message: str = "currentRoute cannot be nil") -> None:
        super().__init__(message)


class NilRouterRepositoryError(RouterError):
    """Raised when the router repository has not been configured."""

    def __init__(self, message: str = "router repository is not set") -> None:
        super().__init__(message)


class NilPoolsRepositoryError(RouterError):
    """Raised when the pools repository has not been configured."""

    def __init__(self, message: str = "pools repository is not set") -> None:
        super().__init__(message)


@dataclass(eq=True)
class SortedPoolsAndPoolsUsedLengthMismatchError(RouterError):
    sorted_pools_len: int
    pools_used_len: int

    def __str__(self) -> str:
        return (
            f"length of sorted pools ({self.sorted_pools_len}) and pools used "
            f"({self.pools_used_len}) must be the same"
        )


@dataclass(eq=True)
class SortedPoolsAndPoolsInRouteLengthMismatchError(RouterError):
    sorted_pools_len: int
    pools_in_route: int

    def __str__(self) -> str:
        return (
            f"length of pools in route ({self.pools_in_route}) should not exceed "
            f"length of sorted pools ({self.sorted_pools_len})"
        )


@dataclass(eq=True)
class TokenOutDenomMatchesTokenInDenomError(RouterError):
    denom: str

    def __str__(self) -> str:
        return f"token out denom matches token in denom ({self.denom}). Must be different"


@dataclass(eq=True)
class NoPoolsInRouteError(RouterError):
    route_index: int

    def __str__(self) -> str:
        return f"route {self.route_index} has no pools"


@dataclass(eq=True)
class TokenOutMismatchBetweenRoutesError(RouterError):
    token_out_denom_route_a: str
    token_out_denom_route_b: str

    def __str__(self) -> str:
        return (
            "all routes must have the same final token out denom. Observed "
            f"({self.token_out_denom_route_a}) and ({self.token_out_denom_route_b})"
        )


@dataclass(eq=True)
class RoutePoolWithTokenInDenomError(RouterError):
    route_index: int
    token_in_denom: str

    def __str__(self) -> str:
        return (
            f"route {self.route_index} has an intermediary pool with token in denom "
            f"{self.token_in_denom}"
        )


@dataclass(eq=True)
class RoutePoolWithTokenOutDenomError(RouterError):
    route_index: int
    token_out_denom: str

    def __str__(self) -> str:
        return (
            f"route {self.route_index} has an intermediary pool with token out denom "
            f"{self.token_out_denom}"
        )


@dataclass(eq=True)
class PreviousTokenOutDenomNotInPoolError(RouterError):
    route_index: int
    pool_id: int
    previous_token_out_denom: str

    def __str__(self) -> str:
        return (
            f"previous token out denom ({self.previous_token_out_denom}) not found in "
            f"pool ({self.pool_id}), route index ({self.route_index})"
        )


@dataclass(eq=True)
class CurrentTokenOutDenomNotInPoolError(RouterError):
    route_index: int
    pool_id: int
    current_token_out_denom: str

    def __str__(self) -> str:
        return (
            f"current token out denom ({self.current_token_out_denom}) not found in "
            f"pool ({self.pool_id}), route index ({self.route_index})"
        )