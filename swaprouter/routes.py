"""Breadth-first search for candidate routes and their validation."""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Iterable, List, Optional, Sequence, Set

from swaprouter.errors import (
    CurrentTokenOutDenomNotInPoolError,
    NoPoolsInRouteError,
    PreviousTokenOutDenomNotInPoolError,
    RoutePoolWithTokenInDenomError,
    RoutePoolWithTokenOutDenomError,
    TokenOutDenomMatchesTokenInDenomError,
    TokenOutMismatchBetweenRoutesError,
)
from swaprouter.models import (
    CandidatePool,
    CandidatePoolWrapper,
    CandidateRoute,
    CandidateRoutes,
    Coin,
    PoolWrapper,
)

_log = logging.getLogger(__name__)


def get_candidate_routes(
    pools: Sequence[PoolWrapper],
    token_in: Coin,
    token_out_denom: str,
    max_routes: int,
    max_pools_per_route: int,
    logger: Optional[logging.Logger] = None,
) -> CandidateRoutes:
    """Find up to ``max_routes`` routes from ``token_in`` to ``token_out_denom`` by BFS."""
    logger = logger or _log
    routes: List[List[CandidatePoolWrapper]] = []
    visited = [False] * len(pools)
    queue: Deque[List[CandidatePoolWrapper]] = deque([[]])

    while queue and len(routes) < max_routes:
        current_route = queue.popleft()

        last_pool_id = 0
        current_denom = token_in.denom
        if current_route:
            last_pool_id = current_route[-1].id
            current_denom = current_route[-1].token_out_denom

        for i, pool in enumerate(pools):
            if len(routes) >= max_routes:
                break
            if visited[i]:
                continue

            has_token_in = False
            has_token_out = False
            should_skip = False
            for denom in pool.pool_denoms:
                if denom == current_denom:
                    has_token_in = True
                if denom == token_out_denom:
                    has_token_out = True
                # Never pass through a pool holding the initial denom twice.
                if current_route and denom == token_in.denom:
                    should_skip = True
                    break

            if should_skip or not has_token_in:
                continue

            if not current_route and pool.amount_of(current_denom) < token_in.amount:
                visited[i] = True
                continue

            for denom in pool.pool_denoms:
                if denom == current_denom:
                    continue
                if has_token_out and denom != token_out_denom:
                    continue
                if last_pool_id == 0 or last_pool_id != pool.id:
                    new_path = current_route + [
                        CandidatePoolWrapper(
                            id=pool.id,
                            token_out_denom=denom,
                            pool_denoms=tuple(pool.pool_denoms),
                            idx=i,
                        )
                    ]
                    if len(new_path) <= max_pools_per_route:
                        if has_token_out:
                            routes.append(new_path)
                            break
                        queue.append(new_path)

        for hop in current_route:
            visited[hop.idx] = True

    return validate_and_filter_routes(routes, token_in.denom, logger)


def _route_passes(
    route_index: int,
    route: Sequence[CandidatePoolWrapper],
    token_in_denom: str,
    unique_pool_ids: Set[int],
    logger: logging.Logger,
) -> bool:
    """Check one route; raise on invalid routes and return False on routes to drop."""
    route_out_denom = route[-1].token_out_denom
    previous_token_out = token_in_denom
    seen_in_route: Set[int] = set()
    last = len(route) - 1

    for j, hop in enumerate(route):
        unique_pool_ids.add(hop.id)
        if hop.id in seen_in_route:
            return False
        seen_in_route.add(hop.id)

        found_previous = False
        found_current = False
        for denom in hop.pool_denoms:
            if denom == previous_token_out:
                found_previous = True
            if denom == hop.token_out_denom:
                found_current = True

            if 0 < j < last:
                if denom == token_in_denom:
                    logger.warning(
                        "route skipped - found token in intermediary pool: %s",
                        RoutePoolWithTokenInDenomError(route_index, token_in_denom),
                    )
                    return False
                if denom == route_out_denom:
                    logger.warning(
                        "route skipped - found token out in intermediary pool: %s",
                        RoutePoolWithTokenOutDenomError(route_index, hop.token_out_denom),
                    )
                    return False

        if not found_previous:
            raise PreviousTokenOutDenomNotInPoolError(route_index, hop.id, previous_token_out)
        if not found_current:
            raise CurrentTokenOutDenomNotInPoolError(route_index, hop.id, hop.token_out_denom)

        previous_token_out = hop.token_out_denom

    return True


def validate_and_filter_routes(
    candidate_routes: Iterable[Sequence[CandidatePoolWrapper]],
    token_in_denom: str,
    logger: Optional[logging.Logger] = None,
) -> CandidateRoutes:
    """Validate candidate routes, dropping those that revisit a pool or touch the
    token in or token out denom in an intermediary pool.

    Raises a RouterError when a route is malformed.
    """
    logger = logger or _log
    token_out_denom = ""
    filtered: List[CandidateRoute] = []
    unique_pool_ids: Set[int] = set()

    for i, route in enumerate(candidate_routes):
        if not route:
            raise NoPoolsInRouteError(i)

        if not _route_passes(i, route, token_in_denom, unique_pool_ids, logger):
            continue

        route_out_denom = route[-1].token_out_denom
        if i > 0 and route_out_denom != token_out_denom:
            raise TokenOutMismatchBetweenRoutesError(token_out_denom, route_out_denom)
        token_out_denom = route_out_denom

        filtered.append(
            CandidateRoute(pools=[CandidatePool(hop.id, hop.token_out_denom) for hop in route])
        )

    if token_out_denom == token_in_denom:
        raise TokenOutDenomMatchesTokenInDenomError(token_out_denom)

    return CandidateRoutes(routes=filtered, unique_pool_ids=unique_pool_ids)