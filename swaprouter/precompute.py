"""Order-of-magnitude lookup for integer amounts using a precomputed table."""

from __future__ import annotations

from typing import List, Optional, Tuple

_MAX_LOOKUP_POW_TEN = 9


def _build_lookup_table() -> Tuple[List[Tuple[int, Optional[int]]], int]:
    """Build the bit-length to order-of-magnitude table and the divisor used beyond it."""
    next_pow_ten = 10
    next_bit_len = next_pow_ten.bit_length()
    cur_index = 0
    cur_bit_len = 1

    table: List[Tuple[int, Optional[int]]] = [(0, None)]
    while cur_index <= _MAX_LOOKUP_POW_TEN:
        if cur_bit_len < next_bit_len:
            table.append((cur_index, None))
        else:
            cmp_ten = next_pow_ten
            next_pow_ten *= 10
            next_bit_len = next_pow_ten.bit_length()
            cur_index += 1
            table.append((cur_index, cmp_ten))
        cur_bit_len += 1

    return table, next_pow_ten // 100


_BIT_LEN_TO_ORDER, _MAX_LOOKUP_VALUE = _build_lookup_table()


def _quo_truncated(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def get_precompute_order_of_magnitude(amount: int) -> int:
    """Return the base-10 order of magnitude of ``amount`` (0 for 0)."""
    bit_len = amount.bit_length()
    if bit_len >= len(_BIT_LEN_TO_ORDER):
        reduced = _quo_truncated(amount, _MAX_LOOKUP_VALUE)
        return _MAX_LOOKUP_POW_TEN + get_precompute_order_of_magnitude(reduced)

    order, cmp_value = _BIT_LEN_TO_ORDER[bit_len]
    if cmp_value is None:
        return order
    if amount < cmp_value:
        return order - 1
    return order