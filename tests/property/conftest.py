"""Hypothesis strategies for property testing.

Provides reusable strategies for role magnitudes and role combinations.
"""

from hypothesis import strategies as st

MAX_BITS = 64


def single_roles():
    """Valid single-role magnitudes: zero or a power of two."""
    return st.one_of(
        st.just(0),
        st.integers(min_value=0, max_value=MAX_BITS - 1).map(lambda bit: 1 << bit),
    )


def composite_roles():
    """Magnitudes with at least two bits set."""
    return st.integers(min_value=3, max_value=(1 << MAX_BITS) - 1).filter(
        lambda v: v.bit_count() > 1
    )


def combinations():
    """Any stored manager value."""
    return st.integers(min_value=0, max_value=(1 << MAX_BITS) - 1)


@st.composite
def clean_bit(draw):
    """A (combination, single role) pair where the role bit is not set."""
    value = draw(combinations())
    bit = draw(st.integers(min_value=0, max_value=MAX_BITS - 1))
    return value & ~(1 << bit), 1 << bit
