"""Hypothesis strategies for property-based testing of remote_maybe types."""

from hypothesis import strategies as st

from remote_maybe import Absent, Failed, Loading, NotAsked, Present, Succeeded

# -----------------------------------------------------------------------------
# Basic value strategies
# -----------------------------------------------------------------------------

integers = st.integers(min_value=-(2**31), max_value=2**31)
texts = st.text(min_size=0, max_size=50)
payloads = st.one_of(st.none(), integers, texts, st.booleans())

# Exception strategies
exceptions = st.sampled_from([
    ValueError('test'),
    TypeError('test'),
    RuntimeError('test'),
])
errors = st.one_of(exceptions, texts)

# Pure integer functions for functor laws
int_functions = st.sampled_from([
    lambda x: x + 1,
    lambda x: x * 2,
    lambda x: x - 7,
    lambda x: -x,
    lambda x: x * x,
    abs,
])

# -----------------------------------------------------------------------------
# Container strategies
# -----------------------------------------------------------------------------

presents = integers.map(Present)
maybes = st.one_of(presents, st.just(Absent))

succeededs = integers.map(Succeeded)
faileds = errors.map(Failed)
unsettled = st.sampled_from([NotAsked, Loading])
not_succeeded = st.one_of(unsettled, faileds)
remote_datas = st.one_of(succeededs, not_succeeded)
