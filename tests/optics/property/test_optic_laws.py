# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Property-based tests for the lens laws using Hypothesis.

These tests check the laws across randomized structures and values, for
single lenses and for composed chains.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from focus import Found, compose, idx, make_lens

# =============================================================================
# Hypothesis Strategies
# =============================================================================

values = st.one_of(
    st.none(),
    st.integers(),
    st.text(max_size=10),
    st.lists(st.integers(), max_size=3),
)
keys = st.text(min_size=1, max_size=5)
people = st.fixed_dictionaries(
    {"name": st.text(max_size=20)},
    optional={"age": st.integers(min_value=0, max_value=120)},
)


@st.composite
def nested_records(draw):
    """A three level dict-in-list-in-dict with a known path to the leaf."""
    leaf = draw(values)
    siblings = draw(st.dictionaries(keys, values, max_size=3))
    inner = {**siblings, "leaf": leaf}
    pos = draw(st.integers(min_value=0, max_value=3))
    fillers = draw(
        st.lists(st.integers(), min_size=pos + 1, max_size=pos + 3)
    )
    items = list(fillers)
    items[pos] = inner
    outer = {**draw(st.dictionaries(keys, values, max_size=3)), "items": items}
    return outer, pos


# =============================================================================
# Lens laws
# =============================================================================


@pytest.mark.hypothesis
@given(structure=people, new_name=st.text())
def test_put_get(structure, new_name):
    """Getting a value that was just set returns that value."""
    lens = make_lens("name")
    assert lens.view(lens.set(structure, new_name).value) == Found(new_name)


@pytest.mark.hypothesis
@given(structure=people)
def test_get_put(structure):
    """Setting the value that is already there changes nothing."""
    lens = make_lens("name")
    assert lens.set(structure, lens.view(structure).value) == Found(structure)


@pytest.mark.hypothesis
@given(structure=people, name1=st.text(), name2=st.text())
def test_put_put(structure, name1, name2):
    """The last set value wins and the first leaves no trace."""
    lens = make_lens("name")
    twice = lens.set(lens.set(structure, name1).value, name2)
    assert twice == lens.set(structure, name2)


@pytest.mark.hypothesis
@given(data=nested_records(), new=values)
def test_composed_laws(data, new):
    structure, pos = data
    optic = make_lens("items") >> idx(pos) >> make_lens("leaf")
    current = optic.view(structure)
    assert current
    assert optic.set(structure, current.value) == Found(structure)
    assert optic.view(optic.set(structure, new).value) == Found(new)


# =============================================================================
# Composition
# =============================================================================


@pytest.mark.hypothesis
@given(data=nested_records(), new=values)
def test_associativity(data, new):
    structure, pos = data
    a, b, c = make_lens("items"), idx(pos), make_lens("leaf")
    left = compose(compose(a, b), c)
    right = compose(a, compose(b, c))
    assert left.view(structure) == right.view(structure)
    assert left.set(structure, new) == right.set(structure, new)
    assert left.over(structure, repr) == right.over(structure, repr)


@pytest.mark.hypothesis
@given(structure=st.dictionaries(keys, values), new=values)
def test_non_creation(structure, new):
    """Setting through an absent path never adds keys."""
    optic = make_lens("__absent__") >> make_lens("leaf")
    result = optic.set(structure, new)
    assert not result
    assert "__absent__" not in structure


@pytest.mark.hypothesis
@given(items=st.lists(st.integers(), min_size=1), i=st.integers(0, 20))
def test_alongside_shape(items, i):
    a, b = idx(0), idx(i)
    assert a.alongside(b).view(items) == (a.view(items), b.view(items))
