# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for sequential and parallel composition."""

import pytest

from focus import (
    Alongside,
    Composed,
    Found,
    NotFound,
    Unsupported,
    ValidationError,
    compose,
    idx,
    make_lens,
    ok,
)

address = make_lens("address")
locale = make_lens("locale")
street = make_lens("street")


class TestSequentialComposition:
    def test_view_deep_map(self, test_structure):
        assert (address >> locale >> street).view(test_structure) == Found(
            "Fake St."
        )

    def test_set_deep_map_keeps_siblings(self, test_structure, pristine):
        result = (address >> locale >> street).set(
            test_structure, "Evergreen Terrace"
        )
        expected = {
            **test_structure,
            "address": {
                **test_structure["address"],
                "locale": {
                    **test_structure["address"]["locale"],
                    "street": "Evergreen Terrace",
                },
            },
        }
        assert result == Found(expected)
        assert test_structure == pristine

    def test_over_deep_map(self, test_structure):
        result = (address >> locale >> street).over(test_structure, str.upper)
        assert result.value["address"]["locale"]["street"] == "FAKE ST."
        assert result.value["address"]["city"] == "Springfield"

    def test_method_and_function_forms_agree(self):
        assert address.compose(locale, street) == compose(
            address, locale, street
        )
        assert compose(address, locale) == address >> locale

    def test_chains_are_flat(self):
        optic = (address >> locale) >> (street >> idx(0))
        assert isinstance(optic, Composed)
        assert len(optic.parts) == 4

    def test_associativity_is_structural(self):
        assert (address >> locale) >> street == address >> (locale >> street)

    def test_single_optic_is_returned_as_is(self):
        assert compose(address) is address

    def test_missing_intermediate_fails(self, test_structure, pristine):
        optic = make_lens("nope") >> street
        assert optic.view(test_structure) == NotFound("nope")
        assert optic.set(test_structure, "x") == NotFound("nope")
        assert test_structure == pristine

    def test_inner_failure_is_returned_verbatim(self, test_structure):
        optic = address >> make_lens("zip")
        assert optic.set(test_structure, "x") == NotFound("zip")

    def test_unsupported_stage(self, test_structure):
        optic = make_lens("name") >> make_lens("first")
        assert optic.view(test_structure) == Unsupported(str)

    def test_over_not_called_on_failure(self, test_structure):
        calls = []
        (make_lens("nope") >> street).over(test_structure, calls.append)
        assert calls == []

    def test_kind(self):
        assert (address >> street).kind == "lens"
        assert (make_lens("r") >> ok()).kind == "prism"

    def test_compose_validates(self):
        with pytest.raises(ValidationError):
            compose()
        with pytest.raises(TypeError):
            compose(address, "street")

    def test_rshift_rejects_non_optics(self):
        with pytest.raises(TypeError):
            address >> "street"


class TestAlongside:
    def test_view(self):
        pair = idx(0).alongside(idx(3))
        assert pair.view([1, 2, 3, 4, 5, 6]) == (Found(1), Found(4))

    def test_set_returns_two_structures(self):
        pair = Alongside(make_lens("a"), make_lens("b"))
        first, second = pair.set({"a": 1, "b": 2}, 0)
        assert first == Found({"a": 0, "b": 2})
        assert second == Found({"a": 1, "b": 0})

    def test_over(self):
        pair = Alongside(idx(0), idx(1))
        assert pair.over([1, 2], lambda x: x * 10) == (
            Found([10, 2]),
            Found([1, 20]),
        )

    def test_sides_fail_independently(self):
        pair = Alongside(make_lens("a"), make_lens("z"))
        assert pair.view({"a": 1}) == (Found(1), NotFound("z"))
        assert pair.set({"a": 1}, 5) == (Found({"a": 5}), NotFound("z"))

    def test_has_requires_both(self):
        pair = Alongside(make_lens("a"), make_lens("z"))
        assert not pair.has({"a": 1})
        assert pair.has({"a": 1, "z": 2})

    def test_view_or_raise(self):
        pair = Alongside(make_lens("a"), make_lens("b"))
        assert pair.view_or_raise({"a": 1, "b": 2}) == (1, 2)
        assert pair.view_or_raise({"a": 1}, None) == (1, None)

    def test_composition_distributes(self, test_structure):
        pair = address >> Alongside(locale >> street, make_lens("city"))
        assert pair == Alongside(
            address >> locale >> street, address >> make_lens("city")
        )
        assert pair.view(test_structure) == (
            Found("Fake St."),
            Found("Springfield"),
        )

    def test_composition_distributes_after(self):
        pair = Alongside(make_lens("a"), make_lens("b")) >> idx(0)
        assert pair.view({"a": [1], "b": [2]}) == (Found(1), Found(2))

    def test_rejects_non_optics(self):
        with pytest.raises(TypeError):
            Alongside(make_lens("a"), "b")
