# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the function combinators."""

from focus import Found, NotFound, Unsupported, make_lens
from focus.functorial import bind, compose, curry, flip, kleisli, lift


def test_compose_is_right_to_left():
    f_of_g = compose(lambda x: x + 2, lambda y: y * 3)
    assert f_of_g(2) == 8


def test_curry():
    def volume(x, y, z, unit="cm"):
        return f"{x * y * z}{unit}"

    assert curry(volume)(2)(3)(4) == "24cm"


def test_curry_nullary():
    assert curry(lambda: 1) == 1


def test_lift():
    assert lift(4) == Found(4)


def test_bind_one():
    bound_square = bind(lambda z: z * z)
    assert bound_square(Found(4)) == Found(16)
    assert bound_square(NotFound("x")) == NotFound("x")


def test_bind_non_result():
    assert bind(str)(4) == Unsupported(int, "bind")


def test_bind_two_pipes():
    piped = bind(bind(lambda x: x * 3), lambda x: x - 2)
    assert piped(lift(5)) == Found(13)


def test_kleisli():
    f = lambda x: Found(x + 2)  # noqa: E731
    g = lambda y: y * 3  # noqa: E731
    assert kleisli(f, g)(2) == Found(12)


def test_kleisli_with_optic_read():
    name_length = kleisli(make_lens("name").view, len)
    assert name_length({"name": "Homer"}) == Found(5)
    assert name_length({}) == NotFound("name")


def test_flip():
    assert flip(lambda a, b: a - b)(1, 10) == 9
