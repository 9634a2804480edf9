#!/usr/bin/env python3
"""Console demonstrations of the hofkit combinators.

Run with HOFKIT_DEBUG=1 to see the once_and_after switch in the log.
"""

from __future__ import annotations

import logging
import os

from hofkit import Trace, invert, not_, once_and_after

logging.basicConfig(
    level=logging.DEBUG if os.environ.get("HOFKIT_DEBUG") else logging.WARNING,
    format="%(levelname)s %(name)s: %(message)s",
)


# ==================== once_and_after ====================

def squeak(x: str) -> None:
    print(x, "squeak!!")


def creak(x: str) -> None:
    print(x, "creak!!")


def demo_once_and_after() -> None:
    trace = Trace()
    make_sound = once_and_after(squeak, creak, trace=trace)
    make_sound("door")  # door squeak!!
    make_sound("door")  # door creak!!
    make_sound("door")  # door creak!!
    make_sound("door")  # door creak!!
    print("state:", make_sound.snapshot())
    print("switch events:", len(trace.find_all(action="switch")))


# ==================== not_ ====================

def is_even(num: int) -> bool:
    return num % 2 == 0


def is_positive(num: int) -> bool:
    return num > 0


def demo_not() -> None:
    is_odd = not_(is_even)
    print("is_even(2):", is_even(2))  # True
    print("is_even(3):", is_even(3))  # False
    print("is_odd(2):", is_odd(2))  # False
    print("is_odd(3):", is_odd(3))  # True

    is_non_positive = not_(is_positive)
    print("is_positive(1):", is_positive(1))  # True
    print("is_positive(-1):", is_positive(-1))  # False
    print("is_non_positive(1):", is_non_positive(1))  # False
    print("is_non_positive(-1):", is_non_positive(-1))  # True


# ==================== invert ====================

def double(num: int) -> int:
    return num * 2


def add_five(num: int) -> int:
    return num + 5


def demo_invert() -> None:
    inverted_double = invert(double)
    print("double(2):", double(2))  # 4
    print("double(3):", double(3))  # 6
    print("inverted_double(2):", inverted_double(2))  # -4
    print("inverted_double(3):", inverted_double(3))  # -6

    inverted_add_five = invert(add_five)
    print("add_five(1):", add_five(1))  # 6
    print("add_five(10):", add_five(10))  # 15
    print("inverted_add_five(1):", inverted_add_five(1))  # -6
    print("inverted_add_five(10):", inverted_add_five(10))  # -15


if __name__ == "__main__":
    demo_once_and_after()
    demo_not()
    demo_invert()
