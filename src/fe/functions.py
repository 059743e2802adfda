"""자주 쓰는 함수형 조합자.

    * `identity(a)`: 인자를 그대로 반환
    * `const(a)`: 어떤 인자로 호출해도 `a`를 반환하는 1-인자 함수
    * `compose(f, g)`: `g`를 먼저, 그다음 `f`를 적용하는 함수
    * `curry(f)`: 다인자 함수를 1-인자 함수의 연쇄로 변환
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, TypeVar

__all__ = ["identity", "const", "compose", "curry"]

A = TypeVar("A")
X = TypeVar("X")
Y = TypeVar("Y")
Z = TypeVar("Z")

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def identity(a: A) -> A:
    """인자를 변경 없이 그대로 반환합니다."""
    return a


def const(a: A) -> Callable[[Any], A]:
    """호출 인자와 무관하게 항상 `a`를 반환하는 1-인자 함수를 만듭니다.

    Examples:
        >>> const(3)("ignored")
        3
    """
    return lambda _: a


def compose(f: Callable[[Y], Z], g: Callable[[X], Y]) -> Callable[[X], Z]:
    """`x ↦ f(g(x))`를 만듭니다.

    Examples:
        >>> compose(str, lambda x: x + 1)(41)
        '42'
    """
    return lambda x: f(g(x))


def curry(f: Callable[..., Any]) -> Callable[[Any], Any]:
    """다인자 함수를 1-인자 함수의 연쇄로 변환합니다.

    인자 개수는 `f`의 필수 위치 인자(기본값이 없는 위치 인자) 수로 정해집니다.
    1-인자 함수는 동작이 같은 1-인자 함수로 그대로 감싸집니다.

    Args:
        f: 커링할 함수.

    Returns:
        Callable[[Any], Any]: `curry(f)(a)(b)(c) == f(a, b, c)`를 만족하는 함수.

    Raises:
        ValueError: 필수 위치 인자가 없거나, 필수 키워드 전용 인자가 있는 함수인 경우.

    Examples:
        >>> add3 = curry(lambda a, b, c: a + b + c)
        >>> add3(1)(2)(3)
        6
    """
    params = inspect.signature(f).parameters.values()
    if any(p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is inspect.Parameter.empty for p in params):
        raise ValueError(f"cannot curry a function with required keyword-only arguments: {f!r}")
    arity = sum(1 for p in params if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty)
    if arity == 0:
        raise ValueError(f"cannot curry a function without required positional arguments: {f!r}")

    def _collect(args: tuple[Any, ...]) -> Callable[[Any], Any]:
        def _next(arg: Any) -> Any:
            collected = args + (arg,)
            if len(collected) == arity:
                return f(*collected)
            return _collect(collected)

        return _next

    return _collect(())
