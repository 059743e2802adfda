# src/fe/maybe.py
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, Optional, TypeVar, cast, final

from fe.exceptions import EmptyInputError, UnwrapError

if TYPE_CHECKING:
    from fe.result import Result
    from fe.review import Review

__all__ = ["Maybe", "Just", "Nothing", "just", "nothing"]

logger = logging.getLogger(__name__)

TValue = TypeVar("TValue")
TNewValue = TypeVar("TNewValue")
TElem = TypeVar("TElem")
TError = TypeVar("TError")
TIssue = TypeVar("TIssue")
TOut = TypeVar("TOut")


class Maybe(Generic[TValue], ABC):
    """값의 존재/부재를 표현하는 최소 컨테이너.

    변형은 `Just`와 `Nothing` 두 가지뿐이며, 그 외의 하위 타입은 만들지 않습니다.

    제공 기능:
    - 상태 질의: is_just(), is_nothing()
    - 변환: map()
    - 체이닝: and_then() (flatMap), fold(), reduce()
    - 구조 분해: unwrap_or(), unwrap_with(), unwrap()
    - 변환(interop): to_optional(), to_result(), to_review()
    - 생성: new(), from_optional()

    Type Parameters:
        TValue: 존재하는 값의 타입.
    """

    @abstractmethod
    def is_just(self) -> bool:
        """값이 존재하는지 여부.

        Returns:
            bool: Just이면 True, Nothing이면 False.
        """
        ...

    def is_nothing(self) -> bool:
        """값이 부재인지 여부.

        Returns:
            bool: Nothing이면 True, 아니면 False.
        """
        return not self.is_just()

    @abstractmethod
    def map(self, f: Callable[[TValue], TNewValue]) -> "Maybe[TNewValue]":
        """값이 있을 때만 변환합니다.

        Args:
            f: TValue → TNewValue 함수. Nothing에서는 호출되지 않습니다.

        Returns:
            Maybe[TNewValue]: 변환된 maybe, 값이 없으면 Nothing.
        """
        ...

    @abstractmethod
    def and_then(self, f: Callable[[TValue], "Maybe[TNewValue]"]) -> "Maybe[TNewValue]":
        """값이 있을 때만 Maybe를 반환하는 계산을 연결합니다.

        Args:
            f: TValue → Maybe[TNewValue] 함수.

        Returns:
            Maybe[TNewValue]: 함수의 반환값 또는 Nothing.
        """
        ...

    @abstractmethod
    def unwrap_or(self, default: TValue) -> TValue:
        """값을 꺼내거나 기본값을 반환합니다.

        Args:
            default: 비어있을 때 반환할 기본값.

        Returns:
            TValue: 값 또는 기본값.
        """
        ...

    @abstractmethod
    def unwrap_with(self, on_just: Callable[[TValue], TOut], default: TOut) -> TOut:
        """값이 있으면 `on_just(value)`를, 없으면 `default`를 반환합니다.

        `default`는 항상 **일반 값**으로 취급되며 호출되지 않습니다.
        (함수를 기본값으로 넘기면 그 함수 객체 자체가 반환됩니다.)

        Args:
            on_just: 값이 있을 때 적용할 함수.
            default: 값이 없을 때 반환할 값.

        Returns:
            TOut: `on_just(value)` 또는 `default`.
        """
        ...

    @abstractmethod
    def unwrap(self) -> TValue:
        """값을 꺼냅니다. 값이 없으면 예외를 던집니다.

        Raises:
            UnwrapError: Nothing인 경우.
        """
        ...

    def fold(self, elems: Iterable[TElem], f: Callable[[TElem, TValue], "Maybe[TValue]"]) -> "Maybe[TValue]":
        """`elems`를 왼쪽부터 순회하며 `and_then`으로 누산기를 이어갑니다.

        각 단계에서 `f(elem, acc_value)`가 호출되고, 그 반환값이 다음 누산기가 됩니다.
        누산기가 Nothing이 되는 즉시 순회를 멈추며 이후 `f`는 호출되지 않습니다.

        Args:
            elems: 순회할 원소들.
            f: (원소, 현재 값) → Maybe[TValue] 함수.

        Returns:
            Maybe[TValue]: 마지막 누산기. `elems`가 비어 있으면 self 그대로.

        Examples:
            >>> just(5).fold([1, 2, 3], lambda x, acc: just(x * acc))
            Just(value=30)
        """
        acc: Maybe[TValue] = self
        for elem in elems:
            if acc.is_nothing():
                break
            acc = acc.and_then(lambda value: f(elem, value))
        return acc

    @staticmethod
    def reduce(elems: Iterable[TValue], f: Callable[[TValue, TValue], "Maybe[TValue]"]) -> "Maybe[TValue]":
        """첫 원소를 `Just`로 감싸 시드로 삼고 나머지에 대해 `fold`를 수행합니다.

        Raises:
            EmptyInputError: `elems`가 비어 있는 경우.
        """
        it = iter(elems)
        try:
            head = next(it)
        except StopIteration:
            logger.debug("Maybe.reduce() called with empty input")
            raise EmptyInputError() from None
        return Just(head).fold(it, f)

    def to_optional(self) -> Optional[TValue]:
        """Optional로 변환합니다.

        Returns:
            Optional[TValue]: Just(v) → v, Nothing → None.
        """
        return cast(Optional[TValue], self.unwrap_or(cast(TValue, None)))

    def to_result(self, error: TError) -> "Result[TValue, TError]":
        """`Result`로 변환합니다. Just(v)→Ok(v), Nothing→Error(error)."""
        from fe.result import Error, Ok  # 순환 참조 회피

        return self.unwrap_with(lambda v: Ok(v), Error(error))

    def to_review(self, issues: Iterable[TIssue]) -> "Review[TValue, TIssue]":
        """`Review`로 변환합니다. Just(v)→Accepted(v), Nothing→Rejected(issues)."""
        from fe.review import Accepted, Rejected  # 순환 참조 회피

        return self.unwrap_with(lambda v: Accepted(v), Rejected(issues))

    @staticmethod
    def new(value: Optional[TValue]) -> "Maybe[TValue]":
        """임의의 값을 Maybe로 승격합니다.

        `None`만 Nothing이 되며, `False`/`0`/빈 컬렉션처럼 거짓으로 평가되는 값도
        모두 Just가 됩니다.

        Args:
            value: 옵셔널 값.

        Returns:
            Maybe[TValue]: 값이 있으면 Just(value), None이면 Nothing.
        """
        return Just(value) if value is not None else Nothing

    from_optional = new


@final
@dataclass(frozen=True, slots=True)
class Just(Maybe[TValue]):
    """값이 존재함을 나타내는 `Maybe`의 변형.

    `Just`는 불변(`frozen=True`)이고 `__slots__`를 사용합니다.
    값이 존재할 때만 변환/체이닝이 수행되고, `unwrap_or()`는 기본값을 무시하고
    항상 보유한 값을 반환합니다.

    Attributes:
        value: 담긴 실제 값. `None`도 담을 수 있습니다(`just(None)`).

    Examples:
        기본 사용:
            >>> Just(21).map(lambda x: x * 2)
            Just(value=42)

        체이닝(and_then):
            >>> def non_empty(s: str) -> Maybe[str]:
            ...     return Just(s) if s else Nothing
            >>> Just("hi").and_then(non_empty)
            Just(value='hi')
            >>> Just("").and_then(non_empty)
            Nothing

        구조 분해:
            >>> Just(1).unwrap_or(999)
            1

    Notes:
        - 값 존재 여부 분기는 `is_just()`/`is_nothing()` 또는 `match`를 사용하세요.
    """

    value: TValue

    def is_just(self) -> bool:
        return True

    def map(self, f: Callable[[TValue], TNewValue]) -> "Maybe[TNewValue]":
        return Just(f(self.value))

    def and_then(self, f: Callable[[TValue], "Maybe[TNewValue]"]) -> "Maybe[TNewValue]":
        return f(self.value)

    def unwrap_or(self, default: TValue) -> TValue:
        return self.value

    def unwrap_with(self, on_just: Callable[[TValue], TOut], default: TOut) -> TOut:
        return on_just(self.value)

    def unwrap(self) -> TValue:
        return self.value


@final
class _Nothing(Maybe[Any]):
    """값의 부재를 나타내는 `Maybe`의 내부 싱글턴 변형.

    이 클래스의 인스턴스는 모듈 하단에 `Nothing` 상수로 **하나만** 노출됩니다.
    `map`/`and_then`은 계산을 수행하지 않고 자신을 그대로 반환하며,
    `unwrap_or(default)`는 항상 `default`를 반환합니다.

    Examples:
        변환/체이닝 무시:
            >>> Nothing.map(lambda x: x * 2)
            Nothing
            >>> Nothing.and_then(lambda x: Just(x))
            Nothing

        기본값 반환:
            >>> Nothing.unwrap_or(123)
            123

    Notes:
        - 싱글턴으로 노출되므로 동일성 비교(`is`)가 안정적으로 동작합니다.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "Nothing"

    def __reduce__(self) -> str:
        # copy/pickle 모두 모듈의 싱글턴을 돌려받는다
        return "Nothing"

    def is_just(self) -> bool:
        return False

    def map(self, f, /):
        return self

    def and_then(self, f, /):
        return self

    def unwrap_or(self, default):
        return default

    def unwrap_with(self, on_just, default):
        return default

    def unwrap(self):
        logger.debug("unwrap() called on Nothing")
        raise UnwrapError("unwrapping Maybe that has no value")


Nothing: Maybe[Any] = _Nothing()


def nothing() -> Maybe[Any]:
    """값이 없는 Maybe(`Nothing` 싱글턴)를 반환합니다."""
    return Nothing


def just(value: TValue) -> Maybe[TValue]:
    """`value`를 담은 Maybe를 만듭니다. `None`도 그대로 담습니다."""
    return Just(value)
