from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, Optional, TypeVar, final

from fe.exceptions import EmptyInputError, UnwrapError
from fe.maybe import Maybe

if TYPE_CHECKING:
    from fe.review import Review

__all__ = ["Result", "Ok", "Error", "ok", "error", "oks", "all_ok"]

logger = logging.getLogger(__name__)

TValue = TypeVar("TValue")
TNewValue = TypeVar("TNewValue")
TError = TypeVar("TError")
TNewError = TypeVar("TNewError")
TElem = TypeVar("TElem")
TOut = TypeVar("TOut")


class Result(Generic[TValue, TError], ABC):
    """성공(`Ok`) 또는 실패(`Error`)를 값으로 표현하는 타입.

    제공 기능:
    - 상태 질의: is_ok(), is_error()
    - 변환: map(), map_error()
    - 체이닝: and_then() (flatMap), fold(), reduce()
    - 구조 분해: unwrap_or(), unwrap_with(), unwrap()
    - 보조: to_maybe(), to_review(), from_optional()

    Type Parameters:
        TValue: 성공 값의 타입.
        TError: 에러 페이로드의 타입(성공 값 타입과 무관).
    """

    @abstractmethod
    def is_ok(self) -> bool:
        """`Ok` 여부를 반환합니다."""
        ...

    def is_error(self) -> bool:
        """`Error` 여부를 반환합니다."""
        return not self.is_ok()

    @abstractmethod
    def map(self, f: Callable[[TValue], TNewValue]) -> "Result[TNewValue, TError]":
        """성공 값이 있을 때만 값을 변환합니다. `Error`는 그대로 통과합니다."""
        ...

    @abstractmethod
    def and_then(self, f: Callable[[TValue], "Result[TNewValue, TError]"]) -> "Result[TNewValue, TError]":
        """성공 값이 있을 때만 `Result`를 반환하는 계산을 연결합니다."""
        ...

    @abstractmethod
    def map_error(self, f: Callable[[TError], TNewError]) -> "Result[TValue, TNewError]":
        """실패 값이 있을 때만 에러를 변환합니다. `Ok`는 그대로 통과합니다."""
        ...

    @abstractmethod
    def unwrap_or(self, default: TValue) -> TValue:
        """성공 값을 꺼내거나 기본값을 반환합니다."""
        ...

    @abstractmethod
    def unwrap_with(self, on_ok: Callable[[TValue], TOut], on_error: Callable[[TError], TOut]) -> TOut:
        """성공이면 `on_ok(value)`, 실패면 `on_error(error)`의 결과를 반환합니다."""
        ...

    @abstractmethod
    def unwrap(self) -> TValue:
        """성공 값을 꺼냅니다.

        Raises:
            UnwrapError: `Error`인 경우. 메시지에 에러 값의 repr이 포함됩니다.
        """
        ...

    def fold(
        self, elems: Iterable[TElem], f: Callable[[TElem, TValue], "Result[TValue, TError]"]
    ) -> "Result[TValue, TError]":
        """`elems`를 왼쪽부터 순회하며 `f(elem, acc_value)`로 누산기를 갱신합니다.

        누산기가 `Error`가 되면 즉시 멈추고 그 `Error`를 반환합니다.
        이후의 원소에 대해서는 `f`를 호출하지 않습니다.

        Args:
            elems: 순회할 원소들.
            f: (원소, 현재 성공 값) → Result 함수.

        Returns:
            Result[TValue, TError]: 마지막 누산기. `elems`가 비어 있으면 self 그대로.

        Examples:
            >>> ok(5).fold([1, 2, 3], lambda x, acc: ok(x * acc))
            Ok(value=30)
            >>> ok(5).fold([1, 2, 3], lambda x, acc: error("ten") if acc == 10 else ok(x * acc))
            Error(error='ten')
        """
        acc: Result[TValue, TError] = self
        for elem in elems:
            if acc.is_error():
                break
            acc = acc.and_then(lambda value: f(elem, value))
        return acc

    @staticmethod
    def reduce(
        elems: Iterable[TValue], f: Callable[[TValue, TValue], "Result[TValue, TError]"]
    ) -> "Result[TValue, TError]":
        """첫 원소를 `Ok`로 감싸 시드로 삼고 나머지에 대해 `fold`를 수행합니다.

        Raises:
            EmptyInputError: `elems`가 비어 있는 경우.
        """
        it = iter(elems)
        try:
            head = next(it)
        except StopIteration:
            logger.debug("Result.reduce() called with empty input")
            raise EmptyInputError() from None
        return Ok(head).fold(it, f)

    def to_maybe(self) -> Maybe[TValue]:
        """`Result`를 `Maybe`로 변환합니다. Ok(v)→Just(v), Error(_)→Nothing."""
        from fe.maybe import Just, Nothing

        return self.unwrap_with(lambda v: Just(v), lambda _: Nothing)

    def to_review(self) -> "Review[TValue, Any]":
        """`Result`를 `Review`로 변환합니다.

        - Ok(v) → Accepted(v)
        - Error(e), e가 list/tuple → Rejected(e)
        - Error(e), 그 외(문자열 포함) → Rejected([e])
        """
        from fe.review import Accepted, Rejected  # 순환 참조 회피

        def _rejected(e: Any) -> "Review[TValue, Any]":
            return Rejected(tuple(e) if isinstance(e, (list, tuple)) else (e,))

        return self.unwrap_with(lambda v: Accepted(v), _rejected)

    @staticmethod
    def from_optional(value: Optional[TValue], err: TError) -> "Result[TValue, TError]":
        """옵셔널 값을 `Result`로 승격합니다. 값이 None이면 Error(err)."""
        return Ok(value) if value is not None else Error(err)


@final
@dataclass(frozen=True, slots=True)
class Ok(Result[TValue, TError]):
    """성공 결과(불변)."""
    value: TValue

    def is_ok(self) -> bool:
        return True

    def map(self, f: Callable[[TValue], TNewValue]) -> "Result[TNewValue, TError]":
        return Ok(f(self.value))

    def and_then(self, f: Callable[[TValue], "Result[TNewValue, TError]"]) -> "Result[TNewValue, TError]":
        return f(self.value)

    def map_error(self, f: Callable[[TError], TNewError]) -> "Result[TValue, TNewError]":
        return Ok(self.value)

    def unwrap_or(self, default: TValue) -> TValue:
        return self.value

    def unwrap_with(self, on_ok: Callable[[TValue], TOut], on_error: Callable[[TError], TOut]) -> TOut:
        return on_ok(self.value)

    def unwrap(self) -> TValue:
        return self.value


@final
@dataclass(frozen=True, slots=True)
class Error(Result[TValue, TError]):
    """실패 결과(불변).

    `map`/`and_then`은 새 인스턴스를 만들지 않고 자기 자신을 그대로 돌려줍니다.
    """
    error: TError

    def is_ok(self) -> bool:
        return False

    def map(self, f: Callable[[TValue], TNewValue]) -> "Result[TNewValue, TError]":
        return self  # type: ignore[return-value]

    def and_then(self, f: Callable[[TValue], "Result[TNewValue, TError]"]) -> "Result[TNewValue, TError]":
        return self  # type: ignore[return-value]

    def map_error(self, f: Callable[[TError], TNewError]) -> "Result[TValue, TNewError]":
        return Error(f(self.error))

    def unwrap_or(self, default: TValue) -> TValue:
        return default

    def unwrap_with(self, on_ok: Callable[[TValue], TOut], on_error: Callable[[TError], TOut]) -> TOut:
        return on_error(self.error)

    def unwrap(self) -> TValue:
        logger.debug("unwrap() called on Error(%r)", self.error)
        raise UnwrapError(f"unwrapping Result with an error: {self.error!r}")


def ok(value: TValue) -> Result[TValue, Any]:
    """성공 `Result`를 만듭니다."""
    return Ok(value)


def error(err: TError) -> Result[Any, TError]:
    """실패 `Result`를 만듭니다."""
    return Error(err)


def oks(results: Iterable[Result[TValue, Any]]) -> list[TValue]:
    """`Ok` 값만 입력 순서대로 모읍니다. `Error`는 버립니다.

    Examples:
        >>> oks([ok("good"), error("bad"), ok("better")])
        ['good', 'better']
    """
    return [r.value for r in results if isinstance(r, Ok)]


def all_ok(results: Iterable[Result[TValue, TError]]) -> Result[list[TValue], TError]:
    """모두 `Ok`이면 값 목록을 담은 `Ok`, 아니면 처음 만난 `Error`를 반환합니다.

    첫 `Error`에서 바로 멈추므로 그 뒤의 원소는 소비하지 않습니다.

    Args:
        results: `Result`들의 이터러블.

    Returns:
        Result[list[TValue], TError]: `Ok([v1, v2, ...])` 또는 첫 `Error`.

    Examples:
        >>> all_ok([ok(1), ok(2), ok(3)])
        Ok(value=[1, 2, 3])
        >>> all_ok([ok(1), error("bad"), ok(3)])
        Error(error='bad')
    """
    values: list[TValue] = []
    for r in results:
        if isinstance(r, Error):
            return r  # type: ignore[return-value]
        values.append(r.unwrap())
    return Ok(values)
