"""Review: 이슈를 누적하며 계속 진행할 수 있는 계산 결과 타입.

개요:
    `Result`와 비슷하게 성공(`Accepted`)과 실패(`Rejected`)를 표현하지만,
    **문제가 있어도 계속 진행하는** 중간 상태(`Issues`)를 하나 더 가집니다.
    계산 중 발견된 이슈를 로그처럼 모으는 Writer 패턴의 한 구현입니다.

    예를 들어 사용자 입력 검증에서 첫 실수에서 멈추지 않고, 모든 실수를 모은 뒤
    한 번에 피드백을 돌려주고 싶을 때 사용합니다.

핵심 개념:
    * `Review[V, I]` = `Accepted(value)` | `Issues(value, issues)` | `Rejected(issues)`
    * `and_then(f)`: 값은 단계마다 교체되고, 이슈는 **뒤에 이어 붙여져** 늘어나기만 함
    * `Rejected`는 흡수 상태: 한 번 들어가면 이후 단계 함수는 호출되지 않음
    * 거부 시점에 이미 쌓인 이슈는 버리지 않고 새 거부 이슈 앞에 유지됨

단계 함수의 반환값:
    `and_then`/`fold`에 넘기는 함수는 `Review`를 돌려주거나, 더 가벼운 단계 결과
    (`StepOk`, `StepIssue`, `StepReject`)를 돌려줄 수 있습니다.

예시:
    >>> accepted(1).and_then(lambda v: StepIssue(v + 1, "two")).and_then(lambda v: StepIssue(v + 1, "three"))
    Issues(value=3, issues=('two', 'three'))
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import abc
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, TypeVar, Union, final

from fe.exceptions import EmptyInputError, UnwrapError
from fe.maybe import Just, Maybe, Nothing
from fe.result import Error, Ok, Result

__all__ = [
    "Review",
    "Accepted",
    "Issues",
    "Rejected",
    "StepOk",
    "StepIssue",
    "StepReject",
    "Step",
    "accepted",
    "issues",
    "rejected",
]

logger = logging.getLogger(__name__)

TValue = TypeVar("TValue")
TNewValue = TypeVar("TNewValue")
TIssue = TypeVar("TIssue")
TNewIssue = TypeVar("TNewIssue")
TElem = TypeVar("TElem")


def _as_issues(issues: Any) -> tuple[Any, ...]:
    """이슈 입력을 튜플로 정규화합니다.

    `str`/`bytes`와 이터러블이 아닌 값은 이슈 하나로 취급해 `(issues,)`가 됩니다.
    (`Result.to_review`가 스칼라 에러를 다루는 방식과 같습니다.)
    """
    if isinstance(issues, (str, bytes)) or not isinstance(issues, abc.Iterable):
        return (issues,)
    return tuple(issues)


# ──────────────────────────────────────────────────────────────
# 단계 결과(Step outcome)
# ──────────────────────────────────────────────────────────────
@final
@dataclass(frozen=True, slots=True)
class StepOk(Generic[TValue]):
    """문제 없이 성공한 단계."""
    value: TValue


@final
@dataclass(frozen=True, slots=True)
class StepIssue(Generic[TValue, TIssue]):
    """성공했지만 이슈 하나를 남기는 단계."""
    value: TValue
    issue: TIssue


@final
@dataclass(frozen=True, slots=True)
class StepReject(Generic[TIssue]):
    """하나 이상의 이슈와 함께 실패한 단계."""
    issues: tuple[TIssue, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "issues", _as_issues(self.issues))


Step = Union["Review[TValue, TIssue]", StepOk[TValue], StepIssue[TValue, TIssue], StepReject[TIssue]]


class Review(Generic[TValue, TIssue], ABC):
    """`Accepted` / `Issues` / `Rejected` 세 상태를 갖는 누적형 결과 타입.

    제공 기능:
    - 상태 질의: is_accepted(), has_issues(), is_rejected()
    - 변환: map(), map_issues()
    - 체이닝: and_then(), fold(), reduce()
    - 구조 분해: unwrap_or(), unwrap()
    - 경계 처리: accept_or_reject()
    - 보조: to_result(), to_maybe()

    Type Parameters:
        TValue: 성공 값의 타입.
        TIssue: 이슈 하나의 타입.
    """

    @abstractmethod
    def map(self, f: Callable[[TValue], TNewValue]) -> "Review[TNewValue, TIssue]":
        """값을 갖는 상태(`Accepted`, `Issues`)에서만 값을 변환합니다."""
        ...

    @abstractmethod
    def map_issues(self, f: Callable[[TIssue], TNewIssue]) -> "Review[TValue, TNewIssue]":
        """`Issues`/`Rejected`의 이슈 하나하나를 변환합니다. `Accepted`는 그대로입니다."""
        ...

    @abstractmethod
    def and_then(self, f: Callable[[TValue], "Step[TNewValue, TIssue]"]) -> "Review[TNewValue, TIssue]":
        """값을 단계 함수에 넘기고, 그 결과를 현재 상태와 합칩니다.

        | 현재 상태        | f → 성공(v2)       | f → 이슈(v2, i)            | f → 거부(is)          |
        |------------------|--------------------|----------------------------|-----------------------|
        | Accepted(v)      | Accepted(v2)       | Issues(v2, [i])            | Rejected(is)          |
        | Issues(v, is0)   | Issues(v2, is0)    | Issues(v2, is0 + [i])      | Rejected(is0 + is)    |
        | Rejected(is0)    | Rejected(is0)      | Rejected(is0)              | Rejected(is0)         |

        `Rejected`에서는 `f`를 호출하지 않습니다.

        Args:
            f: 값 → `Review` 또는 `StepOk`/`StepIssue`/`StepReject`.

        Returns:
            Review[TNewValue, TIssue]: 합쳐진 새 상태.

        Raises:
            TypeError: `f`가 `Review`도 단계 결과도 아닌 값을 반환한 경우.
        """
        ...

    @abstractmethod
    def unwrap_or(self, default: TValue) -> TValue:
        """`Accepted`의 값만 돌려줍니다. `Issues`를 포함한 나머지는 `default`."""
        ...

    @abstractmethod
    def unwrap(self) -> TValue:
        """`Accepted`의 값을 꺼냅니다.

        Raises:
            UnwrapError: `Issues`/`Rejected`인 경우. 메시지에 이슈 목록이 포함됩니다.
        """
        ...

    @abstractmethod
    def to_result(self) -> Result[TValue, list[TIssue]]:
        """`Accepted(v)`→`Ok(v)`, 이슈가 있는 두 상태→`Error([이슈...])`.

        `Issues`가 값을 갖고 있어도 그 값은 버려집니다.
        """
        ...

    def is_accepted(self) -> bool:
        return isinstance(self, Accepted)

    def has_issues(self) -> bool:
        return isinstance(self, Issues)

    def is_rejected(self) -> bool:
        return isinstance(self, Rejected)

    def accept_or_reject(self) -> "Review[TValue, TIssue]":
        """`Issues(v, is)`를 `Rejected(is)`로 접습니다. 다른 상태는 그대로입니다.

        파이프라인 경계에서 "문제 있는 성공"을 실패로 취급할 때 사용합니다.
        """
        return self

    def to_maybe(self) -> Maybe[TValue]:
        """`Accepted(v)`→`Just(v)`, 이슈가 있는 두 상태→`Nothing`."""
        return self.to_result().to_maybe()

    def fold(
        self, elems: Iterable[TElem], f: Callable[[TElem, TValue], "Step[TValue, TIssue]"]
    ) -> "Review[TValue, TIssue]":
        """`elems`를 왼쪽부터 순회하며 `and_then`을 연쇄합니다.

        각 단계에서 `f(elem, acc_value)`가 호출됩니다. `Issues` 상태에서는 계속
        진행하고, `Rejected`가 되는 즉시 멈춥니다.

        Examples:
            >>> accepted(5).fold([1, 2, 3], lambda x, acc: issues(x * acc, [x]))
            Issues(value=30, issues=(1, 2, 3))
        """
        acc: Review[TValue, TIssue] = self
        for elem in elems:
            if acc.is_rejected():
                break
            acc = acc.and_then(lambda value: f(elem, value))
        return acc

    @staticmethod
    def reduce(
        elems: Iterable[TValue], f: Callable[[TValue, TValue], "Step[TValue, TIssue]"]
    ) -> "Review[TValue, TIssue]":
        """첫 원소를 `Accepted`로 감싸 시드로 삼고 나머지에 대해 `fold`를 수행합니다.

        Raises:
            EmptyInputError: `elems`가 비어 있는 경우.
        """
        it = iter(elems)
        try:
            head = next(it)
        except StopIteration:
            logger.debug("Review.reduce() called with empty input")
            raise EmptyInputError() from None
        return Accepted(head).fold(it, f)


@final
@dataclass(frozen=True, slots=True)
class Accepted(Review[TValue, TIssue]):
    """문제 없이 수락된 결과(불변)."""
    value: TValue

    def map(self, f: Callable[[TValue], TNewValue]) -> "Review[TNewValue, TIssue]":
        return Accepted(f(self.value))

    def map_issues(self, f: Callable[[TIssue], TNewIssue]) -> "Review[TValue, TNewIssue]":
        return Accepted(self.value)

    def and_then(self, f: Callable[[TValue], "Step[TNewValue, TIssue]"]) -> "Review[TNewValue, TIssue]":
        return _as_review(f(self.value))

    def unwrap_or(self, default: TValue) -> TValue:
        return self.value

    def unwrap(self) -> TValue:
        return self.value

    def to_result(self) -> Result[TValue, list[TIssue]]:
        return Ok(self.value)


@final
@dataclass(frozen=True, slots=True)
class Issues(Review[TValue, TIssue]):
    """값은 있지만 이슈가 함께 기록된 결과(불변).

    Attributes:
        value: 현재까지 계산된 값.
        issues: 기록 순서대로 쌓인 이슈들. 리스트로 넘겨도 튜플로 보관됩니다.
    """
    value: TValue
    issues: tuple[TIssue, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "issues", _as_issues(self.issues))

    def map(self, f: Callable[[TValue], TNewValue]) -> "Review[TNewValue, TIssue]":
        return Issues(f(self.value), self.issues)

    def map_issues(self, f: Callable[[TIssue], TNewIssue]) -> "Review[TValue, TNewIssue]":
        return Issues(self.value, tuple(f(i) for i in self.issues))

    def and_then(self, f: Callable[[TValue], "Step[TNewValue, TIssue]"]) -> "Review[TNewValue, TIssue]":
        nxt = _as_review(f(self.value))
        match nxt:
            case Accepted(value=value):
                return Issues(value, self.issues)
            case Issues(value=value, issues=new_issues):
                return Issues(value, self.issues + new_issues)
            case _:
                return Rejected(self.issues + nxt.issues)  # type: ignore[attr-defined]

    def unwrap_or(self, default: TValue) -> TValue:
        return default

    def unwrap(self) -> TValue:
        logger.debug("unwrap() called on Issues(%r)", self.issues)
        raise UnwrapError(f"unwrapping Review with issues: {list(self.issues)!r}")

    def to_result(self) -> Result[TValue, list[TIssue]]:
        return Error(list(self.issues))

    def accept_or_reject(self) -> "Review[TValue, TIssue]":
        return Rejected(self.issues)


@final
@dataclass(frozen=True, slots=True)
class Rejected(Review[Any, TIssue]):
    """거부된 결과(불변). 값이 없고 이슈만 갖습니다.

    흡수 상태이므로 `map`/`and_then`은 자기 자신을 그대로 돌려줍니다.
    """
    issues: tuple[TIssue, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "issues", _as_issues(self.issues))

    def map(self, f, /):
        return self

    def map_issues(self, f: Callable[[TIssue], TNewIssue]) -> "Review[Any, TNewIssue]":
        return Rejected(tuple(f(i) for i in self.issues))

    def and_then(self, f, /):
        return self

    def unwrap_or(self, default):
        return default

    def unwrap(self):
        logger.debug("unwrap() called on Rejected(%r)", self.issues)
        raise UnwrapError(f"unwrapping rejected Review with issues: {list(self.issues)!r}")

    def to_result(self) -> Result[Any, list[TIssue]]:
        return Error(list(self.issues))


def _as_review(outcome: Any) -> Review[Any, Any]:
    """단계 함수의 반환값을 `Review`로 정규화합니다."""
    match outcome:
        case Review():
            return outcome
        case StepOk(value=value):
            return Accepted(value)
        case StepIssue(value=value, issue=issue):
            return Issues(value, (issue,))
        case StepReject(issues=step_issues):
            return Rejected(step_issues)
    raise TypeError(
        f"step function must return a Review or StepOk/StepIssue/StepReject, got {type(outcome).__name__}"
    )


def accepted(value: TValue) -> Review[TValue, Any]:
    """수락된 `Review`를 만듭니다."""
    return Accepted(value)


def issues(value: TValue, issues: Iterable[TIssue]) -> Review[TValue, TIssue]:
    """값과 이슈 목록으로 `Issues`를 만듭니다."""
    return Issues(value, _as_issues(issues))


def rejected(issues: Iterable[TIssue]) -> Review[Any, TIssue]:
    """이슈 목록으로 거부된 `Review`를 만듭니다."""
    return Rejected(_as_issues(issues))
