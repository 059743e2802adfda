"""`fe` 라이브러리가 던지는 예외 계층.

개요:
    이 라이브러리의 기본 오류 채널은 **값**(`Error`, `Rejected`, `Nothing`)입니다.
    예외는 호출자가 명시적으로 부분 함수를 선택했을 때만 발생합니다.

    * `UnwrapError`: 성공이 아닌 상태에서 `unwrap()`을 호출한 경우
    * `EmptyInputError`: 시드 없는 `reduce()`에 빈 입력을 넘긴 경우

    라이브러리 내부에서는 이 예외들을 포착하지 않고 그대로 호출자에게 전파합니다.

예시:
    >>> from fe.maybe import Nothing
    >>> Nothing.unwrap()
    Traceback (most recent call last):
        ...
    fe.exceptions.UnwrapError: unwrapping Maybe that has no value
"""

from __future__ import annotations

__all__ = ["FEError", "UnwrapError", "EmptyInputError"]


class FEError(Exception):
    """`fe`가 발생시키는 모든 예외의 기반 타입."""


class UnwrapError(FEError):
    """성공 값이 없는 컨테이너를 강제로 풀려고 할 때 발생합니다.

    메시지는 결정적이며, 가능하면 진단용 페이로드(에러 값, 이슈 목록)를 포함합니다.
    """


class EmptyInputError(FEError, ValueError):
    """초기 누산기를 만들 첫 원소가 없는 빈 입력에 대해 발생합니다.

    `ValueError`의 하위 타입이므로 `functools.reduce`의 빈 입력 오류와 같은
    방식으로 처리할 수 있습니다.
    """

    def __init__(self, message: str = "cannot reduce an empty sequence") -> None:
        super().__init__(message)
