# tests/unit/fe/test_maybe.py
import copy
import pickle

import pytest
from dataclasses import FrozenInstanceError
from typing import Callable

from fe.exceptions import EmptyInputError, UnwrapError
from fe.functions import compose, identity
from fe.maybe import Maybe, Just, Nothing, just, nothing

# 모듈 전체 태그
pytestmark = [pytest.mark.unit, pytest.mark.monad]


# ─────────────────────────────────────────────────────────────────────────────
# 생성/기본 성질
# ─────────────────────────────────────────────────────────────────────────────
class TestMaybeConstruct:
    def test_just_state(self):
        """GIVEN just(42)
           WHEN is_just()/is_nothing()를 호출하면
           THEN is_just()는 True, is_nothing()는 False를 반환한다
        """
        m: Maybe[int] = just(42)
        assert m == Just(42)
        assert m.is_just() is True
        assert m.is_nothing() is False

    def test_nothing_is_singleton(self):
        """GIVEN nothing()과 Maybe.new(None)
           WHEN 동일성 비교를 수행하면
           THEN 모두 같은 Nothing 싱글턴이다
        """
        assert nothing() is Nothing
        assert Maybe.new(None) is Nothing
        assert Nothing.is_nothing() is True

    @pytest.mark.parametrize("falsy", [False, 0, 0.0, "", [], {}, ()])
    def test_new_keeps_falsy_values(self, falsy):
        """GIVEN None이 아닌 거짓 값
           WHEN Maybe.new(value)를 호출하면
           THEN Nothing이 아닌 Just(value)가 된다
        """
        m = Maybe.new(falsy)
        assert m.is_just() is True
        assert m.unwrap() == falsy

    def test_just_can_hold_none(self):
        """GIVEN just(None)
           WHEN is_just()를 호출하면
           THEN 구조적으로 값이 있는 상태다
        """
        assert just(None).is_just() is True

    def test_from_optional_matches_new(self):
        """GIVEN 7과 None
           WHEN from_optional을 호출하면
           THEN new와 같은 결과를 얻는다
        """
        assert Maybe.from_optional(7) == Maybe.new(7) == Just(7)
        assert Maybe.from_optional(None) is Nothing


# ─────────────────────────────────────────────────────────────────────────────
# 변환/체이닝(map / and_then)
# ─────────────────────────────────────────────────────────────────────────────
class TestMaybeTransform:
    def test_map_on_just(self):
        """GIVEN Just(21)
           WHEN map(lambda x: x*2)를 적용하면
           THEN Just(42)가 된다
        """
        assert just(21).map(lambda x: x * 2) == Just(42)

    def test_map_on_nothing_never_calls_f(self):
        """GIVEN Nothing과 호출 횟수를 세는 함수
           WHEN map(f)를 적용하면
           THEN f는 호출되지 않고 Nothing 그대로 반환한다
        """
        calls = {"n": 0}

        def f(x):
            calls["n"] += 1
            return x

        assert Nothing.map(f) is Nothing
        assert calls["n"] == 0

    def test_and_then_chains_on_just(self):
        """GIVEN Just('foobar')
           WHEN 길이를 Just로 돌려주는 함수와 and_then 하면
           THEN Just(6)을 얻는다
        """
        assert just("foobar").and_then(lambda s: just(len(s))) == Just(6)

    def test_and_then_may_return_nothing(self):
        """GIVEN Just('foobar')
           WHEN Nothing을 돌려주는 함수와 and_then 하면
           THEN Nothing을 얻는다
        """
        assert just("foobar").and_then(lambda _: nothing()) is Nothing

    def test_and_then_short_circuits_on_nothing(self):
        """GIVEN Nothing과 호출 횟수를 세는 함수
           WHEN and_then(f)를 호출하면
           THEN f를 호출하지 않고 Nothing을 반환한다
        """
        calls = {"n": 0}

        def f(x: int) -> Maybe[int]:
            calls["n"] += 1
            return just(x + 1)

        assert Nothing.and_then(f) is Nothing
        assert calls["n"] == 0

    @pytest.mark.parametrize(
        "value,f,expected",
        [
            (3, lambda x: x + 1, 4),
            (0, lambda x: x - 5, -5),
        ],
    )
    def test_map_parametrized(self, value: int, f: Callable[[int], int], expected: int):
        """GIVEN Just(value)와 변환 함수 f
           WHEN map(f)를 적용하면
           THEN unwrap_or(0)은 expected를 반환한다
        """
        assert just(value).map(f).unwrap_or(0) == expected


# ─────────────────────────────────────────────────────────────────────────────
# 구조 분해(unwrap_or / unwrap_with / unwrap)
# ─────────────────────────────────────────────────────────────────────────────
class TestMaybeDestructure:
    @pytest.mark.parametrize("default", [0, -1, 999])
    def test_unwrap_or(self, default: int):
        """GIVEN Just(7)와 Nothing
           WHEN unwrap_or(default)를 호출하면
           THEN Just은 7, Nothing은 default를 반환한다
        """
        assert just(7).unwrap_or(default) == 7
        assert Nothing.unwrap_or(default) == default

    def test_unwrap_with_applies_on_just(self):
        """GIVEN Just(3)
           WHEN unwrap_with(str, 'none')을 호출하면
           THEN on_just가 적용된 '3'을 반환한다
        """
        assert just(3).unwrap_with(str, "none") == "3"

    def test_unwrap_with_default_is_plain_value(self):
        """GIVEN Nothing과 함수 객체 기본값
           WHEN unwrap_with(on_just, default)를 호출하면
           THEN default는 호출되지 않고 그대로 반환된다
        """
        def default() -> str:
            return "called"

        assert Nothing.unwrap_with(str, "none") == "none"
        assert Nothing.unwrap_with(str, default) is default

    def test_unwrap_on_just_returns_value(self):
        """GIVEN Just('v')
           WHEN unwrap()을 호출하면
           THEN 'v'를 반환한다
        """
        assert just("v").unwrap() == "v"

    def test_unwrap_on_nothing_raises(self):
        """GIVEN Nothing
           WHEN unwrap()을 호출하면
           THEN UnwrapError가 발생한다
        """
        with pytest.raises(UnwrapError, match="unwrapping Maybe that has no value"):
            Nothing.unwrap()

    def test_to_optional(self):
        """GIVEN Just(7)과 Nothing
           WHEN to_optional()을 호출하면
           THEN 7과 None을 반환한다
        """
        assert just(7).to_optional() == 7
        assert Nothing.to_optional() is None


# ─────────────────────────────────────────────────────────────────────────────
# fold / reduce
# ─────────────────────────────────────────────────────────────────────────────
class TestMaybeFold:
    def test_fold_over_empty_returns_seed(self):
        """GIVEN Just(5)와 Nothing
           WHEN 빈 리스트로 fold 하면
           THEN 시드가 그대로 반환된다
        """
        f = lambda x, acc: just(x + acc)
        assert just(5).fold([], f) == Just(5)
        assert Nothing.fold([], f) is Nothing

    def test_fold_multiplies(self):
        """GIVEN Just(5)와 [1, 2, 3]
           WHEN fold(f=x*acc) 하면
           THEN Just(30)을 얻는다
        """
        assert just(5).fold([1, 2, 3], lambda x, acc: just(x * acc)) == Just(30)

    def test_fold_passes_element_then_accumulator(self):
        """GIVEN Just('') 시드와 문자 원소들
           WHEN fold(f=acc+x) 하면
           THEN f는 (원소, 누산값) 순서로 호출된다
        """
        seen = []

        def f(x: str, acc: str) -> Maybe[str]:
            seen.append((x, acc))
            return just(acc + x)

        assert just("").fold(["a", "b"], f) == Just("ab")
        assert seen == [("a", ""), ("b", "a")]

    def test_fold_stops_at_first_nothing(self):
        """GIVEN 10에서 Nothing을 돌려주는 함수
           WHEN Just(5)에서 [1, 2, 3, 4]를 fold 하면
           THEN Nothing이 되고 이후 f는 호출되지 않는다
        """
        calls = []

        def f(x: int, acc: int) -> Maybe[int]:
            calls.append(x)
            return nothing() if acc == 10 else just(x * acc)

        assert just(5).fold([1, 2, 3, 4], f) is Nothing
        assert calls == [1, 2, 3]

    def test_fold_on_nothing_never_calls_f(self):
        """GIVEN Nothing 시드
           WHEN fold 하면
           THEN f는 한 번도 호출되지 않는다
        """
        calls = {"n": 0}

        def f(x, acc):
            calls["n"] += 1
            return just(x)

        assert Nothing.fold([1, 2], f) is Nothing
        assert calls["n"] == 0

    def test_reduce_seeds_with_head(self):
        """GIVEN [1, 2, 3]
           WHEN Maybe.reduce(f=x+acc) 하면
           THEN Just(6)을 얻는다
        """
        assert Maybe.reduce([1, 2, 3], lambda x, acc: just(x + acc)) == Just(6)

    def test_reduce_single_element_does_not_call_f(self):
        """GIVEN 원소 하나
           WHEN 항상 Nothing을 돌려주는 f로 reduce 하면
           THEN f는 호출되지 않고 Just(head)를 얻는다
        """
        assert Maybe.reduce([1], lambda _x, _acc: nothing()) == Just(1)

    def test_reduce_accepts_generator(self):
        """GIVEN 제너레이터 입력
           WHEN reduce 하면
           THEN 리스트와 같은 결과를 얻는다
        """
        assert Maybe.reduce((i for i in range(1, 4)), lambda x, acc: just(x + acc)) == Just(6)

    def test_reduce_empty_raises(self):
        """GIVEN 빈 입력
           WHEN reduce 하면
           THEN EmptyInputError(ValueError 하위 타입)가 발생한다
        """
        with pytest.raises(EmptyInputError):
            Maybe.reduce([], lambda x, acc: just(x))
        with pytest.raises(ValueError):
            Maybe.reduce(iter(()), lambda x, acc: just(x))


# ─────────────────────────────────────────────────────────────────────────────
# 법칙(Functor/Monad 핵심)
# ─────────────────────────────────────────────────────────────────────────────
class TestMaybeLaws:
    def test_functor_identity(self):
        """GIVEN Just(3)와 항등함수
           WHEN map(identity)를 적용하면
           THEN 동일 값을 유지하고, Nothing도 그대로다
        """
        assert just(3).map(identity) == Just(3)
        assert Nothing.map(identity) is Nothing

    def test_functor_composition(self):
        """GIVEN f(x)=x+1, g(y)=y*2
           WHEN map(f).map(g)와 map(compose(g, f))를 비교하면
           THEN 두 결과가 같다
        """
        f = lambda x: x + 1
        g = lambda y: y * 2
        assert just(3).map(f).map(g) == just(3).map(compose(g, f))

    def test_left_identity(self):
        """GIVEN a와 f: a -> Maybe
           WHEN just(a).and_then(f)
           THEN f(a)와 같다
        """
        f = lambda x: just(x * 2)
        assert just(4).and_then(f) == f(4)

    def test_right_identity(self):
        """GIVEN Just(4)
           WHEN and_then(just)
           THEN 자기 자신과 같다
        """
        assert just(4).and_then(just) == Just(4)


# ─────────────────────────────────────────────────────────────────────────────
# 불변성/표현/패턴 매칭
# ─────────────────────────────────────────────────────────────────────────────
class TestMaybeImmutabilityAndRepr:
    def test_just_is_frozen(self):
        """GIVEN Just(1)
           WHEN value에 값을 대입하려고 하면
           THEN FrozenInstanceError가 발생한다
        """
        m = Just(1)
        with pytest.raises(FrozenInstanceError):
            m.value = 2  # type: ignore[misc]

    def test_reprs(self):
        """GIVEN Just(1)과 Nothing
           WHEN repr을 호출하면
           THEN 'Just(value=1)'과 'Nothing'을 반환한다
        """
        assert repr(Just(1)) == "Just(value=1)"
        assert repr(Nothing) == "Nothing"

    def test_structural_pattern_matching(self):
        """GIVEN Just(5)
           WHEN match 문으로 분해하면
           THEN value를 꺼낼 수 있다
        """
        match just(5):
            case Just(value=v):
                assert v == 5
            case _:
                pytest.fail("expected Just")

    def test_nothing_survives_copy_and_pickle(self):
        """GIVEN Nothing과 Nothing을 담은 컨테이너
           WHEN copy/deepcopy/pickle 왕복을 하면
           THEN 같은 싱글턴을 돌려받아 동등성과 동일성이 유지된다
        """
        assert copy.copy(Nothing) is Nothing
        assert copy.deepcopy(Nothing) is Nothing
        assert pickle.loads(pickle.dumps(Nothing)) is Nothing
        assert copy.deepcopy(Just(Nothing)) == Just(Nothing)
        assert pickle.loads(pickle.dumps([just(1), Nothing])) == [Just(1), Nothing]
