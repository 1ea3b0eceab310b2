"""Tests for sequential combinators."""

from __future__ import annotations

import pytest
from kungfu import Error, Ok

import lazyio as lio
from helpers import Counter, expect_error, expect_ok, explode
from lazyio import RefinementError


class TestFlatMap:
    """Tests for map / flat_map / map_error / flat_map_error."""

    @pytest.mark.asyncio
    async def test_flat_map_chains_values(self) -> None:
        """The continuation receives the success value."""
        io = lio.succeed(2).flat_map(lambda x: lio.succeed(x * 21))

        assert expect_ok(await io) == 42

    @pytest.mark.asyncio
    async def test_flat_map_short_circuits(self) -> None:
        """A failing node never invokes the continuation."""
        io = lio.fail("E1").flat_map(explode)

        assert expect_error(await io) == "E1"

    @pytest.mark.asyncio
    async def test_map_error_only_touches_failures(self) -> None:
        """map_error rewrites errors and passes successes through."""
        assert expect_error(await lio.fail(1).map_error(lambda e: e + 1)) == 2
        assert expect_ok(await lio.succeed("ok").map_error(explode)) == "ok"

    @pytest.mark.asyncio
    async def test_flat_map_error(self) -> None:
        """flat_map_error evaluates the failure-only IO built from the error."""
        io = lio.fail("low").flat_map_error(lambda e: lio.fail(e.upper()))

        assert expect_error(await io) == "LOW"
        assert expect_ok(await lio.succeed(1).flat_map_error(explode)) == 1


class TestZip:
    """Tests for the sequential pairwise combine."""

    @pytest.mark.asyncio
    async def test_zip_combines(self) -> None:
        """Both values reach the combining function."""
        io = lio.zip(lio.succeed("a"), lio.succeed("b"), lambda a, b: a + b)

        assert expect_ok(await io) == "ab"

    @pytest.mark.asyncio
    async def test_zip_is_left_biased(self) -> None:
        """Left failure wins and right is never evaluated."""
        right = Counter(value="E2")
        io = lio.fail("E1").zip(lio.fail_with(right), explode)

        assert expect_error(await io) == "E1"
        assert right.calls == 0

    @pytest.mark.asyncio
    async def test_zip_right_failure(self) -> None:
        """Right failure short-circuits the combining function."""
        io = lio.succeed(1).zip(lio.fail("E2"), explode)

        assert expect_error(await io) == "E2"

    @pytest.mark.asyncio
    async def test_zip_left_and_right(self) -> None:
        """zip_left keeps the first value, zip_right the second."""
        first, second = lio.succeed(1), lio.succeed(2)

        assert expect_ok(await first.zip_left(second, str)) == "1"
        assert expect_ok(await first.zip_right(second, str)) == "2"


class TestSideEffects:
    """Tests for for_each / tap / tap_error / brace."""

    @pytest.mark.asyncio
    async def test_for_each_observes_success(self) -> None:
        """for_each sees the value and keeps it."""
        seen = Counter(value="ignored")

        assert expect_ok(await lio.succeed(7).for_each(seen)) == 7
        assert seen.args == [7]

    @pytest.mark.asyncio
    async def test_for_each_accepts_async(self) -> None:
        """An async side effect is awaited."""
        seen: list[int] = []

        async def record(x: int) -> None:
            seen.append(x)

        await lio.succeed(3).for_each(record)

        assert seen == [3]

    @pytest.mark.asyncio
    async def test_for_each_skips_failure(self) -> None:
        """Failures pass through without calling the side effect."""
        assert expect_error(await lio.fail("E").for_each(explode)) == "E"

    @pytest.mark.asyncio
    async def test_tap_discards_failure_of_peek(self) -> None:
        """The tapped IO failing does not change the result."""
        io = lio.succeed("v").tap(lambda v: lio.fail(f"peek {v}"))

        assert expect_ok(await io) == "v"

    @pytest.mark.asyncio
    async def test_tap_error_runs_on_failure(self) -> None:
        """tap_error peeks at the error and keeps it."""
        seen = Counter()
        io = lio.fail("E").tap_error(lambda e: lio.effect_total(lambda: seen(e)))

        assert expect_error(await io) == "E"
        assert seen.args == ["E"]

    @pytest.mark.asyncio
    async def test_tap_error_discards_failure_of_peek(self) -> None:
        """A failing peek does not replace the original error."""
        io = lio.fail("E").tap_error(lambda _: lio.fail("peek"))

        assert expect_error(await io) == "E"

    @pytest.mark.asyncio
    async def test_tap_skips_failure(self) -> None:
        """tap never calls f on an Error; tap_error never on an Ok."""
        assert expect_error(await lio.fail("E").tap(explode)) == "E"
        assert expect_ok(await lio.succeed(1).tap_error(explode)) == 1

    @pytest.mark.asyncio
    async def test_brace_success(self) -> None:
        """after runs with the before value; the wrapped value is kept."""
        after = Counter()
        io = lio.succeed("body").brace(
            lio.succeed("ctx"),
            lambda a: lio.effect_total(lambda: after(a)),
        )

        assert expect_ok(await io) == "body"
        assert after.args == ["ctx"]

    @pytest.mark.asyncio
    async def test_brace_after_failure_overrides(self) -> None:
        """A failing after replaces the success."""
        io = lio.succeed("body").brace(lio.succeed("ctx"), lambda _: lio.fail("after failed"))

        assert expect_error(await io) == "after failed"

    @pytest.mark.asyncio
    async def test_brace_body_failure_still_runs_after(self) -> None:
        """after runs when the body fails; the body failure is kept."""
        after = Counter()
        io = lio.fail("body failed").brace(
            lio.succeed("ctx"),
            lambda a: lio.effect_total(lambda: after(a)).flat_map(lambda _: lio.fail("ignored")),
        )

        assert expect_error(await io) == "body failed"
        assert after.calls == 1

    @pytest.mark.asyncio
    async def test_brace_before_failure(self) -> None:
        """before failing skips both the body and after."""
        body = Counter()
        io = lio.succeed_with(body).brace(lio.fail("before failed"), explode)

        assert expect_error(await io) == "before failed"
        assert body.calls == 0


class TestGuards:
    """Tests for filter_or_fail / recover / fail / refine_or_die / cond."""

    @pytest.mark.asyncio
    async def test_filter_or_fail(self) -> None:
        """A value failing the predicate becomes an error."""
        io = lio.succeed(-1).filter_or_fail(lambda x: x >= 0, lambda x: f"negative: {x}")

        assert expect_error(await io) == "negative: -1"
        assert expect_ok(await lio.succeed(1).filter_or_fail(lambda x: x >= 0, explode)) == 1

    @pytest.mark.asyncio
    async def test_recover(self) -> None:
        """recover evaluates the handler's IO on failure only."""
        io = lio.fail("E").recover(lambda e: lio.succeed(f"recovered from {e}"))

        assert expect_ok(await io) == "recovered from E"
        assert expect_ok(await lio.succeed(1).recover(explode)) == 1

    @pytest.mark.asyncio
    async def test_recover_with_and_or_succeed(self) -> None:
        """Plain-value recovery helpers."""
        assert expect_ok(await lio.fail("E").recover_with(len)) == 1
        assert expect_ok(await lio.or_succeed(lio.fail("E"), default=0)) == 0

    @pytest.mark.asyncio
    async def test_fail_coalesces(self) -> None:
        """fail turns a success into an error."""
        assert expect_error(await lio.succeed("v").fail()) == "v"
        assert expect_error(await lio.succeed(2).fail(lambda x: x * 2)) == 4
        assert expect_error(await lio.fail("E").fail(explode)) == "E"

    @pytest.mark.asyncio
    async def test_refine_or_die_keeps_matching_error(self) -> None:
        """An error of the expected kind stays a typed failure."""
        error = ValueError("bad")

        assert expect_error(await lio.fail(error).refine_or_die(ValueError)) is error

    @pytest.mark.asyncio
    async def test_refine_or_die_aborts_on_mismatch(self) -> None:
        """Any other error aborts."""
        with pytest.raises(RefinementError) as info:
            await lio.fail("not an exception").refine_or_die(ValueError)

        assert info.value.expected is ValueError
        assert info.value.actual == "not an exception"

    @pytest.mark.asyncio
    async def test_refine_or_die_aborts_on_success(self) -> None:
        """A success cannot be narrowed to an error."""
        with pytest.raises(RefinementError):
            await lio.succeed(1).refine_or_die(ValueError)

    @pytest.mark.asyncio
    async def test_cond(self) -> None:
        """cond picks the branch when evaluated."""
        flag = Counter(value=False)
        io = lio.cond(flag, lambda: "yes", lambda: "no")

        assert flag.calls == 0
        assert expect_error(await io) == "no"
        flag.value = True
        assert expect_ok(await io) == "yes"
        assert expect_ok(await lio.cond(True, lambda: 1, explode)) == 1


class TestReshape:
    """Tests for swap / flatten / attempt / from_result / from_optional."""

    @pytest.mark.asyncio
    async def test_swap(self) -> None:
        """swap flips both channels."""
        assert expect_error(await lio.succeed(1).swap()) == 1
        assert expect_ok(await lio.fail("E").swap()) == "E"

    @pytest.mark.asyncio
    async def test_flatten(self) -> None:
        """A success carrying a Result collapses into it."""
        assert expect_ok(await lio.succeed(Ok(1)).flatten()) == 1
        assert expect_error(await lio.succeed(Error("inner")).flatten()) == "inner"
        assert expect_error(await lio.fail("outer").flatten()) == "outer"

    @pytest.mark.asyncio
    async def test_attempt_never_fails(self) -> None:
        """attempt surfaces the outcome as a value."""
        assert expect_error(expect_ok(await lio.fail("E").attempt())) == "E"
        assert expect_ok(expect_ok(await lio.succeed(1).attempt())) == 1

    @pytest.mark.asyncio
    async def test_from_result(self) -> None:
        """Ok and Error lift into the matching IO."""
        assert expect_ok(await lio.from_result(Ok(1))) == 1
        assert expect_error(await lio.from_result(Error("E"))) == "E"

    @pytest.mark.asyncio
    async def test_from_optional(self) -> None:
        """None becomes the lazily built error."""
        assert expect_ok(await lio.from_optional(0, error=explode)) == 0
        assert expect_error(await lio.from_optional(None, error=lambda: "missing")) == "missing"

    @pytest.mark.asyncio
    async def test_catching(self) -> None:
        """catching converts the raised exception."""
        io = lio.catching(lambda: int("nope"), on_error=lambda e: type(e).__name__)

        assert expect_error(await io) == "ValueError"
