from __future__ import annotations

from typing import Sequence

from trycmd.core import BinName, CaseResult, CaseSpec, CommandStatus, Mode
from trycmd.runner import Runner, RunnerSpec

from .helpers import RecordingExecutor


def test_prepare_merges_defaults_and_copies_env() -> None:
    spec = RunnerSpec()
    spec.case("cmd/*.toml")
    spec.case("cmd/fail-*.toml", CommandStatus.FAIL)
    spec.default_bin(BinName(name="tool"))
    spec.timeout(4.0)
    spec.env("K", "1")
    runner = spec.prepare()
    spec.env("K", "2")
    spec.case("late/*.toml")
    assert runner.cases == (
        CaseSpec(pattern="cmd/*.toml", bin=BinName(name="tool"), timeout=4.0, env={"K": "1"}),
        CaseSpec(
            pattern="cmd/fail-*.toml",
            expected=CommandStatus.FAIL,
            bin=BinName(name="tool"),
            timeout=4.0,
            env={"K": "1"},
        ),
    )


def test_is_included_without_filter_accepts_everything() -> None:
    runner = Runner(cases=())
    assert runner.is_included("anything")


def test_is_included_matches_any_substring() -> None:
    runner = Runner(cases=(), include=frozenset({"foo", "bar"}))
    assert runner.is_included("tests/cmd/foo.toml")
    assert runner.is_included("bar")
    assert not runner.is_included("tests/cmd/baz.toml")


def test_overlapping_patterns_run_each_test_once_with_later_status() -> None:
    executor = RecordingExecutor(
        matches={
            "cmd/*.toml": ["cmd/a.toml", "cmd/b.toml"],
            "cmd/a*.toml": ["cmd/a.toml"],
        }
    )
    spec = RunnerSpec()
    spec.case("cmd/*.toml")
    spec.case("cmd/a*.toml", CommandStatus.PASS)
    report = spec.prepare(executor).run(Mode.fail())
    assert executor.executed_names() == ["cmd/a.toml", "cmd/b.toml"]
    statuses = {name: case.expected for name, case, _ in executor.executed}
    assert statuses == {"cmd/a.toml": CommandStatus.PASS, "cmd/b.toml": None}
    assert report.passed


def test_unmatched_pattern_is_reported_as_error() -> None:
    executor = RecordingExecutor(matches={"missing/*.toml": []})
    spec = RunnerSpec()
    spec.case("missing/*.toml")
    report = spec.prepare(executor).run(Mode.fail())
    [result] = report.results
    assert result.status == "error"
    assert "matched no tests" in result.details
    assert result.case is not None and result.case.pattern == "missing/*.toml"
    assert executor.executed == []


class ExplodingExecutor(RecordingExecutor):
    def expand(self, case: CaseSpec) -> Sequence[str]:
        if case.pattern == "[bad":
            raise ValueError("invalid glob")
        return super().expand(case)

    def execute(self, case: CaseSpec, name: str, mode: Mode) -> CaseResult:
        if name == "boom":
            raise RuntimeError("spawn failed")
        return super().execute(case, name, mode)


def test_executor_errors_are_isolated_per_test() -> None:
    executor = ExplodingExecutor()
    spec = RunnerSpec()
    spec.case("[bad")
    spec.case("boom")
    spec.case("fine")
    report = spec.prepare(executor).run(Mode.fail())
    outcome = {result.name: (result.status, result.details) for result in report.results}
    assert outcome["[bad"][0] == "error"
    assert "invalid glob" in outcome["[bad"][1]
    assert outcome["boom"] == ("error", "spawn failed")
    assert outcome["fine"] == ("passed", "")
    assert report.count("error") == 2
    assert not report.passed


def test_results_are_linked_to_their_case() -> None:
    executor = RecordingExecutor(outcomes={"cmd/x.toml": "skipped"}, matches={"cmd/*": ["cmd/x.toml"]})
    spec = RunnerSpec()
    spec.case("cmd/*", CommandStatus.SKIP)
    report = spec.prepare(executor).run(Mode.overwrite())
    [result] = report.results
    assert result.case is not None and result.case.expected is CommandStatus.SKIP
    assert result.passed
    assert report.mode == Mode.overwrite()


def test_run_without_executor_reports_every_case() -> None:
    spec = RunnerSpec()
    spec.case("a/*")
    spec.case("b/*")
    report = spec.prepare().run(Mode.fail())
    assert [result.status for result in report.results] == ["error", "error"]


def test_filtered_runner_reports_nothing_for_excluded_names() -> None:
    executor = RecordingExecutor(matches={"cmd/*": ["cmd/one", "cmd/two"]})
    spec = RunnerSpec()
    spec.case("cmd/*")
    spec.include(["two"])
    report = spec.prepare(executor).run(Mode.fail())
    assert [result.name for result in report.results] == ["cmd/two"]
