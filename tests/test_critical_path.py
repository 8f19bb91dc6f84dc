"""Tests for the backward pass and critical path analysis."""

import pytest

from ganttplan.models import Task
from ganttplan.scheduler.algorithms.dependency import DependencyScheduler
from ganttplan.scheduler.backward_pass import CriticalPathAnalyzer, CriticalPathResult
from ganttplan.scheduler.forward_pass import ForwardPass
from ganttplan.scheduler.graph import build_task_graph
from tests.conftest import PROJECT_START, day, make_task


def analyze(tasks: list[Task]) -> CriticalPathResult:
    graph = build_task_graph(tasks)
    forward = ForwardPass(PROJECT_START).run(graph)
    return CriticalPathAnalyzer().run(graph, forward)


class TestBackwardPass:
    """Latest start/finish and slack."""

    def test_abc_windows(self, abc_tasks: list[Task]) -> None:
        """A (2d) feeds B (3d) and C (1d): A and B are critical, C has 2 days slack."""
        result = analyze(abc_tasks)
        windows = result.windows

        assert (windows["A"].earliest_start, windows["A"].earliest_finish) == (0, 2)
        assert (windows["B"].earliest_start, windows["B"].earliest_finish) == (2, 5)
        assert (windows["C"].earliest_start, windows["C"].earliest_finish) == (2, 3)
        assert (windows["C"].latest_start, windows["C"].latest_finish) == (4, 5)
        assert windows["A"].slack == 0
        assert windows["B"].slack == 0
        assert windows["C"].slack == 2
        assert result.critical_ids == {"A", "B"}
        assert result.project_finish == 5

    def test_single_task_is_critical(self) -> None:
        result = analyze([make_task("solo", 4)])

        assert result.critical_ids == {"solo"}
        assert result.critical_chain() == ["solo"]

    def test_independent_tasks_only_longest_is_critical(self) -> None:
        result = analyze([make_task("short", 1), make_task("long", 3)])

        assert result.critical_ids == {"long"}
        assert result.windows["short"].slack == 2

    def test_sink_latest_finish_is_project_finish(self) -> None:
        """Every sink must finish by completion, not by its own early finish."""
        result = analyze([make_task("A", 1), make_task("B", 5), make_task("C", 1, "A")])

        assert result.windows["C"].latest_finish == 5
        assert result.windows["C"].slack == 3
        assert result.windows["A"].latest_finish == 4
        assert result.windows["A"].slack == 3

    def test_slack_never_negative(self) -> None:
        tasks = [
            make_task("A", 2),
            make_task("B", 1, "A"),
            make_task("C", 4, "A"),
            make_task("D", 2, "B", "C"),
            make_task("E", 1),
        ]
        result = analyze(tasks)

        assert all(window.slack >= 0 for window in result.windows.values())

    def test_empty_graph(self) -> None:
        result = analyze([])

        assert result.windows == {}
        assert result.critical_ids == set()
        assert result.critical_chain() == []


class TestFreeSlack:
    """Delay a task can absorb without moving any dependent."""

    def test_free_slack_against_earliest_dependent(self) -> None:
        """C can slip until D's earliest start, which B pins at day 5."""
        tasks = [
            make_task("A", 2),
            make_task("B", 3, "A"),
            make_task("C", 1, "A"),
            make_task("D", 1, "B", "C"),
        ]
        result = analyze(tasks)

        assert result.free_slack["C"] == 2
        assert result.free_slack["B"] == 0
        assert result.free_slack["D"] == 0

    def test_free_slack_at_most_total_slack(self) -> None:
        tasks = [
            make_task("A", 1),
            make_task("B", 1, "A"),
            make_task("C", 6),
            make_task("D", 1, "B"),
        ]
        result = analyze(tasks)

        for task_id, window in result.windows.items():
            assert 0 <= result.free_slack[task_id] <= window.slack

    def test_chain_shares_total_but_not_free_slack(self) -> None:
        """Only the last task of a non-critical chain owns its free slack."""
        result = analyze([make_task("A", 1), make_task("B", 1, "A"), make_task("C", 5)])

        assert result.windows["A"].slack == 3
        assert result.windows["B"].slack == 3
        assert result.free_slack["A"] == 0
        assert result.free_slack["B"] == 3


class TestCriticalChain:
    """A single zero-slack chain from start to completion."""

    def test_abc_chain(self, abc_tasks: list[Task]) -> None:
        assert analyze(abc_tasks).critical_chain() == ["A", "B"]

    def test_chain_durations_sum_to_project_length(self) -> None:
        tasks = [
            make_task("1.1", 2),
            make_task("1.2", 1),
            make_task("2.1", 3, "1.1", "1.2"),
            make_task("2.2", 1, "1.2"),
            make_task("3.1", 2, "2.1"),
            make_task("3.2", 1, "2.2"),
        ]
        result = analyze(tasks)
        chain = result.critical_chain()

        assert chain == ["1.1", "2.1", "3.1"]
        assert sum(result.windows[task_id].duration for task_id in chain) == result.project_finish

    def test_tied_paths_pick_topological_first(self) -> None:
        """With two equally long branches the chain follows the one ordered first."""
        tasks = [
            make_task("A", 1),
            make_task("B", 2, "A"),
            make_task("C", 2, "A"),
            make_task("D", 1, "B", "C"),
        ]
        result = analyze(tasks)

        assert result.critical_ids == {"A", "B", "C", "D"}
        assert result.critical_chain() == ["A", "B", "D"]


class TestCriticalFlagOnSchedules:
    """The flag carried on automatically scheduled records."""

    def test_abc_scheduled_records(self, abc_tasks: list[Task]) -> None:
        result = DependencyScheduler(abc_tasks, PROJECT_START).schedule()
        by_id = {record.task_id: record for record in result.scheduled_tasks}

        assert by_id["A"].start_date == day(0)
        assert by_id["A"].end_date == day(2)
        assert by_id["B"].start_date == day(2)
        assert by_id["B"].end_date == day(5)
        assert by_id["C"].start_date == day(2)
        assert by_id["C"].end_date == day(3)
        assert [by_id[t].critical_path for t in "ABC"] == [True, True, False]
        assert by_id["C"].slack_days == 2
        assert by_id["C"].free_slack_days == 2
        assert result.project_end == day(5)
        assert result.critical_chain == ["A", "B"]

    @pytest.mark.parametrize("length", [1, 3, 6])
    def test_linear_chain_is_all_critical(self, length: int) -> None:
        tasks = [make_task("t1", 1)] + [
            make_task(f"t{i}", 1, f"t{i - 1}") for i in range(2, length + 1)
        ]
        result = DependencyScheduler(tasks, PROJECT_START).schedule()

        assert all(record.critical_path for record in result.scheduled_tasks)
        assert result.project_end == day(length)

    def test_at_least_one_critical_task(self) -> None:
        tasks = [make_task("x", 3), make_task("y", 3), make_task("z", 1, "x")]
        result = DependencyScheduler(tasks, PROJECT_START).schedule()

        assert any(record.critical_path for record in result.scheduled_tasks)
