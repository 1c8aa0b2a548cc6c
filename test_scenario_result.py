#!/usr/bin/env python3
"""
Tests for scenario result aggregation: durations, first failure tracking,
injected errors, the failure locator and the background/scenario exports.
"""

import sys
import unittest

from featurerun import (
    Background,
    Feature,
    Result,
    Scenario,
    ScenarioResult,
    Step,
    StepResult,
    StepStatus,
    Tag,
)


def create_feature(with_background: bool = True) -> Feature:
    """Create a feature, optionally with a background at line 3."""
    return Feature(
        name="Users API",
        relative_path="features/users.feature",
        background=Background(line=3) if with_background else None
    )


def create_scenario(feature: Feature = None, tags=None) -> Scenario:
    """Create a scenario at line 8."""
    return Scenario(
        feature=feature or create_feature(),
        name="Create User_Admin",
        line=8,
        description="creates an admin user",
        tags=tags
    )


def create_step_result(line: int, text: str, result: Result, prefix: str = "Given",
                       background: bool = False) -> StepResult:
    """Create a step result for a plain step."""
    return StepResult(Step(line=line, prefix=prefix, text=text, background=background), result)


class TestScenarioResultAggregation(unittest.TestCase):
    """Duration and failure tracking."""

    def setUp(self):
        self.scenario = create_scenario()
        self.result = ScenarioResult(self.scenario)

    def test_new_result_is_empty(self):
        self.assertEqual(self.result.duration_nanos, 0)
        self.assertFalse(self.result.is_failed)
        self.assertIsNone(self.result.failed_step)
        self.assertIsNone(self.result.error)
        self.assertEqual(self.result.step_results, ())
        self.assertEqual(self.result.status, StepStatus.PASSED)

    def test_worked_example(self):
        """A passes, B fails, C passes: 160ns, B is the failed step."""
        error = AssertionError("status 500")
        a = create_step_result(9, "url baseUrl", Result.passed(100))
        b = create_step_result(10, "status 201", Result.failed(50, error), prefix="Then")
        c = create_step_result(11, "print response", Result.passed(10), prefix="*")
        for step_result in (a, b, c):
            self.result.add_step_result(step_result)

        self.assertEqual(self.result.duration_nanos, 160)
        self.assertTrue(self.result.is_failed)
        self.assertIs(self.result.failed_step, b)
        self.assertIs(self.result.error, error)
        self.assertEqual(self.result.status, StepStatus.FAILED)

        steps = self.result.to_map()["steps"]
        self.assertEqual([s["name"] for s in steps], ["url baseUrl", "status 201", "print response"])

    def test_duration_sums_every_status(self):
        durations = [5, 7, 0, 11, 13]
        results = [
            Result.passed(5),
            Result.failed(7, RuntimeError("first")),
            Result.skipped(),
            Result.passed(11),
            Result.failed(13, RuntimeError("second")),
        ]
        for index, result in enumerate(results):
            self.result.add_step_result(create_step_result(index + 9, f"step {index}", result))
        self.assertEqual(self.result.duration_nanos, sum(durations))
        self.assertEqual(self.result.duration_millis, sum(durations) / 1_000_000)

    def test_first_failure_is_never_replaced(self):
        first = create_step_result(9, "first failure", Result.failed(1, ValueError("one")))
        second = create_step_result(10, "second failure", Result.failed(1, ValueError("two")))
        self.result.add_step_result(first)
        self.result.add_step_result(second)
        self.result.add_error("teardown failed", RuntimeError("three"))

        self.assertIs(self.result.failed_step, first)
        self.assertEqual(str(self.result.error), "one")
        self.assertEqual(len(self.result.step_results), 3)

    def test_skipped_steps_do_not_fail(self):
        self.result.add_step_result(create_step_result(9, "skipped", Result.skipped()))
        self.assertFalse(self.result.is_failed)
        self.assertIsNone(self.result.get_failure_message_for_display())

    def test_steps_after_failure_still_count(self):
        self.result.add_step_result(create_step_result(9, "fails", Result.failed(10, RuntimeError())))
        self.result.add_step_result(create_step_result(10, "cleanup", Result.passed(25)))
        self.assertEqual(self.result.duration_nanos, 35)
        self.assertEqual(self.result.failed_step.step.text, "fails")

    def test_seeded_step_results_are_aggregated(self):
        seeded = [
            create_step_result(9, "one", Result.passed(3)),
            create_step_result(10, "two", Result.failed(4, RuntimeError("seeded"))),
        ]
        result = ScenarioResult(self.scenario, seeded)
        self.assertEqual(result.duration_nanos, 7)
        self.assertIs(result.failed_step, seeded[1])
        self.assertEqual(list(result.step_results), seeded)

    def test_step_results_view_is_read_only(self):
        self.result.add_step_result(create_step_result(9, "one", Result.passed(1)))
        view = self.result.step_results
        self.assertIsInstance(view, tuple)
        self.assertEqual(len(self.result.step_results), 1)

    def test_metadata_fields(self):
        self.result.thread_name = "worker-1"
        self.result.start_time = 1000
        self.result.end_time = 2000
        self.assertEqual(self.result.thread_name, "worker-1")
        self.assertEqual(self.result.end_time - self.result.start_time, 1000)


class TestScenarioResultErrors(unittest.TestCase):
    """Out-of-step failures and the failure locator."""

    def setUp(self):
        self.scenario = create_scenario()
        self.result = ScenarioResult(self.scenario)

    def test_add_error_synthesizes_failed_step(self):
        error = RuntimeError("connection refused")
        self.result.add_error("beforeScenario hook failed", error)

        failed = self.result.failed_step
        self.assertIsNotNone(failed)
        self.assertEqual(failed.step.prefix, "*")
        self.assertEqual(failed.step.line, self.scenario.line)
        self.assertEqual(failed.step.text, "beforeScenario hook failed")
        self.assertFalse(failed.step.is_background)
        self.assertEqual(failed.result.duration_nanos, 0)
        self.assertTrue(failed.result.is_failed)
        self.assertIs(failed.result.error, error)
        self.assertIsNone(failed.call_results)

    def test_add_error_after_passing_steps(self):
        self.result.add_step_result(create_step_result(9, "url baseUrl", Result.passed(40)))
        self.result.add_error("teardown failed", None)
        self.assertTrue(self.result.is_failed)
        self.assertEqual(self.result.duration_nanos, 40)
        self.assertIsNone(self.result.error)
        self.assertEqual(self.result.to_map()["steps"][-1]["keyword"], "*")

    def test_failure_message_for_display(self):
        self.assertIsNone(self.result.get_failure_message_for_display())
        self.result.add_step_result(create_step_result(12, "status 201", Result.failed(1, AssertionError())))
        self.assertEqual(
            self.result.get_failure_message_for_display(),
            "features/users.feature:12 status 201"
        )

    def test_failure_message_for_injected_error(self):
        self.result.add_error("timeout", TimeoutError("30s"))
        self.assertEqual(
            self.result.get_failure_message_for_display(),
            "features/users.feature:8 timeout"
        )

    def test_error_message_in_export(self):
        self.result.add_error("timeout", TimeoutError("30s"))
        step = self.result.to_map()["steps"][0]
        self.assertEqual(step["result"]["status"], "failed")
        self.assertEqual(step["result"]["duration"], 0)
        self.assertEqual(step["result"]["error_message"], "TimeoutError: 30s")


class TestScenarioResultExport(unittest.TestCase):
    """Scenario and background records."""

    def setUp(self):
        self.scenario = create_scenario(tags=(Tag("smoke", 7), Tag("users", 7)))
        self.result = ScenarioResult(self.scenario)
        self.result.add_step_result(create_step_result(4, "url baseUrl", Result.passed(1), background=True))
        self.result.add_step_result(create_step_result(9, "path 'users'", Result.passed(2)))
        self.result.add_step_result(create_step_result(5, "header auth", Result.passed(3), prefix="And", background=True))
        self.result.add_step_result(create_step_result(10, "method post", Result.passed(4), prefix="When"))

    def test_to_map_fields(self):
        data = self.result.to_map()
        self.assertEqual(data["name"], "Create User_Admin")
        self.assertEqual(data["line"], 8)
        self.assertEqual(data["id"], "create-user-admin")
        self.assertEqual(data["description"], "creates an admin user")
        self.assertEqual(data["type"], "scenario")
        self.assertEqual(data["keyword"], "Scenario")
        self.assertEqual(data["tags"], [{"name": "@smoke", "line": 7}, {"name": "@users", "line": 7}])

    def test_to_map_without_tags(self):
        result = ScenarioResult(create_scenario())
        self.assertNotIn("tags", result.to_map())

    def test_background_to_map_fields(self):
        data = self.result.background_to_map()
        self.assertEqual(data["name"], "")
        self.assertEqual(data["line"], 3)
        self.assertEqual(data["description"], "")
        self.assertEqual(data["type"], "background")
        self.assertEqual(data["keyword"], "Background")
        self.assertNotIn("id", data)

    def test_background_without_feature_background(self):
        result = ScenarioResult(create_scenario(feature=create_feature(with_background=False)))
        self.assertIsNone(result.background_to_map()["line"])

    def test_views_are_disjoint_and_ordered(self):
        background = [s["name"] for s in self.result.background_to_map()["steps"]]
        foreground = [s["name"] for s in self.result.to_map()["steps"]]
        self.assertEqual(background, ["url baseUrl", "header auth"])
        self.assertEqual(foreground, ["path 'users'", "method post"])
        self.assertEqual(len(background) + len(foreground), len(self.result.step_results))

    def test_step_record_fields(self):
        step = self.result.to_map()["steps"][1]
        self.assertEqual(step["line"], 10)
        self.assertEqual(step["keyword"], "When")
        self.assertEqual(step["name"], "method post")
        self.assertEqual(step["result"], {"status": "passed", "duration": 4})
        self.assertEqual(step["match"]["arguments"], [])
        self.assertNotIn("doc_string", step)

    def test_doc_string_and_log_are_combined(self):
        step = Step(line=11, prefix="And", text="request", doc_string='{"name": "admin"}')
        self.result.add_step_result(StepResult(step, Result.passed(1), step_log="request sent"))
        record = self.result.to_map()["steps"][-1]
        self.assertEqual(record["doc_string"]["value"], '{"name": "admin"}\nrequest sent')
        self.assertEqual(record["doc_string"]["line"], 11)

    def test_export_reflects_live_state(self):
        before = self.result.to_map()
        self.result.add_step_result(create_step_result(11, "status 201", Result.passed(5), prefix="Then"))
        after = self.result.to_map()
        self.assertEqual(len(before["steps"]), 2)
        self.assertEqual(len(after["steps"]), 3)

    def test_exports_do_not_mutate_state(self):
        data = self.result.to_map()
        data["steps"][0]["keyword"] = "changed"
        data["steps"].clear()
        again = self.result.to_map()
        self.assertEqual(again["steps"][0]["keyword"], "Given")
        self.assertEqual(self.result.duration_nanos, 10)

    def test_typed_records(self):
        record = self.result.to_record()
        self.assertEqual(record.type, "scenario")
        self.assertEqual(len(record.steps), 2)
        self.assertEqual(record.steps[0].keyword, "Given")
        background = self.result.background_to_record()
        self.assertEqual(background.keyword, "Background")
        self.assertEqual(len(background.steps), 2)


def run_tests():
    """Run all tests and display results."""
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()
    for case in (TestScenarioResultAggregation, TestScenarioResultErrors, TestScenarioResultExport):
        suite.addTests(loader.loadTestsFromTestCase(case))
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_tests()
    sys.exit(0 if success else 1)
