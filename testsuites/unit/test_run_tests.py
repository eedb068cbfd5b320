import sys

from run_tests import TestRunner, build_parser


def test_ui_suite_command_with_tags_and_workers():
    runner = TestRunner(suite="ui", tags=["P0", "smoke"], parallel=4, allure_report=False)

    cmd = runner.build_pytest_command()

    assert cmd[:3] == [sys.executable, "-m", "pytest"]
    assert "testsuites/ui_testing/tests" in cmd
    assert cmd[cmd.index("-m") + 1] == "P0 or smoke"
    assert cmd[cmd.index("-n") + 1] == "4"
    assert "--alluredir" not in cmd
    assert "--clean-alluredir" not in cmd


def test_browser_switches_are_passed_through_env():
    runner = TestRunner(
        suite="ui", browser="firefox", headless=False, debug_highlight=True,
        base_url="http://localhost:3000/",
    )

    env = runner.build_env()

    assert env["UI_BROWSER"] == "firefox"
    assert env["UI_HEADLESS"] == "false"
    assert env["UI_DEBUG_HIGHLIGHT"] == "true"
    assert env["UI_BASE_URL"] == "http://localhost:3000/"


def test_parser_defaults():
    args = build_parser().parse_args([])

    assert args.suite == "all"
    assert args.parallel == 1
    assert not args.no_headless
    assert not args.debug_highlight


def test_allure_results_are_cleaned_before_each_run():
    runner = TestRunner(suite="ui", tags=["P0"], parallel=4)

    cmd = runner.build_pytest_command()

    assert cmd[cmd.index("--alluredir") + 1] == str(runner.allure_results)
    assert "--clean-alluredir" in cmd
