"""Tests for the pytest plugin that ships the suite's fixtures and options."""

from __future__ import annotations

import pytest

PLUGIN = "pipelinecraft.testing.fixtures"

NETWORK_TESTS = """
import pytest

@pytest.mark.network
def test_live():
    assert True

def test_offline():
    assert True
"""


class TestNetworkOption:
    def test_network_tests_skipped_by_default(self, pytester: pytest.Pytester) -> None:
        pytester.makepyfile(NETWORK_TESTS)

        result = pytester.runpytest("-p", PLUGIN)

        result.assert_outcomes(passed=1, skipped=1)

    def test_network_flag_runs_them(self, pytester: pytest.Pytester) -> None:
        pytester.makepyfile(NETWORK_TESTS)

        result = pytester.runpytest("-p", PLUGIN, "--network")

        result.assert_outcomes(passed=2)


class TestSettingsFixture:
    def test_config_option_feeds_settings(
        self, pytester: pytest.Pytester, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("API_URL", raising=False)
        monkeypatch.delenv("PIPELINECRAFT_API_URL", raising=False)
        pytester.makefile(".yaml", pipelinecraft="api_url: http://localhost:9999\n")
        pytester.makepyfile(
            """
            def test_settings(settings):
                assert settings.api_url == "http://localhost:9999"
            """
        )

        result = pytester.runpytest(
            "-p", PLUGIN, f"--pipelinecraft-config={pytester.path / 'pipelinecraft.yaml'}"
        )

        result.assert_outcomes(passed=1)

    def test_markers_registered(self, pytester: pytest.Pytester) -> None:
        pytester.makepyfile(
            """
            import pytest

            @pytest.mark.smoke
            @pytest.mark.regression
            @pytest.mark.wip
            def test_tagged():
                pass
            """
        )

        result = pytester.runpytest("-p", PLUGIN, "--strict-markers")

        result.assert_outcomes(passed=1)
