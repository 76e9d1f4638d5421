"""Configures pytest further: sampled property tests are `slow`, huge unbounded operand tests are `extreme`."""
import pytest

MARKERS = {
    "slow": "sampled property checks over many operand pairs",
    "extreme": "unbounded operands with tens of thousands of bits",
}


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip sampled property tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run huge unbounded operand tests")


def pytest_configure(config):
    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Extreme test: needs --run-extreme option")
    for item in items:
        for name in item.keywords.keys() & skipdict.keys():
            item.add_marker(skipdict[name])
