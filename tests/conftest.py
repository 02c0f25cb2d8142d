"""Pytest configuration for the amountcodec test suite.

Hypothesis profiles (selected once, at import):
    dev      500 examples, the default on a workstation
    ci       50 derandomized examples, chosen when CI=true
    verbose  100 examples with per-example output

HYPOTHESIS_PROFILE=<name> overrides the detection.

The first Babel call for a locale loads CLDR data from disk, which can
take longer than Hypothesis' default deadline, so no profile sets one.

Tests marked @pytest.mark.fuzz are skipped unless selected with
`pytest -m fuzz`.
"""

import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES, deadline=None)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    deadline=None,
    derandomize=True,
    print_blob=True,
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    deadline=None,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in ("dev", "ci", "verbose"):
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless the run selects them with -m fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


@pytest.fixture
def fresh_context_cache() -> Iterator[None]:
    """Run a test against an empty AmountContext cache."""
    from amountcodec.runtime import AmountContext  # noqa: PLC0415

    AmountContext.clear_cache()
    yield
    AmountContext.clear_cache()
