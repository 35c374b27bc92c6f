"""Pytest configuration for the msgformatengine test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 300 examples
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
These are intensive property tests designed for fuzzing, not unit testing.
Run them via: pytest -m fuzz
"""

import os

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

from msgformatengine import LocaleData, LocaleDataProvider

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (300 examples, silent)
settings.register_profile(
    "dev",
    max_examples=300,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
    suppress_health_check=[HealthCheck.too_slow],
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    # Explicit override via env var
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    # GitHub Actions sets CI=true automatically
    if os.environ.get("CI") == "true":
        return "ci"

    # Local development
    return "dev"


# Load appropriate profile automatically
settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested.

    Fuzz tests are intensive property tests designed for dedicated fuzzing runs,
    not for inclusion in the regular test suite. They typically have high
    max_examples values (500-1500) and can take 10+ minutes to complete.

    Behavior:
    - Normal test run (pytest tests/): Fuzz tests are SKIPPED
    - Explicit fuzz run (pytest -m fuzz): Fuzz tests run, others skipped

    This keeps the regular suite fast while pytest -m fuzz still exercises
    the long-running property tests.
    """
    # Check if user explicitly requested fuzz tests via -m marker
    marker_expr = config.getoption("-m", default="")

    # If user explicitly requested fuzz tests, don't skip them
    if "fuzz" in str(marker_expr):
        return

    # Skip fuzz-marked tests in normal test runs
    skip_fuzz = pytest.mark.skip(
        reason="Fuzzing test - run with: pytest -m fuzz"
    )
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# LOCALE DATA FIXTURES
# =============================================================================
# Hand-built records keep formatting tests independent of the installed
# CLDR version (CLDR fr uses U+202F for grouping, for example).

FR_FR = LocaleData(
    "fr_FR",
    decimal_symbol=",",
    group_symbol=" ",
    minus_sign="-",
    percent_pattern="#,##0\xa0%",
    currency_pattern="#,##0.00\xa0\xa4",
    date_patterns={
        "short": "dd/MM/y",
        "medium": "d MMM y",
        "long": "d MMMM y",
        "full": "EEEE d MMMM y",
    },
    time_patterns={
        "short": "HH:mm",
        "medium": "HH:mm:ss",
        "long": "HH:mm:ss z",
        "full": "HH:mm:ss zzzz",
    },
    datetime_patterns={
        "short": "{1} {0}",
        "medium": "{1}, {0}",
        "long": "{1} 'à' {0}",
        "full": "{1} 'à' {0}",
    },
    months={
        "wide": (
            "janvier", "février", "mars", "avril", "mai", "juin",
            "juillet", "août", "septembre", "octobre", "novembre", "décembre",
        ),
        "abbreviated": (
            "janv.", "févr.", "mars", "avr.", "mai", "juin",
            "juil.", "août", "sept.", "oct.", "nov.", "déc.",
        ),
        "narrow": ("J", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D"),
    },
    days={
        "wide": ("lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"),
        "abbreviated": ("lun.", "mar.", "mer.", "jeu.", "ven.", "sam.", "dim."),
        "narrow": ("L", "M", "M", "J", "V", "S", "D"),
    },
    periods=("AM", "PM"),
    eras=("av. J.-C.", "ap. J.-C."),
    default_currency="EUR",
    currency_symbols={"EUR": "€", "USD": "$US"},
    currency_names={"EUR": "euro", "USD": "dollar des États-Unis"},
    plural_rules={"one": "i = 0,1"},
)

BN_BD = LocaleData(
    "bn_BD",
    digits="০১২৩৪৫৬৭৮৯",
    grouping_size=3,
    secondary_grouping_size=2,
    currency_pattern="#,##,##0.00\xa4",
    default_currency="BDT",
    currency_symbols={"BDT": "৳"},
    currency_names={"BDT": "বাংলাদেশী টাকা"},
    plural_rules={"one": "i = 0 or n = 1"},
)

HI_IN = LocaleData(
    "hi_IN",
    secondary_grouping_size=2,
    default_currency="INR",
    currency_symbols={"INR": "₹"},
    currency_names={"INR": "भारतीय रुपया"},
)

EN = LocaleData(
    "en",
    currency_symbols={"USD": "$", "EUR": "€", "JPY": "¥", "BHD": "BHD"},
    currency_names={"USD": "US dollars", "EUR": "euros", "JPY": "Japanese yen"},
    currency_digits={"JPY": 0, "BHD": 3},
)

EN_US = LocaleData(
    "en_US",
    default_currency="USD",
    currency_symbols=EN.currency_symbols,
    currency_names=EN.currency_names,
    currency_digits=EN.currency_digits,
)


@pytest.fixture
def fr_fr() -> LocaleData:
    """French (France): space grouping, comma decimal, EUR."""
    return FR_FR


@pytest.fixture
def bn_bd() -> LocaleData:
    """Bengali (Bangladesh): Bengali digits, 3;2 grouping, BDT."""
    return BN_BD


@pytest.fixture
def hi_in() -> LocaleData:
    """Hindi (India) with Latin digits and Indian 3;2 grouping."""
    return HI_IN


@pytest.fixture
def en_us() -> LocaleData:
    """English (US) with USD as default currency."""
    return EN_US


@pytest.fixture
def provider() -> LocaleDataProvider:
    """Provider over the hand-built records; no CLDR loader, en_US default."""
    return LocaleDataProvider(
        {"en": EN, "en_US": EN_US, "fr_FR": FR_FR, "bn_BD": BN_BD, "hi_IN": HI_IN},
        default="en_US",
    )
