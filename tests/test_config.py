from __future__ import annotations

import pytest

from schema_combinator.config import FAIL_EARLY_ENV, ValidatorConfig


def test_defaults() -> None:
    assert ValidatorConfig().fail_early is False
    assert ValidatorConfig.from_env({}) == ValidatorConfig()


@pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
def test_from_env_true_values(raw: str) -> None:
    assert ValidatorConfig.from_env({FAIL_EARLY_ENV: raw}).fail_early is True


@pytest.mark.parametrize("raw", ["", "0", "False", "no", "off"])
def test_from_env_false_values(raw: str) -> None:
    assert ValidatorConfig.from_env({FAIL_EARLY_ENV: raw}).fail_early is False


def test_from_env_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        ValidatorConfig.from_env({FAIL_EARLY_ENV: "maybe"})


def test_from_env_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv(FAIL_EARLY_ENV, "true")

    assert ValidatorConfig.from_env().fail_early is True
