from __future__ import annotations

import logging

import pytest

from legalscan.config import env_positive_float, env_positive_int


def test_unset_and_blank_values_use_the_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LEGALSCAN_SENTENCES_PER_PAGE", raising=False)
    assert env_positive_int("LEGALSCAN_SENTENCES_PER_PAGE", 20) == 20
    monkeypatch.setenv("LEGALSCAN_SENTENCES_PER_PAGE", "  ")
    assert env_positive_int("LEGALSCAN_SENTENCES_PER_PAGE", 20) == 20


def test_valid_values_override_the_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LEGALSCAN_SENTENCES_PER_PAGE", " 5 ")
    monkeypatch.setenv("LEGALSCAN_RENDER_TIMEOUT", "2.5")
    assert env_positive_int("LEGALSCAN_SENTENCES_PER_PAGE", 20) == 5
    assert env_positive_float("LEGALSCAN_RENDER_TIMEOUT", 30) == 2.5


@pytest.mark.parametrize("raw", ["ten", "1.5", "0", "-3"])
def test_invalid_int_falls_back_with_warning(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture, raw: str
) -> None:
    monkeypatch.setenv("LEGALSCAN_SENTENCES_PER_PAGE", raw)
    with caplog.at_level(logging.WARNING, logger="legalscan.config"):
        assert env_positive_int("LEGALSCAN_SENTENCES_PER_PAGE", 20) == 20
    assert "LEGALSCAN_SENTENCES_PER_PAGE" in caplog.text


@pytest.mark.parametrize("raw", ["soon", "nan", "0", "-1.0"])
def test_invalid_float_falls_back(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("LEGALSCAN_DOWNLOAD_TIMEOUT", raw)
    value = env_positive_float("LEGALSCAN_DOWNLOAD_TIMEOUT", 30)
    assert value == 30.0
    assert isinstance(value, float)
