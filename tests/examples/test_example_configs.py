"""Tests for the sample configuration files in the examples/ directory."""

from __future__ import annotations

import pathlib

import pytest

from linecfg import KeyNotFoundError, NumberInvalidError, load

PROJECT_ROOT = pathlib.Path(__file__).resolve().parent.parent.parent
TRAINING_CFG = PROJECT_ROOT / "examples" / "configs" / "training.cfg"


class TestTrainingConfig:
    """The training sample mirrors the usage the package was written for."""

    def test_string_value_has_spaces_removed(self):
        store = load(TRAINING_CFG)
        assert store.get_string("datafile") == "data/trainset.csv"

    def test_numeric_values(self):
        store = load(TRAINING_CFG)
        assert store.get_number("alpha", 0.5) == 0.9
        assert store.get_integer("n_iteration", 10) == 50
        assert store.get_number("offset", 0.0) == -12.5

    def test_missing_numeric_value_uses_default(self):
        store = load(TRAINING_CFG)
        assert store.get_number("beta", 0.89) == 0.89

    def test_missing_string_value_raises(self):
        store = load(TRAINING_CFG)
        with pytest.raises(KeyNotFoundError):
            store.get_string("datafile2")

    def test_malformed_number_raises(self):
        store = load(TRAINING_CFG)
        with pytest.raises(NumberInvalidError):
            store.get_number("theta", 0.8)
