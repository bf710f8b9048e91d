"""Tests for LoaderOptions."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from linecfg.options import LoaderOptions


class TestLoaderOptions:
    def test_default_encoding(self) -> None:
        assert LoaderOptions().encoding == "utf-8"

    def test_encoding_is_normalized(self) -> None:
        assert LoaderOptions(encoding="Latin-1").encoding == "iso8859-1"

    def test_unknown_encoding_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoaderOptions(encoding="no-such-codec")

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoaderOptions(comment=";")

    def test_frozen(self) -> None:
        opts = LoaderOptions()
        with pytest.raises(ValidationError):
            opts.encoding = "ascii"
