"""Shared fixtures for parser tests."""

from __future__ import annotations

import pytest

from rescodegen.parser._internal.positions import PositionIndex
from rescodegen.parser._internal.segmenter import SignatureSegmenter
from rescodegen.parser._internal.translator import TypeTranslator


@pytest.fixture
def index() -> PositionIndex:
    return PositionIndex("type spec = {\n  getValue: () => string,\n}\n", "Spec.res")


@pytest.fixture
def segmenter(index: PositionIndex) -> SignatureSegmenter:
    return SignatureSegmenter(index)


@pytest.fixture
def translator(index: PositionIndex, segmenter: SignatureSegmenter) -> TypeTranslator:
    return TypeTranslator(index, segmenter)
