"""Tests for merging feature collections."""

import pytest

from boundary.features import FeatureCollection
from boundary.merge import merge_feature_collections
from tests.conftest import collection, square_feature


@pytest.mark.unit
class TestMergeFeatureCollections:

    def test_concatenates_in_order(self):
        a, b, c = square_feature(0, 0, n=1), square_feature(2, 0, n=2), square_feature(4, 0, n=3)
        merged = merge_feature_collections([collection(a, b), collection(c)])
        assert merged.features == [a, b, c]

    def test_skips_missing_collections(self):
        a, b = square_feature(0, 0), square_feature(2, 0)
        merged = merge_feature_collections([None, collection(a), None, collection(b)])
        assert merged.features == [a, b]

    def test_all_missing_is_empty(self):
        assert merge_feature_collections([None, None]).is_empty

    def test_no_input_is_empty(self):
        assert merge_feature_collections([]).is_empty

    def test_empty_collections_contribute_nothing(self):
        a = square_feature(0, 0)
        merged = merge_feature_collections([FeatureCollection(), collection(a)])
        assert merged.features == [a]

    def test_inputs_not_mutated(self):
        first = collection(square_feature(0, 0))
        merge_feature_collections([first, collection(square_feature(2, 0))])
        assert len(first) == 1
