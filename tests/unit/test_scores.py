"""Tests for score color and label banding."""
import pytest

from vybe.analysis.scores import score_color, score_label


class TestScoreColor:
    @pytest.mark.parametrize("score,color", [
        (85, "#00e676"),
        (65, "#ffd740"),
        (45, "#ff9100"),
        (20, "#ff4757"),
    ])
    def test_bands(self, score, color):
        assert score_color(score) == color

    @pytest.mark.parametrize("score,color", [
        (80, "#00e676"),
        (60, "#ffd740"),
        (40, "#ff9100"),
        (0, "#ff4757"),
        (100, "#00e676"),
    ])
    def test_lower_bound_inclusive(self, score, color):
        assert score_color(score) == color

    def test_just_below_80(self):
        assert score_color(79.9) == "#ffd740"

    def test_none_is_lowest_band(self):
        assert score_color(None) == "#ff4757"


class TestScoreLabel:
    @pytest.mark.parametrize("score,label", [
        (92, "Excellent"),
        (70, "Good"),
        (50, "Fair"),
        (10, "Needs Improvement"),
    ])
    def test_labels(self, score, label):
        assert score_label(score) == label

    def test_label_and_color_share_bands(self):
        for score in range(0, 101):
            expected = {
                "Excellent": "#00e676",
                "Good": "#ffd740",
                "Fair": "#ff9100",
                "Needs Improvement": "#ff4757",
            }[score_label(score)]
            assert score_color(score) == expected
