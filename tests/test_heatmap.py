"""Tests for the preflop heat map."""

import io

import numpy as np
import pytest
from rich.console import Console

from pokerheat.game.preflop import get_preflop_strength
from pokerheat.viz.heatmap import (
    HAND_MATRIX, HeatmapDisplay, display_heatmap, matrix_position,
    preflop_matrix,
)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, color_system=None)


class TestHandMatrix:
    def test_layout(self):
        assert HAND_MATRIX[0][0] == "AA"
        assert HAND_MATRIX[0][1] == "AKs"
        assert HAND_MATRIX[1][0] == "AKo"
        assert HAND_MATRIX[12][12] == "22"

    def test_all_hands_once(self):
        cells = [hand for row in HAND_MATRIX for hand in row]
        assert len(cells) == 169
        assert len(set(cells)) == 169

    @pytest.mark.parametrize("hand", ["AKs", "AKo", "QQ", "72o", "T9s"])
    def test_matrix_position(self, hand):
        i, j = matrix_position(hand)
        assert HAND_MATRIX[i][j] == hand


class TestPreflopMatrix:
    def test_shape(self):
        matrix = preflop_matrix()
        assert matrix.shape == (13, 13)
        assert np.all((matrix >= 0) & (matrix <= 1))

    def test_values_match_heuristic(self):
        matrix = preflop_matrix()
        assert matrix[0, 0] == pytest.approx(get_preflop_strength("Ah,Ad").strength)
        assert matrix[0, 1] == pytest.approx(get_preflop_strength("Ah,Kh").strength)
        assert matrix[1, 0] == pytest.approx(get_preflop_strength("Ah,Kd").strength)

    def test_suited_beats_offsuit(self):
        matrix = preflop_matrix()
        upper = np.triu_indices(13, k=1)
        lower = (upper[1], upper[0])
        assert np.allclose(matrix[upper] - matrix[lower], 0.05)

    def test_aces_strongest(self):
        matrix = preflop_matrix()
        assert np.unravel_index(np.argmax(matrix), matrix.shape) == (0, 0)


class TestHeatmapDisplay:
    def test_build_table(self, console):
        table = HeatmapDisplay(console).build_table()
        assert table.row_count == 13
        assert len(table.columns) == 14

    def test_display_terminal(self, console):
        HeatmapDisplay(console).display_terminal(title="Heat", highlight="AKs")
        output = console.file.getvalue()
        assert "Heat" in output
        assert "81" in output
        assert "Legend" in output
        assert "premium" in output


class TestDisplayHeatmap:
    @pytest.fixture
    def highlights(self, monkeypatch):
        seen = []
        build_table = HeatmapDisplay.build_table

        def spy(self, title="Preflop Strength", highlight=None):
            seen.append(highlight)
            return build_table(self, title=title, highlight=highlight)

        monkeypatch.setattr(HeatmapDisplay, "build_table", spy)
        return seen

    @pytest.mark.parametrize("hole_cards,expected", [
        ("Ah,Kh", "AKs"),
        (["Kd", "As"], "AKo"),
        ("7c,7d", "77"),
    ])
    def test_highlights_hole_cards(self, console, highlights, hole_cards, expected):
        display_heatmap(hole_cards, title="Heat", console=console)
        assert highlights == [expected]
        output = console.file.getvalue()
        assert "Heat" in output
        assert "Legend" in output

    @pytest.mark.parametrize("hole_cards", [None, "Ah", "Ah,Zz"])
    def test_no_highlight_without_two_cards(self, console, highlights, hole_cards):
        display_heatmap(hole_cards, console=console)
        assert highlights == [None]
        assert "Preflop Strength" in console.file.getvalue()
