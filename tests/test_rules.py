# Area: Core Tests
"""Tests for circular rule generation."""

import pytest
from fair_rps._core.rules import generate_rules, beats


def _moves(n):
    return [f"m{i}" for i in range(n)]


class TestGenerateRulesFormula:
    """Tests that each entry follows the (i + j) % N / (i - j + N) % N formula."""

    @pytest.mark.parametrize("n", [3, 5, 7, 9, 11])
    def test_matches_formula(self, n):
        """Every win/lose list equals the direct formula evaluation."""
        moves = _moves(n)
        rules = generate_rules(moves)
        for i, move in enumerate(moves):
            expected_win = [moves[(i + j) % n] for j in range(1, n // 2 + 1)]
            expected_lose = [moves[(i - j + n) % n] for j in range(1, n // 2 + 1)]
            assert rules[move]["win"] == expected_win
            assert rules[move]["lose"] == expected_lose

    def test_three_moves(self):
        """With three moves each move beats the next one in the list."""
        rules = generate_rules(["rock", "paper", "scissors"])
        assert rules["rock"] == {"win": ["paper"], "lose": ["scissors"]}
        assert rules["paper"] == {"win": ["scissors"], "lose": ["rock"]}
        assert rules["scissors"] == {"win": ["rock"], "lose": ["paper"]}

    def test_five_moves_first_entry(self):
        """rock at index 0 beats indices 1, 2 and loses to indices 4, 3."""
        moves = ["rock", "paper", "scissors", "lizard", "spock"]
        rules = generate_rules(moves)
        assert rules["rock"]["win"] == ["paper", "scissors"]
        assert rules["rock"]["lose"] == ["spock", "lizard"]

    def test_keys_follow_move_order(self):
        """The table has one entry per move, in move order."""
        moves = ["b", "a", "c"]
        assert list(generate_rules(moves)) == moves


class TestRuleTableInvariants:
    """Tests for the partition and tournament properties."""

    @pytest.mark.parametrize("n", [3, 5, 7, 9, 11])
    def test_partition(self, n):
        """win, lose and the move itself partition the move set."""
        moves = _moves(n)
        rules = generate_rules(moves)
        half = (n - 1) // 2
        for move in moves:
            win = set(rules[move]["win"])
            lose = set(rules[move]["lose"])
            assert len(win) == half
            assert len(lose) == half
            assert win.isdisjoint(lose)
            assert move not in win and move not in lose
            assert win | lose | {move} == set(moves)

    @pytest.mark.parametrize("n", [3, 5, 7, 9, 11])
    def test_tournament(self, n):
        """For every distinct pair exactly one move beats the other."""
        moves = _moves(n)
        rules = generate_rules(moves)
        for a in moves:
            for b in moves:
                if a == b:
                    continue
                assert beats(rules, a, b) != beats(rules, b, a)

    def test_beats_is_not_reflexive(self):
        """A move never beats itself."""
        rules = generate_rules(["x", "y", "z"])
        assert not any(beats(rules, m, m) for m in rules)

    def test_case_sensitive_moves(self):
        """Moves differing only in case are distinct entries."""
        rules = generate_rules(["Rock", "rock", "ROCK"])
        assert rules["Rock"]["win"] == ["rock"]
        assert rules["rock"]["win"] == ["ROCK"]
