from blockfall.game import ScoringRules


def test_score_uses_level_multiplier():
    rules = ScoringRules()
    assert rules.score_for_lines(1, 1) == 100
    assert rules.score_for_lines(2, 3) == 600
    assert rules.score_for_lines(0, 5) == 0


def test_level_every_ten_lines():
    rules = ScoringRules()
    assert rules.level_for_lines(0) == 1
    assert rules.level_for_lines(9) == 1
    assert rules.level_for_lines(10) == 2
    assert rules.level_for_lines(25) == 3


def test_drop_interval_is_linear_with_floor():
    rules = ScoringRules()
    assert rules.drop_interval_for_level(1) == 1000
    assert rules.drop_interval_for_level(2) == 900
    assert rules.drop_interval_for_level(10) == 100
    assert rules.drop_interval_for_level(15) == 100


def test_custom_curve():
    rules = ScoringRules(points_per_line=40, lines_per_level=5, min_drop_interval_ms=250)
    assert rules.score_for_lines(3, 2) == 240
    assert rules.level_for_lines(5) == 2
    assert rules.drop_interval_for_level(9) == 250
