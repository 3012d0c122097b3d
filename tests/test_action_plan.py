from action_plan import normalize_action_plan


def test_strings_and_objects():
    plan = normalize_action_plan(
        ["  Fix dates  ", "", {"task": "Add metrics", "priority": "High", "example": "+30% revenue"}, {"detail": "Trim summary"}, {"task": "  "}, 7, None],
        [],
    )
    assert plan == [
        {"priority": "Medium", "task": "Fix dates", "example": None},
        {"priority": "High", "task": "Add metrics", "example": "+30% revenue"},
        {"priority": "Medium", "task": "Trim summary", "example": None},
    ]


def test_falls_back_to_suggestions():
    suggestions = [{"detail": "Add links", "priority": "Low", "example": "github.com/me"}, {"detail": ""}, "bogus"]
    assert normalize_action_plan([], suggestions) == [{"priority": "Low", "task": "Add links", "example": "github.com/me"}]
    assert normalize_action_plan(None, suggestions) == [{"priority": "Low", "task": "Add links", "example": "github.com/me"}]


def test_candidate_wins_over_suggestions():
    plan = normalize_action_plan(["Do this"], [{"detail": "Not this"}])
    assert [p["task"] for p in plan] == ["Do this"]


def test_single_string_or_object_candidate():
    assert normalize_action_plan("Review spacing") == [{"priority": "Medium", "task": "Review spacing", "example": None}]
    assert normalize_action_plan({"task": "One step"})[0]["task"] == "One step"


def test_empty_inputs_give_empty_plan():
    assert normalize_action_plan([], []) == []
    assert normalize_action_plan(None, None) == []
