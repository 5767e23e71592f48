from models.models import Location
from utils.match_utils import best_match, score_location, tokenize


def test_tokenize_drops_short_words():
    assert tokenize("  Is it a Quiet place TO study  ") == ["quiet", "place", "study"]
    assert tokenize("") == []


def test_quiet_study_query_prefers_library(locations):
    keywords = tokenize("quiet place to study")
    library = next(l for l in locations if l.name == "Central Library")
    food = next(l for l in locations if l.name == "Food Court")
    assert score_location(library, keywords) > score_location(food, keywords)

    result = best_match(locations, "quiet place to study")
    assert result.location.name == "Central Library"
    assert result.score > 0


def test_score_weights():
    location = Location(
        name="Snack Shack",
        lat=0.0,
        lng=0.0,
        type="food",
        description="Snack counter",
        tags=["snack"],
    )
    # tag +3, name +2, description +1
    assert score_location(location, ["snack"]) == 6


def test_tag_contained_in_keyword_counts():
    location = Location(
        name="Food Court", lat=0.0, lng=0.0, type="food", description="", tags=["snack"]
    )
    assert score_location(location, ["snack?"]) == 3


def test_ties_resolve_to_registry_order():
    first = Location(name="First", lat=0.0, lng=0.0, type="x", description="", tags=["park"])
    second = Location(name="Second", lat=0.0, lng=0.0, type="x", description="", tags=["park"])
    assert best_match([first, second], "park").location.name == "First"
    assert best_match([second, first], "park").location.name == "Second"


def test_no_match_returns_empty_result(locations):
    result = best_match(locations, "xyzzy plugh")
    assert result.location is None
    assert result.score == 0


def test_only_short_words_match_nothing(locations):
    assert best_match(locations, "a b to").location is None


def test_empty_registry():
    assert best_match([], "quiet study").location is None
