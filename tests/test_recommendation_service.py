from fra_assistant.services.recommendation_service import get_village_recommendations

from conftest import make_scheme, make_village


def ids(schemes):
    return [scheme.id for scheme in schemes]


def test_khandwa_gets_curated_then_profile_schemes(khandwa, schemes):
    result = get_village_recommendations(khandwa, schemes)
    assert ids(result) == [
        "pm-kisan",
        "forest-rights-act",
        "mgnrega",
        "van-dhan-yojana",
        "eklavya-model-schools",
        "post-matric-scholarship",
    ]


def test_curated_schemes_follow_catalog_order(schemes):
    village = make_village("v1", "Sonpur", recommended_schemes=["mgnrega", "pm-kisan"])
    assert ids(get_village_recommendations(village, schemes)) == ["pm-kisan", "mgnrega"]


def test_unknown_curated_ids_are_dropped(schemes):
    village = make_village("v1", "Sonpur", recommended_schemes=["no-such-scheme", "mgnrega"])
    assert ids(get_village_recommendations(village, schemes)) == ["mgnrega"]


def test_forest_threshold_is_inclusive(schemes):
    at_threshold = make_village("v1", "Sonpur", forest_dependency=70)
    below = make_village("v2", "Rampur", forest_dependency=69)

    assert ids(get_village_recommendations(at_threshold, schemes)) == ["forest-rights-act", "van-dhan-yojana"]
    assert get_village_recommendations(below, schemes) == []


def test_literacy_threshold_is_exclusive(schemes):
    at_threshold = make_village("v1", "Sonpur", literacy_rate=60)
    below = make_village("v2", "Rampur", literacy_rate=59)

    assert get_village_recommendations(at_threshold, schemes) == []
    assert ids(get_village_recommendations(below, schemes)) == [
        "eklavya-model-schools",
        "post-matric-scholarship",
    ]


def test_poor_water_adds_water_and_jal_schemes(schemes):
    village = make_village("v1", "Sonpur", water=59)
    assert ids(get_village_recommendations(village, schemes)) == ["jal-jeevan-mission", "atal-bhujal"]

    village = make_village("v2", "Rampur", water=60)
    assert get_village_recommendations(village, schemes) == []


def test_water_rule_skips_curated_schemes(schemes):
    village = make_village("v1", "Sonpur", water=20, recommended_schemes=["atal-bhujal"])
    assert ids(get_village_recommendations(village, schemes)) == ["atal-bhujal", "jal-jeevan-mission"]


def test_farming_village_gets_two_agriculture_schemes(schemes):
    village = make_village("v1", "Sonpur", main_occupation=["agriculture"], recommended_schemes=["pm-kisan"])
    assert ids(get_village_recommendations(village, schemes)) == [
        "pm-kisan",
        "pm-fasal-bima",
        "kisan-credit-card",
    ]


def test_additional_schemes_are_capped_across_rules(schemes):
    village = make_village(
        "v1",
        "Sonpur",
        forest_dependency=80,
        literacy_rate=50,
        water=40,
        recommended_schemes=["mgnrega"],
    )
    assert ids(get_village_recommendations(village, schemes)) == [
        "mgnrega",
        "forest-rights-act",
        "van-dhan-yojana",
        "eklavya-model-schools",
    ]


def test_scheme_matching_several_rules_appears_once():
    catalog = [
        make_scheme("watershed", "forest", keywords=["water"]),
        make_scheme("jal-shakti", "water", keywords=["jal"]),
    ]
    village = make_village("v1", "Sonpur", forest_dependency=90, water=10)

    result = get_village_recommendations(village, catalog)
    assert ids(result) == ["watershed", "jal-shakti"]


def test_recommendations_are_idempotent_and_unique(khandwa, schemes):
    first = get_village_recommendations(khandwa, schemes)
    second = get_village_recommendations(khandwa, schemes)

    assert first == second
    assert len(ids(first)) == len(set(ids(first)))


def test_empty_catalog_gives_no_recommendations(khandwa):
    assert get_village_recommendations(khandwa, []) == []
