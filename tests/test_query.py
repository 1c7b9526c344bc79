"""Tests for canonical query construction."""

from wegig.services.query import build_query, compact_params


def test_unset_and_empty_values_are_omitted() -> None:
    query = build_query({"keyword": "", "city": None, "size": 20})

    assert query == "size=20"
    assert "keyword" not in query
    assert "city" not in query


def test_parameter_order_does_not_change_query() -> None:
    first = build_query({"size": 8, "keyword": "brixton", "countryCode": "GB"})
    second = build_query({"countryCode": "GB", "keyword": "brixton", "size": 8})

    assert first == second


def test_values_are_url_encoded() -> None:
    assert build_query({"sort": "date,asc", "keyword": "The National"}) == (
        "keyword=The+National&sort=date%2Casc"
    )


def test_zero_is_kept() -> None:
    assert compact_params({"size": 0}) == {"size": "0"}
