import pytest

from modregistry.service import health_check, index_info, not_found_response


def test_index_info_reports_version():
    info = index_info("1.2.3")
    assert info["version"] == "1.2.3"
    assert info["about"] == "Welcome traveler!"


def test_not_found_response():
    assert not_found_response() == (
        404,
        {"error": "not_found", "description": "the requested route does not exist"},
    )


def test_health_ok():
    assert health_check(True, True) == (
        200,
        {"ready": True, "reason": "Everything is OK"},
    )


@pytest.mark.parametrize("search_ready", [True, False])
def test_health_database_failure_reported_first(search_ready):
    assert health_check(False, search_ready) == (
        500,
        {"ready": False, "reason": "Database connection error"},
    )


def test_health_search_not_ready():
    assert health_check(True, False) == (
        500,
        {"ready": False, "reason": "Indexing is not finished"},
    )