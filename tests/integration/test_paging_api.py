"""
Integration tests for the /api/paging endpoint.
"""

import pytest


class TestPagingApi:
    """Test the paging preview endpoint through the Flask test client."""

    def test_first_page(self, client):
        response = client.get("/api/paging?total=95")
        assert response.status_code == 200

        paging = response.get_json()["paging"]
        assert paging["current_page"] == 1
        assert paging["total_pages"] == 10
        assert paging["range_text"] == "1–10 of 95"
        assert paging["previous_url"] is None
        assert paging["next_url"] == "/api/paging?total=95&page=2"

    def test_requested_page(self, client):
        paging = client.get("/api/paging?total=95&page=2").get_json()["paging"]

        assert paging["current_page"] == 2
        assert paging["range_text"] == "11–20 of 95"
        assert paging["results_in_context"] == "11–20 of 95 items"

    def test_page_clamped(self, client):
        paging = client.get("/api/paging?total=95&page=40").get_json()["paging"]
        assert paging["current_page"] == 10

    def test_capped_results(self, client):
        paging = client.get("/api/paging?total=95&max=50&page=9").get_json()["paging"]

        assert paging["current_page"] == 5
        assert paging["available_pages"] == 5
        assert paging["next_url"] is None

    def test_approximate_total(self, client):
        paging = client.get("/api/paging?total=95&approximate=true").get_json()["paging"]
        assert paging["range_text"] == "1–10 of about 95"

    def test_page_size_parameter(self, client):
        paging = client.get("/api/paging?total=95&pagesize=50").get_json()["paging"]

        assert paging["page_size"] == 50
        assert paging["total_pages"] == 2

    def test_post_starts_at_first_page(self, client):
        paging = client.post("/api/paging?total=95&page=4").get_json()["paging"]
        assert paging["current_page"] == 1

    def test_no_results(self, client):
        paging = client.get("/api/paging?total=0").get_json()["paging"]

        assert paging["visible"] is False
        assert paging["pages"] == []
        assert paging["results_in_context"] == "0 items"

    def test_missing_total(self, client):
        response = client.get("/api/paging")

        assert response.status_code == 400
        assert "error" in response.get_json()

    def test_negative_total(self, client):
        response = client.get("/api/paging?total=-5")

        assert response.status_code == 400
        assert "total_results" in response.get_json()["error"]

    def test_negative_maximum(self, client):
        response = client.get("/api/paging?total=5&max=-1")
        assert response.status_code == 400
