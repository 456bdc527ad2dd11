"""Tests for word-filter management."""

from app.models import Post, WordFilter


def test_default_filters_are_seeded(db):
    filters = {f.word: f.severity for f in db.query(WordFilter).all()}
    assert filters["hate"] == "high"
    assert filters["death"] == "medium"
    assert filters["mad"] == "low"
    assert len(filters) == 10


def test_list_filters_ordered_by_severity_then_word(client, auth_headers):
    response = client.get("/api/admin/filters", headers=auth_headers)

    assert response.status_code == 200
    words = [(f["severity"], f["word"]) for f in response.json()["filters"]]
    assert words == [
        ("high", "damn"),
        ("high", "die"),
        ("high", "hate"),
        ("high", "hell"),
        ("high", "kill"),
        ("high", "suicide"),
        ("medium", "death"),
        ("low", "angry"),
        ("low", "mad"),
        ("low", "upset"),
    ]


def test_add_filter_normalizes_word(client, auth_headers, db):
    response = client.post(
        "/api/admin/filters",
        json={"word": "  Gloomy ", "severity": "low"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    filter_id = response.json()["filter_id"]
    assert db.get(WordFilter, filter_id).word == "gloomy"


def test_duplicate_filter_is_a_conflict(client, auth_headers, db):
    response = client.post(
        "/api/admin/filters",
        json={"word": "  HATE ", "severity": "low"},
        headers=auth_headers,
    )

    assert response.status_code == 409
    assert "already exists" in response.json()["detail"]
    rows = db.query(WordFilter).filter(WordFilter.word == "hate").all()
    assert len(rows) == 1
    assert rows[0].severity == "high"


def test_add_filter_validation(client, auth_headers):
    bad_severity = client.post(
        "/api/admin/filters",
        json={"word": "gloomy", "severity": "extreme"},
        headers=auth_headers,
    )
    empty_word = client.post(
        "/api/admin/filters",
        json={"word": "   ", "severity": "low"},
        headers=auth_headers,
    )

    assert bad_severity.status_code == 422
    assert empty_word.status_code == 422


def test_add_filter_rejects_comma_in_word(client, auth_headers, db):
    response = client.post(
        "/api/admin/filters",
        json={"word": "sad,bad", "severity": "low"},
        headers=auth_headers,
    )

    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "Validation error"
    assert "comma" in body["details"][0]["msg"]
    assert db.query(WordFilter).filter(WordFilter.word == "sad,bad").count() == 0


def test_delete_filter(client, auth_headers, db):
    word_filter = db.query(WordFilter).filter(WordFilter.word == "mad").one()

    response = client.delete(
        f"/api/admin/filters/{word_filter.id}", headers=auth_headers
    )

    assert response.status_code == 200
    db.expire_all()
    assert db.query(WordFilter).filter(WordFilter.word == "mad").count() == 0


def test_delete_missing_filter(client, auth_headers):
    response = client.delete("/api/admin/filters/9999", headers=auth_headers)
    assert response.status_code == 404


def test_severity_change_by_delete_and_recreate(client, auth_headers, db):
    word_filter = db.query(WordFilter).filter(WordFilter.word == "mad").one()
    client.delete(f"/api/admin/filters/{word_filter.id}", headers=auth_headers)
    client.post(
        "/api/admin/filters",
        json={"word": "mad", "severity": "high"},
        headers=auth_headers,
    )

    response = client.post("/api/posts", json={"content": "I am a bit mad today"})

    assert response.json()["status"] == "rejected"


def test_new_filter_applies_to_next_submission(client, auth_headers, db):
    client.post(
        "/api/admin/filters",
        json={"word": "gloomy", "severity": "medium"},
        headers=auth_headers,
    )

    response = client.post("/api/posts", json={"content": "A gloomy afternoon"})

    assert response.status_code == 201
    post = db.query(Post).one()
    assert post.approval_status == "pending"
    assert post.flagged_words == "gloomy"
