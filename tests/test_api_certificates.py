"""Certificates API 통합 테스트"""
import pytest

from quizcert.schemas.certificate import AnswerKeyQuestion, CertificateDraft


async def _issue(store, user_id="user-1", with_answer_key=True):
    return await store.issue(
        CertificateDraft(
            user_id=user_id,
            user_name="ada",
            topic="Photosynthesis basics",
            channel_name="Science Channel",
            video_url="https://youtu.be/dQw4w9WgXcQ",
            score=80,
            questions=[
                AnswerKeyQuestion(text="Q1", options=["A", "B", "C", "D"], correct_answer_index=1),
                AnswerKeyQuestion(text="Q2", options=["A", "B", "C", "D"], correct_answer_index=2),
            ] if with_answer_key else None,
            user_answers=[1, 0] if with_answer_key else None,
        )
    )


@pytest.mark.asyncio
async def test_verify_is_public(client, memory_store):
    certificate = await _issue(memory_store)

    response = await client.get(f"/api/v1/certificates/{certificate.id}")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == certificate.id
    assert data["user_name"] == "ada"
    assert data["score"] == 80
    assert data["has_answer_key"] is True
    assert "questions" not in data
    assert "user_answers" not in data
    assert "user_id" not in data


@pytest.mark.asyncio
async def test_verify_unknown_id(client):
    response = await client.get("/api/v1/certificates/unknown-id-123")

    assert response.status_code == 404
    assert "unknown-id-123" in response.json()["detail"]


@pytest.mark.asyncio
async def test_verify_is_case_sensitive(client, memory_store):
    certificate = await _issue(memory_store)

    response = await client.get(f"/api/v1/certificates/{certificate.id.upper()}")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_certificates_only_own(client, memory_store, auth_headers):
    await _issue(memory_store)
    await _issue(memory_store, with_answer_key=False)
    await _issue(memory_store, user_id="user-2")

    response = await client.get("/api/v1/certificates", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert sorted(c["has_answer_key"] for c in data["certificates"]) == [False, True]


@pytest.mark.asyncio
async def test_list_certificates_requires_auth(client):
    response = await client.get("/api/v1/certificates")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_list_answer_keys_skips_legacy_certificates(client, memory_store, auth_headers):
    with_key = await _issue(memory_store)
    await _issue(memory_store, with_answer_key=False)

    response = await client.get("/api/v1/certificates/answer-keys", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 1
    assert data["certificates"][0]["id"] == with_key.id


@pytest.mark.asyncio
async def test_answer_key(client, memory_store, auth_headers):
    certificate = await _issue(memory_store)

    response = await client.get(f"/api/v1/certificates/{certificate.id}/answer-key", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["available"] is True
    assert [item["is_correct"] for item in data["items"]] == [True, False]
    assert data["items"][1]["user_answer"] == 0
    assert data["items"][1]["correct_answer_index"] == 2


@pytest.mark.asyncio
async def test_answer_key_for_legacy_certificate(client, memory_store, auth_headers):
    certificate = await _issue(memory_store, with_answer_key=False)

    response = await client.get(f"/api/v1/certificates/{certificate.id}/answer-key", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["available"] is False
    assert response.json()["items"] == []


@pytest.mark.asyncio
async def test_answer_key_owner_only(client, memory_store, other_auth_headers):
    certificate = await _issue(memory_store)

    response = await client.get(f"/api/v1/certificates/{certificate.id}/answer-key", headers=other_auth_headers)

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_me(client, auth_headers):
    response = await client.get("/api/v1/auth/me", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"user_id": "user-1", "email": "ada@example.com", "user_name": "ada"}


@pytest.mark.asyncio
async def test_invalid_token(client):
    response = await client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-token"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_root_reports_passing_score(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["passing_score"] == 80
