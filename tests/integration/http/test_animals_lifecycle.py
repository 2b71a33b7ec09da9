from __future__ import annotations

from uuid import UUID

from sqlalchemy import select

from rescue.config.settings import get_settings
from rescue.infrastructure.db.orm.animal import AnimalORM


async def test_animal_lifecycle_flow(app, client, auth_headers, publisher):
    staff = auth_headers["staff"]
    create_response = await client.post(
        "/api/v1/animals/",
        json={"name": "Biscuit", "species": "Dog"},
        headers=staff,
    )
    assert create_response.status_code == 201
    created = create_response.json()
    animal_id = created["id"]
    assert created["adoption_status"] == "Not Yet Available"

    public_list = await client.get("/api/v1/animals/")
    assert public_list.status_code == 200
    assert public_list.json()["total"] == 0

    volunteer_move = await client.post(
        f"/api/v1/animals/{animal_id}/status",
        json={"adoption_status": "Medical Hold"},
        headers=auth_headers["volunteer"],
    )
    assert volunteer_move.status_code == 403
    assert volunteer_move.json()["code"] == "forbidden"

    unknown = await client.post(
        f"/api/v1/animals/{animal_id}/status",
        json={"adoption_status": "medical hold"},
        headers=staff,
    )
    assert unknown.status_code == 422
    assert unknown.json()["details"]["reason"] == "unknown_status"

    illegal = await client.post(
        f"/api/v1/animals/{animal_id}/status",
        json={"adoption_status": "Euthanized"},
        headers=staff,
    )
    assert illegal.status_code == 422
    assert illegal.json()["details"]["reason"] == "illegal_transition"

    moved = await client.post(
        f"/api/v1/animals/{animal_id}/status",
        json={"adoption_status": "Medical Hold", "version": created["version"]},
        headers=staff,
    )
    assert moved.status_code == 200
    assert moved.json()["adoption_status"] == "Medical Hold"
    assert moved.json()["version"] == created["version"] + 1
    assert [e.new_status for e in publisher.published] == ["Medical Hold"]

    stale = await client.post(
        f"/api/v1/animals/{animal_id}/status",
        json={"adoption_status": "Available", "version": created["version"]},
        headers=staff,
    )
    assert stale.status_code == 409

    hidden = await client.get(f"/api/v1/animals/{animal_id}")
    assert hidden.status_code == 404
    visible = await client.get(f"/api/v1/animals/{animal_id}", headers=auth_headers["volunteer"])
    assert visible.status_code == 200

    edit = await client.put(
        f"/api/v1/animals/{animal_id}",
        json={"version": moved.json()["version"], "story": "Recovering well"},
        headers=auth_headers["volunteer"],
    )
    assert edit.status_code == 200
    assert edit.json()["story"] == "Recovering well"
    assert edit.json()["adoption_status"] == "Medical Hold"

    released = await client.post(
        f"/api/v1/animals/{animal_id}/status",
        json={"adoption_status": "Available"},
        headers=staff,
    )
    assert released.status_code == 200
    listed = await client.get("/api/v1/animals/", params={"adoption_status": "Available,Adopted"})
    assert [item["id"] for item in listed.json()["items"]] == [animal_id]

    staff_delete = await client.delete(f"/api/v1/animals/{animal_id}", headers=staff)
    assert staff_delete.status_code == 403
    admin_delete = await client.delete(
        f"/api/v1/animals/{animal_id}", headers=auth_headers["admin"]
    )
    assert admin_delete.status_code == 204

    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        result = await session.execute(select(AnimalORM).where(AnimalORM.id == UUID(animal_id)))
        assert result.scalar_one().deleted_at is not None


async def test_mutations_require_a_token(client, seeded_users):
    response = await client.post("/api/v1/animals/", json={"name": "Nope"})
    assert response.status_code == 401
    bad = await client.post(
        "/api/v1/animals/", json={"name": "Nope"}, headers={"Authorization": "Bearer invalid"}
    )
    assert bad.status_code == 401


async def test_health_is_public(client):
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "environment": "test"}


async def test_health_reads_settings_given_to_the_app(client, monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("JWT_SECRET_KEY", raising=False)
    get_settings.cache_clear()
    try:
        response = await client.get("/api/v1/health")
    finally:
        get_settings.cache_clear()
    assert response.status_code == 200
    assert response.json()["environment"] == "test"
