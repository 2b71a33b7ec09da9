from __future__ import annotations


async def test_read_and_edit_own_profile(client, auth_headers, seeded_users):
    me = await client.get("/api/v1/users/me", headers=auth_headers["volunteer"])
    assert me.status_code == 200
    body = me.json()
    assert body["id"] == str(seeded_users["volunteer"])
    assert body["email"] == "volunteer@rescue.test"
    assert body["role"] == "Volunteer"

    edited = await client.put(
        "/api/v1/users/me",
        json={"version": body["version"], "first_name": "Val", "primary_phone": "555-0110"},
        headers=auth_headers["volunteer"],
    )
    assert edited.status_code == 200
    assert edited.json()["first_name"] == "Val"
    assert edited.json()["primary_phone"] == "555-0110"
    assert edited.json()["role"] == "Volunteer"
    assert edited.json()["version"] == body["version"] + 1

    stale = await client.put(
        "/api/v1/users/me",
        json={"version": body["version"], "last_name": "Other"},
        headers=auth_headers["volunteer"],
    )
    assert stale.status_code == 409

    blank = await client.put(
        "/api/v1/users/me",
        json={"version": edited.json()["version"], "first_name": "   "},
        headers=auth_headers["volunteer"],
    )
    assert blank.status_code == 422


async def test_profile_requires_a_token(client):
    response = await client.get("/api/v1/users/me")
    assert response.status_code == 401


async def test_animal_types_are_public(client, auth_headers):
    staff = auth_headers["staff"]
    for payload in (
        {"name": "Biscuit", "species": "Dog", "adoption_status": "Available"},
        {"name": "Tom", "species": "Cat", "adoption_status": "Available"},
        {"name": "Clover", "species": "Rabbit"},
    ):
        created = await client.post("/api/v1/animals/", json=payload, headers=staff)
        assert created.status_code == 201

    public = await client.get("/api/v1/animals/types")
    assert public.status_code == 200
    assert public.json() == ["Cat", "Dog"]

    internal = await client.get("/api/v1/animals/types", headers=auth_headers["volunteer"])
    assert internal.json() == ["Cat", "Dog", "Rabbit"]
