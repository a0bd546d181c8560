from app.schemas.booking import BookingCreateRequest

PASSWORD = "password123"


def test_health(client):
    assert client.get("/health").json() == {"status": "OK", "service": "carshare-backend"}


def test_register_starts_unverified(client):
    response = client.post("/auth/register", json={
        "username": "newbie",
        "password": "secret99",
        "email": "newbie@example.com",
    })

    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "newbie"
    assert body["verificationStatus"] == "unverified"
    assert body["isVerified"] is False
    assert "password" not in body
    assert "passwordHash" not in body


def test_register_duplicate_username(client, makeUser):
    makeUser("taken")
    response = client.post("/auth/register", json={"username": "taken", "password": "secret99"})
    assert response.status_code == 409
    assert response.json()["code"] == "CONFLICT"
    assert response.json()["field"] == "username"


def test_register_rejects_short_password(client):
    response = client.post("/auth/register", json={"username": "shorty", "password": "123"})
    assert response.status_code == 422


def test_login_and_use_token(client, makeUser):
    user = makeUser("driver")

    response = client.post("/auth/login", json={"username": "driver", "password": PASSWORD})
    assert response.status_code == 200
    token = response.json()

    assert token["userId"] == user.id
    assert token["tokenType"] == "bearer"

    me = client.get("/users/me", headers={"Authorization": f"Bearer {token['accessToken']}"})
    assert me.status_code == 200
    assert me.json()["username"] == "driver"


def test_login_wrong_password(client, makeUser):
    makeUser("driver")
    response = client.post("/auth/login", json={"username": "driver", "password": "nope-nope"})
    assert response.status_code == 401
    assert response.json()["code"] == "NOT_AUTHENTICATED"


def test_login_unknown_user(client):
    response = client.post("/auth/login", json={"username": "ghost", "password": PASSWORD})
    assert response.status_code == 401


def test_me_requires_token(client):
    response = client.get("/users/me")
    assert response.status_code == 401
    assert response.json()["code"] == "NOT_AUTHENTICATED"


def test_token_for_deleted_user_is_rejected(client, db, makeUser, authHeaders):
    user = makeUser()
    headers = authHeaders(user)
    db.delete(user)
    db.commit()

    assert client.get("/users/me", headers=headers).status_code == 401


def test_update_phone(client, makeUser, authHeaders):
    user = makeUser()
    response = client.patch("/users/phone", json={"phoneNumber": " +237600000000 "}, headers=authHeaders(user))

    assert response.status_code == 200
    assert response.json()["phoneNumber"] == "+237600000000"


def test_update_profile_picture(client, makeUser, authHeaders):
    user = makeUser()
    response = client.patch(
        "/users/profile-picture",
        json={"profilePicture": "https://files.example.com/me.png"},
        headers=authHeaders(user),
    )

    assert response.status_code == 200
    assert response.json()["profilePicture"] == "https://files.example.com/me.png"


def test_app_starts_through_lifespan(client):
    with client:
        assert client.get("/health").status_code == 200


def test_request_examples_are_published():
    example = BookingCreateRequest.model_json_schema()["example"]
    assert example["paymentMethod"] == "airtel"
