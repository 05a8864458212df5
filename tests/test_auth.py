import jwt

from conftest import signup, login, bearer


class TestSignup:
    def test_signup_then_login(self, client):
        response = signup(client)
        assert response.status_code == 200
        assert response.get_json() == {"message": "Signup successful"}

        response = login(client)
        assert response.status_code == 200
        body = response.get_json()
        assert body["message"] == "Login successful"
        assert isinstance(body["user_id"], int)
        assert body["token"]

    def test_missing_field(self, client):
        response = client.post("/auth/signup", json={"full_name": "A", "email": "a@x.com", "phone": "1"})
        assert response.status_code == 400
        assert response.get_json() == {"error": "All fields are required"}

    def test_empty_field(self, client):
        response = signup(client, phone="")
        assert response.status_code == 400

    def test_non_string_password(self, client):
        response = signup(client, password=1234)
        assert response.status_code == 400
        assert response.get_json() == {"error": "All fields are required"}

    def test_non_string_phone(self, client):
        response = signup(client, phone=256700000000)
        assert response.status_code == 400

    def test_no_json_body(self, client):
        response = client.post("/auth/signup", data="not json", content_type="text/plain")
        assert response.status_code == 400

    def test_duplicate_email_is_a_storage_failure(self, client):
        assert signup(client).status_code == 200
        response = signup(client, full_name="B", phone="2")
        assert response.status_code == 500
        assert "error" in response.get_json()

    def test_password_is_not_stored_in_clear(self, app, client):
        from extensions import db
        from models import User

        signup(client, password="secret-pass")
        with app.app_context():
            user = db.session.query(User).filter_by(email="a@x.com").one()
            assert user.password_hash != "secret-pass"


class TestLogin:
    def test_unknown_email(self, client):
        response = login(client, email="nobody@x.com")
        assert response.status_code == 401
        assert response.get_json() == {"error": "User not found"}

    def test_wrong_password(self, client):
        signup(client)
        response = login(client, password="wrong")
        assert response.status_code == 401
        assert response.get_json() == {"error": "Invalid password"}

    def test_missing_credentials(self, client):
        response = client.post("/auth/login", json={"email": "a@x.com"})
        assert response.status_code == 400

    def test_non_string_password(self, client):
        signup(client)
        response = login(client, password=1234)
        assert response.status_code == 400
        assert response.get_json() == {"error": "Email and password are required"}

    def test_token_carries_user_id_and_one_hour_expiry(self, client):
        signup(client)
        body = login(client).get_json()
        claims = jwt.decode(body["token"], "test-secret-key", algorithms=["HS256"])
        assert claims["id"] == body["user_id"]
        assert claims["exp"] - claims["iat"] == 3600


class TestUserInfo:
    def test_get_own_profile(self, client, user):
        user_id, headers = user
        response = client.get(f"/auth/user/{user_id}", headers=headers)
        assert response.status_code == 200
        assert response.get_json() == {"id": user_id, "full_name": "A", "email": "a@x.com", "phone": "1"}

    def test_other_users_profile_is_forbidden(self, client, user):
        user_id, headers = user
        response = client.get(f"/auth/user/{user_id + 1}", headers=headers)
        assert response.status_code == 403
        assert response.get_json() == {"error": "Forbidden"}

    def test_token_for_missing_user(self, client, make_token):
        token = make_token(42)
        response = client.get("/auth/user/42", headers=bearer(token))
        assert response.status_code == 404
        assert response.get_json() == {"error": "User not found"}
