from app.models import Recipe


def _register(client, email="newcook@example.com", password="new123"):
    return client.post(
        "/auth/register",
        json={"email": email, "password": password, "username": "newcook"},
    )


def test_signup(client):
    """Test user signup"""
    response = _register(client)
    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert "access_token" in data
    assert data["user"]["email"] == "newcook@example.com"


def test_signup_duplicate_email(client, owner):
    response = _register(client, email=owner.email)
    assert response.status_code == 201
    assert response.json()["success"] is False


def test_login(client, owner):
    """Test user login"""
    response = client.post(
        "/auth/login",
        json={"email": "owner@example.com", "password": "test123"},
    )
    assert response.status_code == 200
    data = response.json()
    assert "access_token" in data
    assert data["user"]["user_id"] == owner.user_id


def test_login_invalid_password(client, owner):
    """Test login with wrong password"""
    response = client.post(
        "/auth/login",
        json={"email": "owner@example.com", "password": "wrongpassword"},
    )
    assert response.status_code == 401


def test_token_authorizes_writes_to_own_recipe(client, db):
    """A freshly issued token acts as its user on the instruction endpoints"""
    data = _register(client).json()
    recipe = Recipe(user_id=data["user"]["user_id"], title="Toast")
    db.add(recipe)
    db.commit()

    response = client.post(
        "/api/instructions/",
        json={"recipe_id": recipe.recipe_id, "step_number": 1, "description": "Toast"},
        headers={"Authorization": f"Bearer {data['access_token']}"},
    )
    assert response.status_code == 201


def test_invalid_token_is_rejected(client, recipe):
    response = client.delete(
        f"/api/instructions/1/recipe/{recipe.recipe_id}",
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid or expired token"
