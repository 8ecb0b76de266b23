import pytest
from fastapi.testclient import TestClient

from storefront.config import Settings
from storefront.main import create_app
from storefront.models.product import Product


@pytest.fixture
def settings(tmp_path) -> Settings:
    s = Settings()
    s.DATABASE_URL = f"sqlite:///{tmp_path / 'storefront-test.db'}"
    s.SECRET_KEY = "test-secret"
    s.ALGORITHM = "HS256"
    s.ACCESS_TOKEN_EXPIRE_MINUTES = 60
    s.SEED_SAMPLE_DATA = False
    return s


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def test_client(app):
    # Entering the context runs the lifespan, which initializes the store
    with TestClient(app) as client:
        yield client


@pytest.fixture
def db_session(app, test_client):
    session = app.state.db.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_product(db_session):
    def _make(name="Widget", price=10.00, category="Gadgets", stock=5, description="", image_url=""):
        product = Product(
            name=name,
            description=description,
            price=price,
            category=category,
            image_url=image_url,
            stock=stock,
        )
        db_session.add(product)
        db_session.commit()
        db_session.refresh(product)
        return product

    return _make


@pytest.fixture
def signup(test_client):
    def _signup(email="alice@example.com", password="s3cret-pass", name="Alice"):
        response = test_client.post(
            "/api/auth/signup", json={"email": email, "password": password, "name": name}
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _signup


@pytest.fixture
def auth_headers(signup):
    def _headers(email="alice@example.com", name="Alice"):
        token = signup(email=email, name=name)["token"]
        return {"Authorization": f"Bearer {token}"}

    return _headers
