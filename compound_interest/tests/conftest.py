import pytest
from flask.testing import FlaskClient

from compound_interest.app import create_app
from compound_interest.config import Settings


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(state_db_path=str(tmp_path / "state.db"), log_format="text")


@pytest.fixture()
def client(settings) -> FlaskClient:
    app = create_app(settings)
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
