import pytest
from flask_jwt_extended import create_access_token

from catalog_builder import create_app
from catalog_builder.extensions import db
from catalog_builder.application.blocks.add_block import add_block
from catalog_builder.application.catalogs.create_catalog import create_catalog

USER_ID = "user-1"
OTHER_USER_ID = "user-2"


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _headers(user_id):
    token = create_access_token(identity=user_id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(app):
    return _headers(USER_ID)


@pytest.fixture
def other_headers(app):
    return _headers(OTHER_USER_ID)


@pytest.fixture
def catalog(app):
    return create_catalog(user_id=USER_ID, title="Menu", slug="menu")


@pytest.fixture
def make_blocks(catalog):
    def _make(*types):
        return [
            add_block(catalog_id=catalog.id, user_id=USER_ID, block_type=block_type)
            for block_type in types
        ]
    return _make
