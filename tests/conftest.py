# tests/conftest.py
# -*- coding: utf-8 -*-
import os
import uuid
import tempfile

import pytest

from config import TestingConfig


# =====================================================================================
# Ambiente de testes unitários (sem serviços externos)
# =====================================================================================
@pytest.fixture(autouse=True, scope="session")
def _testing_env():
    os.environ["APP_ENV"] = "testing"
    os.environ["FLASK_ENV"] = "testing"
    yield


# =====================================================================================
# App Flask com SQLite temporário e schema criado uma vez por sessão
# =====================================================================================
@pytest.fixture(scope="session")
def app():
    fd, db_path = tempfile.mkstemp(prefix="paywall_test_", suffix=".sqlite")
    os.close(fd)

    class _Cfg(TestingConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{db_path}"

    from paywall_app import create_app
    app = create_app(_Cfg)

    yield app

    # teardown
    from paywall_app.extensions import db
    with app.app_context():
        db.session.remove()
        db.engine.dispose()
    try:
        os.remove(db_path)
    except OSError:
        pass


@pytest.fixture(autouse=True)
def _clean_users(app):
    yield
    from paywall_app.extensions import db
    from paywall_app.models import User
    with app.app_context():
        db.session.rollback()
        User.query.delete()
        db.session.commit()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_session(app):
    from paywall_app.extensions import db
    with app.app_context():
        try:
            yield db.session
        finally:
            db.session.rollback()
            db.session.close()


# =====================================================================================
# Mocks de serviços externos
#   - Razorpay (app.extensions["razorpay"])
#   - smtplib.SMTP usado pelo mailer
# =====================================================================================
class FakeOrders:
    def __init__(self):
        self.calls = []
        self.error = None

    def create(self, data=None, **kwargs):
        self.calls.append({"data": data, **kwargs})
        if self.error is not None:
            raise self.error
        return {
            "id": f"order_{uuid.uuid4().hex[:14]}",
            "entity": "order",
            "amount": data["amount"],
            "currency": data["currency"],
            "receipt": data["receipt"],
            "status": "created",
        }


class FakeRazorpay:
    def __init__(self):
        self.order = FakeOrders()


@pytest.fixture
def fake_gateway(app, monkeypatch):
    fake = FakeRazorpay()
    monkeypatch.setitem(app.extensions, "razorpay", fake)
    return fake


class FakeSMTP:
    sent = []
    error = None
    instances = []

    def __init__(self, host, port, timeout=None):
        self.host, self.port, self.timeout = host, port, timeout
        self.tls = False
        self.logged_in = None
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        self.tls = True

    def login(self, user, password):
        self.logged_in = (user, password)

    def send_message(self, msg):
        if FakeSMTP.error is not None:
            raise FakeSMTP.error
        FakeSMTP.sent.append(msg)


@pytest.fixture
def fake_smtp(monkeypatch):
    import paywall_app.services.mailer as mailer
    FakeSMTP.sent = []
    FakeSMTP.instances = []
    FakeSMTP.error = None
    monkeypatch.setattr(mailer.smtplib, "SMTP", FakeSMTP)
    yield FakeSMTP
    FakeSMTP.error = None


# =====================================================================================
# Usuários e clientes logados
# =====================================================================================
@pytest.fixture
def user_factory(db_session):
    from paywall_app.models import User

    def _make(*, name="User", email=None, password="secret123", has_paid=False):
        u = User(name=name, email=email or f"user+{uuid.uuid4().hex[:6]}@test.com", has_paid=has_paid)
        u.set_password(password)
        db_session.add(u); db_session.commit()
        return u
    return _make


@pytest.fixture
def user_unpaid(user_factory):
    return user_factory()


@pytest.fixture
def user_paid(user_factory):
    return user_factory(name="Paid", has_paid=True)


@pytest.fixture
def logged_client_unpaid(client, user_unpaid):
    with client.session_transaction() as sess:
        sess["user"] = {"id": user_unpaid.id, "has_paid": False}
    return client


@pytest.fixture
def logged_client_paid(client, user_paid):
    with client.session_transaction() as sess:
        sess["user"] = {"id": user_paid.id, "has_paid": True}
    return client
