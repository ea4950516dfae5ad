import pytest

from staffsphere import create_app
from staffsphere.config import TestingConfig
from staffsphere.enums.role import Role
from staffsphere.extensions import db
from staffsphere.models.employee import Employee
from staffsphere.models.user import User

TEST_PASSWORD = "123456"


def create_user(name: str, email: str, role: Role, password: str = TEST_PASSWORD) -> User:
    user = User.create(name, email, password, role.value)
    db.session.add(user)
    db.session.commit()
    return user


def bearer_headers(app, user: User) -> dict:
    token = app.token_service.issue(user.id, user.role.value)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def app():
    app = create_app(TestingConfig)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_session(app):
    # The app fixture already holds an app context
    yield db.session


@pytest.fixture
def hr_user(app):
    return create_user("HR Manager", "hr@company.com", Role.HR)


@pytest.fixture
def employee_user(app):
    return create_user("John Doe", "john@company.com", Role.EMPLOYEE)


@pytest.fixture
def admin_user(app):
    return create_user("Site Admin", "admin@company.com", Role.ADMIN)


@pytest.fixture
def hr_headers(app, hr_user):
    return bearer_headers(app, hr_user)


@pytest.fixture
def employee_headers(app, employee_user):
    return bearer_headers(app, employee_user)


@pytest.fixture
def admin_headers(app, admin_user):
    return bearer_headers(app, admin_user)


@pytest.fixture
def employee(db_session):
    employee = Employee(name="Jane Smith", email="jane@company.com", department="Engineering", salary=50000)
    db_session.add(employee)
    db_session.commit()
    return employee


@pytest.fixture
def other_employee(db_session):
    employee = Employee(name="Ravi Kumar", email="ravi@company.com", department="Sales", salary=42000)
    db_session.add(employee)
    db_session.commit()
    return employee


@pytest.fixture
def make_user(app):
    return create_user


@pytest.fixture
def make_headers(app):
    return lambda user: bearer_headers(app, user)
