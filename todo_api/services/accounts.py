import logging

from todo_api.errors import ValidationError, Conflict, Unauthenticated
from todo_api.models.user import User, Role
from todo_api.utils.auth import hash_password, verify_password

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def create_user(store, username, password, role=Role.USER):
    """Validate credentials and insert a new user with the given role."""
    if not username or not username.strip() or not password or not password.strip():
        raise ValidationError("Username and password are required")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    username = username.strip()
    if store.find_user_by_username(username):
        raise Conflict("Username already exists")

    user = store.insert_user(User(username=username, password_hash=hash_password(password), role=role))
    logger.info("registered user %s (id=%s, role=%s)", user.username, user.id, user.role.value)
    return user


def register(store, username, password):
    # self-service registration never grants more than the USER role
    return create_user(store, username, password, Role.USER)


def login(store, tokens, username, password) -> str:
    """Return a fresh bearer token for valid credentials.

    Unknown usernames and wrong passwords produce the same failure.
    """
    if not username or not password:
        raise ValidationError("Username and password are required")

    user = store.find_user_by_username(username.strip())
    if user is None or not verify_password(password, user.password_hash):
        logger.warning("failed login for username %r", username)
        raise Unauthenticated("Invalid username or password")

    return tokens.issue(user)
