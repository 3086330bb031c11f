"""
Credential manager: registration, login and password reset.
"""
from sqlalchemy.exc import IntegrityError

from .auth import TokenIssuer, create_password_hash, verify_password_hash
from .models import User
from .schemas import Outcome, ServiceResult
from .stores import UserStore
from .utils.event_logger import log_auth_event

USER_EXISTS_MESSAGE = "User Already Exists!"
LOGIN_NOT_FOUND_MESSAGE = "User not Found!"
LOGIN_BAD_PASSWORD_MESSAGE = "Incorrect Password!"
RESET_NOT_FOUND_MESSAGE = "User not found."
RESET_BAD_PASSWORD_MESSAGE = "Old password is incorrect."


class CredentialManager:
    """
    Owns password hashing and token issuance for user accounts.

    Args:
        users: Store used for every user lookup and write
        tokens: Issuer used to sign access tokens on login
    """

    def __init__(self, users: UserStore, tokens: TokenIssuer):
        self.users = users
        self.tokens = tokens

    def user_exists(self, username: str) -> bool:
        return self.users.exists(username)

    def register(self, username: str, password: str) -> ServiceResult[int]:
        if self.user_exists(username):
            log_auth_event("register_failure", username, reason="duplicate")
            return ServiceResult[int].fail(USER_EXISTS_MESSAGE, Outcome.DUPLICATE)

        password_hash, password_salt = create_password_hash(password)
        user = User(username=username, password_hash=password_hash, password_salt=password_salt)
        try:
            user = self.users.add(user)
        except IntegrityError:
            # Lost a race against a concurrent registration of the same name
            log_auth_event("register_failure", username, reason="duplicate")
            return ServiceResult[int].fail(USER_EXISTS_MESSAGE, Outcome.DUPLICATE)

        log_auth_event("register_success", user.username, user.id)
        return ServiceResult[int].ok(user.id)

    def login(self, username: str, password: str) -> ServiceResult[str]:
        user = self.users.find_by_username(username)
        if user is None:
            log_auth_event("login_failure", username, reason="not_found")
            return ServiceResult[str].fail(LOGIN_NOT_FOUND_MESSAGE, Outcome.NOT_FOUND)

        if not verify_password_hash(password, user.password_hash, user.password_salt):
            log_auth_event("login_failure", user.username, user.id, reason="invalid_password")
            return ServiceResult[str].fail(LOGIN_BAD_PASSWORD_MESSAGE, Outcome.INVALID_PASSWORD)

        token = self.tokens.create_token(user)
        log_auth_event("login_success", user.username, user.id)
        return ServiceResult[str].ok(token)

    def reset_password(self, username: str, old_password: str, new_password: str) -> ServiceResult[int]:
        """
        Replace a user's password after checking the current one.

        The salt is regenerated together with the hash.
        """
        user = self.users.find_by_username(username)
        if user is None:
            log_auth_event("password_reset_failure", username, reason="not_found")
            return ServiceResult[int].fail(RESET_NOT_FOUND_MESSAGE, Outcome.NOT_FOUND)

        if not verify_password_hash(old_password, user.password_hash, user.password_salt):
            log_auth_event("password_reset_failure", user.username, user.id, reason="invalid_password")
            return ServiceResult[int].fail(RESET_BAD_PASSWORD_MESSAGE, Outcome.INVALID_PASSWORD)

        user.password_hash, user.password_salt = create_password_hash(new_password)
        user = self.users.update(user)

        log_auth_event("password_reset", user.username, user.id)
        return ServiceResult[int].ok(user.id)
