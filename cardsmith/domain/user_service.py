# cardsmith/domain/user_service.py
import hashlib
import hmac
import secrets
from typing import Optional

from cardsmith.config.settings import settings
from cardsmith.domain.errors import AuthenticationError, ConflictError, InvalidRequestError
from cardsmith.infrastructure.database.models import User
from cardsmith.infrastructure.database.repository import Repository

HASH_ALGORITHM = "pbkdf2_sha256"


def hash_password(password: str, iterations: Optional[int] = None, salt: Optional[str] = None) -> str:
    iterations = iterations or settings.PASSWORD_HASH_ITERATIONS
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations)
    return f"{HASH_ALGORITHM}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    try:
        algorithm, iterations, salt, expected = encoded.split("$", 3)
        iterations = int(iterations)
    except ValueError:
        return False
    if algorithm != HASH_ALGORITHM:
        return False
    candidate = hash_password(password, iterations=iterations, salt=salt)
    return hmac.compare_digest(candidate.rsplit("$", 1)[1], expected)


def normalize_email(email: Optional[str]) -> str:
    email = (email or "").strip().lower()
    if not email or "@" not in email:
        raise InvalidRequestError("A valid email is required")
    return email


class UserService:
    def __init__(self, repo: Repository):
        self.repo = repo

    async def register(self, email: Optional[str], password: Optional[str]) -> User:
        email = normalize_email(email)
        if not password:
            raise InvalidRequestError("Email and password are required")
        if len(password) < settings.MIN_PASSWORD_LENGTH:
            raise InvalidRequestError(
                f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters"
            )
        if await self.repo.get_user_by_email(email) is not None:
            raise ConflictError("User with this email already exists")

        user = User(email=email, password_hash=hash_password(password))
        await self.repo.save(user)
        return user

    async def authenticate(self, email: Optional[str], password: Optional[str]) -> User:
        user = await self.repo.get_user_by_email(email.strip()) if email else None
        # Same message for unknown email and wrong password.
        if user is None or not verify_password(password or "", user.password_hash):
            raise AuthenticationError("Invalid credentials")
        return user

    async def update_email(self, user: User, email: Optional[str]) -> User:
        email = normalize_email(email)
        if email != user.email:
            existing = await self.repo.get_user_by_email(email)
            if existing is not None and existing.id != user.id:
                raise ConflictError("Email already in use")
            user.email = email
            await self.repo.save(user)
        return user
