"""Password hashing utilities."""

import bcrypt

from profile_api.constants.validation import MAX_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH


class PasswordService:
    """Service for password hashing and verification."""

    BCRYPT_ROUNDS = 12

    def __init__(self, rounds: int | None = None) -> None:
        """Initialize the service.

        Args:
            rounds: bcrypt cost factor (defaults to BCRYPT_ROUNDS)
        """
        self.rounds = rounds or self.BCRYPT_ROUNDS

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Hashed password string
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify_password(self, password: str, hashed: str) -> bool:
        """Verify a password against a hash.

        Args:
            password: Plain text password
            hashed: Hashed password

        Returns:
            True if password matches
        """
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except (ValueError, UnicodeDecodeError, UnicodeEncodeError):
            # Invalid hash format or encoding issues
            return False

    def validate_password_length(self, password: str) -> list[str]:
        """Check a provisioning password against length limits.

        Returns:
            List of problems, empty when the password is acceptable
        """
        errors = []
        if len(password) < MIN_PASSWORD_LENGTH:
            errors.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        if len(password) > MAX_PASSWORD_LENGTH:
            errors.append(f"Password must be at most {MAX_PASSWORD_LENGTH} characters")
        return errors


_password_service: PasswordService | None = None


def get_password_service() -> PasswordService:
    """Get the process-wide password service."""
    global _password_service
    if _password_service is None:
        _password_service = PasswordService()
    return _password_service
