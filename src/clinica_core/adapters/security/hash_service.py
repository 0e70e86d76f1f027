import bcrypt

ENCODING = "utf-8"


class HashService:
    """Hash de senha com bcrypt; o salt fica embutido no próprio hash."""

    @staticmethod
    def hash_password(password: str) -> str:
        return bcrypt.hashpw(password.encode(ENCODING), bcrypt.gensalt()).decode(ENCODING)

    @staticmethod
    def verify(password: str, hashed: str | None) -> bool:
        if not hashed:
            return False
        try:
            return bcrypt.checkpw(password.encode(ENCODING), hashed.encode(ENCODING))
        except ValueError:
            # hash gravado fora do formato bcrypt
            return False
