from datetime import datetime, timedelta, timezone

import jwt
from django.conf import settings

REQUIRED_CLAIMS = ["sub", "exp"]


class JWTService:
    """Emissão e validação dos tokens de acesso (segredo e algoritmo vêm dos settings)."""

    @staticmethod
    def _signing() -> tuple[str, str]:
        return settings.JWT_SECRET, settings.JWT_ALGORITHM

    @classmethod
    def create_token(
        cls,
        subject: str,
        expires_in: int,
        role: str,
        clinic_id: str | None = None,
    ) -> str:
        issued_at = datetime.now(timezone.utc)
        claims = {
            "sub": str(subject),
            "role": role,
            "iat": issued_at,
            "exp": issued_at + timedelta(seconds=int(expires_in)),
        }
        # só usuários de clínica carregam o tenant no token
        if clinic_id is not None:
            claims["clinic_id"] = clinic_id

        key, algorithm = cls._signing()
        return jwt.encode(claims, key, algorithm=algorithm)

    @classmethod
    def decode_token(cls, token: str) -> dict:
        """Payload validado; token expirado, malformado ou sem `sub` levanta jwt.PyJWTError."""
        key, algorithm = cls._signing()
        return jwt.decode(token, key, algorithms=[algorithm], options={"require": REQUIRED_CLAIMS})
