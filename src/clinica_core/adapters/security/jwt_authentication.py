import jwt
from django.conf import settings
from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication

from clinica_core.adapters.repositories.user_repo_impl import UserRepoImpl
from clinica_core.adapters.security.jwt_service import JWTService


class SimpleUser:
    """
    Usuário mínimo compatível com DRF: id, role, clinic_id e is_authenticated.
    """
    def __init__(self, id: str, role: str | None = None, clinic_id: str | None = None):
        self.id = id
        self.role = role
        self.clinic_id = clinic_id
        self.is_authenticated = True

    def __str__(self):
        return f"<SimpleUser id={self.id} role={self.role} clinic_id={self.clinic_id}>"


class _BaseJWTAuthentication(BaseAuthentication):
    """
    Valida o token com o JWTService e resolve o usuário pelo UserRepoImpl,
    em vez do modelo de usuário padrão do Django.
    """

    def get_token(self, request) -> str | None:
        raise NotImplementedError

    def authenticate(self, request):
        token = self.get_token(request)
        if not token:
            return None

        try:
            payload = JWTService.decode_token(token)
        except jwt.PyJWTError as e:
            raise exceptions.AuthenticationFailed(f"Token inválido: {e}")  # noqa: B904

        user_id = payload.get("sub")
        if not user_id:
            raise exceptions.AuthenticationFailed("Token não contém o claim 'sub'.")

        domain_user = UserRepoImpl().find_by_id(user_id)
        if not domain_user or not domain_user.is_active:
            raise exceptions.AuthenticationFailed("Usuário não encontrado.")

        simple_user = SimpleUser(
            id=str(domain_user.id),
            role=payload.get("role", domain_user.role),
            clinic_id=payload.get("clinic_id"),
        )
        return (simple_user, token)


class JWTAuthentication(_BaseJWTAuthentication):
    """Lê o header `Authorization: Bearer <token>`."""

    def get_token(self, request) -> str | None:
        parts = request.headers.get("Authorization", "").split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            return None
        return parts[1]

    def authenticate_header(self, request):
        return "Bearer"


class CookieJWTAuthentication(_BaseJWTAuthentication):
    """Lê o token do cookie `settings.AUTH_COOKIE_NAME`."""

    def get_token(self, request) -> str | None:
        return request.COOKIES.get(settings.AUTH_COOKIE_NAME)
