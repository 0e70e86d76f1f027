from datetime import timedelta

import structlog
from django.conf import settings
from django.utils import timezone
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from clinica_core.adapters.config.composition_root import container as core_container
from clinica_core.core.domain.entities.user_entity import UserEntity

logger = structlog.get_logger(__name__)

INVALID_CREDENTIALS = "E-mail ou senha inválidos."


def _check_credentials(email: str, password: str) -> UserEntity | None:
    user = core_container.user_repo().find_by_email(email)
    if user is None or not user.is_active:
        return None
    if not core_container.hash_service().verify(password, user.password_hash):
        return None
    return user


def _set_auth_cookie(resp: Response, token: str) -> None:
    resp.set_cookie(
        settings.AUTH_COOKIE_NAME,
        token,
        expires=timezone.now() + timedelta(seconds=settings.JWT_EXPIRES_IN),
        secure=settings.AUTH_COOKIE_SECURE,
        httponly=settings.AUTH_COOKIE_HTTPONLY,
        samesite=settings.AUTH_COOKIE_SAMESITE,
    )


class LoginView(APIView):
    """
    POST /api/login/  {"email", "password"}

    Devolve o JWT no corpo e também no cookie `AUTH_COOKIE_NAME`.
    Usuário 'clinic' recebe o `clinic_id` do vínculo como claim.
    """
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def post(self, request):
        email = (request.data.get("email") or "").strip()
        password = request.data.get("password") or ""
        if not email or not password:
            return Response({"error": "Credenciais incompletas."}, status=status.HTTP_400_BAD_REQUEST)

        user = _check_credentials(email, password)
        if user is None:
            logger.info("auth.login_failed", email=email)
            return Response({"error": INVALID_CREDENTIALS}, status=status.HTTP_401_UNAUTHORIZED)

        user_id = str(user.id)
        clinic_id = core_container.user_repo().clinic_id_for(user_id) if user.role == "clinic" else None
        token = core_container.jwt_service().create_token(
            subject=user_id,
            expires_in=settings.JWT_EXPIRES_IN,
            role=user.role,
            clinic_id=clinic_id,
        )
        logger.info("auth.login", user_id=user_id, role=user.role, clinic_id=clinic_id)

        resp = Response(
            {"token": token, "role": user.role, "clinic_id": clinic_id},
            status=status.HTTP_200_OK,
        )
        _set_auth_cookie(resp, token)
        return resp


class LogoutView(APIView):
    """POST /api/logout/ → remove o cookie de autenticação."""

    def post(self, request):
        resp = Response({"message": "Logout realizado."}, status=status.HTTP_200_OK)
        resp.delete_cookie(settings.AUTH_COOKIE_NAME)
        return resp


class HealthCheckView(APIView):
    permission_classes = []
    authentication_classes = []

    def get(self, request):
        return Response({"status": "ok"})
