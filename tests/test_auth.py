"""Login por JWT (header e cookie) e rotas públicas."""

from django.conf import settings
from django.test import TestCase
from django.urls import reverse

from clinica_core.adapters.security.jwt_service import JWTService
from tests.helpers.factories import DEFAULT_PASSWORD, make_clinic, make_user


class AuthTokenTests(TestCase):
    def test_clinic_login_returns_clinic_token(self) -> None:
        clinic = make_clinic()
        user = make_user("clinic", clinic, email="clinic@example.com")

        resp = self.client.post(reverse("login"), {"email": user.email, "password": DEFAULT_PASSWORD})

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["role"], "clinic")
        self.assertEqual(resp.json()["clinic_id"], str(clinic.id))
        cookie = resp.cookies.get(settings.AUTH_COOKIE_NAME)
        self.assertIsNotNone(cookie, "JWT cookie não encontrado")
        self.assertTrue(cookie["httponly"])
        payload = JWTService.decode_token(cookie.value)
        self.assertEqual(payload["sub"], str(user.id))
        self.assertEqual(payload["role"], "clinic")
        self.assertEqual(payload.get("clinic_id"), str(clinic.id))

    def test_admin_token_has_no_clinic(self) -> None:
        admin = make_user("admin", email="admin@example.com")

        resp = self.client.post(reverse("login"), {"email": "ADMIN@example.com", "password": DEFAULT_PASSWORD})

        self.assertEqual(resp.status_code, 200)
        payload = JWTService.decode_token(resp.json()["token"])
        self.assertEqual(payload["sub"], str(admin.id))
        self.assertNotIn("clinic_id", payload)

    def test_wrong_password(self) -> None:
        user = make_user("clinic", make_clinic())
        resp = self.client.post(reverse("login"), {"email": user.email, "password": "errada123"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json(), {"error": "E-mail ou senha inválidos."})

    def test_inactive_user_cannot_login(self) -> None:
        user = make_user("clinic", make_clinic())
        user.is_active = False
        user.save()
        resp = self.client.post(reverse("login"), {"email": user.email, "password": DEFAULT_PASSWORD})
        self.assertEqual(resp.status_code, 401)

    def test_missing_credentials(self) -> None:
        resp = self.client.post(reverse("login"), {"email": "x@example.com"})
        self.assertEqual(resp.status_code, 400)

    def test_cookie_authenticates_api_calls(self) -> None:
        clinic = make_clinic()
        user = make_user("clinic", clinic)
        self.client.post(reverse("login"), {"email": user.email, "password": DEFAULT_PASSWORD})

        resp = self.client.get(reverse("ortho-cases"))
        self.assertEqual(resp.status_code, 200)

        logout = self.client.post(reverse("logout"))
        self.assertEqual(logout.status_code, 200)
        self.assertEqual(logout.cookies[settings.AUTH_COOKIE_NAME].value, "")

    def test_invalid_token_is_rejected(self) -> None:
        resp = self.client.get(reverse("ortho-cases"), HTTP_AUTHORIZATION="Bearer nao.e.jwt")
        self.assertEqual(resp.status_code, 401)

    def test_clinic_user_without_link_is_forbidden(self) -> None:
        user = make_user("clinic")
        self.client.post(reverse("login"), {"email": user.email, "password": DEFAULT_PASSWORD})
        resp = self.client.get(reverse("ortho-cases"))
        self.assertEqual(resp.status_code, 403)

    def test_healthcheck_is_public(self) -> None:
        resp = self.client.get(reverse("healthz"))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"status": "ok"})
        self.assertIn("X-Request-ID", resp.headers)

    def test_request_id_is_echoed(self) -> None:
        resp = self.client.get(reverse("healthz"), HTTP_X_REQUEST_ID="abc123")
        self.assertEqual(resp.headers["X-Request-ID"], "abc123")
