from __future__ import annotations

import uuid
from typing import Any

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from clinica_core.adapters.config.composition_root import setup_di_container_from_settings
from clinica_core.core.domain.entities.user_entity import UserEntity


class Command(BaseCommand):
    """
    Cria ou atualiza o usuário administrador.
    Idempotente: executar de novo apenas atualiza nome/senha.
    """
    help = "Cria ou atualiza o usuário administrador (role=admin)."

    def add_arguments(self, parser) -> None:
        parser.add_argument("--email", type=str, required=True, help="E-mail de login do admin.")
        parser.add_argument("--password", type=str, required=True, help="Senha do admin.")
        parser.add_argument("--name", type=str, default="Administrador", help="Nome exibido.")

    def handle(self, *args: Any, **opt: Any) -> None:
        if len(opt["password"]) < 8:
            raise CommandError("A senha deve ter ao menos 8 caracteres.")

        container = setup_di_container_from_settings(settings)
        user_repo = container.user_repo()
        existing = user_repo.find_by_email(opt["email"])

        saved = user_repo.save(
            UserEntity(
                id=existing.id if existing else uuid.uuid4(),
                email=opt["email"],
                name=opt["name"],
                password_hash=container.hash_service().hash_password(opt["password"]),
                is_active=True,
                role="admin",
            )
        )
        verb = "atualizado" if existing else "criado"
        self.stdout.write(self.style.SUCCESS(f"✅ Admin '{saved.email}' {verb}. ID: {saved.id}"))
