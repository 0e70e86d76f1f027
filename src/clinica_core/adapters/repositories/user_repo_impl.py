from django.core.exceptions import ValidationError

from clinica_core.core.domain.entities.user_entity import UserEntity
from clinica_core.core.domain.repositories.user_repository import UserRepository
from plugins.django_interface.models import User as UserModel
from plugins.django_interface.models import UserClinic

UPDATE_FIELDS = ("name", "password_hash", "is_active", "role")


class UserRepoImpl(UserRepository):
    def find_by_id(self, user_id: str) -> UserEntity | None:
        try:
            m = UserModel.objects.get(id=user_id)
            return UserEntity.from_model(m)
        except (UserModel.DoesNotExist, ValidationError):
            return None

    def find_by_email(self, email: str) -> UserEntity | None:
        m = UserModel.objects.filter(email__iexact=email).first()
        return UserEntity.from_model(m) if m else None

    def clinic_id_for(self, user_id: str) -> str | None:
        link = UserClinic.objects.filter(user_id=user_id).first()
        return str(link.clinic_id) if link else None

    def save(self, entity: UserEntity) -> UserEntity:
        """Upsert pelo e-mail; o ID de um usuário existente nunca muda."""
        m = UserModel.objects.filter(email__iexact=entity.email).first()
        if m is None:
            m = UserModel.objects.create(
                id=entity.id,
                email=entity.email,
                **{f: getattr(entity, f) for f in UPDATE_FIELDS},
            )
        else:
            for f in UPDATE_FIELDS:
                setattr(m, f, getattr(entity, f))
            m.save(update_fields=[*UPDATE_FIELDS, "updated_at"])
        return UserEntity.from_model(m)
