from abc import ABC, abstractmethod

from clinica_core.core.domain.entities.user_entity import UserEntity


class UserRepository(ABC):
    @abstractmethod
    def find_by_id(self, user_id: str) -> UserEntity | None:
        """Recupera usuário por ID."""
        ...

    @abstractmethod
    def find_by_email(self, email: str) -> UserEntity | None:
        """Recupera usuário por e-mail (login)."""
        ...

    @abstractmethod
    def clinic_id_for(self, user_id: str) -> str | None:
        """Clínica vinculada ao usuário, se houver."""
        ...

    @abstractmethod
    def save(self, entity: UserEntity) -> UserEntity:
        """Cria ou atualiza um usuário."""
        ...
