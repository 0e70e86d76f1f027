"""
Composition-root do *clinica_core* (kernel compartilhado).

Expõe o dispatcher de eventos, os serviços de segurança e os repositórios transversais
(usuários, auditoria) usados pelos demais contextos.
"""
from dependency_injector import containers, providers

container = None  # type: ignore


def setup_di_container_from_settings(settings):
    """Sempre devolve a mesma instância; seguro chamar várias vezes."""
    global container  # noqa: PLW0603
    if container is not None:
        import structlog

        structlog.get_logger(__name__).debug("Core DI container já instanciado.")
        return container

    from clinica_core.adapters.repositories.audit_log_repo_impl import AuditLogRepoImpl
    from clinica_core.adapters.repositories.user_repo_impl import UserRepoImpl
    from clinica_core.adapters.security.hash_service import HashService
    from clinica_core.adapters.security.jwt_service import JWTService
    from clinica_core.core.domain.services.event_dispatcher import EventDispatcher

    class Container(containers.DeclarativeContainer):
        # --- cross-cutting ----------------------------------------
        dispatcher  = providers.Singleton(EventDispatcher)

        # --- segurança --------------------------------------------
        hash_service = providers.Singleton(HashService)
        jwt_service  = providers.Singleton(JWTService)

        # --- repositórios -----------------------------------------
        user_repo      = providers.Singleton(UserRepoImpl)
        audit_log_repo = providers.Singleton(AuditLogRepoImpl)

    container = Container()
    return container
