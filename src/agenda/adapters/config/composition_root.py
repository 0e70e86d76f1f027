from dependency_injector import containers, providers

container = None

def setup_di_container_from_settings(settings):
    """Inicializa o DI container da agenda após o Django carregar os settings."""
    global container  # noqa: PLW0603
    if container is not None:
        import structlog
        structlog.get_logger().debug("DI container da agenda já inicializado.")
        return container

    from django.utils import timezone

    from agenda.adapters.repositories.booking_repo_impl import BookingRepoImpl
    from agenda.adapters.repositories.working_hours_repo_impl import WorkingHoursRepoImpl
    from agenda.core.application.handlers.available_slots_handler import GetAvailableSlotsHandler
    from agenda.core.application.queries.available_slots_queries import GetAvailableSlotsQuery
    from clinica_core.core.application.cqrs import QueryBusImpl

    class Container(containers.DeclarativeContainer):
        config = providers.Configuration()

        # CQRS
        query_bus = providers.Singleton(QueryBusImpl)

        # Repositórios (Ports → Adapters)
        working_hours_repo = providers.Singleton(
            WorkingHoursRepoImpl,
            default_interval_minutes=config.default_interval_minutes,
        )
        booking_repo = providers.Singleton(BookingRepoImpl)

        # Handlers
        available_slots_handler = providers.Factory(
            GetAvailableSlotsHandler,
            working_hours_repo=working_hours_repo,
            booking_repo=booking_repo,
            clock=providers.Object(timezone.localtime),
        )

        def init(self):
            qry_bus = self.query_bus()
            qry_bus.register(GetAvailableSlotsQuery, self.available_slots_handler())

    container = Container()
    container.config.default_interval_minutes.from_value(settings.AGENDA_DEFAULT_INTERVAL_MINUTES)
    Container.init(container)
    return container
