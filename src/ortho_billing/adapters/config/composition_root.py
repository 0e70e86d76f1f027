"""
Composition-root do *ortho_billing*.

• Depende do container do clinica_core (dispatcher, auditoria).
• Registra comandos/queries de casos ortodônticos e contas a receber
  nos buses próprios do contexto.
"""
from dependency_injector import containers, providers

container = None  # type: ignore


def setup_di_container_from_settings(settings):
    global container  # noqa: PLW0603
    if container is not None:
        import structlog

        structlog.get_logger(__name__).debug("OrthoBilling DI container já instanciado.")
        return container

    from django.utils import timezone

    from clinica_core.adapters.config.composition_root import (
        setup_di_container_from_settings as _setup_core_di,
    )
    from clinica_core.core.application.cqrs import CommandBusImpl, QueryBusImpl
    from ortho_billing.adapters.observability.metrics_subscribers import (
        register_metrics_subscribers,
    )
    from ortho_billing.adapters.repositories.ortho_case_repo_impl import OrthoCaseRepoImpl
    from ortho_billing.adapters.repositories.payment_repo_impl import PaymentRepoImpl
    from ortho_billing.adapters.repositories.receivable_title_repo_impl import (
        ReceivableTitleRepoImpl,
    )
    from ortho_billing.core.application.commands.ortho_commands import (
        AdjustPricesCommand,
        CreateOrthoCaseCommand,
        GenerateInstallmentsCommand,
        RecordPaymentCommand,
    )
    from ortho_billing.core.application.handlers.installment_handlers import (
        GenerateInstallmentsHandler,
    )
    from ortho_billing.core.application.handlers.ortho_case_handlers import (
        CreateOrthoCaseHandler,
        GetOrthoCaseHandler,
        ListCaseTitlesHandler,
        ListOrthoCasesHandler,
    )
    from ortho_billing.core.application.handlers.payment_handlers import RecordPaymentHandler
    from ortho_billing.core.application.handlers.price_adjustment_handlers import (
        AdjustPricesHandler,
    )
    from ortho_billing.core.application.queries.ortho_queries import (
        GetOrthoCaseQuery,
        ListCaseTitlesQuery,
        ListOrthoCasesQuery,
    )

    core_container = _setup_core_di(settings)

    # ─── CONTAINER ─────────────────────────────────────────────────
    class Container(containers.DeclarativeContainer):
        config = providers.Configuration()

        # --- cross-cutting ----------------------------------------
        dispatcher  = providers.Object(core_container.dispatcher())
        command_bus = providers.Singleton(CommandBusImpl)
        query_bus   = providers.Singleton(QueryBusImpl)
        today       = providers.Object(timezone.localdate)
        now         = providers.Object(timezone.now)

        # --- repositórios -----------------------------------------
        case_repo    = providers.Singleton(OrthoCaseRepoImpl)
        title_repo   = providers.Singleton(ReceivableTitleRepoImpl)
        payment_repo = providers.Singleton(PaymentRepoImpl)
        audit_repo   = providers.Object(core_container.audit_log_repo())

        # --- handlers ---------------------------------------------
        generate_installments_handler = providers.Factory(
            GenerateInstallmentsHandler,
            case_repo=case_repo,
            title_repo=title_repo,
            dispatcher=dispatcher,
            today=today,
            default_due_day=config.default_due_day,
        )
        adjust_prices_handler = providers.Factory(
            AdjustPricesHandler,
            case_repo=case_repo,
            title_repo=title_repo,
            audit_repo=audit_repo,
            dispatcher=dispatcher,
            today=today,
        )
        create_case_handler = providers.Factory(
            CreateOrthoCaseHandler,
            case_repo=case_repo,
            installments_handler=generate_installments_handler,
        )
        record_payment_handler = providers.Factory(
            RecordPaymentHandler,
            title_repo=title_repo,
            payment_repo=payment_repo,
            audit_repo=audit_repo,
            dispatcher=dispatcher,
            now=now,
        )
        get_case_handler = providers.Factory(GetOrthoCaseHandler, case_repo=case_repo)
        list_cases_handler = providers.Factory(ListOrthoCasesHandler, case_repo=case_repo)
        list_titles_handler = providers.Factory(
            ListCaseTitlesHandler,
            case_repo=case_repo,
            title_repo=title_repo,
        )

        # ----------------------------------------------------------
        def init(self) -> None:
            """Registra handlers e assinantes de métricas; executa 1×."""
            bus = self.command_bus()
            bus.register(GenerateInstallmentsCommand, self.generate_installments_handler())
            bus.register(AdjustPricesCommand, self.adjust_prices_handler())
            bus.register(CreateOrthoCaseCommand, self.create_case_handler())
            bus.register(RecordPaymentCommand, self.record_payment_handler())

            qry = self.query_bus()
            qry.register(GetOrthoCaseQuery, self.get_case_handler())
            qry.register(ListCaseTitlesQuery, self.list_titles_handler())
            qry.register(ListOrthoCasesQuery, self.list_cases_handler())

            register_metrics_subscribers(self.dispatcher())

    # ─── INSTANTIAÇÃO + CONFIG ─────────────────────────────────────
    container = Container()
    container.config.default_due_day.from_value(settings.ORTHO_DEFAULT_DUE_DAY)

    Container.init(container)  # type: ignore[attr-defined]
    return container
