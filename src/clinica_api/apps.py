from django.apps import AppConfig


class ClinicaApiConfig(AppConfig):
    name = "clinica_api"
    verbose_name = "Clínica API"

    def ready(self):
        from django.conf import settings

        # ─── DI containers ──────────────────────────────────────────
        from agenda.adapters.config.composition_root import (
            setup_di_container_from_settings as build_agenda_container,
        )
        from clinica_core.adapters.config.composition_root import (
            setup_di_container_from_settings as build_core_container,
        )
        from ortho_billing.adapters.config.composition_root import (
            setup_di_container_from_settings as build_ortho_container,
        )

        build_core_container(settings)
        build_agenda_container(settings)
        build_ortho_container(settings)
