from dataclasses import dataclass

from clinica_core.core.application.cqrs import QueryDTO


@dataclass(frozen=True, slots=True)
class GetOrthoCaseQuery(QueryDTO):
    ortho_case_id: str
    clinic_id: str | None = None


@dataclass(frozen=True, slots=True)
class ListCaseTitlesQuery(QueryDTO):
    ortho_case_id: str
    clinic_id: str | None = None


@dataclass(frozen=True, slots=True)
class ListOrthoCasesQuery(QueryDTO):
    clinic_id: str | None = None
    status: str | None = None
