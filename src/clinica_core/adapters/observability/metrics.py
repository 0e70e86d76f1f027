from prometheus_client import Counter, Histogram

# Exportadas pelo endpoint /api/metrics/ (django-prometheus usa o REGISTRY padrão)

HTTP_VIEW_DURATION = Histogram(
    "clinica_view_duration_seconds",
    "Duracao das views da API",
    ["view", "status"],
)

INSTALLMENTS_GENERATED = Counter(
    "ortho_installments_generated_total",
    "Titulos a receber gerados para casos ortodonticos",
)

TITLES_ADJUSTED = Counter(
    "ortho_titles_adjusted_total",
    "Titulos futuros com valor reajustado",
    ["mode"],
)

PAYMENTS_RECORDED = Counter(
    "receivable_payments_recorded_total",
    "Pagamentos registrados em titulos a receber",
    ["method"],
)
