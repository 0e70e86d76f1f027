from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from clinica_core.core.domain.exceptions import InvalidInputError

CENT = Decimal("0.01")


def round_money(value) -> Decimal:
    """Arredonda para centavos, meio para cima (2,345 → 2,35)."""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def compute_new_amount(
    current: Decimal | None,
    percentual: Decimal | None = None,
    valor_fixo: Decimal | None = None,
) -> Decimal:
    """
    Novo valor de mensalidade.

    - `valor_fixo` tem precedência sobre `percentual`;
    - o percentual incide sobre o valor atualmente gravado no caso.
    """
    if valor_fixo:
        return round_money(valor_fixo)
    if percentual:
        if current is None:
            raise InvalidInputError("Caso sem valor de mensalidade para reajuste")
        return round_money(Decimal(current) * (1 + Decimal(percentual) / 100))
    raise InvalidInputError("percentual_reajuste ou valor_fixo_novo é obrigatório")
