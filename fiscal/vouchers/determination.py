"""Voucher-Type Determination Table

Static decision table: (issuer VAT condition, customer VAT condition)
→ legal voucher type and whether VAT is discriminated.

Rules:
- RESPONSABLE_INSCRIPTO → RESPONSABLE_INSCRIPTO / MONOTRIBUTO: Factura A, VAT discriminated
- RESPONSABLE_INSCRIPTO → CONSUMIDOR_FINAL / EXENTO / no customer: Factura B
- MONOTRIBUTO → anyone: Factura C
- EXENTO → anyone: Factura C

The table is built once at import and checked for totality over
ISSUER_CONDITIONS × (CUSTOMER_CONDITIONS + no customer). A pair outside
the table (unknown condition, NO_RESPONSABLE customer, non-issuer on the
issuing side) resolves to the configured fallback (Factura B, not
discriminated) and is logged as a warning. The function never raises:
it sits on the invoicing path and must not block a sale.
"""

import logging
from types import MappingProxyType
from typing import Mapping

from fiscal.config import DEFAULT_CONFIG, FiscalConfig
from fiscal.core.domain.vat import (
    CUSTOMER_CONDITIONS,
    ISSUER_CONDITIONS,
    VatCondition,
    coerce_vat_condition,
)
from fiscal.core.domain.voucher import VoucherDecision, VoucherType, VoucherTypeRule

logger = logging.getLogger(__name__)

RI = VatCondition.RESPONSABLE_INSCRIPTO
MT = VatCondition.MONOTRIBUTO
EX = VatCondition.EXENTO
CF = VatCondition.CONSUMIDOR_FINAL


# =============================================================================
# TABLE
# =============================================================================

VOUCHER_TYPE_RULE_ROWS: tuple[VoucherTypeRule, ...] = (
    # Issuer Responsable Inscripto
    VoucherTypeRule(RI, RI, VoucherType.FC_A, True),
    VoucherTypeRule(RI, MT, VoucherType.FC_A, True),
    VoucherTypeRule(RI, CF, VoucherType.FC_B, False),
    VoucherTypeRule(RI, EX, VoucherType.FC_B, False),
    VoucherTypeRule(RI, None, VoucherType.FC_B, False),  # counter sale
    # Issuer Monotributo
    VoucherTypeRule(MT, RI, VoucherType.FC_C, False),
    VoucherTypeRule(MT, MT, VoucherType.FC_C, False),
    VoucherTypeRule(MT, CF, VoucherType.FC_C, False),
    VoucherTypeRule(MT, EX, VoucherType.FC_C, False),
    VoucherTypeRule(MT, None, VoucherType.FC_C, False),
    # Issuer Exento
    VoucherTypeRule(EX, RI, VoucherType.FC_C, False),
    VoucherTypeRule(EX, MT, VoucherType.FC_C, False),
    VoucherTypeRule(EX, CF, VoucherType.FC_C, False),
    VoucherTypeRule(EX, EX, VoucherType.FC_C, False),
    VoucherTypeRule(EX, None, VoucherType.FC_C, False),
)

RuleKey = tuple[VatCondition, VatCondition | None]


def _build_rule_table(rows: tuple[VoucherTypeRule, ...]) -> Mapping[RuleKey, VoucherTypeRule]:
    """Index the rows by (issuer, customer) and check the table is total."""
    table: dict[RuleKey, VoucherTypeRule] = {}

    for rule in rows:
        key = (rule.issuer_condition, rule.customer_condition)
        if key in table:
            raise ValueError(f"duplicate voucher rule for {key}")
        table[key] = rule

    expected = {
        (issuer, customer)
        for issuer in ISSUER_CONDITIONS
        for customer in (*CUSTOMER_CONDITIONS, None)
    }
    missing = expected - table.keys()
    if missing:
        raise ValueError(f"voucher rule table is missing {sorted(map(str, missing))}")

    return MappingProxyType(table)


VOUCHER_TYPE_RULES: Mapping[RuleKey, VoucherTypeRule] = _build_rule_table(VOUCHER_TYPE_RULE_ROWS)


# =============================================================================
# DETERMINATION
# =============================================================================


def determine_voucher_type(
    issuer_condition: VatCondition | str | None,
    customer_condition: VatCondition | str | None = None,
    config: FiscalConfig | None = None,
) -> VoucherDecision:
    """
    Select the voucher type for an (issuer, customer) pair.

    Args:
        issuer_condition: Issuer VAT condition (enum, full name or short code);
            missing → config.default_issuer_condition
        customer_condition: Customer VAT condition, None for a counter sale
        config: Fiscal configuration

    Returns:
        VoucherDecision; is_fallback=True when the pair is not in the table

    Examples:
        >>> determine_voucher_type("RESPONSABLE_INSCRIPTO", "CONSUMIDOR_FINAL").voucher_type
        <VoucherType.FC_B: 'FC_B'>
        >>> determine_voucher_type("MONOTRIBUTO", "RESPONSABLE_INSCRIPTO").voucher_type
        <VoucherType.FC_C: 'FC_C'>
    """
    config = config or DEFAULT_CONFIG

    if issuer_condition is None or (isinstance(issuer_condition, str) and not issuer_condition.strip()):
        issuer = config.default_issuer_condition
    else:
        issuer = coerce_vat_condition(issuer_condition)

    customer = coerce_vat_condition(customer_condition)
    customer_unrecognized = customer is None and _is_given(customer_condition)

    rule = None
    if issuer is not None and not customer_unrecognized:
        rule = VOUCHER_TYPE_RULES.get((issuer, customer))

    if rule is None:
        logger.warning(
            "No voucher rule for issuer=%s customer=%s, using default %s",
            issuer_condition,
            customer_condition,
            config.fallback_voucher_type.value,
            extra={
                "issuer_condition": str(issuer_condition),
                "customer_condition": str(customer_condition),
                "fallback_voucher_type": config.fallback_voucher_type.value,
            },
        )
        return VoucherDecision(
            voucher_type=config.fallback_voucher_type,
            discriminate_vat=config.fallback_discriminate_vat,
            is_fallback=True,
            issuer_condition=issuer,
            customer_condition=customer,
            details=f"FALLBACK: no rule for issuer={issuer_condition}, customer={customer_condition}",
        )

    return VoucherDecision(
        voucher_type=rule.voucher_type,
        discriminate_vat=rule.discriminate_vat,
        is_fallback=False,
        issuer_condition=issuer,
        customer_condition=customer,
        details=f"RULE: issuer={issuer.value}, customer={customer.value if customer else None}",
    )


def _is_given(value: VatCondition | str | None) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True
