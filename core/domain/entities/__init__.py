"""Domain entities."""

from .firewall_rule import (
    TEMPORARY_RULE_DESCRIPTION,
    TEMPORARY_RULE_SUFFIX,
    FirewallAllowed,
    FirewallRule,
    temporary_rule_name,
)

__all__ = [
    "TEMPORARY_RULE_DESCRIPTION",
    "TEMPORARY_RULE_SUFFIX",
    "FirewallAllowed",
    "FirewallRule",
    "temporary_rule_name",
]
