"""Firewall rule specification."""
from dataclasses import dataclass, field


TEMPORARY_RULE_SUFFIX = "-temporary-packer"
TEMPORARY_RULE_DESCRIPTION = "New temporary firewall rule created by Packer"


def temporary_rule_name(instance_name: str) -> str:
    """Name of the temporary rule opened for a build instance."""
    return f"{instance_name}{TEMPORARY_RULE_SUFFIX}"


@dataclass(frozen=True)
class FirewallAllowed:
    """Protocol and ports a rule lets through."""

    ip_protocol: str
    ports: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "ports", tuple(self.ports))


@dataclass(frozen=True)
class FirewallRule:
    """
    Desired ingress firewall rule.

    Built once per submission and never mutated. Contents are not validated
    here; the compute driver rejects what the provider would reject.
    """

    name: str
    allowed: FirewallAllowed
    network: str
    description: str = ""
    source_ranges: tuple[str, ...] = field(default_factory=tuple)
    target_tags: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept lists from callers, store tuples
        object.__setattr__(self, "source_ranges", tuple(self.source_ranges))
        object.__setattr__(self, "target_tags", tuple(self.target_tags))

    @classmethod
    def temporary_ssh(cls, instance_name: str, network: str, tags) -> "FirewallRule":
        """
        Rule opening tcp/22 to every address for instances carrying ``tags``.

        Args:
            instance_name: Build instance name the rule name derives from
            network: Network the rule is attached to
            tags: Target tags scoping the rule to the build instance

        Returns:
            FirewallRule named ``<instance_name>-temporary-packer``
        """
        return cls(
            name=temporary_rule_name(instance_name),
            allowed=FirewallAllowed(ip_protocol="tcp", ports=("22",)),
            network=network,
            description=TEMPORARY_RULE_DESCRIPTION,
            source_ranges=("0.0.0.0/0",),
            target_tags=tuple(tags),
        )

    def __str__(self) -> str:
        return self.name
