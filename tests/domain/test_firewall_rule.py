"""Tests for the firewall rule specification."""

import dataclasses

import pytest

from core.domain.entities import FirewallAllowed, FirewallRule, temporary_rule_name


@pytest.mark.parametrize("instance_name", ["packer-1", "build", "packer-5f0c2b", ""])
def test_temporary_rule_name_appends_fixed_suffix(instance_name):
    """Rule name is the instance name plus -temporary-packer."""
    assert temporary_rule_name(instance_name) == instance_name + "-temporary-packer"


def test_temporary_ssh_rule_contents():
    """The temporary rule opens tcp/22 to everything, scoped by tags."""
    rule = FirewallRule.temporary_ssh("packer-abc", network="default", tags=["a", "b"])

    assert rule.name == "packer-abc-temporary-packer"
    assert rule.allowed == FirewallAllowed(ip_protocol="tcp", ports=("22",))
    assert rule.source_ranges == ("0.0.0.0/0",)
    assert rule.target_tags == ("a", "b")
    assert rule.network == "default"
    assert rule.description == "New temporary firewall rule created by Packer"


def test_rule_is_immutable():
    """Rules cannot be changed after construction."""
    rule = FirewallRule.temporary_ssh("packer-abc", network="default", tags=[])

    with pytest.raises(dataclasses.FrozenInstanceError):
        rule.name = "other"


def test_list_arguments_are_stored_as_tuples():
    """Callers may pass lists; the rule keeps tuples."""
    rule = FirewallRule(
        name="r",
        allowed=FirewallAllowed("udp", ["53", "123"]),
        network="default",
        source_ranges=["10.0.0.0/8"],
        target_tags=["dns"],
    )

    assert rule.allowed.ports == ("53", "123")
    assert rule.source_ranges == ("10.0.0.0/8",)
    assert rule.target_tags == ("dns",)
