"""Example transform: returns a fixed address for the input domain.

Run as the host tool would:
    python examples/resolve_domain.py example.com "fqdn=example.com"
"""

from transnet import MatchingRule, run_transform


def resolve(transform):
    transform.emit_progress(0)
    transform.emit_debug(f"Resolving {transform.entity_value}")

    entity = transform.add_entity("maltego.IPv4Address", "93.184.216.34", weight=100)
    entity.add_field("ipv4-address.internal", "Internal", "false", MatchingRule.STRICT)
    entity.add_edge_label("resolves to", [("record", "A")])

    transform.emit_progress(100)


if __name__ == "__main__":
    run_transform(resolve)
