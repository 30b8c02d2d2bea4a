"""Naming of provisioned resources."""


def get_resource_name(prefix: str, component_id: str, type_abbrev: str) -> str:
    """Return the unique name identifying a resource within a stack."""
    if prefix:
        return f"{prefix}-{component_id}-{type_abbrev}"
    return f"{component_id}-{type_abbrev}"