"""Generate GraphQL operation documents and SDK wrappers from introspection."""
