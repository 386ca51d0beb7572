# instance_describer/adapters/__init__.py
"""
Host Adapters.

Concrete implementations of the `InstanceHost` port, an in-memory instance
tree for tests and tooling, and the declarative (JSON) description schema.
"""
