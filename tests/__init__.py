# tests/__init__.py
"""
Test Suite for Instance Describer

Organization:
- top level: describers, values, caches and use cases against the
  in-memory instance tree.
- `adapters`: host adapters and the declarative description schema.
"""
