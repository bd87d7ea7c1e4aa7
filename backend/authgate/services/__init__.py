"""Service layer.

Subpackages
-----------
- ``authgate.services._shared``: base service, domain errors and store ports.
- ``authgate.services.tokens``: the token lookup gateway and the token service
  composing it with the denylist.
"""
