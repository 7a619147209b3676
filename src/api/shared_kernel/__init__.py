"""Shared Kernel module.

The small set of components both the IAM and Conversation contexts depend on:
the ``PersistenceError`` raised by every repository, the camelCase
``ApiModel`` base for HTTP bodies, the ``ObservationContext`` carried by
domain probes, and the request-context middleware that populates it.

Changes here affect both contexts and should be coordinated.
"""
