"""Domain layer for the CPN builder.

Typed net records, the document that owns them and the services that grow
it. Nothing in this layer writes files or talks to a console.
"""
