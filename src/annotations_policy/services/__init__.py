"""Service layer — settings validation returning ServiceResult.

Services may import from the domain layer.
They must never import from the CLI or output modules.
"""
