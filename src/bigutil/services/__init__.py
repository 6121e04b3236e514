"""Service layer: codec operations wrapped in the ServiceResult contract."""
