# Shared module for modular monolith architecture
#
# Common pieces used by every feature module:
# - exceptions.py: Error kinds and the DRF exception handler
# - scope.py: System/user ownership rules and scoped querysets
# - cache.py: Per-user projection cache on top of Redis
# - storage.py: S3/MinIO storage for asset images
# - pagination.py: DRF paginator used by list endpoints
# - utils.py: Utility functions
# - health/: Health check endpoints
