"""
Infrastructure layer - external service integrations.

- storage: S3 object store clients, the storage provider and its sessions

These wrappers translate between boto3 and our domain models.
"""
