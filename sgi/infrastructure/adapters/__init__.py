"""Production adapters for SGI Cidade ports."""

from sgi.infrastructure.adapters.json_file_blob_store import JsonFileBlobStore

__all__ = ["JsonFileBlobStore"]
