from .s3_blob_storage import S3BlobStorage

__all__ = ["S3BlobStorage"]
