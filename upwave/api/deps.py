from functools import lru_cache

from upwave.core.config import Settings, settings, split_csv
from upwave.services.storage.s3_storage import S3Bucket, S3Config, S3Uploader


def s3_config_from_settings(s: Settings) -> S3Config:
    return S3Config(
        bucket=s.S3_BUCKET,
        access_key=s.S3_KEY,
        secret_key=s.S3_SECRET,
        region=s.S3_REGION,
        endpoint_url=s.S3_ENDPOINT_URL,
        acl=s.S3_ACL,
    )


@lru_cache(maxsize=1)
def get_bucket() -> S3Bucket:
    """
    Provisions the bucket once per process.
    The first request pays for the HEAD (and the create, if needed).
    """
    return S3Bucket.connect(s3_config_from_settings(settings))


def get_uploader() -> S3Uploader:
    """
    Provides the storage uploader.
    Using Depends(get_uploader) allows swapping the object store in tests.
    """
    return get_bucket().uploader(
        settings.UPLOAD_FIELD_NAME,
        allowed_types=set(split_csv(settings.UPLOAD_ALLOWED_TYPES)) or None,
        max_size=settings.UPLOAD_MAX_BYTES,
    )
