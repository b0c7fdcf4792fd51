"""
s3_storage.py
- Purpose: Storage adapter for S3-compatible buckets (AWS S3, MinIO, R2).
- Owns: bucket provisioning, object path conventions, the actual PUT.
- Design: Treat as an infrastructure adapter; upload rules are injected, and
  credentials come in through S3Config rather than the process environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import AbstractSet, Any, BinaryIO

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from upwave.core import ErrorCode, ErrorReason
from upwave.core.errors import storage_error
from upwave.validations.file_validators import FileTypeValidator, MaxFileSizeValidator, validate
from upwave.validations.types import FileHeader, ValidationErrors

logger = logging.getLogger("upwave.storage.s3")

DEFAULT_FIELD_NAME = "File"


@dataclass(frozen=True)
class S3Config:
    bucket: str
    access_key: str | None = None
    secret_key: str | None = None
    region: str = "us-east-1"
    endpoint_url: str | None = None
    acl: str = "public-read"

    def make_client(self) -> Any:
        return boto3.client(
            "s3",
            aws_access_key_id=self.access_key,
            aws_secret_access_key=self.secret_key,
            region_name=self.region,
            endpoint_url=self.endpoint_url,
        )


class S3Bucket:
    """
    A provisioned bucket.

    Use S3Bucket.connect(config) to get one: it makes sure the bucket exists
    (creating it with the configured ACL if it does not).
    """

    def __init__(self, client: Any, config: S3Config):
        self._client = client
        self.config = config

    @property
    def name(self) -> str:
        return self.config.bucket

    @classmethod
    def connect(cls, config: S3Config, client: Any | None = None) -> "S3Bucket":
        bucket = cls(client or config.make_client(), config)
        bucket.ensure_exists()
        return bucket

    def ensure_exists(self) -> None:
        try:
            self._client.head_bucket(Bucket=self.name)
            return
        except ClientError:
            logger.info("storage.bucket_missing", extra={"bucket": self.name})

        params: dict[str, Any] = {"Bucket": self.name, "ACL": self.config.acl}
        # us-east-1 rejects an explicit LocationConstraint
        if self.config.region and self.config.region != "us-east-1":
            params["CreateBucketConfiguration"] = {"LocationConstraint": self.config.region}

        try:
            self._client.create_bucket(**params)
        except (ClientError, BotoCoreError) as e:
            raise storage_error(
                ErrorReason.STORAGE_UNAVAILABLE,
                code=ErrorCode.STORAGE_UNAVAILABLE,
                message=f"Failed to create bucket {self.name}: {e}",
            ) from e
        logger.info("storage.bucket_created", extra={"bucket": self.name, "acl": self.config.acl})

    def put_object(self, path: str, stream: BinaryIO, size: int, content_type: str) -> None:
        try:
            logger.info("storage.put", extra={"bucket": self.name, "path": path, "size": size})
            self._client.put_object(
                Bucket=self.name,
                Key=path,
                Body=stream,
                ContentLength=size,
                ContentType=content_type,
                ACL=self.config.acl,
            )
        except (ClientError, BotoCoreError) as e:
            logger.exception("storage.put_failed", extra={"bucket": self.name, "path": path})
            raise storage_error(message=f"Failed to upload {path} to bucket {self.name}: {e}") from e

    def uploader(
        self,
        field_name: str = DEFAULT_FIELD_NAME,
        *,
        allowed_types: AbstractSet[str] | None = None,
        max_size: int | None = None,
    ) -> "S3Uploader":
        return S3Uploader(self, field_name=field_name, allowed_types=allowed_types, max_size=max_size)


class S3Uploader:
    """Uploader that stores each attachment under its own filename."""

    def __init__(
        self,
        bucket: S3Bucket,
        *,
        field_name: str = DEFAULT_FIELD_NAME,
        allowed_types: AbstractSet[str] | None = None,
        max_size: int | None = None,
    ):
        self._bucket = bucket
        self._field_name = field_name
        self._allowed_types = frozenset(allowed_types) if allowed_types else None
        self._max_size = max_size

    def field_name(self) -> str:
        return self._field_name

    def path(self, header: FileHeader) -> str:
        return os.path.basename(header.filename)

    def validate(self, header: FileHeader) -> ValidationErrors:
        validators = []
        if self._allowed_types is not None:
            validators.append(FileTypeValidator(self._field_name, self._allowed_types, header))
        if self._max_size is not None:
            validators.append(MaxFileSizeValidator(self._field_name, self._max_size, header))
        return validate(*validators)

    def put(self, path: str, stream: BinaryIO, size: int, content_type: str) -> None:
        self._bucket.put_object(path, stream, size, content_type)
