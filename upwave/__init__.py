"""upwave: validate multipart file uploads and store them in an S3-compatible bucket."""

__version__ = "0.1.0"
