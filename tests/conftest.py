import os

import pytest
from fastapi.testclient import TestClient

# Keep boto3 off any real credentials
os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")

from upwave.api.deps import get_uploader  # noqa: E402
from upwave.main import app  # noqa: E402
from upwave.validations import FileTypeValidator, MaxFileSizeValidator, ValidationErrors, validate  # noqa: E402


class FakeUploader:
    """In-memory Uploader that records every put."""

    def __init__(self, field_name="File", allowed_types=None, max_size=None, put_error=None):
        self._field_name = field_name
        self.allowed_types = allowed_types
        self.max_size = max_size
        self.put_error = put_error
        self.puts = []
        self.validated = []

    def field_name(self):
        return self._field_name

    def path(self, header):
        return f"uploads/{header.filename}"

    def validate(self, header):
        self.validated.append(header)
        validators = []
        if self.allowed_types is not None:
            validators.append(FileTypeValidator(self._field_name, self.allowed_types, header))
        if self.max_size is not None:
            validators.append(MaxFileSizeValidator(self._field_name, self.max_size, header))
        return validate(*validators) if validators else ValidationErrors()

    def put(self, path, stream, size, content_type):
        if self.put_error is not None:
            raise self.put_error
        self.puts.append(
            {"path": path, "data": stream.read(), "size": size, "content_type": content_type}
        )


@pytest.fixture
def fake_uploader():
    return FakeUploader()


@pytest.fixture
def client(fake_uploader):
    app.dependency_overrides[get_uploader] = lambda: fake_uploader
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
