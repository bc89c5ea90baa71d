"""Tests for the source and target repository clients."""

import httpx
import pytest

from nexus_migrator.api import SourceRepositoryClient, TargetRepositoryClient, create_clients
from nexus_migrator.exceptions import TransportError

LISTING_URL = "https://source.example.com/service/local/repositories/releases/index_content/"
ARTIFACT_URL = "https://source.example.com/content/repositories/releases/com/a-1.0.jar"
UPLOAD_URL = "https://target.example.com/content/repositories/releases/com/a-1.0.jar"


@pytest.fixture
def source_client():
    """Source client with test credentials."""
    client = SourceRepositoryClient(("source-user", "source-secret"))
    yield client
    client.close()


@pytest.fixture
def target_client():
    """Target client with test credentials."""
    client = TargetRepositoryClient(("target-user", "target-secret"))
    yield client
    client.close()


class TestFetchTreeNode:
    """Test SourceRepositoryClient.fetch_tree_node."""

    def test_success(self, source_client, httpx_mock):
        """Test the raw body is returned on 200."""
        route = httpx_mock.get(LISTING_URL).mock(return_value=httpx.Response(200, content=b'{"data": {}}'))

        assert source_client.fetch_tree_node(LISTING_URL) == b'{"data": {}}'

        request = route.calls.last.request
        assert request.headers["Accept"] == "application/json"
        assert request.headers["Authorization"].startswith("Basic ")

    def test_unexpected_status(self, source_client, httpx_mock):
        """Test any status other than 200 raises TransportError with the body."""
        httpx_mock.get(LISTING_URL).mock(return_value=httpx.Response(404, text="no such group"))

        with pytest.raises(TransportError) as exc_info:
            source_client.fetch_tree_node(LISTING_URL)

        assert exc_info.value.status_code == 404
        assert exc_info.value.url == LISTING_URL
        assert "no such group" in str(exc_info.value)

    def test_connection_error(self, source_client, httpx_mock):
        """Test a connection failure raises TransportError without a status."""
        httpx_mock.get(LISTING_URL).mock(side_effect=httpx.ConnectError("connection refused"))

        with pytest.raises(TransportError) as exc_info:
            source_client.fetch_tree_node(LISTING_URL)

        assert exc_info.value.status_code is None
        assert "connection refused" in str(exc_info.value)


class TestOpenArtifact:
    """Test SourceRepositoryClient.open_artifact."""

    def test_streams_body(self, source_client, httpx_mock):
        """Test the yielded response streams the artifact body."""
        route = httpx_mock.get(ARTIFACT_URL).mock(return_value=httpx.Response(200, content=b"PK\x03\x04jar-bytes"))

        with source_client.open_artifact(ARTIFACT_URL) as response:
            body = b"".join(response.iter_bytes())

        assert body == b"PK\x03\x04jar-bytes"
        assert response.is_closed
        assert route.calls.last.request.headers["Accept"] == "application/json"

    def test_unexpected_status(self, source_client, httpx_mock):
        """Test a status other than 200 raises before anything is yielded."""
        httpx_mock.get(ARTIFACT_URL).mock(return_value=httpx.Response(401, text="unauthorized"))

        with pytest.raises(TransportError) as exc_info:
            with source_client.open_artifact(ARTIFACT_URL):
                pytest.fail("Response must not be yielded")

        assert exc_info.value.status_code == 401
        assert "unauthorized" in str(exc_info.value)

    def test_response_closed_on_error(self, source_client, httpx_mock):
        """Test the response is closed when the caller fails mid-stream."""
        httpx_mock.get(ARTIFACT_URL).mock(return_value=httpx.Response(200, content=b"data"))

        with pytest.raises(ValueError):
            with source_client.open_artifact(ARTIFACT_URL) as response:
                raise ValueError("upload failed")

        assert response.is_closed

    def test_connection_error(self, source_client, httpx_mock):
        """Test a connection failure raises TransportError without a status."""
        httpx_mock.get(ARTIFACT_URL).mock(side_effect=httpx.ConnectError("unreachable"))

        with pytest.raises(TransportError) as exc_info:
            with source_client.open_artifact(ARTIFACT_URL):
                pass

        assert exc_info.value.status_code is None


class TestUploadArtifact:
    """Test TargetRepositoryClient.upload_artifact."""

    def test_success(self, target_client, httpx_mock):
        """Test the chunks are sent as the request body with the content type."""
        route = httpx_mock.put(UPLOAD_URL).mock(return_value=httpx.Response(201))

        response = target_client.upload_artifact(UPLOAD_URL, iter([b"PK", b"\x03\x04"]), "application/java-archive")

        assert response.status_code == 201
        request = route.calls.last.request
        assert request.content == b"PK\x03\x04"
        assert request.headers["Content-Type"] == "application/java-archive"
        assert request.headers["Transfer-Encoding"] == "chunked"

    @pytest.mark.parametrize("status", [200, 204, 400, 403, 500])
    def test_status_other_than_created(self, target_client, httpx_mock, status):
        """Test only 201 counts as a successful upload."""
        httpx_mock.put(UPLOAD_URL).mock(return_value=httpx.Response(status, text="rejected"))

        with pytest.raises(TransportError) as exc_info:
            target_client.upload_artifact(UPLOAD_URL, iter([b"x"]), "application/xml")

        assert exc_info.value.status_code == status
        assert exc_info.value.url == UPLOAD_URL

    def test_connection_error(self, target_client, httpx_mock):
        """Test a connection failure raises TransportError without a status."""
        httpx_mock.put(UPLOAD_URL).mock(side_effect=httpx.ConnectError("unreachable"))

        with pytest.raises(TransportError) as exc_info:
            target_client.upload_artifact(UPLOAD_URL, iter([b"x"]), "application/xml")

        assert exc_info.value.status_code is None


class TestCreateClients:
    """Test create_clients function."""

    def test_clients_use_their_own_credentials(self, httpx_mock):
        """Test each client authenticates with its own server's credentials."""
        source_route = httpx_mock.get(LISTING_URL).mock(return_value=httpx.Response(200, content=b"{}"))
        target_route = httpx_mock.put(UPLOAD_URL).mock(return_value=httpx.Response(201))

        source, target = create_clients(("reader", "r"), ("deployer", "d"), max_connections=4)
        with source, target:
            source.fetch_tree_node(LISTING_URL)
            target.upload_artifact(UPLOAD_URL, iter([b"x"]), "application/xml")

        assert source_route.calls.last.request.headers["Authorization"] != (
            target_route.calls.last.request.headers["Authorization"]
        )
        assert source.session.is_closed
        assert target.session.is_closed
