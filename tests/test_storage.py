"""
Tests for the ImageKit client against a mocked HTTP transport.
"""
import base64
import unittest
from urllib.parse import parse_qs

import httpx

from exceptions import ExternalServiceError
from services.storage import ImageKitClient

UPLOAD_URL = "https://upload.example/api/v1/files/upload"
API_URL = "https://api.example/v1"


def _client(handler):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    storage = ImageKitClient("private_key", upload_url=UPLOAD_URL, api_url=API_URL, http_client=http_client)
    return storage, http_client


def _form(request: httpx.Request) -> dict:
    return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


UPLOAD_RESPONSE = {
    "fileId": "abc123",
    "name": "drill_x1.png",
    "url": "https://ik.example/drill_x1.png",
    "thumbnailUrl": "https://ik.example/tr:n-thumb/drill_x1.png",
    "size": 5,
    "fileType": "image",
}


class TestImageKitClient(unittest.IsolatedAsyncioTestCase):
    async def test_upload_file_sends_base64_with_basic_auth(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            return httpx.Response(200, json=UPLOAD_RESPONSE)

        storage, http_client = _client(handler)
        async with http_client:
            uploaded = await storage.upload_file(b"hello", "drill.png")

        request = seen["request"]
        self.assertEqual(str(request.url), UPLOAD_URL)
        expected_auth = "Basic " + base64.b64encode(b"private_key:").decode()
        self.assertEqual(request.headers["authorization"], expected_auth)
        form = _form(request)
        self.assertEqual(form["file"], base64.b64encode(b"hello").decode())
        self.assertEqual(form["fileName"], "drill.png")
        self.assertEqual(uploaded.file_id, "abc123")
        self.assertEqual(uploaded.thumb_url, "https://ik.example/tr:n-thumb/drill_x1.png")
        self.assertEqual(uploaded.size, 5)

    async def test_upload_from_url_derives_name(self):
        seen = {}

        def handler(request):
            seen["form"] = _form(request)
            return httpx.Response(200, json=UPLOAD_RESPONSE)

        storage, http_client = _client(handler)
        async with http_client:
            await storage.upload_from_url("https://cdn.example/a/b/saw.jpg?x=1")

        self.assertEqual(seen["form"]["file"], "https://cdn.example/a/b/saw.jpg?x=1")
        self.assertEqual(seen["form"]["fileName"], "saw.jpg")

    async def test_upload_error_carries_provider_message(self):
        storage, http_client = _client(lambda r: httpx.Response(400, json={"message": "Invalid file"}))
        async with http_client:
            with self.assertRaises(ExternalServiceError) as ctx:
                await storage.upload_file(b"x", "a.png")
        self.assertEqual(ctx.exception.message, "Failed to upload file")
        self.assertEqual(ctx.exception.description, "Invalid file")
        self.assertEqual(ctx.exception.status_code, 500)

    async def test_delete_expects_no_content(self):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["url"] = str(request.url)
            return httpx.Response(204)

        storage, http_client = _client(handler)
        async with http_client:
            await storage.delete_file("abc123")
        self.assertEqual(seen, {"method": "DELETE", "url": f"{API_URL}/files/abc123"})

    async def test_delete_failure_raises(self):
        storage, http_client = _client(lambda r: httpx.Response(404, content=b"not json"))
        async with http_client:
            with self.assertRaises(ExternalServiceError) as ctx:
                await storage.delete_file("missing")
        self.assertIn("404", ctx.exception.description)

    async def test_transport_error_is_wrapped(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        storage, http_client = _client(handler)
        async with http_client:
            with self.assertRaises(ExternalServiceError) as ctx:
                await storage.delete_file("abc123")
        self.assertEqual(ctx.exception.message, "File storage unreachable")

    async def test_unparseable_upload_response(self):
        storage, http_client = _client(lambda r: httpx.Response(200, content=b"<html>"))
        async with http_client:
            with self.assertRaises(ExternalServiceError):
                await storage.upload_file(b"x", "a.png")


if __name__ == "__main__":
    unittest.main()
