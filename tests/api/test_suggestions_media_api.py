"""API tests for suggestions and media upload."""

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


class TestSuggestions:

    def test_submit_and_list(self, client, admin_headers, user_headers):
        first = client.post(
            "/api/suggestions/",
            json={"name": "Maria", "department": "Fiscal", "message": "Incluir prazos."},
            headers=user_headers,
        )
        second = client.post(
            "/api/suggestions/",
            json={"name": "Maria", "department": "Fiscal", "message": "Revisar FAQ."},
            headers=user_headers,
        )

        assert first.status_code == 201
        assert first.json()["submitted_by"] == "maria"
        listed = client.get("/api/suggestions/", headers=admin_headers).json()
        assert [s["id"] for s in listed] == [second.json()["id"], first.json()["id"]]

    def test_list_requires_admin(self, client, user_headers):
        assert client.get("/api/suggestions/", headers=user_headers).status_code == 403

    def test_missing_fields(self, client, user_headers):
        response = client.post("/api/suggestions/", json={"name": "Maria"}, headers=user_headers)

        assert response.status_code == 422


class TestMedia:

    def test_upload_and_download_image(self, client, admin_headers):
        response = client.post(
            "/api/media/images",
            files={"file": ("foto.png", PNG_BYTES, "image/png")},
            headers=admin_headers,
        )

        assert response.status_code == 200
        url = response.json()["url"]
        assert url.startswith("/api/media/")

        download = client.get(url)
        assert download.status_code == 200
        assert download.content == PNG_BYTES
        assert download.headers["content-type"] == "image/png"

    def test_non_image_rejected(self, client, admin_headers):
        response = client.post(
            "/api/media/images",
            files={"file": ("notas.txt", b"texto", "text/plain")},
            headers=admin_headers,
        )

        assert response.status_code == 400

    def test_upload_requires_admin(self, client, user_headers):
        response = client.post(
            "/api/media/images",
            files={"file": ("foto.png", PNG_BYTES, "image/png")},
            headers=user_headers,
        )

        assert response.status_code == 403

    def test_logo_is_published_in_content(self, client, admin_headers):
        response = client.post(
            "/api/media/logo",
            files={"file": ("logo.png", PNG_BYTES, "image/png")},
            headers=admin_headers,
        )

        url = response.json()["url"]
        assert client.get("/api/content", headers=admin_headers).json()["logo_url"] == url

    def test_unknown_media(self, client):
        assert client.get("/api/media/nada").status_code == 404
