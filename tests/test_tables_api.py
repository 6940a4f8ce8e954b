"""
Integration tests for the HTTP surface.
"""
import pytest
from fastapi.testclient import TestClient

from backend.app.main import app
from backend.app.core.config import get_settings

SIMPLE_CSV = "a,b,c,d\na1, \"b1\" ,\"c1, e1\",d1\na2, b2,,d2\na3, b3,,\na4,b4,c4,d4\n"

WINDOW_CSV = "header\nheader\ncolumn\ntrailer\ndata\nmoreData\nfooter\n"


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def upload(client, content, filename="table.csv", **params):
    if isinstance(content, str):
        content = content.encode("utf-8")
    return client.post(
        "/api/v1/tables/parse",
        files={"file": (filename, content, "text/csv")},
        params=params
    )


class TestHealth:
    """Tests for the health endpoints"""

    def test_root_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_api_health(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json()["service"] == get_settings().PROJECT_NAME


class TestParseTable:
    """Tests for POST /api/v1/tables/parse"""

    def test_parse_simple(self, client):
        """The first line names the columns by default"""
        response = upload(client, SIMPLE_CSV)
        assert response.status_code == 200

        body = response.json()
        assert body["success"] is True
        assert body["columns"] == ["a", "b", "c", "d"]
        assert body["size"] == 4
        assert body["rows"][0] == ["a1", "b1", "c1, e1", "d1"]
        assert body["rows"][1] == ["a2", "b2", None, "d2"]
        assert body["validation"]["faults"] == []

    def test_parse_window(self, client):
        """Skip counts select the window"""
        response = upload(client, WINDOW_CSV, header=2, trailer=1, footer=1)
        body = response.json()
        assert body["columns"] == ["column"]
        assert body["rows"] == [["data"], ["moreData"]]
        assert body["size"] == 2
        assert body["parameters"] == {
            "header": "2", "trailer": "1", "footer": "1", "class": "Spreadsheet"
        }

    def test_negative_skips_are_clamped(self, client):
        """Negative skips behave like zero"""
        body = upload(client, WINDOW_CSV, header=-5).json()
        assert body["columns"] == ["header"]
        assert body["parameters"]["header"] == "0"

    def test_parse_custom_dialect(self, client):
        """Delimiter and quote are configurable"""
        body = upload(client, "a;b\n'x;y';\"z\"\n", delimiter=";", quote="'").json()
        assert body["rows"] == [["x;y", '"z"']]

    def test_parse_tsv(self, client):
        """Tab separated uploads use the tab delimiter by default"""
        body = upload(client, b"A\tB\n1\t2\n", filename="t.tsv").json()
        assert body["columns"] == ["A", "B"]
        assert body["rows"] == [["1", "2"]]

    def test_explicit_delimiter_wins_over_extension(self, client):
        """An explicit delimiter overrides the extension default"""
        body = upload(client, b"A;B\n1;2\n", filename="t.tsv", delimiter=";").json()
        assert body["columns"] == ["A", "B"]

    def test_empty_window_is_reported(self, client):
        """A window without data is returned with a warning"""
        body = upload(client, WINDOW_CSV, header=4, trailer=4, footer=4).json()
        assert body["size"] == 0
        assert body["rows"] == []
        assert body["validation"]["warnings"]

    def test_missing_columns_is_a_fault(self, client):
        """A header skip beyond the file is a fault"""
        body = upload(client, "a,b\n", header=3).json()
        assert body["columns"] == []
        assert body["validation"]["faults"]

    def test_latin1_upload(self, client):
        """Uploads are decoded with the detected encoding"""
        content = ("nombre,ciudad\n" + "José,Málaga\n" * 20).encode("latin-1")
        body = upload(client, content).json()
        assert body["rows"][0] == ["José", "Málaga"]

    def test_rejects_extension(self, client):
        """Only delimited text files are accepted"""
        response = upload(client, SIMPLE_CSV, filename="table.xlsx")
        assert response.status_code == 400

    def test_rejects_large_files(self, client, monkeypatch):
        """Files above the upload limit are rejected"""
        monkeypatch.setattr(get_settings(), "MAX_UPLOAD_SIZE", 10)
        response = upload(client, SIMPLE_CSV)
        assert response.status_code == 413
        assert "detail" in response.json()
