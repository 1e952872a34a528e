import json
import unittest
from flask import Flask
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from openapi_docs import OpenAPIConfig, add_endpoints
from openapi_docs.routes.description import ERROR_MESSAGE
from openapi_docs.tests_routes.helpers import StubSource, isolated_ui_dir, make_app


class TestDescriptionRoutes(unittest.TestCase):

    def setUp(self):
        self.ui_dir = isolated_ui_dir(self)
        self.app = make_app()
        self.client = self.app.test_client()

    def test_default_path_serves_json(self):
        add_endpoints(self.app)
        response = self.client.get("/openapi")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.mimetype, "application/json")
        doc = json.loads(response.get_data(as_text=True))
        self.assertEqual(doc["openapi"], "3.0.3")
        self.assertIn("/api/projects/{project_id}", doc["paths"])

    def test_description_reflects_routes_added_later(self):
        add_endpoints(self.app)

        @self.app.get("/api/late")
        def late():
            return {}

        doc = self.client.get("/openapi").get_json()
        self.assertIn("/api/late", doc["paths"])

    def test_own_endpoints_not_described(self):
        add_endpoints(self.app)
        doc = self.client.get("/openapi").get_json()
        self.assertNotIn("/openapi", doc["paths"])
        self.assertFalse(any(p.startswith("/openapi/ui") for p in doc["paths"]))

    def test_missing_description_returns_500(self):
        add_endpoints(self.app, source=StubSource(None))
        response = self.client.get("/openapi")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_data(as_text=True), ERROR_MESSAGE)

    def test_app_without_routes_serves_empty_document(self):
        app = Flask("empty")
        add_endpoints(app, OpenAPIConfig(ui_path=None))
        response = app.test_client().get("/openapi")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(json.loads(response.get_data(as_text=True))["paths"], {})

    def test_failing_source_returns_500(self):
        class Broken:
            def current_api_description(self):
                raise RuntimeError("boom")

        add_endpoints(self.app, source=Broken())
        response = self.client.get("/openapi")
        self.assertEqual(response.status_code, 500)
        self.assertTrue(response.get_data(as_text=True))

    def test_source_queried_per_request(self):
        stub = StubSource('{"openapi": "3.0.3"}')
        add_endpoints(self.app, source=stub)

        stub.body = None
        self.assertEqual(self.client.get("/openapi").status_code, 500)
        stub.body = '{"openapi": "3.0.3"}'
        self.assertEqual(self.client.get("/openapi").status_code, 200)
        self.assertEqual(stub.calls, 2)

    def test_relative_path_is_normalized(self):
        add_endpoints(self.app, OpenAPIConfig(api_path="spec", ui_path=None), source=StubSource("{}"))
        self.assertEqual(self.client.get("/spec").status_code, 200)

    def test_disabled_path_registers_nothing(self):
        add_endpoints(self.app, OpenAPIConfig(api_path=None), source=StubSource("{}"))

        endpoints = [r.endpoint for r in self.app.url_map.iter_rules()]
        self.assertFalse(any(e.startswith("openapi_docs.") for e in endpoints))
        self.assertEqual(self.client.get("/openapi").status_code, 404)

    def test_second_registration_wins(self):
        config = OpenAPIConfig(ui_path=None)
        add_endpoints(self.app, config, source=StubSource('{"first": true}'))
        add_endpoints(self.app, config, source=StubSource('{"second": true}'))

        self.assertEqual(self.client.get("/openapi").get_json(), {"second": True})

    def test_cors_origins(self):
        config = OpenAPIConfig(ui_path=None, cors_origins=("https://editor.swagger.io",))
        add_endpoints(self.app, config, source=StubSource("{}"))

        response = self.client.get("/openapi", headers={"Origin": "https://editor.swagger.io"})
        self.assertEqual(response.headers.get("Access-Control-Allow-Origin"), "https://editor.swagger.io")

    def test_no_cors_headers_by_default(self):
        add_endpoints(self.app, OpenAPIConfig(ui_path=None), source=StubSource("{}"))
        response = self.client.get("/openapi", headers={"Origin": "https://editor.swagger.io"})
        self.assertNotIn("Access-Control-Allow-Origin", response.headers)


if __name__ == '__main__':
    unittest.main()
