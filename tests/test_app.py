"""
Tests for the application factory, homepage and project registry.
"""
import unittest

from pocketcalc import create_app, db
from pocketcalc.projects.registry import PROJECTS, get_homepage_items

TEST_SETTINGS = {
    "TESTING": True,
    "WTF_CSRF_ENABLED": False,
    "SECRET_KEY": "test-secret",
    "SQLALCHEMY_DATABASE_URI": "sqlite://",
}


class TestCreateApp(unittest.TestCase):

    def setUp(self):
        self.app = create_app(TEST_SETTINGS)
        with self.app.app_context():
            db.create_all()
        self.client = self.app.test_client()

    def test_homepage_lists_projects(self):
        r = self.client.get("/")
        self.assertEqual(r.status_code, 200)
        html = r.get_data(as_text=True)
        self.assertIn("Calculator", html)
        self.assertIn("/api/hello", html)

    def test_blueprints_registered(self):
        self.assertEqual(self.client.get("/api/hello").status_code, 200)
        self.assertEqual(self.client.get("/calculator/").status_code, 200)

    def test_unknown_page_returns_404_page(self):
        r = self.client.get("/no-such-page")
        self.assertEqual(r.status_code, 404)
        self.assertIn("Page not found", r.get_data(as_text=True))

    def test_cli_commands_registered(self):
        self.assertIn("press-keys", self.app.cli.commands)
        self.assertIn("init-db", self.app.cli.commands)

    def test_init_db_command(self):
        result = self.app.test_cli_runner().invoke(args=["init-db"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("created", result.output)

    def test_missing_secret_key_raises(self):
        with self.assertRaises(ValueError):
            create_app({"TESTING": False, "SECRET_KEY": None})


class TestRegistry(unittest.TestCase):

    def test_homepage_items_sorted_and_flagged(self):
        items = get_homepage_items()
        self.assertEqual([p["id"] for p in items], ["calculator", "hello"])
        self.assertTrue(all(p["available"] for p in items))

    def test_homepage_items_are_copies(self):
        get_homepage_items()[0]["name"] = "changed"
        self.assertEqual(PROJECTS[0]["name"], "Calculator")


if __name__ == "__main__":
    unittest.main()
