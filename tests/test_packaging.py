import unittest
from pathlib import Path

try:
    import tomllib
except ModuleNotFoundError:  # Python 3.10
    tomllib = None


ROOT = Path(__file__).resolve().parent.parent


@unittest.skipIf(tomllib is None, "requires tomllib")
class TestProjectMetadata(unittest.TestCase):
    def setUp(self):
        with open(ROOT / "pyproject.toml", "rb") as handle:
            self.project = tomllib.load(handle)["project"]

    def test_readme_is_the_project_readme(self):
        readme = self.project["readme"]

        self.assertEqual(readme, "README.md")
        self.assertTrue((ROOT / readme).is_file())


if __name__ == "__main__":
    unittest.main()
