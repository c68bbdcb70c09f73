import unittest

import matcache
from matcache import Settings, override_settings


class TestSettings(unittest.TestCase):
    def test_defaults(self):
        s = Settings()
        self.assertEqual(s.method, "lapack")
        self.assertTrue(s.emit_diagnostics)

    def test_from_env(self):
        s = Settings.from_env({"MATCACHE_INVERSE_METHOD": "GAUSS", "MATCACHE_QUIET": "yes"})
        self.assertEqual(s.method, "gauss")
        self.assertFalse(s.emit_diagnostics)

    def test_from_env_ignores_blank_and_falsy_values(self):
        s = Settings.from_env({"MATCACHE_INVERSE_METHOD": "", "MATCACHE_QUIET": "0"})
        self.assertEqual(s.method, "lapack")
        self.assertTrue(s.emit_diagnostics)

    def test_from_env_rejects_unknown_method(self):
        with self.assertRaises(ValueError):
            Settings.from_env({"MATCACHE_INVERSE_METHOD": "qr"})

    def test_assignment_is_validated(self):
        s = Settings()
        with self.assertRaises(ValueError):
            s.method = "svd"
        with self.assertRaises(TypeError):
            s.method = 3
        self.assertEqual(s.method, "lapack")

    def test_override_restores_previous_values(self):
        before = matcache.settings.as_dict()
        with override_settings(method="gauss", emit_diagnostics=False) as s:
            self.assertIs(s, matcache.settings)
            self.assertEqual(matcache.settings.method, "gauss")
            self.assertFalse(matcache.settings.emit_diagnostics)
        self.assertEqual(matcache.settings.as_dict(), before)

    def test_override_restores_on_error(self):
        before = matcache.settings.as_dict()
        with self.assertRaises(RuntimeError):
            with override_settings(method="gauss"):
                raise RuntimeError("boom")
        self.assertEqual(matcache.settings.as_dict(), before)

    def test_override_rejects_unknown_names(self):
        with self.assertRaises(TypeError):
            with override_settings(tolerance=1e-12):
                pass

    def test_override_bad_value_restores(self):
        before = matcache.settings.as_dict()
        with self.assertRaises(ValueError):
            with override_settings(emit_diagnostics=False, method="nope"):
                pass
        self.assertEqual(matcache.settings.as_dict(), before)

    def test_repr(self):
        self.assertEqual(repr(Settings()), "Settings(method='lapack', emit_diagnostics=True)")


if __name__ == "__main__":
    unittest.main()
