import unittest

from payments.config import (
    DEFAULT_MIN_ICON_SIZE,
    PAYMENT_PROCESSOR_NAME,
    PAYMENTS_SERVICE_NAME,
    PaymentsSettings,
)


class TestPaymentsSettings(unittest.TestCase):
    def test_defaults(self):
        settings = PaymentsSettings()
        self.assertEqual(settings.products_path, "src/products.json")
        self.assertEqual(settings.assets_dir, "assets")
        self.assertEqual(settings.reserved_metadata_prefix, "devvit-")
        self.assertEqual(settings.min_icon_size, DEFAULT_MIN_ICON_SIZE)
        self.assertTrue(settings.verify_assets)
        self.assertEqual(
            settings.payment_service_names, frozenset({PAYMENT_PROCESSOR_NAME, PAYMENTS_SERVICE_NAME})
        )


def test_from_env(monkeypatch):
    monkeypatch.setenv("PAYMENTS_PRODUCTS_PATH", "app/products.json")
    monkeypatch.setenv("PAYMENTS_MIN_ICON_SIZE", "512")
    monkeypatch.setenv("PAYMENTS_VERIFY_ASSETS", "false")
    settings = PaymentsSettings.from_env()
    assert settings.products_path == "app/products.json"
    assert settings.min_icon_size == 512
    assert settings.verify_assets is False
    assert settings.assets_dir == "assets"


def test_from_config_file(tmp_path):
    conf = tmp_path / "payments.conf"
    conf.write_text(
        "# payments settings\nassets_dir = public\nreserved_metadata_prefix = acme-\n\nverify_assets = yes\n",
        encoding="utf-8",
    )
    settings = PaymentsSettings.from_config_file(str(conf))
    assert settings.assets_dir == "public"
    assert settings.reserved_metadata_prefix == "acme-"
    assert settings.verify_assets is True
    assert settings.products_path == "src/products.json"


def test_missing_config_file_uses_defaults(tmp_path):
    settings = PaymentsSettings.from_config_file(str(tmp_path / "nope.conf"))
    assert settings.min_icon_size == DEFAULT_MIN_ICON_SIZE
