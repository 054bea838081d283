from __future__ import annotations

from datetime import date

from coupon_catalog import i18n


def test_bundled_locales():
    assert {"en", "ru"} <= i18n.available_locales()


def test_resolve_locale_with_region(tmp_path, monkeypatch):
    monkeypatch.setattr(i18n, "LOCALES_ROOT", tmp_path)
    (tmp_path / "en.yaml").write_text("foo: bar", encoding="utf-8")
    (tmp_path / "ru.yaml").write_text("foo: baz", encoding="utf-8")
    assert i18n.resolve_locale("ru-RU") == "ru"
    assert i18n.resolve_locale("ru_RU") == "ru"
    assert i18n.resolve_locale("hi-IN") == i18n.DEFAULT_LOCALE
    assert i18n.resolve_locale(None) == i18n.DEFAULT_LOCALE


def test_gettext_fallback(tmp_path, monkeypatch):
    monkeypatch.setattr(i18n, "LOCALES_ROOT", tmp_path)
    (tmp_path / "en.yaml").write_text("coupon:\n  up_to: 'Up to {amount}'", encoding="utf-8")
    (tmp_path / "ru.yaml").write_text("other: value", encoding="utf-8")
    assert i18n.gettext("coupon.up_to", "ru", amount="₹5") == "Up to ₹5"
    assert i18n.gettext("missing.key", "de") == "missing.key"


def test_broken_locale_falls_back(tmp_path, monkeypatch):
    monkeypatch.setattr(i18n, "LOCALES_ROOT", tmp_path)
    (tmp_path / "en.yaml").write_text("greet: Hello", encoding="utf-8")
    (tmp_path / "ru.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    assert i18n.gettext("greet", "ru") == "Hello"


def test_format_date():
    assert i18n.format_date(date(2026, 3, 7), "en") == "3/7/2026"
    assert i18n.format_date(date(2026, 3, 7), "ru") == "07.03.2026"
