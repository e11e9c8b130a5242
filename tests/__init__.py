"""
Test package.

Do not monkeypatch sys.modules here; prefer per-test monkeypatch/fixtures.
"""
