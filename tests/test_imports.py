"""Test module imports and package functionality."""

from __future__ import annotations

from types import ModuleType

import textconv


class TestCoreImports:
    """Test that the package and its subpackages import cleanly."""

    def test_import_main_package(self) -> None:
        assert isinstance(textconv, ModuleType)

    def test_import_subpackages(self) -> None:
        import textconv.app
        import textconv.config
        import textconv.config.loader
        import textconv.core
        import textconv.utils
        import textconv.utils.logging

        for module in (
            textconv.app,
            textconv.config,
            textconv.config.loader,
            textconv.core,
            textconv.utils,
            textconv.utils.logging,
        ):
            assert isinstance(module, ModuleType)

    def test_public_names_exported(self) -> None:
        for name in textconv.__all__:
            assert hasattr(textconv, name), name

    def test_main_entry_point(self) -> None:
        from textconv.__main__ import main

        assert callable(main)
