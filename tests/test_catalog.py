"""Unit tests for option catalogs and snapshots."""

import pytest
from pydantic import ValidationError

from bananabrand.catalog import (
    DEFAULT_ASPECT_RATIOS,
    DEFAULT_COLOR_SCHEMES,
    AspectRatioOption,
    ColorScheme,
    GraphicType,
    OptionCatalog,
    OptionCatalogs,
    parse_color_scheme_arg,
)
from bananabrand.errors import DuplicateOptionError, UnknownOptionError


class TestOptionCatalog:

    def test_lookup_by_id(self):
        catalog = OptionCatalog("graphic type", [GraphicType(id="logo", name="logo")])

        assert catalog.get("logo").name == "logo"
        assert catalog.get("missing") is None
        assert "logo" in catalog

    def test_duplicate_ids_rejected(self):
        catalog = OptionCatalog("graphic type", [GraphicType(id="logo", name="logo")])

        with pytest.raises(DuplicateOptionError) as exc_info:
            catalog.add(GraphicType(id="logo", name="another logo"))

        assert exc_info.value.option_id == "logo"
        assert len(catalog) == 1

    def test_remove(self):
        catalog = OptionCatalog("graphic type", [GraphicType(id="logo", name="logo")])

        removed = catalog.remove("logo")

        assert removed.id == "logo"
        assert len(catalog) == 0
        with pytest.raises(UnknownOptionError):
            catalog.remove("logo")

    def test_keeps_insertion_order(self):
        catalog = OptionCatalog("aspect ratio", DEFAULT_ASPECT_RATIOS)

        assert catalog.ids() == [r.id for r in DEFAULT_ASPECT_RATIOS]
        assert catalog.first().id == "1:1"

    def test_unique_id_from_name(self):
        catalog = OptionCatalog("graphic type", [GraphicType(id="event-flyer", name="flyer")])

        assert catalog.unique_id("Event Flyer!") == "event-flyer-2"
        assert catalog.unique_id("Menu Card") == "menu-card"
        assert catalog.unique_id("!!!") == "graphic-type"


class TestOptionCatalogs:

    def test_seeded_with_presets(self):
        catalogs = OptionCatalogs()

        assert len(catalogs.color_schemes) == len(DEFAULT_COLOR_SCHEMES)
        assert len(catalogs.aspect_ratios) == len(DEFAULT_ASPECT_RATIOS)

    def test_preset_ids_are_unique(self):
        catalogs = OptionCatalogs()

        for catalog in (catalogs.color_schemes, catalogs.visual_styles,
                        catalogs.graphic_types, catalogs.aspect_ratios):
            assert len(set(catalog.ids())) == len(catalog)

    def test_snapshot_is_detached(self):
        catalogs = OptionCatalogs()
        snapshot = catalogs.snapshot()

        catalogs.graphic_types.add(GraphicType(id="sticker", name="sticker"))

        assert snapshot.graphic_type("sticker") is None
        assert catalogs.snapshot().graphic_type("sticker").name == "sticker"


class TestModels:

    def test_entries_are_frozen(self):
        scheme = ColorScheme(id="x", name="X", colors=["#000000"])

        assert scheme.colors == ("#000000",)
        with pytest.raises(ValidationError):
            scheme.name = "Y"

    def test_aspect_ratio_id_format(self):
        with pytest.raises(ValidationError):
            AspectRatioOption(id="wide", name="Wide")


class TestParseColorSchemeArg:

    def test_parses_name_and_colors(self):
        scheme = parse_color_scheme_arg("Spring Sale=#FDE68A, #86EFAC,#1E293B", lambda n: "spring")

        assert scheme.id == "spring"
        assert scheme.name == "Spring Sale"
        assert scheme.colors == ("#FDE68A", "#86EFAC", "#1E293B")

    @pytest.mark.parametrize("value", ["no-equals", "=#FFFFFF", "Name=", "Name=red,#FFF"])
    def test_rejects_bad_input(self, value):
        with pytest.raises(ValueError):
            parse_color_scheme_arg(value, lambda n: "id")
