"""Tests for the command-line entry point."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from bananabrand import main as cli
from bananabrand.errors import TransportError
from bananabrand.models import GeneratedImage
from bananabrand.studio import Studio
from conftest import PNG_BYTES


@pytest.fixture
def fake_client():
    client = MagicMock()
    client.generate = AsyncMock(return_value=GeneratedImage.from_bytes(PNG_BYTES))
    client.refine = AsyncMock(return_value=GeneratedImage.from_bytes(b"refined"))
    return client


class TestMain:

    def test_list_exits_zero(self):
        assert cli.main(["--list"]) == 0

    def test_list_includes_custom_colors(self, monkeypatch):
        shown = []
        monkeypatch.setattr(cli, "display_catalogs", shown.append)

        assert cli.main(["--list", "--custom-colors", "Client=#123456,#abcdef"]) == 0

        scheme = shown[0].color_schemes.get("client")
        assert scheme.colors == ("#123456", "#abcdef")

    def test_list_rejects_bad_custom_colors(self, monkeypatch):
        monkeypatch.setattr(cli, "display_catalogs", lambda catalogs: None)

        assert cli.main(["--list", "--custom-colors", "Client=red"]) == 1

    def test_requires_prompt_or_image(self):
        assert cli.main([]) == 2

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("API_KEY", raising=False)

        assert cli.main(["--prompt", "hello"]) == 1


class TestRun:

    @pytest.mark.asyncio
    async def test_generate_refine_and_save(self, fake_client, tmp_path):
        studio = Studio(fake_client)
        args = cli.parse_args([
            "--prompt", "new menu", "--colors", "forest-calm", "--aspect", "4:3",
            "--refine", "bigger title", "--refine", "add leaves",
        ])

        code = await cli.run(args, studio, tmp_path)

        assert code == 0
        assert studio.config.color_scheme_id == "forest-calm"
        assert studio.config.aspect_ratio == "4:3"
        assert fake_client.refine.await_count == 2
        saved = list(tmp_path.iterdir())
        assert len(saved) == 1
        assert saved[0].read_bytes() == b"refined"

    @pytest.mark.asyncio
    async def test_custom_colors_selected(self, fake_client, tmp_path):
        studio = Studio(fake_client)
        args = cli.parse_args(["--prompt", "x", "--custom-colors", "Client=#123456,#abcdef"])

        await cli.run(args, studio, tmp_path)

        assert studio.config.color_scheme_id == "client"
        assert studio.catalogs.color_schemes.get("client").colors == ("#123456", "#abcdef")

    @pytest.mark.asyncio
    async def test_failed_generation_saves_nothing(self, fake_client, tmp_path):
        fake_client.generate.side_effect = TransportError("generate")
        studio = Studio(fake_client)

        code = await cli.run(cli.parse_args(["--prompt", "x"]), studio, tmp_path)

        assert code == 1
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.asyncio
    async def test_failed_refinement_keeps_previous_image(self, fake_client, tmp_path):
        fake_client.refine.side_effect = TransportError("refine")
        studio = Studio(fake_client)

        code = await cli.run(cli.parse_args(["--prompt", "x", "--refine", "y"]), studio, tmp_path)

        assert code == 1
        saved = list(tmp_path.iterdir())
        assert saved[0].read_bytes() == PNG_BYTES

    @pytest.mark.asyncio
    async def test_start_from_image_file(self, fake_client, tmp_path):
        src = tmp_path / "in.png"
        src.write_bytes(PNG_BYTES)
        out = tmp_path / "out"
        studio = Studio(fake_client)

        code = await cli.run(cli.parse_args(["--image", str(src), "--refine", "crop"]), studio, out)

        assert code == 0
        fake_client.generate.assert_not_awaited()
        assert fake_client.refine.await_args.args[0].image_bytes() == PNG_BYTES
