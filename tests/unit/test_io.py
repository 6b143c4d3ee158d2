import base64
import io as stdlib_io
import mimetypes
from pathlib import Path

import pytest
from PIL import Image

from bgremover.utils import io


def _png_bytes(size=(40, 20), color=(255, 0, 0, 255)) -> bytes:
    buffer = stdlib_io.BytesIO()
    Image.new("RGBA", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


class TestDecodeDataUrl:
    def test_decodes_base64_payload(self) -> None:
        assert io.decode_data_url("data:image/png;base64,AAAA") == b"\x00\x00\x00"

    def test_ignores_line_breaks_in_payload(self) -> None:
        png = _png_bytes()
        wrapped = base64.encodebytes(png).decode("ascii")

        assert "\n" in wrapped.rstrip()
        assert io.decode_data_url("data:image/png;base64," + wrapped) == png

    @pytest.mark.parametrize(
        "value",
        [
            "AAAA",
            "image/png;base64,AAAA",
            "data:image/png,AAAA",
            "data:image/png;base64,@@@@",
        ],
    )
    def test_rejects_malformed_values(self, value: str) -> None:
        with pytest.raises(ValueError):
            io.decode_data_url(value)


class TestDownloadFilename:
    def test_embeds_given_timestamp(self) -> None:
        assert io.download_filename(1700000000123) == "background-removed-1700000000123.png"

    def test_uses_current_time_by_default(self) -> None:
        name = io.download_filename()

        assert name.startswith("background-removed-")
        assert name.endswith(".png")
        assert name[len("background-removed-"):-len(".png")].isdigit()


class TestWriteBytes:
    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "out.png"

        assert io.write_bytes(b"payload", target) == target
        assert target.read_bytes() == b"payload"


class TestPreview:
    def test_load_preview_fits_requested_size(self) -> None:
        img = io.load_preview(_png_bytes(size=(400, 200)), 100)

        assert img.size == (100, 50)

    def test_load_preview_rejects_garbage(self) -> None:
        with pytest.raises(OSError):
            io.load_preview(b"definitely not an image", 100)

    def test_checkerboard_shows_through_transparency(self) -> None:
        transparent = Image.new("RGBA", (20, 20), (0, 0, 0, 0))

        board = io.compose_on_checkerboard(transparent, tile=10)

        assert board.mode == "RGB"
        assert board.getpixel((0, 0)) == (240, 240, 240)
        assert board.getpixel((10, 0)) == (255, 255, 255)
        assert board.getpixel((10, 10)) == (240, 240, 240)

    def test_checkerboard_keeps_opaque_pixels(self) -> None:
        opaque = Image.new("RGBA", (20, 20), (255, 0, 0, 255))

        board = io.compose_on_checkerboard(opaque, tile=10)

        assert board.getpixel((5, 5)) == (255, 0, 0)


def test_guess_mime_type_from_extension() -> None:
    assert io.guess_mime_type(Path("photo.PNG")) == "image/png"
    assert io.guess_mime_type(Path("notes.txt")) == "text/plain"
    assert io.guess_mime_type(Path("no_extension")) is None


def test_guess_mime_type_falls_back_to_pillow_formats(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(mimetypes, "guess_type", lambda name: (None, None))

    assert io.guess_mime_type(Path("photo.png")) == "image/png"
    assert io.guess_mime_type(Path("scan.JPG")) == "image/jpeg"
    assert io.guess_mime_type(Path("notes.txt")) is None


def test_supported_extensions_include_common_formats() -> None:
    extensions = io.get_supported_image_extensions()

    assert ".png" in extensions
    assert ".JPG" in extensions
