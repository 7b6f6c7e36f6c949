from io import BytesIO

import pytest
from PIL import Image

from receipt_printer.domain.exception import InvalidArgument
from receipt_printer.infra.image_decoder import PillowImageDecoder


def png_bytes(width, height):
    buffer = BytesIO()
    Image.new("RGB", (width, height), color="white").save(buffer, format="PNG")
    return buffer.getvalue()


class TestPillowImageDecoder:
    def test_small_image_is_kept(self):
        image = PillowImageDecoder().decode(png_bytes(100, 50))
        assert image.size == (100, 50)

    def test_wide_image_is_scaled_to_paper(self):
        image = PillowImageDecoder(max_width=384).decode(png_bytes(768, 100))
        assert image.size == (384, 50)

    def test_garbage_should_raise(self):
        with pytest.raises(InvalidArgument):
            PillowImageDecoder().decode(b"definitely not an image")
