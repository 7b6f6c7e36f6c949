from io import BytesIO

from PIL import Image, UnidentifiedImageError

from receipt_printer.config.settings import Settings
from receipt_printer.domain.exception import InvalidArgument
from receipt_printer.domain.interfaces.i_image_decoder import IImageDecoder
from receipt_printer.utils.logger import setup_logger

logger = setup_logger(__name__)


class PillowImageDecoder(IImageDecoder):
    def __init__(self, max_width: int = Settings.Paper.DOTS_PER_LINE):
        self._max_width = max_width

    def decode(self, raw: bytes) -> Image.Image:
        try:
            image = Image.open(BytesIO(raw))
            image.load()
        except (UnidentifiedImageError, OSError) as e:
            logger.error(f"❌ Cannot decode bitmap ({len(raw)} bytes): {e}")
            raise InvalidArgument(f"Cannot decode bitmap: {e}") from e

        if image.width > self._max_width:
            height = max(1, round(image.height * self._max_width / image.width))
            logger.info(
                f"Bitmap {image.width}x{image.height} scaled to {self._max_width}x{height}"
            )
            image = image.resize((self._max_width, height))
        return image
