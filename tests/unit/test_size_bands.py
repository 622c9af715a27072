import pytest

from content_analyzer.analysis.models import MediaKind
from content_analyzer.extraction import size_bands
from content_analyzer.extraction.size_bands import size_band_message


class TestSizeBandMessage:
    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, size_bands.SMALL_IMAGE_MESSAGE),
            (99_999, size_bands.SMALL_IMAGE_MESSAGE),
            (100_000, size_bands.MEDIUM_IMAGE_MESSAGE),
            (499_999, size_bands.MEDIUM_IMAGE_MESSAGE),
            (500_000, size_bands.LARGE_IMAGE_MESSAGE),
        ],
    )
    def test_image_bands(self, size: int, expected: str) -> None:
        assert size_band_message(MediaKind.IMAGE, size) == expected

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (50_000, size_bands.SMALL_PDF_MESSAGE),
            (300_000, size_bands.MEDIUM_PDF_MESSAGE),
            (600_000, size_bands.LARGE_PDF_MESSAGE),
        ],
    )
    def test_pdf_bands(self, size: int, expected: str) -> None:
        assert size_band_message(MediaKind.PDF, size) == expected

    def test_each_band_is_distinct(self) -> None:
        messages = {
            size_band_message(kind, size)
            for kind in MediaKind
            for size in (1, 200_000, 900_000)
        }
        assert len(messages) == 6
