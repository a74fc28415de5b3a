"""
Unit tests for the upload domain models
"""

import json
import unittest

from pydantic import ValidationError

from payloads import success_body
from uploads_im.config.config import Settings
from uploads_im.domain.image_models import (
    FullSizeImageReference,
    ThumbnailImageReference,
    UploadedImage,
    UploadOptions,
)
from uploads_im.service.upload.response_decoder import decode_upload_response


class TestUploadOptions(unittest.TestCase):
    def test_defaults(self):
        options = UploadOptions()
        self.assertEqual(options.host, "uploads.im")
        self.assertIsNone(options.resize_width)
        self.assertIsNone(options.thumbnail_width)
        self.assertIsNone(options.family_unsafe)

    def test_frozen(self):
        options = UploadOptions()
        with self.assertRaises(ValidationError):
            options.host = "example.com"

    def test_width_bounds(self):
        UploadOptions(resize_width=2**64 - 1, thumbnail_width=2**32 - 1)
        for kwargs in (
            {"resize_width": -1},
            {"resize_width": 2**64},
            {"thumbnail_width": 2**32},
            {"thumbnail_width": -5},
        ):
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(ValidationError):
                    UploadOptions(**kwargs)

    def test_from_settings(self):
        settings = Settings(
            UPLOADS_IM_HOST="img.example.com",
            RESIZE_WIDTH=1024,
            THUMBNAIL_WIDTH=150,
            FAMILY_UNSAFE=True,
        )
        options = UploadOptions.from_settings(settings)
        self.assertEqual(
            options,
            UploadOptions(
                host="img.example.com",
                resize_width=1024,
                thumbnail_width=150,
                family_unsafe=True,
            ),
        )


class TestImageReferences(unittest.TestCase):
    def test_thumbnail_dimensions_are_u32(self):
        with self.assertRaises(ValidationError):
            ThumbnailImageReference(
                url="http://s1.uploads.im/t/a.jpg",
                dimensions={"height": 2**32, "width": 1},
            )

    def test_full_size_dimensions_are_u64(self):
        reference = FullSizeImageReference(
            url="http://s1.uploads.im/a.jpg",
            dimensions={"height": 2**32, "width": 2**64 - 1},
        )
        self.assertEqual(reference.dimensions.width, 2**64 - 1)
        with self.assertRaises(ValidationError):
            FullSizeImageReference(
                url="http://s1.uploads.im/a.jpg",
                dimensions={"height": 2**64, "width": 1},
            )


class TestUploadedImageRoundTrip(unittest.TestCase):
    def test_json_round_trip_preserves_fields(self):
        image = decode_upload_response(success_body(resized="1"))
        encoded = json.dumps(image.model_dump(mode="json"))
        decoded = UploadedImage.model_validate(json.loads(encoded))

        self.assertEqual(decoded, image)
        self.assertEqual(decoded.name, image.name)
        self.assertEqual(str(decoded.full_size.url), str(image.full_size.url))
        self.assertEqual(decoded.full_size.dimensions, image.full_size.dimensions)
        self.assertEqual(str(decoded.view_url), str(image.view_url))
        self.assertEqual(decoded.thumbnail.dimensions, image.thumbnail.dimensions)
        self.assertIs(decoded.was_resized, True)


if __name__ == "__main__":
    unittest.main()
