"""
Image subpackage.

MIME resolution, validation, download and data URI encoding.
"""

from hexwall.image.mime import (
    mime_from_path,
    extension_of,
    is_url,
)

from hexwall.image.encode import (
    data_uri_from_bytes,
    data_uri_from_file,
)

from hexwall.image.validate import validate_images

from hexwall.image.fetch import (
    Conversion,
    create_http_session,
    download,
    data_uri_from_source,
    convert_image,
    convert_images,
)

__all__ = [
    # mime
    "mime_from_path",
    "extension_of",
    "is_url",
    # encode
    "data_uri_from_bytes",
    "data_uri_from_file",
    # validate
    "validate_images",
    # fetch
    "Conversion",
    "create_http_session",
    "download",
    "data_uri_from_source",
    "convert_image",
    "convert_images",
]
