"""
Write-time validation for blog forms.

Messages follow one fixed wording per rule so that the frontend can show
them verbatim next to the offending field.
"""

from dataclasses import dataclass
from io import BytesIO
from pathlib import Path

from fastapi import UploadFile
from PIL import Image, UnidentifiedImageError

from app.configs import BlogRules
from app.errors.validation import FieldErrors
from app.schemas.blog import BlogForm


@dataclass(frozen=True)
class ImagePayload:
    """An uploaded image read into memory."""

    data: bytes
    filename: str
    content_type: str | None
    oversized: bool = False

    @property
    def extension(self) -> str:
        return Path(self.filename).suffix.lower().lstrip(".")

    @property
    def size_kb(self) -> float:
        return len(self.data) / 1024


async def read_upload(upload: UploadFile | None, max_bytes: int | None = None) -> ImagePayload | None:
    """
    Read an uploaded file into an ``ImagePayload``.

    A part without a filename (an empty file input) counts as no upload.
    With ``max_bytes`` at most one byte past the limit is read and the
    payload is flagged ``oversized`` instead of holding the whole file.
    """
    if upload is None or not upload.filename:
        return None
    data = await upload.read(-1 if max_bytes is None else max_bytes + 1)
    oversized = max_bytes is not None and len(data) > max_bytes
    return ImagePayload(
        data=data[:max_bytes] if oversized else data,
        filename=upload.filename,
        content_type=upload.content_type,
        oversized=oversized,
    )


def detect_image_format(data: bytes) -> str | None:
    """Return the Pillow format name (``JPEG``, ``PNG``...) or None if undecodable."""
    try:
        with Image.open(BytesIO(data)) as img:
            img.verify()
            return img.format
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
    ):
        return None


def format_extensions(image_format: str) -> set[str]:
    """File extensions matching a Pillow format name."""
    extensions = {image_format.lower()}
    if image_format == "JPEG":
        extensions.add("jpg")
    return extensions


class BlogFormValidator:
    """Check blog fields and images against ``BlogRules``."""

    def __init__(self, rules: BlogRules) -> None:
        self.rules = rules

    def _check_text(self, errors: FieldErrors, field: str, value: str | None, min_length: int) -> None:
        if not value:
            errors.setdefault(field, []).append(f"The {field} field is required.")
        elif len(value) < min_length:
            errors.setdefault(field, []).append(
                f"The {field} field must be at least {min_length} characters.",
            )

    def validate_fields(self, form: BlogForm) -> FieldErrors:
        """
        Validate title and author.

        Args:
            form: Submitted fields

        Returns:
            FieldErrors: Messages keyed by field, empty when valid
        """
        errors: FieldErrors = {}
        self._check_text(errors, "title", form.title, self.rules.title_min_length)
        self._check_text(errors, "author", form.author, self.rules.author_min_length)
        return errors

    def validate_image(self, image: ImagePayload | None, *, required: bool) -> list[str]:
        """
        Validate an uploaded image.

        Args:
            image: Uploaded image, or None when no file was sent
            required: Whether a missing image is an error

        Returns:
            list[str]: Messages for the ``image`` field, empty when valid
        """
        if image is None:
            return ["The image field is required."] if required else []

        size_message = (
            f"The image field must not be greater than {self.rules.image_max_size_kb} kilobytes."
        )
        # Only a prefix was read, so format checks would be meaningless
        if image.oversized:
            return [size_message]

        messages: list[str] = []
        image_format = detect_image_format(image.data)
        if image_format is None:
            messages.append("The image field must be an image.")

        allowed = self.rules.image_allowed_extensions
        if image_format is None or not format_extensions(image_format) & set(allowed):
            messages.append(f"The image field must be a file of type: {', '.join(allowed)}.")

        if len(image.data) > self.rules.image_max_size_bytes:
            messages.append(size_message)
        return messages

    def storage_extension(self, image: ImagePayload) -> str:
        """
        Extension to store a validated image under.

        The client's extension is kept when it matches the detected format,
        so a PNG named ``photo.gif`` is stored as ``.png``.
        """
        image_format = detect_image_format(image.data) or ""
        matches = format_extensions(image_format) & set(self.rules.image_allowed_extensions)
        if image.extension in matches:
            return image.extension
        return sorted(matches)[0] if matches else image.extension
