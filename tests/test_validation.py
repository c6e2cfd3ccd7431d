import pathlib

import PIL.Image
import pytest

import social_graphics_layout as sgl
import social_graphics_layout.errors
import social_graphics_layout.validation


#============================================
@pytest.mark.parametrize("text", ["", "   ", None])
def test_empty_text_is_rejected(text) -> None:
	"""
	Blank text fails with an EmptyTextError.
	"""
	result = sgl.validation.validate_text_input(text)
	assert not result.is_valid
	assert isinstance(result.error, sgl.errors.EmptyTextError)
	assert result.error.code == "empty_text"


#============================================
def test_text_is_accepted() -> None:
	"""
	Non-blank text passes.
	"""
	result = sgl.validation.validate_text_input("Hallo")
	assert result.is_valid
	assert result.error is None
	assert result.messages == []


#============================================
def test_image_types() -> None:
	"""
	Only jpeg, png, webp and svg are accepted.
	"""
	for mime_type in ("image/jpeg", "image/png", "image/webp", "image/svg+xml"):
		assert sgl.validation.validate_image_type(mime_type).is_valid
	result = sgl.validation.validate_image_type("image/gif")
	assert isinstance(result.error, sgl.errors.InvalidFileTypeError)
	assert not sgl.validation.validate_image_type(None).is_valid


#============================================
def test_file_size_limit() -> None:
	"""
	Files over the limit and missing files are rejected.
	"""
	assert sgl.validation.validate_file_size(10 * 1024 * 1024).is_valid
	too_big = sgl.validation.validate_file_size(10 * 1024 * 1024 + 1)
	assert isinstance(too_big.error, sgl.errors.FileTooLargeError)
	assert "10MB" in too_big.error.message
	assert not sgl.validation.validate_file_size(2048, max_size_mb=0.001).is_valid
	assert isinstance(sgl.validation.validate_file_size(None).error, sgl.errors.MissingFileError)


#============================================
def test_image_file_checks(tmp_path: pathlib.Path) -> None:
	"""
	Image files must exist and have a supported extension.
	"""
	png_path = tmp_path / "photo.PNG"
	PIL.Image.new("RGB", (8, 8)).save(png_path, format="PNG")
	assert sgl.validation.validate_image_file(png_path).is_valid

	missing = sgl.validation.validate_image_file(tmp_path / "missing.png")
	assert isinstance(missing.error, sgl.errors.MissingFileError)
	assert isinstance(sgl.validation.validate_image_file(None).error, sgl.errors.MissingFileError)

	gif_path = tmp_path / "anim.gif"
	gif_path.write_bytes(b"GIF89a")
	wrong_type = sgl.validation.validate_image_file(gif_path)
	assert isinstance(wrong_type.error, sgl.errors.InvalidFileTypeError)

	too_big = sgl.validation.validate_image_file(png_path, max_size_mb=0.00001)
	assert isinstance(too_big.error, sgl.errors.FileTooLargeError)


#============================================
def test_selection_checks() -> None:
	"""
	A known template and a logo must both be chosen.
	"""
	assert sgl.validation.validate_selection("story", "Berlin").is_valid
	both_missing = sgl.validation.validate_selection("", None)
	assert len(both_missing.errors) == 2
	unknown = sgl.validation.validate_selection("poster", "Berlin")
	assert "Unknown template" in unknown.error.message
	assert sgl.validation.validate_selection("story", None, require_logo=False).is_valid


#============================================
def test_download_check() -> None:
	"""
	Downloads need a caption only while the logo is enabled.
	"""
	assert not sgl.validation.validate_download("").is_valid
	assert sgl.validation.validate_download("Berlin").is_valid
	assert sgl.validation.validate_download(None, logo_enabled=False).is_valid


#============================================
def test_validation_errors_are_value_errors() -> None:
	"""
	The validation error family shares a ValueError base.
	"""
	for error_class in (
		sgl.errors.MissingFileError,
		sgl.errors.InvalidFileTypeError,
		sgl.errors.FileTooLargeError,
		sgl.errors.EmptyTextError,
		sgl.errors.MissingSelectionError,
		sgl.errors.InvalidFontError,
	):
		assert issubclass(error_class, sgl.errors.ValidationError)
		assert issubclass(error_class, ValueError)
	assert issubclass(sgl.errors.DegenerateElementError, ValueError)


#============================================
def test_font_checks() -> None:
	"""
	Only fonts reportlab knows are accepted.
	"""
	assert sgl.validation.validate_font("Helvetica").is_valid
	assert sgl.validation.validate_font("Helvetica-BoldOblique").is_valid
	unknown = sgl.validation.validate_font("NoSuchFont")
	assert isinstance(unknown.error, sgl.errors.InvalidFontError)
	assert unknown.error.message == "Unknown font: NoSuchFont"
	assert unknown.error.code == "invalid_font"
	assert not sgl.validation.validate_font("").is_valid
