"""
Input validation for the composition wizard.

Validators never raise. Each returns a ValidationResult carrying the
problems found so the caller can show them as messages.
"""

# Standard Library
import dataclasses
import pathlib

# PIP3 modules
import reportlab.pdfbase.pdfmetrics

# local repo modules
import social_graphics_layout as sgl
import social_graphics_layout.config
import social_graphics_layout.errors
import social_graphics_layout.templates


ValidationError = sgl.errors.ValidationError
MissingFileError = sgl.errors.MissingFileError
InvalidFileTypeError = sgl.errors.InvalidFileTypeError
FileTooLargeError = sgl.errors.FileTooLargeError
EmptyTextError = sgl.errors.EmptyTextError
MissingSelectionError = sgl.errors.MissingSelectionError
InvalidFontError = sgl.errors.InvalidFontError

MAX_FILE_SIZE_MB = sgl.config.MAX_FILE_SIZE_MB
VALID_IMAGE_TYPES = sgl.config.VALID_IMAGE_TYPES
IMAGE_EXTENSION_TYPES = sgl.config.IMAGE_EXTENSION_TYPES


@dataclasses.dataclass
class ValidationResult:
	errors: list[ValidationError] = dataclasses.field(default_factory=list)

	@property
	def is_valid(self) -> bool:
		return not self.errors

	@property
	def error(self) -> ValidationError | None:
		if not self.errors:
			return None
		return self.errors[0]

	@property
	def messages(self) -> list[str]:
		return [error.message for error in self.errors]


#============================================
def _result(*errors: ValidationError) -> ValidationResult:
	return ValidationResult(errors=list(errors))


#============================================
def validate_text_input(text: str | None) -> ValidationResult:
	"""
	Require non-blank text.

	Args:
		text: Text entered by the user.

	Returns:
		ValidationResult.
	"""
	if not text or not text.strip():
		return _result(EmptyTextError("Text field is empty"))
	return _result()


#============================================
def validate_font(font_name: str | None) -> ValidationResult:
	"""
	Require a font that reportlab can measure text with.

	Args:
		font_name: Font name, standard or registered.

	Returns:
		ValidationResult.
	"""
	if not font_name:
		return _result(InvalidFontError("No font provided"))
	try:
		reportlab.pdfbase.pdfmetrics.getFont(font_name)
	except KeyError:
		return _result(InvalidFontError(f"Unknown font: {font_name}"))
	return _result()


#============================================
def validate_image_type(mime_type: str | None) -> ValidationResult:
	"""
	Require a supported image MIME type.

	Args:
		mime_type: MIME type string.

	Returns:
		ValidationResult.
	"""
	if mime_type not in VALID_IMAGE_TYPES:
		allowed = ", ".join(VALID_IMAGE_TYPES)
		return _result(InvalidFileTypeError(f"Invalid file type {mime_type}. Expected: {allowed}"))
	return _result()


#============================================
def validate_file_size(size_bytes: int | None, max_size_mb: float = MAX_FILE_SIZE_MB) -> ValidationResult:
	"""
	Require a file no larger than the size limit.

	Args:
		size_bytes: File size in bytes, None when there is no file.
		max_size_mb: Size limit in megabytes.

	Returns:
		ValidationResult.
	"""
	if size_bytes is None:
		return _result(MissingFileError("No file provided"))
	if size_bytes > max_size_mb * 1024 * 1024:
		return _result(FileTooLargeError(f"File too large. Maximum size is {max_size_mb}MB"))
	return _result()


#============================================
def guess_image_type(path: pathlib.Path) -> str | None:
	"""
	Map an image file extension to its MIME type.

	Args:
		path: File path.

	Returns:
		MIME type or None for unknown extensions.
	"""
	return IMAGE_EXTENSION_TYPES.get(pathlib.Path(path).suffix.lower())


#============================================
def validate_image_file(path: pathlib.Path | None, max_size_mb: float = MAX_FILE_SIZE_MB) -> ValidationResult:
	"""
	Check that an image file exists, has a supported type and size.

	Args:
		path: Image file path.
		max_size_mb: Size limit in megabytes.

	Returns:
		ValidationResult.
	"""
	if path is None:
		return _result(MissingFileError("No file provided"))
	path = pathlib.Path(path)
	if not path.is_file():
		return _result(MissingFileError(f"File not found: {path}"))
	type_result = validate_image_type(guess_image_type(path))
	if not type_result.is_valid:
		return type_result
	return validate_file_size(path.stat().st_size, max_size_mb)


#============================================
def validate_selection(
	template_name: str | None,
	logo_name: str | None,
	require_logo: bool = True,
) -> ValidationResult:
	"""
	Require a known template and a logo selection.

	Args:
		template_name: Selected template identifier.
		logo_name: Selected logo caption.
		require_logo: Whether a logo choice is needed, False when the
			logo is switched off.

	Returns:
		ValidationResult with one error per missing choice.
	"""
	errors = []
	if not template_name:
		errors.append(MissingSelectionError("Please choose a template."))
	elif sgl.templates.get_template(template_name) is None:
		errors.append(MissingSelectionError(f"Unknown template: {template_name}"))
	if require_logo and not logo_name:
		errors.append(MissingSelectionError("Please choose a logo."))
	return _result(*errors)


#============================================
def validate_download(logo_text: str | None, logo_enabled: bool = True) -> ValidationResult:
	"""
	Require a logo caption before export when the logo is enabled.

	Args:
		logo_text: Current logo caption.
		logo_enabled: Whether the logo takes part in the layout.

	Returns:
		ValidationResult.
	"""
	if logo_enabled and not logo_text:
		return _result(MissingSelectionError("Please choose a logo before downloading."))
	return _result()
